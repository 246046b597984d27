import re
from types import MappingProxyType
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import FrozenSet, List, Mapping, Optional, Tuple


class ScoringWeights(BaseModel):
    """
    Additive adjustments applied to the base probability.
    A zero disables the corresponding term.
    """
    model_config = ConfigDict(frozen=True)

    baseProbability: float = 0.5

    # Keyword densities
    spamDensity: float = 0.35
    safeDensity: float = 0.25
    trust: float = 0.15

    # Flags
    exclamation: float = 0.12
    question: float = -0.08
    allCaps: float = 0.18
    numbers: float = 0.08
    dollarSign: float = 0.15
    email: float = 0.10
    phone: float = 0.12
    url: float = 0.08

    # Structural patterns (per match, capped)
    structuralStep: float = 0.10
    structuralCap: float = 0.30

    # Text characteristics
    shortTextLength: int = 15
    shortText: float = 0.10
    longTextLength: int = 500
    longText: float = 0.05
    longWordLength: float = 8
    longWords: float = 0.08
    capsRatioLimit: float = 0.4
    capsRatio: float = 0.20

    # Literal substrings
    doubleDollar: float = 0.25
    tripleExclamation: float = 0.20
    hundredPercent: float = 0.15
    freeExclamation: float = 0.30
    clickHere: float = 0.25

    confidenceGain: float = 3.0


class ClassifierConfig(BaseModel):
    """Static configuration of one classification engine."""
    model_config = ConfigDict(frozen=True)

    name: str = "custom"
    spamWeights: Mapping[str, float]
    safeWeights: Mapping[str, float]
    trustWords: FrozenSet[str] = frozenset()
    trustIncrement: float = 0.1
    threshold: float = 0.65
    minTextLength: int = 3
    maxTextLength: int = 1000
    maxTokens: int = 50
    structuralPatterns: Tuple[str, ...] = ()
    scoring: ScoringWeights = Field(default_factory=ScoringWeights)

    @field_validator("spamWeights", "safeWeights")
    @classmethod
    def check_weights(cls, table: Mapping[str, float]) -> Mapping[str, float]:
        for word, weight in table.items():
            if not 0.0 <= weight <= 1.0:
                raise ValueError(f"weight for '{word}' must be in [0, 1], got {weight}")
            if word != word.lower():
                raise ValueError(f"keyword '{word}' must be lowercase")
        # read-only for the lifetime of the engine
        return MappingProxyType(dict(table))

    @field_validator("threshold")
    @classmethod
    def check_threshold(cls, value: float) -> float:
        if not 0.0 < value < 1.0:
            raise ValueError(f"threshold must be in (0, 1), got {value}")
        return value

    @field_validator("structuralPatterns")
    @classmethod
    def check_patterns(cls, patterns: Tuple[str, ...]) -> Tuple[str, ...]:
        for pattern in patterns:
            try:
                re.compile(pattern)
            except re.error as e:
                raise ValueError(f"invalid structural pattern {pattern!r}: {e}")
        return patterns

    @model_validator(mode="after")
    def check_bounds(self) -> "ClassifierConfig":
        if self.minTextLength < 0 or self.minTextLength > self.maxTextLength:
            raise ValueError("minTextLength must be between 0 and maxTextLength")
        if self.maxTokens < 1:
            raise ValueError("maxTokens must be at least 1")
        return self


class FeatureSet(BaseModel):
    model_config = ConfigDict(frozen=True)

    spamScore: float = 0.0
    safeScore: float = 0.0
    wordCount: int = 0
    uniqueWordCount: int = 0
    trustScore: float = 0.0
    charCount: int = 0
    avgWordLength: float = 0.0
    capsRatio: float = 0.0
    hasExclamation: bool = False
    hasQuestion: bool = False
    hasAllCaps: bool = False
    hasNumbers: bool = False
    hasDollarSign: bool = False
    hasEmail: bool = False
    hasPhone: bool = False
    hasURL: bool = False
    structuralPatternMatchCount: int = 0


class Verdict(BaseModel):
    model_config = ConfigDict(frozen=True)

    isSpam: bool
    spamProbability: float
    confidence: float
    features: FeatureSet = Field(default_factory=FeatureSet)
    rejectionReason: Optional[str] = None

    @property
    def rejected(self) -> bool:
        return self.rejectionReason is not None


# HTTP schemas
class AnalyzeRequest(BaseModel):
    message: Optional[str] = None


class AnalyzeResponse(BaseModel):
    status: str = "success"
    isSpam: bool
    spamProbability: float
    confidence: float
    confidencePercent: int
    probabilityBand: str
    explanations: List[str] = []
    features: FeatureSet
    profile: str


class ProfileInfo(BaseModel):
    name: str
    threshold: float
    minTextLength: int
    maxTextLength: int
    maxTokens: int
