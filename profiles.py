"""
Classifier presets.

Two hand-tuned keyword tables evolved side by side. Both are kept as
named profiles so either behavior can be selected at startup:

- "enhanced": the current tuning (default)
- "legacy":   the first tuning, fewer signals and a lower threshold
"""
import logging
from typing import Dict, Iterable, Tuple

from models import ClassifierConfig, ScoringWeights

logger = logging.getLogger(__name__)


class UnknownProfileError(ValueError):
    pass


def build_weight_table(pairs: Iterable[Tuple[str, float]], table_name: str = "weights") -> Dict[str, float]:
    """
    Builds a keyword -> weight mapping from ordered pairs.
    A keyword listed more than once keeps its last weight.
    """
    table: Dict[str, float] = {}
    for word, weight in pairs:
        word = word.lower()
        if word in table and table[word] != weight:
            logger.warning(
                f"Duplicate keyword '{word}' in {table_name}: {table[word]} replaced by {weight}"
            )
        table[word] = weight
    return table


ENHANCED_SPAM_WEIGHTS = [
    # High-confidence indicators
    ("free", 0.85), ("winner", 0.9), ("congratulations", 0.88), ("lottery", 0.92),
    ("million", 0.95), ("thousand", 0.8), ("dollar", 0.75), ("cash", 0.82),
    ("prize", 0.87), ("jackpot", 0.93), ("bonus", 0.78), ("gift", 0.7),
    # Urgency
    ("urgent", 0.8), ("immediately", 0.75), ("hurry", 0.77), ("rush", 0.79),
    ("limited", 0.73), ("expire", 0.76), ("deadline", 0.72), ("act", 0.7),
    ("now", 0.65), ("today", 0.6), ("quick", 0.62), ("fast", 0.6),
    # Calls to action
    ("click", 0.68), ("call", 0.55), ("phone", 0.58), ("contact", 0.52),
    ("reply", 0.6), ("respond", 0.58), ("send", 0.55), ("money", 0.75),
    ("pay", 0.7), ("buy", 0.65), ("purchase", 0.6), ("order", 0.45),
    # Account / credential bait
    ("guarantee", 0.83), ("risk", 0.68), ("secure", 0.5), ("verify", 0.62),
    ("account", 0.4), ("suspended", 0.75), ("blocked", 0.73), ("verify", 0.65),
    ("password", 0.7), ("login", 0.55), ("details", 0.45), ("information", 0.42),
]

ENHANCED_SAFE_WEIGHTS = [
    # Personal
    ("hello", 0.15), ("hi", 0.18), ("hey", 0.2), ("good", 0.12),
    ("morning", 0.25), ("afternoon", 0.25), ("evening", 0.25), ("thanks", 0.22),
    ("thank", 0.2), ("please", 0.15), ("sorry", 0.18), ("apologize", 0.2),
    # Business
    ("meeting", 0.35), ("schedule", 0.38), ("appointment", 0.42), ("conference", 0.4),
    ("call", 0.3), ("discussion", 0.35), ("presentation", 0.45), ("report", 0.4),
    ("project", 0.35), ("update", 0.32), ("status", 0.3), ("progress", 0.33),
    # Professional
    ("confirmation", 0.35), ("notification", 0.28), ("reminder", 0.25), ("alert", 0.3),
    ("information", 0.25), ("details", 0.22), ("document", 0.35), ("file", 0.3),
    ("report", 0.4), ("data", 0.28), ("analysis", 0.35), ("review", 0.32),
    # Support
    ("support", 0.35), ("help", 0.25), ("assist", 0.3), ("aid", 0.28),
    ("service", 0.3), ("team", 0.25), ("member", 0.22), ("colleague", 0.35),
]

ENHANCED_TRUST_WORDS = frozenset([
    "dear", "regards", "sincerely", "best", "thanks", "please",
    "could", "would", "might", "may", "can", "should",
])

# Counted, not just detected. Order matters only for readability.
STRUCTURAL_PATTERNS = (
    r"\b\d{1,3}(?:,\d{3})+\b",                    # comma-grouped large numbers
    r"\$\d+",                                     # dollar amounts
    r"(?i)\b\d+\s*(?:million|thousand|hundred)\b",  # spelled-out amounts
    r"[A-Z]{4,}",                                 # shouting
    r"!{3,}",                                     # exclamation runs
    r"\b\d{4,}\b",                                # long standalone numbers
)

LEGACY_SPAM_WEIGHTS = [
    ("free", 0.8), ("money", 0.7), ("winner", 0.9), ("congratulations", 0.85),
    ("urgent", 0.75), ("limited", 0.7), ("offer", 0.65), ("click", 0.6),
    ("now", 0.55), ("act", 0.65), ("immediately", 0.7), ("guaranteed", 0.8),
    ("prize", 0.85), ("lottery", 0.9), ("million", 0.95), ("dollar", 0.75),
    ("cash", 0.8), ("bonus", 0.7), ("discount", 0.6), ("sale", 0.55),
    ("deal", 0.5), ("opportunity", 0.45), ("risk", 0.6), ("expire", 0.7),
    ("hurry", 0.75), ("rush", 0.8), ("exclusive", 0.65), ("special", 0.6),
]

LEGACY_SAFE_WEIGHTS = [
    ("hello", 0.2), ("hi", 0.25), ("how", 0.15), ("are", 0.1), ("you", 0.1),
    ("thank", 0.2), ("thanks", 0.25), ("please", 0.15), ("meeting", 0.3),
    ("schedule", 0.35), ("appointment", 0.4), ("confirmation", 0.3),
    ("order", 0.35), ("delivery", 0.4), ("update", 0.3), ("reminder", 0.25),
    ("notification", 0.3), ("information", 0.25), ("details", 0.2),
    ("contact", 0.3), ("support", 0.35), ("help", 0.25), ("assistance", 0.3),
]

LEGACY_SCORING = ScoringWeights(
    spamDensity=0.4,
    safeDensity=0.3,
    trust=0.0,
    exclamation=0.15,
    question=0.0,
    allCaps=0.2,
    numbers=0.1,
    dollarSign=0.0,
    email=0.0,
    phone=0.0,
    url=0.0,
    structuralStep=0.0,
    structuralCap=0.0,
    shortTextLength=20,
    shortText=0.1,
    longText=0.0,
    longWords=0.0,
    capsRatio=0.0,
    doubleDollar=0.3,
    tripleExclamation=0.25,
    hundredPercent=0.0,
    freeExclamation=0.0,
    clickHere=0.0,
    confidenceGain=2.0,
)


# Built once per process so duplicate warnings are logged once
ENHANCED_SPAM_TABLE = build_weight_table(ENHANCED_SPAM_WEIGHTS, "enhanced spam weights")
ENHANCED_SAFE_TABLE = build_weight_table(ENHANCED_SAFE_WEIGHTS, "enhanced safe weights")
LEGACY_SPAM_TABLE = build_weight_table(LEGACY_SPAM_WEIGHTS, "legacy spam weights")
LEGACY_SAFE_TABLE = build_weight_table(LEGACY_SAFE_WEIGHTS, "legacy safe weights")


def enhanced_profile() -> ClassifierConfig:
    return ClassifierConfig(
        name="enhanced",
        spamWeights=ENHANCED_SPAM_TABLE,
        safeWeights=ENHANCED_SAFE_TABLE,
        trustWords=ENHANCED_TRUST_WORDS,
        threshold=0.65,
        minTextLength=3,
        maxTextLength=1000,
        maxTokens=50,
        structuralPatterns=STRUCTURAL_PATTERNS,
        scoring=ScoringWeights(),
    )


def legacy_profile() -> ClassifierConfig:
    return ClassifierConfig(
        name="legacy",
        spamWeights=LEGACY_SPAM_TABLE,
        safeWeights=LEGACY_SAFE_TABLE,
        trustWords=frozenset(),
        threshold=0.6,
        minTextLength=3,
        maxTextLength=1000,
        maxTokens=50,
        structuralPatterns=(),
        scoring=LEGACY_SCORING,
    )


PROFILES = {
    "enhanced": enhanced_profile,
    "legacy": legacy_profile,
}


def get_profile(name: str) -> ClassifierConfig:
    key = (name or "").strip().lower()
    if key not in PROFILES:
        raise UnknownProfileError(
            f"Unknown classifier profile '{name}'. Available: {', '.join(sorted(PROFILES))}"
        )
    return PROFILES[key]()
