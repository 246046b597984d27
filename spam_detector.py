import logging
from typing import List

from explainer import Explainer
from feature_extractor import FeatureExtractor
from models import ClassifierConfig, FeatureSet, Verdict
from normalizer import Normalizer

logger = logging.getLogger(__name__)

INVALID_INPUT = "Invalid input"
TEXT_OUT_OF_BOUNDS = "Text too short or invalid"


def clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    return max(low, min(high, value))


class Scorer:
    def __init__(self, config: ClassifierConfig):
        self.config = config

    def score(self, features: FeatureSet, raw_text: str) -> Verdict:
        """
        Returns a Verdict with spam probability and confidence in [0, 1].
        """
        w = self.config.scoring
        probability = w.baseProbability

        # Keyword density
        total_words = max(features.wordCount, 1)
        probability += (features.spamScore / total_words) * w.spamDensity
        probability -= (features.safeScore / total_words) * w.safeDensity
        probability += features.trustScore * w.trust

        # Flags
        if features.hasExclamation:
            probability += w.exclamation
        if features.hasQuestion:
            probability += w.question
        if features.hasAllCaps:
            probability += w.allCaps
        if features.hasNumbers:
            probability += w.numbers
        if features.hasDollarSign:
            probability += w.dollarSign
        if features.hasEmail:
            probability += w.email
        if features.hasPhone:
            probability += w.phone
        if features.hasURL:
            probability += w.url

        # Structural patterns, capped
        if features.structuralPatternMatchCount > 0:
            probability += min(features.structuralPatternMatchCount * w.structuralStep, w.structuralCap)

        # Text characteristics (caps ratio stacks with the allCaps flag)
        if len(raw_text) < w.shortTextLength:
            probability += w.shortText
        if len(raw_text) > w.longTextLength:
            probability += w.longText
        if features.avgWordLength > w.longWordLength:
            probability += w.longWords
        if features.capsRatio > w.capsRatioLimit:
            probability += w.capsRatio

        # Literal substrings
        lowered = raw_text.lower()
        if "$$" in raw_text:
            probability += w.doubleDollar
        if "!!!" in raw_text:
            probability += w.tripleExclamation
        if "100%" in lowered:
            probability += w.hundredPercent
        if "free!" in raw_text:
            probability += w.freeExclamation
        if "click here" in lowered:
            probability += w.clickHere

        probability = clamp(probability)
        threshold = self.config.threshold
        return Verdict(
            isSpam=probability > threshold,
            spamProbability=probability,
            confidence=clamp(abs(probability - threshold) * w.confidenceGain),
            features=features,
        )


class SpamDetector:
    """
    Classification engine: normalize -> extract -> score, plus explanations.
    Holds only read-only configuration, so one instance can serve
    any number of callers.
    """

    def __init__(self, config: ClassifierConfig):
        self.config = config
        self.normalizer = Normalizer(config)
        self.extractor = FeatureExtractor(config)
        self.scorer = Scorer(config)
        self.explainer = Explainer()

    @staticmethod
    def rejection(reason: str) -> Verdict:
        # 0.5 means "unknown", not a vote for ham
        return Verdict(isSpam=False, spamProbability=0.5, confidence=0.0, rejectionReason=reason)

    def normalize_and_score(self, raw_text) -> Verdict:
        if not raw_text or not isinstance(raw_text, str):
            logger.debug("Rejected input: not a non-empty string")
            return self.rejection(INVALID_INPUT)

        tokens = self.normalizer.normalize(raw_text)
        if not tokens:
            logger.debug(f"Rejected input of length {len(raw_text)}: no usable tokens")
            return self.rejection(TEXT_OUT_OF_BOUNDS)

        features = self.extractor.extract(tokens, raw_text)
        verdict = self.scorer.score(features, raw_text)
        logger.debug(
            f"[{self.config.name}] spam={verdict.isSpam} p={verdict.spamProbability:.3f} "
            f"confidence={verdict.confidence:.3f} tokens={features.wordCount}"
        )
        return verdict

    def explain(self, verdict: Verdict, raw_text: str) -> List[str]:
        return self.explainer.explain(verdict, raw_text)
