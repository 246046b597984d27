import re
from typing import List

from models import ClassifierConfig, FeatureSet

UPPER_RE = re.compile(r"[A-Z]")
CAPS_RUN_RE = re.compile(r"[A-Z]{4,}")
DIGIT_RE = re.compile(r"\d")
EMAIL_RE = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")
# 555-123-4567, 555.123.4567, 5551234567
PHONE_RE = re.compile(r"\b\d{3}[-.]?\d{3}[-.]?\d{4}\b")
URL_RE = re.compile(r"\bhttps?://\S+|\bwww\.\S+")

ALL_CAPS_RATIO = 0.3


class FeatureExtractor:
    def __init__(self, config: ClassifierConfig):
        self.config = config
        self.structural_patterns = [re.compile(p) for p in config.structuralPatterns]

    def extract(self, tokens: List[str], raw_text: str) -> FeatureSet:
        spam_weights = self.config.spamWeights
        safe_weights = self.config.safeWeights
        trust_words = self.config.trustWords

        # 1. Keyword sums (a token may count in both tables)
        spam_score = 0.0
        safe_score = 0.0
        trust_score = 0.0
        for token in tokens:
            spam_score += spam_weights.get(token, 0.0)
            safe_score += safe_weights.get(token, 0.0)
            if token in trust_words:
                trust_score += self.config.trustIncrement

        word_count = len(tokens)
        avg_word_length = sum(len(t) for t in tokens) / word_count if word_count else 0.0

        # 2. Surface signals come from the original text; the tokens
        # have lost punctuation and case
        char_count = len(raw_text)
        caps_ratio = len(UPPER_RE.findall(raw_text)) / char_count if char_count else 0.0

        # 3. Structural patterns are counted, not just detected
        pattern_matches = sum(
            sum(1 for _ in pattern.finditer(raw_text)) for pattern in self.structural_patterns
        )

        return FeatureSet(
            spamScore=spam_score,
            safeScore=safe_score,
            wordCount=word_count,
            uniqueWordCount=len(set(tokens)),
            trustScore=trust_score,
            charCount=char_count,
            avgWordLength=avg_word_length,
            capsRatio=caps_ratio,
            hasExclamation="!" in raw_text,
            hasQuestion="?" in raw_text,
            hasAllCaps=caps_ratio > ALL_CAPS_RATIO or bool(CAPS_RUN_RE.search(raw_text)),
            hasNumbers=bool(DIGIT_RE.search(raw_text)),
            hasDollarSign="$" in raw_text,
            hasEmail=bool(EMAIL_RE.search(raw_text)),
            hasPhone=bool(PHONE_RE.search(raw_text)),
            hasURL=bool(URL_RE.search(raw_text)),
            structuralPatternMatchCount=pattern_matches,
        )
