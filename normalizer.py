import re
from typing import List

from models import ClassifierConfig

# Anything that is not a letter, digit or whitespace
NON_WORD_RE = re.compile(r"[^\w\s]|_")
WHITESPACE_RE = re.compile(r"\s+")

MIN_TOKEN_LENGTH = 3
MAX_TOKEN_LENGTH = 19


class Normalizer:
    def __init__(self, config: ClassifierConfig):
        self.config = config

    def in_bounds(self, raw_text: str) -> bool:
        length = len(raw_text.strip())
        return self.config.minTextLength <= length <= self.config.maxTextLength

    def normalize(self, raw_text) -> List[str]:
        """
        Turns raw text into at most maxTokens lowercase tokens.
        Returns [] for non-text or out-of-bounds input.
        """
        if not raw_text or not isinstance(raw_text, str):
            return []
        if not self.in_bounds(raw_text):
            return []

        text = NON_WORD_RE.sub(" ", raw_text.strip().lower())
        text = WHITESPACE_RE.sub(" ", text).strip()

        # 3..19 characters
        tokens = [t for t in text.split(" ") if MIN_TOKEN_LENGTH <= len(t) <= MAX_TOKEN_LENGTH]
        return tokens[:self.config.maxTokens]
