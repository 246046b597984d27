from typing import Callable, List, Tuple

from models import Verdict

MAX_REASONS = 2
FALLBACK_REASON = "based on text pattern analysis"

Rule = Tuple[Callable[[Verdict, str], bool], str]

# Earlier rules win; order is priority, not strength
RULES: List[Rule] = [
    (lambda v, t: v.spamProbability > 0.8,
     "multiple high-risk indicators"),
    (lambda v, t: v.features.spamScore > v.features.safeScore * 2,
     "high spam keyword density"),
    (lambda v, t: v.features.hasAllCaps,
     "excessive capitalization"),
    (lambda v, t: v.features.hasExclamation and v.features.hasDollarSign,
     "money symbols with exclamation marks"),
    (lambda v, t: v.features.structuralPatternMatchCount > 2,
     "multiple structural spam patterns"),
    (lambda v, t: v.features.hasEmail and v.features.hasPhone,
     "contains contact information"),
    (lambda v, t: "100%" in t.lower() or "guarantee" in t.lower(),
     "guarantee statements"),
    (lambda v, t: "free" in t.lower() and "money" in t.lower(),
     "financial incentive keywords"),
    (lambda v, t: not v.isSpam and v.features.trustScore > 0.2,
     "trust indicators present"),
]


class Explainer:
    def explain(self, verdict: Verdict, raw_text: str) -> List[str]:
        """
        Returns up to two human-readable reasons for the verdict,
        highest priority first.
        """
        text = raw_text if isinstance(raw_text, str) else ""
        reasons = []
        for matches, reason in RULES:
            if matches(verdict, text):
                reasons.append(reason)
                if len(reasons) == MAX_REASONS:
                    break

        if not reasons:
            reasons.append(FALLBACK_REASON)
        return reasons
