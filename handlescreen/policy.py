from dataclasses import dataclass
from typing import Optional

from .inference import Prediction
from .labels import INAPPROPRIATE, SAFE

DEFAULTS = {'risk': 15, 'soft_confidence': 0.50, 'hard_confidence': 0.80, 'soft_bonus': 20}

AFFIRMATIVE = frozenset({'y', 'yes', 'yeah', 'yea', 'yep', 'sure', 'ok'})
NEGATIVE = frozenset({'n', 'no', 'nope', 'nah'})


@dataclass(frozen=True)
class Thresholds:
    risk: int = DEFAULTS['risk']
    soft_confidence: float = DEFAULTS['soft_confidence']
    hard_confidence: float = DEFAULTS['hard_confidence']
    soft_bonus: int = DEFAULTS['soft_bonus']

    @classmethod
    def from_settings(cls, s):
        return cls(s.risk_threshold, s.soft_confidence, s.hard_confidence, s.soft_bonus)


def auto_label(pred: Prediction, thr: Thresholds) -> Optional[str]:
    """Label the classifier is sure enough about to skip review, else None."""
    if pred.label is not None and pred.confidence > thr.hard_confidence:
        return pred.label
    return None


def classifier_bonus(pred: Prediction, thr: Thresholds) -> int:
    if pred.label == INAPPROPRIATE and pred.confidence > thr.soft_confidence:
        return thr.soft_bonus
    return 0


def needs_review(total: int, thr: Thresholds) -> bool:
    return total > thr.risk


def parse_answer(answer: str) -> Optional[str]:
    """Map a confirmation reply to the label it asserts; None if not accepted."""
    a = (answer or '').strip().lower()
    if a in AFFIRMATIVE:
        return INAPPROPRIATE
    if a in NEGATIVE:
        return SAFE
    return None
