from dataclasses import dataclass, field
from typing import Dict, List

from .heuristics import RuleSet
from .inference import Prediction
from .lexicon_model import Lexicon
from .normalize import Candidate
from .policy import Thresholds, classifier_bonus


@dataclass
class RiskScore:
    lexical: int
    heuristic: int
    bonus: int
    hits: List[Dict] = field(default_factory=list)
    rules: List[str] = field(default_factory=list)

    @property
    def total(self) -> int:
        return self.lexical + self.heuristic + self.bonus

    def reasons(self) -> str:
        parts = [f"{h['kind']}:{h['term']}+{h['points']}" for h in self.hits]
        parts += [f"rule:{r}" for r in self.rules]
        if self.bonus:
            parts.append(f"classifier+{self.bonus}")
        return " ".join(parts)


def score(candidate: Candidate, lexicon: Lexicon, rules: RuleSet,
          prediction: Prediction, thresholds: Thresholds) -> RiskScore:
    """
    Lexical risk + heuristic deltas + classifier soft bonus.
    Pure: no corpus access, so it is safe to compute ahead of review.
    """
    hits = lexicon.match(candidate.normalized)
    fired = rules.fired(candidate)
    return RiskScore(
        lexical=sum(h["points"] for h in hits),
        heuristic=sum(r.delta for r in fired),
        bonus=classifier_bonus(prediction, thresholds),
        hits=hits,
        rules=[r.name for r in fired],
    )
