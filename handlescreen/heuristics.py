"""
Fixed-pattern risk add-ons that don't depend on the term list.

Each rule is (name, predicate(candidate) -> bool, delta). Rules read
candidate.folded when they need digits as typed: normalization turns "9"
into "g".
"""

from typing import Callable, List, NamedTuple

from .normalize import Candidate


class Rule(NamedTuple):
    name: str
    predicate: Callable[[Candidate], bool]
    delta: int


def _six_nine(c: Candidate) -> bool:
    return "6" in c.folded and "9" in c.folded


DEFAULT_RULES: List[Rule] = [
    Rule("six_nine", _six_nine, 15),
]


class RuleSet:
    def __init__(self, rules=None):
        self.rules: List[Rule] = list(DEFAULT_RULES if rules is None else rules)

    def add(self, name: str, predicate: Callable[[Candidate], bool], delta: int):
        self.rules.append(Rule(name, predicate, delta))

    def fired(self, candidate: Candidate) -> List[Rule]:
        return [r for r in self.rules if r.predicate(candidate)]

    def score(self, candidate: Candidate) -> int:
        return sum(r.delta for r in self.fired(candidate))
