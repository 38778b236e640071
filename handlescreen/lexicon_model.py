import json, math, os, re
from dataclasses import dataclass
from typing import Dict, List, Sequence

import jellyfish

from .config import ConfigError
from .normalize import normalize_text

_WORD_RE = re.compile(r"[a-z0-9]+")


@dataclass(frozen=True)
class Term:
    text: str
    weight: int


def tokens(text: str) -> List[str]:
    return _WORD_RE.findall(text or "")


def similarity(a: str, b: str) -> float:
    """Normalized Levenshtein similarity in 0..1 (0 when either side is empty)."""
    if not a or not b:
        return 0.0
    distance = jellyfish.levenshtein_distance(a, b)
    return 1.0 - distance / max(len(a), len(b))


def load_terms(path: str) -> List[Term]:
    """
    Read the term dictionary: a JSON array of {"term": str, "weight": int}.
    Anything else is a ConfigError; there is no partial load.
    """
    if not os.path.isfile(path):
        raise ConfigError(f"Term list not found: {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ConfigError(f"Term list {path} is not readable JSON: {exc}") from exc

    if not isinstance(data, list):
        raise ConfigError(f"Term list {path} must be a JSON array")
    terms: List[Term] = []
    for i, rec in enumerate(data):
        if not isinstance(rec, dict) or not isinstance(rec.get("term"), str) or not rec["term"].strip():
            raise ConfigError(f"Term #{i} in {path} needs a non-empty 'term' string")
        w = rec.get("weight")
        if isinstance(w, bool) or not isinstance(w, int) or w <= 0:
            raise ConfigError(f"Term {rec['term']!r} in {path} needs a positive integer weight")
        terms.append(Term(rec["term"], w))
    return terms


class Lexicon:
    """Weighted term list scored against normalized candidates."""

    def __init__(self, terms: Sequence[Term], fuzzy_threshold: float = 0.6):
        self.terms = tuple(terms)
        self.fuzzy_threshold = fuzzy_threshold
        # normalized once, candidates are compared against these
        self.normalized = [(t, normalize_text(t.text)) for t in self.terms]

    @classmethod
    def load(cls, path: str, fuzzy_threshold: float = 0.6) -> "Lexicon":
        return cls(load_terms(path), fuzzy_threshold)

    def match(self, normalized: str) -> List[Dict]:
        """
        Returns [{term, kind: 'substring'|'fuzzy'|'token', points}].
        Per term the substring rule wins over the fuzzy rule; exact token
        hits are counted on top of either.
        """
        hits: List[Dict] = []
        for term, norm_term in self.normalized:
            if norm_term and norm_term in normalized:
                hits.append({"term": term.text, "kind": "substring", "points": term.weight})
                continue
            sim = similarity(normalized, norm_term)
            if sim > self.fuzzy_threshold:
                hits.append({"term": term.text, "kind": "fuzzy", "points": math.floor(sim * term.weight)})

        for tok in tokens(normalized):
            for term in self.terms:
                if tok == term.text:
                    hits.append({"term": term.text, "kind": "token", "points": term.weight})
        return hits

    def risk(self, normalized: str) -> int:
        return sum(h["points"] for h in self.match(normalized))
