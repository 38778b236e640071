"""
Stale "safe" label detection.

what?:
  - every high-risk candidate is compared with each text labeled safe; a close
    match counts as one adverse flag against that safe label.
  - at the eviction limit the safe label is dropped from the corpus so the
    text gets reviewed again next time it shows up.

why?:
  - a safe label that keeps colliding with risky handles was probably a
    mistake, or the vocabulary around it has shifted.
"""

import logging
from typing import Dict, List

from .labels import SAFE
from .lexicon_model import similarity
from .storage import TrainingCorpus

log = logging.getLogger(__name__)


class StabilityTracker:
    def __init__(self, corpus: TrainingCorpus, min_similarity: float = 0.8, eviction_limit: int = 5):
        self.corpus = corpus
        self.min_similarity = min_similarity
        self.eviction_limit = eviction_limit
        self.counters: Dict[str, int] = {}

    def sweep(self, normalized: str) -> List[str]:
        """Flag safe texts similar to a risky candidate; returns the texts evicted."""
        evicted = []
        for safe_text in self.corpus.list_by_intent(SAFE):
            if similarity(normalized, safe_text) <= self.min_similarity:
                continue
            count = self.counters.get(safe_text, 0) + 1
            self.counters[safe_text] = count
            if count >= self.eviction_limit:
                self.corpus.remove(safe_text, SAFE)
                del self.counters[safe_text]
                evicted.append(safe_text)
                log.warning("Evicted safe label %r after %d adverse flags", safe_text, count)
        return evicted

    def reset(self, text: str):
        self.counters[text] = 0

    def count(self, text: str) -> int:
        return self.counters.get(text, 0)
