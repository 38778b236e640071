"""
Review loop: candidate handles in, one outcome per handle out.

what?:
  - normalize → known label? → confident classifier? → score → threshold →
    stability sweep → ask a human. Each step can end the candidate's review.
  - human answers are written to the training corpus immediately; at the end
    of the batch the classifier is retrained on the whole corpus and saved.

KEY IDEAS:
  - strictly sequential: a label confirmed for candidate i is visible to
    candidate i+1.
  - a text holds at most one label; labeling removes the opposite one first.
  - the Reviewer owns its corpus, classifier and tracker; nothing global.
"""

import logging, pickle
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Tuple

from .heuristics import RuleSet
from .inference import IntentClassifier
from .labels import SAFE, opposite
from .lexicon_model import Lexicon
from .model import RiskScore, score
from .normalize import Candidate
from .policy import Thresholds, auto_label, needs_review
from .prompt import ConsolePrompt
from .stability import StabilityTracker
from .storage import TrainingCorpus

log = logging.getLogger(__name__)

SKIP = "skip"
PASS = "pass"
CONFIRMED = "confirmed"
ABORTED = "aborted"


class PersistenceError(Exception):
    """Saving the retrained classifier failed. `confirmed` lists the labels
    given during the run so they can be re-entered or re-saved."""

    def __init__(self, message: str, confirmed: List[Tuple[str, str]]):
        super().__init__(message)
        self.confirmed = list(confirmed)


@dataclass
class ReviewOutcome:
    candidate: Candidate
    status: str
    label: Optional[str] = None
    risk: Optional[RiskScore] = None
    reason: str = ""

    @property
    def risk_score(self) -> Optional[int]:
        return self.risk.total if self.risk is not None else None

    def line(self) -> str:
        if self.status == SKIP:
            return f"Username: {self.candidate.raw}, Skipped ({self.label})"
        text = f"Username: {self.candidate.raw}, Risk Score: {self.risk_score}"
        if self.status == ABORTED:
            text += ", Aborted"
        return text


class Reviewer:
    def __init__(self, lexicon: Lexicon, corpus: TrainingCorpus, classifier: IntentClassifier,
                 prompt: ConsolePrompt, model_path: str, rules: Optional[RuleSet] = None,
                 thresholds: Optional[Thresholds] = None, tracker: Optional[StabilityTracker] = None,
                 output: Callable[[str], None] = print):
        self.lexicon = lexicon
        self.corpus = corpus
        self.classifier = classifier
        self.prompt = prompt
        self.model_path = model_path
        self.rules = rules or RuleSet()
        self.thresholds = thresholds or Thresholds()
        self.tracker = tracker or StabilityTracker(corpus)
        self.output = output
        self.confirmed: List[Tuple[str, str]] = []

    def label(self, text: str, intent: str):
        self.corpus.remove(text, opposite(intent))
        self.corpus.add(text, intent)
        if intent == SAFE:
            self.tracker.reset(text)
        self.confirmed.append((text, intent))

    def review(self, raw: str) -> ReviewOutcome:
        c = Candidate(raw)

        known = self.corpus.label_of(c.normalized)
        if known is not None:
            return ReviewOutcome(c, SKIP, label=known, reason="known label")

        pred = self.classifier.predict(c.normalized)
        auto = auto_label(pred, self.thresholds)
        if auto is not None:
            return ReviewOutcome(c, SKIP, label=auto, reason=f"classifier {pred.confidence:.2f}")

        risk = score(c, self.lexicon, self.rules, pred, self.thresholds)
        if not needs_review(risk.total, self.thresholds):
            return ReviewOutcome(c, PASS, risk=risk, reason=risk.reasons())

        self.tracker.sweep(c.normalized)

        answer = self.prompt.confirm(c.raw, risk.total)
        if answer is None:
            return ReviewOutcome(c, ABORTED, risk=risk, reason="no valid confirmation")
        self.label(c.normalized, answer)
        return ReviewOutcome(c, CONFIRMED, label=answer, risk=risk, reason=risk.reasons())

    def review_batch(self, candidates: Iterable[str]) -> List[ReviewOutcome]:
        outcomes = []
        for raw in candidates:
            outcome = self.review(raw)
            self.output(outcome.line())
            outcomes.append(outcome)
        return outcomes

    def finish(self):
        """Retrain on the full corpus and persist the classifier."""
        self.classifier.train(self.corpus.examples())
        try:
            self.classifier.save(self.model_path)
        except (OSError, pickle.PicklingError) as exc:
            raise PersistenceError(f"could not save classifier to {self.model_path}: {exc}", self.confirmed) from exc
        log.info("Saved classifier to %s (%d labels confirmed this run)", self.model_path, len(self.confirmed))

    def run(self, candidates: Iterable[str]) -> List[ReviewOutcome]:
        outcomes = self.review_batch(candidates)
        self.finish()
        return outcomes
