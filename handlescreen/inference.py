"""Intent classifier: char n-gram TF-IDF + logistic regression over the labeled corpus.
The review loop only sees train / predict / save / load, so the model can be swapped."""

import logging, os, pickle
from typing import Iterable, NamedTuple, Optional, Tuple

from sklearn.feature_extraction.text import TfidfVectorizer
from sklearn.linear_model import LogisticRegression
from sklearn.pipeline import make_pipeline

log = logging.getLogger(__name__)

MODEL_KIND = "handlescreen-intent"
MODEL_VERSION = 1


class ClassifierError(Exception):
    """Training, prediction or loading failed; the batch can't continue."""


class Prediction(NamedTuple):
    label: Optional[str]
    confidence: float


class IntentClassifier:
    def __init__(self, pipeline=None):
        self.pipeline = pipeline

    @property
    def trained(self) -> bool:
        return self.pipeline is not None

    def train(self, examples: Iterable[Tuple[str, str]]) -> "IntentClassifier":
        """Refit from scratch. Fewer than two distinct labels leaves the model untrained."""
        pairs = [(text, label) for text, label in examples if text]
        if len({label for _, label in pairs}) < 2:
            log.info("Not enough label variety to train (%d examples)", len(pairs))
            self.pipeline = None
            return self

        texts = [t for t, _ in pairs]
        labels = [lab for _, lab in pairs]
        pipe = make_pipeline(
            TfidfVectorizer(analyzer="char_wb", ngram_range=(2, 4)),
            LogisticRegression(max_iter=1000),
        )
        try:
            pipe.fit(texts, labels)
        except Exception as exc:
            raise ClassifierError(f"training failed: {exc}") from exc
        self.pipeline = pipe
        log.info("Trained intent classifier on %d examples", len(pairs))
        return self

    def predict(self, text: str) -> Prediction:
        if not self.trained:
            return Prediction(None, 0.0)
        try:
            proba = self.pipeline.predict_proba([text or ""])[0]
        except Exception as exc:
            raise ClassifierError(f"prediction failed for {text!r}: {exc}") from exc
        best = max(range(len(proba)), key=lambda i: proba[i])
        return Prediction(str(self.pipeline.classes_[best]), float(proba[best]))

    def save(self, path: str):
        d = os.path.dirname(path)
        if d:
            os.makedirs(d, exist_ok=True)
        with open(path, "wb") as f:
            pickle.dump({"kind": MODEL_KIND, "version": MODEL_VERSION, "pipeline": self.pipeline}, f)

    @classmethod
    def load(cls, path: str) -> "IntentClassifier":
        if not os.path.isfile(path):
            log.info("No classifier at %s; starting untrained", path)
            return cls()
        try:
            with open(path, "rb") as f:
                data = pickle.load(f)
        except (OSError, pickle.UnpicklingError, EOFError, AttributeError, ImportError,
                ValueError, TypeError) as exc:
            raise ClassifierError(f"cannot load classifier from {path}: {exc}") from exc
        if not isinstance(data, dict) or data.get("kind") != MODEL_KIND:
            raise ClassifierError(f"{path} is not a {MODEL_KIND} model")
        return cls(data.get("pipeline"))
