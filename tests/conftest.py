import pytest

from handlescreen.inference import ClassifierError, Prediction
from handlescreen.lexicon_model import Lexicon, Term
from handlescreen.prompt import ConsolePrompt
from handlescreen.review import Reviewer
from handlescreen.stability import StabilityTracker
from handlescreen.storage import TrainingCorpus


class FakeClassifier:
    """Stands in for IntentClassifier: canned predictions, records train/save."""

    def __init__(self, predictions=None, fail=False, save_error=None):
        self.predictions = predictions or {}
        self.fail = fail
        self.save_error = save_error
        self.trained_on = None
        self.saved_to = None

    def predict(self, text):
        if self.fail:
            raise ClassifierError("boom")
        return self.predictions.get(text, Prediction(None, 0.0))

    def train(self, examples):
        self.trained_on = list(examples)
        return self

    def save(self, path):
        if self.save_error is not None:
            raise self.save_error
        self.saved_to = path


def scripted(*answers):
    """input() replacement that replays answers and records the questions."""
    it = iter(answers)
    asked = []

    def _input(question):
        asked.append(question)
        try:
            return next(it)
        except StopIteration:
            raise AssertionError(f"unexpected prompt: {question}")

    _input.asked = asked
    return _input


@pytest.fixture
def corpus(tmp_path):
    return TrainingCorpus(str(tmp_path / "corpus.db"))


@pytest.fixture
def lexicon():
    return Lexicon([Term("badword", 50)])


@pytest.fixture
def make_reviewer(corpus, lexicon, tmp_path):
    def _make(*answers, classifier=None, lex=None):
        lines = []
        input_fn = scripted(*answers)
        reviewer = Reviewer(
            lex or lexicon,
            corpus,
            classifier or FakeClassifier(),
            prompt=ConsolePrompt(3, input_fn=input_fn, output=lambda s: None),
            model_path=str(tmp_path / "models" / "intent_model.pkl"),
            tracker=StabilityTracker(corpus),
            output=lines.append,
        )
        reviewer.lines = lines
        reviewer.asked = input_fn.asked
        return reviewer
    return _make
