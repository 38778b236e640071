"""
Batch review entry point.

Usage:
  python -m handlescreen.cli [--terms terms.json] [--candidates usernames.txt]
                             [--model models/intent_model.pkl] [--corpus data/corpus.db]
                             [--report outcomes.csv]
Defaults come from the environment / .env (see config.py).
"""
import argparse, logging, os, sys

from .config import ConfigError, load_settings
from .heuristics import RuleSet
from .inference import ClassifierError, IntentClassifier
from .lexicon_model import Lexicon
from .policy import Thresholds
from .prompt import ConsolePrompt
from .review import PersistenceError, Reviewer
from .stability import StabilityTracker
from .storage import TrainingCorpus
from .utils import csv_export, read_candidates


def build_parser(settings):
    ap = argparse.ArgumentParser(prog="handlescreen", description="Triage a batch of usernames")
    ap.add_argument("--terms", default=settings.terms_path, help="JSON list of {term, weight}")
    ap.add_argument("--candidates", default=settings.candidates_path, help="Newline-delimited usernames")
    ap.add_argument("--model", default=settings.model_path, help="Persisted intent classifier")
    ap.add_argument("--corpus", default=settings.corpus_path, help="SQLite training corpus")
    ap.add_argument("--report", help="Write per-candidate outcomes as CSV")
    return ap


def main(argv=None) -> int:
    try:
        settings = load_settings()
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2
    args = build_parser(settings).parse_args(argv)
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        lexicon = Lexicon.load(args.terms, settings.fuzzy_threshold)
        candidates = read_candidates(args.candidates)
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    try:
        classifier = IntentClassifier.load(args.model)
    except ClassifierError as e:
        print(f"Classifier error: {e}", file=sys.stderr)
        return 1

    corpus = TrainingCorpus(args.corpus)
    reviewer = Reviewer(
        lexicon, corpus, classifier,
        prompt=ConsolePrompt(settings.max_prompt_attempts),
        model_path=args.model,
        rules=RuleSet(),
        thresholds=Thresholds.from_settings(settings),
        tracker=StabilityTracker(corpus, settings.stability_similarity, settings.eviction_limit),
    )

    try:
        outcomes = reviewer.run(candidates)
    except ClassifierError as e:
        print(f"Classifier error, batch aborted: {e}", file=sys.stderr)
        return 1
    except PersistenceError as e:
        print(f"{e}", file=sys.stderr)
        print("Labels confirmed this run:", file=sys.stderr)
        for text, intent in e.confirmed:
            print(f"  {text}\t{intent}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print(f"\nInterrupted; {len(reviewer.confirmed)} labels already stored in {args.corpus}", file=sys.stderr)
        return 130

    if args.report:
        d = os.path.dirname(args.report)
        if d:
            os.makedirs(d, exist_ok=True)
        with open(args.report, "wb") as f:
            f.write(csv_export(outcomes))
    return 0


if __name__ == "__main__":
    sys.exit(main())
