"""
Rebuild the intent classifier from the stored training corpus.

Usage:
  python -m handlescreen.training.retrain [--corpus data/corpus.db] [--out models/intent_model.pkl]
"""
import argparse, logging, sys
from collections import Counter

from ..config import ConfigError, load_settings
from ..inference import ClassifierError, IntentClassifier
from ..storage import TrainingCorpus


def main(argv=None):
    try:
        settings = load_settings()
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(2)
    ap = argparse.ArgumentParser()
    ap.add_argument("--corpus", default=settings.corpus_path, help="SQLite training corpus")
    ap.add_argument("--out", default=settings.model_path)
    args = ap.parse_args(argv)
    logging.basicConfig(level=settings.log_level)

    examples = TrainingCorpus(args.corpus).examples()
    print(f"Loaded {len(examples)} labeled examples.")
    print("Per label:", Counter(intent for _, intent in examples).most_common())

    try:
        clf = IntentClassifier().train(examples)
    except ClassifierError as e:
        sys.exit(f"Training failed: {e}")
    if not clf.trained:
        sys.exit("Need at least one example of each label to train.")

    clf.save(args.out)
    print(f"Saved {args.out}")


if __name__ == "__main__":
    main()
