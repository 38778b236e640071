"""Batch username triage: lexical risk, intent classifier, human confirmation."""

__version__ = "0.1.0"
