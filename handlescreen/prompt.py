"""
Human confirmation channel (console).

One question per flagged candidate. Accepted replies are the tokens in
policy.AFFIRMATIVE / policy.NEGATIVE; anything else re-asks, up to
max_attempts. Running out of attempts or hitting EOF aborts the candidate:
confirm() returns None and nothing gets labeled.
"""

import logging
from typing import Callable, Optional

from .policy import parse_answer

log = logging.getLogger(__name__)


class ConsolePrompt:
    def __init__(self, max_attempts: int = 3, input_fn: Optional[Callable[[str], str]] = None,
                 output: Callable[[str], None] = print):
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.max_attempts = max_attempts
        self.input_fn = input_fn or input
        self.output = output

    def confirm(self, raw: str, risk: int) -> Optional[str]:
        question = f"Is '{raw}' inappropriate? (risk {risk}) [y/n]: "
        for attempt in range(1, self.max_attempts + 1):
            try:
                answer = self.input_fn(question)
            except EOFError:
                log.warning("Input closed while confirming %r", raw)
                return None
            label = parse_answer(answer)
            if label is not None:
                return label
            if attempt < self.max_attempts:
                self.output("Please answer yes or no.")
        log.warning("No valid answer for %r after %d attempts; skipping", raw, self.max_attempts)
        return None
