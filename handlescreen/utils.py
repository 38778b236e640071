import csv, io
from typing import List

from .config import ConfigError


def read_candidates(path: str) -> List[str]:
    """One candidate per non-blank line, taken literally."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = f.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Cannot read candidate list {path}: {exc}") from exc
    return [line for line in data.splitlines() if line.strip()]


def csv_export(outcomes):
    buf=io.StringIO(); w=csv.writer(buf)
    w.writerow(["username","normalized","status","label","risk_score","reason"])
    for o in outcomes:
        w.writerow([o.candidate.raw, o.candidate.normalized, o.status, o.label or "",
                    "" if o.risk_score is None else o.risk_score, o.reason])
    return buf.getvalue().encode()
