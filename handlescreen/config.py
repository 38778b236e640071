from dataclasses import dataclass
import logging, os
from dotenv import load_dotenv
load_dotenv()


class ConfigError(Exception):
    """Startup configuration (settings, term list, candidate list) is unusable."""


@dataclass
class Settings:
    terms_path: str
    candidates_path: str
    model_path: str
    corpus_path: str
    risk_threshold: int = 15
    soft_confidence: float = 0.5
    hard_confidence: float = 0.8
    soft_bonus: int = 20
    fuzzy_threshold: float = 0.6
    stability_similarity: float = 0.8
    eviction_limit: int = 5
    max_prompt_attempts: int = 3
    log_level: str = "WARNING"


def _num(name, default, cast=int):
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return cast(raw)
    except ValueError as exc:
        raise ConfigError(f"{name} must be a {cast.__name__}, got {raw!r}") from exc


def _level(name, default):
    raw = (os.getenv(name) or default).strip().upper()
    if not isinstance(logging.getLevelName(raw), int):
        raise ConfigError(f"{name} must be a logging level name, got {raw!r}")
    return raw


def load_settings() -> Settings:
    """Read settings from the environment (and .env, already loaded at import)."""
    return Settings(
        terms_path=os.getenv("HANDLESCREEN_TERMS", "terms.json"),
        candidates_path=os.getenv("HANDLESCREEN_CANDIDATES", "usernames.txt"),
        model_path=os.getenv("HANDLESCREEN_MODEL", os.path.join("models", "intent_model.pkl")),
        corpus_path=os.getenv("HANDLESCREEN_CORPUS", os.path.join("data", "corpus.db")),
        risk_threshold=_num("RISK_THRESHOLD", 15),
        soft_confidence=_num("SOFT_CONFIDENCE", 0.5, float),
        hard_confidence=_num("HARD_CONFIDENCE", 0.8, float),
        soft_bonus=_num("SOFT_BONUS", 20),
        fuzzy_threshold=_num("FUZZY_THRESHOLD", 0.6, float),
        stability_similarity=_num("STABILITY_SIMILARITY", 0.8, float),
        eviction_limit=_num("EVICTION_LIMIT", 5),
        max_prompt_attempts=_num("MAX_PROMPT_ATTEMPTS", 3),
        log_level=_level("LOG_LEVEL", "WARNING"),
    )
