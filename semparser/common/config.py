import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


def _env_bool(name: str, default: str) -> bool:
    raw = os.getenv(name, default).strip().lower()
    if raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")


def _env_int(name: str, default: str) -> int:
    raw = os.getenv(name, default).strip()
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class Settings:
    correction_strategy: str = "damerau_levenshtein"
    max_distance: int = 2
    lookup_if_known: bool = False
    stemming_accuracy: float = 0.9

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            correction_strategy=os.getenv("CORRECTION_STRATEGY", "damerau_levenshtein").strip().lower(),
            max_distance=_env_int("CORRECTION_MAX_DISTANCE", "2"),
            lookup_if_known=_env_bool("CORRECTION_LOOKUP_IF_KNOWN", "false"),
            stemming_accuracy=float(os.getenv("STEMMING_ACCURACY", "0.9")),
        )


settings = Settings.from_env()
