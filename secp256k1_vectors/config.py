import logging
import os
from dataclasses import dataclass
from typing import Optional

SEED_ENV = "SECP256K1_VECTORS_SEED"
LOG_LEVEL_ENV = "SECP256K1_VECTORS_LOG_LEVEL"


def _parse_seed(text):
    text = text.strip()
    if text.lower().startswith("0x"):
        return int(text, 16)
    return int(text, 10)


def _parse_log_level(text, default):
    level = text.strip().upper()
    # getLevelName maps known names to their number and anything else to a string
    if isinstance(logging.getLevelName(level), int):
        return level
    return default


@dataclass(frozen=True)
class GeneratorConfig:
    fuzz_iterations: int = 10000
    random_points: int = 100
    combine_rounds: int = 10
    seed: Optional[int] = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ=None):
        """Build a config from the environment.

        An unset seed means OS entropy. An unknown log level falls back to INFO.
        """
        environ = os.environ if environ is None else environ
        seed = environ.get(SEED_ENV)
        return cls(
            seed=_parse_seed(seed) if seed else None,
            log_level=_parse_log_level(environ.get(LOG_LEVEL_ENV, cls.log_level), cls.log_level),
        )
