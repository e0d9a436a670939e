"""Settings read from the environment (a ``.env`` file is loaded by the CLI)."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from unorules.engine import RANDOM_VARIANT, CardSpec, Variant, load_deck_file

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def _optional_int(env: Mapping[str, str], key: str) -> Optional[int]:
    raw = env.get(key, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{key} must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class Settings:
    """Match settings.

    Environment variables:
        UNORULES_VARIANT: bundled deck variant name, or "random".
        UNORULES_DECK_FILE: path to a deck file; overrides the variant.
        UNORULES_SEED: integer seed for shuffling and bots.
        UNORULES_MAX_TURNS: turn cap for the runner.
        UNORULES_LOG_LEVEL: logging level name.
    """

    variant: str = Variant.STANDARD.value
    deck_file: Optional[str] = None
    seed: Optional[int] = None
    max_turns: int = 1000
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        valid = {v.value for v in Variant} | {RANDOM_VARIANT}
        if self.variant not in valid:
            raise ValueError(f"Unknown variant {self.variant!r}, expected one of {sorted(valid)}")
        if self.max_turns <= 0:
            raise ValueError(f"max_turns must be positive, got {self.max_turns}")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"Unknown log level {self.log_level!r}")

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if env is None else env
        max_turns = _optional_int(env, "UNORULES_MAX_TURNS")
        return cls(
            variant=env.get("UNORULES_VARIANT", "").strip().lower() or Variant.STANDARD.value,
            deck_file=env.get("UNORULES_DECK_FILE", "").strip() or None,
            seed=_optional_int(env, "UNORULES_SEED"),
            max_turns=max_turns if max_turns is not None else 1000,
            log_level=env.get("UNORULES_LOG_LEVEL", "").strip().upper() or "WARNING",
        )

    def deck_specs(self) -> Optional[list[CardSpec]]:
        """Deck records from the deck file, or None when ``variant`` picks the deck."""
        if self.deck_file:
            return load_deck_file(self.deck_file)
        return None


def configure_logging(level: str) -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT, datefmt=LOG_DATEFMT)
