"""Runtime settings for the command line and the web app.

Values come from ``LANGUAGE_GUESSER_*`` environment variables, optionally
set through a ``.env`` file in the working directory::

    LANGUAGE_GUESSER_MODEL_PATH=artifacts/model.json
    LANGUAGE_GUESSER_CORPUS_DIR=data
    LANGUAGE_GUESSER_CORPUS_EXTENSION=.dic
    LANGUAGE_GUESSER_LOG_LEVEL=INFO
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .corpus import DEFAULT_EXTENSION

ENV_PREFIX = "LANGUAGE_GUESSER_"

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s - %(message)s"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Settings:
    """Paths and options shared by the CLI and the web app."""

    model_path: Path = Path("model.json")
    corpus_dir: Path = Path("data")
    corpus_extension: str = DEFAULT_EXTENSION
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        self.model_path = Path(self.model_path)
        self.corpus_dir = Path(self.corpus_dir)
        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(
                f"Invalid log level {self.log_level!r}. Choose from {', '.join(LOG_LEVELS)}"
            )

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from environment variables.

        Args:
            env: Mapping to read instead of ``os.environ``. When omitted, a
                ``.env`` file is loaded into the process environment first.
        """
        if env is None:
            load_dotenv()
            env = os.environ

        defaults = cls()
        return cls(
            model_path=Path(env.get(f"{ENV_PREFIX}MODEL_PATH", defaults.model_path)),
            corpus_dir=Path(env.get(f"{ENV_PREFIX}CORPUS_DIR", defaults.corpus_dir)),
            corpus_extension=env.get(f"{ENV_PREFIX}CORPUS_EXTENSION", defaults.corpus_extension),
            log_level=env.get(f"{ENV_PREFIX}LOG_LEVEL", defaults.log_level),
        )


def configure_logging(level: str) -> None:
    """Send log records to stderr at ``level``."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
