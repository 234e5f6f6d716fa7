"""
Settings read from the process environment.

A local ``.env`` file is loaded first, so ``API_KEY=...`` can live there
during development. A missing key is not an error here: it only makes the
tip request fail later.
"""
import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()  # loads from .env into os.environ

DEFAULT_MODEL = "gemini-2.5-flash"


@dataclass(frozen=True)
class Settings:
    api_key: Optional[str] = None
    model: str = DEFAULT_MODEL
    log_level: int = logging.INFO
    log_file: Optional[str] = None

    @classmethod
    def from_env(cls) -> "Settings":
        level = getattr(logging, os.getenv("BMI_TIPS_LOG_LEVEL", "INFO").upper(), None)
        if not isinstance(level, int):
            level = logging.INFO
        return cls(
            api_key=os.getenv("API_KEY") or None,
            model=os.getenv("BMI_TIPS_MODEL") or DEFAULT_MODEL,
            log_level=level,
            log_file=os.getenv("BMI_TIPS_LOG_FILE") or None,
        )
