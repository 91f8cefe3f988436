"""Environment configuration (.env supported)."""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

HAIKU_MODEL = "claude-haiku-4-5-20251001"


@dataclass(frozen=True)
class Settings:
    anthropic_api_key: str | None
    model: str
    output_dir: Path


def get_settings() -> Settings:
    """Read settings from the environment on every call so tests can monkeypatch it."""
    return Settings(
        anthropic_api_key=os.getenv("ANTHROPIC_API_KEY") or None,
        model=os.getenv("SITE_BUILDER_MODEL", HAIKU_MODEL),
        output_dir=Path(os.getenv("SITE_BUILDER_OUTPUT_DIR", "sites")),
    )
