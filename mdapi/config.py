# mdapi/config.py

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

BASE_DIR = Path(__file__).resolve().parent.parent
DEFAULT_MARKDOWN_DIR = BASE_DIR / "markdown"  # folder in project root
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 4000


@dataclass(frozen=True)
class Settings:
    markdown_dir: Path = DEFAULT_MARKDOWN_DIR
    host: str = DEFAULT_HOST
    cors_origins: List[str] = field(default_factory=lambda: ["*"])

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Build settings from MARKDOWN_DIR, HOST and CORS_ORIGINS.
        """
        origins_raw = os.environ.get("CORS_ORIGINS", "*")
        origins = [o.strip() for o in origins_raw.split(",") if o.strip()]

        return cls(
            markdown_dir=Path(os.environ.get("MARKDOWN_DIR", str(DEFAULT_MARKDOWN_DIR))),
            host=os.environ.get("HOST", DEFAULT_HOST),
            cors_origins=origins or ["*"],
        )


def get_settings() -> Settings:
    return Settings.from_env()


def port_from_env() -> int:
    """Port for run_server; not read when the app is only imported."""
    port_raw = os.environ.get("PORT", str(DEFAULT_PORT))
    try:
        return int(port_raw)
    except ValueError:
        raise ValueError(f"PORT must be an integer, got {port_raw!r}")
