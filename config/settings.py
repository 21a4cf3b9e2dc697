"""Application settings: all configuration loaded from environment variables.

Usage:
    from config.settings import Settings
    settings = Settings()
    settings.validate()   # raises ValueError if the content directory is unusable
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from fundamentals.loader import CATEGORIES_FILE, CONTENT_DIR


@dataclass
class Settings:
    """Centralised application configuration.

    All values are read from environment variables at instantiation time
    so that tests can override them by patching ``os.environ``.
    """

    # ── Content ─────────────────────────────────────────────────────────────
    content_dir: Path = field(
        default_factory=lambda: Path(os.environ.get("CONTENT_DIR") or CONTENT_DIR)
    )
    #: Treat audit findings as failures in ``cs-fundamentals check``.
    strict_audit: bool = field(
        default_factory=lambda: os.environ.get("STRICT_AUDIT", "0") == "1"
    )

    # ── Flask ───────────────────────────────────────────────────────────────
    debug: bool = field(
        default_factory=lambda: os.environ.get("FLASK_DEBUG", "0") == "1"
    )
    host: str = field(
        default_factory=lambda: os.environ.get("HOST", "127.0.0.1")
    )
    port: int = field(
        default_factory=lambda: int(os.environ.get("PORT", "5000"))
    )

    # ── Logging ─────────────────────────────────────────────────────────────
    log_level: str = field(
        default_factory=lambda: os.environ.get("LOG_LEVEL", "INFO").upper()
    )

    def validate(self) -> None:
        """Raise ``ValueError`` if the content directory is missing or incomplete."""
        if not self.content_dir.is_dir():
            raise ValueError(
                f"CONTENT_DIR {self.content_dir} is not a directory. "
                "Unset it to use the bundled content."
            )
        if not (self.content_dir / CATEGORIES_FILE).is_file():
            raise ValueError(f"{self.content_dir} has no {CATEGORIES_FILE}.")
