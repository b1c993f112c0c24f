from __future__ import annotations

import os
from dataclasses import dataclass, asdict, field
from pathlib import Path

from dotenv import load_dotenv

WEBUI_DIR = Path(__file__).resolve().parent / "webui"


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class Settings:
    """Process configuration. Defaults match a plain local run."""

    host: str = "127.0.0.1"
    port: int = 8080
    database_url: str = "sqlite:///pastes.db"
    static_dir: Path = field(default_factory=lambda: WEBUI_DIR)
    escape_html: bool = True  # False embeds stored text into the page verbatim
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        # .env never overrides variables already set in the environment
        load_dotenv(".env", override=False)
        return cls(
            host=os.getenv("PASTEBIN_HOST", cls.host),
            port=int(os.getenv("PASTEBIN_PORT", str(cls.port))),
            database_url=os.getenv("PASTEBIN_DATABASE_URL", cls.database_url),
            static_dir=Path(os.getenv("PASTEBIN_STATIC_DIR", str(WEBUI_DIR))),
            escape_html=_env_bool("PASTEBIN_ESCAPE_HTML", cls.escape_html),
            log_level=os.getenv("PASTEBIN_LOG_LEVEL", cls.log_level).upper(),
        )

    def to_dict(self):
        return asdict(self)
