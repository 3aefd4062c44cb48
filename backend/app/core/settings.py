import logging
import os
from pathlib import Path
from typing import List, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS_PATH = Path(__file__).resolve().parents[2] / "config" / "settings.yaml"


class Settings(BaseModel):
    ai_move_delay: float = Field(default=0.5, ge=0)
    log_level: str = "INFO"
    cors_origins: List[str] = Field(default_factory=lambda: ["http://localhost:5173", "http://localhost:3000"])

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value) -> str:
        level = str(value).strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value!r}")
        return level


def load_settings(path: Optional[str] = None) -> Settings:
    """
    Reads the YAML settings file. CONNECT4_SETTINGS overrides the path,
    CONNECT4_LOG_LEVEL overrides the log level. A missing file yields defaults.
    """
    config_path = Path(path or os.getenv("CONNECT4_SETTINGS") or DEFAULT_SETTINGS_PATH)

    data = {}
    if config_path.exists():
        with open(config_path, "r") as f:
            data = yaml.safe_load(f) or {}
    else:
        logger.warning("Settings file %s not found, using defaults", config_path)

    if os.getenv("CONNECT4_LOG_LEVEL"):
        data["log_level"] = os.getenv("CONNECT4_LOG_LEVEL")

    return Settings(**data)


# Singleton instance
settings = load_settings()
