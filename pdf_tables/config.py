# ==============================================
# Configuration Management
# ==============================================
#
# PURPOSE:
#   Load all configuration from environment variables / .env file.
#   Provides typed config objects to the extraction layer and to
#   the table normalizer.
#
# CLASSES:
# --------
# - GeminiConfig (dataclass)
#     api_key: str | None     (default None)
#     model: str              (default "gemini-2.5-flash")
#     base_url: str           (default "https://generativelanguage.googleapis.com/v1beta")
#     timeout_seconds: float  (default 120.0)
#
# - NormalizerConfig (dataclass)
#     sample_size: int        (default 100)
#
# - AppConfig (dataclass)
#     gemini: GeminiConfig
#     normalizer: NormalizerConfig
#
# FUNCTION:
# ---------
# - get_config() -> AppConfig
#     Load .env using python-dotenv, construct AppConfig.
#     Returns the same singleton on repeated calls.
#
# USAGE:
# ------
#   from pdf_tables.config import get_config
#   config = get_config()
#   print(config.gemini.model)
#   print(config.normalizer.sample_size)
#
# ==============================================

import os
from dataclasses import dataclass, field
from typing import Optional
from pathlib import Path

from dotenv import load_dotenv


DEFAULT_GEMINI_MODEL = "gemini-2.5-flash"
DEFAULT_GEMINI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"


@dataclass
class GeminiConfig:
    """Gemini document-extraction API configuration."""
    api_key: Optional[str] = None
    model: str = DEFAULT_GEMINI_MODEL
    base_url: str = DEFAULT_GEMINI_BASE_URL
    timeout_seconds: float = 120.0

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)


@dataclass
class NormalizerConfig:
    """Table normalizer configuration."""
    sample_size: int = 100


@dataclass
class AppConfig:
    """Main application configuration."""
    gemini: GeminiConfig = field(default_factory=GeminiConfig)
    normalizer: NormalizerConfig = field(default_factory=NormalizerConfig)


# Singleton instance
_config_instance: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """
    Load configuration from environment variables / .env file.
    Returns the same singleton instance on repeated calls.

    Returns:
        AppConfig: Application configuration
    """
    global _config_instance

    if _config_instance is not None:
        return _config_instance

    # Load .env file from project root
    env_path = Path(__file__).parent.parent / ".env"
    load_dotenv(dotenv_path=env_path)

    gemini_config = GeminiConfig(
        api_key=os.getenv("GEMINI_API_KEY") or None,
        model=os.getenv("GEMINI_MODEL", DEFAULT_GEMINI_MODEL),
        base_url=os.getenv("GEMINI_BASE_URL", DEFAULT_GEMINI_BASE_URL),
        timeout_seconds=float(os.getenv("GEMINI_TIMEOUT_SECONDS", "120"))
    )

    normalizer_config = NormalizerConfig(
        sample_size=int(os.getenv("TYPE_SAMPLE_SIZE", "100"))
    )

    _config_instance = AppConfig(
        gemini=gemini_config,
        normalizer=normalizer_config
    )

    return _config_instance
