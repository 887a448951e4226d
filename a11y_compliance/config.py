"""
Configuration Management

Loads configuration from .env files and provides typed config objects.
Handles touch-target geometry, announcement timing and the large-text
threshold used by the contrast rule.
"""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .models import Config


def load_config(env_file: Optional[Path] = None) -> Config:
    """
    Load configuration from .env file and environment variables.

    Searches for .env file in:
    1. Provided env_file path
    2. Current directory
    3. User's home directory

    Environment variables override .env file values.

    Args:
        env_file: Optional path to .env file

    Returns:
        Config object with all settings

    Raises:
        pydantic.ValidationError: If a value is out of range or not numeric

    Example:
        config = load_config()
        auditor = ComplianceAuditor(config)
    """
    # Load .env file
    if env_file and env_file.exists():
        load_dotenv(env_file)
    elif Path(".env").exists():
        load_dotenv(".env")
    elif (Path.home() / ".env").exists():
        load_dotenv(Path.home() / ".env")

    # Build config from environment
    config = Config(
        min_touch_target=os.getenv("A11Y_MIN_TOUCH_TARGET", "44"),
        recommended_touch_target=os.getenv("A11Y_RECOMMENDED_TOUCH_TARGET", "48"),
        polite_delay_ms=os.getenv("A11Y_POLITE_DELAY_MS", "1000"),
        assertive_delay_ms=os.getenv("A11Y_ASSERTIVE_DELAY_MS", "2000"),
        large_text_px=os.getenv("A11Y_LARGE_TEXT_PX", "24"),
        large_bold_text_px=os.getenv("A11Y_LARGE_BOLD_TEXT_PX", "18.66"),
    )

    return config
