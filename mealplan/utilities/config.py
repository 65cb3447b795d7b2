"""Configuration management for the Meal Plan shopping list service."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# AI name-cleaning configuration
OPENAI_API_KEY: Final[str] = os.getenv('OPENAI_API_KEY', '')
OPENAI_MODEL: Final[str] = os.getenv('OPENAI_MODEL', 'gpt-4o-mini')
NAME_CLEANING_ENABLED: Final[bool] = os.getenv('NAME_CLEANING_ENABLED', 'True').lower() == 'true'
NAME_CLEANING_TIMEOUT: Final[float] = float(os.getenv('NAME_CLEANING_TIMEOUT', '30'))
NAME_CLEANING_MAX_ATTEMPTS: Final[int] = int(os.getenv('NAME_CLEANING_MAX_ATTEMPTS', '3'))

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
DEFAULT_LANGUAGE: Final[str] = os.getenv('DEFAULT_LANGUAGE', 'en')

# File Paths
BASE_DIR: Final[Path] = Path(__file__).parent.parent
DATA_DIR: Final[Path] = Path(os.getenv('DATA_DIR', str(BASE_DIR / 'data')))
