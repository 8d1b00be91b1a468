"""Configuration management for the MacroPlan application."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'INFO').upper()

# File Paths
BASE_DIR: Final[Path] = Path(__file__).parent.parent
DATA_DIR: Final[Path] = Path(os.getenv('MACROPLAN_DATA_DIR', str(BASE_DIR / 'data')))
STORAGE_FILE: Final[Path] = Path(os.getenv('MACROPLAN_STORAGE_FILE', str(DATA_DIR / 'storage.json')))
STATIC_DIR: Final[Path] = BASE_DIR / 'static'
TEMPLATES_DIR: Final[Path] = BASE_DIR / 'templates'

# Activity feed
MAX_EVENTS: Final[int] = int(os.getenv('MAX_EVENTS', '300'))
