"""
Configuration management with environment variable support.

All settings can be overridden via environment variables.
Automatically loads .env file if present.
"""

import os
from pathlib import Path
from typing import Literal, Optional
from dotenv import load_dotenv

# Load .env file from project root (one level up from gvm/)
env_path = Path(__file__).parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

# Logging configuration
LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = os.getenv("LOG_LEVEL", "INFO")

# Beat clock defaults
DEFAULT_BPM: float = float(os.getenv("DEFAULT_BPM", "100"))
DEFAULT_CYCLE_LENGTH: float = float(os.getenv("DEFAULT_CYCLE_LENGTH", "8"))
DEFAULT_EASE_DURATION: float = float(os.getenv("DEFAULT_EASE_DURATION", "2"))

# Tap tempo configuration
TAP_RECORD_INTERVAL: int = int(os.getenv("TAP_RECORD_INTERVAL", "5"))  # taps needed before BPM updates
TAP_MAX_TIME_DIFF: float = float(os.getenv("TAP_MAX_TIME_DIFF", "50000"))  # milliseconds
TAP_HISTORY_SIZE: int = int(os.getenv("TAP_HISTORY_SIZE", "32"))

# Noise configuration (empty seed = random per process)
NOISE_SEED: Optional[int] = int(os.environ["NOISE_SEED"]) if os.getenv("NOISE_SEED") else None
NOISE_OCTAVES: int = int(os.getenv("NOISE_OCTAVES", "4"))
NOISE_FALLOFF: float = float(os.getenv("NOISE_FALLOFF", "0.5"))

# Sketch frame loop
SKETCH_FPS: int = int(os.getenv("SKETCH_FPS", "60"))
SKETCH_BPM: float = float(os.getenv("SKETCH_BPM", "120"))
