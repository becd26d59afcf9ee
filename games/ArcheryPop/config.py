"""
Archery Pop - Configuration loader.

Loads settings from .env file in the game directory, with sensible defaults.
Real environment variables take precedence over the .env file.
"""
import os
from pathlib import Path

from dotenv import load_dotenv

from models import SessionConfig

# Load .env from game directory
_env_path = Path(__file__).parent / '.env'
load_dotenv(_env_path)


def _get_bool(key: str, default: bool) -> bool:
    """Get boolean from environment."""
    val = os.getenv(key, str(default)).lower()
    return val in ('true', '1', 'yes', 'on')


def _get_int(key: str, default: int) -> int:
    """Get integer from environment."""
    return int(os.getenv(key, str(default)))


def _get_float(key: str, default: float) -> float:
    """Get float from environment."""
    return float(os.getenv(key, str(default)))


# Board
BOARD_WIDTH = _get_int('BOARD_WIDTH', 960)
BOARD_HEIGHT = _get_int('BOARD_HEIGHT', 600)
FPS = _get_int('FPS', 60)
PHYSICS_RATE = _get_float('PHYSICS_RATE', 60.0)  # fixed ticks/sec for the standalone runner

# Targets
TARGET_SIZE = _get_int('TARGET_SIZE', 80)
SPAWN_OFFSET_MAX = _get_int('SPAWN_OFFSET_MAX', 80)  # random extra height above the board
TARGET_FALL_SPEED = _get_float('TARGET_FALL_SPEED', 3)  # units per tick
TARGET_SPAWN_INTERVAL_MS = _get_int('TARGET_SPAWN_INTERVAL_MS', 2000)
MAX_TARGETS = _get_int('MAX_TARGETS', 5)
MIN_TARGETS = _get_int('MIN_TARGETS', 1)
INITIAL_TARGETS = _get_int('INITIAL_TARGETS', 2)

# Session budget
INITIAL_LIVES = _get_int('INITIAL_LIVES', 3)
INITIAL_TIME = _get_int('INITIAL_TIME', 60)  # seconds
CLOCK_PERIOD_MS = _get_int('CLOCK_PERIOD_MS', 1000)

# Scoring
HIT_POINTS = _get_int('HIT_POINTS', 10)
ESCAPE_PENALTY = _get_int('ESCAPE_PENALTY', 5)  # misses are never penalised

# Persistence
HIGHSCORE_KEY = os.getenv('HIGHSCORE_KEY', 'archerypop_highscore')
HIGHSCORE_FILE = os.getenv('HIGHSCORE_FILE', '')  # empty = platform data dir

# Audio-free, asset-free visuals
SHOW_SCOPE = _get_bool('SHOW_SCOPE', True)
BACKGROUND_COLOR = (255, 255, 255)
BOARD_BORDER_COLOR = (40, 40, 40)
TARGET_RING_COLORS = [
    (230, 40, 40),    # Outer red
    (255, 255, 255),  # White
    (230, 40, 40),    # Red
    (255, 215, 0),    # Gold bullseye
]
TARGET_OUTLINE_COLOR = (30, 30, 30)
SCOPE_COLOR = (20, 20, 20)
HUD_TEXT_COLOR = (20, 20, 20)
HEART_COLOR = (220, 30, 60)
OVERLAY_COLOR = (0, 0, 0, 160)
OVERLAY_TEXT_COLOR = (255, 255, 255)
NEW_HIGH_COLOR = (255, 215, 0)


def build_session_config(physics_rate: float = None) -> SessionConfig:
    """Create the engine configuration from the loaded settings.

    Args:
        physics_rate: Fixed physics ticks per second, or None for one
            physics tick per frame

    Returns:
        Validated SessionConfig
    """
    return SessionConfig(
        board_width=BOARD_WIDTH,
        board_height=BOARD_HEIGHT,
        target_size=TARGET_SIZE,
        spawn_offset_max=SPAWN_OFFSET_MAX,
        fall_speed=TARGET_FALL_SPEED,
        min_targets=MIN_TARGETS,
        max_targets=MAX_TARGETS,
        initial_targets=INITIAL_TARGETS,
        spawn_interval_ms=TARGET_SPAWN_INTERVAL_MS,
        clock_period_ms=CLOCK_PERIOD_MS,
        physics_rate=physics_rate,
        initial_lives=INITIAL_LIVES,
        initial_time=INITIAL_TIME,
        hit_points=HIT_POINTS,
        escape_penalty=ESCAPE_PENALTY,
        highscore_key=HIGHSCORE_KEY,
    )
