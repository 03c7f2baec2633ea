"""
game constants and environment overrides
"""
import os

# -----------------------------------------------------------------------------
# BOARD
# -----------------------------------------------------------------------------

BOARD_SIZE = 3                       # fixed 3x3 grid
CELL_COUNT = BOARD_SIZE * BOARD_SIZE


def _env_int(name, default):
    """
    read a positive int from the environment, fall back on bad input
    """
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def _env_flag(name, default=False):
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


# -----------------------------------------------------------------------------
# NOTIFICATIONS
# -----------------------------------------------------------------------------

TOAST_DURATION_MS = _env_int("TTT_TOAST_MS", 3000)
SCORE_RESET_TEXT = "Score reset!"

# -----------------------------------------------------------------------------
# AUDIO
# -----------------------------------------------------------------------------

START_MUTED = _env_flag("TTT_MUTED")
SAMPLE_RATE = 44100
TONE_GAIN = 0.1      # starting amplitude
TONE_FLOOR = 0.01    # amplitude reached at the end of the tone

# cue name -> (frequency hz, duration ms)
TONES = {
    "move": (800, 150),
    "win": (1200, 500),
    "draw": (600, 300),
}

# -----------------------------------------------------------------------------
# LOGGING
# -----------------------------------------------------------------------------

LOG_LEVEL = os.getenv("TTT_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
