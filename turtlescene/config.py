"""
Central configuration for turtlescene tunables and shared constants.
"""

import logging
import os

TRACE: int = 5
logging.addLevelName(TRACE, "TRACE")
# Add Logger.trace if missing
if not hasattr(logging.Logger, "trace"):

    def _trace(self, msg, *args, **kwargs):
        if self.isEnabledFor(TRACE):
            self._log(TRACE, msg, args, **kwargs)

    logging.Logger.trace = _trace  # type: ignore[attr-defined]
    logging.TRACE = TRACE  # type: ignore[attr-defined]

# Default the CLI to TRACE logging when no level flag is given
TRACE_ENABLED = str(os.getenv("TURTLESCENE_TRACE", "0")).lower() in ("1", "true", "yes", "on")

logger = logging.getLogger(__name__)


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning(f"Ignoring invalid {name}={raw!r}, using {default}")
        return default


# Minimum stroke width so zero/near-zero pen widths still produce visible geometry
HAIRLINE_STROKE_WIDTH: float = _env_float("TURTLESCENE_HAIRLINE_WIDTH", 0.0333)

# Fresh turtle defaults (also used after a Reset command)
DEFAULT_PEN_WIDTH: float = 1.0
DEFAULT_PEN_COLOR: tuple[int, int, int] = (0, 0, 0)

# Angle used by turnleft/turnright when no argument is given (degrees)
DEFAULT_TURN_DEG: float = _env_float("TURTLESCENE_DEFAULT_TURN_DEG", 90.0)

# Paint alpha; program colors are always opaque
OPAQUE_ALPHA: int = 255

LOG_LEVEL_DEFAULT: str = os.getenv("TURTLESCENE_LOG_LEVEL", "WARNING").upper()
