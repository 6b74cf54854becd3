import logging
import sys
from typing import Dict, Mapping, Optional, Union

from tqdm import tqdm

Level = Union[str, int, None]

LOG_FORMAT = "%(asctime)s - %(levelname)s - [%(name)s:%(lineno)d] - %(message)s"


class LogWithTqdm(logging.Handler):
    """
    Writes log records through `tqdm.write()`, so a batch progress bar on
    the terminal is redrawn below the log line instead of being torn apart.
    """
    def emit(self, record):
        try:
            msg = self.format(record)
            # stderr, so 'sanitize --stdout' output stays a clean SVG.
            tqdm.write(msg, file=sys.stderr)
            self.flush()
        except Exception:
            self.handleError(record)


def _to_level(level: Level, fallback: int) -> int:
    """Accepts 'debug', 'WARNING', 10 or None; unknown names map to fallback."""
    if isinstance(level, str):
        return getattr(logging, level.upper(), fallback)
    return level if level is not None else fallback


def _apply_levels(levels: Optional[Mapping[str, Level]], fallback: int) -> None:
    for name, level in (levels or {}).items():
        logging.getLogger(name).setLevel(_to_level(level, fallback))


def configure_logger(
        general_level: Level = 'INFO',
        module_specific_levels: Optional[Dict[str, Level]] = None,
        silenced_loggers: Optional[Dict[str, Level]] = None,
) -> LogWithTqdm:
    """
    Installs a single tqdm-aware handler on the root logger.

    Args:
        general_level: Root level ('debug.level' in settings.json).
        module_specific_levels: Per-logger levels ('logging.levels').
        silenced_loggers: Noisy loggers to raise, CRITICAL when no level is given
                          ('logging.silenced').

    Returns:
        LogWithTqdm: The installed handler.
    """
    handler = LogWithTqdm()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root_logger = logging.getLogger()
    root_logger.setLevel(_to_level(general_level, logging.INFO))
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    _apply_levels(module_specific_levels, logging.INFO)
    _apply_levels(silenced_loggers, logging.CRITICAL)
    return handler
