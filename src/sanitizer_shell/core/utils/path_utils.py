# src/sanitizer_shell/core/utils/path_utils.py
import logging
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


class PathUtils:
    """
    A central utility for reliably retrieving important package and user paths.
    """

    @staticmethod
    def get_shell_package_root() -> Path:
        """Returns the directory of the sanitizer_shell package (where settings.json lives)."""
        return Path(__file__).resolve().parents[2]

    @staticmethod
    def get_output_dir(directory: Optional[str] = None) -> Path:
        """
        Resolves the output directory for sanitized files and creates it if needed.
        Relative paths are taken from the current working directory.
        """
        path = Path(directory or "sanitized").expanduser()
        if not path.is_absolute():
            path = Path.cwd() / path
        path.mkdir(parents=True, exist_ok=True)
        return path
