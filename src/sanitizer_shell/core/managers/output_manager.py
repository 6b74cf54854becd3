# src/sanitizer_shell/core/managers/output_manager.py
import logging
import re
import time
import unicodedata
from pathlib import Path
from typing import Optional

from sanitizer_shell.core.utils.path_utils import PathUtils

logger = logging.getLogger(__name__)

PASTED_NAME = "pasted-svg"


def slugify(value: str) -> str:
    """Lower-cases and reduces a name to ASCII letters, digits and dashes."""
    value = unicodedata.normalize("NFKD", value).encode("ascii", "ignore").decode("ascii")
    value = re.sub(r"[^\w\s-]", "", value.lower())
    value = re.sub(r"[\s_-]+", "-", value).strip("-")
    return value or "svg"


class OutputManager:
    """Persists sanitized documents under generated, collision-resistant names."""

    def __init__(self, directory: Optional[str] = None):
        self.directory = directory

    @staticmethod
    def build_filename(original_name: str, scheme: Optional[str], timestamp: Optional[int] = None) -> str:
        """
        Builds '<slug>-<scheme|custom>-<unix time>.svg'.

        Args:
            original_name (str): Source file name; any extension is dropped.
            scheme (Optional[str]): The applied color scheme.
            timestamp (Optional[int]): Unix time; defaults to now.
        """
        stem = Path(original_name).stem if original_name else PASTED_NAME
        suffix = scheme or "custom"
        ts = int(time.time()) if timestamp is None else timestamp
        return f"{slugify(stem)}-{suffix}-{ts}.svg"

    def save(self, content: str, original_name: str, scheme: Optional[str]) -> Path:
        """Writes the content and returns the path of the new file."""
        out_dir = PathUtils.get_output_dir(self.directory)
        path = out_dir / self.build_filename(original_name, scheme)
        path.write_text(content, encoding="utf-8")
        logger.info("Saved sanitized SVG to %s", path)
        return path
