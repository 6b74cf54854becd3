# src/sanitizer_shell/core/utils/input_reader.py
import sys
from pathlib import Path
from typing import Optional, Tuple

from svg_sanitizer.exceptions import SourceNotFound
from sanitizer_shell.core.managers.output_manager import PASTED_NAME

STDIN_MARKER = "-"


def read_source(source: str, stdin: Optional[str] = None) -> Tuple[str, str]:
    """
    Resolves a command-line source into (original_name, text).

    '-' reads the piped text (or sys.stdin) and is named 'pasted-svg'.

    Raises:
        SourceNotFound: If the file does not exist or cannot be read.
    """
    if source == STDIN_MARKER:
        text = stdin if stdin is not None else sys.stdin.read()
        return PASTED_NAME, text

    path = Path(source)
    if not path.is_file():
        raise SourceNotFound(f"File not found: {source}")
    try:
        return path.name, path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceNotFound(f"Could not read {source}: {e}") from e
