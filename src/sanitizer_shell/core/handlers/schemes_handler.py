# src/sanitizer_shell/core/handlers/schemes_handler.py
from typing import List, Optional

from svg_sanitizer.schemes import CATALOG_VERSION, SCHEME_CATALOG
from sanitizer_shell.core.services.json_service import to_json

schemes_help_text = """
  schemes
      Prints the available color schemes (name, label, swatch color, description).
""".strip()


def handle_schemes(_args: List[str], _stdin: Optional[str] = None) -> int:
    """Prints the available color schemes with their display data."""
    print(to_json({"version": CATALOG_VERSION, "schemes": SCHEME_CATALOG}))
    return 0
