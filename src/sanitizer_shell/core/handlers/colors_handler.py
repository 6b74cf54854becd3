# src/sanitizer_shell/core/handlers/colors_handler.py
from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from svg_sanitizer.controllers.sanitize_controller import SanitizeController
from svg_sanitizer.exceptions import SanitizerError
from sanitizer_shell.core.utils.input_reader import read_source
from sanitizer_shell.core.services.json_service import to_json

logger = logging.getLogger(__name__)

colors_help_text = """
  colors <file|->
      Lists the distinct colors (as #rrggbb) used in fill/stroke attributes,
      inline styles and <style> blocks. Use '-' to read from stdin.
""".strip()


def handle_colors(args: List[str], stdin: Optional[str] = None) -> int:
    parser = argparse.ArgumentParser(prog="colors", description="List the colors used in an SVG.")
    parser.add_argument("source", metavar="FILE", help="SVG file, or '-' for stdin.")

    try:
        pargs = parser.parse_args(args)
    except SystemExit:
        return 1

    try:
        _, content = read_source(pargs.source, stdin)
        colors = SanitizeController.detect_colors(content)
    except SanitizerError as e:
        logger.error("Color detection failed: %s", e)
        print(f"❌ Color detection failed: {e}")
        return 1
    except Exception as e:
        logger.error("Unexpected error while detecting colors in %s: %s", pargs.source, e, exc_info=True)
        print(f"❌ Unexpected error: {e}")
        return 1

    print(to_json({"colors": colors, "count": len(colors)}))
    return 0
