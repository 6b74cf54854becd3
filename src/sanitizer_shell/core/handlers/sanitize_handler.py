# src/sanitizer_shell/core/handlers/sanitize_handler.py
from __future__ import annotations

import argparse
import logging
import random
import sys
from typing import List, Optional

from tqdm import tqdm

from svg_sanitizer.controllers.sanitize_controller import SanitizeController
from svg_sanitizer.exceptions import InvalidScheme, SanitizerError
from svg_sanitizer.model import SanitizeOptions, SanitizeResult
from svg_sanitizer.schemes import resolve_hue
from sanitizer_shell.core.managers.config_manager import config_manager
from sanitizer_shell.core.managers.output_manager import OutputManager
from sanitizer_shell.core.utils.input_reader import STDIN_MARKER, read_source

logger = logging.getLogger(__name__)

sanitize_help_text = """
  sanitize <file|-> [<file> ...] [--color <scheme>] [--keywords a,b] [--remove-ids x,y]
           [--no-auto-detect] [--output-dir <dir>] [--stdout] [--seed <N>]
      Removes logo/branding elements and optionally recolors the document.
      Each file is written to the output directory as <name>-<scheme>-<time>.svg.
""".strip()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="sanitize", description="Sanitize one or more SVG files.")
    parser.add_argument("sources", metavar="FILE", nargs="+", help="SVG files, or '-' for stdin.")
    parser.add_argument("--color", dest="color_scheme", default=None,
                        help="Color scheme: green, blue, red, purple, orange or teal.")
    parser.add_argument("--keywords", default=None, help="Extra logo keywords, comma-separated.")
    parser.add_argument("--remove-ids", default=None, help="Element ids to always remove, comma-separated.")
    parser.add_argument("--no-auto-detect", action="store_true", help="Disable automatic logo detection.")
    parser.add_argument("--output-dir", default=None, help="Directory for the sanitized files.")
    parser.add_argument("--stdout", action="store_true", help="Print the sanitized SVG instead of saving it.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible color jitter.")
    return parser


def _print_report(name: str, result: SanitizeResult, saved_to: Optional[str], stream=None) -> None:
    target = f" -> {saved_to}" if saved_to else ""
    print(f"✅ {name}: removed {result.removed_count} element(s){target}", file=stream)
    for element_id, reason in result.detected_logos.items():
        print(f"   - {element_id}: {reason}", file=stream)


def handle_sanitize(args: List[str], stdin: Optional[str] = None) -> int:
    parser = _build_parser()

    if not args:
        parser.print_help()
        return 0

    try:
        pargs = parser.parse_args(args)
    except SystemExit:
        return 1

    if pargs.stdout and len(pargs.sources) > 1:
        print("❌ Error: --stdout can only be used with a single input.")
        return 1
    if pargs.sources.count(STDIN_MARKER) > 1:
        print("❌ Error: stdin ('-') can only be read once.")
        return 1

    # auto-detect: CLI > config > default(True)
    auto_detect = False if pargs.no_auto_detect else bool(config_manager.get_nested("sanitizer.auto_detect", True))
    options = SanitizeOptions.from_csv(
        auto_detect=auto_detect,
        custom_keywords=pargs.keywords,
        manual_remove_ids=pargs.remove_ids,
        color_scheme=pargs.color_scheme,
    )

    # Reject an unknown scheme once, before any file is read.
    if options.color_scheme:
        try:
            resolve_hue(options.color_scheme)
        except InvalidScheme as e:
            logger.error("%s", e)
            print(f"❌ Error: {e}")
            return 1

    rng_factory = None
    if pargs.seed is not None:
        rng_factory = lambda: random.Random(pargs.seed)  # noqa: E731

    controller = SanitizeController(config_manager.sanitizer_settings(), rng_factory=rng_factory)
    output = OutputManager(pargs.output_dir or config_manager.get_nested("output.directory"))

    sources = pargs.sources
    iterator = sources if len(sources) == 1 else tqdm(sources, desc="Sanitizing", unit="file", leave=False)

    failures = 0
    for source in iterator:
        try:
            name, content = read_source(source, stdin)
            result = controller.sanitize(content, options)
        except SanitizerError as e:
            failures += 1
            logger.error("Sanitization of %s failed: %s", source, e)
            print(f"❌ {source}: Sanitization failed: {e}")
            continue
        except Exception as e:
            failures += 1
            logger.error("Unexpected error while sanitizing %s: %s", source, e, exc_info=True)
            print(f"❌ {source}: Unexpected error: {e}")
            continue

        if pargs.stdout:
            print(result.content)
            # Keep stdout clean for the SVG itself.
            _print_report(name, result, None, stream=sys.stderr)
            continue

        try:
            path = output.save(result.content, name, result.color_scheme)
        except OSError as e:
            failures += 1
            logger.error("Could not save output for %s: %s", source, e)
            print(f"❌ {source}: Could not save output: {e}")
            continue
        _print_report(name, result, str(path))

    if len(sources) > 1:
        print(f"Processed {len(sources)} file(s): {len(sources) - failures} succeeded, {failures} failed.")
    return 1 if failures else 0
