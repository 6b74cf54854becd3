# src/sanitizer_shell/app.py
"""
SVG Sanitizer - command line entry point.

    svg-sanitizer [--log-level LEVEL] [--set KEY=VALUE ...] <command> [args]
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Dict, List, Optional

from sanitizer_shell.core.handlers.colors_handler import colors_help_text, handle_colors
from sanitizer_shell.core.handlers.config_handler import apply_overrides, config_help_text, handle_config
from sanitizer_shell.core.handlers.sanitize_handler import handle_sanitize, sanitize_help_text
from sanitizer_shell.core.handlers.schemes_handler import handle_schemes, schemes_help_text
from sanitizer_shell.core.managers.config_manager import config_manager
from sanitizer_shell.core.utils.configure_logging import configure_logger

logger = logging.getLogger(__name__)

CommandRegistry: Dict[str, Callable[..., int]] = {
    "sanitize": handle_sanitize,
    "colors": handle_colors,
    "schemes": handle_schemes,
    "config": handle_config,
}

COMMAND_HELP_TEXTS: Dict[str, str] = {
    "sanitize": sanitize_help_text,
    "colors": colors_help_text,
    "schemes": schemes_help_text,
    "config": config_help_text,
}


def _build_parser() -> argparse.ArgumentParser:
    epilog = "Commands:\n" + "\n\n".join(COMMAND_HELP_TEXTS.values())
    parser = argparse.ArgumentParser(
        prog="svg-sanitizer",
        description="Remove logos and recolor SVG documents.",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--log-level", default=None, help="Override debug.level from settings.json.")
    parser.add_argument("--set", dest="overrides", action="append", metavar="KEY=VALUE",
                        help="Override a config value for this run (repeatable).")
    parser.add_argument("command", choices=sorted(CommandRegistry), help="Command to run.")
    parser.add_argument("args", nargs=argparse.REMAINDER, help="Arguments for the command.")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_parser()
    try:
        pargs = parser.parse_args(argv)
    except SystemExit as e:
        return int(e.code or 0)

    if not apply_overrides(pargs.overrides):
        return 1

    configure_logger(
        pargs.log_level or config_manager.get_nested("debug.level", "WARNING"),
        module_specific_levels=config_manager.get_nested("logging.levels"),
        silenced_loggers=config_manager.get_nested("logging.silenced"),
    )
    logger.debug("Running command '%s' with %s", pargs.command, pargs.args)

    handler = CommandRegistry[pargs.command]
    return handler(pargs.args)


if __name__ == "__main__":
    sys.exit(main())
