# src/sanitizer_shell/core/handlers/config_handler.py
import logging
from typing import List, Optional

from sanitizer_shell.core.managers.config_manager import config_manager
from sanitizer_shell.core.services.json_service import to_json

logger = logging.getLogger(__name__)

config_help_text = """
Usage:
  config list          Show the active configuration as JSON.
  config get <key>     Show one value (e.g., sanitizer.decorative_threshold).

Values can be overridden for a single run with the global option
--set <key>=<value> (e.g., --set sanitizer.decorative_threshold=3).
""".strip()


def apply_overrides(overrides: Optional[List[str]]) -> bool:
    """Applies 'key=value' overrides to the in-memory config. Returns False on a malformed item."""
    for item in overrides or []:
        key, sep, value = item.partition("=")
        if not sep or not key.strip():
            print(f"❌ Error: Invalid override '{item}', expected <key>=<value>.")
            return False
        if not config_manager.set_nested(key.strip(), value.strip()):
            print(f"❌ Error: Failed to set config value for key '{key.strip()}'.")
            return False
    return True


def handle_config(args: List[str], _stdin: Optional[str] = None) -> int:
    """Handles the 'config' command for viewing the active configuration."""
    if not args:
        print(config_help_text)
        return 1

    command = args[0]

    if command == "list":
        print(to_json(config_manager.get_all()))
        return 0

    if command == "get":
        if len(args) < 2:
            print("Usage: config get <key>")
            return 1
        value = config_manager.get_nested(args[1])
        if value is None:
            print(f"❌ Error: Unknown config key '{args[1]}'.")
            return 1
        print(to_json(value))
        return 0

    print(f"Unknown command: 'config {command}'.")
    return 1
