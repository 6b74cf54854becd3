# src/sanitizer_shell/core/services/json_service.py
import json
from typing import Any

from pydantic import BaseModel


def _default(obj: Any) -> Any:
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json")
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def to_json(data: Any, indent: int = 2, ensure_ascii: bool = False) -> str:
    """
    Serializes handler output for the terminal.

    Pydantic models may appear anywhere in the structure; they are dumped
    in JSON mode.
    """
    return json.dumps(data, ensure_ascii=ensure_ascii, indent=indent, default=_default)
