# src/svg_sanitizer/model.py
from __future__ import annotations

from typing import Dict, List, Optional
from pydantic import BaseModel, Field, field_validator

DEFAULT_LOGO_KEYWORDS = ["logo", "brand", "watermark", "svg-pan-zoom"]

DEFAULT_PRESERVE_KEYWORDS = [
    "categories", "seat", "section", "tier", "stand", "row", "level",
    "block", "area", "zone", "gate", "entrance", "exit", "field",
    "pitch", "stadium", "svg-pan-zoom_viewport",
]

DEFAULT_DECORATIVE_THRESHOLD = 5


def split_csv(value: Optional[str]) -> List[str]:
    """Splits a comma-separated string into trimmed, non-empty items."""
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


class SanitizerSettings(BaseModel):
    """
    Detection configuration for a single SanitizeController instance.
    Keyword matching is case-insensitive, so all keywords are stored lower-case.
    """
    logo_keywords: List[str] = Field(default_factory=lambda: list(DEFAULT_LOGO_KEYWORDS))
    preserve_keywords: List[str] = Field(default_factory=lambda: list(DEFAULT_PRESERVE_KEYWORDS))
    decorative_threshold: int = Field(default=DEFAULT_DECORATIVE_THRESHOLD, ge=1)

    @field_validator("logo_keywords", "preserve_keywords", mode="before")
    @classmethod
    def lower_keywords(cls, v):
        if v is None:
            return []
        return [str(k).strip().lower() for k in v if str(k).strip()]


class SanitizeOptions(BaseModel):
    """Per-call options for a sanitize run."""
    auto_detect: bool = True
    custom_keywords: List[str] = Field(default_factory=list)
    manual_remove_ids: List[str] = Field(default_factory=list)
    color_scheme: Optional[str] = None

    @field_validator("custom_keywords", mode="before")
    @classmethod
    def lower_custom_keywords(cls, v):
        if v is None:
            return []
        return [str(k).strip().lower() for k in v if str(k).strip()]

    @field_validator("manual_remove_ids", mode="before")
    @classmethod
    def drop_blank_ids(cls, v):
        if v is None:
            return []
        return [str(i).strip() for i in v if str(i).strip()]

    @field_validator("color_scheme", mode="before")
    @classmethod
    def empty_scheme_is_none(cls, v):
        return v or None

    @classmethod
    def from_csv(
            cls,
            *,
            auto_detect: bool = True,
            custom_keywords: Optional[str] = None,
            manual_remove_ids: Optional[str] = None,
            color_scheme: Optional[str] = None,
    ) -> "SanitizeOptions":
        """Builds options from the comma-separated form used by the command line."""
        return cls(
            auto_detect=auto_detect,
            custom_keywords=split_csv(custom_keywords),
            manual_remove_ids=split_csv(manual_remove_ids),
            color_scheme=color_scheme,
        )


class SanitizeResult(BaseModel):
    """Outcome of one sanitize call."""
    success: bool = True
    content: str
    detected_logos: Dict[str, str] = Field(default_factory=dict)
    removed_count: int = 0
    color_scheme: Optional[str] = None


class ColorSchemeInfo(BaseModel):
    """Display data for one color scheme."""
    name: str
    label: str
    color: str
    description: str
