# src/svg_sanitizer/controllers/sanitize_controller.py
from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Callable, Dict, List, Optional, Union

from ..color.transformer import ColorTransformer, JitterSource
from ..dom.document import SvgDocument
from ..exceptions import SourceNotFound
from ..model import SanitizeOptions, SanitizeResult, SanitizerSettings
from ..schemes import resolve_hue
from ..services.color_rewrite_service import ColorRewriteService, collect_colors
from ..services.element_removal_service import ElementRemovalService
from ..services.logo_detection_service import LogoDetectionService

logger = logging.getLogger(__name__)

MANUAL_REASON = "Manually specified for removal"


class SanitizeController:
    """
    Orchestrates one sanitize run: parse -> detect -> remove -> recolor -> serialize.

    A controller holds only configuration. Every call builds its own document
    and its own ColorTransformer (and so its own color cache), so a controller
    can be shared between threads as long as the jitter factory is.
    """

    def __init__(
            self,
            settings: Optional[SanitizerSettings] = None,
            *,
            rng_factory: Optional[Callable[[], JitterSource]] = None,
    ) -> None:
        self.settings = settings or SanitizerSettings()
        self.rng_factory = rng_factory or random.Random

    def sanitize(self, source: str, options: Optional[SanitizeOptions] = None) -> SanitizeResult:
        """
        Sanitizes a document given as text.

        Args:
            source (str): Raw document markup.
            options (Optional[SanitizeOptions]): Detection, removal and color options.

        Returns:
            SanitizeResult: The serialized document plus the detection report.
            A flagged root element is reported in detected_logos but kept, so
            removed_count can be lower than the number of flagged ids.

        Raises:
            InvalidScheme: Unknown color scheme (raised before parsing).
            ParseFailed: The source is not a parseable tree.
        """
        options = options or SanitizeOptions()

        # Validate before the tree is touched.
        target_hue = resolve_hue(options.color_scheme) if options.color_scheme else None

        doc = SvgDocument.parse(source)

        detected: Dict[str, str] = {}
        removed = 0

        if options.auto_detect:
            detector = LogoDetectionService(self.settings, options.custom_keywords)
            detected = detector.detect(doc)
            removed = ElementRemovalService.remove(doc, list(detected))

        if options.manual_remove_ids:
            removed += ElementRemovalService.remove(doc, options.manual_remove_ids)
            for element_id in options.manual_remove_ids:
                if element_id not in detected:
                    detected[element_id] = MANUAL_REASON

        if target_hue is not None:
            transformer = ColorTransformer(target_hue, self.rng_factory())
            ColorRewriteService(transformer).rewrite(doc)

        content = doc.serialize()
        logger.info(
            "Sanitized document: %d flagged, %d removed, scheme=%s.",
            len(detected), removed, options.color_scheme or "none"
        )
        return SanitizeResult(
            content=content,
            detected_logos=detected,
            removed_count=removed,
            color_scheme=options.color_scheme,
        )

    def sanitize_file(self, path: Union[str, Path], options: Optional[SanitizeOptions] = None) -> SanitizeResult:
        """Reads a document from disk and sanitizes it."""
        file_path = Path(path)
        if not file_path.is_file():
            raise SourceNotFound(f"File not found: {file_path}")
        return self.sanitize(file_path.read_text(encoding="utf-8"), options)

    @staticmethod
    def detect_colors(source: str) -> List[str]:
        """
        Lists the distinct colors of a document as '#rrggbb' without modifying it.

        Raises:
            ParseFailed: The source is not a parseable tree.
        """
        doc = SvgDocument.parse(source)
        colors = collect_colors(doc)
        logger.info("Detected %d distinct colors.", len(colors))
        return colors
