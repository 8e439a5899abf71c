from __future__ import annotations

"""Runner that compares two documents and persists the score."""

import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from ..config import ComparisonSettings
from ..scoring.formatting import format_percentage
from ..scoring.similarity import measure
from ..utils import textio
from ..utils.logs import get_logger


@dataclass
class ComparisonRecord:
    original_length: int
    compared_length: int
    distance: int
    similarity: float
    formatted: str
    original_path: Optional[Path] = None
    compared_path: Optional[Path] = None
    output_path: Optional[Path] = None

    def to_dict(self) -> Dict[str, Any]:
        payload = asdict(self)
        for key in ("original_path", "compared_path", "output_path"):
            if payload[key] is not None:
                payload[key] = str(payload[key])
        return payload


class ComparisonRunner:
    def __init__(
        self,
        settings: Optional[ComparisonSettings] = None,
        *,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.settings = settings or ComparisonSettings()
        self.logger = logger or get_logger("runner")

    def compare(self, original_text: str, compared_text: str) -> ComparisonRecord:
        """Score two in-memory texts without touching the filesystem."""

        distance, value = measure(
            original_text, compared_text, clamp=self.settings.clamp_negative
        )
        return ComparisonRecord(
            original_length=len(original_text),
            compared_length=len(compared_text),
            distance=distance,
            similarity=value,
            formatted=format_percentage(value, self.settings.decimals),
        )

    def run(self, original: Path, compared: Path, output: Path) -> ComparisonRecord:
        """Compare *original* with *compared* and write the score to *output*.

        Both inputs are checked before anything is read or written.
        """

        try:
            textio.require_existing(original, "Original file")
            textio.require_existing(compared, "Compared file")
        except textio.DocumentNotFoundError as exc:
            self.logger.error("%s", exc)
            raise

        encoding = self.settings.encoding
        try:
            original_text = textio.read_document(original, encoding=encoding)
            compared_text = textio.read_document(compared, encoding=encoding)
        except (OSError, UnicodeDecodeError) as exc:
            self.logger.error("Could not read input: %s", exc)
            raise
        self.logger.debug(
            "Read %d and %d characters from %s and %s",
            len(original_text),
            len(compared_text),
            original,
            compared,
        )

        record = self.compare(original_text, compared_text)
        record.original_path = original
        record.compared_path = compared
        record.output_path = output

        try:
            textio.write_result(output, record.formatted, encoding=encoding)
        except OSError as exc:
            self.logger.error("Could not write result to %s: %s", output, exc)
            raise
        self.logger.info("Similarity %s written to %s", record.formatted, output)
        return record
