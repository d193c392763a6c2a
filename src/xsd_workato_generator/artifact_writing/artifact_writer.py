"""Artifact file writer."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def write_artifact(path: Path | str, text: str) -> Path:
    """Write one generated artifact as UTF-8 text and return its resolved path."""
    destination = Path(path)
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(text, encoding="utf-8")
    logger.debug("Wrote %d characters to %s", len(text), destination)
    return destination.resolve()
