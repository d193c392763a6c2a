"""Shared template rendering constants."""

from __future__ import annotations

TEMPLATE_HEADER = '<?xml version="1.0" encoding="UTF-8"?>'
