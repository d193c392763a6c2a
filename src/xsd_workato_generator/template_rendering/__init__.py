"""Template rendering exports."""

from .constants import TEMPLATE_HEADER
from .mustache_template_builder import render_template

__all__ = ["TEMPLATE_HEADER", "render_template"]
