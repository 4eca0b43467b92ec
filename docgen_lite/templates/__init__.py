"""
Legal Templates
===============

Template library, catalog lookup and the rendering / validation engine.
"""

from .models import LegalTemplate, ValidationResult, RenderedDocument
from .library import TEMPLATES
from .catalog import TemplateCatalog, get_catalog
from .engine import (
    render,
    fill_template,
    validate_required_fields,
    template_fields,
    format_long_date,
    NOT_PROVIDED,
    PLACEHOLDER_RE,
)

__all__ = [
    "LegalTemplate", "ValidationResult", "RenderedDocument",
    "TEMPLATES", "TemplateCatalog", "get_catalog",
    "render", "fill_template", "validate_required_fields", "template_fields",
    "format_long_date", "NOT_PROVIDED", "PLACEHOLDER_RE",
]
