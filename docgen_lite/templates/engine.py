"""
Template Rendering & Validation Engine
======================================

Fills {{placeholder}} tokens in a template body from a fact map and
checks the template's required fields.

Rules:
1. currentDate is injected as a long-form date ("March 5, 2025")
2. Each non-empty fact replaces every {{key}} occurrence with str(value)
3. Any {{...}} left over becomes [NOT PROVIDED]
4. A required field is missing iff absent, None, or whitespace only

Rendering never fails for missing data: the document is returned with
markers so it can be completed by hand. Everything here is pure.
"""

import re
from datetime import date
from typing import Any, Dict, List, Mapping, Optional

from .models import LegalTemplate, RenderedDocument, ValidationResult
from ..facts import ADDITIONAL_INFO_KEY, coerce_fact_value, is_fact_field


PLACEHOLDER_RE = re.compile(r"\{\{.*?\}\}")

NOT_PROVIDED = "[NOT PROVIDED]"

CURRENT_DATE_KEY = "currentDate"

# Used when the fact record names no attorney
ATTORNEY_DEFAULTS = {
    "attorneyName": "[ATTORNEY NAME]",
    "attorneyAddress": "[ATTORNEY ADDRESS]",
    "attorneyPhone": "[ATTORNEY PHONE]",
}

_MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def format_long_date(day: date) -> str:
    """date(2025, 3, 5) -> 'March 5, 2025' (locale independent)"""
    return f"{_MONTHS[day.month - 1]} {day.day}, {day.year}"


def _is_blank(value: Any) -> bool:
    return value is None or not str(value).strip()


def fill_template(body: str, facts: Mapping[str, Any]) -> str:
    """Substitute placeholders, then mark the unmatched ones"""
    document = body
    for key, value in facts.items():
        if value is None or value == "":
            continue
        token = "{{" + key + "}}"
        if token in document:
            document = document.replace(token, str(value))
    return PLACEHOLDER_RE.sub(NOT_PROVIDED, document)


def validate_required_fields(
    required_fields: List[str],
    facts: Mapping[str, Any],
) -> ValidationResult:
    """Missing fields in declared order"""
    missing = [name for name in required_fields if _is_blank(facts.get(name))]
    return ValidationResult(is_valid=not missing, missing_fields=missing)


def render(
    template: LegalTemplate,
    facts: Mapping[str, Any],
    today: Optional[date] = None,
) -> RenderedDocument:
    """
    Render a template against a fact map.

    Args:
        template: Template to fill
        facts: Field name -> value (None for unknown)
        today: Date used for {{currentDate}}; defaults to date.today()

    Returns:
        RenderedDocument with the filled text and validation verdict
    """
    values: Dict[str, Any] = dict(facts)
    values[CURRENT_DATE_KEY] = format_long_date(today or date.today())

    return RenderedDocument(
        document=fill_template(template.body, values),
        validation=validate_required_fields(list(template.required_fields), values),
    )


def template_fields(
    fields: Mapping[str, Optional[str]],
    additional_info: Optional[Mapping[str, Any]] = None,
) -> Dict[str, Optional[str]]:
    """
    Build the render map for a stored fact record.

    Scalar additional_info entries fill keys the schema does not model;
    schema fields win over them. Attorney defaults apply only when the
    record has no attorney value.
    """
    values: Dict[str, Optional[str]] = {}

    for key, value in (additional_info or {}).items():
        if key == ADDITIONAL_INFO_KEY or is_fact_field(key):
            continue
        if isinstance(value, (str, int, float, bool)):
            values[key] = coerce_fact_value(value)

    for key, value in fields.items():
        values[key] = value

    for key, default in ATTORNEY_DEFAULTS.items():
        if _is_blank(values.get(key)):
            values[key] = default

    return values
