"""
Template Data Types
===================
"""

from typing import List, Tuple
from dataclasses import dataclass, field


@dataclass(frozen=True)
class LegalTemplate:
    """A fillable legal form. Read-only."""
    id: str
    name: str
    type: str
    category: str
    body: str
    required_fields: Tuple[str, ...] = ()

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "type": self.type,
            "category": self.category,
            "template": self.body,
            "required_fields": list(self.required_fields),
        }


@dataclass(frozen=True)
class ValidationResult:
    is_valid: bool
    missing_fields: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class RenderedDocument:
    """Filled template text plus its validation verdict"""
    document: str
    validation: ValidationResult
