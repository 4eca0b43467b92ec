"""
Template Catalog
================

Read-only lookup over the template library, seeded once at construction.
"""

from typing import Dict, Iterable, List, Optional

from .library import TEMPLATES
from .models import LegalTemplate
from ..errors import TemplateNotFound


class TemplateCatalog:
    """
    Templates keyed by id.

    Usage:
        catalog = TemplateCatalog()
        motions = catalog.find(type="motion", category="civil")
    """

    def __init__(self, templates: Iterable[LegalTemplate] = TEMPLATES):
        self._templates: Dict[str, LegalTemplate] = {}
        for template in templates:
            if template.id in self._templates:
                raise ValueError(f"Duplicate template id: {template.id}")
            self._templates[template.id] = template

    def __len__(self) -> int:
        return len(self._templates)

    def __contains__(self, template_id: str) -> bool:
        return template_id in self._templates

    def all(self) -> List[LegalTemplate]:
        return list(self._templates.values())

    def get(self, template_id: str) -> LegalTemplate:
        template = self._templates.get(template_id)
        if template is None:
            raise TemplateNotFound(template_id)
        return template

    def find(self, type: Optional[str] = None, category: Optional[str] = None) -> List[LegalTemplate]:
        """Filter by type and/or category (exact match, case-insensitive)"""
        results = self.all()
        if type:
            results = [t for t in results if t.type == type.lower()]
        if category:
            results = [t for t in results if t.category == category.lower()]
        return results

    def types(self) -> List[str]:
        return sorted({t.type for t in self._templates.values()})

    def categories(self) -> List[str]:
        return sorted({t.category for t in self._templates.values()})


_catalog: Optional[TemplateCatalog] = None


def get_catalog() -> TemplateCatalog:
    """Get the shared catalog instance"""
    global _catalog
    if _catalog is None:
        _catalog = TemplateCatalog()
    return _catalog
