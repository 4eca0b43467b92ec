"""
Template Catalog Tests
"""

import dataclasses

import pytest

from docgen_lite.errors import TemplateNotFound
from docgen_lite.templates import LegalTemplate, TEMPLATES, TemplateCatalog


@pytest.fixture
def catalog():
    return TemplateCatalog()


class TestTemplateCatalog:

    def test_seeded_from_library(self, catalog):
        assert len(catalog) == len(TEMPLATES) == 18
        assert [t.id for t in catalog.all()] == [t.id for t in TEMPLATES]

    def test_get_by_id(self, catalog):
        template = catalog.get("motion-to-dismiss")
        assert template.name == "Motion to Dismiss"
        assert template.type == "motion"
        assert template.category == "civil"
        assert template.required_fields[0] == "court"

    def test_get_unknown_raises(self, catalog):
        with pytest.raises(TemplateNotFound) as exc:
            catalog.get("no-such-template")
        assert exc.value.template_id == "no-such-template"

    def test_filter_by_type(self, catalog):
        motions = catalog.find(type="motion")
        assert {t.id for t in motions} == {
            "motion-to-dismiss",
            "motion-for-admission-pro-hac-vice",
            "motion-to-exclude-time-under-speedy-trial-act",
        }

    def test_filters_compose(self, catalog):
        petitions = catalog.find(type="petition")
        family = catalog.find(category="family")
        both = catalog.find(type="petition", category="family")

        assert {t.id for t in both} == {t.id for t in petitions} & {t.id for t in family}
        assert {t.name for t in both} == {
            "Petition for Dissolution of Marriage",
            "Child Custody and Parenting Time Petition",
        }

    def test_filter_no_match(self, catalog):
        assert catalog.find(type="decree") == []

    def test_types_and_categories(self, catalog):
        assert catalog.types() == ["application", "complaint", "motion", "notice", "petition", "subpoena"]
        assert "federal-criminal" in catalog.categories()
        assert "protective-order" in catalog.categories()

    def test_templates_are_read_only(self, catalog):
        template = catalog.get("small-claims-complaint")
        with pytest.raises(dataclasses.FrozenInstanceError):
            template.name = "changed"

    def test_duplicate_ids_rejected(self):
        t = LegalTemplate(id="x", name="X", type="notice", category="civil", body="")
        with pytest.raises(ValueError):
            TemplateCatalog([t, t])
