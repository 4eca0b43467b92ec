"""
Structured Extractor Tests
"""

import pytest

from docgen_lite.errors import ExtractionServiceError, MalformedResponseError
from docgen_lite.facts import FACT_FIELDS, coerce_fact_value
from docgen_lite.llm import StructuredExtractor, facts_from_payload

from conftest import FakeLLMClient, EXTRACTION_REPLY


class TestExtractFacts:

    @pytest.mark.asyncio
    async def test_schema_fields_and_extras(self):
        client = FakeLLMClient({"extract": EXTRACTION_REPLY})

        facts = await StructuredExtractor(client).extract_facts("Case No. 24-CV-100 ...")

        assert facts.fields["caseNumber"] == "24-CV-100"
        assert facts.fields["court"] == "Hennepin County"
        assert facts.fields["attorneyName"] is None
        assert facts.fields["judge"] is None
        assert set(facts.fields) == set(FACT_FIELDS)
        assert facts.additional_info == {"hearingRoom": "Courtroom 1655"}
        assert facts.filled_count == 4

    @pytest.mark.asyncio
    async def test_request_shape(self):
        client = FakeLLMClient({"extract": {}})

        await StructuredExtractor(client, model="gpt-4o").extract_facts("ORDER FOR PROTECTION")

        call = client.calls_of("extract")[0]
        assert call["json_mode"] is True
        assert call["temperature"] == 0.1
        assert call["model"] == "gpt-4o"
        assert "ORDER FOR PROTECTION" in call["prompt"]
        assert "caseNumber" in call["prompt"]

    @pytest.mark.asyncio
    async def test_unknown_keys_are_kept(self):
        client = FakeLLMClient({"extract": {
            "court": "Ramsey County",
            "bailAmount": "$5,000",
            "cosigner": None,
            "additionalInfo": {"courtroom": "Room 4"},
        }})

        facts = await StructuredExtractor(client).extract_facts("text")

        assert facts.fields["court"] == "Ramsey County"
        assert facts.additional_info == {"courtroom": "Room 4", "bailAmount": "$5,000"}

    @pytest.mark.asyncio
    async def test_fenced_json_is_accepted(self):
        client = FakeLLMClient({"extract": '```json\n{"caseNumber": "62-FA-23-11"}\n```'})

        facts = await StructuredExtractor(client).extract_facts("text")

        assert facts.fields["caseNumber"] == "62-FA-23-11"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("reply", [None, "", "   "])
    async def test_no_content_raises(self, reply):
        client = FakeLLMClient({"extract": reply})

        with pytest.raises(ExtractionServiceError):
            await StructuredExtractor(client).extract_facts("text")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("reply", ["not json at all", "[1, 2, 3]", '"just a string"'])
    async def test_malformed_content_raises(self, reply):
        client = FakeLLMClient({"extract": reply})

        with pytest.raises(MalformedResponseError):
            await StructuredExtractor(client).extract_facts("text")


class TestFactsFromPayload:

    def test_values_are_coerced(self):
        facts = facts_from_payload({
            "damageAmount": 1500,
            "sentenceCompleted": True,
            "heirsDevisees": ["Ann Lee", "", "Bo Lee"],
            "petitionerName": "  Jane Doe  ",
            "judge": "",
        })

        assert facts.fields["damageAmount"] == "1500"
        assert facts.fields["sentenceCompleted"] == "Yes"
        assert facts.fields["heirsDevisees"] == "Ann Lee; Bo Lee"
        assert facts.fields["petitionerName"] == "Jane Doe"
        assert facts.fields["judge"] is None

    def test_object_values_are_flattened(self):
        facts = facts_from_payload({
            "petitionerAddress": {"street": "1 Main St", "city": "Minneapolis", "zip": 55401},
            "heirsDevisees": [{"name": "Ann Lee"}, {"name": "Bo Lee"}],
        })

        assert facts.fields["petitionerAddress"] == "1 Main St; Minneapolis; 55401"
        assert facts.fields["heirsDevisees"] == "Ann Lee; Bo Lee"
        assert facts.additional_info == {}


    def test_non_dict_additional_info_is_preserved(self):
        facts = facts_from_payload({"additionalInfo": "served by mail"})
        assert facts.additional_info == {"additionalInfo": "served by mail"}

    def test_to_dict_is_flat(self):
        facts = facts_from_payload({"court": "Hennepin County", "additionalInfo": {"room": "1655"}})
        assert facts.to_dict() == {"court": "Hennepin County", "additionalInfo": {"room": "1655"}}

    @pytest.mark.parametrize("value,expected", [
        (None, None),
        ("", None),
        ("null", "null"),
        (2.5, "2.5"),
        (False, "No"),
        ({"nested": 1}, "1"),
        ({"street": None, "unit": ""}, None),
    ])
    def test_coerce_fact_value(self, value, expected):
        assert coerce_fact_value(value) == expected
