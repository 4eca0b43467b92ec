"""
Document Classifier Tests
"""

import pytest

from docgen_lite.llm import CLASSIFIER_MAX_CHARS, ClassificationResult, DocumentClassifier

from conftest import FakeLLMClient


class TestDocumentClassifier:

    @pytest.mark.asyncio
    async def test_parses_reply(self):
        client = FakeLLMClient({"classify": {"type": "Petition", "category": " Family ", "confidence": 0.9}})

        result = await DocumentClassifier(client).classify("PETITION FOR DISSOLUTION OF MARRIAGE")

        assert result == ClassificationResult(type="petition", category="family", confidence=0.9)
        call = client.calls_of("classify")[0]
        assert call["json_mode"] is True
        assert call["temperature"] == 0.1

    @pytest.mark.asyncio
    async def test_only_leading_text_is_sent(self):
        client = FakeLLMClient({"classify": {"type": "motion", "category": "civil", "confidence": 0.5}})
        text = "A" * CLASSIFIER_MAX_CHARS + "TAIL-MARKER"

        await DocumentClassifier(client).classify(text)

        prompt = client.calls[0]["prompt"]
        assert "A" * CLASSIFIER_MAX_CHARS in prompt
        assert "TAIL-MARKER" not in prompt

    @pytest.mark.asyncio
    @pytest.mark.parametrize("reply", [
        None, "", "the document is a motion", RuntimeError("connection reset"),
    ])
    async def test_failures_yield_default(self, reply):
        client = FakeLLMClient({"classify": reply})

        result = await DocumentClassifier(client).classify("some text")

        assert result == ClassificationResult.default()
        assert result.to_dict() == {"type": "unknown", "category": "general", "confidence": 0.0}

    @pytest.mark.asyncio
    async def test_json_inside_prose_is_accepted(self):
        reply = 'Sure! ```json\n{"type": "notice", "category": "civil", "confidence": 0.7}\n```'
        client = FakeLLMClient({"classify": reply})

        result = await DocumentClassifier(client).classify("NOTICE OF APPEAL")

        assert result.type == "notice"
        assert result.confidence == 0.7

    @pytest.mark.asyncio
    @pytest.mark.parametrize("raw,expected", [
        (1.7, 1.0),
        (-0.2, 0.0),
        ("0.4", 0.4),
        ("high", 0.0),
        (None, 0.0),
        (float("nan"), 0.0),
    ])
    async def test_confidence_is_clamped(self, raw, expected):
        reply = {"type": "order", "category": "family", "confidence": raw}
        client = FakeLLMClient({"classify": reply})

        result = await DocumentClassifier(client).classify("ORDER")

        assert result.confidence == expected

    @pytest.mark.asyncio
    async def test_missing_labels_fall_back(self):
        client = FakeLLMClient({"classify": {"confidence": 0.3}})

        result = await DocumentClassifier(client).classify("text")

        assert result.type == "unknown"
        assert result.category == "general"
        assert result.confidence == 0.3
