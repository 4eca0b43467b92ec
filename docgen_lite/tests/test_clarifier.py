"""
Clarification Engine Tests
"""

import json

import pytest

from docgen_lite.errors import ClarificationSessionNotFound, ExtractionServiceError
from docgen_lite.llm import (
    Clarifier,
    ClarificationSession,
    ClarificationSessionStore,
    QuestionAnswer,
    question_count,
    suggest_answers,
)

from conftest import FakeLLMClient


class TestQuestionCount:

    @pytest.mark.parametrize("confidence,expected", [
        (0.95, 1),
        (0.86, 1),
        (0.85, 3),
        (0.5, 3),
        (0.0, 3),
    ])
    def test_threshold_is_strict(self, confidence, expected):
        assert question_count(confidence) == expected


class TestSuggestAnswers:

    def test_jurisdiction(self):
        assert suggest_answers("Which JURISDICTION applies?") == ["Federal", "State", "County"]

    def test_filing_date(self):
        assert suggest_answers("What is the filing date?") == ["Today", "Next Week", "Custom Date"]

    def test_no_suggestion(self):
        assert suggest_answers("Who is the judge?") is None
        assert Clarifier.suggest_answers("") is None


class TestHistory:

    def test_insertion_order_with_duplicates(self):
        clarifier = Clarifier(FakeLLMClient())
        clarifier.add_qa("Court?", "Hennepin")
        clarifier.add_qa("Court?", "Ramsey")
        clarifier.add_qa("Judge?", "")

        assert clarifier.get_history() == [
            QuestionAnswer("Court?", "Hennepin"),
            QuestionAnswer("Court?", "Ramsey"),
            QuestionAnswer("Judge?", ""),
        ]

    def test_history_is_a_copy(self):
        clarifier = Clarifier(FakeLLMClient())
        clarifier.add_qa("Court?", "Hennepin")

        history = clarifier.get_history()
        history.clear()

        assert len(clarifier.get_history()) == 1


class TestGenerateQuestions:

    @pytest.mark.asyncio
    async def test_low_confidence_asks_three(self, fake_llm):
        clarifier = Clarifier(fake_llm, model="gpt-4o-mini")

        questions = await clarifier.generate_questions("motion", 0.4, {"court": "Hennepin County"})

        assert questions == [
            "What is the filing date?",
            "Which jurisdiction applies?",
            "Who is the judge?",
        ]
        call = fake_llm.calls_of("clarify")[0]
        assert call["model"] == "gpt-4o-mini"
        assert call["temperature"] == 0.3
        assert "Generate 3 clarifying questions" in call["prompt"]
        assert json.dumps({"court": "Hennepin County"}) in call["prompt"]

    @pytest.mark.asyncio
    async def test_high_confidence_caps_at_one(self, fake_llm):
        questions = await Clarifier(fake_llm).generate_questions("motion", 0.95, {})

        assert questions == ["What is the filing date?"]
        assert "Generate 1 clarifying questions" in fake_llm.calls[0]["prompt"]

    @pytest.mark.asyncio
    async def test_list_markers_are_stripped(self):
        client = FakeLLMClient({"clarify": "- Who served the notice?\n* When?\n2) Where?"})

        questions = await Clarifier(client).generate_questions("notice", 0.1, {})

        assert questions == ["Who served the notice?", "When?", "Where?"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("reply", [None, "", "\n  \n"])
    async def test_no_questions_raises(self, reply):
        client = FakeLLMClient({"clarify": reply})

        with pytest.raises(ExtractionServiceError):
            await Clarifier(client).generate_questions("motion", 0.5, {})


class TestSessionStore:

    def _session(self, document_id="doc-1"):
        return ClarificationSession(
            document_id=document_id,
            document_type="motion",
            confidence=0.5,
            clarifier=Clarifier(FakeLLMClient()),
        )

    def test_add_get_close(self):
        store = ClarificationSessionStore()
        session = store.add(self._session())

        assert store.get(session.id) is session
        assert store.close(session.id) is session
        assert len(store) == 0

        with pytest.raises(ClarificationSessionNotFound):
            store.get(session.id)
        with pytest.raises(ClarificationSessionNotFound):
            store.close(session.id)

    def test_drop_document(self):
        store = ClarificationSessionStore()
        store.add(self._session("doc-1"))
        store.add(self._session("doc-1"))
        keep = store.add(self._session("doc-2"))

        assert store.drop_document("doc-1") == 2
        assert len(store) == 1
        assert store.get(keep.id) is keep

    def test_history_dicts(self):
        session = self._session()
        session.clarifier.add_qa("Court?", "Hennepin")

        assert session.history_dicts() == [{"question": "Court?", "answer": "Hennepin"}]
