"""
Clarification Engine
====================

Asks the user follow-up questions about a processed document and keeps
the answers.

- Few questions when the classification is confident, more otherwise
- Canned answer suggestions for common questions
- Append-only question/answer history per session
"""

import re
import json
import uuid
import logging
from datetime import datetime
from typing import Any, Dict, List, Optional
from dataclasses import dataclass, field, asdict

from ..errors import ClarificationSessionNotFound, ExtractionServiceError
from ..llm_client import LLMClient

logger = logging.getLogger(__name__)


HIGH_CONFIDENCE_THRESHOLD = 0.85

QUESTIONS_HIGH_CONFIDENCE = 1
QUESTIONS_LOW_CONFIDENCE = 3

CLARIFIER_PROMPT = """
You are a legal assistant.
Document type: {document_type}
Extracted info: {extracted_info}
Confidence: {confidence}
Generate {count} clarifying questions to complete this legal document.
Keep them concise and relevant. Put each question on its own line.
"""

# "1. ", "2) ", "- ", "* ", "• "
_LIST_MARKER = re.compile(r"^\s*(?:\d+\s*[.)]|[-*•])\s*")


def question_count(confidence: float) -> int:
    """1 question above the confidence threshold, else 3"""
    if confidence > HIGH_CONFIDENCE_THRESHOLD:
        return QUESTIONS_HIGH_CONFIDENCE
    return QUESTIONS_LOW_CONFIDENCE


def suggest_answers(question: str) -> Optional[List[str]]:
    """Canned answer choices for common questions, None otherwise"""
    q = (question or "").lower()
    if "jurisdiction" in q:
        return ["Federal", "State", "County"]
    if "filing date" in q:
        return ["Today", "Next Week", "Custom Date"]
    return None


def parse_questions(content: str, limit: int) -> List[str]:
    """Split a model reply into questions, dropping blanks and list markers"""
    questions = []
    for line in (content or "").split("\n"):
        line = _LIST_MARKER.sub("", line).strip()
        if line:
            questions.append(line)
    return questions[:limit]


@dataclass
class QuestionAnswer:
    question: str
    answer: str


class Clarifier:
    """
    Question generator plus the history of answered questions.

    One instance per clarification dialogue.
    """

    def __init__(self, client: LLMClient, model: Optional[str] = None):
        self.client = client
        self.model = model
        self._history: List[QuestionAnswer] = []

    def add_qa(self, question: str, answer: str) -> None:
        self._history.append(QuestionAnswer(question=question, answer=answer))

    def get_history(self) -> List[QuestionAnswer]:
        """History in insertion order (a copy)"""
        return list(self._history)

    suggest_answers = staticmethod(suggest_answers)

    async def generate_questions(
        self,
        document_type: str,
        confidence: float,
        extracted_facts: Dict[str, Any],
    ) -> List[str]:
        """
        Ask the AI service for clarifying questions.

        Raises:
            ExtractionServiceError: Service failed or returned nothing
        """
        count = question_count(confidence)
        prompt = CLARIFIER_PROMPT.format(
            document_type=document_type,
            extracted_info=json.dumps(extracted_facts, ensure_ascii=False, default=str),
            confidence=confidence,
            count=count,
        )

        response = await self.client.generate(
            prompt=prompt,
            max_tokens=400,
            temperature=0.3,
            model=self.model,
        )

        if not response.success:
            raise ExtractionServiceError(f"Clarifying questions failed: {response.error}")

        questions = parse_questions(response.content, count)
        if not questions:
            raise ExtractionServiceError("Clarifying questions failed: No response from AI service")

        logger.info(f"Generated {len(questions)} clarifying questions for {document_type}")
        return questions


# =============================================================================
# Sessions
# =============================================================================

@dataclass
class ClarificationSession:
    """An open clarification dialogue about one document"""
    document_id: str
    document_type: str
    confidence: float
    clarifier: Clarifier
    questions: List[str] = field(default_factory=list)
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    created_at: datetime = field(default_factory=datetime.utcnow)

    def history_dicts(self) -> List[Dict[str, str]]:
        return [asdict(qa) for qa in self.clarifier.get_history()]


class ClarificationSessionStore:
    """In-process registry of open sessions"""

    def __init__(self):
        self._sessions: Dict[str, ClarificationSession] = {}

    def add(self, session: ClarificationSession) -> ClarificationSession:
        self._sessions[session.id] = session
        return session

    def get(self, session_id: str) -> ClarificationSession:
        session = self._sessions.get(session_id)
        if session is None:
            raise ClarificationSessionNotFound(session_id)
        return session

    def close(self, session_id: str) -> ClarificationSession:
        session = self._sessions.pop(session_id, None)
        if session is None:
            raise ClarificationSessionNotFound(session_id)
        return session

    def drop_document(self, document_id: str) -> int:
        """Close every session for a deleted document"""
        stale = [sid for sid, s in self._sessions.items() if s.document_id == document_id]
        for sid in stale:
            del self._sessions[sid]
        return len(stale)

    def __len__(self) -> int:
        return len(self._sessions)
