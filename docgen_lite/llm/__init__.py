"""
LLM Module
==========

AI-backed document analysis built on the shared LLMClient.

Components:
- DocumentClassifier: document type / category / confidence (never raises)
- StructuredExtractor: closed-schema case facts from full text
- Clarifier: follow-up questions and answer history

Usage:
    from docgen_lite.llm import DocumentClassifier, StructuredExtractor

    classifier = DocumentClassifier(client)
    result = await classifier.classify(text)
"""

from .classifier import DocumentClassifier, ClassificationResult, CLASSIFIER_MAX_CHARS
from .extractor import StructuredExtractor, ExtractedFacts, facts_from_payload
from .clarifier import (
    Clarifier,
    ClarificationSession,
    ClarificationSessionStore,
    QuestionAnswer,
    HIGH_CONFIDENCE_THRESHOLD,
    question_count,
    suggest_answers,
)

__all__ = [
    # Classifier
    "DocumentClassifier",
    "ClassificationResult",
    "CLASSIFIER_MAX_CHARS",
    # Extractor
    "StructuredExtractor",
    "ExtractedFacts",
    "facts_from_payload",
    # Clarifier
    "Clarifier",
    "ClarificationSession",
    "ClarificationSessionStore",
    "QuestionAnswer",
    "HIGH_CONFIDENCE_THRESHOLD",
    "question_count",
    "suggest_answers",
]
