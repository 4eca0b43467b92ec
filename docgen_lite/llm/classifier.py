"""
Document Classifier
===================

Determines the legal document type and practice-area category from the
opening of the extracted text.

Classification is advisory: any service or parse failure yields the
default classification (unknown / general / 0.0) instead of an error.
"""

import logging
from typing import Optional
from dataclasses import dataclass, asdict

from ..llm_client import LLMClient, decode_json_object, safe_log_content

logger = logging.getLogger(__name__)


CLASSIFIER_MAX_CHARS = 2000

DEFAULT_TYPE = "unknown"
DEFAULT_CATEGORY = "general"


CLASSIFIER_PROMPT = """
Analyze this legal document text and determine its type and category.

Legal document types include:
- petition (petitions for divorce, probate, etc.)
- motion (motion to dismiss, motion for summary judgment, etc.)
- order (court orders)
- decree (final decrees)
- agreement (settlement agreements, custody agreements)
- notice (notice of hearing, etc.)
- brief (legal briefs, memoranda)

Categories include:
- family (divorce, custody, adoption)
- civil (contract disputes, personal injury)
- criminal (criminal cases)
- probate (wills, estates)
- real estate (property disputes)
- business (corporate law)

Return JSON with:
{{
  "type": "document type",
  "category": "legal category",
  "confidence": 0.95
}}

Document text:
{text}
"""


@dataclass
class ClassificationResult:
    """Document type guess"""
    type: str
    category: str
    confidence: float

    @classmethod
    def default(cls) -> "ClassificationResult":
        return cls(type=DEFAULT_TYPE, category=DEFAULT_CATEGORY, confidence=0.0)

    def to_dict(self):
        return asdict(self)


def _clamp_confidence(value) -> float:
    try:
        confidence = float(value)
    except (TypeError, ValueError):
        return 0.0
    if confidence != confidence:  # NaN
        return 0.0
    return max(0.0, min(1.0, confidence))


def _label(value, default: str) -> str:
    if isinstance(value, str) and value.strip():
        return value.strip().lower()
    return default


class DocumentClassifier:
    """Classify a document by type and category"""

    def __init__(self, client: LLMClient, model: Optional[str] = None):
        self.client = client
        self.model = model

    async def classify(self, text: str) -> ClassificationResult:
        """
        Classify document text.

        Only the first CLASSIFIER_MAX_CHARS characters are sent.
        Never raises for service or parse problems.
        """
        prompt = CLASSIFIER_PROMPT.format(text=(text or "")[:CLASSIFIER_MAX_CHARS])

        try:
            response = await self.client.generate(
                prompt=prompt,
                json_mode=True,
                max_tokens=200,
                temperature=0.1,
                model=self.model,
            )
        except Exception as e:
            logger.warning(f"Document classification call failed: {e!r}")
            return ClassificationResult.default()

        if not response.success or not response.content:
            logger.warning(f"Document classification unavailable: {response.error or 'empty content'}")
            return ClassificationResult.default()

        try:
            data = decode_json_object(response.content)
        except ValueError as e:
            logger.warning(f"Classification response not parseable ({e}): {safe_log_content(response.content)}")
            return ClassificationResult.default()

        result = ClassificationResult(
            type=_label(data.get("type"), DEFAULT_TYPE),
            category=_label(data.get("category"), DEFAULT_CATEGORY),
            confidence=_clamp_confidence(data.get("confidence")),
        )
        logger.info(f"Classified document: type={result.type} category={result.category} confidence={result.confidence:.2f}")
        return result
