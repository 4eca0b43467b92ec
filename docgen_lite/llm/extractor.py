"""
Structured Extractor
====================

Maps free document text onto the closed case-fact schema (see facts.py)
with a single JSON-mode AI call.

- Schema keys are coerced to free-text strings; null stays None
- Keys outside the schema are kept in additional_info, never dropped
- No retry and no partial parse: empty content raises
  ExtractionServiceError, non-object content raises MalformedResponseError
"""

import json
import logging
from typing import Any, Dict, Optional
from dataclasses import dataclass, field

from ..errors import ExtractionServiceError, MalformedResponseError
from ..facts import (
    ADDITIONAL_INFO_KEY,
    FACT_FIELDS,
    coerce_fact_value,
    describe_schema,
    empty_fields,
    is_fact_field,
)
from ..llm_client import LLMClient, strip_code_fences, safe_log_content

logger = logging.getLogger(__name__)


EXTRACTION_SYSTEM_PROMPT = (
    "You are a legal document analysis expert. "
    "Extract information accurately and return only valid JSON."
)

EXTRACTION_PROMPT = """
You are a legal document analysis expert. Extract key information from the following legal document text.
Analyze the text and extract each of these facts if present:

{schema}

Rules:
- Copy values exactly as written (dates, amounts, names); do not reformat
- Use null for anything not present in the text
- Put any other relevant legal information in "additionalInfo" as key/value pairs

Return a single JSON object whose keys are exactly the fact names above plus "additionalInfo".

Document text:
{text}
"""


@dataclass
class ExtractedFacts:
    """Schema fields plus the open-ended additional information bag"""
    fields: Dict[str, Optional[str]] = field(default_factory=empty_fields)
    additional_info: Dict[str, Any] = field(default_factory=dict)

    @property
    def filled_count(self) -> int:
        return sum(1 for v in self.fields.values() if v)

    def to_dict(self) -> Dict[str, Any]:
        """Flat camelCase mapping, as sent to the clarifier"""
        data: Dict[str, Any] = {k: v for k, v in self.fields.items() if v is not None}
        if self.additional_info:
            data[ADDITIONAL_INFO_KEY] = dict(self.additional_info)
        return data


def facts_from_payload(payload: Dict[str, Any]) -> ExtractedFacts:
    """Split a decoded response object into schema fields and extras"""
    facts = ExtractedFacts()

    extra = payload.get(ADDITIONAL_INFO_KEY)
    if isinstance(extra, dict):
        facts.additional_info.update(extra)
    elif extra not in (None, "", [], {}):
        facts.additional_info[ADDITIONAL_INFO_KEY] = extra

    for key, value in payload.items():
        if key == ADDITIONAL_INFO_KEY:
            continue
        if is_fact_field(key):
            facts.fields[key] = coerce_fact_value(value)
        elif value is not None:
            facts.additional_info[key] = value

    return facts


class StructuredExtractor:
    """Extract structured case facts from document text"""

    def __init__(self, client: LLMClient, model: Optional[str] = None):
        self.client = client
        self.model = model

    async def extract_facts(self, text: str) -> ExtractedFacts:
        """
        Extract facts from the full document text.

        Raises:
            ExtractionServiceError: Service failed or returned no content
            MalformedResponseError: Content is not a JSON object
        """
        prompt = EXTRACTION_PROMPT.format(schema=describe_schema(), text=text or "")

        response = await self.client.generate(
            prompt=prompt,
            system_prompt=EXTRACTION_SYSTEM_PROMPT,
            json_mode=True,
            max_tokens=4096,
            temperature=0.1,
            model=self.model,
        )

        if not response.success:
            raise ExtractionServiceError(f"AI extraction failed: {response.error}")

        if not response.content or not response.content.strip():
            raise ExtractionServiceError("AI extraction failed: No response from AI service")

        try:
            payload = json.loads(strip_code_fences(response.content))
        except json.JSONDecodeError as e:
            logger.error(f"Extraction response is not JSON: {safe_log_content(response.content)}")
            raise MalformedResponseError(f"AI extraction returned invalid JSON: {e}")

        if not isinstance(payload, dict):
            raise MalformedResponseError(
                f"AI extraction returned {type(payload).__name__}, expected a JSON object"
            )

        facts = facts_from_payload(payload)
        logger.info(
            f"Extracted {facts.filled_count}/{len(FACT_FIELDS)} facts, "
            f"{len(facts.additional_info)} additional"
        )
        return facts
