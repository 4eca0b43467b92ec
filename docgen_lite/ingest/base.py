"""
Ingest Base Types
=================

Unified output type and parser interface for all text extractors.
"""

import re
from abc import ABC, abstractmethod
from typing import List, Dict, Any
from dataclasses import dataclass, field


@dataclass
class ParseResult:
    """
    Unified result from any parser.

    Legal forms depend on line layout (captions, signature blocks), so the
    text keeps its line breaks.
    """
    full_text: str
    page_count: int = 1
    metadata: Dict[str, Any] = field(default_factory=dict)


class DocumentParser(ABC):
    """
    Abstract base class for document parsers.

    Parsers are synchronous and raise ExtractionFailure on engine errors.
    """

    @property
    @abstractmethod
    def supported_extensions(self) -> List[str]:
        """Lowercase extensions with leading dot"""
        pass

    @abstractmethod
    def parse(self, data: bytes, filename: str = None) -> ParseResult:
        """
        Parse document data.

        Args:
            data: Binary document data
            filename: Optional filename for error messages

        Returns:
            ParseResult with the extracted text
        """
        pass

    def can_parse(self, extension: str) -> bool:
        return extension.lower() in self.supported_extensions


_INLINE_WS = re.compile(r"[ \t\f\v\u00a0]+")
_BLANK_RUN = re.compile(r"\n{3,}")


def clean_text(text: str) -> str:
    """
    Normalize extracted text for storage.

    - Remove zero-width characters and BOM
    - Collapse runs of spaces/tabs inside each line
    - Collapse runs of blank lines to a single blank line
    - Trim the result
    """
    if not text:
        return ""

    text = text.replace('\u200b', '')  # Zero-width space
    text = text.replace('\ufeff', '')  # BOM
    text = text.replace('\r\n', '\n').replace('\r', '\n')

    lines = [_INLINE_WS.sub(' ', line).strip() for line in text.split('\n')]
    text = '\n'.join(lines)
    text = _BLANK_RUN.sub('\n\n', text)

    return text.strip()
