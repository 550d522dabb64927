"""
Custom exceptions for the html_readability framework.

Error philosophy:
  - ContentNotExtractableError → FAIL HARD: no article node, content accessors stop.
  - DocumentNotLoadedError     → FAIL HARD: an accessor was called before load().
  - PreprocessorError          → NON-FATAL: markup passes through, warning logged.
  - TreeBuilderError           → NON-FATAL: an empty document is used, warning logged.

Title and date lookups are not errors at all: a miss returns None.
"""

from typing import Optional


class ReadabilityError(Exception):
    """Base exception for all html_readability errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


# --- FAIL HARD ---

class ContentNotExtractableError(ReadabilityError):
    """
    Raised when no article node can be selected from the document.

    Distinguishes "found nothing" from "the page genuinely had no text":
    content(), text(), word_count() and images() raise this instead of
    returning an empty value.
    """

    DEFAULT_MESSAGE = "Unable to parse this page for content."

    def __init__(self, message: str = DEFAULT_MESSAGE, details: Optional[dict] = None):
        super().__init__(message, details)

    def to_response(self) -> dict:
        """Convert to a JSON-friendly error record."""
        return {
            "error": "ContentNotExtractableError",
            "message": self.message,
            "details": self.details
        }


class DocumentNotLoadedError(ReadabilityError):
    """Raised when an accessor is used before any source was loaded."""
    pass


# --- NON-FATAL: recorded as warnings, never raised out of the pipeline ---

class PreprocessorError(ReadabilityError):
    """
    Raised when the preprocessor cannot decode its input.

    Non-fatal - the default charset is used and a warning logged.
    """
    pass


class TreeBuilderError(ReadabilityError):
    """Raised when a single parser backend fails to build a tree."""

    def __init__(
        self,
        message: str,
        parser: str,
        details: Optional[dict] = None
    ):
        super().__init__(message, details)
        self.parser = parser  # "html5lib", "lxml" or "html.parser"
