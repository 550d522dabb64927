"""
Tree Builder: turns normalized markup into a BeautifulSoup document.

Pipeline position: Stage 2 (Preprocessor → TreeBuilder → Extractor → Sanitizer).
Input:  normalized markup string
Output: (BeautifulSoup document, list of warnings)
"""

from typing import Optional

from bs4 import BeautifulSoup

from .config import DEFAULT_PARSERS
from .exceptions import TreeBuilderError
from .logger import get_module_logger

logger = get_module_logger("tree_builder")


class TreeBuilder:
    """
    Best-effort HTML parser with a fallback chain.

    html5lib implements the full WHATWG parsing algorithm and copes with the
    worst markup. If it fails (usually a library bug or a missing install),
    lxml is tried, then Python's built-in html.parser.
    """

    def __init__(self, parsers: Optional[list[str]] = None):
        self.parsers = list(parsers or DEFAULT_PARSERS)

    def _parse(self, markup: str, parser: str) -> BeautifulSoup:
        try:
            return BeautifulSoup(markup, parser)
        except Exception as e:
            # bs4 raises FeatureNotFound for missing builders; the builders
            # themselves raise whatever they like on bad input
            raise TreeBuilderError(
                f"{parser} failed to parse the document: {e}",
                parser=parser,
                details={"error": str(e)}
            )

    def build(self, markup: str) -> tuple[BeautifulSoup, list[str]]:
        """
        Parse markup into a mutable tree.

        Never raises: when every parser fails, an empty document is returned
        so the Extractor later reports the page as not extractable.
        """
        warnings = []

        for parser in self.parsers:
            try:
                soup = self._parse(markup, parser)
                logger.debug(f"Parsed document with {parser}")
                return soup, warnings
            except TreeBuilderError as e:
                logger.warning(e.message)
                warnings.append(f"{e.parser} parsing failed: {e.details.get('error')}")

        logger.error("All parsers failed, using an empty document")
        warnings.append("Parse error: no parser could build a tree")
        return BeautifulSoup("", "html.parser"), warnings
