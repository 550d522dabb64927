"""
Main orchestrator for the html_readability framework.

Coordinates the pipeline: Preprocessor → TreeBuilder → Extractor → Sanitizer.
load() runs the first two stages eagerly; extraction and sanitization run
lazily, once per load, inside the returned ReadableDocument.
"""

from pathlib import Path
from typing import Optional, Union

from .config import ReadabilityConfig
from .preprocessor import Preprocessor
from .tree_builder import TreeBuilder
from .extractor import Extractor
from .sanitizer import Sanitizer
from .document import ReadableDocument
from .schemas import Article
from .exceptions import DocumentNotLoadedError
from .logger import get_module_logger, setup_logger

logger = get_module_logger("main")


class Readability:
    """
    Main orchestrator for article extraction.

    Holds the most recently loaded ReadableDocument so the accessors can be
    called directly on the instance. Each load() replaces it together with
    every cached result.

    An instance is not safe for concurrent use without external locking;
    separate instances share no state.
    """

    VERSION = "1.0"

    def __init__(self, config: Optional[ReadabilityConfig] = None):
        self.config = config or ReadabilityConfig()
        # Only touch logging when asked to, so a caller's own level survives
        if self.config.log_level is not None or self.config.log_file:
            setup_logger(level=self.config.log_level, log_file=self.config.log_file)

        self.preprocessor = Preprocessor(default_charset=self.config.default_charset)
        self.tree_builder = TreeBuilder(parsers=self.config.parsers)
        self.extractor = Extractor()
        self.sanitizer = Sanitizer()

        self.document: Optional[ReadableDocument] = None

    @classmethod
    def make(
        cls,
        source: Optional[Union[str, bytes]] = None,
        charset: Optional[str] = None,
        config: Optional[ReadabilityConfig] = None
    ) -> "Readability":
        """Create an instance and load source into it when given."""
        readability = cls(config=config)
        if source is not None:
            readability.load(source, charset)
        return readability

    def load(self, source: Union[str, bytes], charset: Optional[str] = None) -> ReadableDocument:
        """
        Load HTML with its charset.

        Args:
            source: Raw HTML as str, or bytes in the declared charset
            charset: Declared source charset (default: config.default_charset)

        Returns:
            The new ReadableDocument, also kept as self.document
        """
        # Drop the previous document first so a failing load leaks nothing
        self.clear()
        logger.info("Loading document")

        # Stage 1: decode + string-level normalization
        preprocessed = self.preprocessor.process(source, charset)

        # Stage 2: build the tree (never raises; may be empty)
        soup, warnings = self.tree_builder.build(preprocessed.normalized_html)

        self.document = ReadableDocument(
            soup=soup,
            source=preprocessed.original_html,
            charset=preprocessed.charset,
            warnings=preprocessed.warnings + warnings,
            extractor=self.extractor,
            sanitizer=self.sanitizer
        )
        return self.document

    def load_file(self, file_path: Union[str, Path], charset: Optional[str] = None) -> ReadableDocument:
        """Load an HTML file, detecting its charset from <meta> when not given."""
        raw_bytes = Path(file_path).read_bytes()
        if charset is None:
            charset = Preprocessor.detect_charset_from_bytes(raw_bytes)
            logger.debug(f"Detected charset {charset} for {file_path}")
        return self.load(raw_bytes, charset)

    def clear(self) -> None:
        self.document = None

    def _current(self) -> ReadableDocument:
        if self.document is None:
            raise DocumentNotLoadedError("No document loaded; call load() first")
        return self.document

    def title(self) -> Optional[str]:
        return self._current().title()

    def date(self) -> Optional[str]:
        return self._current().date()

    def content(self) -> str:
        return self._current().content()

    def text(self) -> str:
        return self._current().text()

    def images(self) -> list[str]:
        return self._current().images()

    def word_count(self) -> int:
        return self._current().word_count()

    def article(self) -> Article:
        return self._current().to_article()


def parse_html(source: Union[str, bytes], charset: Optional[str] = None) -> Article:
    """Convenience function to extract the article from HTML."""
    return Readability().load(source, charset).to_article()


def parse_html_file(file_path: Union[str, Path], charset: Optional[str] = None) -> Article:
    """Convenience function to extract the article from an HTML file."""
    return Readability().load_file(file_path, charset).to_article()
