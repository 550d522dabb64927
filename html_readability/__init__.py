"""
html_readability

Extracts the main article from an HTML page and exposes it as cleaned
HTML, plain text, a title, a publish date and image URLs.
- Preprocessor: String-level markup normalization
- TreeBuilder:  Best-effort parsing with a parser fallback chain
- Extractor:    Paragraph-scoring selection of the article node
- Sanitizer:    Junk tag and attribute removal on a copy of the article

Public API surface:
  Orchestrator          : Readability, ReadableDocument, parse_html, parse_html_file
  Pipeline stages       : Preprocessor, TreeBuilder, Extractor, Sanitizer
  Data models           : Article, PreprocessResult, ReadabilityConfig
  Error types           : ContentNotExtractableError (fatal), DocumentNotLoadedError
"""

# --- Orchestrator ---
from .main import Readability, parse_html, parse_html_file
from .document import ReadableDocument

# --- Pipeline stage classes ---
from .preprocessor import Preprocessor
from .tree_builder import TreeBuilder
from .extractor import Extractor
from .sanitizer import Sanitizer

# --- Data models and settings ---
from .schemas import Article, PreprocessResult
from .config import ReadabilityConfig

# --- Exceptions (callers should catch these for error handling) ---
from .exceptions import (
    ReadabilityError,
    ContentNotExtractableError,
    DocumentNotLoadedError,
    PreprocessorError,
    TreeBuilderError,
)

__version__ = "1.0.0"
__all__ = [
    "Readability",
    "ReadableDocument",
    "parse_html",
    "parse_html_file",
    "Preprocessor",
    "TreeBuilder",
    "Extractor",
    "Sanitizer",
    "Article",
    "PreprocessResult",
    "ReadabilityConfig",
    "ReadabilityError",
    "ContentNotExtractableError",
    "DocumentNotLoadedError",
    "PreprocessorError",
    "TreeBuilderError",
]
