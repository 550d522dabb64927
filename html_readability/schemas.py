"""
Pydantic schemas defining the contracts between modules.

PreprocessResult: Contract from the Preprocessor to the Tree Builder
Article: Serialisable summary of one loaded document

Data flow through the pipeline:
  Preprocessor → PreprocessResult → TreeBuilder → Extractor → Sanitizer
  ReadableDocument.to_article() → Article
"""

from typing import Optional
from pydantic import BaseModel, Field


class PreprocessResult(BaseModel):
    """Output of the Preprocessor."""
    normalized_html: str                # Markup handed to the tree builder
    original_html: str                  # Decoded source, untouched (date lookup reads this)
    charset: str = "utf-8"              # Declared source charset
    warnings: list[str] = Field(default_factory=list)


class Article(BaseModel):
    """The readable view of one document, the final pipeline product."""
    title: Optional[str] = None
    date: Optional[str] = None
    content: str = Field(description="Sanitized article markup")
    text: str = Field(description="Article text with all markup stripped")
    images: list[str] = Field(default_factory=list)
    word_count: int = Field(default=0, description="Character length of text")
    charset: str = "utf-8"
    warnings: list[str] = Field(default_factory=list)  # Non-fatal issues from every stage
