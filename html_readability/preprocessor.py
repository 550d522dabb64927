"""
Preprocessor module for string-level HTML normalization.

Runs before any parser sees the markup:
- Strips the embedded charset directive (the declared charset wins)
- Turns doubled <br> tags into paragraph boundaries
- Drops <font> tags but keeps their text
- Removes <script> blocks together with their content

Design principle: NEVER FAIL on bad HTML. A rule that does not match is a no-op.

Pipeline position: Stage 1 (Preprocessor → TreeBuilder → Extractor → Sanitizer).
Input:  raw HTML (str or bytes) plus the declared charset
Output: PreprocessResult with normalized_html, original_html, charset, warnings
"""

import codecs
import re
from typing import Optional, Union

from .schemas import PreprocessResult
from .logger import get_module_logger
from .exceptions import PreprocessorError

logger = get_module_logger("preprocessor")

DEFAULT_CHARSET = "utf-8"

# Only the first directive is removed; a page rarely declares more than one.
CHARSET_PATTERN = re.compile(r"charset=([\w|\-]+);?")

# Legacy markup often separates paragraphs with <br><br> instead of <p>.
# Rewriting them as real paragraph boundaries lets the Extractor score them.
DOUBLE_BR_PATTERN = re.compile(r"<br/?>[ \r\n\s]*<br/?>", re.IGNORECASE)

FONT_TAG_PATTERN = re.compile(r"</?font[^>]*>", re.IGNORECASE)

SCRIPT_BLOCK_PATTERN = re.compile(r"<script(.*?)>(.*?)</script>", re.IGNORECASE | re.DOTALL)


class Preprocessor:
    """
    Rule-based HTML preprocessor.

    Normalizes markup text so the paragraph-based Extractor sees
    informal paragraphs as first-class candidates.
    """

    # WHATWG encoding spec: browsers silently remap these charsets.
    # https://encoding.spec.whatwg.org/#names-and-labels
    # "iso-8859-1" is decoded as "windows-1252" by every browser; the two only
    # differ in 0x80–0x9F, where windows-1252 defines printable characters.
    WHATWG_CHARSET_MAP = {
        'iso-8859-1': 'windows-1252',
        'iso8859-1': 'windows-1252',
        'iso88591': 'windows-1252',
        'latin-1': 'windows-1252',
        'latin1': 'windows-1252',
        'us-ascii': 'windows-1252',
        'ascii': 'windows-1252',
        'iso-8859-9': 'windows-1254',
        'iso-8859-11': 'windows-874',
    }

    @staticmethod
    def detect_charset_from_bytes(raw_bytes: bytes) -> str:
        """
        Detect charset from raw HTML bytes by scanning the first 2048 bytes
        for <meta charset=...> or <meta http-equiv="Content-Type" content="...; charset=...">.

        Applies WHATWG browser charset mapping (e.g. iso-8859-1 → windows-1252)
        so that decoded text matches what a browser actually displays.

        Returns the browser-equivalent charset or 'utf-8' as default.
        """
        # Declarations must appear within the first 1024 bytes; scan 2048.
        head = raw_bytes[:2048]
        head_str = head.decode('ascii', errors='ignore')

        charset = None

        # Modern form first: <meta charset="...">
        m = re.search(r'<meta[^>]+charset=["\']?\s*([^\s"\';>]+)', head_str, re.IGNORECASE)
        if m:
            charset = m.group(1).strip().lower()

        # Legacy: <meta http-equiv="Content-Type" content="...; charset=...">
        if not charset:
            m = re.search(
                r'<meta[^>]+content=["\'][^"\']*charset=([^\s"\';>]+)',
                head_str, re.IGNORECASE
            )
            if m:
                charset = m.group(1).strip().lower()

        if not charset:
            return DEFAULT_CHARSET

        return Preprocessor.WHATWG_CHARSET_MAP.get(charset, charset)

    def __init__(self, default_charset: str = DEFAULT_CHARSET):
        self.default_charset = default_charset

    def _lookup_charset(self, charset: Optional[str]) -> str:
        """Resolve a charset label, raising PreprocessorError when Python has no codec."""
        label = (charset or self.default_charset).strip().lower()
        try:
            codecs.lookup(label)
        except LookupError as e:
            raise PreprocessorError(
                f"Unknown charset: {label}",
                details={"charset": label, "error": str(e)}
            )
        return label

    def decode(self, source: Union[str, bytes], charset: Optional[str] = None) -> tuple[str, str, list[str]]:
        """
        Turn the caller's source into text.

        Args:
            source: Markup as str, or bytes in the declared charset
            charset: Declared source charset (default: the configured default)

        Returns:
            Tuple of (text, charset actually used, list of warnings)
        """
        warnings = []

        try:
            label = self._lookup_charset(charset)
        except PreprocessorError as e:
            logger.warning(f"{e.message}, falling back to {self.default_charset}")
            warnings.append(f"{e.message}, used {self.default_charset}")
            label = self.default_charset

        if isinstance(source, bytes):
            # Undecodable bytes become U+FFFD instead of aborting the load
            text = source.decode(label, errors='replace')
        else:
            text = source or ""

        return text, label, warnings

    def normalize(self, html: str) -> tuple[str, list[str]]:
        """
        Apply the string-level rules in order.

        Args:
            html: Decoded markup

        Returns:
            Tuple of (normalized markup, list of warnings)
        """
        warnings = []
        normalized = html

        # 1. The declared charset wins over the one embedded in the markup
        if CHARSET_PATTERN.search(normalized):
            normalized = CHARSET_PATTERN.sub("", normalized, count=1)
            warnings.append("Removed embedded charset directive")

        # 2. Doubled-up <br> tags become paragraph boundaries
        normalized, count = DOUBLE_BR_PATTERN.subn("</p><p>", normalized)
        if count:
            warnings.append(f"Converted {count} doubled <br> tags to paragraphs")

        # 3. Font tags go, their text stays
        normalized, count = FONT_TAG_PATTERN.subn("", normalized)
        if count:
            warnings.append(f"Removed {count} font tags")

        # 4. Script blocks go entirely, content included
        normalized, count = SCRIPT_BLOCK_PATTERN.subn("", normalized)
        if count:
            warnings.append(f"Removed {count} script blocks")

        logger.debug(f"Normalization complete. {len(warnings)} rules applied.")
        return normalized.strip(), warnings

    def process(self, source: Union[str, bytes], charset: Optional[str] = None) -> PreprocessResult:
        """
        Decode and normalize raw HTML.

        Args:
            source: Raw HTML as str or bytes
            charset: Declared source charset

        Returns:
            PreprocessResult ready for the tree builder
        """
        text, label, warnings = self.decode(source, charset)
        normalized, rule_warnings = self.normalize(text)
        warnings.extend(rule_warnings)

        return PreprocessResult(
            normalized_html=normalized,
            original_html=text,
            charset=label,
            warnings=warnings
        )


def preprocess(source: Union[str, bytes], charset: Optional[str] = None) -> PreprocessResult:
    """Convenience function to preprocess HTML."""
    return Preprocessor().process(source, charset)
