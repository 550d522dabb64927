"""
Stateless readers over a loaded document.

None of these hold state or cache anything; ReadableDocument decides
which tree or string each one is given.
"""

import re
from typing import Optional

from bs4 import BeautifulSoup, Tag

TITLE_DELIMITER = " - "

# YYYY<sep>MM<sep>DD where a separator is whitespace, a hyphen or a CJK
# year/month marker, e.g. "2016-11-05" or "2016年11月05".
DATE_PATTERN = re.compile(r"(\d{4}[年\s-]+\d{1,2}[月\s-]+\d{1,2})", re.DOTALL)
MONTH_MARKER = "月"
DAY_MARKER = "日"


def get_title(soup: BeautifulSoup) -> Optional[str]:
    """
    Title of the document, without the site name.

    "Site Name - Article Headline" becomes "Article Headline"; only the
    segment after the last delimiter is kept.
    """
    title_node = soup.find("title")
    if title_node is None:
        return None

    title = title_node.get_text().strip()
    if TITLE_DELIMITER in title:
        return title.rsplit(TITLE_DELIMITER, 1)[-1]
    return title


def get_date(source: str) -> Optional[str]:
    """First date-like string in the raw source, or None."""
    match = DATE_PATTERN.search(source or "")
    if not match:
        return None

    date = match.group(1)
    if MONTH_MARKER in date:
        return date + DAY_MARKER
    return date


def get_images(node: Tag) -> list[str]:
    """src of every <img> under node, in document order ("" when missing)."""
    return [image.get("src", "") for image in node.find_all("img")]


def get_text(content: str) -> str:
    """Plain text of a markup fragment."""
    return BeautifulSoup(content, "html.parser").get_text().strip()


def word_count(text: str) -> int:
    """Character count of text; not a count of whitespace-separated words."""
    return len(text)
