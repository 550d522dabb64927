"""
Tests for the paragraph-scoring Extractor.

Documents are parsed with html5lib, the first parser in the default chain,
so node structure matches what Readability.load() produces.
"""

import pytest
from bs4 import BeautifulSoup

from html_readability.extractor import Extractor, extract, text_length


def soup_of(body: str) -> BeautifulSoup:
    return BeautifulSoup(f"<html><body>{body}</body></html>", "html5lib")


@pytest.fixture
def extractor():
    return Extractor()


def test_content_class_wins_over_plain_container():
    soup = soup_of(
        '<div class="sidebar"><p>Sidebar links and more links</p></div>'
        '<div class="article-content"><p>This is the article body text.</p></div>'
    )
    node = extract(soup)

    assert node is not None
    assert node.get("class") == ["article-content"]


def test_article_content_token_among_other_classes():
    soup = soup_of(
        '<section class="main wide article-content"><p>Only paragraph that matters.</p></section>'
    )
    node = extract(soup)

    assert node.name == "section"
    assert node.find("p").get_text() == "Only paragraph that matters."


def test_comment_only_document_has_no_article():
    soup = soup_of(
        '<div class="comment"><p>Nice post!</p></div>'
        '<div class="comment"><p>Thank you.</p></div>'
    )
    assert extract(soup) is None


def test_document_without_paragraphs_has_no_article():
    assert extract(soup_of("<div>Just a div with text but no paragraphs</div>")) is None


def test_short_paragraphs_score_nothing(extractor):
    candidates = extractor.score(soup_of("<div><p>0123456789</p></div>"))

    assert [score for _, score in candidates] == [0]
    assert extractor.select(candidates) is None


def test_score_adds_paragraph_length_and_class_weight(extractor):
    text = "This paragraph is long enough."
    candidates = extractor.score(soup_of(f'<div class="article-content"><p>{text}</p></div>'))

    assert len(candidates) == 1
    assert candidates[0][1] == 25 + len(text)


def test_length_is_measured_in_utf8_bytes(extractor):
    # four CJK characters are twelve bytes, above the ten-byte cutoff
    candidates = extractor.score(soup_of("<div><p>中文内容</p></div>"))

    assert text_length("中文内容") == 12
    assert candidates[0][1] == 12


def test_scores_accumulate_per_parent(extractor):
    soup = soup_of(
        '<div id="one"><p>First long paragraph.</p><p>Second long paragraph.</p></div>'
        '<div id="two"><p>A single, somewhat longer paragraph.</p></div>'
    )
    candidates = extractor.score(soup)

    assert [node.get("id") for node, _ in candidates] == ["one", "two"]
    assert candidates[0][1] == len("First long paragraph.") + len("Second long paragraph.")
    assert extractor.select(candidates).get("id") == "one"


def test_class_signal_reapplies_for_each_paragraph(extractor):
    soup = soup_of('<div class="post"><p>short</p><p>tiny</p></div>')

    assert extractor.score(soup)[0][1] == 50


def test_class_and_id_signals_both_apply(extractor):
    text = "Body text of the entry."
    soup = soup_of(f'<div class="hentry" id="entry-body"><p>{text}</p></div>')

    assert extractor.score(soup)[0][1] == 25 + 25 + len(text)


def test_negative_class_and_positive_id_accumulate(extractor):
    text = "Body text of the entry."
    soup = soup_of(f'<div class="footer" id="post"><p>{text}</p></div>')

    assert extractor.score(soup)[0][1] == -50 + 25 + len(text)


def test_ties_keep_first_seen_candidate():
    soup = soup_of(
        '<div class="a"><p>Exactly the same text</p></div>'
        '<div class="b"><p>Exactly the same text</p></div>'
    )
    assert extract(soup).get("class") == ["a"]


def test_nested_parent_order_is_first_seen():
    soup = soup_of(
        '<div id="outer"><p>Outer paragraph text.</p>'
        '<div id="inner"><p>Inner paragraph text!</p></div></div>'
    )
    candidates = Extractor().score(soup)

    assert [node.get("id") for node, _ in candidates] == ["outer", "inner"]
    assert extract(soup).get("id") == "outer"


def test_extract_twice_selects_same_node(extractor):
    soup = soup_of('<div class="entry"><p>Repeatable extraction text.</p></div>')
    first = extractor.extract(soup)
    second = extractor.extract(soup)

    assert first is second
    assert extractor.score(soup)[0][1] == 25 + len("Repeatable extraction text.")
    # nothing was written onto the tree
    assert first.attrs == {"class": ["entry"]}


@pytest.mark.parametrize("class_name, weight", [
    ("comment", -50),
    ("user-comments", -50),
    ("MetaData", -50),
    ("site-footer", -50),
    ("footnote", -50),
    ("post", 25),
    ("hentry", 25),
    ("entry", 25),
    ("entry-content", 25),
    ("entrytext", 25),
    ("entry-body", 25),
    ("article", 25),
    ("article-text", 25),
    ("ARTICLE-BODY", 25),
    ("wide post clearfix", 25),
    ("my-post", 0),
    ("postscript", 0),
    ("sidebar", 0),
    ("", 0),
])
def test_class_weight(extractor, class_name, weight):
    assert extractor.class_weight(class_name) == weight


@pytest.mark.parametrize("node_id, weight", [
    ("comments", -50),
    ("footer", -50),
    ("post", 25),
    ("article-content", 25),
    ("entry", 25),
    ("main post", 0),
    ("post-1", 0),
    ("content", 0),
    ("", 0),
])
def test_id_weight(extractor, node_id, weight):
    assert extractor.id_weight(node_id) == weight
