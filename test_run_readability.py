"""
Tests for the run_readability command-line script.

Results are read back either from the --output file or from stdout, which
carries nothing but the JSON list.
"""

import json
import logging

import run_readability
from html_readability.logger import setup_logger


ARTICLE_HTML = (
    "<html><head><title>Daily Paper - Budget vote passes</title></head>"
    '<body><div class="post"><p>The council approved the budget on 2023-04-18 after a long debate.</p>'
    '<img src="council.jpg"></div></body></html>'
)


def test_extracts_article_to_output_file(tmp_path):
    page = tmp_path / "page.html"
    page.write_text(ARTICLE_HTML, encoding="utf-8")
    output = tmp_path / "out.json"

    exit_code = run_readability.main([str(page), "-o", str(output)])
    results = json.loads(output.read_text(encoding="utf-8"))

    assert exit_code == 0
    assert results[0]["file"] == "page.html"
    assert results[0]["status"] == "success"
    article = results[0]["article"]
    assert article["title"] == "Budget vote passes"
    assert article["date"] == "2023-04-18"
    assert article["images"] == ["council.jpg"]
    assert article["word_count"] == len(article["text"])


def test_failures_are_reported_per_file(tmp_path):
    good = tmp_path / "good.html"
    good.write_text(ARTICLE_HTML, encoding="utf-8")
    empty = tmp_path / "empty.html"
    empty.write_text("<html><body><div>no paragraphs</div></body></html>", encoding="utf-8")
    missing = tmp_path / "missing.html"
    output = tmp_path / "out.json"

    exit_code = run_readability.main([str(empty), str(missing), str(good), "-o", str(output)])
    results = json.loads(output.read_text(encoding="utf-8"))

    assert exit_code == 1
    assert [r["status"] for r in results] == ["error", "error", "success"]
    assert results[0]["error"] == "Unable to parse this page for content."


def test_explicit_charset_overrides_detection(tmp_path):
    page = tmp_path / "legacy.html"
    page.write_bytes(
        '<html><head><title>旧闻</title></head><body>'
        '<div class="entry"><p>这是一篇老式编码的网页文章。</p></div></body></html>'.encode("gbk")
    )
    output = tmp_path / "out.json"

    run_readability.main([str(page), "--charset", "gbk", "-o", str(output)])
    article = json.loads(output.read_text(encoding="utf-8"))[0]["article"]

    assert article["charset"] == "gbk"
    assert article["title"] == "旧闻"
    assert article["text"] == "这是一篇老式编码的网页文章。"


def test_stdout_is_pure_json(tmp_path, capsys):
    page = tmp_path / "page.html"
    page.write_text(ARTICLE_HTML, encoding="utf-8")

    package_logger = logging.getLogger("html_readability")
    previous_level = package_logger.level
    try:
        exit_code = run_readability.main([str(page), "--verbose"])
    finally:
        setup_logger(level=previous_level)
    captured = capsys.readouterr()
    results = json.loads(captured.out)

    assert exit_code == 0
    assert results[0]["article"]["title"] == "Budget vote passes"
    assert "Extracting: page.html" in captured.err
    assert "html_readability.main - INFO - Loading document" in captured.err


def test_console_stream_is_restored_after_run(tmp_path):
    page = tmp_path / "page.html"
    page.write_text(ARTICLE_HTML, encoding="utf-8")
    handler = next(
        h for h in logging.getLogger("html_readability").handlers
        if type(h) is logging.StreamHandler
    )
    before = handler.stream

    run_readability.main([str(page), "-o", str(tmp_path / "out.json")])

    assert handler.stream is before
