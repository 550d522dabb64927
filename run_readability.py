#!/usr/bin/env python3
"""
CLI script to extract readable articles from HTML files.

Usage:
    python run_readability.py page.html
    python run_readability.py page1.html page2.html -o articles.json
    python run_readability.py legacy.html --charset gb2312 -v

Settings are read from READABILITY_* environment variables (or a .env file).
"""

import argparse
import json
import sys
from pathlib import Path

# Load .env file automatically
from dotenv import load_dotenv
load_dotenv()

from html_readability.config import ReadabilityConfig
from html_readability.main import Readability
from html_readability.exceptions import ReadabilityError
from html_readability.logger import set_console_stream


def extract_files(readability, files, charset=None):
    """Extract every file, recording per-file success or error."""
    results = []

    for filepath in files:
        path = Path(filepath)
        print(f"Extracting: {path.name}", file=sys.stderr)

        try:
            document = readability.load_file(path, charset=charset)
            article = document.to_article()
            results.append({
                "file": path.name,
                "status": "success",
                "article": article.model_dump()
            })
            print(f"  ✓ {article.word_count} characters, {len(article.images)} images", file=sys.stderr)

        except (ReadabilityError, OSError) as e:
            # One bad file does not stop the batch
            results.append({
                "file": path.name,
                "status": "error",
                "error": getattr(e, "message", str(e))
            })
            print(f"  ✗ Error: {e}", file=sys.stderr)

    return results


def main(argv=None):
    parser = argparse.ArgumentParser(description="Extract the main article from HTML files")
    parser.add_argument("files", nargs="+", help="HTML files to process")
    parser.add_argument("--output", "-o", help="Output JSON file")
    parser.add_argument("--charset", "-c", help="Source charset (default: detect from <meta>)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    config = ReadabilityConfig.from_env()
    if args.verbose:
        config.log_level = "DEBUG"

    # stdout carries the JSON result; log lines go to stderr while we run
    previous_stream = set_console_stream(sys.stderr)
    try:
        readability = Readability(config=config)
        results = extract_files(readability, args.files, charset=args.charset)
    finally:
        if previous_stream is not None:
            set_console_stream(previous_stream)

    # ensure_ascii=False keeps CJK titles and text readable
    output = json.dumps(results, indent=2, ensure_ascii=False)

    if args.output:
        Path(args.output).write_text(output, encoding="utf-8")
        print(f"\nSaved to: {args.output}", file=sys.stderr)
    else:
        print(output)

    return 0 if all(r["status"] == "success" for r in results) else 1


if __name__ == "__main__":
    sys.exit(main())
