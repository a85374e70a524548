#!/usr/bin/env python3
"""
Generate a Turkish word list from a dictionary dump in JSON-lines format.

The input is a dump of the TDK Güncel Türkçe Sözlük (one JSON object per
line, headword in the "madde" field), either a local file or a URL.
Multi-word headwords are dropped; the spell-checker validates single tokens.

Usage:
    python scripts/generate_turkish_wordlist.py gts.json
    python scripts/generate_turkish_wordlist.py --url https://example.org/gts.json -o tr-words.txt

Output:
    tr-words.txt (one lower-cased word per line, Turkish alphabetical order)
"""

import argparse
import json
import sys
from pathlib import Path

import httpx

from yazim.utils.turkish import turkish_lower, turkish_sort_key


def read_lines(args) -> list:
    """Read raw JSON lines from a file or URL."""
    if args.url:
        print(f"Downloading {args.url}...")
        response = httpx.get(args.url, timeout=120.0, follow_redirects=True)
        response.raise_for_status()
        return response.text.splitlines()

    with open(args.input, "r", encoding="utf-8") as f:
        return f.read().splitlines()


def main():
    """Generate Turkish word list from a JSON-lines dictionary dump."""
    parser = argparse.ArgumentParser(
        description="Generate Turkish word list from a JSON-lines dictionary dump"
    )
    parser.add_argument("input", nargs="?", help="Input JSON-lines file")
    parser.add_argument("--url", help="Download the dump from this URL instead")
    parser.add_argument(
        "--output", "-o",
        default="tr-words.txt",
        help="Output file path (default: tr-words.txt)"
    )
    args = parser.parse_args()

    if not args.input and not args.url:
        parser.error("either an input file or --url is required")

    lines = read_lines(args)
    print(f"Read {len(lines):,} lines")

    words = set()
    skipped = 0

    for line in lines:
        if not line.strip():
            continue
        try:
            data = json.loads(line)
        except json.JSONDecodeError:
            skipped += 1
            continue

        headword = data.get("madde") if isinstance(data, dict) else None
        if not headword or len(headword.split()) != 1:
            skipped += 1
            continue
        words.add(turkish_lower(headword.strip()))

    print(f"Unique words: {len(words):,} (skipped {skipped:,} lines)")

    sorted_words = sorted(words, key=turkish_sort_key)

    output_file = Path(args.output)
    output_file.parent.mkdir(parents=True, exist_ok=True)

    with open(output_file, "w", encoding="utf-8") as f:
        f.write("\n".join(sorted_words))

    size_mb = output_file.stat().st_size / (1024 * 1024)
    print(f"Done! Wrote {len(sorted_words):,} words ({size_mb:.2f} MB) to {output_file}")

    test_words = ["merhaba", "dünya", "kitap", "ağaç", "ışık"]
    print("\nVerifying test words:")
    for word in test_words:
        status = "✓" if word in words else "✗"
        print(f"  {status} {word}")

    if not words:
        sys.exit(1)


if __name__ == "__main__":
    main()
