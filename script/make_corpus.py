"""
Build a corpus file from a dictionary: keep the N-letter words only.

Features:
- Keeps words made of ASCII letters with exact length N, lowercased.
- Preserves original order by default (stable dedupe).
- Optional sorting AFTER dedupe (alphabetical).
- Writes to --out (one word per line, UTF-8, no header).

Usage:
    python -m script.make_corpus --in /usr/share/dict/words --out data/words_5.txt --N 5
"""

import argparse
from pathlib import Path

from gtw.datasets.io import read_lines, write_lines


def unique_preserve_order(lines: list[str]) -> list[str]:
    seen, out = set(), []
    for s in lines:
        if s not in seen:
            seen.add(s)
            out.append(s)
    return out


def extract_words(lines: list[str], N: int) -> list[str]:
    """Lowercased N-letter ASCII words, in input order (duplicates kept)."""
    out = []
    for raw in lines:
        w = raw.strip().lower()
        if len(w) == N and w.isascii() and w.isalpha():
            out.append(w)
    return out


def main():
    ap = argparse.ArgumentParser(description="Extract an N-letter corpus from a dictionary file.")
    ap.add_argument("--in", dest="inp", required=True, help="input dictionary (one word per line)")
    ap.add_argument("--out", dest="out", required=True, help="output corpus file")
    ap.add_argument("--N", type=int, default=5, help="word length")
    ap.add_argument("--keep-duplicates", action="store_true", help="skip the dedupe step")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically (otherwise keep input order)")
    args = ap.parse_args()

    inp = Path(args.inp)
    lines = read_lines(inp)
    words = extract_words(lines, args.N)
    if not args.keep_duplicates:
        words = unique_preserve_order(words)
    if args.sort:
        words = sorted(words)

    write_lines(words, args.out)
    print(f"Input: {inp} ({len(lines)} lines) -> Output: {args.out} ({len(words)} words)")


if __name__ == "__main__":
    main()
