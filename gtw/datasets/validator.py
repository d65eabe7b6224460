"""
Word list validator.

Checks a corpus (goal pool) and the bots' master word list (defaults to the
corpus) the way the game will read them: every line goes through the same
strip/lowercase/drop-blank rules as `load_corpus`, then each word must be
ASCII letters of length N.

Reported per file: valid count, unique count, SHA-256 of the raw bytes,
invalid words, and how many lines needed case or whitespace normalization.
Normalized lines and duplicates are reported but do not fail validation.
The pair fails when a file is missing or empty, a word is invalid, or the
corpus is not a subset of the word list (a goal outside the list can never
be found by the filtering bots).

Typical use:
    from gtw.datasets import validate_wordlists, pretty_summary
    rep = validate_wordlists(5, "data/words_5.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Optional, Tuple
import hashlib

from .io import read_lines


@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str
    exists: bool
    count: int              # valid words, as the loader would return them
    sha256: str             # empty string if missing
    unique_count: int
    invalid_lines: int      # non-blank lines that are not N ASCII letters
    normalized_lines: int   # lines the loader had to strip or lowercase


@dataclass
class ValidationReport:
    """Top-level validation result for the (corpus, wordlist) pair."""
    N: int
    corpus: FileReport
    wordlist: FileReport
    corpus_subset_wordlist: bool
    passed: bool
    issues: List[str]


def _sha256_file(path: Path) -> str:
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _is_word(w: str, N: int) -> bool:
    return w.isascii() and w.isalpha() and len(w) == N


def _scan_file(path: Path, N: int) -> Tuple[FileReport, List[str]]:
    """Read `path` with the loader's rules and return (report, valid words)."""
    words: List[str] = []
    invalid = normalized = 0
    for raw in read_lines(path):
        w = raw.strip().lower()
        if not w:
            continue
        if w != raw:
            normalized += 1
        if _is_word(w, N):
            words.append(w)
        else:
            invalid += 1

    report = FileReport(
        path=str(path),
        exists=True,
        count=len(words),
        sha256=_sha256_file(path),
        unique_count=len(set(words)),
        invalid_lines=invalid,
        normalized_lines=normalized,
    )
    return report, words


def _missing_report(path: str, exists: bool) -> FileReport:
    return FileReport(path, exists, 0, "", 0, 0, 0)


def _file_issues(label: str, rep: FileReport) -> List[str]:
    issues = []
    if rep.count == 0:
        issues.append(f"{label} file contains 0 valid words")
    if rep.invalid_lines:
        issues.append(f"{label} has {rep.invalid_lines} invalid line(s)")
    if rep.normalized_lines:
        issues.append(f"{label} has {rep.normalized_lines} line(s) normalized "
                      f"(case or whitespace)")
    if rep.count != rep.unique_count:
        issues.append(f"{label} contains duplicate lines")
    return issues


def validate_wordlists(N: int, corpus_path: str, wordlist_path: Optional[str] = None) -> Dict:
    """
    Validate the corpus / bot word list pair for length N.

    Returns a JSON-serializable dict (the ValidationReport fields) for
    manifests. `passed` is True when both files exist, hold at least one
    valid word, have no invalid lines, and the corpus is a subset of the
    word list.
    """
    if wordlist_path is None:
        wordlist_path = corpus_path
    cor_p = Path(corpus_path)
    wl_p = Path(wordlist_path)

    if not cor_p.exists() or not wl_p.exists():
        issues = []
        if not cor_p.exists():
            issues.append(f"corpus file not found: {corpus_path}")
        if not wl_p.exists():
            issues.append(f"word list file not found: {wordlist_path}")
        rep = ValidationReport(
            N=N,
            corpus=_missing_report(corpus_path, cor_p.exists()),
            wordlist=_missing_report(wordlist_path, wl_p.exists()),
            corpus_subset_wordlist=False,
            passed=False,
            issues=issues,
        )
        return asdict(rep)

    cor_report, corpus = _scan_file(cor_p, N)
    issues = _file_issues("corpus", cor_report)
    if wl_p == cor_p:
        wl_report, wordlist = cor_report, corpus
    else:
        wl_report, wordlist = _scan_file(wl_p, N)
        issues += _file_issues("word list", wl_report)

    missing = sorted(set(corpus) - set(wordlist))
    subset_ok = not missing
    if not subset_ok:
        issues.append(f"corpus not subset of word list (e.g., {missing[:5]})")

    passed = (
            subset_ok
            and cor_report.invalid_lines == 0
            and wl_report.invalid_lines == 0
            and cor_report.count > 0
            and wl_report.count > 0
    )

    rep = ValidationReport(
        N=N,
        corpus=cor_report,
        wordlist=wl_report,
        corpus_subset_wordlist=subset_ok,
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        N=5 | corpus=2315 (uniq=2315, sha=abc123...) | wordlist=10657 (uniq=10657, sha=def456...) | corpus⊆wordlist=True | OK
    """
    N = report["N"]
    a = report["corpus"]
    b = report["wordlist"]
    subset = report["corpus_subset_wordlist"]
    status = "OK" if report["passed"] else "FAIL"
    a_sha = (a.get("sha256") or "")[:12]
    b_sha = (b.get("sha256") or "")[:12]
    return (
        f"N={N} | corpus={a['count']} (uniq={a['unique_count']}, sha={a_sha}) "
        f"| wordlist={b['count']} (uniq={b['unique_count']}, sha={b_sha}) "
        f"| corpus⊆wordlist={subset} | {status}"
    )
