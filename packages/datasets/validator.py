"""
Lexicon validator.

What this module does:
- Check a lexicon file (one word per line) against the Word rules:
  exactly 5 characters, lowercase a-z only.
- Count blank lines, invalid lines and duplicates; compute SHA-256 of the
  raw file.
- Optionally check that an answers file is a subset of the lexicon.
- Return a machine-readable dict (for manifests) and a one-line summary.

Unlike LexiconIndex.build, which stops at the first bad entry, this walks
the whole file so every problem is reported at once.

Typical use:
    from packages.datasets import validate_lexicon, pretty_summary
    rep = validate_lexicon("data/lexicon.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from packages.engine import InvalidWord, parse_word

# how many offending lines to quote in a report
MAX_EXAMPLES = 5


@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str
    exists: bool
    count: int             # number of VALID words (duplicates included)
    unique_count: int      # unique valid words
    invalid_lines: int     # lines that fail parse_word (blank lines excluded)
    blank_lines: int
    sha256: str            # of the raw bytes, "" if missing
    invalid_examples: List[str] = field(default_factory=list)


@dataclass
class ValidationReport:
    lexicon: FileReport
    answers: FileReport | None
    answers_subset_lexicon: bool | None
    passed: bool
    issues: List[str]


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _check_file(path: Path) -> Tuple[FileReport, List[str]]:
    """Scan one word file. Returns (report, valid words in file order)."""
    if not path.exists():
        return FileReport(str(path), False, 0, 0, 0, 0, ""), []

    valid: List[str] = []
    invalid = blank = 0
    examples: List[str] = []
    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if not w:
                blank += 1
                continue
            try:
                valid.append(parse_word(w))
            except InvalidWord as e:
                invalid += 1
                if len(examples) < MAX_EXAMPLES:
                    examples.append(str(e))

    rep = FileReport(
        path=str(path),
        exists=True,
        count=len(valid),
        unique_count=len(set(valid)),
        invalid_lines=invalid,
        blank_lines=blank,
        sha256=_sha256_file(path),
        invalid_examples=examples,
    )
    return rep, valid


def _issues_for(label: str, rep: FileReport) -> List[str]:
    if not rep.exists:
        return [f"{label} file not found: {rep.path}"]
    issues = []
    if rep.count == 0:
        issues.append(f"{label} file contains 0 valid words")
    if rep.invalid_lines:
        issues.append(f"{label} has {rep.invalid_lines} invalid line(s), e.g. {rep.invalid_examples}")
    if rep.count != rep.unique_count:
        issues.append(f"{label} contains {rep.count - rep.unique_count} duplicate line(s)")
    return issues


def validate_lexicon(lexicon_path: str, answers_path: str | None = None) -> Dict:
    """
    Validate a lexicon file and, optionally, an answers file against it.

    Pass criteria (strict): lexicon exists, is non-empty, has no invalid
    lines; if answers are given, the same holds for them and every answer
    is in the lexicon. Duplicates are reported but do not fail the check
    (the index collapses them).
    """
    lex_rep, lex_words = _check_file(Path(lexicon_path))
    issues = _issues_for("lexicon", lex_rep)

    ans_rep = None
    subset_ok = None
    if answers_path is not None:
        ans_rep, ans_words = _check_file(Path(answers_path))
        issues += _issues_for("answers", ans_rep)
        if lex_rep.exists and ans_rep.exists:
            missing = sorted(set(ans_words) - set(lex_words))
            subset_ok = not missing
            if missing:
                issues.append(f"answers not subset of lexicon (e.g., {missing[:MAX_EXAMPLES]})")

    def _ok(rep: FileReport | None) -> bool:
        return rep is None or (rep.exists and rep.count > 0 and rep.invalid_lines == 0)

    passed = _ok(lex_rep) and _ok(ans_rep) and subset_ok is not False

    return asdict(ValidationReport(
        lexicon=lex_rep,
        answers=ans_rep,
        answers_subset_lexicon=subset_ok,
        passed=passed,
        issues=issues,
    ))


def pretty_summary(report: Dict) -> str:
    """
    Compact one-liner for the console, e.g.
        lexicon=12972 (uniq=12972, sha=abc123...) | answers=2315 (uniq=2315, sha=def456...) | answers⊆lexicon=True | OK
    """
    lex = report["lexicon"]
    parts = [f"lexicon={lex['count']} (uniq={lex['unique_count']}, sha={(lex['sha256'] or '')[:12]})"]
    ans = report.get("answers")
    if ans is not None:
        parts.append(f"answers={ans['count']} (uniq={ans['unique_count']}, sha={(ans['sha256'] or '')[:12]})")
        parts.append(f"answers⊆lexicon={report['answers_subset_lexicon']}")
    parts.append("OK" if report["passed"] else "FAIL")
    return " | ".join(parts)
