"""
Candidate-list validator for beehive.

What this module does:
- Validate a candidate-puzzle file (records separated by newline or ';').
- Every record's puzzle must be a legal PuzzleSpec (7 distinct letters).
- Detect duplicates; compute SHA-256 of the raw file.
- Optionally check each puzzle against a dictionary: it must admit at least
  one pangram, and we record the min/max playable word counts.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from beehive.datasets import validate_candidates, pretty_summary
    rep = validate_candidates("data/candidates.txt", dictionary_path="data/words.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List, Optional
import hashlib

from beehive.engine.puzzle import PuzzleSpec
from beehive.engine import wordlist  # module import: wordlist itself reads through .io
from beehive.errors import PuzzleError
from .io import read_candidates, read_words


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class DictionaryCheck:
    """Per-dictionary diagnostics (only filled when a dictionary is given)."""
    path: str
    token_count: int
    no_pangram: int                  # puzzles with no pangram in the dictionary
    min_words: int                   # fewest playable words over all puzzles
    max_words: int                   # most playable words over all puzzles
    examples: List[str] = field(default_factory=list)  # a few puzzles without a pangram


@dataclass
class CandidateReport:
    path: str
    exists: bool
    count: int             # valid puzzles
    unique_count: int      # valid puzzles after dedupe (by canonical letters)
    sha256: str            # SHA-256 of raw file bytes (empty string if missing)
    invalid_records: int
    centers: List[str]     # distinct center letters, sorted
    dictionary: Optional[DictionaryCheck]
    passed: bool
    issues: List[str]


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _parse_puzzles(records: List[str]) -> tuple[List[PuzzleSpec], int]:
    valid: List[PuzzleSpec] = []
    invalid = 0
    for rec in records:
        try:
            valid.append(PuzzleSpec.create(rec))
        except PuzzleError:
            invalid += 1
    return valid, invalid


def _check_dictionary(puzzles: List[PuzzleSpec], dictionary_path: str) -> DictionaryCheck:
    words = read_words(dictionary_path)
    no_pangram: List[str] = []
    sizes: List[int] = []

    for spec in puzzles:
        table = wordlist.load_words(spec, words)
        sizes.append(len(table))
        if not any(e.is_pangram for e in table.values()):
            no_pangram.append(str(spec))

    return DictionaryCheck(
        path=str(dictionary_path),
        token_count=len(words),
        no_pangram=len(no_pangram),
        min_words=min(sizes) if sizes else 0,
        max_words=max(sizes) if sizes else 0,
        examples=no_pangram[:5],
    )


# -----------------------------
# Public API
# -----------------------------

def validate_candidates(path: str, dictionary_path: str | None = None) -> Dict:
    """
    Validate a candidate-puzzle list.

    Parameters
    ----------
    path : str
        Candidate file (records separated by newline or ';').
    dictionary_path : str, optional
        Word list to check pangram availability against. Checking is
        O(puzzles * dictionary), so leave it out for quick format checks.

    Returns
    -------
    Dict
        JSON-serializable CandidateReport; `passed` requires a non-empty list,
        no invalid records and (with a dictionary) a pangram for every puzzle.

    Raises
    ------
    SourceUnavailable if `dictionary_path` is given but can't be read.
    """
    p = Path(path)
    issues: List[str] = []

    if not p.exists():
        issues.append(f"candidate file not found: {path}")
        rep = CandidateReport(str(p), False, 0, 0, "", 0, [], None, False, issues)
        return asdict(rep)

    puzzles, invalid = _parse_puzzles(read_candidates(p))
    unique = {spec.letters for spec in puzzles}
    centers = sorted({spec.center for spec in puzzles})

    if not puzzles:
        issues.append("candidate file contains 0 valid puzzles")
    if invalid:
        issues.append(f"candidates has {invalid} invalid record(s)")
    if len(unique) != len(puzzles):
        issues.append("candidates contains duplicate puzzles")
    if len(centers) == 1:
        issues.append(f"every puzzle uses center letter '{centers[0]}'")

    dict_check = None
    if dictionary_path is not None:
        dict_check = _check_dictionary(puzzles, dictionary_path)
        if dict_check.no_pangram:
            issues.append(
                f"{dict_check.no_pangram} puzzle(s) have no pangram (e.g., {dict_check.examples})")

    # Duplicates and a single center letter are warnings, not failures
    passed = (
            bool(puzzles)
            and invalid == 0
            and (dict_check is None or dict_check.no_pangram == 0)
    )

    rep = CandidateReport(
        path=str(p),
        exists=True,
        count=len(puzzles),
        unique_count=len(unique),
        sha256=_sha256_file(p),
        invalid_records=invalid,
        centers=centers,
        dictionary=dict_check,
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact, human-friendly one-liner for console output.

    Example:
        candidates=300 (uniq=300, sha=abc123...) | centers=a | pangram-free=0 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    centers = "".join(report["centers"]) or "-"
    parts = [
        f"candidates={report['count']} (uniq={report['unique_count']}, sha={sha})",
        f"centers={centers}",
    ]
    d = report.get("dictionary")
    if d:
        parts.append(f"pangram-free={d['no_pangram']} | words={d['min_words']}..{d['max_words']}")
    parts.append(status)
    return " | ".join(parts)
