from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable, List

from beehive.errors import SourceUnavailable

# Candidate records are separated by newlines or semicolons.
_RECORD_SEP = re.compile(r"[\n;]")


def _read_text(p: Path | str) -> str:
    p = Path(p)
    try:
        return p.read_text(encoding="utf-8")
    except OSError as e:
        raise SourceUnavailable(f"File not found at path: {p}") from e


def read_words(p: Path | str) -> List[str]:
    """
    Read a dictionary file into word tokens (split on any whitespace),
    preserving file order. Raises SourceUnavailable if it can't be read.
    """
    return _read_text(p).split()


def split_candidates(text: str) -> List[str]:
    """
    Split candidate text into puzzle strings. Records are separated by
    newline or ';' and only the first whitespace-separated token of each
    record is kept (anything after it, e.g. word counts, is annotation).
    Blank records are dropped.
    """
    out: List[str] = []
    for record in _RECORD_SEP.split(text):
        tokens = record.split()
        if tokens:
            out.append(tokens[0])
    return out


def read_candidates(p: Path | str) -> List[str]:
    """Read a candidate-puzzle file; see split_candidates for the format."""
    return split_candidates(_read_text(p))


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def append_lines(lines: Iterable[str], p: Path | str) -> str:
    """Append lines to a UTF-8 text file (created if missing)."""
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("a", encoding="utf-8") as f:
        for ln in lines:
            f.write(ln + "\n")
    return str(p)
