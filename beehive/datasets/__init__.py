from .io import read_words, read_candidates, split_candidates, write_lines, append_lines
from .validator import validate_candidates, pretty_summary

__all__ = ["read_words", "read_candidates", "split_candidates", "write_lines", "append_lines",
           "validate_candidates", "pretty_summary"]
