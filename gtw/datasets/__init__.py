from .validator import validate_wordlists, pretty_summary
from .io import read_lines, write_lines, load_corpus

__all__ = ["validate_wordlists", "pretty_summary", "read_lines", "write_lines", "load_corpus"]
