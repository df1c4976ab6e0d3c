from .validator import validate_vocabulary, pretty_summary
from .io import read_lines, write_lines, unique_preserve_order
from .vocabulary import WordSource, ConfigurationError, DEFAULT_WORDS_PATH

__all__ = [
    "validate_vocabulary", "pretty_summary",
    "read_lines", "write_lines", "unique_preserve_order",
    "WordSource", "ConfigurationError", "DEFAULT_WORDS_PATH",
]
