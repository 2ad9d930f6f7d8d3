from .validator import validate_wordlist, pretty_summary
from .io import read_lines
from .words import (DEFAULT_WORD_LENGTH, DEFAULT_WORDS_PATH, load_words,
                    english_words, english_frequencies)

__all__ = ["validate_wordlist", "pretty_summary", "read_lines",
           "DEFAULT_WORD_LENGTH", "DEFAULT_WORDS_PATH", "load_words",
           "english_words", "english_frequencies"]
