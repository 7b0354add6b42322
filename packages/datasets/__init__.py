from .dictionary import (
    DEFAULT_DICT_PATH, DictionaryLoadError, DictionaryLoader, load_dictionary,
)
from .validator import validate_wordlist, pretty_summary
from .io import write_word_list

__all__ = [
    "DEFAULT_DICT_PATH", "DictionaryLoadError", "DictionaryLoader", "load_dictionary",
    "validate_wordlist", "pretty_summary",
    "write_word_list",
]
