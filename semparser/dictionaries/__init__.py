from .dictionary import (
    Dictionary,
    WordDictionary,
    load_word_list,
)

__all__ = [
    "Dictionary",
    "WordDictionary",
    "load_word_list",
]
