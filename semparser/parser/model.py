from dataclasses import dataclass, field
from typing import Iterable


@dataclass(frozen=True)
class Word:
    value: str
    expressions: frozenset[str] = field(default_factory=frozenset)
    identifier: str = ""
    frequency: int = 0
    is_part_of_phrase: bool = False

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("word value must not be empty")
        if self.frequency < 0:
            raise ValueError(f"word frequency must be non-negative, got {self.frequency}")
        if not isinstance(self.expressions, frozenset):
            object.__setattr__(self, "expressions", frozenset(self.expressions))
        if not self.identifier:
            object.__setattr__(self, "identifier", self.value)


@dataclass(frozen=True)
class FoundWord:
    word: Word
    is_exact: bool
    accuracy: float

    @property
    def value(self) -> str:
        return self.word.value

    @property
    def expressions(self) -> frozenset[str]:
        return self.word.expressions

    @property
    def identifier(self) -> str:
        return self.word.identifier

    @property
    def frequency(self) -> int:
        return self.word.frequency

    @property
    def is_part_of_phrase(self) -> bool:
        return self.word.is_part_of_phrase


def values(found_words: Iterable[FoundWord]) -> list[str]:
    return [found.value for found in found_words]
