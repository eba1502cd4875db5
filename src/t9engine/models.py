from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Tuple


@dataclass(frozen=True, slots=True)
class RankedWord:
    word: str                 # dictionary word (a-z only)
    count: int                # occurrences in the corpus


@dataclass(frozen=True, slots=True)
class Suggestions:
    """
    Result of one keypad query.

    exact : words whose keypad code equals the sequence, highest count first
    completions : longer corpus words starting with any exact match
    """
    sequence: str
    exact: Tuple[RankedWord, ...] = ()
    completions: FrozenSet[str] = field(default_factory=frozenset)

    @property
    def has_matches(self) -> bool:
        return bool(self.exact or self.completions)

    def words(self) -> list[str]:
        return [r.word for r in self.exact]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "sequence": self.sequence,
            "exact": [{"word": r.word, "count": r.count} for r in self.exact],
            "completions": sorted(self.completions),
        }
