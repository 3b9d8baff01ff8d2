"""Records produced by a decode session."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

from calldecoder.core.types import CandidateTypes, infer_types


@dataclass
class CallRecord:
    """One method call: its selector, argument words and their candidate types."""

    selector: str
    words: List[str] = field(default_factory=list)
    candidate_types: List[CandidateTypes] = field(default_factory=list)

    def classify(self) -> None:
        """Append candidate types for every word not classified yet."""
        for word in self.words[len(self.candidate_types):]:
            self.candidate_types.append(infer_types(word))

    def to_dict(self) -> Dict[str, Any]:
        args: List[Dict[str, Any]] = []
        for idx, word in enumerate(self.words):
            entry: Dict[str, Any] = {"word": word}
            if idx < len(self.candidate_types):
                entry["types"] = list(self.candidate_types[idx].names())
            args.append(entry)
        return {"selector": self.selector, "args": args}


@dataclass(frozen=True)
class PendingOffset:
    """A word that looks like a dynamic-type offset, not resolved yet."""

    word_index: int
    offset_in_words: int
    length: int = 0


__all__ = ["CallRecord", "PendingOffset"]
