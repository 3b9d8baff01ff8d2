"""Decode sessions: call data in, selector, words and candidate types out."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from calldecoder.config import DecoderConfig
from calldecoder.core.parser import split_selector
from calldecoder.core.records import CallRecord, PendingOffset
from calldecoder.core.scanner import OffsetResolver, WordScanner, passthrough_resolver
from calldecoder.core.utils import get_logger, normalize_calldata

LOGGER = get_logger("calldecoder.decoder")


@dataclass(frozen=True)
class DecodeResult:
    """Best-guess breakdown of one piece of call data."""

    calldata: str
    main: CallRecord
    nested: Tuple[CallRecord, ...]
    offsets: Tuple[PendingOffset, ...] = field(default=())

    @property
    def selector(self) -> str:
        return self.main.selector

    @property
    def words(self) -> List[str]:
        return self.main.words

    def to_dict(self) -> Dict[str, Any]:
        return {
            "selector": self.selector,
            "main": self.main.to_dict(),
            "nested": [record.to_dict() for record in self.nested],
            "offsets": [
                {"word_index": offset.word_index, "offset_in_words": offset.offset_in_words}
                for offset in self.offsets
            ],
        }


class CalldataDecoder:
    """Reusable decoder; every ``decode`` call runs an independent session."""

    def __init__(
        self,
        config: Optional[DecoderConfig] = None,
        *,
        offset_resolver: OffsetResolver = passthrough_resolver,
    ) -> None:
        self.config = config or DecoderConfig()
        self.offset_resolver = offset_resolver

    def decode(self, calldata: str) -> DecodeResult:
        normalized = normalize_calldata(calldata)
        selector, raw_words = split_selector(normalized)

        scanner = WordScanner(
            raw_words,
            offset_window=self.config.offset_window,
            small_word_digits=self.config.small_word_digits,
        )
        words = scanner.scan()
        offsets = self.offset_resolver(words, scanner.offsets)

        main = CallRecord(selector=selector, words=words)
        for record in scanner.nested:
            record.classify()
        if self.config.classify_outer:
            main.classify()

        LOGGER.debug(
            "Decoded selector=%s words=%s nested=%s offsets=%s",
            selector,
            len(words),
            len(scanner.nested),
            len(offsets),
        )
        return DecodeResult(
            calldata=normalized,
            main=main,
            nested=tuple(scanner.nested),
            offsets=tuple(offsets),
        )


def decode_calldata(calldata: str, config: Optional[DecoderConfig] = None) -> DecodeResult:
    """Decode ``calldata`` with a one-off :class:`CalldataDecoder`."""
    return CalldataDecoder(config).decode(calldata)


__all__ = ["CalldataDecoder", "DecodeResult", "decode_calldata"]
