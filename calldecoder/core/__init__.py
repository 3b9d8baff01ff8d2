"""Core decoding logic for raw call data."""

from .decoder import CalldataDecoder, DecodeResult, decode_calldata
from .parser import parse_selector, split_selector
from .records import CallRecord, PendingOffset
from .scanner import WordScanner, extract_nested_call
from .types import CandidateTypes, TypeTag, infer_types
from .utils import CalldataError
from .words import HexWordError

__all__ = [
    "CallRecord",
    "CalldataDecoder",
    "CalldataError",
    "CandidateTypes",
    "DecodeResult",
    "HexWordError",
    "PendingOffset",
    "TypeTag",
    "WordScanner",
    "decode_calldata",
    "extract_nested_call",
    "infer_types",
    "parse_selector",
    "split_selector",
]
