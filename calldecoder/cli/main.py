"""CLI entrypoint for decoding raw call data."""

from __future__ import annotations

import argparse
import dataclasses
import json
import os
import sys
from pathlib import Path
from typing import Callable, List, Optional

from dotenv import load_dotenv
from web3 import Web3

from calldecoder.config import DecoderConfig, load_config
from calldecoder.core.decoder import CalldataDecoder, DecodeResult
from calldecoder.core.records import CallRecord
from calldecoder.core.types import TypeTag
from calldecoder.core.utils import get_logger, set_log_level, word_to_address

LOGGER = get_logger("calldecoder.cli")

load_dotenv()


def fetch_transaction_input(
    tx_hash: str,
    *,
    rpc_url: Optional[str],
    web3_factory: Callable[[str], Web3] = lambda url: Web3(Web3.HTTPProvider(url)),
) -> str:
    """Return the ``input`` field of ``tx_hash`` as a 0x-prefixed hex string."""
    if not rpc_url:
        raise ValueError("An RPC URL is required to fetch a transaction (--rpc-url or RPC_URL)")

    web3 = web3_factory(rpc_url)
    if not web3.is_connected():
        raise ConnectionError(f"Failed to connect to RPC: {rpc_url}")

    tx = web3.eth.get_transaction(tx_hash)
    LOGGER.info("Fetched transaction %s (to=%s)", tx_hash, tx.get("to"))
    return Web3.to_hex(tx["input"])


def _format_word(word: str, record: CallRecord, index: int) -> str:
    if index >= len(record.candidate_types):
        return word
    candidates = record.candidate_types[index]
    text = f"{word}  [{', '.join(candidates.names())}]"
    if candidates.best is TypeTag.ADDRESS:
        text += f"  {word_to_address(word)}"
    return text


def _render_record(record: CallRecord, *, indent: str = "") -> List[str]:
    lines = [f"{indent}Method Id: 0x{record.selector}"]
    for idx, word in enumerate(record.words):
        lines.append(f"{indent}  [{idx}] {_format_word(word, record, idx)}")
    return lines


def render_text(result: DecodeResult) -> str:
    """Human-readable rendering of a decode result."""
    lines = _render_record(result.main)
    lines.append(f"Nested calls: {len(result.nested)}")
    for number, record in enumerate(result.nested, start=1):
        lines.append(f"  #{number}")
        lines.extend(_render_record(record, indent="    "))
    return "\n".join(lines)


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Guess the structure of raw transaction call data")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("calldata", nargs="?", help="Hex call data, optionally 0x-prefixed")
    source.add_argument("--tx-hash", help="Fetch the call data of this transaction over RPC")
    parser.add_argument("--rpc-url", help="RPC endpoint used with --tx-hash (defaults to RPC_URL)")
    parser.add_argument("--config", type=Path, help="Path to a JSON decoder config")
    parser.add_argument(
        "--no-classify-outer",
        action="store_true",
        help="Only classify the words of nested calls",
    )
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def _resolve_config(args: argparse.Namespace) -> DecoderConfig:
    config = load_config(args.config)
    if args.no_classify_outer:
        config = dataclasses.replace(config, classify_outer=False)
    if args.verbose:
        config = dataclasses.replace(config, log_level="DEBUG")
    return config


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)

    try:
        config = _resolve_config(args)
        set_log_level(config.log_level)

        if args.tx_hash:
            rpc_url_env = os.getenv("RPC_URL") or ""
            rpc_url = args.rpc_url or rpc_url_env.strip() or None
            calldata = fetch_transaction_input(args.tx_hash, rpc_url=rpc_url)
        else:
            calldata = args.calldata

        result = CalldataDecoder(config).decode(calldata)
    except Exception as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        print(render_text(result))


if __name__ == "__main__":  # pragma: no cover - CLI entry
    main()
