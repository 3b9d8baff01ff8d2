from calldecoder.config import DecoderConfig
from calldecoder.core.decoder import CalldataDecoder, decode_calldata
from calldecoder.core.records import PendingOffset
from calldecoder.core.types import TypeTag

from conftest import AMOUNT, RECIPIENT, UNISWAP_MULTICALL, word


def test_erc20_transfer(erc20_transfer):
    result = decode_calldata(erc20_transfer)

    assert result.selector == "a9059cbb"
    assert result.words == [RECIPIENT, word("5f7aab8c56b0000")]
    assert result.nested == ()

    recipient_types, amount_types = result.main.candidate_types
    assert {TypeTag.ADDRESS, TypeTag.BYTES20, TypeTag.UINT} <= set(recipient_types)
    assert amount_types.best is TypeTag.INT


def test_multicall_yields_two_nested_calls(multicall):
    result = decode_calldata(multicall)

    assert result.selector == "ac9650d8"
    assert [record.selector for record in result.nested] == ["12210e8a", "49404b7c"]

    refund, unwrap = result.nested
    assert refund.words == []
    assert unwrap.words == [AMOUNT, RECIPIENT]
    assert all(len(w) == 64 for w in unwrap.words)
    assert unwrap.candidate_types[1].best is TypeTag.ADDRESS
    assert unwrap.candidate_types[0].types == (TypeTag.INT, TypeTag.STRING, TypeTag.BYTES)


def test_multicall_outer_words_and_offsets(multicall):
    result = decode_calldata(multicall)

    assert result.words[7:9] == [AMOUNT, RECIPIENT]
    assert result.words[-1] == "0" * 56
    assert result.offsets == (
        PendingOffset(word_index=2, offset_in_words=1),
        PendingOffset(word_index=3, offset_in_words=2),
        PendingOffset(word_index=9, offset_in_words=0),
    )
    assert len(result.main.candidate_types) == len(result.words)


def test_outer_classification_can_be_disabled(multicall):
    result = CalldataDecoder(DecoderConfig(classify_outer=False)).decode(multicall)

    assert result.main.candidate_types == []
    assert result.nested[1].candidate_types


def test_offset_resolver_receives_pending_offsets(multicall):
    seen = {}

    def resolver(words, offsets):
        seen["words"] = list(words)
        seen["offsets"] = list(offsets)
        return offsets[:1]

    result = CalldataDecoder(offset_resolver=resolver).decode(multicall)

    assert len(seen["offsets"]) == 3
    assert seen["words"] == result.words
    assert result.offsets == (PendingOffset(word_index=2, offset_in_words=1),)


def test_decoding_is_deterministic(multicall):
    decoder = CalldataDecoder()
    assert decoder.decode(multicall) == decoder.decode(multicall)


def test_to_dict(erc20_transfer):
    data = decode_calldata(erc20_transfer).to_dict()

    assert data["selector"] == "a9059cbb"
    assert data["main"]["args"][0]["types"] == ["address", "bytes20", "uint"]
    assert data["nested"] == []
    assert data["offsets"] == []


def test_word_aligned_call_shifts_words_around_nested_call():
    calldata = (
        "12345678" + "0" * 56
        + word("44")
        + "abcdef01" + AMOUNT[:56]
        + AMOUNT[56:] + RECIPIENT[:56]
        + RECIPIENT[56:] + "0" * 56
    )
    assert len(calldata) % 64 == 0

    result = decode_calldata(calldata)

    assert result.selector == "12345678"
    assert [(record.selector, record.words) for record in result.nested] == [
        ("abcdef01", [AMOUNT, RECIPIENT])
    ]
    # the 56-digit first word pulls every later word 8 digits to the left
    assert result.words == [
        "0" * 64,
        word("4400000000"),
        AMOUNT[8:] + RECIPIENT[:8],
        RECIPIENT[8:] + "0" * 8,
        "0" * 56,
    ]
    assert result.offsets == (
        PendingOffset(word_index=0, offset_in_words=0),
        PendingOffset(word_index=4, offset_in_words=0),
    )


def test_uniswap_multicall_finds_first_call_only():
    result = decode_calldata(UNISWAP_MULTICALL)

    assert result.selector == "ac9650d8"
    assert [record.selector for record in result.nested] == ["88316456"]
    assert len(result.nested[0].words) == 11
    assert all(len(w) == 64 for w in result.nested[0].words)
    assert result.offsets == (
        PendingOffset(word_index=2, offset_in_words=1),
        PendingOffset(word_index=16, offset_in_words=0),
        PendingOffset(word_index=18, offset_in_words=0),
    )


def test_calldata_is_normalised_once(monkeypatch):
    def fail(_):
        raise AssertionError("parser must not normalise again")

    monkeypatch.setattr("calldecoder.core.parser.normalize_calldata", fail)
    result = decode_calldata("  0XA9059CBB" + "AB" * 32)

    assert result.calldata == "a9059cbb" + "ab" * 32
