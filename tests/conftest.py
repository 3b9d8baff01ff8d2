import pytest

ZERO_WORD = "0" * 64


def word(value: str) -> str:
    """Left-pad ``value`` to a 64-digit word."""
    return value.rjust(64, "0")


AMOUNT = word("16345785d8a0000")
RECIPIENT = word("4d278b35b4fa66e7dc694197826abf76240533af")

# transfer(address,uint256)
ERC20_TRANSFER = (
    "0xa9059cbb"
    + word("4d278b35b4fa66e7dc694197826abf76240533af")
    + word("5f7aab8c56b0000")
)

# multicall(bytes[]) wrapping refundETH() and unwrapWETH9(uint256,address)
MULTICALL = (
    "0xac9650d8"
    + word("20")
    + word("2")
    + word("40")
    + word("80")
    + word("4")
    + "12210e8a" + "0" * 56
    + word("44")
    + "49404b7c" + AMOUNT + RECIPIENT + "0" * 56
)


@pytest.fixture
def erc20_transfer() -> str:
    return ERC20_TRANSFER


@pytest.fixture
def multicall() -> str:
    return MULTICALL


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    """Keep a stray decoder.json in the working directory out of the tests."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


# Uniswap V3 router multicall(bytes[]) wrapping a swap and refundETH().
UNISWAP_MULTICALL = (
    "0xac9650d800000000000000000000000000000000000000000000000000000000000000200000000000000000"
    "000000000000000000000000000000000000000000000002000000000000000000000000000000000000000000"
    "000000000000000000004000000000000000000000000000000000000000000000000000000000000001e00000"
    "000000000000000000000000000000000000000000000000000000000164883164560000000000000000000000"
    "00c011a73ee8576fb46f5e1c5751ca3b9fe0af2a6f000000000000000000000000c02aaa39b223fe8d0a0e5c4f"
    "27ead9083c756cc20000000000000000000000000000000000000000000000000000000000002710ffffffffff"
    "fffffffffffffffffffffffffffffffffffffffffffffffffee530ffffffffffffffffffffffffffffffffffff"
    "ffffffffffffffffffffffff1b18000000000000000000000000000000000000000000000000016345785d89fd"
    "6800000000000000000000000000000000000000000000000000007f73eca3063a000000000000000000000000"
    "000000000000000000000000016042b530ddaec600000000000000000000000000000000000000000000000000"
    "007e59f044bada000000000000000000000000f847e9d51989033b691b8be943f8e9e268f99b9e000000000000"
    "000000000000000000000000000000000000000000006377347700000000000000000000000000000000000000"
    "000000000000000000000000000000000000000000000000000000000000000000000000000000000412210e8a"
    "00000000000000000000000000000000000000000000000000000000"
)
