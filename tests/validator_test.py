import pytest

from faucet_relay.exceptions import InvalidAddress, MethodRejected
from faucet_relay.validator import is_valid_address, validate_claim


def test_valid_addresses(accounts):
    for address in accounts:
        assert is_valid_address(address)
    assert is_valid_address("0x" + "A" * 40)
    assert is_valid_address("0x" + "0" * 40)


@pytest.mark.parametrize(
    "value",
    [
        "",
        "0x",
        "0x" + "a" * 39,
        "0x" + "a" * 41,
        "0x" + "g" * 40,
        "a" * 42,
        "0X" + "a" * 40,
        " 0x" + "a" * 40,
        "0x" + "a" * 40 + "\n",
        None,
        123,
        ["0x" + "a" * 40],
    ],
)
def test_invalid_addresses(value):
    assert not is_valid_address(value)


def test_validate_claim(accounts):
    claim = validate_claim("POST", {"wallet_address": accounts[2]})
    # case is kept as submitted
    assert claim.wallet_address == accounts[2]


@pytest.mark.parametrize("method", ["GET", "PUT", "DELETE", "PATCH", "post"])
def test_method_rejected_before_body(method, accounts):
    with pytest.raises(MethodRejected) as e:
        validate_claim(method, {"wallet_address": accounts[0]})
    assert e.value.status_code == 405
    assert e.value.method == method

    with pytest.raises(MethodRejected):
        validate_claim(method, None)


@pytest.mark.parametrize(
    "body",
    [
        None,
        {},
        [],
        "0x577887519278199ce8F8D80bAcc70fc32b48daD4",
        {"wallet_address": ""},
        {"wallet_address": None},
        {"wallet_address": "0x1234"},
        {"address": "0x577887519278199ce8F8D80bAcc70fc32b48daD4"},
    ],
)
def test_invalid_address_rejected(body):
    with pytest.raises(InvalidAddress) as e:
        validate_claim("POST", body)
    assert e.value.status_code == 400
    assert e.value.message == "Invalid wallet address"
