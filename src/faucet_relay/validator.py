import re
from typing import Any

from .exceptions import InvalidAddress, MethodRejected
from .models import ClaimRequest

__all__ = ["CLAIM_METHOD", "is_valid_address", "validate_claim"]

CLAIM_METHOD = "POST"

# fullmatch, so a trailing newline is not accepted
_address_pattern = re.compile(r"0x[a-fA-F0-9]{40}")


def is_valid_address(value: Any) -> bool:
    return isinstance(value, str) and _address_pattern.fullmatch(value) is not None


def validate_claim(method: str, body: Any) -> ClaimRequest:
    """Check an inbound claim and return the request to forward.

    The method is checked first, so a non-POST call is rejected with
    :class:`MethodRejected` whatever its body holds. A missing or non-object
    body, a missing ``wallet_address`` or a malformed address raise
    :class:`InvalidAddress`.
    """
    if method != CLAIM_METHOD:
        raise MethodRejected(method)

    if not isinstance(body, dict):
        raise InvalidAddress(body)

    wallet_address = body.get("wallet_address")
    if not is_valid_address(wallet_address):
        raise InvalidAddress(wallet_address)

    return ClaimRequest(wallet_address=wallet_address)
