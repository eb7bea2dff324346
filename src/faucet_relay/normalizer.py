from typing import Union

from faucet_relay.exceptions import ClaimError
from faucet_relay.models import Failure, FaucetResponse, Rejected, Success

__all__ = ["GENERIC_FAILURE", "normalize", "normalize_failure", "reject"]

GENERIC_FAILURE = "Failed to process faucet request"


def normalize(response: FaucetResponse) -> Union[Success, Rejected]:
    if response.ok:
        return Success(body=response.body)
    return Rejected(status=response.status_code, body=response.body)


def normalize_failure(error: BaseException) -> Failure:
    # error detail stays in the server log
    return Failure(reason=GENERIC_FAILURE)


def reject(error: ClaimError) -> Rejected:
    return Rejected(
        status=error.status_code,
        body={"error": error.message},
        reason=error.message,
    )
