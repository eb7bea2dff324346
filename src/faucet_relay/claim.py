import logging
from typing import Any

from anyio import get_cancelled_exc_class

from faucet_relay.exceptions import ClaimError
from faucet_relay.faucet import Faucet
from faucet_relay.models import ClaimResult
from faucet_relay.normalizer import normalize, normalize_failure, reject
from faucet_relay.validator import validate_claim

_logger = logging.getLogger(__name__)


async def process_claim(method: str, body: Any, faucet: Faucet) -> ClaimResult:
    try:
        claim = validate_claim(method, body)
    except ClaimError as e:
        _logger.info(f"Reject claim: {str(e)}")
        return reject(e)

    address = claim.wallet_address
    _logger.info(f"Forward claim for {address}")
    try:
        response = await faucet.request_token(address)
    except get_cancelled_exc_class():
        raise
    except Exception as e:
        _logger.error(f"Error processing faucet request for {address}")
        _logger.exception(e)
        return normalize_failure(e)

    _logger.info(f"Faucet responded {response.status_code} for {address}")
    return normalize(response)
