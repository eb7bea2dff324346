from .claim import ClaimRequest, ClaimResult, Failure, Rejected, Success
from .faucet import FaucetResponse

__all__ = [
    "ClaimRequest",
    "ClaimResult",
    "Success",
    "Rejected",
    "Failure",
    "FaucetResponse",
]
