from typing import Literal, Optional, Union

from pydantic import BaseModel, Field, JsonValue
from typing_extensions import Annotated

__all__ = ["ClaimRequest", "Success", "Rejected", "Failure", "ClaimResult"]


class ClaimRequest(BaseModel):
    wallet_address: str = Field(pattern=r"^0x[a-fA-F0-9]{40}$")


class Success(BaseModel):
    kind: Literal["success"] = "success"
    status: int = 200
    body: JsonValue = None

    def to_response_body(self) -> JsonValue:
        return self.body

    def summary(self) -> str:
        message = "Tokens sent successfully!"
        if isinstance(self.body, dict):
            tx_hash = self.body.get("txHash")
            if isinstance(tx_hash, str) and len(tx_hash) > 0:
                message = f"{message} Transaction: {tx_hash}"
        return message


class Rejected(BaseModel):
    """A 4xx outcome.

    ``reason`` is only set for rejections made by the relay itself. Rejections
    passed through from the faucet service keep their body as it was sent.
    """

    kind: Literal["rejected"] = "rejected"
    status: int
    body: JsonValue = None
    reason: Optional[str] = None

    def to_response_body(self) -> JsonValue:
        return self.body

    def summary(self) -> str:
        return _error_message(self.body)


class Failure(BaseModel):
    kind: Literal["failure"] = "failure"
    status: int = 500
    reason: str

    def to_response_body(self) -> JsonValue:
        return {"error": self.reason}

    def summary(self) -> str:
        return self.reason


def _error_message(body: JsonValue) -> str:
    if isinstance(body, dict):
        for key in ("message", "error"):
            value = body.get(key)
            if isinstance(value, str) and len(value) > 0:
                return value
    return "Failed to send tokens"


ClaimResult = Annotated[Union[Success, Rejected, Failure], Field(discriminator="kind")]
