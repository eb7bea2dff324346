from typing import List, Optional

from faucet_relay.models import FaucetResponse

from .abc import Faucet


class MockFaucet(Faucet):
    def __init__(
        self,
        response: Optional[FaucetResponse] = None,
        error: Optional[Exception] = None,
    ) -> None:
        if response is None:
            response = FaucetResponse(status_code=200, body={"success": True})
        self.response = response
        self.error = error

        self.requests: List[str] = []
        self._closed = False

    async def request_token(self, address: str) -> FaucetResponse:
        assert not self._closed, "MockFaucet has been closed."

        self.requests.append(address)
        if self.error is not None:
            raise self.error
        return self.response

    async def close(self):
        self._closed = True
