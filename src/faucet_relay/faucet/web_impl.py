import json
from typing import Optional

import httpx

from faucet_relay.models import FaucetResponse

from .abc import Faucet
from .exceptions import FaucetError


def _reject_constant(name: str):
    raise ValueError(f"invalid json constant {name}")


class WebFaucet(Faucet):
    def __init__(
        self, url: str, transport: Optional[httpx.AsyncBaseTransport] = None
    ) -> None:
        self.url = url
        # httpx default timeout applies
        self.client = httpx.AsyncClient(transport=transport, follow_redirects=True)

    async def request_token(self, address: str) -> FaucetResponse:
        input = {"wallet_address": address}

        try:
            resp = await self.client.post(
                self.url,
                json=input,
                headers={"Content-Type": "application/json"},
            )
        except httpx.HTTPError as e:
            raise FaucetError(self.url, str(e)) from e

        try:
            # NaN and Infinity are not json
            content = json.loads(resp.content, parse_constant=_reject_constant)
        except ValueError as e:
            raise FaucetError(
                self.url, f"invalid json response with status {resp.status_code}"
            ) from e

        return FaucetResponse(status_code=resp.status_code, body=content)

    async def close(self):
        await self.client.aclose()
