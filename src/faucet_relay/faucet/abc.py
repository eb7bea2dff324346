from abc import ABC, abstractmethod

from faucet_relay.models import FaucetResponse


class Faucet(ABC):
    @abstractmethod
    async def request_token(self, address: str) -> FaucetResponse:
        ...

    @abstractmethod
    async def close(self):
        ...
