import pytest
from fastapi.testclient import TestClient

from faucet_relay.faucet import MockFaucet, set_faucet
from faucet_relay.models import FaucetResponse
from faucet_relay.server import Server


@pytest.fixture
def faucet_response():
    return FaucetResponse(status_code=200, body={"txHash": "0xabc"})


@pytest.fixture
def faucet(faucet_response: FaucetResponse):
    faucet = MockFaucet(faucet_response)
    set_faucet(faucet)
    return faucet


@pytest.fixture
def client(faucet: MockFaucet):
    client = TestClient(Server().app)
    yield client
    client.close()
