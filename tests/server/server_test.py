import socket

import httpx
import pytest
from anyio import create_task_group, fail_after, sleep

from faucet_relay.faucet import MockFaucet
from faucet_relay.server import Server


pytestmark = pytest.mark.anyio


def free_port() -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


async def post_claim(base_url: str, address: str) -> httpx.Response:
    async with httpx.AsyncClient(base_url=base_url, trust_env=False) as client:
        with fail_after(10):
            while True:
                try:
                    return await client.post(
                        "/api/claim-mon", json={"wallet_address": address}
                    )
                except httpx.ConnectError:
                    await sleep(0.1)


async def test_server_start_stop(faucet: MockFaucet, accounts):
    server = Server()
    port = free_port()

    async with create_task_group() as tg:
        await tg.start(server.start, "127.0.0.1", port, False)

        with pytest.raises(AssertionError):
            await server.start("127.0.0.1", port, False)

        resp = await post_claim(f"http://127.0.0.1:{port}", accounts[0])
        assert resp.status_code == 200
        assert resp.json() == {"txHash": "0xabc"}
        assert faucet.requests == [accounts[0]]

        server.stop()

    with pytest.raises(AssertionError):
        server.stop()
