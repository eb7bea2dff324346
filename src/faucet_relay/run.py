import logging
import signal
from typing import Optional

import anyio
from anyio import (
    TASK_STATUS_IGNORED,
    Event,
    create_task_group,
    move_on_after,
    sleep,
)
from anyio.abc import TaskGroup, TaskStatus

from faucet_relay import log
from faucet_relay.config import get_config
from faucet_relay.faucet import Faucet, WebFaucet, set_faucet
from faucet_relay.server import Server

_logger = logging.getLogger(__name__)


class FaucetRelayRunner(object):
    def __init__(self) -> None:
        self.config = get_config()

        log.init(
            self.config.log.dir,
            self.config.log.level,
            self.config.log.filename,
        )
        _logger.debug("Logger init completed.")

        self._server: Optional[Server] = None
        self._faucet: Optional[Faucet] = None
        self._tg: Optional[TaskGroup] = None

        self._shutdown_event: Optional[Event] = None
        self._should_shutdown = False
        signal.signal(signal.SIGINT, self._shutdown_signal_handler)
        signal.signal(signal.SIGTERM, self._shutdown_signal_handler)

    def _shutdown_signal_handler(self, *args):
        self._should_shutdown = True

    async def _check_should_shutdown(self):
        while not self._should_shutdown:
            await sleep(0.1)
        self._set_shutdown_event()

    def _set_shutdown_event(self):
        if self._shutdown_event is not None:
            self._shutdown_event.set()

    async def _wait_for_shutdown(self):
        if self._shutdown_event is not None:
            await self._shutdown_event.wait()
            await self._stop()

    async def run(self, task_status: TaskStatus[None] = TASK_STATUS_IGNORED):
        assert self._tg is None, "Faucet relay is running"

        _logger.info("Starting faucet relay")

        self._shutdown_event = Event()

        _logger.info(f"Forwarding claims to {self.config.faucet_url}")
        self._faucet = WebFaucet(self.config.faucet_url)
        set_faucet(self._faucet)

        self._server = Server()
        _logger.info("Web server init completed.")

        try:
            async with create_task_group() as tg:
                self._tg = tg

                tg.start_soon(self._check_should_shutdown)
                tg.start_soon(self._wait_for_shutdown)

                await tg.start(
                    self._server.start,
                    self.config.server_host,
                    self.config.server_port,
                    self.config.log.level == "DEBUG",
                )
                _logger.info("Faucet relay started.")
                task_status.started()
        finally:
            if self._faucet is not None:
                with move_on_after(2, shield=True):
                    await self._faucet.close()
            self._faucet = None
            self._shutdown_event = None
            self._tg = None
            _logger.info("Faucet relay stopped")

    async def _stop(self):
        _logger.info("Stopping faucet relay")
        if self._tg is None:
            return

        if self._server is not None:
            self._server.stop()
        self._tg.cancel_scope.cancel()

    async def stop(self):
        self._set_shutdown_event()


def run():
    try:
        runner = FaucetRelayRunner()
        anyio.run(runner.run)
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    run()
