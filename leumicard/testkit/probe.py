"""
Embedded HTTP probe for integration tests.

A FastAPI app served by uvicorn on a background thread. Tests append
handlers to `probe.handlers`; each inbound request (any method, any path)
is offered to the handlers in registration order and the first one that
returns a Response answers it. Unclaimed requests go to the default
handler, which answers 404 unless told otherwise.

Handlers are meant to be mutated between requests, from the thread that
owns the probe, never while a request is in flight.
"""

import logging
import threading
import time
from typing import Callable, Optional

import uvicorn
from fastapi import FastAPI, Request, Response
from fastapi.responses import PlainTextResponse

logger = logging.getLogger("leumicard.testkit.probe")

Handler = Callable[[Request], Optional[Response]]

ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]
STARTUP_TIMEOUT = 10.0


def not_found_handler(request: Request) -> Response:
    return PlainTextResponse("Not Found", status_code=404)


class EmbeddedHttpProbe:
    """An in-process HTTP server whose behaviour is a list of handlers."""

    def __init__(
        self,
        port: int,
        default_handler: Callable[[Request], Response] = not_found_handler,
        host: str = "127.0.0.1",
    ):
        self.port = port
        self.host = host
        self.default_handler = default_handler
        self.handlers: list[Handler] = []

        self.app = FastAPI(title="Embedded HTTP probe", docs_url=None, redoc_url=None, openapi_url=None)
        self.app.add_api_route("/{path:path}", self._dispatch, methods=ALL_METHODS)

        self._server: Optional[uvicorn.Server] = None
        self._thread: Optional[threading.Thread] = None

    @property
    def is_running(self) -> bool:
        return self._server is not None and self._server.started

    async def _dispatch(self, request: Request, path: str) -> Response:
        for handler in list(self.handlers):
            response = handler(request)
            if response is not None:
                return response

        logger.info("No handler matched %s /%s", request.method, path)
        return self.default_handler(request)

    def start(self) -> None:
        """Bind the port and block until the server accepts connections."""
        if self.is_running:
            return

        config = uvicorn.Config(
            self.app,
            host=self.host,
            port=self.port,
            log_level="warning",
            lifespan="off",
        )
        self._server = uvicorn.Server(config)
        self._thread = threading.Thread(
            target=self._server.run,
            name=f"http-probe-{self.port}",
            daemon=True,
        )
        self._thread.start()

        deadline = time.monotonic() + STARTUP_TIMEOUT
        while not self._server.started:
            if not self._thread.is_alive():
                self._server = None
                raise RuntimeError(f"HTTP probe failed to bind {self.host}:{self.port}")
            if time.monotonic() > deadline:
                self.stop()
                raise TimeoutError(f"HTTP probe did not start within {STARTUP_TIMEOUT:.0f}s")
            time.sleep(0.01)

        logger.info("HTTP probe listening on http://%s:%d", self.host, self.port)

    def stop(self) -> None:
        """Stop serving and release the port."""
        if self._server is None:
            return

        self._server.should_exit = True
        if self._thread is not None:
            self._thread.join(timeout=STARTUP_TIMEOUT)

        self._server = None
        self._thread = None
        logger.info("HTTP probe on port %d stopped", self.port)
