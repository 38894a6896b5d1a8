"""FastAPI web server for real-time GNSS fix visualization.

Start with::

    uvicorn server.main:app --host 0.0.0.0 --port 8000

Then open ``http://<host>:8000/`` in a browser to access the dashboard.
WebSocket clients connect to ``ws://<host>:8000/ws`` and receive a stream
of JSON messages, one ``type="fix"`` message per burst of NMEA sentences
from the receiver (typically 1 Hz).

The serial port and receiver settings come from ``NAVFIX_*`` environment
variables, see ``navfix.config.ReceiverConfig.from_env``.
"""

import asyncio
from collections.abc import AsyncIterator
from concurrent.futures import ThreadPoolExecutor
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, WebSocket, WebSocketDisconnect
from fastapi.staticfiles import StaticFiles

from navfix.config import ReceiverConfig
from navfix.gnss import GNSSReceiver, SerialByteSource
from server.broadcaster import Broadcaster
from server.sensors import run_gnss_loop

_QUEUE_MAX_SIZE = 10
_TIMEOUT_SECONDS = 5.0
_STATIC_DIR = Path(__file__).parent / "static"


async def _send_messages_until_disconnect(
    queue: asyncio.Queue[str],
    websocket: WebSocket,
) -> None:
    try:
        while True:
            message = await asyncio.wait_for(queue.get(), timeout=_TIMEOUT_SECONDS)
            await websocket.send_text(message)
    except TimeoutError:
        await websocket.close(code=1001)
    except WebSocketDisconnect:
        pass


@asynccontextmanager
async def _lifespan(application: FastAPI) -> AsyncIterator[None]:
    loop = asyncio.get_running_loop()
    config = ReceiverConfig.from_env()
    broadcaster = Broadcaster(loop)
    application.state.broadcaster = broadcaster

    executor = ThreadPoolExecutor(max_workers=1)
    with SerialByteSource(config.serial_port, config.baud_rate) as port:
        receiver = GNSSReceiver(port, config)
        loop.run_in_executor(
            executor,
            run_gnss_loop,
            receiver,
            broadcaster,
            config.poll_interval_seconds,
        )
        try:
            yield
        finally:
            port.cancel()
            executor.shutdown(wait=True)


app = FastAPI(lifespan=_lifespan)


@app.websocket("/ws")
async def websocket_endpoint(websocket: WebSocket) -> None:
    """Stream fix JSON messages to a connected WebSocket client.

    Each client gets its own bounded queue (max ``_QUEUE_MAX_SIZE`` messages).
    The oldest message is dropped when the queue is full so slow clients do
    not stall the polling thread. The connection closes with code 1001, and
    the client should reconnect, if no message arrives within
    ``_TIMEOUT_SECONDS``.

    Args:
        websocket: The incoming WebSocket connection.
    """
    broadcaster: Broadcaster = websocket.app.state.broadcaster
    await websocket.accept()
    queue: asyncio.Queue[str] = asyncio.Queue(maxsize=_QUEUE_MAX_SIZE)
    broadcaster.subscribe(queue)
    try:
        await _send_messages_until_disconnect(queue, websocket)
    finally:
        broadcaster.unsubscribe(queue)


app.mount("/", StaticFiles(directory=_STATIC_DIR, html=True), name="static")
