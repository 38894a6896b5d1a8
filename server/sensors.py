"""Background GNSS polling loop."""

import logging
import time

from navfix.gnss import GNSSReceiver
from server.broadcaster import Broadcaster
from server.formatters import format_fix_message

__all__ = ["run_gnss_loop"]

logger = logging.getLogger(__name__)


def run_gnss_loop(
    receiver: GNSSReceiver,
    broadcaster: Broadcaster,
    poll_interval: float,
) -> None:
    """Poll the receiver continuously and broadcast each quiet-line update.

    The caller owns the receiver's byte source and must keep it open. The
    loop exits when the source is cancelled, which makes the next read raise
    ``OSError``.

    Args:
        receiver: Receiver attached to an open byte source.
        broadcaster: Destination for JSON fix messages.
        poll_interval: Seconds to sleep between polls.
    """
    receiver.set_update_handler(
        lambda: broadcaster.publish(format_fix_message(receiver))
    )
    try:
        while True:
            receiver.process()
            time.sleep(poll_interval)
    except OSError as exc:
        logger.info("GNSS polling stopped: %s", exc)
    finally:
        receiver.set_update_handler(None)
