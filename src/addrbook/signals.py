"""Cooperative cancellation shared by the interrupt handler and the main loop."""

import signal
from typing import Dict, Iterable

from .errors import SignalSetupError
from .log import get_logger

logger = get_logger(__name__)


class CancelFlag:
    """Process-wide running/stopped flag.

    Starts running. stop() is a single attribute store, so it is safe to call
    from a signal handler. Once stopped it stays stopped.
    """

    __slots__ = ("_stopped",)

    def __init__(self) -> None:
        self._stopped = False

    def stop(self) -> None:
        self._stopped = True

    @property
    def stopped(self) -> bool:
        return self._stopped


def install_interrupt_handler(
    flag: CancelFlag, signals: Iterable[int] = (signal.SIGINT,)
) -> Dict[int, object]:
    """Route the given signals to flag.stop().

    Returns the previous handlers so the caller can restore them.
    """

    def _handler(signum, _frame):
        flag.stop()

    previous: Dict[int, object] = {}
    try:
        for signum in signals:
            previous[signum] = signal.signal(signum, _handler)
    except (ValueError, OSError) as e:
        restore_handlers(previous)
        raise SignalSetupError(f"cannot install interrupt handler: {e}") from e
    logger.debug("Interrupt handler installed for %s", sorted(previous))
    return previous


def restore_handlers(previous: Dict[int, object]) -> None:
    """Reinstate handlers returned by install_interrupt_handler."""
    for signum, handler in previous.items():
        try:
            signal.signal(signum, handler)
        except (ValueError, OSError, TypeError) as e:
            logger.warning("Could not restore handler for signal %s: %s", signum, e)
