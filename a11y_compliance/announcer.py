"""
Status Announcer

A single-slot live-region channel. The host renders ``message`` into an
``aria-live`` region (``role="status"`` for polite, ``role="alert"`` for
assertive) and subscribes to be told when it changes.

A new announcement replaces the current one immediately; there is no
queue. Each announcement clears itself after an urgency-dependent delay
so that announcing the same text later is heard again.
"""

import logging
from typing import Callable, Literal, Optional

from .models import Config
from .scheduling import Scheduler, TimerHandle

logger = logging.getLogger(__name__)

Urgency = Literal["polite", "assertive"]
Listener = Callable[[str, Urgency], None]

URGENCIES = ("polite", "assertive")


class StatusAnnouncer:
    """
    Owns the live-region message slot.

    ``announce`` and ``clear`` are the only mutators. Every change to the
    slot is reported to listeners as ``(message, urgency)``.

    Args:
        scheduler: Where auto-clear timers are scheduled
        config: Supplies the polite/assertive clear delays

    Example:
        announcer = StatusAnnouncer(AsyncioScheduler())
        announcer.subscribe(lambda text, urgency: region.set_text(text))
        announcer.announce("Request submitted")
    """

    def __init__(self, scheduler: Scheduler, config: Optional[Config] = None):
        self.scheduler = scheduler
        self.config = config or Config()
        self._message = ""
        self._urgency: Urgency = "polite"
        self._timer: Optional[TimerHandle] = None
        self._listeners: list[Listener] = []

    @property
    def message(self) -> str:
        return self._message

    @property
    def urgency(self) -> Urgency:
        return self._urgency

    @property
    def role(self) -> str:
        """ARIA role the host should give the live region"""
        return "alert" if self._urgency == "assertive" else "status"

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a listener for slot changes.

        Returns:
            Callable that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def announce(self, message: str, urgency: Urgency = "polite") -> None:
        """
        Replace the current announcement.

        Re-announcing the text already in the slot first writes an empty
        string, because live regions ignore unchanged text.

        Raises:
            ValueError: If ``urgency`` is not polite or assertive
        """
        if urgency not in URGENCIES:
            raise ValueError(f"Unknown urgency: {urgency!r}. Choose from: polite, assertive")

        self._cancel_timer()
        if message and message == self._message:
            self._set("", self._urgency)
        self._set(message, urgency)

        if message:
            self._timer = self.scheduler.call_later(self.config.delay_for(urgency), self._expire)
        logger.debug("Announced (%s): %s", urgency, message)

    def clear(self) -> None:
        """Empty the slot and drop any pending auto-clear"""
        self._cancel_timer()
        if self._message:
            self._set("", self._urgency)

    def _expire(self) -> None:
        self._timer = None
        if self._message:
            self._set("", self._urgency)

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _set(self, message: str, urgency: Urgency) -> None:
        self._message = message
        self._urgency = urgency
        for listener in list(self._listeners):
            listener(message, urgency)
