from __future__ import annotations

import logging

import pygame

from . import config

logger = logging.getLogger(__name__)

TICK_EVENT = pygame.USEREVENT + 1


class Ticker:
    """One repeating SDL timer that posts TICK_EVENT every period_ms.

    The timer is armed once and never restarted on input; each tick handler
    reads whatever state is current when the event is dequeued.
    """

    def __init__(self, period_ms: int = config.TICK_MS, event_type: int = TICK_EVENT, set_timer=None):
        if period_ms <= 0:
            raise ValueError(f"tick period must be positive, got {period_ms}")
        self.period_ms = period_ms
        self.event_type = event_type
        self._set_timer = set_timer or pygame.time.set_timer
        self.running = False

    def start(self) -> None:
        if self.running:
            return
        self._set_timer(self.event_type, self.period_ms)
        self.running = True
        logger.debug("tick timer started (%d ms)", self.period_ms)

    def stop(self) -> None:
        if not self.running:
            return
        self._set_timer(self.event_type, 0)
        self.running = False
        logger.debug("tick timer stopped")

    def __enter__(self) -> Ticker:
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()
