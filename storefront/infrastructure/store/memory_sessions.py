from __future__ import annotations

import logging
import threading
import uuid
from collections import OrderedDict
from typing import Callable

from storefront.application.ports.session_store import CheckoutSessionStorePort
from storefront.application.use_cases.checkout import CheckoutOrchestrator
from storefront.domain.entities.session_context import SessionContext


class MemoryCheckoutSessionStore(CheckoutSessionStorePort):
    """
    Checkout sessions kept in process memory.

    Holds at most `max_sessions`; the least recently used idle session is
    dropped to make room. Sessions with a payment in progress are never dropped.
    """

    def __init__(
        self,
        factory: Callable[[SessionContext], CheckoutOrchestrator],
        max_sessions: int = 10_000,
    ) -> None:
        if max_sessions < 1:
            raise ValueError("max_sessions must be at least 1")
        self._factory = factory
        self._max_sessions = max_sessions
        self._sessions: OrderedDict[str, CheckoutOrchestrator] = OrderedDict()
        self._lock = threading.Lock()
        self._logger = logging.getLogger(__name__)

    def get_or_create(self, session_id: str | None) -> str:
        with self._lock:
            if session_id and session_id in self._sessions:
                self._sessions.move_to_end(session_id)
                return session_id
            new_id = session_id or uuid.uuid4().hex
            self._evict_idle()
            self._sessions[new_id] = self._factory(SessionContext(session_id=new_id))
            return new_id

    def get(self, session_id: str) -> CheckoutOrchestrator | None:
        with self._lock:
            checkout = self._sessions.get(session_id)
            if checkout is not None:
                self._sessions.move_to_end(session_id)
            return checkout

    def __len__(self) -> int:
        return len(self._sessions)

    def _evict_idle(self) -> None:
        # oldest first; busy sessions stay even if that means going over the cap
        for session_id in list(self._sessions):
            if len(self._sessions) < self._max_sessions:
                return
            if self._sessions[session_id].payment_in_progress():
                continue
            del self._sessions[session_id]
            self._logger.info("Checkout session evicted", extra={"session_id": session_id})
