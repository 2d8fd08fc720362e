from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SessionContext:
    session_id: str
    admin_logged_in: bool = False
    admin_email: str | None = None
