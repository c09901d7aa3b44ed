"""Online presence modes a user can pick."""

from __future__ import annotations

from enum import Enum


class OnlineMode(Enum):
    """Presence status shown to other users; the value is its display label."""

    ONLINE = "在线"
    LEFT = "离开"
    HIDDEN = "隐身"
    BUSY = "忙碌"
    PING_ME = "Q我吧"
    DO_NOT_DISTURB = "请勿打扰"

    def __str__(self) -> str:
        return self.value