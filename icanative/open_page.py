"""Which auxiliary windows are currently open."""

from __future__ import annotations

from dataclasses import dataclass, fields


@dataclass
class AppOpenPage:
    """Open/closed state of each auxiliary window."""

    verify_message: bool = False
    about: bool = False
    settings: bool = False
    notify_level: bool = False
    custom_chat_ica: bool = False
    custom_chat_extra: bool = False
    online_status: bool = False

    def opened(self) -> list[str]:
        """Names of the windows that are open, in declaration order."""
        return [f.name for f in fields(self) if getattr(self, f.name)]