"""Application state for the chat client."""

from __future__ import annotations

from dataclasses import dataclass, field

from icanative.chat_groups import ChatGroup, ChatGroups, RoomId
from icanative.custom_chat import CustomChat
from icanative.online_mode import OnlineMode
from icanative.open_page import AppOpenPage

ALL_CHATS_LABEL = "所有聊天"
NOTIFY_LEVEL_MIN = 1
NOTIFY_LEVEL_MAX = 5


@dataclass
class IcaApp:
    """Top-level client state: settings, presence, groups and open windows."""

    connected: bool = False
    custom_chat: CustomChat = field(default_factory=CustomChat)
    online_mode: OnlineMode = OnlineMode.ONLINE
    open_page: AppOpenPage = field(default_factory=AppOpenPage)
    mute_all: bool = False
    mute_any: bool = False
    notify_level: int = 3
    chat_rooms: list[RoomId] = field(default_factory=list)
    chat_group_selected: bool = False
    chat_group_idx: int = 0
    chat_groups: ChatGroups = field(default_factory=ChatGroups)

    def select_all_chats(self) -> None:
        """Show every chat rather than one group."""
        self.chat_group_selected = False

    def select_group(self, idx: int) -> None:
        """Select the chat group at ``idx``."""
        if not 0 <= idx < len(self.chat_groups):
            raise IndexError(f"no chat group at index {idx}")
        self.chat_group_selected = True
        self.chat_group_idx = idx

    def selected_group(self) -> ChatGroup | None:
        """The selected group, or None when all chats are shown."""
        if not self.chat_group_selected:
            return None
        return self.chat_groups[self.chat_group_idx]

    def group_labels(self) -> list[tuple[str, bool]]:
        """Sidebar entries as (label, highlighted), starting with all chats."""
        labels = [(ALL_CHATS_LABEL, not self.chat_group_selected)]
        labels.extend(
            (name, self.chat_group_selected and idx == self.chat_group_idx)
            for idx, name in enumerate(self.chat_groups.group_names())
        )
        return labels

    def set_notify_level(self, level: int) -> None:
        """Set the notification level, which must lie in 1..5."""
        if not NOTIFY_LEVEL_MIN <= level <= NOTIFY_LEVEL_MAX:
            raise ValueError(
                f"notify level must be between {NOTIFY_LEVEL_MIN} and "
                f"{NOTIFY_LEVEL_MAX}, got {level}"
            )
        self.notify_level = level

    def set_online_mode(self, mode: OnlineMode) -> None:
        """Change the presence status."""
        self.online_mode = OnlineMode(mode)

    def online_mode_choices(self) -> list[tuple[OnlineMode, bool]]:
        """Every presence status with whether it is the current one."""
        return [(mode, mode is self.online_mode) for mode in OnlineMode]

    def open_verify_message(self) -> None:
        self.open_page.verify_message = True

    def open_about(self) -> None:
        self.open_page.about = True

    def open_notify_level_help(self) -> None:
        self.open_page.notify_level = True

    def notification_options(self) -> dict[str, bool]:
        """Mute switches currently offered; mute_all is hidden while mute_any is set."""
        options = {"mute_any": self.mute_any}
        if not self.mute_any:
            options["mute_all"] = self.mute_all
        return options