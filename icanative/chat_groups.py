"""User-defined groups of chat rooms."""

from __future__ import annotations

from dataclasses import dataclass, field

RoomId = int


@dataclass
class ChatGroup:
    """A named collection of chat rooms."""

    name: str
    rooms: list[RoomId] = field(default_factory=list)

    @classmethod
    def empty(cls, name: str) -> "ChatGroup":
        """Create a group with no rooms."""
        return cls(name)


@dataclass
class ChatGroups:
    """The ordered list of chat groups."""

    groups: list[ChatGroup] = field(default_factory=list)

    def group_names(self) -> list[str]:
        """Names of all groups, in order."""
        return [group.name for group in self.groups]

    def add(self, group: ChatGroup) -> None:
        """Append a group to the end of the list."""
        self.groups.append(group)

    def __len__(self) -> int:
        return len(self.groups)

    def __iter__(self):
        return iter(self.groups)

    def __getitem__(self, idx: int) -> ChatGroup:
        return self.groups[idx]