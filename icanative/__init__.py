"""State model for a native Icalingua-style chat client: groups, presence, pages and options."""

__version__ = "0.1.0"
__all__ = ["app", "chat_groups", "custom_chat", "online_mode", "open_page"]