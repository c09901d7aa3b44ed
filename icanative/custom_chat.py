"""Chat view customisation options."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ChatOption:
    """One customisation switch as presented to the user."""

    field: str
    label: str
    hints: tuple[str, ...]
    value: bool


_ICA_OPTIONS: tuple[tuple[str, str, tuple[str, ...]], ...] = (
    ("hide_chat_img", "隐藏聊天图片", ()),
    ("hide_chat_video", "隐藏聊天视频", ()),
    ("disable_super_face", "禁用超级表情", ()),
    ("disable_img_swap_in_chat", "禁用同会话多图切换", ()),
    ("disable_chat_group", "禁用聊天分组", ()),
    ("disable_chat_group_dot", "禁用聊天分组的红点", ()),
    ("disable_highlight_url", "禁用高亮 URL", ()),
    ("use_local_image_viewer", "使用本地看图器", ()),
    ("disable_adaptive_single_panel_mode", "禁用自适应单面板模式", ()),
    ("remove_emoji_in_group_name", "移除群名内表情", ()),
    ("sort_stickers_by_time", "时间倒序排列 stickers", ()),
    ("disable_image_viewer_touch_gestures", "禁用图片查看器触摸板手势", ()),
    ("use_pangu_to_view_msg", "查看消息时使用 Pangu.rs", ("中英文自动加空格",)),
    ("use_pangu_to_send_msg", "发送消息时使用 Pangu.rs", ("不包括 +1",)),
    ("disable_file_type_selection", "禁用文件类型选择框", ("拖拽复制默认识别媒体",)),
)

_EXTRA_OPTIONS: tuple[tuple[str, str, tuple[str, ...]], ...] = (
    (
        "enable_topic_button",
        '显示 "话题" 按钮',
        ("单独显示", "回复同一条信息", "位于同一条信息回复链", "的信息"),
    ),
    ("hide_group_member_avatar", "隐藏群友头像 (纯文字模式)", ()),
)

_TOGGLEABLE = frozenset(name for name, _, _ in _ICA_OPTIONS + _EXTRA_OPTIONS)


@dataclass
class CustomChat:
    """Switches that change how chats are displayed and sent."""

    hide_chat_img: bool = False
    hide_chat_video: bool = False
    disable_super_face: bool = False
    disable_img_swap_in_chat: bool = False
    disable_chat_group: bool = False
    disable_chat_group_dot: bool = False
    disable_highlight_url: bool = False
    use_local_image_viewer: bool = False
    disable_adaptive_single_panel_mode: bool = True
    remove_emoji_in_group_name: bool = False
    sort_stickers_by_time: bool = True
    disable_image_viewer_touch_gestures: bool = False
    use_pangu_to_view_msg: bool = False
    use_pangu_to_send_msg: bool = False
    disable_file_type_selection: bool = False
    enable_topic_button: bool = True
    hide_group_member_avatar: bool = False

    def _options(self, spec) -> list[ChatOption]:
        return [
            ChatOption(name, label, hints, getattr(self, name))
            for name, label, hints in spec
        ]

    def ica_options(self) -> list[ChatOption]:
        """Options shared with the original client, in display order."""
        return self._options(_ICA_OPTIONS)

    def extra_options(self) -> list[ChatOption]:
        """Options specific to this client, in display order."""
        return self._options(_EXTRA_OPTIONS)

    def toggle(self, field: str) -> bool:
        """Flip the named option and return its new value."""
        if field not in _TOGGLEABLE:
            raise KeyError(field)
        value = not getattr(self, field)
        setattr(self, field, value)
        return value