# icanative

The state behind a native Icalingua-style chat client, as plain Python objects.
It keeps track of:

- the chat groups in the side bar, and which one is selected
  (`icanative.chat_groups.ChatGroup`, `icanative.chat_groups.ChatGroups`);
- the user's online status (`icanative.online_mode.OnlineMode`), whose display
  labels are 在线, 离开, 隐身, 忙碌, Q我吧 and 请勿打扰;
- which pages and windows are open (`icanative.open_page.AppOpenPage`);
- the switches that change how chats are shown
  (`icanative.custom_chat.CustomChat`, `icanative.custom_chat.ChatOption`);
- notification settings: a level from 1 to 5, muting everything, or muting only
  @ all.

`icanative.app.IcaApp` ties all of these together.

## Installation

```
pip install .
```

Python 3.10 or newer is needed. The package depends on nothing outside the
standard library.

## Usage

```python
from icanative.app import IcaApp
from icanative.chat_groups import ChatGroup
from icanative.online_mode import OnlineMode

app = IcaApp()
app.chat_groups.add(ChatGroup.empty("Friends"))
app.chat_groups.add(ChatGroup("Work", [1001, 1002]))

app.select_group(1)
print(app.selected_group().name)     # Work
print(app.group_labels())
# [('所有聊天', False), ('Friends', False), ('Work', True)]

app.set_notify_level(4)              # levels run from 1 to 5
app.set_online_mode(OnlineMode.BUSY)
print(str(app.online_mode))          # 忙碌
print(app.online_mode_choices())     # every status, with the current one marked True

app.select_all_chats()               # back to "all chats"; selected_group() is now None
app.open_about()
print(app.open_page.opened())        # ['about']
```

Errors are raised as exceptions:

- `IcaApp.select_group` raises `IndexError` for an index with no group;
- `IcaApp.set_notify_level` raises `ValueError` for a level outside 1 to 5;
- `CustomChat.toggle` raises `KeyError` for a name that is not a switch.

### Chat display switches

```python
from icanative.custom_chat import CustomChat

chat = CustomChat()
for option in chat.ica_options():
    print(option.label, option.hints, option.value)
print(chat.toggle("hide_chat_img"))  # True
```

Each `ChatOption` holds the field name, its display label, any hint lines and
the current value. `CustomChat.ica_options()` lists the switches shared with
Icalingua; `CustomChat.extra_options()` lists the two this client adds (the
"话题" button and hiding member avatars). By default
`disable_adaptive_single_panel_mode`, `sort_stickers_by_time` and
`enable_topic_button` are on and every other switch is off.

### Notifications

`IcaApp.notification_options()` returns the mute switches that apply at the
moment as a dict. While `mute_any` is set, `mute_all` is left out of it.
`open_notify_level_help()` and `open_verify_message()` mark those pages as
open in `app.open_page`.

## What it does not do

The package holds state only. It draws no window or screen, connects to no
chat server, loads and saves no configuration file, and has no command to run.
A user interface or a network layer is expected to read and change these
objects.

## Tests

```
pip install .[test]
pytest
```