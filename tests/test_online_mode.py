import pytest

from icanative.online_mode import OnlineMode


@pytest.mark.parametrize(
    "mode, label",
    [
        (OnlineMode.ONLINE, "在线"),
        (OnlineMode.LEFT, "离开"),
        (OnlineMode.HIDDEN, "隐身"),
        (OnlineMode.BUSY, "忙碌"),
        (OnlineMode.PING_ME, "Q我吧"),
        (OnlineMode.DO_NOT_DISTURB, "请勿打扰"),
    ],
)
def test_str_is_display_label(mode, label):
    assert str(mode) == label


def test_labels_are_unique():
    labels = [str(mode) for mode in OnlineMode]
    assert len(set(labels)) == len(labels)
    assert {OnlineMode(label) for label in labels} == set(OnlineMode)


def test_declaration_order():
    expected = ["在线", "离开", "隐身", "忙碌", "Q我吧", "请勿打扰"]
    assert list(OnlineMode) == [OnlineMode(label) for label in expected]
    assert list(OnlineMode)[0] is OnlineMode("在线")
    assert list(OnlineMode)[-1] is OnlineMode("请勿打扰")


def test_lookup_by_label_round_trips():
    for mode in OnlineMode:
        assert OnlineMode(str(mode)) is mode