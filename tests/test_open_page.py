from dataclasses import fields

from icanative.open_page import AppOpenPage


def test_everything_closed_by_default():
    assert AppOpenPage().opened() == []


def test_opened_lists_open_pages_in_order():
    page = AppOpenPage(online_status=True, about=True)
    assert page.opened() == ["about", "online_status"]


def test_all_open():
    page = AppOpenPage(**{f.name: True for f in fields(AppOpenPage)})
    assert page.opened() == [f.name for f in fields(AppOpenPage)]


def test_closing_removes_from_opened():
    page = AppOpenPage(verify_message=True)
    page.verify_message = False
    assert page.opened() == []