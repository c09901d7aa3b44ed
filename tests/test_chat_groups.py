from icanative.chat_groups import ChatGroup, ChatGroups


def test_empty_group_has_no_rooms():
    group = ChatGroup.empty("work")
    assert group.name == "work"
    assert group.rooms == []


def test_group_keeps_rooms():
    group = ChatGroup("friends", [1, 2, 3])
    assert group.rooms == [1, 2, 3]


def test_empty_groups_are_independent():
    a = ChatGroup.empty("a")
    b = ChatGroup.empty("b")
    a.rooms.append(7)
    assert b.rooms == []


def test_new_collection_has_no_names():
    assert ChatGroups().group_names() == []


def test_group_names_in_insertion_order():
    groups = ChatGroups()
    groups.add(ChatGroup.empty("b"))
    groups.add(ChatGroup.empty("a"))
    groups.add(ChatGroup("c", [5]))
    assert groups.group_names() == ["b", "a", "c"]
    assert len(groups) == 3
    assert groups[2].rooms == [5]


def test_iteration_yields_groups():
    groups = ChatGroups([ChatGroup.empty("x"), ChatGroup.empty("y")])
    assert [g.name for g in groups] == groups.group_names()