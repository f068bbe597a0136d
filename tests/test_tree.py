from keyvaluegrid.model.tree import GroupedKeyValueTree, KVPelement, KVPgroup


def _tree() -> GroupedKeyValueTree:
    return GroupedKeyValueTree(groups=[
        KVPgroup("Settings", [KVPelement("Theme", "Dark"), KVPelement("Language", "en-US")]),
        KVPgroup("Empty"),
        KVPgroup("Network", [KVPelement("Timeout", "30s"), KVPelement("Proxies", "")]),
    ])


def test_lookup_by_name_and_key():
    tree = _tree()
    assert tree.group_index("Network") == 2
    assert tree.group_index("missing") == -1
    assert tree.find_group("missing") is None

    settings = tree.find_group("Settings")
    assert settings.element_index("Language") == 1
    assert settings.find_element("Theme").value == "Dark"
    assert settings.find_element("theme") is None


def test_longest_key_keeps_first_on_ties():
    tree = _tree()
    assert tree.longest_key() == "Language"

    tie = GroupedKeyValueTree([KVPgroup("a", [KVPelement("abc"), KVPelement("xyz")])])
    assert tie.longest_key() == "abc"
    assert GroupedKeyValueTree().longest_key() == ""


def test_to_dict_preserves_order():
    d = _tree().to_dict()
    assert list(d) == ["Settings", "Empty", "Network"]
    assert d["Settings"] == {"Theme": "Dark", "Language": "en-US"}
    assert d["Empty"] == {}


def test_len_iter_and_empty():
    tree = _tree()
    assert len(tree) == 3
    assert [g.name for g in tree] == ["Settings", "Empty", "Network"]
    assert not tree.is_empty()
    assert GroupedKeyValueTree().is_empty()
    assert len(tree.groups[0]) == 2
