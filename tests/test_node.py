# tests/test_node.py
import pytest

from freq_trie.core import TrieNode


def test_defaults_describe_an_empty_root():
    root = TrieNode()
    assert root.key is None
    assert root.frequency == 0
    assert dict(root.children) == {}
    assert root.is_root and not root.is_word


def test_nodes_are_immutable():
    node = TrieNode(key="a", frequency=1)
    with pytest.raises(AttributeError):
        node.frequency = 2
    with pytest.raises(TypeError):
        node.children["b"] = TrieNode(key="b")


def test_children_are_copied_on_construction():
    kids = {"b": TrieNode(key="b")}
    node = TrieNode(key="a", children=kids)
    kids["c"] = TrieNode(key="c")
    assert sorted(node.children) == ["b"]


def test_negative_frequency_rejected():
    with pytest.raises(ValueError):
        TrieNode(key="a", frequency=-1)


def test_equality_is_recursive_and_order_independent():
    a = TrieNode(children={"x": TrieNode(key="x", frequency=1), "y": TrieNode(key="y")})
    b = TrieNode(children={"y": TrieNode(key="y"), "x": TrieNode(key="x", frequency=1)})
    c = TrieNode(children={"y": TrieNode(key="y"), "x": TrieNode(key="x", frequency=2)})
    assert a == b
    assert a != c
    assert a != "not a node"


def test_copy_helpers_share_children():
    child = TrieNode(key="b", frequency=1)
    node = TrieNode(key="a", children={"b": child})

    bumped = node.with_frequency(3)
    assert bumped.frequency == 3 and node.frequency == 0
    assert bumped.children["b"] is child

    grown = node.with_child(TrieNode(key="c"))
    assert sorted(grown.children) == ["b", "c"]
    assert grown.children["b"] is child
    assert sorted(node.children) == ["b"]

    assert dict(grown.without_child("c").children) == {"b": child}


def test_nodes_are_unhashable():
    with pytest.raises(TypeError):
        hash(TrieNode())
