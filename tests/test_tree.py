import pytest

from dstructs.linkedtree import LinkedTree
from dstructs.tree import Tree


def test_tree_is_abstract():
    with pytest.raises(TypeError):
        Tree()


def test_depth_and_width_of_empty_tree():
    tree = LinkedTree()
    assert tree.depth() == -1
    assert tree.width() == 0


def test_lone_root():
    tree = LinkedTree()
    tree.insert_root("a")
    assert tree.depth() == 0
    assert tree.width() == 1
    assert list(tree.children(tree.root())) == []


@pytest.mark.parametrize("length", [1, 2, 5, 9])
def test_depth_of_chain(length):
    tree = LinkedTree()
    tree.insert_root(0)
    node = tree.root()
    for value in range(1, length + 1):
        tree.insert_first_child(node, value)
        node = tree.first_child(node)
    assert tree.depth() == length
    assert tree.width() == 1


def test_children_order():
    tree = LinkedTree()
    tree.insert_root("a")
    root = tree.root()
    tree.insert_first_child(root, "b")
    tree.insert_next_sibling(tree.first_child(root), "c")
    tree.insert_next_sibling(tree.first_child(root), "d")
    tree.insert_first_child(root, "e")
    assert [tree.read(n) for n in tree.children(root)] == ["e", "b", "d", "c"]
    assert tree.width() == len(list(tree.children(root)))


def test_depth_uses_deepest_branch():
    tree = LinkedTree()
    tree.insert_root("r")
    root = tree.root()
    tree.insert_first_child(root, "deep")
    deep = tree.first_child(root)
    tree.insert_first_child(deep, "x")
    tree.insert_first_child(tree.first_child(deep), "y")
    tree.insert_first_child(root, "shallow")
    assert tree.depth() == 3


def test_width_follows_first_child_chain():
    tree = LinkedTree()
    tree.insert_root("r")
    root = tree.root()
    tree.insert_first_child(root, "y")
    y = tree.first_child(root)
    for value in range(5):
        tree.insert_first_child(y, value)
    tree.insert_first_child(root, "x")
    assert tree.width() == len(list(tree.children(root)))
    assert tree.width() < len(list(tree.children(y)))