import pytest

from pattern_catalog.structural.composite import File, Folder, demo


@pytest.fixture
def tree():
    root = Folder("Root")
    file1 = File("File1.txt")
    sub_folder = Folder("SubFolder")
    file2 = File("File2.txt")
    root.add(file1)
    root.add(sub_folder)
    root.add(file2)
    return root, file1, sub_folder, file2


def test_walk_visits_every_node_once_in_pre_order(tree):
    root, file1, sub_folder, file2 = tree

    visited = [node for _, node in root.walk()]

    assert visited == [root, file1, sub_folder, file2]
    assert len({id(node) for node in visited}) == 4


def test_walk_reports_depth(tree):
    root = tree[0]

    assert [depth for depth, _ in root.walk(1)] == [1, 3, 3, 3]


def test_nested_children_are_visited_before_later_siblings():
    root = Folder("Root")
    sub_folder = Folder("SubFolder")
    sub_folder.add(File("Nested.txt"))
    root.add(sub_folder).add(File("Last.txt"))

    assert [node.name for _, node in root.walk()] == [
        "Root", "SubFolder", "Nested.txt", "Last.txt",
    ]


def test_render_prefixes_depth_dashes(tree):
    assert tree[0].render(1) == ["-Root", "---File1.txt", "---SubFolder", "---File2.txt"]


def test_remove_child(tree):
    root, file1, sub_folder, file2 = tree

    root.remove(sub_folder)
    root.remove(File("not-a-child"))

    assert root.children == [file1, file2]


def test_file_is_a_leaf():
    leaf = File("a.txt")

    assert list(leaf.walk(2)) == [(2, leaf)]


def test_demo_output():
    assert demo() == ["-Root", "---File1.txt", "---SubFolder", "---File2.txt"]
