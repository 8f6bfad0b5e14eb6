import pytest

from binarysearchtree.cli import (
    build_sample_bst,
    demo_binary_search_tree,
    demo_binary_tree,
    demo_bst_operations,
    main,
)
from binarysearchtree.dot import dot_source


def _in_order(node):
    if node is None or node.key is None:
        return []
    return _in_order(node.left) + [node.key] + _in_order(node.right)


def _parents_consistent(node):
    for child in (node.left, node.right):
        if child is not None:
            if child.parent is not node or not _parents_consistent(child):
                return False
    return True


def test_sample_bst_is_ordered():
    root = build_sample_bst()
    keys = _in_order(root)
    assert keys == sorted(keys)
    assert sorted(keys) == [2, 3, 4, 6, 7, 9, 13, 15, 17, 18, 20]
    assert _parents_consistent(root)


def test_sample_bst_extremes():
    root = build_sample_bst()
    assert root.key == 15
    assert root.minimum().key == 2
    assert root.maximum().key == 20


def test_demo_binary_search_tree_output(tmp_path, capsys):
    root = demo_binary_search_tree(tmp_path)
    out = capsys.readouterr().out
    assert "tree search result of key 15 is found -> 15" in out
    assert "tree search result of key 9 is found -> 9" in out
    assert "tree search result of key 22 is not found" in out
    assert f"minimum result {root.minimum().key}" in out
    assert f"maximum result {root.maximum().key}" in out
    assert "root node 15" in out
    assert "node with key of 22 does not exist, failed to get successor" in out


def test_demo_binary_search_tree_successors_match_lookup(tmp_path, capsys):
    root = demo_binary_search_tree(tmp_path)
    out = capsys.readouterr().out
    for key in (2, 20, 15, 13, 9, 7):
        successor = root.search(key).successor_simpler()
        expected = successor.key if successor is not None else "not found"
        assert f"successor of node ({key}) is {expected}" in out


def test_demo_binary_search_tree_writes_dot(tmp_path, capsys):
    root = demo_binary_search_tree(tmp_path)
    capsys.readouterr()
    assert (tmp_path / "bst_graph.dot").read_text(encoding="utf-8") == dot_source(root)


def test_demo_bst_operations_final_tree(tmp_path, capsys):
    root = demo_bst_operations(tmp_path)
    capsys.readouterr()
    keys = _in_order(root)
    assert keys == sorted(keys)
    for removed in (2, 3, 4, 7, 15):
        assert removed not in keys
    for kept in (17, 18, 20):
        assert kept in keys
    assert _parents_consistent(root)


def test_demo_bst_operations_files(tmp_path, capsys):
    root = demo_bst_operations(tmp_path)
    capsys.readouterr()
    assert (tmp_path / "bst_graph.dot").read_text(encoding="utf-8") == "graph tree{\n}"
    for name in ("bst_after_insert.dot", "bst_after_transplant.dot", "bst_after_delete.dot"):
        assert (tmp_path / name).read_text(encoding="utf-8").startswith("graph tree{\n")
    assert (tmp_path / "bst_final.dot").read_text(encoding="utf-8") == dot_source(root)


def test_demo_bst_operations_output(tmp_path, capsys):
    root = demo_bst_operations(tmp_path)
    out = capsys.readouterr().out
    assert "Inserted key: 9" in out
    assert "Searching for key 22: Not found" in out
    assert "Searching for key 15: Not found" in out
    assert "Searching for key 17: Found -> 17" in out
    assert f"Minimum key after operations: {root.minimum().key}" in out
    assert f"Maximum key after operations: {root.maximum().key}" in out
    results = [line.strip() for line in out.splitlines() if "Deletion successful" in line]
    assert len(results) == 5
    assert results[-1] == "Deletion successful: False"


def test_demo_binary_tree(tmp_path, capsys):
    root = demo_binary_tree(tmp_path)
    out = capsys.readouterr().out
    assert f"Current tree depth: {root.depth()}" in out
    assert f"Amount of nodes in current tree: {root.count_nodes()}" in out
    assert f"Amount of nodes in current subtree: {root.right.count_nodes()}" in out
    assert "status of node deletion: True" in out
    assert (tmp_path / "prime_t4.dot").read_text(encoding="utf-8") == dot_source(root)
    assert (tmp_path / "prime_t2.dot").read_text(encoding="utf-8") == dot_source(root)


def test_demo_binary_tree_discarded_copy(tmp_path, capsys):
    demo_binary_tree(tmp_path)
    capsys.readouterr()
    trimmed = (tmp_path / "prime_t3.dot").read_text(encoding="utf-8")
    assert "5--3" not in trimmed
    assert "\t5--7;\n" in trimmed
    first = (tmp_path / "prime.dot").read_text(encoding="utf-8")
    assert first == "graph tree{\n\t5--3;\n\t5--7;\n}"


def test_main_writes_bst_files(tmp_path, capsys):
    assert main(["--output-dir", str(tmp_path)]) == 0
    capsys.readouterr()
    assert (tmp_path / "bst_final.dot").exists()
    assert not (tmp_path / "prime.dot").exists()


def test_main_binary_tree_flag(tmp_path, capsys):
    assert main(["-o", str(tmp_path), "--binary-tree"]) == 0
    out = capsys.readouterr().out
    assert (tmp_path / "prime.dot").exists()
    assert "Current tree depth:" in out


def test_main_rejects_unknown_option(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--no-such-option"])
    assert excinfo.value.code == 2