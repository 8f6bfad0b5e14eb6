"""Command that builds sample trees, queries them and draws them as dot files."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional, Sequence, Union

from binarysearchtree.bst import BstNode
from binarysearchtree.dot import write_dotfile
from binarysearchtree.tree import Node

PathLike = Union[str, Path]


def build_sample_bst() -> BstNode:
    """Build the sample search tree by attaching children by hand."""
    root = BstNode(15)
    left = root.add_left_child(6)
    right = root.add_right_child(18)

    right.add_left_child(17)
    right.add_right_child(20)

    three = left.add_left_child(3)
    seven = left.add_right_child(7)
    three.add_left_child(2)
    three.add_right_child(4)

    thirteen = seven.add_right_child(13)
    thirteen.add_left_child(9)
    return root


def _search_report(root: BstNode, key: int) -> str:
    node = root.search(key)
    return f"found -> {node.key}" if node is not None else "not found"


def demo_binary_search_tree(out_dir: PathLike) -> BstNode:
    """Query the sample tree, print the results and draw it; return the tree."""
    out = Path(out_dir)
    root = build_sample_bst()
    write_dotfile(root, out / "bst_graph.dot")

    for key in (15, 9, 22):
        print(f"tree search result of key {key} is {_search_report(root, key)}")

    min_node = root.minimum()
    print(f"minimum result {min_node.key}")
    max_node = root.maximum()
    print(f"maximum result {max_node.key}")
    print(f"root node {max_node.root().key}")

    for key in (2, 20, 15, 13, 9, 7, 22):
        node = root.search(key)
        if node is None:
            print(f"node with key of {key} does not exist, failed to get successor")
            continue
        successor = node.successor_simpler()
        result = successor.key if successor is not None else "not found"
        print(f"successor of node ({key}) is {result}")
    return root


def _report_delete(root: BstNode, key: int) -> bool:
    deleted = root.delete(key)
    print(f"   Deletion successful: {deleted}")
    return deleted


def demo_bst_operations(out_dir: PathLike) -> BstNode:
    """Insert, transplant and delete on a tree, drawing each stage; return the tree."""
    out = Path(out_dir)
    print("\n=== Testing BST Operations ===")
    root = BstNode()

    print("Testing tree_insert operation:")
    initial_path = out / "bst_graph.dot"
    write_dotfile(root, initial_path)
    print(f"Initial empty BST saved to {initial_path}")

    for key in (15, 6, 18, 3, 7, 17, 20, 2, 4, 13, 9):
        root.insert(key)
        print(f"Inserted key: {key}")

    insert_path = out / "bst_after_insert.dot"
    write_dotfile(root, insert_path)
    print(f"BST after insertions saved to {insert_path}")

    print("\nVerifying insertions with tree_search:")
    for key in (15, 9, 22, 4):
        node = root.search(key)
        print(f"Searching for key {key}: " + (f"Found -> {node.key}" if node else "Not found"))

    print("\nTesting transplant operation:")
    node_3 = root.search(3)
    node_4 = root.search(4)
    if node_3 is not None and node_4 is not None:
        root.transplant(node_3, node_4)
        transplant_path = out / "bst_after_transplant.dot"
        write_dotfile(root, transplant_path)
        print(f"BST after transplant saved to {transplant_path}")

    print("\nTesting tree_delete operation:")
    print("1. Deleting leaf node (2)")
    _report_delete(root, 2)
    delete_path = out / "bst_after_delete.dot"
    write_dotfile(root, delete_path)
    print(f"BST after first deletion saved to {delete_path}")

    print("2. Deleting node with one child (4)")
    _report_delete(root, 4)
    print("3. Deleting node with two children (7)")
    _report_delete(root, 7)
    print("4. Deleting root node (15)")
    _report_delete(root, 15)
    print("5. Deleting non-existent node (99)")
    _report_delete(root, 99)

    final_path = out / "bst_final.dot"
    write_dotfile(root, final_path)
    print(f"Final BST state saved to {final_path}")

    print("\nVerifying structure after deletions:")
    for key in (2, 3, 4, 7, 15, 17, 18, 20):
        node = root.search(key)
        print(f"Searching for key {key}: " + (f"Found -> {node.key}" if node else "Not found"))

    print(f"\nMinimum key after operations: {root.minimum().key}")
    print(f"Maximum key after operations: {root.maximum().key}")
    return root


def demo_binary_tree(out_dir: PathLike) -> Node:
    """Exercise the plain binary tree, printing and drawing it; return its root."""
    out = Path(out_dir)
    root = Node(5)
    left = root.add_left_child(3)
    right = root.add_right_child(7)
    write_dotfile(root, out / "prime.dot")

    left.add_left_child(2)
    left.add_right_child(4)
    right.add_right_child(10)
    write_dotfile(root, out / "prime_t2.dot")

    print(f"Current tree depth: {root.depth()}")
    print(f"Amount of nodes in current tree: {root.count_nodes()}")
    print(f"Amount of nodes in current subtree: {right.count_nodes()}")

    left.sibling()

    found = root.find_by_value(3)
    print(f"left subtree seek by value {found!r}")
    if found is not None:
        print(f"left subtree seek by full property {root.find_by_full_property(found)!r}")

    trimmed = root.copy()
    print(f"status of node deletion: {trimmed.discard_by_value(3)}")
    write_dotfile(trimmed, out / "prime_t3.dot")
    print(f"Depth after discard {trimmed.depth()}")
    print(f"Count nodes after discard {trimmed.count_nodes()}")

    write_dotfile(root, out / "prime_t4.dot")
    return root


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the demonstrations, writing dot files to the chosen directory."""
    parser = argparse.ArgumentParser(
        prog="binarysearchtree",
        description="Build sample binary trees and write them as graphviz dot files.",
    )
    parser.add_argument(
        "-o", "--output-dir", type=Path, default=Path("."),
        help="directory that receives the dot files (default: current directory)",
    )
    parser.add_argument(
        "--binary-tree", action="store_true",
        help="also run the plain binary tree demonstration",
    )
    args = parser.parse_args(argv)

    if args.binary_tree:
        demo_binary_tree(args.output_dir)
    demo_binary_search_tree(args.output_dir)
    demo_bst_operations(args.output_dir)
    return 0