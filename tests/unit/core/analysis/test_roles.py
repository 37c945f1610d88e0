from __future__ import annotations

"""
Unit tests for the Role Classifier.
"""

import pytest

from treedocs.core.analysis.roles import classify
from treedocs.core.analysis.scanner import scan
from treedocs.domain.tree_models import DirectoryNode, FileNode, Role


def _dir(name, *children):
    return DirectoryNode(name=name, path=f"/x/{name}", depth=1, children=tuple(children))


def test_root_wins_over_everything():
    assert classify(_dir("C", _dir("sub")), True, "C") is Role.ROOT


def test_designated_collection_by_name():
    assert classify(_dir("C"), False, "C") is Role.DESIGNATED_COLLECTION


@pytest.mark.parametrize("node, expected", [
    (_dir("n", _dir("child")), Role.INTERMEDIATE),
    (_dir("n", FileNode(name="f", path="/x/n/f.md", depth=2)), Role.LEAF),
    (_dir("n"), Role.LEAF),
])
def test_intermediate_and_leaf(node, expected):
    assert classify(node, False, "C") is expected


def test_every_directory_gets_exactly_one_role(library, library_config):
    tree = scan(str(library), library_config)
    roles = {}

    def walk(node, is_root):
        roles[node.name] = classify(node, is_root, "C")
        for d in node.directories:
            walk(d, False)

    walk(tree, True)

    assert roles == {
        "site": Role.ROOT,
        "C": Role.DESIGNATED_COLLECTION,
        "A": Role.LEAF,
        "B": Role.INTERMEDIATE,
        "B1": Role.LEAF,
    }
