from __future__ import annotations

"""
Role Classifier.

Decides which rendering contract applies to a directory. Classification is
recomputed at every step of the walk and never stored on the node.
"""

from treedocs.domain.tree_models import DirectoryNode, Role


def classify(node: DirectoryNode, is_root: bool, collection_name: str) -> Role:
    """
    Assign exactly one role to ``node``.

    Precedence: the walk root, then the designated collection (matched by
    name), then intermediate directories (at least one sub-directory), and
    leaf directories for everything else, including empty ones.

    Args:
        node: Directory being rendered.
        is_root: Whether ``node`` is the top-level argument of the walk.
        collection_name: Configured designated-collection name.

    Returns:
        Role: The rendering role.
    """
    if is_root:
        return Role.ROOT
    if node.name == collection_name:
        return Role.DESIGNATED_COLLECTION
    if node.has_subdirectories:
        return Role.INTERMEDIATE
    return Role.LEAF
