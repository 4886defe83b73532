"""Grouping of flat records into a keyed, expandable hierarchy.

Top-level ordering: keys found in the priority list come first, in list
order; every other key follows in lexicographic order. Child nodes are
ordered the same way against an optional child priority list.

Expansion state lives in a side set of composite paths (``parent.child``),
separate from the tree itself. Rebuilding the tree from fresh data keeps a
node expanded as long as its path still exists; paths that disappear are
dropped from the set.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any

logger = logging.getLogger(__name__)

GroupKeyOf = Callable[[Any], str]

PATH_SEPARATOR = "."


def join_path(parent: str | None, key: str) -> str:
    return key if not parent else f"{parent}{PATH_SEPARATOR}{key}"


def order_keys(keys: Iterable[str], priority: Sequence[str] = ()) -> list[str]:
    """Priority-listed keys by list index, then the rest alphabetically."""
    rank = {key: index for index, key in enumerate(priority)}
    unique = list(dict.fromkeys(keys))
    ranked = sorted((key for key in unique if key in rank), key=rank.__getitem__)
    rest = sorted(key for key in unique if key not in rank)
    return ranked + rest


@dataclass
class TreeNode:
    """One group in the hierarchy."""

    key: str
    path: str
    depth: int = 0
    records: list[Any] = field(default_factory=list)
    children: list[TreeNode] = field(default_factory=list)
    expanded: bool = False

    @property
    def count(self) -> int:
        return len(self.records)

    @property
    def has_children(self) -> bool:
        return bool(self.children)

    def walk(self) -> Iterable[TreeNode]:
        yield self
        for child in self.children:
            yield from child.walk()


@dataclass(frozen=True)
class TreeRow:
    """One visible line of a flattened tree: a group header or a record."""

    depth: int
    path: str
    node: TreeNode | None = None
    record: Any = None

    @property
    def is_node(self) -> bool:
        return self.node is not None


class ExpansionState:
    """Set of expanded composite paths."""

    def __init__(self, paths: Iterable[str] = ()) -> None:
        self._paths: set[str] = set(paths)

    def __contains__(self, path: object) -> bool:
        return path in self._paths

    def __len__(self) -> int:
        return len(self._paths)

    @property
    def paths(self) -> frozenset[str]:
        return frozenset(self._paths)

    def is_expanded(self, path: str) -> bool:
        return path in self._paths

    def toggle(self, path: str) -> bool:
        """Flip ``path`` and return its new expanded state."""
        if path in self._paths:
            self._paths.discard(path)
            return False
        self._paths.add(path)
        return True

    def expand(self, path: str) -> None:
        self._paths.add(path)

    def collapse(self, path: str) -> None:
        self._paths.discard(path)

    def retain(self, valid_paths: Iterable[str]) -> None:
        """Drop every path not present in ``valid_paths``."""
        self._paths.intersection_update(valid_paths)

    def clear(self) -> None:
        self._paths.clear()


class TreeAggregator:
    """Builds ordered trees from flat records and owns their expansion state."""

    def __init__(
        self,
        priority: Sequence[str] = (),
        *,
        child_priority: Sequence[str] = (),
        expansion: ExpansionState | None = None,
    ) -> None:
        self.priority = tuple(priority)
        self.child_priority = tuple(child_priority)
        self.expansion = expansion if expansion is not None else ExpansionState()
        self._roots: list[TreeNode] = []

    @property
    def roots(self) -> list[TreeNode]:
        return self._roots

    def build(
        self,
        records: Iterable[Any],
        key_of: GroupKeyOf,
        child_key_of: GroupKeyOf | None = None,
    ) -> list[TreeNode]:
        """Group ``records`` by ``key_of`` (and ``child_key_of`` one level down)."""
        groups: dict[str, list[Any]] = {}
        for record in records:
            groups.setdefault(key_of(record), []).append(record)

        roots: list[TreeNode] = []
        for key in order_keys(groups, self.priority):
            node = TreeNode(key=key, path=join_path(None, key), records=groups[key])
            if child_key_of is not None:
                node.children = self._build_children(node, child_key_of)
            roots.append(node)

        valid_paths = {node.path for root in roots for node in root.walk()}
        self.expansion.retain(valid_paths)
        for root in roots:
            for node in root.walk():
                node.expanded = self.expansion.is_expanded(node.path)
        self._roots = roots
        return roots

    def _build_children(self, parent: TreeNode, child_key_of: GroupKeyOf) -> list[TreeNode]:
        groups: dict[str, list[Any]] = {}
        for record in parent.records:
            groups.setdefault(child_key_of(record), []).append(record)
        return [
            TreeNode(
                key=key,
                path=join_path(parent.path, key),
                depth=parent.depth + 1,
                records=groups[key],
            )
            for key in order_keys(groups, self.child_priority)
        ]

    def toggle(self, path: str) -> bool:
        """Toggle ``path`` and reflect it on the current tree."""
        expanded = self.expansion.toggle(path)
        for root in self._roots:
            for node in root.walk():
                if node.path == path:
                    node.expanded = expanded
        return expanded

    def find(self, path: str) -> TreeNode | None:
        for root in self._roots:
            for node in root.walk():
                if node.path == path:
                    return node
        return None

    def flatten(self, nodes: Sequence[TreeNode] | None = None) -> list[TreeRow]:
        """Visible rows: every root, plus the contents of expanded nodes."""
        rows: list[TreeRow] = []
        for node in self._roots if nodes is None else nodes:
            self._flatten_node(node, rows)
        return rows

    def _flatten_node(self, node: TreeNode, rows: list[TreeRow]) -> None:
        rows.append(TreeRow(depth=node.depth, path=node.path, node=node))
        if not node.expanded:
            return
        if node.children:
            for child in node.children:
                self._flatten_node(child, rows)
            return
        for record in node.records:
            rows.append(TreeRow(depth=node.depth + 1, path=node.path, record=record))


__all__ = [
    "ExpansionState",
    "GroupKeyOf",
    "TreeAggregator",
    "TreeNode",
    "TreeRow",
    "join_path",
    "order_keys",
]
