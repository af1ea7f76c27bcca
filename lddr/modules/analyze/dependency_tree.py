#  Copyright  2021 Alexis Lopez Zubieta
#
#  Permission is hereby granted, free of charge, to any person obtaining a
#  copy of this software and associated documentation files (the "Software"),
#  to deal in the Software without restriction, including without limitation the
#  rights to use, copy, modify, merge, publish, distribute, sublicense, and/or
#  sell copies of the Software, and to permit persons to whom the Software is
#  furnished to do so, subject to the following conditions:
#
#  The above copyright notice and this permission notice shall be included in
#  all copies or substantial portions of the Software.
from lddr.errors import NodeNotFoundError


class DependencyTree:
    """
    Ordered tree of BinaryFile nodes.

    Nodes live in an arena and are addressed by the integer id returned when
    they are inserted. Children are kept in insertion order. The tree is
    write-once: there is no removal.

    Height counts nodes, not edges: a tree holding only its root has height 1
    and an empty tree has height 0.
    """

    def __init__(self):
        self._nodes = []
        self._children = []
        self._root_id = None

    def insert_root(self, data) -> int:
        if self._root_id is not None:
            raise ValueError("The tree already has a root node")

        self._root_id = self._add_node(data)
        return self._root_id

    def insert_child(self, parent_id: int, data) -> int:
        self._check_id(parent_id)

        node_id = self._add_node(data)
        self._children[parent_id].append(node_id)
        return node_id

    def root_id(self) -> int:
        if self._root_id is None:
            raise NodeNotFoundError("The tree is empty")
        return self._root_id

    def get(self, node_id: int):
        self._check_id(node_id)
        return self._nodes[node_id]

    def children_ids(self, node_id: int) -> [int]:
        self._check_id(node_id)
        return list(self._children[node_id])

    def height(self) -> int:
        if self._root_id is None:
            return 0
        return max(depth for depth, _ in self.walk()) + 1

    def walk(self):
        """Yield (depth, node_id) pairs in depth-first pre-order, the root at depth 0"""
        if self._root_id is None:
            return

        stack = [(0, self._root_id)]
        while stack:
            depth, node_id = stack.pop()
            yield depth, node_id
            for child_id in reversed(self._children[node_id]):
                stack.append((depth + 1, child_id))

    def _add_node(self, data):
        self._nodes.append(data)
        self._children.append([])
        return len(self._nodes) - 1

    def _check_id(self, node_id):
        if not isinstance(node_id, int) or not 0 <= node_id < len(self._nodes):
            raise NodeNotFoundError(node_id)

    def __len__(self):
        return len(self._nodes)

    def __eq__(self, other):
        if not isinstance(other, DependencyTree):
            return NotImplemented
        return self._shape() == other._shape()

    def _shape(self):
        return [(depth, self._nodes[node_id]) for depth, node_id in self.walk()]
