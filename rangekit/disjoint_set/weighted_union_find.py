from rangekit.errors import check_index


class WeightedUnionFind:
    """
    Disjoint sets whose members carry a potential relative to their root.

    `merge(a, b, weight)` records the constraint potential(b) - potential(a) == weight
    and reports whether it is consistent with the constraints merged so far.
    """

    def __init__(self, size):
        assert size >= 0
        self._parent = list(range(size))
        # Weight from each node to its parent, zero for roots.
        self._weight = [0] * size
        self._size = [1] * size
        self._root_count = size

    def __len__(self):
        return len(self._parent)

    @property
    def root_count(self):
        return self._root_count

    def find(self, node):
        check_index(node, len(self._parent), "node")

        path = []
        while self._parent[node] != node:
            path.append(node)
            node = self._parent[node]
        root = node

        # Compress from the node nearest to the root, so each parent weight is already relative to the root.
        for child in reversed(path):
            parent = self._parent[child]
            if parent != root:
                self._weight[child] += self._weight[parent]
                self._parent[child] = root
        return root

    def potential(self, node):
        root = self.find(node)
        return 0 if node == root else self._weight[node]

    def size(self, node):
        return self._size[self.find(node)]

    def same(self, node_a, node_b):
        return self.find(node_a) == self.find(node_b)

    def diff(self, node_a, node_b):
        if not self.same(node_a, node_b):
            raise ValueError(f"Nodes {node_a} and {node_b} are not in the same set.")
        return self.potential(node_b) - self.potential(node_a)

    def merge(self, node_a, node_b, weight):
        root_a, root_b = self.find(node_a), self.find(node_b)
        weight_a, weight_b = self.potential(node_a), self.potential(node_b)

        if root_a == root_b:
            return weight_b - weight_a == weight

        if self._size[root_a] >= self._size[root_b]:
            self._parent[root_b] = root_a
            self._weight[root_b] = weight + weight_a - weight_b
            self._size[root_a] += self._size[root_b]
        else:
            self._parent[root_a] = root_b
            self._weight[root_a] = weight_b - weight - weight_a
            self._size[root_b] += self._size[root_a]
        self._root_count -= 1
        return True
