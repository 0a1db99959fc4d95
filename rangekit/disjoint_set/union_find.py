from rangekit.errors import check_index


class UnionFind:
    """
    Disjoint sets with union by size and path compression.
    """

    def __init__(self, size):
        assert size >= 0
        # Parent of each node, a root being its own parent.
        self._parent = list(range(size))
        self._size = [1] * size
        self._root_count = size

    def __len__(self):
        return len(self._parent)

    @property
    def root_count(self):
        return self._root_count

    def find(self, node):
        check_index(node, len(self._parent), "node")

        root = node
        while self._parent[root] != root:
            root = self._parent[root]

        # Point every node on the path directly to the root.
        while self._parent[node] != root:
            self._parent[node], node = root, self._parent[node]
        return root

    def size(self, node):
        return self._size[self.find(node)]

    def same(self, node_a, node_b):
        return self.find(node_a) == self.find(node_b)

    def merge(self, node_a, node_b):
        root_a = self.find(node_a)
        root_b = self.find(node_b)
        if root_a == root_b:
            return False

        if self._size[root_a] < self._size[root_b]:
            root_a, root_b = root_b, root_a
        self._parent[root_b] = root_a
        self._size[root_a] += self._size[root_b]
        self._root_count -= 1
        return True
