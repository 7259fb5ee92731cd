class DisjointSet:
    """
    Disjoint-set forest over the integers 0..size-1.

    Uses path compression in find and union by rank.
    """

    def __init__(self, size):
        self.parent = list(range(size))
        self.rank = [0] * size
        self.components = size

    def find(self, item):
        """Return the representative of the set containing item."""
        root = item
        while self.parent[root] != root:
            root = self.parent[root]
        # Compress the path walked above
        while self.parent[item] != root:
            self.parent[item], item = root, self.parent[item]
        return root

    def union(self, a, b):
        """
        Merge the sets containing a and b.

        Returns:
            bool: True if two distinct sets were merged, False if a and b were
            already in the same set.
        """
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return False

        if self.rank[root_a] < self.rank[root_b]:
            root_a, root_b = root_b, root_a
        self.parent[root_b] = root_a
        if self.rank[root_a] == self.rank[root_b]:
            self.rank[root_a] += 1
        self.components -= 1
        return True
