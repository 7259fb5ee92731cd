from escapegraph.disjoint_set import DisjointSet


def test_union_merges_sets():
    sets = DisjointSet(5)
    assert sets.components == 5
    assert sets.union(0, 1)
    assert sets.union(3, 4)
    assert sets.find(0) == sets.find(1)
    assert sets.find(1) != sets.find(3)
    assert sets.components == 3


def test_union_of_same_set_is_rejected():
    sets = DisjointSet(3)
    sets.union(0, 1)
    sets.union(1, 2)
    assert not sets.union(0, 2)
    assert sets.components == 1


def test_find_compresses_long_chains():
    size = 2000
    sets = DisjointSet(size)
    for item in range(1, size):
        sets.union(item - 1, item)
    root = sets.find(size - 1)
    assert all(sets.find(item) == root for item in range(size))
    assert all(sets.parent[item] == root for item in range(size))
