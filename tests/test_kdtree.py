import numpy as np
import pytest

from abstractions_kit.kdtree import KdTree


@pytest.fixture
def cloud():
    return np.random.default_rng(7).uniform(-10.0, 10.0, size=(200, 3))


def _brute_distances(cloud, point, k):
    d2 = ((cloud - point) ** 2).sum(axis=1)
    return np.sort(d2)[:k]


def test_exact_search_matches_brute_force(cloud):
    tree = KdTree(approximate=False)
    tree.build(cloud)
    queries = np.random.default_rng(3).uniform(-10.0, 10.0, size=(30, 3))
    for q in queries:
        idx = tree.closest_points(q, 5)
        found = ((cloud[idx] - q) ** 2).sum(axis=1)
        np.testing.assert_allclose(found, _brute_distances(cloud, q, 5))


def test_results_are_sorted_nearest_first(cloud):
    tree = KdTree()
    tree.build(cloud)
    q = np.array([1.0, -2.0, 0.5])
    idx = tree.closest_points(q, 8)
    d2 = ((cloud[idx] - q) ** 2).sum(axis=1)
    assert len(idx) == 8
    assert len(set(idx)) == 8
    assert list(d2) == sorted(d2)


def test_query_on_cloud_point_finds_itself(cloud):
    tree = KdTree(approximate=False)
    tree.build(cloud)
    assert tree.closest_points(cloud[42], 1) == [42]


def test_size_counts_distinct_points(cloud):
    tree = KdTree()
    tree.build(cloud)
    assert len(tree) == len(cloud)


def test_identical_points_collapse_into_one_leaf():
    tree = KdTree()
    tree.build([[1.0, 1.0, 1.0]] * 4)
    assert len(tree) == 1
    assert tree.describe() == ["leaf node: 0, idx: 0"]


def test_k_larger_than_size_raises(cloud):
    tree = KdTree()
    tree.build(cloud[:3])
    with pytest.raises(ValueError):
        tree.closest_points([0.0, 0.0, 0.0], 4)


def test_empty_cloud_raises():
    with pytest.raises(ValueError):
        KdTree().build([])


def test_clear_empties_tree(cloud):
    tree = KdTree()
    tree.build(cloud)
    tree.clear()
    assert len(tree) == 0
    with pytest.raises(ValueError):
        tree.closest_points([0.0, 0.0, 0.0], 1)


def test_many_pairs_layout(cloud):
    tree = KdTree(approximate=False)
    tree.build(cloud)
    queries = cloud[:4]
    matches = tree.closest_points_many(queries, 2)
    assert len(matches) == 8
    assert [q for _, q in matches] == [0, 0, 1, 1, 2, 2, 3, 3]
    assert [matches[2 * i][0] for i in range(4)] == [0, 1, 2, 3]


def test_many_with_k_too_large_gives_invalid(cloud):
    tree = KdTree()
    tree.build(cloud[:2])
    matches = tree.closest_points_many(cloud[:2], 3)
    assert matches == [(None, 0)] * 3 + [(None, 1)] * 3


def test_describe_has_one_line_per_node(cloud):
    tree = KdTree()
    tree.build(cloud[:10])
    lines = tree.describe()
    leaves = [line for line in lines if line.startswith("leaf node:")]
    assert len(leaves) == len(tree)
    # a binary tree with n leaves and full internal nodes has 2n - 1 nodes
    assert len(lines) == 2 * len(tree) - 1


def test_set_ann_switches_to_exact(cloud):
    tree = KdTree(approximate=True)
    tree.build(cloud)
    tree.set_ann(False)
    q = np.array([0.3, 0.3, 0.3])
    idx = tree.closest_points(q, 3)
    found = ((cloud[idx] - q) ** 2).sum(axis=1)
    np.testing.assert_allclose(found, _brute_distances(cloud, q, 3))