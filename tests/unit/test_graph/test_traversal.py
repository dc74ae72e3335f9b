"""Tests for graph traversal."""

import itertools

import pytest

from social_graph.graph.engine import SocialGraph
from social_graph.graph.models import PathStatus
from social_graph.graph.traversal import GraphTraversal


def brute_force_distances(graph: SocialGraph) -> dict[tuple[str, str], int]:
    """All-pairs hop distances by Floyd-Warshall, for cross-checking BFS."""
    users = graph.usernames()
    inf = len(users) + 1
    dist = {(u, v): 0 if u == v else inf for u in users for v in users}
    for a, b in graph.friendships():
        dist[(a, b)] = dist[(b, a)] = 1
    for k in users:
        for i in users:
            for j in users:
                if dist[(i, k)] + dist[(k, j)] < dist[(i, j)]:
                    dist[(i, j)] = dist[(i, k)] + dist[(k, j)]
    return {pair: d for pair, d in dist.items() if d < inf}


class TestBreadthFirstSearch:
    """Tests for BFS ordering."""

    @pytest.fixture
    def traversal(self, demo_graph: SocialGraph) -> GraphTraversal:
        """Create traversal over the demo graph."""
        return GraphTraversal(demo_graph)

    def test_bfs_order(self, traversal: GraphTraversal) -> None:
        """Test level order with sorted neighbors."""
        assert traversal.bfs("alice") == [
            "alice",
            "bob", "charlie", "diana", "jack",
            "eve", "frank", "grace", "ivy",
            "henry",
        ]

    def test_bfs_levels(self, traversal: GraphTraversal) -> None:
        """Test BFS grouped by distance."""
        assert traversal.bfs_levels("alice") == [
            ["alice"],
            ["bob", "charlie", "diana", "jack"],
            ["eve", "frank", "grace", "ivy"],
            ["henry"],
        ]

    def test_bfs_unknown_start(self, traversal: GraphTraversal) -> None:
        """Test BFS from an unknown user."""
        assert traversal.bfs("nobody") == []
        assert traversal.bfs_levels("nobody") == []
        assert traversal.bfs_parents("nobody") == {}

    def test_bfs_isolated_user(self, traversal: GraphTraversal) -> None:
        """Test BFS from a user with no friends."""
        assert traversal.bfs("mia") == ["mia"]

    def test_bfs_normalizes_start(self, traversal: GraphTraversal) -> None:
        """Test that the start username is normalized."""
        assert traversal.bfs(" KIM ") == ["kim", "leo"]

    def test_bfs_parents(self, traversal: GraphTraversal) -> None:
        """Test the parent-pointer map."""
        parents = traversal.bfs_parents("alice")
        assert parents["alice"] is None
        assert parents["eve"] == "bob"
        assert parents["henry"] == "eve"
        assert parents["ivy"] == "jack"
        assert "kim" not in parents


class TestShortestPath:
    """Tests for shortest path and degrees of separation."""

    def test_scenario_path(self, scenario_graph: SocialGraph) -> None:
        """Test alice to diana goes through charlie."""
        result = GraphTraversal(scenario_graph).shortest_path("alice", "diana")
        assert result.status == PathStatus.FOUND
        assert result.path == ["alice", "charlie", "diana"]
        assert result.degrees == 2

    def test_same_user(self, scenario_graph: SocialGraph) -> None:
        """Test a path from a user to themselves."""
        result = GraphTraversal(scenario_graph).shortest_path("bob", "BOB")
        assert result.found
        assert result.path == ["bob"]
        assert result.degrees == 0

    def test_deterministic_path(self, demo_graph: SocialGraph) -> None:
        """Test the first-discovered parent wins among equal-length paths."""
        result = GraphTraversal(demo_graph).shortest_path("alice", "henry")
        assert result.path == ["alice", "bob", "eve", "henry"]

    def test_no_path(self, demo_graph: SocialGraph) -> None:
        """Test disconnected users."""
        traversal = GraphTraversal(demo_graph)
        result = traversal.shortest_path("alice", "kim")
        assert result.status == PathStatus.NO_PATH
        assert result.path == []
        assert result.degrees is None
        assert traversal.degrees_of_separation("alice", "mia") is None

    def test_unknown_user(self, demo_graph: SocialGraph) -> None:
        """Test a path involving an unknown user."""
        traversal = GraphTraversal(demo_graph)
        assert traversal.shortest_path("alice", "zed").status == PathStatus.NOT_FOUND
        assert traversal.shortest_path("zed", "zed").status == PathStatus.NOT_FOUND

    def test_path_is_connected(self, demo_graph: SocialGraph) -> None:
        """Test consecutive users on a path are friends."""
        path = GraphTraversal(demo_graph).shortest_path("jack", "frank").path
        assert path[0] == "jack"
        assert path[-1] == "frank"
        for a, b in zip(path, path[1:]):
            assert demo_graph.are_friends(a, b)

    def test_matches_brute_force(self, demo_graph: SocialGraph) -> None:
        """Test BFS distances equal all-pairs minimum distances."""
        traversal = GraphTraversal(demo_graph)
        expected = brute_force_distances(demo_graph)
        for u, v in itertools.product(demo_graph.usernames(), repeat=2):
            if (u, v) in expected:
                assert traversal.degrees_of_separation(u, v) == expected[(u, v)]
            else:
                assert traversal.shortest_path(u, v).status == PathStatus.NO_PATH

    def test_path_after_unfriend(self, scenario_graph: SocialGraph) -> None:
        """Test paths reflect removed friendships."""
        scenario_graph.remove_friendship("charlie", "diana")
        result = GraphTraversal(scenario_graph).shortest_path("alice", "diana")
        assert result.status == PathStatus.NO_PATH


class TestDepthFirstSearch:
    """Tests for DFS ordering."""

    @pytest.fixture
    def traversal(self, demo_graph: SocialGraph) -> GraphTraversal:
        """Create traversal over the demo graph."""
        return GraphTraversal(demo_graph)

    def test_dfs_order(self, traversal: GraphTraversal) -> None:
        """Test depth-first order with the smallest neighbor first."""
        assert traversal.dfs("alice") == [
            "alice", "bob", "charlie", "frank", "eve",
            "diana", "grace", "henry", "ivy", "jack",
        ]

    def test_dfs_early_exit(self, traversal: GraphTraversal) -> None:
        """Test DFS stops at the target."""
        assert traversal.dfs("alice", target="Eve") == [
            "alice", "bob", "charlie", "frank", "eve",
        ]

    def test_dfs_unreachable_target(self, traversal: GraphTraversal) -> None:
        """Test DFS with an unreachable target visits the whole component."""
        assert len(traversal.dfs("alice", target="kim")) == 10

    def test_dfs_unknown_start(self, traversal: GraphTraversal) -> None:
        """Test DFS from an unknown user."""
        assert traversal.dfs("nobody") == []

    def test_dfs_long_chain(self) -> None:
        """Test DFS on a chain longer than the recursion limit."""
        graph = SocialGraph()
        names = [f"u{i:05d}" for i in range(3000)]
        for name in names:
            graph.add_user(name)
        for a, b in zip(names, names[1:]):
            graph.add_friendship(a, b)
        assert GraphTraversal(graph).dfs(names[0]) == names

    def test_dfs_visits_each_once(self, traversal: GraphTraversal) -> None:
        """Test DFS never repeats a user."""
        order = traversal.dfs("henry")
        assert len(order) == len(set(order))
        assert set(order) == set(traversal.bfs("henry"))


class TestConnectedComponents:
    """Tests for connected component detection."""

    def test_scenario_single_component(self, scenario_graph: SocialGraph) -> None:
        """Test the four-user graph is one component."""
        components = GraphTraversal(scenario_graph).connected_components()
        assert components == [["alice", "bob", "charlie", "diana"]]

    def test_demo_components(self, demo_graph: SocialGraph) -> None:
        """Test components are ordered by size."""
        components = GraphTraversal(demo_graph).connected_components()
        assert components == [
            [
                "alice", "bob", "charlie", "diana", "eve",
                "frank", "grace", "henry", "ivy", "jack",
            ],
            ["kim", "leo"],
            ["mia"],
        ]

    def test_empty_graph(self, empty_graph: SocialGraph) -> None:
        """Test an empty graph has no components."""
        assert GraphTraversal(empty_graph).connected_components() == []

    def test_partition(self, demo_graph: SocialGraph) -> None:
        """Test components are disjoint, cover all users, and no edge crosses."""
        components = GraphTraversal(demo_graph).connected_components()
        membership: dict[str, int] = {}
        for i, component in enumerate(components):
            for user in component:
                assert user not in membership
                membership[user] = i
        assert set(membership) == set(demo_graph.usernames())
        for a, b in demo_graph.friendships():
            assert membership[a] == membership[b]

    def test_component_of(self, demo_graph: SocialGraph) -> None:
        """Test looking up a single user's component."""
        traversal = GraphTraversal(demo_graph)
        assert traversal.component_of("leo") == ["kim", "leo"]
        assert traversal.component_of("nobody") == []
