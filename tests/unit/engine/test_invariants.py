"""
Property tests for the graph and visibility invariants.

Random simple graphs (no self-loops, parallel channels allowed) are
pushed through normalization, visibility and click handling.
"""

from hypothesis import HealthCheck, assume, given, settings, strategies as st
from hypothesis.strategies import composite

from lnview.core.normalizer import GraphNormalizer, normalize_graph
from lnview.engine.interaction import NodeClicked, ShowAllToggled, initial_state, reduce
from lnview.engine.visibility import compute_visibility, derive_pruned_view, recompute

# The autouse settings fixture is function-scoped but harmless across examples
relaxed = settings(
    max_examples=60,
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)


# =============================================================================
# STRATEGIES
# =============================================================================

@composite
def raw_graphs(draw):
    size = draw(st.integers(min_value=1, max_value=12))
    node_ids = [f"n{i}" for i in range(size)]
    pairs = draw(st.lists(
        st.tuples(st.integers(0, size - 1), st.integers(0, size - 1)).filter(lambda p: p[0] != p[1]),
        max_size=30,
    )) if size > 1 else []
    return {
        "nodes": [{"pub_key": node_id} for node_id in node_ids],
        "links": [
            {"channel_id": f"c{j}", "capacity": 10 * (j + 1),
             "node1_pub": node_ids[a], "node2_pub": node_ids[b]}
            for j, (a, b) in enumerate(pairs)
        ],
    }


# =============================================================================
# INVARIANTS
# =============================================================================

@relaxed
@given(raw_graphs())
def test_degree_sum_is_twice_edge_count(raw):
    graph = normalize_graph(raw)
    assert sum(graph.degree(n.id) for n in graph.nodes) == 2 * graph.edge_count
    assert graph.index.total_degree == 2 * graph.index.edge_count


@relaxed
@given(raw_graphs())
def test_normalization_is_idempotent(raw):
    normalizer = GraphNormalizer()
    first = normalizer.normalize(raw)
    second = normalizer.normalize(raw)
    assert [first.degree(n.id) for n in first.nodes] == [second.degree(n.id) for n in second.nodes]

    # Rebuilding an index in place gives the same degrees too
    before = [first.degree(n.id) for n in first.nodes]
    first.index.build((n.id for n in first.nodes), first.edges)
    assert [first.degree(n.id) for n in first.nodes] == before


@relaxed
@given(raw_graphs(), st.integers(min_value=-3, max_value=15))
def test_visibility_matches_threshold(raw, threshold):
    graph = normalize_graph(raw)
    nodes = compute_visibility(graph.nodes, graph.index, threshold)
    for node in nodes:
        assert node.visible == (graph.degree(node.id) >= max(threshold, 0))


@relaxed
@given(raw_graphs(), st.integers(min_value=0, max_value=6), st.data())
def test_pruned_edges_have_visible_endpoints(raw, threshold, data):
    graph = normalize_graph(raw)
    state = initial_state(graph, threshold=threshold)
    clicks = data.draw(st.lists(st.sampled_from([n.id for n in graph.nodes]), max_size=5))
    for node_id in clicks:
        state = reduce(state, NodeClicked(node_id))

    view = recompute(state)
    visible = set(state.visible_ids)
    assert set(view.node_ids) == visible
    expected = {e.id for e in graph.edges if e.endpoint_a in visible and e.endpoint_b in visible}
    assert set(view.edge_ids) == expected


@relaxed
@given(raw_graphs(), st.data())
def test_collapse_changes_only_clicked_node(raw, data):
    graph = normalize_graph(raw)
    leaves = [n.id for n in graph.nodes if graph.degree(n.id) <= 1]
    assume(leaves)
    state = initial_state(graph, threshold=0)
    target = data.draw(st.sampled_from(leaves))

    after = reduce(state, NodeClicked(target))
    for before_node, after_node in zip(state.nodes, after.nodes):
        if before_node.id == target:
            assert not after_node.visible
        else:
            assert after_node.visible == before_node.visible


@relaxed
@given(raw_graphs(), st.data())
def test_expand_reveals_all_neighbors(raw, data):
    graph = normalize_graph(raw)
    hubs = [n.id for n in graph.nodes if graph.degree(n.id) > 1]
    assume(hubs)
    state = initial_state(graph)
    target = data.draw(st.sampled_from(hubs))

    after = reduce(state, NodeClicked(target))
    assert after.is_visible(target)
    for neighbor in graph.neighbors(target):
        assert after.is_visible(neighbor)


@relaxed
@given(raw_graphs())
def test_show_all_equals_full_graph(raw):
    graph = normalize_graph(raw)
    state = initial_state(graph)
    initial_view = recompute(state)

    shown = reduce(state, ShowAllToggled())
    full = recompute(shown)
    assert full.node_ids == tuple(n.id for n in graph.nodes)
    assert full.edge_ids == tuple(e.id for e in graph.edges)

    assert recompute(reduce(shown, ShowAllToggled())) == initial_view
    assert derive_pruned_view(shown.nodes, graph.edges) == full
