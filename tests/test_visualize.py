import matplotlib.pyplot as plt
from matplotlib.figure import Figure

from smartcommerce.core.ranking import rank
from smartcommerce.core.visualize import (
    build_recommendation_graph,
    feature_to_node_id,
    product_to_node_id,
    visualize_recommendations,
)
from conftest import FixedRandom


def test_graph_links_target_recommendations_and_key_terms(headphones, sport_watch, mug):
    recs = rank(headphones, [headphones, sport_watch, mug], rng=FixedRandom(0.0))
    G = build_recommendation_graph(headphones, recs)

    root = product_to_node_id("hp")
    watch = product_to_node_id("sw")
    wireless = feature_to_node_id("Wireless")

    assert G.nodes[root]["node_type"] == "target"
    assert G.nodes[watch]["node_type"] == "recommendation"
    assert G.nodes[wireless]["node_type"] == "feature"
    assert G.edges[root, watch]["edge_type"] == "SIMILAR_TO"
    assert G.edges[root, watch]["weight"] == recs[0].similarity
    assert G.has_edge(watch, wireless)
    assert G.has_edge(root, wireless)
    assert not G.has_edge(product_to_node_id("mug"), wireless)


def test_visualize_without_recommendations_returns_none(headphones):
    assert visualize_recommendations(headphones, []) is None


def test_visualize_returns_figure(catalog):
    recs = rank(catalog[0], catalog)
    fig = visualize_recommendations(catalog[0], recs)
    assert isinstance(fig, Figure)
    plt.close(fig)


def test_visualize_without_key_terms(mug, scarf):
    recs = rank(mug, [mug, scarf])
    assert recs[0].analysis.key_terms == []
    fig = visualize_recommendations(mug, recs)
    assert isinstance(fig, Figure)
    plt.close(fig)
