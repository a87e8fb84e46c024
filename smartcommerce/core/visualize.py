from typing import List, Optional
import matplotlib.pyplot as plt
import networkx as nx

from smartcommerce.models.product import Product, Recommendation

def product_to_node_id(product_id: str) -> str:
    return f"product:{product_id}"

def feature_to_node_id(feature: str) -> str:
    return f"feature:{feature.lower()}"

def build_recommendation_graph(target: Product, recs: List[Recommendation]) -> nx.Graph:
    G = nx.Graph()
    root_id = product_to_node_id(target.product_id)
    G.add_node(root_id, node_type="target", name=target.name, category=target.category)

    for rec in recs:
        p = rec.product
        pid = product_to_node_id(p.product_id)
        G.add_node(
            pid,
            node_type="recommendation",
            name=p.name,
            category=p.category,
            method=rec.method,
        )
        G.add_edge(root_id, pid, edge_type="SIMILAR_TO", weight=rec.similarity)

        key_terms = rec.analysis.key_terms if rec.analysis else []
        for term in key_terms:
            fid = feature_to_node_id(term)
            if fid not in G:
                G.add_node(fid, node_type="feature", name=term)
            G.add_edge(root_id, fid, edge_type="HAS_FEATURE")
            G.add_edge(pid, fid, edge_type="HAS_FEATURE")

    return G

def visualize_recommendations(target: Product, recs: List[Recommendation]) -> Optional[plt.Figure]:
    if not recs:
        return None

    G = build_recommendation_graph(target, recs)
    root_id = product_to_node_id(target.product_id)
    rec_ids = [product_to_node_id(r.product.product_id) for r in recs]
    feature_ids = [n for n, t in G.nodes(data="node_type") if t == "feature"]

    fig = plt.figure(figsize=(10, 6))
    shells = [[root_id], feature_ids, rec_ids] if feature_ids else [[root_id], rec_ids]
    pos = nx.shell_layout(G, nlist=shells)

    colors = []
    for n in G.nodes():
        t = G.nodes[n].get("node_type")
        if t == "target":
            colors.append("#ffe680")
        elif t == "recommendation":
            colors.append("#b3ffb3")
        else:
            colors.append("#ffccd5")

    similar_edges = [(a, b) for a, b, t in G.edges(data="edge_type") if t == "SIMILAR_TO"]
    feature_edges = [(a, b) for a, b, t in G.edges(data="edge_type") if t == "HAS_FEATURE"]
    widths = [1.0 + 4.0 * G.edges[e]["weight"] for e in similar_edges]

    nx.draw_networkx_nodes(G, pos, node_size=650, node_color=colors, edgecolors="#000000")
    nx.draw_networkx_edges(G, pos, edgelist=similar_edges, width=widths, alpha=0.8, edge_color="#9f7bff")
    nx.draw_networkx_edges(G, pos, edgelist=feature_edges, width=1.0, alpha=0.6, edge_color="#bbbbbb", style="dashed")

    edge_labels = {e: f"{G.edges[e]['weight']:.0%}" for e in similar_edges}
    nx.draw_networkx_edge_labels(G, pos, edge_labels=edge_labels, font_size=7)

    labels = {n: G.nodes[n].get("name", n) for n in G.nodes()}
    nx.draw_networkx_labels(G, pos, labels=labels, font_size=8, font_color="#000000")

    ax = plt.gca()
    ax.set_facecolor("#050b16")
    plt.title(f"Recommendations for '{target.name}'", fontsize=10)
    plt.axis("off")
    return fig
