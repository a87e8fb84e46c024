import matplotlib.pyplot as plt
import streamlit as st
from smartcommerce.utils.logger import configure_logging
from smartcommerce.config.settings import ALL_CATEGORIES
from smartcommerce.core.ranking import METHOD_LABELS
from smartcommerce.core.similarity import METHOD_WEIGHTS
from smartcommerce.pipelines.app_service import AppService

configure_logging()
service = AppService()

st.set_page_config(layout="wide", page_title="SmartCommerce AI")

# ---------- Global CSS ----------
st.markdown("""
<style>
body, .main, .stApp {
    background-color: #0f0a24;
    color: #e0e6f0;
}
.block-container {
    padding-top: 2.8rem;
    padding-bottom: 1.5rem;
}
.hero-title {
    font-size: 30px;
    font-weight: 800;
    background: linear-gradient(90deg, #c084fc, #60a5fa);
    -webkit-background-clip: text;
    color: transparent;
}
.hero-subtitle {
    font-size: 14px;
    color: #9ca7c6;
}
.product-card {
    border: 1px solid #2e2352;
    border-radius: 14px;
    padding: 14px 16px;
    margin-bottom: 12px;
    background: radial-gradient(circle at top left, #2a1f4d 0%, #0f0a24 55%);
    box-shadow: 0 4px 10px rgba(0,0,0,0.7);
}
.product-image {
    width: 100%;
    height: 160px;
    object-fit: cover;
    border-radius: 10px;
    margin-bottom: 8px;
}
.product-title {
    font-weight: 700;
    font-size: 17px;
    margin-bottom: 4px;
    color: #ffffff;
}
.product-price {
    font-size: 15px;
    font-weight: 600;
    color: #4fe3c1;
}
.product-meta {
    font-size: 13px;
    color: #d0d6e0;
}
.badge {
    display: inline-block;
    padding: 2px 8px;
    border-radius: 999px;
    font-size: 11px;
    font-weight: 600;
    margin-right: 6px;
}
.badge-category {
    background: rgba(93, 156, 255, 0.16);
    color: #78aaff;
    border: 1px solid rgba(93, 156, 255, 0.4);
}
.badge-similarity {
    background: rgba(192, 132, 252, 0.16);
    color: #c084fc;
    border: 1px solid rgba(192, 132, 252, 0.4);
}
.badge-method {
    background: rgba(255, 200, 97, 0.16);
    color: #ffc861;
    border: 1px solid rgba(255, 200, 97, 0.4);
}
.badge-term {
    background: #7c3aed;
    color: #ffffff;
}
</style>
""", unsafe_allow_html=True)


def render_card(product, extra_badges: str = "", footer: str = "") -> None:
    image_html = (
        f'<img class="product-image" src="{product.image}" alt="{product.name}">'
        if product.image else ""
    )
    st.markdown(
        f"""
        <div class="product-card">
            {image_html}
            <div class="product-title">{product.name}</div>
            <div class="product-meta">
                <span class="badge badge-category">{product.category}</span>
                {extra_badges}
            </div>
            <div class="product-price">${product.price:.2f}</div>
            <div class="product-meta">⭐ {product.rating} ({product.reviews} reviews)</div>
            <div class="product-meta">{", ".join(product.features)}</div>
            {footer}
        </div>
        """,
        unsafe_allow_html=True,
    )


# ---------- Hero header ----------
st.markdown('<div class="hero-title">SmartCommerce AI</div>', unsafe_allow_html=True)
st.markdown(
    '<div class="hero-subtitle">'
    'Browse the catalog, pick a product, and see similar items scored by '
    'Bag of Words, TF-IDF and Word2Vec style heuristics.</div>',
    unsafe_allow_html=True
)
st.write("")

left_col, right_col = st.columns([1, 1.5])

with left_col:
    st.subheader("Browse catalog")

    query = st.text_input("Search products", key="query_main")
    category = st.selectbox(
        "Category",
        [ALL_CATEGORIES] + service.list_categories(),
        format_func=lambda c: "All Categories" if c == ALL_CATEGORIES else c,
        key="category_main",
    )
    visible = service.filter_products(query, category)
    st.caption(f"Showing {len(visible)} products")

    if visible:
        names = {p.product_id: p.name for p in visible}
        selected_id = st.selectbox(
            "Product",
            list(names),
            format_func=lambda pid: names[pid],
            key="product_main",
        )
        search_clicked = st.button("✨ Find similar products")
    else:
        selected_id = None
        search_clicked = False
        st.write("No products match your search.")

    for p in visible:
        render_card(p)

with right_col:
    tab_main, tab_analysis, tab_graph = st.tabs(["Recommendations", "NLP analysis", "Similarity graph"])

    if search_clicked and selected_id is not None:
        result = service.recommend(selected_id)
        selected = result["selected"]
        recs = result["recommendations"]
        analysis = result["analysis"]

        with tab_main:
            st.subheader(f"Based on your selection: {selected.name}")
            st.info(result["message"])
            for idx, rec in enumerate(recs, start=1):
                badges = (
                    f"<span class='badge badge-method'>#{idx}</span>"
                    f"<span class='badge badge-similarity'>{rec.similarity:.0%} match</span>"
                    f"<span class='badge badge-method'>{METHOD_LABELS[rec.method]}</span>"
                )
                footer = f"<div class='product-meta'><b>Why suggested:</b> {rec.reasoning}</div>"
                render_card(rec.product, badges, footer)

        with tab_analysis:
            st.subheader("NLP Analysis")
            st.metric("Overall Similarity", f"{analysis.overall_similarity:.0%}")
            st.progress(analysis.overall_similarity)
            for label, score in [
                (METHOD_LABELS["bow"], analysis.bow_score),
                (METHOD_LABELS["tfidf"], analysis.tfidf_score),
                (METHOD_LABELS["word2vec"], analysis.word2vec_score),
            ]:
                st.write(f"**{label}**: {score:.0%}")
                st.progress(score)
            if analysis.key_terms:
                st.markdown("**Key Matching Features**")
                st.markdown(
                    " ".join(f"<span class='badge badge-term'>{t}</span>" for t in analysis.key_terms),
                    unsafe_allow_html=True,
                )
            weights = ", ".join(f"{METHOD_LABELS[m]} ({w:.0%})" for m, w in METHOD_WEIGHTS.items())
            st.caption(f"Hybrid filtering using a weighted combination of {weights}.")

        with tab_graph:
            fig = service.build_visualization(selected, recs)
            if fig:
                st.pyplot(fig)
                plt.close(fig)
            else:
                st.write("No recommendations to visualize.")
    else:
        with tab_main:
            st.markdown("Select a product on the left and click **“Find similar products”**.")
        with tab_analysis:
            st.write("Select a product to see the similarity breakdown.")
        with tab_graph:
            st.write("The similarity graph will appear here after you run a query.")
