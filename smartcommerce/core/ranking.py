from typing import List, Sequence

from smartcommerce.config.settings import DEFAULT_TOP_N
from smartcommerce.core.similarity import analyze
from smartcommerce.models.product import Product, Recommendation, SimilarityAnalysis
from smartcommerce.utils.logger import logger

METHOD_WORD2VEC = "word2vec"
METHOD_TFIDF = "tfidf"
METHOD_BOW = "bow"

WORD2VEC_THRESHOLD = 0.7
TFIDF_THRESHOLD = 0.6

METHOD_LABELS = {
    METHOD_BOW: "Bag of Words (BoW)",
    METHOD_TFIDF: "TF-IDF",
    METHOD_WORD2VEC: "Word2Vec",
}

def classify_method(analysis: SimilarityAnalysis) -> str:
    # Display tag only; ranking never looks at it.
    if analysis.word2vec_score > WORD2VEC_THRESHOLD:
        return METHOD_WORD2VEC
    if analysis.tfidf_score > TFIDF_THRESHOLD:
        return METHOD_TFIDF
    return METHOD_BOW

def build_reasoning(key_terms: List[str]) -> str:
    return "High similarity based on " + ", ".join(key_terms)

def rank(
    target: Product,
    catalog: Sequence[Product],
    top_n: int = DEFAULT_TOP_N,
    rng=None,
) -> List[Recommendation]:
    """Score every other catalog product against ``target`` and keep the best ``top_n``.

    Each pair is analyzed once per call and nothing is cached, so the random
    terms are re-sampled whenever the same product is ranked again. Ties keep
    catalog order.
    """
    if top_n <= 0:
        return []

    scored: List[Recommendation] = []
    for candidate in catalog:
        if candidate.product_id == target.product_id:
            continue
        analysis = analyze(target, candidate, rng)
        scored.append(
            Recommendation(
                product=candidate,
                similarity=analysis.overall_similarity,
                method=classify_method(analysis),
                reasoning=build_reasoning(analysis.key_terms),
                analysis=analysis,
            )
        )

    scored.sort(key=lambda r: r.similarity, reverse=True)
    top = scored[:top_n]
    logger.info(f"Ranked {len(scored)} candidates for product {target.product_id}, keeping {len(top)}")
    return top
