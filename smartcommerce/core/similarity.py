"""Heuristic product similarity scoring.

Three independent measures are combined into one overall score. They are
named after the methods they imitate ("bow", "tfidf", "word2vec") but are
simple heuristics, not implementations of those algorithms.

``weighted_score`` and ``associative_score`` add random noise on every call.
Pass ``rng`` (any object with a ``random()`` method returning a float in
[0, 1)) to control the draw; the ``random`` module is used otherwise.
"""
import random
from typing import Dict, FrozenSet, List, Set

from smartcommerce.models.product import Product, SimilarityAnalysis
from smartcommerce.utils.logger import logger

SEMANTIC_TERMS: Dict[str, FrozenSet[str]] = {
    "wireless": frozenset({"bluetooth", "remote", "cordless"}),
    "smart": frozenset({"intelligent", "ai", "connected", "automated"}),
    "premium": frozenset({"high-quality", "professional", "superior"}),
    "portable": frozenset({"mobile", "compact", "travel"}),
    "gaming": frozenset({"competitive", "esports", "performance"}),
}

METHOD_WEIGHTS: Dict[str, float] = {
    "bow": 0.2,
    "tfidf": 0.3,
    "word2vec": 0.5,
}

CATEGORY_MATCH_BONUS = 0.3
FEATURE_OVERLAP_WEIGHT = 0.4
TFIDF_NOISE_RANGE = 0.3

SAME_CATEGORY_AFFINITY = 0.8
OTHER_CATEGORY_AFFINITY = 0.2
SEMANTIC_MATCH_BONUS = 0.15
WORD2VEC_MIN_MULTIPLIER = 0.7
WORD2VEC_NOISE_RANGE = 0.3

MAX_KEY_TERMS = 3

def _clamp(value: float) -> float:
    return max(0.0, min(value, 1.0))

def _full_text(product: Product) -> str:
    return f"{product.name} {product.description} {' '.join(product.features)}".lower()

def _short_text(product: Product) -> str:
    return f"{product.name} {product.description}".lower()

def _feature_set(product: Product) -> Set[str]:
    return {f.lower() for f in product.features}

def lexical_overlap_score(product1: Product, product2: Product) -> float:
    """Jaccard index of the whitespace tokens of both products; 0 when both are empty."""
    words1 = set(_full_text(product1).split())
    words2 = set(_full_text(product2).split())
    union = words1 | words2
    if not union:
        return 0.0
    return len(words1 & words2) / len(union)

def weighted_base_score(product1: Product, product2: Product) -> float:
    score = 0.0
    if product1.category == product2.category:
        score += CATEGORY_MATCH_BONUS

    features1 = _feature_set(product1)
    features2 = _feature_set(product2)
    largest = max(len(features1), len(features2))
    if largest:
        score += len(features1 & features2) / largest * FEATURE_OVERLAP_WEIGHT
    return score

def weighted_score(product1: Product, product2: Product, rng=None) -> float:
    """Category and feature overlap plus uniform noise in [0, 0.3).

    Not deterministic: the result lies in
    ``[base, min(base + 0.3, 1)]`` where ``base`` is ``weighted_base_score``.
    """
    if rng is None:
        rng = random
    noise = rng.random() * TFIDF_NOISE_RANGE
    return _clamp(weighted_base_score(product1, product2) + noise)

def _mentions(text: str, keyword: str, related: FrozenSet[str]) -> bool:
    return keyword in text or any(term in text for term in related)

def semantic_overlap(product1: Product, product2: Product) -> float:
    text1 = _short_text(product1)
    text2 = _short_text(product2)
    score = 0.0
    for keyword, related in SEMANTIC_TERMS.items():
        if _mentions(text1, keyword, related) and _mentions(text2, keyword, related):
            score += SEMANTIC_MATCH_BONUS
    return score

def associative_base_score(product1: Product, product2: Product) -> float:
    if product1.category == product2.category:
        affinity = SAME_CATEGORY_AFFINITY
    else:
        affinity = OTHER_CATEGORY_AFFINITY
    return affinity + semantic_overlap(product1, product2)

def associative_score(product1: Product, product2: Product, rng=None) -> float:
    """Category affinity plus keyword associations, scaled by a random factor in [0.7, 1.0)."""
    if rng is None:
        rng = random
    multiplier = WORD2VEC_MIN_MULTIPLIER + rng.random() * WORD2VEC_NOISE_RANGE
    return _clamp(associative_base_score(product1, product2) * multiplier)

def extract_key_terms(target: Product, candidate: Product, limit: int = MAX_KEY_TERMS) -> List[str]:
    candidate_features = [f.lower() for f in candidate.features]
    terms: List[str] = []
    for feature in target.features:
        if len(terms) >= limit:
            break
        if feature in terms:
            continue
        lowered = feature.lower()
        if any(lowered in cf or cf in lowered for cf in candidate_features):
            terms.append(feature)
    return terms

def analyze(target: Product, candidate: Product, rng=None) -> SimilarityAnalysis:
    bow = lexical_overlap_score(target, candidate)
    tfidf = weighted_score(target, candidate, rng)
    word2vec = associative_score(target, candidate, rng)
    overall = _clamp(
        bow * METHOD_WEIGHTS["bow"]
        + tfidf * METHOD_WEIGHTS["tfidf"]
        + word2vec * METHOD_WEIGHTS["word2vec"]
    )
    logger.debug(
        f"{target.product_id} vs {candidate.product_id}: "
        f"bow={bow:.3f} tfidf={tfidf:.3f} word2vec={word2vec:.3f} overall={overall:.3f}"
    )
    return SimilarityAnalysis(
        bow_score=bow,
        tfidf_score=tfidf,
        word2vec_score=word2vec,
        overall_similarity=overall,
        key_terms=extract_key_terms(target, candidate),
    )
