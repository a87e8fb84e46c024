import pytest

from smartcommerce.core.ranking import (
    METHOD_BOW,
    METHOD_TFIDF,
    METHOD_WORD2VEC,
    build_reasoning,
    classify_method,
    rank,
)
from smartcommerce.models.product import Recommendation, SimilarityAnalysis
from conftest import FixedRandom, make_product


def _analysis(tfidf=0.0, word2vec=0.0):
    return SimilarityAnalysis(
        bow_score=0.0,
        tfidf_score=tfidf,
        word2vec_score=word2vec,
        overall_similarity=0.0,
    )


@pytest.mark.parametrize(
    "tfidf, word2vec, expected",
    [
        (0.9, 0.71, METHOD_WORD2VEC),
        (0.61, 0.7, METHOD_TFIDF),
        (0.6, 0.7, METHOD_BOW),
        (0.0, 0.0, METHOD_BOW),
    ],
)
def test_classify_method_thresholds(tfidf, word2vec, expected):
    assert classify_method(_analysis(tfidf, word2vec)) == expected


def test_build_reasoning_joins_key_terms():
    assert build_reasoning(["Wireless", "GPS"]) == "High similarity based on Wireless, GPS"


def test_build_reasoning_without_key_terms():
    assert build_reasoning([]) == "High similarity based on "


def test_rank_excludes_target_and_sorts_descending(catalog):
    target = catalog[0]
    recs = rank(target, catalog)

    assert len(recs) == 3
    assert all(isinstance(r, Recommendation) for r in recs)
    assert target.product_id not in {r.product.product_id for r in recs}
    scores = [r.similarity for r in recs]
    assert scores == sorted(scores, reverse=True)


def test_rank_keeps_best_candidates(headphones, sport_watch, mug, scarf):
    catalog = [mug, scarf, headphones, sport_watch]
    recs = rank(headphones, catalog, top_n=1, rng=FixedRandom(0.0))
    assert [r.product.product_id for r in recs] == ["sw"]


def test_rank_recommendation_carries_analysis(headphones, sport_watch):
    recs = rank(headphones, [headphones, sport_watch], rng=FixedRandom(0.0))

    assert len(recs) == 1
    rec = recs[0]
    assert rec.analysis is not None
    assert rec.similarity == rec.analysis.overall_similarity
    assert rec.reasoning == "High similarity based on Wireless"
    assert rec.method == classify_method(rec.analysis)


def test_rank_single_product_catalog_is_empty(headphones):
    assert rank(headphones, [headphones]) == []


def test_rank_returns_fewer_than_top_n(headphones, sport_watch, mug):
    recs = rank(headphones, [headphones, sport_watch, mug], top_n=5)
    assert len(recs) == 2


def test_rank_non_positive_top_n(catalog):
    assert rank(catalog[0], catalog, top_n=0) == []


def test_rank_ties_keep_catalog_order(mug):
    clones = [
        make_product(pid, name="Steel Kettle", category="Kitchen", features=["Stovetop"])
        for pid in ("k1", "k2", "k3", "k4")
    ]
    recs = rank(mug, [mug] + clones, rng=FixedRandom(0.4))
    assert [r.product.product_id for r in recs] == ["k1", "k2", "k3"]


def test_rank_excludes_target_by_id_only(mug):
    same_id = make_product("mug", name="Another Mug", category="Kitchen")
    other = make_product("cup", name="Ceramic Mug", category="Kitchen")
    recs = rank(mug, [same_id, other])
    assert [r.product.product_id for r in recs] == ["cup"]


def test_rank_draws_fresh_randomness_per_pair(catalog):
    rng = FixedRandom(0.3)
    rank(catalog[0], catalog, rng=rng)
    assert rng.calls == 2 * (len(catalog) - 1)


def test_rank_does_not_cache_between_calls(catalog):
    rng = FixedRandom(0.3)
    target = catalog[0]
    rank(target, catalog, rng=rng)
    rank(target, catalog, rng=rng)
    assert rng.calls == 4 * (len(catalog) - 1)
