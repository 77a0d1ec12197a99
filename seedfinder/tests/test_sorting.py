"""
Tests for sorting and pagination.
"""
import math

import pytest

from seedfinder.models.results import ScoredSeed
from seedfinder.pipeline.pagination import page_count, paginate
from seedfinder.pipeline.sorting import sort_seeds


def scored(seed, score=0.0):
    return ScoredSeed(seed=seed, score=score)


class TestSortSeeds:
    """Tests for sort_seeds."""

    def test_score_descending(self, make_seed):
        items = [scored(make_seed(seed=str(i)), s) for i, s in enumerate([0.2, 0.9, 0.5])]

        result = sort_seeds(items, "score")

        assert [item.score for item in result] == [0.9, 0.5, 0.2]

    def test_score_ties_keep_filter_order(self, make_seed):
        """Test that equal scores never reorder."""
        items = [scored(make_seed(seed=s), 0.5) for s in ["a", "b", "c", "d"]]
        items.insert(2, scored(make_seed(seed="top"), 0.8))

        result = sort_seeds(items, "score")

        assert [item.seed.seed for item in result] == ["top", "a", "b", "c", "d"]

    def test_default_key_is_score(self, make_seed):
        items = [scored(make_seed(seed="low"), 0.1), scored(make_seed(seed="high"), 0.7)]

        assert sort_seeds(items)[0].seed.seed == "high"

    def test_rarity_descending_missing_as_zero(self, make_seed):
        items = [
            scored(make_seed(seed="none", rarity=None)),
            scored(make_seed(seed="mid", rarity=50)),
            scored(make_seed(seed="zero", rarity=0)),
            scored(make_seed(seed="high", rarity=90)),
        ]

        result = sort_seeds(items, "rarity")

        assert [item.seed.seed for item in result] == ["high", "mid", "none", "zero"]

    def test_stronghold_ascending_missing_last(self, make_seed):
        items = [
            scored(make_seed(seed="none")),
            scored(make_seed(seed="far", stronghold=[2300])),
            scored(make_seed(seed="near", stronghold=[900, 1500])),
            scored(make_seed(seed="none2")),
        ]

        result = sort_seeds(items, "stronghold")

        assert [item.seed.seed for item in result] == ["near", "far", "none", "none2"]

    def test_village_ascending(self, make_seed):
        items = [
            scored(make_seed(seed="b", village=[640])),
            scored(make_seed(seed="a", village=[180])),
            scored(make_seed(seed="c")),
        ]

        result = sort_seeds(items, "village")

        assert [item.seed.seed for item in result] == ["a", "b", "c"]

    def test_input_not_mutated(self, make_seed):
        items = [scored(make_seed(seed="x"), 0.1), scored(make_seed(seed="y"), 0.9)]

        sort_seeds(items)

        assert [item.seed.seed for item in items] == ["x", "y"]


class TestPagination:
    """Tests for paginate and page_count."""

    def test_thirty_items_two_pages(self):
        items = list(range(30))

        assert len(paginate(items, 1, 24)) == 24
        assert paginate(items, 2, 24) == list(range(24, 30))
        assert page_count(30, 24) == 2

    def test_out_of_range_pages_empty(self):
        items = list(range(10))

        assert paginate(items, 3, 5) == []
        assert paginate(items, 0, 5) == []
        assert paginate([], 1, 24) == []

    def test_at_least_one_page(self):
        assert page_count(0, 24) == 1

    def test_invalid_page_size(self):
        with pytest.raises(ValueError):
            paginate([1, 2], 1, 0)
        with pytest.raises(ValueError):
            page_count(2, 0)

    @pytest.mark.parametrize("total,per_page", [(0, 24), (1, 1), (23, 24), (24, 24), (25, 24), (97, 12)])
    def test_pages_cover_everything(self, total, per_page):
        """Test that all pages together hold each item exactly once."""
        items = list(range(total))
        pages = page_count(total, per_page)

        collected = []
        for page in range(1, pages + 1):
            collected.extend(paginate(items, page, per_page))

        assert collected == items
        assert pages == max(1, math.ceil(total / per_page))
