"""
Tests for the per-country query engine, built on the three-parcel Kenya load.
"""

from decimal import Decimal

import pytest

import queries
from hash_table import bucket_index
from models import Direction, Totals


@pytest.fixture
def unseen_country():
    """A country name that does not share Kenya's bucket."""
    return next(c for c in ("Atlantis", "Narnia", "Wakanda", "Oz")
                if bucket_index(c) != bucket_index("Kenya"))


def _pairs(parcels):
    return [(p.weight, p.valuation) for p in parcels]


class TestKenyaScenario:
    """The quota fails, but the parcels that were accepted are queryable."""

    def test_list_by_country_in_weight_order(self, kenya_index):
        parcels = queries.list_by_country(kenya_index, "Kenya")
        assert [p.weight for p in parcels] == [100, 5000, 50000]
        assert all(p.destination == "Kenya" for p in parcels)

    def test_filter_above(self, kenya_index):
        """Threshold-weight parcel is excluded."""
        result = queries.filter_by_weight(kenya_index, "Kenya", 100, Direction.ABOVE)
        assert _pairs(result) == [(5000, Decimal("200.0")), (50000, Decimal("2000.0"))]

    def test_filter_below(self, kenya_index):
        result = queries.filter_by_weight(kenya_index, "Kenya", 50000, Direction.BELOW)
        assert [p.weight for p in result] == [100, 5000]

    def test_filter_nothing_matches(self, kenya_index):
        assert queries.filter_by_weight(kenya_index, "Kenya", 100, Direction.BELOW) == []

    def test_totals(self, kenya_index):
        total = queries.totals(kenya_index, "Kenya")
        assert total == Totals(55100, Decimal("2210.0"))
        assert total.valuation == 2210.0

    def test_price_extremes(self, kenya_index):
        cheapest, priciest = queries.price_extremes(kenya_index, "Kenya")
        assert (cheapest.weight, cheapest.valuation) == (100, Decimal("10.0"))
        assert (priciest.weight, priciest.valuation) == (50000, Decimal("2000.0"))

    def test_weight_extremes(self, kenya_index):
        """Lightest is leftmost, heaviest is rightmost."""
        lightest, heaviest = queries.weight_extremes(kenya_index, "Kenya")
        assert lightest.weight == 100
        assert heaviest.weight == 50000

    def test_lookup_is_case_sensitive(self, kenya_index):
        """'kenya' hashes elsewhere, so it finds nothing."""
        assert bucket_index("kenya") != bucket_index("Kenya")
        assert queries.list_by_country(kenya_index, "kenya") == []


class TestUnseenCountry:
    """A country never ingested yields empty results, never an error."""

    def test_list_empty(self, kenya_index, unseen_country):
        assert queries.list_by_country(kenya_index, unseen_country) == []

    @pytest.mark.parametrize("direction", [Direction.ABOVE, Direction.BELOW])
    def test_filter_empty(self, kenya_index, unseen_country, direction):
        assert queries.filter_by_weight(kenya_index, unseen_country, 1000, direction) == []

    def test_totals_zero(self, kenya_index, unseen_country):
        assert queries.totals(kenya_index, unseen_country) == (0, 0.0)

    def test_price_extremes_none(self, kenya_index, unseen_country):
        assert queries.price_extremes(kenya_index, unseen_country) is None

    def test_weight_extremes_none(self, kenya_index, unseen_country):
        assert queries.weight_extremes(kenya_index, unseen_country) is None
