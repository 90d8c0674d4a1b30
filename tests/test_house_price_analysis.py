"""
Tests for house price metrics, groupings and amenity counts.
"""

import pandas as pd
import pytest

from overlook.api.dataset_loader import shape_rows
from overlook.core import house_price_analysis as hpa
from overlook.models.datasets import HOUSE_PRICES


def listing(price, area, bedrooms=3, bathrooms=1, stories=1, furnishing="furnished", **flags):
    row = {
        "price": price,
        "area": area,
        "bedrooms": bedrooms,
        "bathrooms": bathrooms,
        "stories": stories,
        "furnishingstatus": furnishing,
        "mainroad": "No",
        "guestroom": "No",
        "basement": "No",
        "hotwaterheating": "No",
        "airconditioning": "No",
        "prefarea": "No",
    }
    row.update(flags)
    return row


@pytest.fixture
def listings():
    rows = [
        listing(500000, 4000, bedrooms=4, stories=2, furnishing="semi-furnished", mainroad="Yes"),
        listing(300000, 2000, bedrooms=2, furnishing="furnished", mainroad="Yes", airconditioning="Yes"),
        listing(400000, 3000, bedrooms=4, stories=2, furnishing="semi-furnished", prefarea=1),
        listing(200000, 1000, bedrooms=3, stories=3, furnishing="unfurnished"),
    ]
    return shape_rows(HOUSE_PRICES, rows)


class TestPricePerArea:
    """Ratio of means, not mean of ratios."""

    def test_ratio_of_means(self):
        df = pd.DataFrame({"price": [100, 300], "area": [1, 2]})

        result = hpa.price_per_area(df)

        assert result.value == pytest.approx(133.333, rel=1e-4)
        assert result.value != pytest.approx(125.0)

    def test_zero_area(self):
        df = pd.DataFrame({"price": [100], "area": [0]})
        assert hpa.price_per_area(df).is_empty

    def test_empty(self):
        assert hpa.price_per_area(pd.DataFrame(columns=["price", "area"])).is_empty


class TestOverviewMetrics:
    def test_metrics(self, listings):
        metrics = hpa.overview_metrics(listings)

        assert metrics["avg_price"].value == 350000.0
        assert metrics["avg_price_per_sqft"].value == pytest.approx(140.0)
        assert metrics["avg_bedrooms"].value == 3.25
        assert metrics["total_properties"] == 4

    def test_empty(self):
        metrics = hpa.overview_metrics(pd.DataFrame(columns=list(HOUSE_PRICES.columns)))

        assert metrics["avg_price"].is_empty
        assert metrics["avg_price_per_sqft"].is_empty
        assert metrics["total_properties"] == 0


class TestGroupings:
    def test_price_by_bedrooms_ascending(self, listings):
        groups = hpa.price_by_bedrooms(listings)

        assert [g["bedrooms"] for g in groups] == [2, 3, 4]
        assert groups[2]["count"] == 2
        assert groups[2]["total_price"] == 900000.0
        assert groups[2]["avg_price"] == 450000.0

    def test_furnishing_first_seen_order(self, listings):
        assert hpa.furnishing_distribution(listings) == [
            {"name": "semi-furnished", "value": 2},
            {"name": "furnished", "value": 1},
            {"name": "unfurnished", "value": 1},
        ]

    def test_stories_labels(self, listings):
        assert hpa.stories_distribution(listings) == [
            {"name": "2 Stories", "value": 2},
            {"name": "1 Story", "value": 1},
            {"name": "3 Stories", "value": 1},
        ]

    def test_amenity_counts(self, listings):
        counts = {c["name"]: c["value"] for c in hpa.amenity_counts(listings)}

        assert list(counts) == [
            "Main Road",
            "Guest Room",
            "Basement",
            "Hot Water",
            "AC",
            "Preferred Area",
        ]
        assert counts["Main Road"] == 2
        assert counts["AC"] == 1
        assert counts["Preferred Area"] == 1
        assert counts["Basement"] == 0

    def test_empty_groupings(self):
        df = pd.DataFrame(columns=list(HOUSE_PRICES.columns))

        assert hpa.price_by_bedrooms(df) == []
        assert hpa.furnishing_distribution(df) == []
        assert all(c["value"] == 0 for c in hpa.amenity_counts(df))


class TestPriceAreaSeries:
    def test_points(self, listings):
        points = hpa.price_area_series(listings)

        assert len(points) == 4
        assert points["x"].iloc[0] == 4000
        assert points["y"].iloc[0] == 500000
        assert points["name"].iloc[0] == "4bd 1ba, 2 stories"


class TestUpcastCounts:
    """A missing value turns integer count columns into floats."""

    def test_stories_labels_stay_whole(self):
        df = pd.DataFrame({"stories": [2, None, 1, 2]})

        assert hpa.stories_distribution(df) == [
            {"name": "2 Stories", "value": 2},
            {"name": "1 Story", "value": 1},
        ]

    def test_listing_labels_stay_whole(self):
        df = pd.DataFrame(
            {
                "price": [500000.0, 300000.0],
                "area": [4000.0, 2000.0],
                "bedrooms": [4.0, 2.0],
                "bathrooms": [1.0, 2.0],
                "stories": [2.0, None],
            }
        )

        points = hpa.price_area_series(df)

        assert points["name"].tolist() == ["4bd 1ba, 2 stories", "2bd 2ba, ? stories"]
