"""
Tests for bounding boxes and viewports.
"""

import random

import pytest

from gpxviewer.config import Settings
from gpxviewer.features.gpx import (
    BoundingBox,
    GeoPoint,
    GpxDocument,
    bounds_from_document,
    bounds_from_points,
    merge_bounds,
    viewport_for,
)


# =============================================================================
# Test From Points
# =============================================================================

class TestBoundsFromPoints:
    """Tests for bounds_from_points."""

    def test_no_points_is_empty(self):
        box = bounds_from_points([], [], [])
        assert box.is_empty
        assert (box.min_lat, box.max_lat, box.min_lon, box.max_lon) == (0, 0, 0, 0)

    def test_single_origin_point_is_not_empty(self):
        """A real point at (0, 0) is distinguishable from no points."""
        box = bounds_from_points([GeoPoint(0, 0)])
        assert not box.is_empty
        assert box.contains(GeoPoint(0, 0))

    def test_first_point_from_later_category(self):
        box = bounds_from_points([], [], [GeoPoint(10, 20)])
        assert box == BoundingBox(10, 10, 20, 20)

    def test_extends_over_all_categories(self):
        box = bounds_from_points(
            [GeoPoint(1, 1)],
            [GeoPoint(-2, 5)],
            [GeoPoint(3, -4)],
        )
        assert box == BoundingBox(min_lat=-2, max_lat=3, min_lon=-4, max_lon=5)

    def test_contains_every_point(self):
        rng = random.Random(7)
        points = [
            GeoPoint(rng.uniform(-90, 90), rng.uniform(-180, 180))
            for _ in range(200)
        ]
        box = bounds_from_points(points[:50], points[50:120], points[120:])
        assert all(box.contains(point) for point in points)

    def test_accepts_generators(self):
        box = bounds_from_points(p for p in [GeoPoint(1, 2), GeoPoint(3, 4)])
        assert box == BoundingBox(1, 3, 2, 4)


class TestBoundsFromDocument:
    """Tests for bounds over a parsed document."""

    def test_sample(self, sample_gpx, settings):
        box = bounds_from_document(GpxDocument.parse(sample_gpx, settings=settings))
        assert box.min_lat == pytest.approx(49.0)
        assert box.max_lat == pytest.approx(49.2)
        assert box.min_lon == pytest.approx(-123.01)
        assert box.max_lon == pytest.approx(-122.7)

    def test_empty_document(self, empty_gpx, settings):
        box = bounds_from_document(GpxDocument.parse(empty_gpx, settings=settings))
        assert box.is_empty


# =============================================================================
# Test Merge
# =============================================================================

class TestMergeBounds:
    """Tests for merge_bounds."""

    def test_merges_disjoint_boxes(self):
        west = bounds_from_points([GeoPoint(10, -20), GeoPoint(12, -18)])
        east = bounds_from_points([GeoPoint(-5, 30), GeoPoint(-3, 35)])
        merged = merge_bounds([west, east])
        for point in (GeoPoint(10, -20), GeoPoint(12, -18), GeoPoint(-5, 30), GeoPoint(-3, 35)):
            assert merged.contains(point)
        assert merged == BoundingBox(min_lat=-5, max_lat=12, min_lon=-20, max_lon=35)

    def test_skips_empty_boxes(self):
        box = BoundingBox(1, 2, 3, 4)
        assert merge_bounds([BoundingBox.empty(), box, BoundingBox.empty()]) == box

    def test_all_empty(self):
        assert merge_bounds([BoundingBox.empty()]).is_empty
        assert merge_bounds([]).is_empty


# =============================================================================
# Test Center And Viewport
# =============================================================================

class TestViewport:
    """Tests for center and viewport fallback."""

    def test_center(self):
        assert BoundingBox(10, 20, -40, -30).center() == GeoPoint(15, -35)

    def test_empty_has_no_center(self):
        with pytest.raises(ValueError):
            BoundingBox.empty().center()

    def test_viewport_for_box(self, settings):
        box = BoundingBox(10, 20, -40, -30)
        viewport = viewport_for(box, settings)
        assert viewport.center == GeoPoint(15, -35)
        assert viewport.bounds == box
        assert viewport.zoom is None
        assert not viewport.is_fallback

    def test_viewport_fallback(self, settings):
        viewport = viewport_for(BoundingBox.empty(), settings)
        assert viewport.is_fallback
        assert viewport.center == GeoPoint(49.327667, -122.942333)
        assert viewport.zoom == 14

    def test_fallback_is_configurable(self):
        custom = Settings(
            _env_file=None,
            default_center_lat=1.0,
            default_center_lon=2.0,
            default_zoom=3,
        )
        viewport = viewport_for(BoundingBox.empty(), custom)
        assert viewport.center == GeoPoint(1.0, 2.0)
        assert viewport.zoom == 3

    def test_origin_point_does_not_fall_back(self, settings):
        viewport = viewport_for(bounds_from_points([GeoPoint(0, 0)]), settings)
        assert not viewport.is_fallback
        assert viewport.center == GeoPoint(0, 0)
