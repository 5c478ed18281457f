"""Unit tests for shape detection and measurement helpers."""

import os
from collections import deque
from datetime import date, datetime, time, timedelta, timezone
from decimal import Decimal
from pathlib import Path
from unittest.mock import patch

import pytest

from requisite.shapes import (
    DurationUnit,
    PathStatus,
    Shape,
    as_path,
    human_duration,
    measure,
    now_for,
    path_status,
    resolve_label,
    shape_of,
    split_one_shot,
    truncate_duration,
)


class TestShapeOf:
    """Test value classification."""

    @pytest.mark.parametrize("value, expected", [
        ("text", Shape.STRING),
        ({"a": 1}, Shape.MAP),
        ((1, 2), Shape.ARRAY),
        (b"raw", Shape.ARRAY),
        ([1, 2], Shape.COLLECTION),
        ({1, 2}, Shape.COLLECTION),
        (deque([1]), Shape.COLLECTION),
        (iter([1]), Shape.ITERABLE),
        (datetime(2024, 1, 1, 12, 0), Shape.DATE_TIME),
        (date(2024, 1, 1), Shape.DATE),
        (time(12, 0), Shape.TIME),
        (timedelta(seconds=1), Shape.DURATION),
        (Path("/tmp"), Shape.PATH),
        (3, Shape.VALUE),
        (Decimal("1.5"), Shape.VALUE),
        (object(), Shape.OBJECT),
    ])
    def test_shapes(self, value, expected):
        """Test each supported shape is recognized."""
        assert shape_of(value) == expected

    def test_default_for_none(self):
        """Test None uses the given default."""
        assert shape_of(None) == Shape.OBJECT
        assert shape_of(None, Shape.STRING) == Shape.STRING


class TestResolveLabel:
    """Test label resolution."""

    def test_explicit_label_wins(self):
        """Test the caller's label is used as given."""
        assert resolve_label("Name", Shape.STRING) == "Name"

    def test_default_labels(self):
        """Test configured defaults per shape."""
        assert resolve_label(None, Shape.STRING) == "String"
        assert resolve_label(None, Shape.DATE_TIME) == "Date Time"
        assert resolve_label(None, Shape.DIRECTORY) == "Directory"


class TestMeasure:
    """Test length and size measurement."""

    def test_sized_values(self):
        """Test values with len() are measured directly."""
        assert measure("abc", 1) == (3, False, None)
        assert measure({"a": 1}, 0) == (1, False, None)

    def test_generator_counted_up_to_limit(self):
        """Test generic iterables are counted up to the limit."""
        assert measure((i for i in range(10)), 4)[:2] == (4, True)
        assert measure((i for i in range(2)), 4)[:2] == (2, False)

    def test_one_shot_iterator_replayed(self):
        """Test counting leaves every element available through the replay."""
        measured = measure(iter(range(10)), 3)
        assert measured.count == 3
        assert list(measured.replay) == list(range(10))

    def test_reiterable_has_no_replay(self):
        """Test iterables that restart on iter() are not buffered."""
        assert measure(range(5), 2).replay is None

    def test_unmeasurable(self):
        """Test values without a size."""
        assert measure(42, 5) is None


class TestSplitOneShot:
    """Test one-shot iterator detection."""

    def test_iterator_is_split(self):
        """Test a generator is split into a scan and a full replay."""
        scan, replay = split_one_shot(i for i in range(3))
        assert next(iter(scan)) == 0
        assert list(replay) == [0, 1, 2]

    def test_collections_untouched(self):
        """Test collections are returned as-is without a replay."""
        items = [1, 2]
        scan, replay = split_one_shot(items)
        assert scan is items
        assert replay is None


class TestPaths:
    """Test path coercion and status lookup."""

    def test_as_path(self):
        """Test str and path-like values become Paths."""
        assert as_path("a/b") == Path("a/b")
        assert as_path(Path("x")) == Path("x")
        assert as_path(12) is None

    def test_status(self, sample_file, sample_dir, missing_path):
        """Test file, directory and missing paths."""
        assert path_status(sample_file) == PathStatus.FILE
        assert path_status(sample_dir) == PathStatus.DIRECTORY
        assert path_status(missing_path) == PathStatus.MISSING

    def test_missing_parent_is_missing(self, sample_file):
        """Test a path below a regular file is missing."""
        assert path_status(sample_file / "child") == PathStatus.MISSING

    def test_unexpected_error_is_unknown(self, sample_file):
        """Test other OS errors give an unknown status."""
        with patch("requisite.shapes.os.stat", side_effect=PermissionError("denied")):
            assert path_status(sample_file) == PathStatus.UNKNOWN

    def test_single_stat_call(self, sample_file):
        """Test the status needs exactly one stat call."""
        with patch("requisite.shapes.os.stat", wraps=os.stat) as stat_mock:
            path_status(sample_file)
        assert stat_mock.call_count == 1


class TestNowFor:
    """Test "now" resolution per temporal type."""

    def test_naive_datetime(self):
        """Test naive datetimes get a naive now."""
        assert now_for(datetime(2020, 1, 1)).tzinfo is None

    def test_aware_datetime(self):
        """Test aware datetimes get now in their zone."""
        assert now_for(datetime(2020, 1, 1, tzinfo=timezone.utc)).tzinfo is timezone.utc

    def test_date(self):
        """Test dates compare against today."""
        assert now_for(date(2020, 1, 1)) == date.today()

    def test_time(self):
        """Test times compare against a time of day."""
        assert isinstance(now_for(time(1, 0)), time)


class TestDurations:
    """Test duration helpers."""

    def test_truncate(self):
        """Test truncation toward zero."""
        assert truncate_duration(timedelta(seconds=119), DurationUnit.MINUTES) == 1
        assert truncate_duration(timedelta(seconds=-119), DurationUnit.MINUTES) == -1
        assert truncate_duration(timedelta(milliseconds=1500), DurationUnit.SECONDS) == 1
        assert truncate_duration(timedelta(days=2), DurationUnit.HOURS) == 48

    def test_human_duration(self):
        """Test compact duration rendering."""
        assert human_duration(timedelta(minutes=1, seconds=5)) == "1m 5s"
        assert human_duration(timedelta(0)) == "0s"
        assert human_duration(timedelta(days=1, hours=2)) == "1d 2h"
        assert human_duration(timedelta(milliseconds=1, microseconds=5)) == "1ms 5us"
        assert human_duration(-timedelta(seconds=30)) == "-30s"
