import json

import pytest

from snapshot import (
    SnapshotHit,
    SnapshotMiss,
    SnapshotValidationError,
    load_snapshot,
    lookup_snapshot,
    save_snapshot,
    validate_snapshot_payload,
)
from tracker.models import Country, CountrySeries, DataPoint


def sample():
    return [
        CountrySeries(Country("China", "中国"), [DataPoint("01-22", 17, 548, 548)]),
        CountrySeries(Country("Iran", "伊朗"), []),
    ]


def test_round_trip(tmp_path):
    path = tmp_path / "data.json"
    save_snapshot(sample(), path)
    raw = path.read_text(encoding="utf-8")
    assert "中国" in raw
    assert json.loads(raw)[0] == {
        "code": "China",
        "name": "中国",
        "data": [{"date": "01-22", "deaths": 17, "confirmed": 548, "new_confirmed": 548}],
    }
    assert load_snapshot(path) == sample()


def test_lookup_missing_file_is_miss(tmp_path):
    result = lookup_snapshot(tmp_path / "data.json")
    assert isinstance(result, SnapshotMiss)
    assert "does not exist" in result.reason


def test_lookup_hit(tmp_path):
    path = tmp_path / "data.json"
    save_snapshot(sample(), path)
    result = lookup_snapshot(path)
    assert isinstance(result, SnapshotHit)
    assert [s.country.code for s in result.series] == ["China", "Iran"]


def test_lookup_malformed_json_is_miss(tmp_path):
    path = tmp_path / "data.json"
    path.write_text("[{not json", encoding="utf-8")
    result = lookup_snapshot(path)
    assert isinstance(result, SnapshotMiss)
    assert result.reason.startswith("invalid snapshot")


def test_lookup_wrong_shape_is_miss(tmp_path):
    path = tmp_path / "data.json"
    path.write_text(json.dumps({"features": []}), encoding="utf-8")
    assert isinstance(lookup_snapshot(path), SnapshotMiss)


def test_null_counters_load_as_zero():
    payload = [{"code": "US", "name": "美国", "data": [{"date": "03-01", "deaths": None, "confirmed": 5}]}]
    (entry,) = validate_snapshot_payload(payload)
    series = CountrySeries.from_dict(entry)
    assert series.points[0] == DataPoint("03-01", deaths=0, confirmed=5, new_confirmed=0)


@pytest.mark.parametrize(
    "payload, message",
    [
        ([{"name": "x", "data": []}], "missing code"),
        ([{"code": "US", "data": []}], "missing name"),
        ([{"code": "US", "name": "a", "data": []}, {"code": "US", "name": "b", "data": []}], "Duplicate"),
        ([{"code": "US", "name": "a"}], "'data' list"),
        ([{"code": "US", "name": "a", "data": [{"confirmed": 1}]}], "missing date"),
        ([{"code": "US", "name": "a", "data": [{"date": "03-01", "confirmed": "many"}]}], "non-numeric"),
        ([{"code": "US", "name": "a", "data": [{"date": "03-01", "confirmed": float("nan")}]}], "non-finite"),
        ([{"code": "US", "name": "a", "data": [{"date": "03-01", "deaths": float("inf")}]}], "non-finite"),
    ],
)
def test_validation_errors(payload, message):
    with pytest.raises(SnapshotValidationError, match=message):
        validate_snapshot_payload(payload)


@pytest.mark.parametrize("literal", ["NaN", "Infinity", "-Infinity"])
def test_lookup_non_finite_counter_is_miss(tmp_path, literal):
    path = tmp_path / "data.json"
    path.write_text(
        '[{"code": "US", "name": "a", "data": [{"date": "03-01", "confirmed": %s}]}]' % literal,
        encoding="utf-8",
    )
    result = lookup_snapshot(path)
    assert isinstance(result, SnapshotMiss)
    assert "non-finite" in result.reason
