"""Tests for outage filtering/projection and the test-mode fixtures that feed it."""

import copy

from outage_proxy.services.response_builder import build_response
from outage_proxy.services.test_mode import TestModeStatus, get_test_mode, get_test_outages

VANCOUVER = (49.2827, -123.1207)
NOW_MS = 1_760_000_000_000


def _dump(resp) -> dict:
    return resp.model_dump(mode="json", by_alias=True)


# --- build_response ---

def test_outage_covering_caller_is_returned():
    outages = get_test_outages("outage", now_ms=NOW_MS)
    data = _dump(build_response(False, *VANCOUVER, outages))

    assert data["cached"] is False
    assert data["coordinates"] == {"latitude": 49.2827, "longitude": -123.1207}
    assert data["totalOutages"] == 1
    assert data["affectingYou"] == 1
    entry = data["outages"][0]
    assert entry["id"] == "test-outage-001"
    assert entry["crewStatus"] == "ONSITE"
    assert entry["crewStatusDetail"]
    assert entry["dateOff"] == NOW_MS - 3_600_000
    assert entry["crewEtr"] == NOW_MS + 7_200_000
    assert "polygon" not in entry


def test_non_overlapping_outage_is_excluded():
    outages = get_test_outages("no-outage", now_ms=NOW_MS)
    data = _dump(build_response(True, *VANCOUVER, outages))

    assert data["cached"] is True
    assert data["totalOutages"] == 1
    assert data["affectingYou"] == 0
    assert data["outages"] == []


def test_multiple_outages_filters_to_vancouver():
    outages = get_test_outages("multiple", now_ms=NOW_MS)
    data = _dump(build_response(False, *VANCOUVER, outages))

    assert data["totalOutages"] == 3
    assert data["affectingYou"] == 2
    assert [o["id"] for o in data["outages"]] == ["test-outage-003", "test-outage-004"]
    assert data["outages"][1]["crewStatusDetail"].startswith("A crew has been assigned")


def test_projection_keys_are_public_subset():
    outages = get_test_outages("outage", now_ms=NOW_MS)
    entry = _dump(build_response(False, *VANCOUVER, outages))["outages"][0]

    assert set(entry) == {
        "id", "municipality", "area", "cause", "numCustomersOut", "crewStatus",
        "crewStatusDescription", "crewStatusDetail", "dateOff", "dateOn", "lastUpdated",
        "regionName", "showEtr", "crewEtr", "latitude", "longitude",
    }


def test_records_without_usable_polygon_are_skipped():
    outages = [
        {"id": 1, "crewStatus": "ONSITE"},
        {"id": 2, "polygon": None},
        {"id": 3, "polygon": []},
        {"id": 4, "polygon": [-123.15, 49.27, -123.10]},
        {"id": 5, "polygon": "garbage"},
        "not a record",
        {"id": 6, "polygon": [-123.15, 49.27, -123.10, 49.27, -123.10, 49.29, -123.15, 49.29]},
    ]
    data = _dump(build_response(False, *VANCOUVER, outages))

    assert data["totalOutages"] == 7
    assert data["affectingYou"] == 1
    assert data["outages"][0]["id"] == 6


def test_missing_fields_project_as_null():
    outages = [{"id": 9, "polygon": [-124, 49, -122, 49, -122, 50, -124, 50]}]
    entry = _dump(build_response(False, *VANCOUVER, outages))["outages"][0]

    assert entry["id"] == 9
    assert entry["municipality"] is None
    assert entry["crewStatusDetail"] is None
    assert entry["dateOn"] is None


def test_unknown_crew_status_gives_null_detail():
    outages = [{"id": 1, "crewStatus": "onsite", "polygon": [-124, 49, -122, 49, -122, 50, -124, 50]}]
    entry = _dump(build_response(False, *VANCOUVER, outages))["outages"][0]
    assert entry["crewStatus"] == "onsite"
    assert entry["crewStatusDetail"] is None


def test_empty_feed():
    data = _dump(build_response(False, *VANCOUVER, []))
    assert data["totalOutages"] == 0
    assert data["affectingYou"] == 0
    assert data["outages"] == []


def test_affecting_never_exceeds_total():
    outages = get_test_outages("multiple", now_ms=NOW_MS) * 3
    resp = build_response(False, *VANCOUVER, outages)
    assert resp.affecting_you <= resp.total_outages


def test_build_response_is_pure():
    outages = get_test_outages("multiple", now_ms=NOW_MS)
    snapshot = copy.deepcopy(outages)

    first = build_response(False, *VANCOUVER, outages).model_dump_json(by_alias=True)
    second = build_response(False, *VANCOUVER, outages).model_dump_json(by_alias=True)

    assert first == second
    assert outages == snapshot


# --- Test mode ---

def test_mode_disabled():
    assert get_test_mode(False, "outage") == TestModeStatus(enabled=False, valid=True, mode=None)


def test_mode_enabled_valid_params():
    for mode in ("outage", "no-outage", "multiple"):
        assert get_test_mode(True, mode) == TestModeStatus(enabled=True, valid=True, mode=mode)


def test_mode_enabled_invalid_params():
    for param in ("invalid", "", None, "OUTAGE"):
        assert get_test_mode(True, param) == TestModeStatus(enabled=True, valid=False, mode=None)


def test_fixture_shapes():
    assert [o["id"] for o in get_test_outages("outage")] == ["test-outage-001"]
    assert [o["municipality"] for o in get_test_outages("no-outage")] == ["Victoria"]
    multiple = get_test_outages("multiple")
    assert len(multiple) == 3
    assert multiple[2]["crewEtr"] is None
    assert multiple[2]["showEtr"] is False
    assert get_test_outages("unknown") == []


def test_fixture_timestamps_relative_to_now():
    outage = get_test_outages("outage", now_ms=NOW_MS)[0]
    assert outage["lastUpdated"] == NOW_MS
    assert outage["dateOff"] < outage["lastUpdated"] < outage["dateOn"]


def test_fixtures_do_not_share_polygon_lists():
    first = get_test_outages("outage")
    first[0]["polygon"].clear()
    assert len(get_test_outages("outage")[0]["polygon"]) == 10


# --- Oddly typed upstream records ---

def test_odd_field_types_echo_unchanged():
    outages = [{
        "id": 77,
        "numCustomersOut": "15",
        "showEtr": "true",
        "latitude": "49.3",
        "dateOn": "TBD",
        "crewEtr": {"unexpected": True},
        "crewStatus": 5,
        "polygon": [-124, 49, -122, 49, -122, 50, -124, 50],
    }]
    entry = _dump(build_response(False, *VANCOUVER, outages))["outages"][0]

    assert entry["numCustomersOut"] == "15"
    assert entry["showEtr"] == "true"
    assert entry["latitude"] == "49.3"
    assert entry["dateOn"] == "TBD"
    assert entry["crewEtr"] == {"unexpected": True}
    assert entry["crewStatus"] == 5
    assert entry["crewStatusDetail"] is None


def test_odd_record_does_not_drop_good_records():
    good = get_test_outages("outage", now_ms=NOW_MS)[0]
    odd = dict(good, id="odd-1", dateOn="TBD", numCustomersOut=None, showEtr="yes")
    data = _dump(build_response(False, *VANCOUVER, [good, odd]))

    assert data["affectingYou"] == 2
    assert [o["id"] for o in data["outages"]] == ["test-outage-001", "odd-1"]
    assert data["outages"][0]["dateOn"] == NOW_MS + 7_200_000
    assert data["outages"][1]["dateOn"] == "TBD"
    assert data["outages"][1]["showEtr"] == "yes"
