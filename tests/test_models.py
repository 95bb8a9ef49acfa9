"""InfoRecord construction and timestamp formatting."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from app_client_info.models import InfoRecord, format_timestamp


def test_format_timestamp_whole_seconds() -> None:
    assert format_timestamp(datetime(2024, 1, 1, tzinfo=timezone.utc)) == "2024-01-01T00:00:00Z"


def test_format_timestamp_keeps_microseconds_and_converts_to_utc() -> None:
    moment = datetime(2024, 1, 1, 2, 0, 0, 1500, tzinfo=timezone(timedelta(hours=2)))
    assert format_timestamp(moment) == "2024-01-01T00:00:00.001500Z"


def test_to_dict_has_wire_keys_in_order() -> None:
    record = InfoRecord.build(
        "windows",
        {"majorVersion": 10, "minorVersion": 0, "buildNumber": 22631},
        datetime(2024, 5, 6, 7, 8, 9, tzinfo=timezone.utc),
    )

    payload = record.to_dict()

    assert list(payload) == ["platform", "timestamp", "additionalData"]
    assert payload["platform"] == "windows"
    assert payload["timestamp"] == "2024-05-06T07:08:09Z"
    assert list(payload["additionalData"]) == ["majorVersion", "minorVersion", "buildNumber"]


def test_record_copies_source_mapping() -> None:
    source = {"sysname": "Linux"}
    record = InfoRecord.build("linux", source, datetime(2024, 1, 1, tzinfo=timezone.utc))

    source["sysname"] = "changed"

    assert record.additional_data["sysname"] == "Linux"
