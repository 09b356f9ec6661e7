"""
Tests for the region table, synthetic weather generation, weather-file
import and the weather API.
"""

import numpy as np
import pytest
from fastapi.testclient import TestClient

from chillersim.main import app
from chillersim.config import DAYS_PER_MONTH, HOURS_PER_YEAR
from chillersim.engine.errors import MalformedInputError, UnknownRegionError
from chillersim.engine.psychrometrics import wet_bulb_stull
from chillersim.engine.weather import (
    load_regions,
    get_region,
    generate_annual_weather,
    parse_weather_file,
    parse_weather_year,
)
from chillersim.models.climate import RegionClimateProfile

client = TestClient(app)

LISBOA = RegionClimateProfile(
    name="Lisboa",
    country="Portugal",
    min_temp_c=11.5,
    max_temp_c=23.5,
    avg_relative_humidity_pct=70.0,
)

EPW_HEADER = """LOCATION,Sample City,ST,PRT,TMY3,085360,38.72,-9.15,0.0,100.0
DESIGN CONDITIONS,0
TYPICAL/EXTREME PERIODS,0
GROUND TEMPERATURES,0
HOLIDAYS/DAYLIGHT SAVING,No,0,0,0
COMMENTS 1,Sample EPW for testing
COMMENTS 2,Generated for unit tests
DATA PERIODS,1,1,Data,Sunday,1/1,12/31
"""

EPW_TAIL = (
    "101300,0,0,0,0,0,0,0,0,0,0,200,3.0,5,5,10.0,77777,9,999999999,30,0.100,0,88,999"
)


def _epw_row(month, day, hour, tdb, rh):
    return (
        f"2020,{month},{day},{hour},60,A7A7A7A7*0?9?9?9?9?9?9*0A7A7A7A7*0,"
        f"{tdb},-10.0,{rh},{EPW_TAIL}"
    )


SAMPLE_ROWS = [
    (1, 1, 1, -5.0, 60),
    (1, 1, 2, -4.0, 62),
    (1, 1, 3, -3.5, 63),
    (1, 1, 4, -3.0, 64),
    (1, 1, 5, -2.5, 65),
    (1, 1, 6, -2.0, 66),
    (1, 1, 7, -1.5, 67),
    (7, 1, 12, 32.0, 55),
    (7, 1, 13, 33.5, 48),
    (7, 1, 24, 34.0, 42),
]

SAMPLE_EPW = EPW_HEADER + "\n".join(_epw_row(*r) for r in SAMPLE_ROWS) + "\n"


def _stamp(hour_index):
    """(month, day, EPW hour 1-24) of an hour of the model year."""
    day_of_year = hour_index // 24
    for m, n_days in enumerate(DAYS_PER_MONTH):
        if day_of_year < n_days:
            return m + 1, day_of_year + 1, hour_index % 24 + 1
        day_of_year -= n_days
    raise IndexError(hour_index)


FULL_YEAR_ROWS = [
    _epw_row(*_stamp(i), 10.0 + (i % 24) * 0.5, 50 + i % 30)
    for i in range(HOURS_PER_YEAR)
]

FULL_YEAR_EPW = EPW_HEADER + "\n".join(FULL_YEAR_ROWS) + "\n"


class TestRegions:
    def test_table_loaded(self):
        regions = load_regions()
        assert len(regions) == 20
        for r in regions:
            assert r.min_temp_c < r.max_temp_c
            assert 0 <= r.avg_relative_humidity_pct <= 100

    def test_lookup_case_insensitive(self):
        region = get_region("  lisboa ")
        assert region.min_temp_c == 11.5
        assert region.max_temp_c == 23.5
        assert region.avg_relative_humidity_pct == 70.0

    def test_unknown_region(self):
        with pytest.raises(UnknownRegionError):
            get_region("Atlantis")


class TestGenerateAnnualWeather:
    def test_full_year_in_order(self):
        points = generate_annual_weather(LISBOA, seed=1)
        assert len(points) == HOURS_PER_YEAR
        assert [p.hour_index for p in points] == list(range(HOURS_PER_YEAR))
        assert points[0].month == 1 and points[0].day == 1 and points[0].hour == 0
        assert points[-1].month == 12 and points[-1].day == 31 and points[-1].hour == 23

    def test_month_lengths(self):
        points = generate_annual_weather(LISBOA, seed=1)
        assert sum(1 for p in points if p.month == 1) == 744
        assert sum(1 for p in points if p.month == 2) == 672

    def test_same_seed_reproducible(self):
        a = generate_annual_weather(LISBOA, seed=42)
        b = generate_annual_weather(LISBOA, seed=42)
        assert a == b

    def test_generator_reproducible(self):
        a = generate_annual_weather(LISBOA, rng=np.random.default_rng(7))
        b = generate_annual_weather(LISBOA, rng=np.random.default_rng(7))
        assert a == b

    def test_different_seed_differs(self):
        a = generate_annual_weather(LISBOA, seed=1)
        b = generate_annual_weather(LISBOA, seed=2)
        assert [p.dry_bulb_c for p in a] != [p.dry_bulb_c for p in b]

    def test_humidity_in_range(self):
        humid = LISBOA.model_copy(update={"avg_relative_humidity_pct": 95.0})
        for p in generate_annual_weather(humid, seed=3):
            assert 0.0 <= p.relative_humidity_pct <= 100.0

    def test_values_rounded(self):
        for p in generate_annual_weather(LISBOA, seed=5)[:500]:
            assert p.dry_bulb_c == round(p.dry_bulb_c, 1)
            assert p.relative_humidity_pct == round(p.relative_humidity_pct, 1)
            assert p.wet_bulb_c == round(p.wet_bulb_c, 1)

    def test_wet_bulb_from_stull(self):
        for p in generate_annual_weather(LISBOA, seed=5)[:200]:
            expected = round(wet_bulb_stull(p.dry_bulb_c, p.relative_humidity_pct), 1)
            assert p.wet_bulb_c == pytest.approx(expected)

    def test_seasonal_envelope(self):
        points = generate_annual_weather(LISBOA, seed=11)
        aug = [p.dry_bulb_c for p in points if p.month == 8]
        jan = [p.dry_bulb_c for p in points if p.month == 1]
        # August is the warmest month, January sits near the cold end
        assert sum(aug) / len(aug) == pytest.approx(23.5, abs=0.2)
        assert sum(jan) / len(jan) == pytest.approx(12.3, abs=0.2)

    def test_diurnal_swing(self):
        points = generate_annual_weather(LISBOA, seed=11)
        aug = [p for p in points if p.month == 8]
        afternoon = [p.dry_bulb_c for p in aug if p.hour == 14]
        night = [p.dry_bulb_c for p in aug if p.hour == 2]
        assert sum(afternoon) / len(afternoon) > sum(night) / len(night) + 8


class TestParseWeatherFile:
    def test_row_count(self):
        points = parse_weather_file(SAMPLE_EPW)
        assert len(points) == 10
        assert [p.hour_index for p in points] == list(range(10))

    def test_first_row_fields(self):
        first = parse_weather_file(SAMPLE_EPW)[0]
        assert first.month == 1
        assert first.day == 1
        assert first.hour == 0
        assert first.dry_bulb_c == -5.0
        assert first.relative_humidity_pct == 60.0
        assert first.wet_bulb_c == pytest.approx(round(wet_bulb_stull(-5.0, 60.0), 1))

    def test_hour_24_maps_to_23(self):
        assert parse_weather_file(SAMPLE_EPW)[-1].hour == 23

    def test_month_extraction(self):
        points = parse_weather_file(SAMPLE_EPW)
        assert sum(1 for p in points if p.month == 1) == 7
        assert sum(1 for p in points if p.month == 7) == 3

    def test_unparsable_row_skipped(self):
        text = SAMPLE_EPW + _epw_row(7, 1, 15, "n/a", 40) + "\n"
        assert len(parse_weather_file(text)) == 10

    def test_missing_markers_filled_from_previous_hour(self):
        text = (
            EPW_HEADER
            + _epw_row(1, 1, 1, 10.0, 50) + "\n"
            + _epw_row(1, 1, 2, 99.9, 55) + "\n"
            + _epw_row(1, 1, 3, 12.0, 999) + "\n"
            + _epw_row(1, 1, 4, 13.0, 60) + "\n"
        )
        points = parse_weather_file(text)
        assert len(points) == 4
        assert [p.hour for p in points] == [0, 1, 2, 3]
        assert points[1].dry_bulb_c == 10.0
        assert points[1].relative_humidity_pct == 55.0
        assert points[2].dry_bulb_c == 12.0
        assert points[2].relative_humidity_pct == 55.0

    def test_leading_missing_marker_takes_first_valid_value(self):
        text = (
            EPW_HEADER
            + _epw_row(1, 1, 1, 99.9, 50) + "\n"
            + _epw_row(1, 1, 2, 8.0, 52) + "\n"
        )
        points = parse_weather_file(text)
        assert len(points) == 2
        assert points[0].dry_bulb_c == 8.0
        assert points[0].relative_humidity_pct == 50.0

    def test_missing_marker_keeps_full_year_aligned(self):
        lines = FULL_YEAR_ROWS[:]
        month, day, hour = _stamp(5000)
        lines[5000] = _epw_row(month, day, hour, 18.0, 999)
        points = parse_weather_file(EPW_HEADER + "\n".join(lines))
        assert len(points) == HOURS_PER_YEAR
        assert points[5000].hour_index == 5000
        assert points[5000].relative_humidity_pct == points[4999].relative_humidity_pct
        assert (points[5001].month, points[5001].day) == _stamp(5001)[:2]

    def test_all_values_missing_raises(self):
        text = EPW_HEADER + _epw_row(1, 1, 1, 99.9, 50) + "\n"
        with pytest.raises(MalformedInputError):
            parse_weather_file(text)

    def test_humidity_clamped(self):
        text = EPW_HEADER + _epw_row(1, 1, 1, 10.0, 104) + "\n"
        assert parse_weather_file(text)[0].relative_humidity_pct == 100.0

    def test_short_rows_ignored(self):
        text = SAMPLE_EPW + "2020,1,1,8,60,x,5.0,1.0,70\n"
        assert len(parse_weather_file(text)) == 10

    def test_stops_at_one_year(self):
        rows = [_epw_row(1, 1, 1, 15.0, 50)] * (HOURS_PER_YEAR + 5)
        points = parse_weather_file(EPW_HEADER + "\n".join(rows))
        assert len(points) == HOURS_PER_YEAR
        assert points[-1].hour_index == HOURS_PER_YEAR - 1

    def test_empty_raises(self):
        with pytest.raises(MalformedInputError):
            parse_weather_file("")

    def test_garbage_raises(self):
        with pytest.raises(MalformedInputError):
            parse_weather_file("bad data\nmore bad data")


class TestParseWeatherYear:
    def test_full_year(self):
        points = parse_weather_year(FULL_YEAR_EPW)
        assert len(points) == HOURS_PER_YEAR
        assert (points[-1].month, points[-1].day, points[-1].hour) == (12, 31, 23)

    def test_incomplete_year_raises(self):
        with pytest.raises(MalformedInputError, match="incomplete"):
            parse_weather_year(SAMPLE_EPW)


class TestWeatherAPI:
    def test_regions_endpoint(self):
        resp = client.get("/api/v1/regions")
        assert resp.status_code == 200
        names = [r["name"] for r in resp.json()]
        assert "Lisboa" in names

    def test_generate_by_region(self):
        resp = client.post(
            "/api/v1/weather/generate", json={"region": "Lisboa", "seed": 3}
        )
        assert resp.status_code == 200
        data = resp.json()
        assert data["total_hours"] == HOURS_PER_YEAR
        assert data["source"] == "Lisboa"
        assert data["summary"]["hours"] == HOURS_PER_YEAR

    def test_generate_seed_reproducible(self):
        body = {"region": "Porto", "seed": 9}
        a = client.post("/api/v1/weather/generate", json=body).json()
        b = client.post("/api/v1/weather/generate", json=body).json()
        assert a["points"][:48] == b["points"][:48]

    def test_generate_by_profile(self):
        resp = client.post(
            "/api/v1/weather/generate",
            json={"profile": LISBOA.model_dump(), "seed": 1},
        )
        assert resp.status_code == 200
        assert resp.json()["total_hours"] == HOURS_PER_YEAR

    def test_generate_unknown_region(self):
        resp = client.post("/api/v1/weather/generate", json={"region": "Atlantis"})
        assert resp.status_code == 404

    def test_generate_missing_region_and_profile(self):
        resp = client.post("/api/v1/weather/generate", json={"seed": 1})
        assert resp.status_code == 422

    def test_upload_epw(self):
        resp = client.post(
            "/api/v1/weather/upload",
            files={"file": ("test.epw", FULL_YEAR_EPW.encode(), "text/plain")},
        )
        assert resp.status_code == 200
        data = resp.json()
        assert data["total_hours"] == HOURS_PER_YEAR
        assert data["source"] == "test.epw"

    def test_upload_incomplete_year_rejected(self):
        resp = client.post(
            "/api/v1/weather/upload",
            files={"file": ("test.epw", SAMPLE_EPW.encode(), "text/plain")},
        )
        assert resp.status_code == 422

    def test_upload_wrong_filetype(self):
        resp = client.post(
            "/api/v1/weather/upload",
            files={"file": ("test.txt", b"data", "text/plain")},
        )
        assert resp.status_code == 400

    def test_upload_bad_data(self):
        resp = client.post(
            "/api/v1/weather/upload",
            files={"file": ("test.epw", b"bad data", "text/plain")},
        )
        assert resp.status_code == 422

    def test_statistics_endpoint(self):
        points = [p.model_dump() for p in parse_weather_file(SAMPLE_EPW)]
        resp = client.post("/api/v1/weather/statistics", json={"points": points})
        assert resp.status_code == 200
        data = resp.json()
        assert data["summary"]["hours"] == 10
        assert data["summary"]["min_dry_bulb_c"] == -5.0
        assert data["summary"]["max_dry_bulb_c"] == 34.0
        assert [m["key"] for m in data["monthly"]] == [1, 7]
        assert len(data["daily"]) == 1
        assert sum(b["dry_bulb_hours"] for b in data["temperature_histogram"]) == 10
        assert sum(b["count"] for b in data["humidity_histogram"]) == 10


class TestHealth:
    def test_health(self):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json()["status"] == "ok"
