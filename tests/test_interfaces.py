from __future__ import annotations

import json

import pytest
from fastapi.testclient import TestClient

from sampa.cli import main
from sampa.web import app

REFERENCE_ARGS = [
    "--time",
    "2009-07-22T01:33:00",
    "--lat",
    "24.61167",
    "--lon",
    "143.36167",
    "--pressure",
    "1000",
    "--temperature",
    "11",
    "--delta-t",
    "66.4",
]

client = TestClient(app)


def test_cli_prints_unshaded_area(capsys: pytest.CaptureFixture[str]) -> None:
    main(REFERENCE_ARGS)
    out = capsys.readouterr().out
    assert "Area unshaded: 78.36" in out
    assert "DNI:" in out


def test_cli_geometry_only(capsys: pytest.CaptureFixture[str]) -> None:
    main(REFERENCE_ARGS + ["--no-irradiance"])
    out = capsys.readouterr().out
    assert "Area unshaded" in out
    assert "DNI:" not in out


def test_cli_json(capsys: pytest.CaptureFixture[str]) -> None:
    main(REFERENCE_ARGS + ["--json"])
    data = json.loads(capsys.readouterr().out)
    assert data["mode"] == "irradiance"
    assert data["geometry"]["a_sul_pct"] == pytest.approx(78.363514, abs=1e-3)
    assert data["irradiance"]["dni_sul"] == pytest.approx(719.099358, rel=1e-3)


def test_cli_reports_invalid_time_inputs() -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(REFERENCE_ARGS + ["--delta-ut1", "2"])
    assert "delta_ut1" in str(excinfo.value.code)


def test_api_reference_case() -> None:
    resp = client.get(
        "/api/sampa",
        params={
            "lat": 24.61167,
            "lon": 143.36167,
            "time_utc": "2009-07-22T01:33:00",
            "pressure": 1000,
            "temperature": 11,
            "delta_t": 66.4,
        },
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["unshaded_area_pct"] == pytest.approx(78.363514, abs=1e-3)
    assert body["sun_zenith"] == pytest.approx(14.512686, abs=1e-5)
    assert body["irradiance"]["dni_sul"] == pytest.approx(719.099358, rel=1e-3)


def test_api_geometry_only() -> None:
    resp = client.get(
        "/api/sampa",
        params={
            "lat": 24.61167,
            "lon": 143.36167,
            "time_utc": "2009-07-22T01:33:00",
            "delta_t": 66.4,
            "irradiance": "false",
        },
    )
    assert resp.status_code == 200
    assert resp.json()["irradiance"] is None


@pytest.mark.parametrize(
    "params",
    [
        {"lat": 95.0, "lon": 0.0, "time_utc": "2009-07-22T01:33:00"},
        {"lat": 0.0, "lon": 0.0, "time_utc": "2009-07-22T01:33:00", "delta_t": 9000},
        # Sun below the horizon.
        {"lat": 24.61167, "lon": 143.36167, "time_utc": "2009-07-22T13:33:00"},
    ],
)
def test_api_rejects_invalid_requests(params: dict) -> None:
    resp = client.get("/api/sampa", params=params)
    assert resp.status_code == 422
