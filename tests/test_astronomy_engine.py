from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Final

import astronomy
import pytest
from hypothesis import assume, given, settings, strategies as st

from sampa import Observer, calculate_sampa, moon_position, solar_position
from sampa.geometry import angular_distance_sun_moon

J2000_UT: Final[datetime] = datetime(2000, 1, 1, 12, 0, 0)


def ae_time_to_datetime(t: astronomy.Time) -> datetime:
    # Astronomy Engine: ut is days since noon UTC on 2000-01-01.
    return J2000_UT + timedelta(days=t.ut)


def ae_delta_t(t: astronomy.Time) -> float:
    return (t.tt - t.ut) * 86400.0


def datetime_to_ae_time(moment: datetime) -> astronomy.Time:
    return astronomy.Time.Make(
        moment.year,
        moment.month,
        moment.day,
        moment.hour,
        moment.minute,
        moment.second + moment.microsecond / 1e6,
    )


def ae_horizon(body: astronomy.Body, t: astronomy.Time, obs: astronomy.Observer):
    eq = astronomy.Equator(body, t, obs, True, True)
    return astronomy.Horizon(t, obs, eq.ra, eq.dec, astronomy.Refraction.Airless)


@st.composite
def moments_and_sites(draw: st.DrawFn) -> tuple[datetime, float, float]:
    moment = draw(
        st.datetimes(min_value=datetime(1950, 1, 1), max_value=datetime(2050, 1, 1))
    )
    lat = draw(st.floats(min_value=-70.0, max_value=70.0))
    lon = draw(st.floats(min_value=-180.0, max_value=180.0))
    return moment, lat, lon


@given(moments_and_sites())
@settings(max_examples=200, deadline=None)
def test_moon_direction_matches_astronomy_engine(
    case: tuple[datetime, float, float],
) -> None:
    """
    Property-based test:
    the airless topocentric Moon direction agrees with Astronomy Engine
    to well within the Moon's radius.
    """
    moment, lat, lon = case
    t = datetime_to_ae_time(moment)
    obs = astronomy.Observer(lat, lon, 0.0)

    hor = ae_horizon(astronomy.Body.Moon, t, obs)
    assume(5.0 <= hor.altitude <= 85.0)

    observer = Observer(latitude_deg=lat, longitude_deg_east=lon)
    spa = solar_position(moment, observer, delta_t=ae_delta_t(t))
    mpa = moon_position(spa)

    sep = angular_distance_sun_moon(90.0 - mpa.e0, mpa.azimuth, 90.0 - hor.altitude, hor.azimuth)
    assert sep < 0.02


@given(moments_and_sites())
@settings(max_examples=200, deadline=None)
def test_sun_direction_matches_astronomy_engine(
    case: tuple[datetime, float, float],
) -> None:
    moment, lat, lon = case
    t = datetime_to_ae_time(moment)
    obs = astronomy.Observer(lat, lon, 0.0)

    hor = ae_horizon(astronomy.Body.Sun, t, obs)
    assume(5.0 <= hor.altitude <= 85.0)

    observer = Observer(latitude_deg=lat, longitude_deg_east=lon)
    spa = solar_position(moment, observer, delta_t=ae_delta_t(t))

    sep = angular_distance_sun_moon(90.0 - spa.e0, spa.azimuth, 90.0 - hor.altitude, hor.azimuth)
    assert sep < 0.01


@dataclass(frozen=True)
class LocalCase:
    name: str
    lat: float
    lon: float
    search_from: tuple[int, int, int]


LOCAL_CASES: Final[list[LocalCase]] = [
    LocalCase("tokyo-2009", 35.6895, 139.6917, (2009, 7, 1)),
    LocalCase("london-2015", 51.5074, -0.1278, (2015, 3, 1)),
    LocalCase("new-york-2024", 40.7128, -74.0060, (2024, 3, 1)),
    LocalCase("dallas-2024", 32.7767, -96.7970, (2024, 3, 1)),
]


@pytest.mark.parametrize("case", LOCAL_CASES, ids=lambda c: c.name)
def test_peak_obscuration_matches_astronomy_engine(case: LocalCase) -> None:
    """
    Evaluate the unshaded area at Astronomy Engine's local peak and compare
    the covered fraction of the solar disk.
    """
    obs = astronomy.Observer(case.lat, case.lon, 0.0)
    info = astronomy.SearchLocalSolarEclipse(astronomy.Time.Make(*case.search_from, 0, 0, 0.0), obs)
    assert info.peak.altitude > 5.0

    t = info.peak.time
    observer = Observer(latitude_deg=case.lat, longitude_deg_east=case.lon)
    r = calculate_sampa(
        ae_time_to_datetime(t), observer, delta_t=ae_delta_t(t), mode="geometry"
    )

    covered = 1.0 - r.geometry.a_sul_pct / 100.0
    assert covered == pytest.approx(info.obscuration, abs=0.02)
