from __future__ import annotations

import math

import pytest
from hypothesis import given, settings, strategies as st

from sampa import Observer, SolarPosition, eclipse_geometry, moon_position
from sampa.models import FundamentalArguments
from sampa.mpa import (
    MEAN_MOON_DISTANCE_KM,
    fundamental_arguments,
    moon_earth_distance,
    moon_equatorial_horiz_parallax,
    moon_periodic_term_summation,
)
from sampa.spa import limit_degrees
from sampa.terms import MB_TERMS, ML_TERMS


def test_periodic_term_tables_are_complete() -> None:
    assert len(ML_TERMS) == 60
    assert len(MB_TERMS) == 60
    # Leading terms of Meeus tables 47.A and 47.B.
    assert ML_TERMS[0] == (0, 0, 1, 0, 6288774, -20905355)
    assert MB_TERMS[0][:5] == (0, 0, 0, 1, 5128122)


def test_harmonic_sum_of_zero_arguments() -> None:
    args = FundamentalArguments(l_prime=0.0, d=0.0, m=0.0, m_prime=0.0, f=0.0)
    sums = moon_periodic_term_summation(args, 0.0, ML_TERMS)
    assert sums.sin_sum == 0.0
    assert sums.cos_sum == pytest.approx(sum(t.a_cos for t in ML_TERMS))


def test_fundamental_arguments_at_j2000() -> None:
    args = fundamental_arguments(0.0)
    assert args.l_prime == pytest.approx(218.3164477)
    assert args.d == pytest.approx(297.8501921)
    assert args.m == pytest.approx(357.5291092)
    assert args.m_prime == pytest.approx(134.9633964)
    assert args.f == pytest.approx(93.2720950)


def test_mean_distance_and_parallax() -> None:
    assert moon_earth_distance(0.0) == MEAN_MOON_DISTANCE_KM
    assert moon_equatorial_horiz_parallax(MEAN_MOON_DISTANCE_KM) == pytest.approx(0.949238, abs=1e-5)


def test_reference_eclipse_geometry(nrel_spa: SolarPosition) -> None:
    mpa = moon_position(nrel_spa)
    geometry = eclipse_geometry(nrel_spa, mpa)

    assert geometry.ems == pytest.approx(0.374760, abs=1e-5)
    assert geometry.rs == pytest.approx(0.262360, abs=1e-5)
    assert geometry.rm == pytest.approx(0.283341, abs=1e-5)
    assert geometry.a_sul_pct == pytest.approx(78.363514, abs=1e-4)


def test_moon_position_is_deterministic(nrel_spa: SolarPosition) -> None:
    assert moon_position(nrel_spa) == moon_position(nrel_spa)


def test_moon_is_close_to_the_sun_during_the_eclipse(nrel_spa: SolarPosition) -> None:
    mpa = moon_position(nrel_spa)
    assert abs(mpa.zenith - nrel_spa.zenith) < 1.0
    assert 350000.0 < mpa.cap_delta < 410000.0
    assert mpa.del_e > 0.0


@st.composite
def solar_positions(draw: st.DrawFn) -> SolarPosition:
    observer = Observer(
        latitude_deg=draw(st.floats(min_value=-89.0, max_value=89.0)),
        longitude_deg_east=draw(st.floats(min_value=-180.0, max_value=180.0)),
        elevation_m=draw(st.floats(min_value=0.0, max_value=4000.0)),
    )
    return SolarPosition(
        observer=observer,
        jd=2451545.0,
        jce=draw(st.floats(min_value=-2.0, max_value=2.0)),
        r=draw(st.floats(min_value=0.983, max_value=1.017)),
        del_psi=draw(st.floats(min_value=-0.006, max_value=0.006)),
        epsilon=draw(st.floats(min_value=23.40, max_value=23.46)),
        nu=draw(st.floats(min_value=0.0, max_value=359.999)),
        zenith=45.0,
        azimuth=180.0,
    )


@given(solar_positions())
@settings(max_examples=300, deadline=None)
def test_angles_are_normalized(spa: SolarPosition) -> None:
    mpa = moon_position(spa)
    for value in (
        mpa.l_prime,
        mpa.d,
        mpa.m,
        mpa.m_prime,
        mpa.f,
        mpa.lambda_prime,
        mpa.alpha,
        mpa.h,
        mpa.azimuth_astro,
        mpa.azimuth,
    ):
        assert 0.0 <= value < 360.0
    # Latitude is reduced to [0, 360) like every other angle.
    assert 0.0 <= mpa.beta < 360.0
    assert mpa.beta < 5.5 or mpa.beta > 354.5
    assert 0.0 <= mpa.zenith <= 180.0


@given(solar_positions())
@settings(max_examples=300, deadline=None)
def test_azimuth_conventions_differ_by_half_turn(spa: SolarPosition) -> None:
    mpa = moon_position(spa)
    diff = (mpa.azimuth - mpa.azimuth_astro) % 360.0
    assert diff == pytest.approx(180.0, abs=1e-9)


@given(solar_positions())
@settings(max_examples=300, deadline=None)
def test_topocentric_position_stays_near_geocentric(spa: SolarPosition) -> None:
    mpa = moon_position(spa)
    # Parallax cannot move the Moon by more than its horizontal parallax.
    assert abs(mpa.delta_prime - mpa.delta) <= mpa.pi * 1.001
    assert 0.88 < mpa.pi < 1.03
    assert mpa.zenith == pytest.approx(90.0 - mpa.e)


@given(st.floats(min_value=-1e6, max_value=1e6, allow_nan=False))
@settings(max_examples=300, deadline=None)
def test_limit_degrees_range(angle: float) -> None:
    limited = limit_degrees(angle)
    assert 0.0 <= limited < 360.0
    assert math.isclose(math.cos(math.radians(limited)), math.cos(math.radians(angle)), abs_tol=1e-6)
