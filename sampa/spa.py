"""
Solar Position Algorithm (SPA), zenith and azimuth outputs only.

Reference: Reda, I. and Andreas, A. "Solar Position Algorithm for Solar
Radiation Applications", NREL/TP-560-34302 (revised 2008). Stated
uncertainty is +/-0.0003 degrees for years -2000 to 6000.

The step functions come from ``pvlib.spa``. Its equatorial, parallax,
refraction and horizon transforms do not depend on the body and are reused
by the Moon Position Algorithm together with the helpers below.
"""

from __future__ import annotations

import logging
import math
from datetime import datetime

import numpy as np
from astropy.time import Time
from pvlib import spa as pvspa

from .errors import DomainError, SolarPositionError
from .models import Observer, SolarPosition

logger = logging.getLogger(__name__)

RAD = math.pi / 180.0

SUN_RADIUS = 0.26667

# Sines that only leave [-1, 1] through round-off.
ASIN_ROUNDOFF = 1e-12


def limit_degrees(degrees: float) -> float:
    limited = float(degrees) % 360.0
    # -tiny % 360.0 rounds up to 360.0
    return 0.0 if limited == 360.0 else limited


def third_order_polynomial(a: float, b: float, c: float, d: float, x: float) -> float:
    return ((a * x + b) * x + c) * x + d


def fourth_order_polynomial(
    a: float, b: float, c: float, d: float, e: float, x: float
) -> float:
    return (((a * x + b) * x + c) * x + d) * x + e


def asin_deg(x: float, name: str) -> float:
    if not -1.0 - ASIN_ROUNDOFF <= x <= 1.0 + ASIN_ROUNDOFF:
        raise DomainError(f"{name}: asin argument {x!r} outside [-1, 1]")
    return math.asin(min(1.0, max(-1.0, x))) / RAD


def topocentric_elevation_angle(latitude: float, delta_prime: float, h_prime: float) -> float:
    """Elevation without refraction [degrees]; exactly 90 at the zenith."""
    lat = latitude * RAD
    dp = delta_prime * RAD
    return asin_deg(
        math.sin(lat) * math.sin(dp) + math.cos(lat) * math.cos(dp) * math.cos(h_prime * RAD),
        "topocentric elevation",
    )


def julian_day(moment: datetime, delta_ut1: float = 0.0) -> float:
    # Naive datetimes are UTC; aware ones are converted by astropy.
    return float(Time(moment, scale="utc").jd) + delta_ut1 / 86400.0


def validate_time_inputs(moment: datetime, delta_t: float, delta_ut1: float) -> None:
    if not -2000 <= moment.year <= 6000:
        raise SolarPositionError(f"year {moment.year} outside [-2000, 6000]")
    if abs(delta_t) > 8000.0:
        raise SolarPositionError(f"delta_t {delta_t} s exceeds 8000 s")
    if not -1.0 < delta_ut1 < 1.0:
        raise SolarPositionError(f"delta_ut1 {delta_ut1} s outside (-1, 1)")


def nutation(jce: float) -> tuple[float, float]:
    """Return (nutation in longitude, nutation in obliquity) [degrees]."""
    out = np.empty(2)
    pvspa.longitude_obliquity_nutation(
        jce,
        pvspa.mean_elongation(jce),
        pvspa.mean_anomaly_sun(jce),
        pvspa.mean_anomaly_moon(jce),
        pvspa.moon_argument_latitude(jce),
        pvspa.moon_ascending_longitude(jce),
        out,
    )
    return float(out[0]), float(out[1])


def solar_position(
    moment: datetime,
    observer: Observer,
    *,
    delta_t: float,
    delta_ut1: float = 0.0,
) -> SolarPosition:
    """Compute the topocentric zenith and azimuth of the Sun.

    Args:
        moment: Instant of the observation. Naive datetimes are taken as UTC.
        observer: Location and atmosphere of the observer.
        delta_t: TT - UT1 in seconds.
        delta_ut1: UT1 - UTC in seconds.

    Returns:
        SolarPosition with every intermediate value of the algorithm.

    Raises:
        SolarPositionError: If the time inputs are out of the valid range.
    """
    validate_time_inputs(moment, delta_t, delta_ut1)
    lat = observer.latitude_deg
    lon = observer.longitude_deg_east

    jd = julian_day(moment, delta_ut1)
    jc = float(pvspa.julian_century(jd))
    jde = float(pvspa.julian_ephemeris_day(jd, delta_t))
    jce = float(pvspa.julian_ephemeris_century(jde))
    jme = float(pvspa.julian_ephemeris_millennium(jce))

    l = limit_degrees(pvspa.heliocentric_longitude(jme))
    b = float(pvspa.heliocentric_latitude(jme))
    r = float(pvspa.heliocentric_radius_vector(jme))

    theta = limit_degrees(pvspa.geocentric_longitude(l))
    beta = float(pvspa.geocentric_latitude(b))

    del_psi, del_epsilon = nutation(jce)
    epsilon0 = float(pvspa.mean_ecliptic_obliquity(jme))
    epsilon = float(pvspa.true_ecliptic_obliquity(epsilon0, del_epsilon))

    del_tau = float(pvspa.aberration_correction(r))
    lambda_ = float(pvspa.apparent_sun_longitude(theta, del_psi, del_tau))

    nu0 = float(pvspa.mean_sidereal_time(jd, jc))
    nu = float(pvspa.apparent_sidereal_time(nu0, del_psi, epsilon))

    alpha = limit_degrees(pvspa.geocentric_sun_right_ascension(lambda_, epsilon, beta))
    delta = float(pvspa.geocentric_sun_declination(lambda_, epsilon, beta))

    h = limit_degrees(pvspa.local_hour_angle(nu, lon, alpha))
    xi = float(pvspa.equatorial_horizontal_parallax(r))

    u = pvspa.uterm(lat)
    x = pvspa.xterm(u, lat, observer.elevation_m)
    y = pvspa.yterm(u, lat, observer.elevation_m)
    del_alpha = float(pvspa.parallax_sun_right_ascension(x, xi, h, delta))
    delta_prime = float(pvspa.topocentric_sun_declination(delta, x, y, xi, del_alpha, h))
    alpha_prime = float(pvspa.topocentric_sun_right_ascension(alpha, del_alpha))
    h_prime = float(pvspa.topocentric_local_hour_angle(h, del_alpha))

    e0 = topocentric_elevation_angle(lat, delta_prime, h_prime)
    del_e = float(
        pvspa.atmospheric_refraction_correction(
            observer.pressure_mbar, observer.temperature_c, e0, observer.atmos_refract_deg
        )
    )
    e = e0 + del_e

    zenith = 90.0 - e
    azimuth_astro = limit_degrees(pvspa.topocentric_astronomers_azimuth(h_prime, delta_prime, lat))
    azimuth = limit_degrees(pvspa.topocentric_azimuth_angle(azimuth_astro))

    logger.debug("SPA jd=%.6f zenith=%.6f azimuth=%.6f r=%.6f", jd, zenith, azimuth, r)

    return SolarPosition(
        observer=observer,
        jd=jd,
        jc=jc,
        jde=jde,
        jce=jce,
        jme=jme,
        l=l,
        b=b,
        r=r,
        theta=theta,
        beta=beta,
        del_psi=del_psi,
        del_epsilon=del_epsilon,
        epsilon0=epsilon0,
        epsilon=epsilon,
        del_tau=del_tau,
        lambda_=lambda_,
        nu0=nu0,
        nu=nu,
        alpha=alpha,
        delta=delta,
        h=h,
        xi=xi,
        del_alpha=del_alpha,
        delta_prime=delta_prime,
        alpha_prime=alpha_prime,
        h_prime=h_prime,
        e0=e0,
        del_e=del_e,
        e=e,
        zenith=zenith,
        azimuth_astro=azimuth_astro,
        azimuth=azimuth,
    )
