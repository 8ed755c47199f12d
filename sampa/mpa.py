"""
Moon Position Algorithm (MPA).

Topocentric position of the Moon from the truncated periodic series of
Meeus (chapter 47), corrected for nutation, parallax and refraction. The
time scales, nutation, obliquity and sidereal time are taken from a
``SolarPosition`` computed for the same instant and observer.

Reference: Reda, I. "Solar Eclipse Monitoring for Solar Energy Applications
Using the Solar and Moon Position Algorithms", NREL/TP-3B0-47681 (2010).
"""

from __future__ import annotations

import logging
import math
from typing import Sequence, Tuple

from pvlib import spa as pvspa

from .models import FundamentalArguments, HarmonicSum, MoonPosition, SolarPosition
from .spa import (
    RAD,
    asin_deg,
    fourth_order_polynomial,
    limit_degrees,
    third_order_polynomial,
    topocentric_elevation_angle,
)
from .terms import MB_TERMS, ML_TERMS, PeriodicTerm

logger = logging.getLogger(__name__)

EARTH_EQ_RADIUS_KM = 6378.14
MEAN_MOON_DISTANCE_KM = 385000.56


def moon_mean_longitude(jce: float) -> float:
    return limit_degrees(
        fourth_order_polynomial(
            -1.0 / 65194000, 1.0 / 538841, -0.0015786, 481267.88123421, 218.3164477, jce
        )
    )


def moon_mean_elongation(jce: float) -> float:
    return limit_degrees(
        fourth_order_polynomial(
            -1.0 / 113065000, 1.0 / 545868, -0.0018819, 445267.1114034, 297.8501921, jce
        )
    )


def sun_mean_anomaly(jce: float) -> float:
    return limit_degrees(
        third_order_polynomial(1.0 / 24490000, -0.0001536, 35999.0502909, 357.5291092, jce)
    )


def moon_mean_anomaly(jce: float) -> float:
    return limit_degrees(
        fourth_order_polynomial(
            -1.0 / 14712000, 1.0 / 69699, 0.0087414, 477198.8675055, 134.9633964, jce
        )
    )


def moon_latitude_argument(jce: float) -> float:
    return limit_degrees(
        fourth_order_polynomial(
            1.0 / 863310000, -1.0 / 3526000, -0.0036539, 483202.0175233, 93.2720950, jce
        )
    )


def fundamental_arguments(jce: float) -> FundamentalArguments:
    return FundamentalArguments(
        l_prime=moon_mean_longitude(jce),
        d=moon_mean_elongation(jce),
        m=sun_mean_anomaly(jce),
        m_prime=moon_mean_anomaly(jce),
        f=moon_latitude_argument(jce),
    )


def moon_periodic_term_summation(
    args: FundamentalArguments, jce: float, terms: Sequence[PeriodicTerm]
) -> HarmonicSum:
    """Sum a periodic term table for the given fundamental arguments.

    Terms containing the Sun's mean anomaly M are damped by the decreasing
    eccentricity of the Earth's orbit, E**|m|.
    """
    e = 1.0 - jce * (0.002516 + jce * 0.0000074)

    sin_sum = 0.0
    cos_sum = 0.0
    for t in terms:
        e_mult = e ** abs(t.m)
        trig_arg = (t.d * args.d + t.m * args.m + t.f * args.f + t.m_prime * args.m_prime) * RAD
        sin_sum += e_mult * t.a_sin * math.sin(trig_arg)
        cos_sum += e_mult * t.a_cos * math.cos(trig_arg)

    return HarmonicSum(sin_sum, cos_sum)


def moon_longitude_and_latitude(
    jce: float, l_prime: float, f: float, m_prime: float, l: float, b: float
) -> Tuple[float, float]:
    """Return the geocentric ecliptic longitude and latitude [degrees].

    Adds the additive terms due to Venus (A1), Jupiter (A2) and the
    flattening of the Earth to the periodic sums.
    """
    a1 = 119.75 + 131.849 * jce
    a2 = 53.09 + 479264.290 * jce
    a3 = 313.45 + 481266.484 * jce

    delta_l = (
        3958 * math.sin(a1 * RAD)
        + 318 * math.sin(a2 * RAD)
        + 1962 * math.sin((l_prime - f) * RAD)
    )
    delta_b = (
        -2235 * math.sin(l_prime * RAD)
        + 175 * math.sin((a1 - f) * RAD)
        + 127 * math.sin((l_prime - m_prime) * RAD)
        + 382 * math.sin(a3 * RAD)
        + 175 * math.sin((a1 + f) * RAD)
        - 115 * math.sin((l_prime + m_prime) * RAD)
    )

    lambda_prime = limit_degrees(l_prime + (l + delta_l) / 1_000_000)
    beta = limit_degrees((b + delta_b) / 1_000_000)
    return lambda_prime, beta


def moon_earth_distance(r: float) -> float:
    return MEAN_MOON_DISTANCE_KM + r / 1000.0


def moon_equatorial_horiz_parallax(cap_delta: float) -> float:
    return asin_deg(EARTH_EQ_RADIUS_KM / cap_delta, "moon parallax")


def apparent_moon_longitude(lambda_prime: float, del_psi: float) -> float:
    return lambda_prime + del_psi


def moon_position(spa: SolarPosition) -> MoonPosition:
    """Compute the topocentric position of the Moon.

    Args:
        spa: Solar position for the instant and observer of interest. Its
            Julian ephemeris century, nutation, obliquity, sidereal time and
            observer are reused.

    Returns:
        MoonPosition with every intermediate value of the algorithm.

    Raises:
        DomainError: If the inputs drive an inverse sine out of range.
    """
    obs = spa.observer
    jce = spa.jce

    args = fundamental_arguments(jce)
    l, r = moon_periodic_term_summation(args, jce, ML_TERMS)
    b, _ = moon_periodic_term_summation(args, jce, MB_TERMS)

    lambda_prime, beta = moon_longitude_and_latitude(
        jce, args.l_prime, args.f, args.m_prime, l, b
    )

    cap_delta = moon_earth_distance(r)
    pi = moon_equatorial_horiz_parallax(cap_delta)

    lambda_ = apparent_moon_longitude(lambda_prime, spa.del_psi)

    alpha = limit_degrees(pvspa.geocentric_sun_right_ascension(lambda_, spa.epsilon, beta))
    delta = float(pvspa.geocentric_sun_declination(lambda_, spa.epsilon, beta))

    h = limit_degrees(pvspa.local_hour_angle(spa.nu, obs.longitude_deg_east, alpha))

    u = pvspa.uterm(obs.latitude_deg)
    x = pvspa.xterm(u, obs.latitude_deg, obs.elevation_m)
    y = pvspa.yterm(u, obs.latitude_deg, obs.elevation_m)
    del_alpha = float(pvspa.parallax_sun_right_ascension(x, pi, h, delta))
    delta_prime = float(pvspa.topocentric_sun_declination(delta, x, y, pi, del_alpha, h))
    alpha_prime = float(pvspa.topocentric_sun_right_ascension(alpha, del_alpha))
    h_prime = float(pvspa.topocentric_local_hour_angle(h, del_alpha))

    e0 = topocentric_elevation_angle(obs.latitude_deg, delta_prime, h_prime)
    del_e = float(
        pvspa.atmospheric_refraction_correction(
            obs.pressure_mbar, obs.temperature_c, e0, obs.atmos_refract_deg
        )
    )
    e = e0 + del_e

    azimuth_astro = limit_degrees(
        pvspa.topocentric_astronomers_azimuth(h_prime, delta_prime, obs.latitude_deg)
    )
    azimuth = limit_degrees(pvspa.topocentric_azimuth_angle(azimuth_astro))

    logger.debug(
        "MPA jce=%.10f distance=%.3f km zenith=%.6f azimuth=%.6f",
        jce,
        cap_delta,
        90.0 - e,
        azimuth,
    )

    return MoonPosition(
        l_prime=args.l_prime,
        d=args.d,
        m=args.m,
        m_prime=args.m_prime,
        f=args.f,
        l=l,
        r=r,
        b=b,
        lambda_prime=lambda_prime,
        beta=beta,
        cap_delta=cap_delta,
        pi=pi,
        lambda_=lambda_,
        alpha=alpha,
        delta=delta,
        h=h,
        del_alpha=del_alpha,
        delta_prime=delta_prime,
        alpha_prime=alpha_prime,
        h_prime=h_prime,
        e0=e0,
        del_e=del_e,
        e=e,
        zenith=90.0 - e,
        azimuth_astro=azimuth_astro,
        azimuth=azimuth,
    )
