"""
Overlap of the solar and lunar disks as seen by the observer.

The sun's unshaded lune (SUL) is the part of the solar disk not covered by
the Moon. Its area is always reported, so an instant without an eclipse
yields 100 percent.
"""

from __future__ import annotations

import logging
import math
from typing import Tuple

from .models import EclipseGeometry, MoonPosition, SolarPosition
from .spa import RAD

logger = logging.getLogger(__name__)


def angular_distance_sun_moon(
    zen_sun: float, azm_sun: float, zen_moon: float, azm_moon: float
) -> float:
    zs = zen_sun * RAD
    zm = zen_moon * RAD
    cos_ems = math.cos(zs) * math.cos(zm) + math.sin(zs) * math.sin(zm) * math.cos(
        (azm_sun - azm_moon) * RAD
    )
    return math.acos(min(1.0, max(-1.0, cos_ems))) / RAD


def sun_disk_radius(r: float) -> float:
    return 959.63 / (3600.0 * r)


def moon_disk_radius(e: float, pi: float, cap_delta: float) -> float:
    return 358473400 * (1 + math.sin(e * RAD) * math.sin(pi * RAD)) / (3600.0 * cap_delta)


def sul_area(ems: float, rs: float, rm: float) -> Tuple[float, float]:
    """Return the unshaded area [deg^2] and its percentage of the solar disk.

    When one disk lies inside the other the Moon's area is taken as the
    covered area, which is exact for a total eclipse and approximates the
    annular case.
    """
    ems2 = ems * ems
    rs2 = rs * rs
    rm2 = rm * rm

    if ems >= rs + rm:
        ai = 0.0
    elif ems <= abs(rs - rm):
        ai = math.pi * rm2
    else:
        snum = ems2 + rs2 - rm2
        m = (ems2 - rs2 + rm2) / (2 * ems)
        sa = snum / (2 * ems)
        h = math.sqrt(max(0.0, 4 * ems2 * rs2 - snum * snum)) / (2 * ems)
        ai = (
            rs2 * math.acos(min(1.0, max(-1.0, sa / rs)))
            - h * sa
            + rm2 * math.acos(min(1.0, max(-1.0, m / rm)))
            - h * m
        )

    full = math.pi * rs2
    a_sul = full - ai
    if a_sul < 0:
        logger.debug("clamping negative unshaded area %.3e (rs=%.6f rm=%.6f)", a_sul, rs, rm)
        a_sul = 0.0
    elif a_sul > full:
        # lens round-off at grazing contact
        a_sul = full

    return a_sul, 100.0 * (a_sul / full)


def eclipse_geometry(spa: SolarPosition, mpa: MoonPosition) -> EclipseGeometry:
    """Compute the separation, radii and unshaded area for one instant."""
    ems = angular_distance_sun_moon(spa.zenith, spa.azimuth, mpa.zenith, mpa.azimuth)
    rs = sun_disk_radius(spa.r)
    rm = moon_disk_radius(mpa.e, mpa.pi, mpa.cap_delta)
    a_sul, a_sul_pct = sul_area(ems, rs, rm)

    logger.debug("ems=%.6f rs=%.6f rm=%.6f a_sul_pct=%.6f", ems, rs, rm, a_sul_pct)

    return EclipseGeometry(ems=ems, rs=rs, rm=rm, a_sul=a_sul)
