"""
Solar eclipse obscuration and irradiance for a single instant.

Chains the Moon Position Algorithm, the disk overlap geometry and,
optionally, the Bird clear sky model on top of a solar position.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from .bird import bird_clear_sky
from .geometry import eclipse_geometry
from .models import (
    BirdParameters,
    CalculationMode,
    EclipseGeometry,
    Irradiance,
    Observer,
    SampaResult,
    SolarPosition,
)
from .mpa import moon_position
from .spa import solar_position

logger = logging.getLogger(__name__)


def estimate_irradiance(
    spa: SolarPosition, geometry: EclipseGeometry, bird: BirdParameters
) -> Irradiance:
    """Clear sky irradiance with the solar disk reduced to its unshaded lune."""
    return bird_clear_sky(
        spa.zenith,
        spa.r,
        spa.observer.pressure_mbar,
        bird,
        dni_mod=geometry.a_sul_pct / 100.0,
    )


def calculate(
    spa: SolarPosition,
    *,
    mode: CalculationMode = "irradiance",
    bird: Optional[BirdParameters] = None,
) -> SampaResult:
    """Compute the Moon's position, the eclipse geometry and irradiance.

    Args:
        spa: Solar position (zenith/azimuth mode) for the instant and observer.
        mode: ``"geometry"`` skips the clear sky model and leaves the
            irradiance at zero; ``"irradiance"`` runs it.
        bird: Clear sky model inputs (default: ``BirdParameters()``).

    Returns:
        SampaResult holding every stage of the calculation.

    Raises:
        DomainError: If the Moon position cannot be evaluated for the inputs.
        ClearSkyError: If the clear sky model rejects its inputs.
    """
    mpa = moon_position(spa)
    geometry = eclipse_geometry(spa, mpa)

    irradiance = Irradiance()
    if mode == "irradiance":
        irradiance = estimate_irradiance(spa, geometry, bird or BirdParameters())
    elif mode != "geometry":
        raise ValueError(f"Unknown calculation mode {mode!r}")

    logger.debug("SAMPA mode=%s a_sul_pct=%.6f", mode, geometry.a_sul_pct)

    return SampaResult(
        mode=mode,
        spa=spa,
        mpa=mpa,
        geometry=geometry,
        irradiance=irradiance,
    )


def calculate_sampa(
    moment: datetime,
    observer: Observer,
    *,
    delta_t: float,
    delta_ut1: float = 0.0,
    mode: CalculationMode = "irradiance",
    bird: Optional[BirdParameters] = None,
) -> SampaResult:
    """Compute solar and lunar positions and eclipse effects at an instant.

    Args:
        moment: Instant of the observation. Naive datetimes are taken as UTC.
        observer: Location and atmosphere of the observer.
        delta_t: TT - UT1 in seconds.
        delta_ut1: UT1 - UTC in seconds.
        mode: ``"geometry"`` or ``"irradiance"``.
        bird: Clear sky model inputs (default: ``BirdParameters()``).

    Returns:
        SampaResult holding every stage of the calculation.
    """
    spa = solar_position(moment, observer, delta_t=delta_t, delta_ut1=delta_ut1)
    return calculate(spa, mode=mode, bird=bird)
