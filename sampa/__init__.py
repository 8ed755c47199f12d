"""
SAMPA - Solar and Moon Position Algorithm for solar eclipse monitoring.

Computes the topocentric positions of the Sun and the Moon, the fraction of
the solar disk left uncovered by the Moon, and the resulting reduction of
clear sky irradiance.

Reference: Reda, I. "Solar Eclipse Monitoring for Solar Energy Applications
Using the Solar and Moon Position Algorithms", NREL/TP-3B0-47681 (2010).

Example usage:
    from datetime import datetime
    from sampa import Observer, calculate_sampa

    obs = Observer(latitude_deg=24.61167, longitude_deg_east=143.36167)
    result = calculate_sampa(datetime(2009, 7, 22, 1, 33), obs, delta_t=66.4)
    print(f"Unshaded: {result.geometry.a_sul_pct:.2f}%")
"""

from __future__ import annotations

from .compute import calculate, calculate_sampa, estimate_irradiance
from .errors import ClearSkyError, DomainError, SampaError, SolarPositionError
from .geometry import eclipse_geometry
from .models import (
    BirdParameters,
    CalculationMode,
    EclipseGeometry,
    Irradiance,
    MoonPosition,
    Observer,
    SampaResult,
    SolarPosition,
)
from .mpa import moon_position
from .spa import solar_position

__all__ = [
    "Observer",
    "SolarPosition",
    "MoonPosition",
    "EclipseGeometry",
    "BirdParameters",
    "Irradiance",
    "SampaResult",
    "CalculationMode",
    "SampaError",
    "SolarPositionError",
    "ClearSkyError",
    "DomainError",
    "solar_position",
    "moon_position",
    "eclipse_geometry",
    "estimate_irradiance",
    "calculate",
    "calculate_sampa",
]
