"""
Data models for solar and moon position calculations.

Reference: Reda, I. "Solar Eclipse Monitoring for Solar Energy Applications
Using the Solar and Moon Position Algorithms", NREL/TP-3B0-47681 (2010).
"""

from __future__ import annotations

import math
from typing import Literal, NamedTuple

from pydantic import BaseModel, ConfigDict, Field, computed_field

CalculationMode = Literal["geometry", "irradiance"]


class Observer(BaseModel):
    """An observer on the Earth's surface and the local atmosphere."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    latitude_deg: float = Field(..., ge=-90.0, le=90.0)
    longitude_deg_east: float = Field(..., ge=-180.0, le=180.0)
    elevation_m: float = Field(default=0.0, ge=-6_500_000.0)

    pressure_mbar: float = Field(default=1013.0, ge=0.0, le=5000.0)
    temperature_c: float = Field(default=14.6, gt=-273.0, le=6000.0)
    atmos_refract_deg: float = Field(default=0.5667, ge=-5.0, le=5.0)


class SolarPosition(BaseModel):
    """Output of the Solar Position Algorithm in zenith/azimuth mode.

    Angles are in degrees, ``r`` in astronomical units. Only ``jce``, ``nu``,
    ``del_psi``, ``epsilon``, ``r``, ``zenith`` and ``azimuth`` are consumed
    downstream; the remaining fields are kept for inspection and default to
    zero so that callers with their own solar ephemeris can build one by hand.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    observer: Observer

    jd: float
    jc: float = 0.0
    jde: float = 0.0
    jce: float
    jme: float = 0.0

    l: float = 0.0
    b: float = 0.0
    r: float = Field(..., gt=0.0)

    theta: float = 0.0
    beta: float = 0.0

    del_psi: float
    del_epsilon: float = 0.0
    epsilon0: float = 0.0
    epsilon: float

    del_tau: float = 0.0
    lambda_: float = 0.0

    nu0: float = 0.0
    nu: float

    alpha: float = 0.0
    delta: float = 0.0

    h: float = 0.0
    xi: float = 0.0
    del_alpha: float = 0.0
    delta_prime: float = 0.0
    alpha_prime: float = 0.0
    h_prime: float = 0.0

    e0: float = 0.0
    del_e: float = 0.0
    e: float = 0.0

    zenith: float
    azimuth_astro: float = 0.0
    azimuth: float


class FundamentalArguments(BaseModel):
    """Mean lunar and solar arguments of the periodic series [degrees]."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    l_prime: float
    d: float
    m: float
    m_prime: float
    f: float


class HarmonicSum(NamedTuple):
    sin_sum: float
    cos_sum: float


class MoonPosition(BaseModel):
    """Result of the Moon Position Algorithm.

    Angles are in degrees and ``cap_delta`` in kilometers. ``l``, ``r`` and
    ``b`` are the raw periodic sums (1e-6 degree, 1e-3 km, 1e-6 degree).
    ``azimuth_astro`` is measured westward from south, ``azimuth`` eastward
    from north.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    l_prime: float
    d: float
    m: float
    m_prime: float
    f: float

    l: float
    r: float
    b: float

    lambda_prime: float
    beta: float
    cap_delta: float
    pi: float
    lambda_: float

    alpha: float
    delta: float

    h: float
    del_alpha: float
    delta_prime: float
    alpha_prime: float
    h_prime: float

    e0: float
    del_e: float
    e: float

    zenith: float
    azimuth_astro: float
    azimuth: float


class EclipseGeometry(BaseModel):
    """Topocentric overlap of the solar and lunar disks.

    ``ems`` is the angular distance between the centers, ``rs`` and ``rm``
    the disk radii (all degrees) and ``a_sul`` the area of the sun's unshaded
    lune in square degrees.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    ems: float
    rs: float = Field(..., gt=0.0)
    rm: float = Field(..., gt=0.0)
    a_sul: float = Field(..., ge=0.0)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def a_sul_pct(self) -> float:
        """Unshaded area as a percentage of the full solar disk."""
        return 100.0 * (self.a_sul / (math.pi * (self.rs * self.rs)))


class BirdParameters(BaseModel):
    """Atmospheric inputs of the Bird clear sky model."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    ozone_cm: float = Field(default=0.3, ge=0.0)
    water_cm: float = Field(default=1.5, ge=0.0)
    taua: float = Field(default=0.07637, ge=0.0)
    ba: float = Field(default=0.85, ge=0.0, le=1.0)
    albedo: float = Field(default=0.2, ge=0.0, lt=1.0)


class Irradiance(BaseModel):
    """Clear sky irradiance [W/m^2], without and with the eclipse."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    dni: float = 0.0
    dni_sul: float = 0.0
    ghi: float = 0.0
    ghi_sul: float = 0.0
    dhi: float = 0.0
    dhi_sul: float = 0.0


class SampaResult(BaseModel):
    """Everything computed for one instant and observer."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    mode: CalculationMode
    spa: SolarPosition
    mpa: MoonPosition
    geometry: EclipseGeometry
    irradiance: Irradiance = Irradiance()

    @property
    def irradiance_computed(self) -> bool:
        """False when irradiance was not requested and holds zeros."""
        return self.mode == "irradiance"
