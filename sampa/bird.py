"""
SERI/NREL Bird clear sky model.

Reference: Bird, R. E. and Hulstrom, R. L. "A Simplified Clear Sky Model for
Direct and Diffuse Insolation on Horizontal Surfaces", SERI/TR-642-761 (1981).

The model itself is ``pvlib.clearsky.bird``; this module maps the SAMPA
inputs onto it and reduces the clear values by the visible solar fraction.
"""

from __future__ import annotations

import logging

from pvlib import atmosphere, clearsky

from .errors import ClearSkyError
from .models import BirdParameters, Irradiance

logger = logging.getLogger(__name__)

SOLAR_CONSTANT = 1367.0

# pvlib takes the broadband aerosol depth as 0.27583*aod380 + 0.35*aod500.
AOD500_WEIGHT = 0.35


def bird_clear_sky(
    zenith: float,
    r: float,
    pressure: float,
    params: BirdParameters,
    dni_mod: float = 1.0,
) -> Irradiance:
    """Estimate clear sky direct normal, global and diffuse horizontal irradiance.

    ``dni_mod`` is the fraction of the solar disk that is visible. Every
    ``*_sul`` output is the corresponding clear value reduced by it.

    Args:
        zenith: Topocentric solar zenith angle [degrees].
        r: Earth-Sun distance [AU].
        pressure: Surface pressure [mbar].
        params: Ozone, water, aerosol and albedo inputs.
        dni_mod: Visible fraction of the solar disk, in [0, 1].

    Raises:
        ClearSkyError: If the Sun is not above the horizon or an input is
            out of range.
    """
    if not 0.0 <= zenith < 90.0:
        raise ClearSkyError(f"zenith {zenith} outside [0, 90)")
    if r <= 0.0:
        raise ClearSkyError(f"earth-sun distance {r} must be positive")
    if pressure <= 0.0:
        raise ClearSkyError(f"pressure {pressure} must be positive")
    if not 0.0 <= dni_mod <= 1.0:
        raise ClearSkyError(f"dni_mod {dni_mod} outside [0, 1]")

    am = float(atmosphere.get_relative_airmass(zenith, model="kasten1966"))
    sky = clearsky.bird(
        zenith,
        am,
        aod380=0.0,
        aod500=params.taua / AOD500_WEIGHT,
        precipitable_water=params.water_cm,
        ozone=params.ozone_cm,
        pressure=pressure * 100.0,
        dni_extra=SOLAR_CONSTANT / (r * r),
        asymmetry=params.ba,
        albedo=params.albedo,
    )
    dni = float(sky["dni"])
    ghi = float(sky["ghi"])
    dhi = float(sky["dhi"])

    logger.debug("Bird am=%.4f dni=%.3f ghi=%.3f dhi=%.3f", am, dni, ghi, dhi)

    return Irradiance(
        dni=dni,
        dni_sul=dni * dni_mod,
        ghi=ghi,
        ghi_sul=ghi * dni_mod,
        dhi=dhi,
        dhi_sul=dhi * dni_mod,
    )
