"""
Command-line interface for solar eclipse obscuration calculations.
"""

from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from astropy.time import Time

from .compute import calculate_sampa
from .errors import SampaError
from .models import BirdParameters, Observer, SampaResult


def print_result(r: SampaResult) -> None:
    spa, mpa, g = r.spa, r.mpa, r.geometry
    print(f"Julian Day:    {spa.jd:.6f}")
    print(f"Sun zenith:    {spa.zenith:.6f}  azimuth: {spa.azimuth:.6f}")
    print(f"Moon zenith:   {mpa.zenith:.6f}  azimuth: {mpa.azimuth:.6f}")
    print(f"Moon distance: {mpa.cap_delta:.3f} km")
    print(f"Angular dist:  {g.ems:.6f}")
    print(f"Sun radius:    {g.rs:.6f}")
    print(f"Moon radius:   {g.rm:.6f}")
    print(f"Area unshaded: {g.a_sul_pct:.6f} %")

    if r.irradiance_computed:
        irr = r.irradiance
        print(f"DNI: {irr.dni:.3f}  eclipse: {irr.dni_sul:.3f} W/m^2")
        print(f"GHI: {irr.ghi:.3f}  eclipse: {irr.ghi_sul:.3f} W/m^2")
        print(f"DHI: {irr.dhi:.3f}  eclipse: {irr.dhi_sul:.3f} W/m^2")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        description="Sun and Moon positions and solar eclipse obscuration at a location."
    )
    ap.add_argument(
        "--time",
        default=None,
        help="Instant in ISO8601 UTC (e.g. 2009-07-22T01:33:00). Default: now.",
    )
    ap.add_argument(
        "--lat", required=True, type=float, help="Latitude in degrees (north positive)"
    )
    ap.add_argument(
        "--lon",
        required=True,
        type=float,
        help="Longitude in degrees east (east positive; west is negative)",
    )
    ap.add_argument(
        "--elevation", type=float, default=0.0, help="Elevation in meters (default: 0)"
    )
    ap.add_argument(
        "--pressure", type=float, default=1013.0, help="Pressure in mbar (default: 1013)"
    )
    ap.add_argument(
        "--temperature",
        type=float,
        default=14.6,
        help="Temperature in degrees Celsius (default: 14.6)",
    )
    ap.add_argument(
        "--atmos-refract",
        type=float,
        default=0.5667,
        help="Refraction at sunrise and sunset in degrees (default: 0.5667)",
    )
    ap.add_argument(
        "--delta-t",
        type=float,
        default=69.2,
        help="TT - UT1 in seconds (default: 69.2)",
    )
    ap.add_argument(
        "--delta-ut1", type=float, default=0.0, help="UT1 - UTC in seconds (default: 0)"
    )
    ap.add_argument(
        "--no-irradiance",
        action="store_true",
        help="Skip the Bird clear sky irradiance estimate",
    )
    ap.add_argument("--ozone", type=float, default=0.3, help="Ozone thickness in cm")
    ap.add_argument("--water", type=float, default=1.5, help="Precipitable water in cm")
    ap.add_argument("--taua", type=float, default=0.07637, help="Aerosol optical depth")
    ap.add_argument("--ba", type=float, default=0.85, help="Forward scattering ratio")
    ap.add_argument("--albedo", type=float, default=0.2, help="Ground albedo")
    ap.add_argument("--json", action="store_true", help="Print the full result as JSON")
    ap.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return ap


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    if args.time is None:
        moment = Time.now()
        print(f"time not provided; using now: {moment.iso}")
    else:
        moment = Time(args.time, scale="utc")

    obs = Observer(
        latitude_deg=args.lat,
        longitude_deg_east=args.lon,
        elevation_m=args.elevation,
        pressure_mbar=args.pressure,
        temperature_c=args.temperature,
        atmos_refract_deg=args.atmos_refract,
    )
    bird = BirdParameters(
        ozone_cm=args.ozone,
        water_cm=args.water,
        taua=args.taua,
        ba=args.ba,
        albedo=args.albedo,
    )

    try:
        result = calculate_sampa(
            moment.to_datetime(),
            obs,
            delta_t=args.delta_t,
            delta_ut1=args.delta_ut1,
            mode="geometry" if args.no_irradiance else "irradiance",
            bird=bird,
        )
    except SampaError as exc:
        raise SystemExit(f"error: {exc}")

    if args.json:
        print(result.model_dump_json(indent=2))
        return

    print(
        f"Location: lat={obs.latitude_deg:.6f}, lon_east={obs.longitude_deg_east:.6f}, elev_m={obs.elevation_m:.1f}"
    )
    print(f"Time: {moment.iso} UTC")
    print_result(result)


if __name__ == "__main__":
    main()
