"""
Web API for solar eclipse obscuration calculations.
"""

from __future__ import annotations

from typing import Optional

from astropy.time import Time
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from .compute import calculate_sampa
from .models import BirdParameters, Irradiance, Observer

app = FastAPI(title="SAMPA")


class SampaResponse(BaseModel):
    lat: float
    lon: float
    time_utc: str
    jd: float
    sun_zenith: float
    sun_azimuth: float
    moon_zenith: float
    moon_azimuth: float
    moon_distance_km: float
    angular_distance: float
    sun_radius: float
    moon_radius: float
    unshaded_area: float
    unshaded_area_pct: float
    irradiance: Optional[Irradiance] = None


@app.get("/api/sampa")
def get_sampa(
    lat: float,
    lon: float,
    time_utc: Optional[str] = None,
    elevation: float = 0.0,
    pressure: float = 1013.0,
    temperature: float = 14.6,
    atmos_refract: float = 0.5667,
    delta_t: float = 69.2,
    delta_ut1: float = 0.0,
    irradiance: bool = True,
    ozone: float = 0.3,
    water: float = 1.5,
    taua: float = 0.07637,
    ba: float = 0.85,
    albedo: float = 0.2,
) -> SampaResponse:
    try:
        moment = Time(time_utc, scale="utc") if time_utc else Time.now()
        obs = Observer(
            latitude_deg=lat,
            longitude_deg_east=lon,
            elevation_m=elevation,
            pressure_mbar=pressure,
            temperature_c=temperature,
            atmos_refract_deg=atmos_refract,
        )
        bird = BirdParameters(
            ozone_cm=ozone, water_cm=water, taua=taua, ba=ba, albedo=albedo
        )
        r = calculate_sampa(
            moment.to_datetime(),
            obs,
            delta_t=delta_t,
            delta_ut1=delta_ut1,
            mode="irradiance" if irradiance else "geometry",
            bird=bird,
        )
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc))

    return SampaResponse(
        lat=lat,
        lon=lon,
        time_utc=moment.iso,
        jd=r.spa.jd,
        sun_zenith=r.spa.zenith,
        sun_azimuth=r.spa.azimuth,
        moon_zenith=r.mpa.zenith,
        moon_azimuth=r.mpa.azimuth,
        moon_distance_km=r.mpa.cap_delta,
        angular_distance=r.geometry.ems,
        sun_radius=r.geometry.rs,
        moon_radius=r.geometry.rm,
        unshaded_area=r.geometry.a_sul,
        unshaded_area_pct=r.geometry.a_sul_pct,
        irradiance=r.irradiance if r.irradiance_computed else None,
    )


def run():
    import uvicorn

    uvicorn.run("sampa.web:app", host="127.0.0.1", port=8000, reload=True)
