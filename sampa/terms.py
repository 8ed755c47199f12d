"""
Periodic terms of the Moon Position Algorithm.

Each row holds the integer multipliers of the four fundamental arguments
(D, M, M', F) followed by the sine and cosine amplitudes. Amplitudes are in
units of 1e-6 degree for longitude and latitude and 1e-3 km for distance.

Source: Meeus, Astronomical Algorithms, 2nd ed., tables 47.A and 47.B, as
used by Reda, "Solar Eclipse Monitoring for Solar Energy Applications Using
the Solar and Moon Position Algorithms", NREL/TP-3B0-47681 (2010).
"""

from __future__ import annotations

from typing import NamedTuple


class PeriodicTerm(NamedTuple):
    d: int
    m: int
    m_prime: int
    f: int
    a_sin: float
    a_cos: float


# Longitude (sine column) and distance (cosine column).
ML_TERMS: tuple[PeriodicTerm, ...] = (
    PeriodicTerm(0, 0, 1, 0, 6288774, -20905355),
    PeriodicTerm(2, 0, -1, 0, 1274027, -3699111),
    PeriodicTerm(2, 0, 0, 0, 658314, -2955968),
    PeriodicTerm(0, 0, 2, 0, 213618, -569925),
    PeriodicTerm(0, 1, 0, 0, -185116, 48888),
    PeriodicTerm(0, 0, 0, 2, -114332, -3149),
    PeriodicTerm(2, 0, -2, 0, 58793, 246158),
    PeriodicTerm(2, -1, -1, 0, 57066, -152138),
    PeriodicTerm(2, 0, 1, 0, 53322, -170733),
    PeriodicTerm(2, -1, 0, 0, 45758, -204586),
    PeriodicTerm(0, 1, -1, 0, -40923, -129620),
    PeriodicTerm(1, 0, 0, 0, -34720, 108743),
    PeriodicTerm(0, 1, 1, 0, -30383, 104755),
    PeriodicTerm(2, 0, 0, -2, 15327, 10321),
    PeriodicTerm(0, 0, 1, 2, -12528, 0),
    PeriodicTerm(0, 0, 1, -2, 10980, 79661),
    PeriodicTerm(4, 0, -1, 0, 10675, -34782),
    PeriodicTerm(0, 0, 3, 0, 10034, -23210),
    PeriodicTerm(4, 0, -2, 0, 8548, -21636),
    PeriodicTerm(2, 1, -1, 0, -7888, 24208),
    PeriodicTerm(2, 1, 0, 0, -6766, 30824),
    PeriodicTerm(1, 0, -1, 0, -5163, -8379),
    PeriodicTerm(1, 1, 0, 0, 4987, -16675),
    PeriodicTerm(2, -1, 1, 0, 4036, -12831),
    PeriodicTerm(2, 0, 2, 0, 3994, -10445),
    PeriodicTerm(4, 0, 0, 0, 3861, -11650),
    PeriodicTerm(2, 0, -3, 0, 3665, 14403),
    PeriodicTerm(0, 1, -2, 0, -2689, -7003),
    PeriodicTerm(2, 0, -1, 2, -2602, 0),
    PeriodicTerm(2, -1, -2, 0, 2390, 10056),
    PeriodicTerm(1, 0, 1, 0, -2348, 6322),
    PeriodicTerm(2, -2, 0, 0, 2236, -9884),
    PeriodicTerm(0, 1, 2, 0, -2120, 5751),
    PeriodicTerm(0, 2, 0, 0, -2069, 0),
    PeriodicTerm(2, -2, -1, 0, 2048, -4950),
    PeriodicTerm(2, 0, 1, -2, -1773, 4130),
    PeriodicTerm(2, 0, 0, 2, -1595, 0),
    PeriodicTerm(4, -1, -1, 0, 1215, -3958),
    PeriodicTerm(0, 0, 2, 2, -1110, 0),
    PeriodicTerm(3, 0, -1, 0, -892, 3258),
    PeriodicTerm(2, 1, 1, 0, -810, 2616),
    PeriodicTerm(4, -1, -2, 0, 759, -1897),
    PeriodicTerm(0, 2, -1, 0, -713, -2117),
    PeriodicTerm(2, 2, -1, 0, -700, 2354),
    PeriodicTerm(2, 1, -2, 0, 691, 0),
    PeriodicTerm(2, -1, 0, -2, 596, 0),
    PeriodicTerm(4, 0, 1, 0, 549, -1423),
    PeriodicTerm(0, 0, 4, 0, 537, -1117),
    PeriodicTerm(4, -1, 0, 0, 520, -1571),
    PeriodicTerm(1, 0, -2, 0, -487, -1739),
    PeriodicTerm(2, 1, 0, -2, -399, 0),
    PeriodicTerm(0, 0, 2, -2, -381, -4421),
    PeriodicTerm(1, 1, 1, 0, 351, 0),
    PeriodicTerm(3, 0, -2, 0, -340, 0),
    PeriodicTerm(4, 0, -3, 0, 330, 0),
    PeriodicTerm(2, -1, 2, 0, 327, 0),
    PeriodicTerm(0, 2, 1, 0, -323, 1165),
    PeriodicTerm(1, 1, -1, 0, 299, 0),
    PeriodicTerm(2, 0, 3, 0, 294, 0),
    PeriodicTerm(2, 0, -1, -2, 0, 8752),
)

# Latitude (sine column only).
MB_TERMS: tuple[PeriodicTerm, ...] = (
    PeriodicTerm(0, 0, 0, 1, 5128122, 0),
    PeriodicTerm(0, 0, 1, 1, 280602, 0),
    PeriodicTerm(0, 0, 1, -1, 277693, 0),
    PeriodicTerm(2, 0, 0, -1, 173237, 0),
    PeriodicTerm(2, 0, -1, 1, 55413, 0),
    PeriodicTerm(2, 0, -1, -1, 46271, 0),
    PeriodicTerm(2, 0, 0, 1, 32573, 0),
    PeriodicTerm(0, 0, 2, 1, 17198, 0),
    PeriodicTerm(2, 0, 1, -1, 9266, 0),
    PeriodicTerm(0, 0, 2, -1, 8822, 0),
    PeriodicTerm(2, -1, 0, -1, 8216, 0),
    PeriodicTerm(2, 0, -2, -1, 4324, 0),
    PeriodicTerm(2, 0, 1, 1, 4200, 0),
    PeriodicTerm(2, 1, 0, -1, -3359, 0),
    PeriodicTerm(2, -1, -1, 1, 2463, 0),
    PeriodicTerm(2, -1, 0, 1, 2211, 0),
    PeriodicTerm(2, -1, -1, -1, 2065, 0),
    PeriodicTerm(0, 1, -1, -1, -1870, 0),
    PeriodicTerm(4, 0, -1, -1, 1828, 0),
    PeriodicTerm(0, 1, 0, 1, -1794, 0),
    PeriodicTerm(0, 0, 0, 3, -1749, 0),
    PeriodicTerm(0, 1, -1, 1, -1565, 0),
    PeriodicTerm(1, 0, 0, 1, -1491, 0),
    PeriodicTerm(0, 1, 1, 1, -1475, 0),
    PeriodicTerm(0, 1, 1, -1, -1410, 0),
    PeriodicTerm(0, 1, 0, -1, -1344, 0),
    PeriodicTerm(1, 0, 0, -1, -1335, 0),
    PeriodicTerm(0, 0, 3, 1, 1107, 0),
    PeriodicTerm(4, 0, 0, -1, 1021, 0),
    PeriodicTerm(4, 0, -1, 1, 833, 0),
    PeriodicTerm(0, 0, 1, -3, 777, 0),
    PeriodicTerm(4, 0, -2, 1, 671, 0),
    PeriodicTerm(2, 0, 0, -3, 607, 0),
    PeriodicTerm(2, 0, 2, -1, 596, 0),
    PeriodicTerm(2, -1, 1, -1, 491, 0),
    PeriodicTerm(2, 0, -2, 1, -451, 0),
    PeriodicTerm(0, 0, 3, -1, 439, 0),
    PeriodicTerm(2, 0, 2, 1, 422, 0),
    PeriodicTerm(2, 0, -3, -1, 421, 0),
    PeriodicTerm(2, 1, -1, 1, -366, 0),
    PeriodicTerm(2, 1, 0, 1, -351, 0),
    PeriodicTerm(4, 0, 0, 1, 331, 0),
    PeriodicTerm(2, -1, 1, 1, 315, 0),
    PeriodicTerm(2, -2, 0, -1, 302, 0),
    PeriodicTerm(0, 0, 1, 3, -283, 0),
    PeriodicTerm(2, 1, 1, -1, -229, 0),
    PeriodicTerm(1, 1, 0, -1, 223, 0),
    PeriodicTerm(1, 1, 0, 1, 223, 0),
    PeriodicTerm(0, 1, -2, -1, -220, 0),
    PeriodicTerm(2, 1, -1, -1, -220, 0),
    PeriodicTerm(1, 0, 1, 1, -185, 0),
    PeriodicTerm(2, -1, -2, -1, 181, 0),
    PeriodicTerm(0, 1, 2, 1, -177, 0),
    PeriodicTerm(4, 0, -2, -1, 176, 0),
    PeriodicTerm(4, -1, -1, -1, 166, 0),
    PeriodicTerm(1, 0, 1, -1, -164, 0),
    PeriodicTerm(4, 0, 1, -1, 132, 0),
    PeriodicTerm(1, 0, -1, -1, -119, 0),
    PeriodicTerm(4, -1, 0, -1, 115, 0),
    PeriodicTerm(2, -2, 0, 1, 107, 0),
)
