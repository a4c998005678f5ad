"""Angle normalization and geodesic helpers shared by the solar position code and the sunset
locator."""

#==============================================================
# Copyright Jody M Sankey 2020
#
# This software may be modified and distributed under the terms
# of the MIT license. See the LICENCE.md file for details.
#==============================================================
# PublicPermissions: True
#==============================================================

from collections import namedtuple
from math import sin, cos, asin, atan2, sqrt, floor, isfinite, radians, degrees

# WGS-84 equatorial and polar radii in meters.
RADIUS_A = 6378137.0
RADIUS_B = 6356752.314245

# Projected points are rounded to this many decimal places of a degree (~0.1m).
PROJECTION_DECIMALS = 6


class InvalidInputError(ValueError):
    """An input was malformed or out of range."""

    def __init__(self, message):
        self.message = message
        super().__init__(self.message)


GeoPoint = namedtuple('GeoPoint', ['lat', 'lng'])
GeoPoint.__doc__ = """A geographic point, expressed as latitude and longitude in degrees."""


def normalize_degrees(value, limit=360.0):
    """Returns value folded into the range [0, limit>."""
    value /= limit
    limited = limit * (value - floor(value))
    # Rounding in the subtraction can land exactly on the limit for tiny negative inputs.
    return 0.0 if limited >= limit else limited


def normalize_signed_degrees(value):
    """Returns value folded into the range <-180, 180]."""
    limited = normalize_degrees(value)
    return limited - 360.0 if limited > 180.0 else limited


def geocentric_radius(latitude, elevation=0.0):
    """Returns the distance in meters from the center of the earth to a point at the supplied
    latitude (in degrees) and elevation (in meters above the ellipsoid)."""
    lat = radians(latitude)
    a_cos = RADIUS_A * cos(lat)
    b_sin = RADIUS_B * sin(lat)
    radius = sqrt(((RADIUS_A * a_cos) ** 2 + (RADIUS_B * b_sin) ** 2)
                  / (a_cos ** 2 + b_sin ** 2))
    return radius + elevation


def project_point(origin, distance, azimuth, elevation=0.0):
    """Returns the GeoPoint reached by travelling distance meters from origin along the initial
    bearing azimuth (degrees clockwise from north), treating the earth as a sphere with the local
    radius at the origin."""
    lat1, lng1 = origin
    for value in (lat1, lng1, distance, azimuth, elevation):
        if not isfinite(value):
            raise InvalidInputError('Non-finite projection input: {}'.format(value))

    angular = distance / geocentric_radius(lat1, elevation)
    phi1 = radians(lat1)
    theta = radians(azimuth)

    phi2 = asin(sin(phi1) * cos(angular) + cos(phi1) * sin(angular) * cos(theta))
    lam2 = radians(lng1) + atan2(sin(theta) * sin(angular) * cos(phi1),
                                 cos(angular) - sin(phi1) * sin(phi2))

    return GeoPoint(round(degrees(phi2), PROJECTION_DECIMALS),
                    round(normalize_signed_degrees(degrees(lam2)), PROJECTION_DECIMALS))
