"""Implementation of the NREL Solar Position Algorithm (SPA), calculating the topocentric position
of the sun and the times of sunrise, sun transit and sunset for an observer on the earth. The
algorithm is described in "Solar Position Algorithm for Solar Radiation Applications" by Ibrahim
Reda and Afshin Andreas (NREL/TP-560-34302, revised January 2008) and is good to +/-0.0003 degrees
for years -2000 to 6000. Equation numbers in the comments refer to that report."""

#==============================================================
# Copyright Jody M Sankey 2020
#
# This software may be modified and distributed under the terms
# of the MIT license. See the LICENCE.md file for details.
#==============================================================
# PublicPermissions: True
#==============================================================

import logging
from collections import namedtuple
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from math import sin, cos, tan, asin, acos, atan, atan2, pi, floor, trunc, isfinite

from dateutil import tz
from scipy import interpolate

import spa_data
from geoutil import InvalidInputError, normalize_degrees, normalize_signed_degrees

# Variables mostly use the short symbols from the report.
# pylint: disable=invalid-name,too-many-arguments,too-many-locals

log = logging.getLogger(__name__)

SEC_IN_DAY = 86400.0
DEG_TO_RAD = pi / 180.0
RAD_TO_DEG = 180.0 / pi

# Julian day of the J2000.0 epoch and the length of a julian century in days.
J2000 = 2451545.0
DAYS_IN_JULIAN_CENTURY = 36525.0
# Some earlier versions of this code divided the julian century by this value, which does not
# match Equation 6. It is kept only so old results can be reproduced.
LEGACY_CENTURY_DAYS = 35625.0
# Julian days before this value are in the julian calendar and need no gregorian correction.
GREGORIAN_START_JD = 2299160.0

# Earth's flattening and equatorial radius as used for the parallax calculation.
EARTH_FLATTENING = 1 / 298.257223563
EARTH_EQUATORIAL_RADIUS = 6378140.0

# Angular radius of the sun and the default refraction at sunrise/sunset, both in degrees.
SUN_RADIUS = 0.26667
DEFAULT_ATMOS_REFRACT = 0.5667
# Annual average local pressure (millibars) and temperature (celsius).
DEFAULT_PRESSURE = 1013.0
DEFAULT_TEMPERATURE = 15.0

# Sidereal rate used when stepping the sidereal time through the day, in degrees per day.
SIDEREAL_DEGREES_PER_DAY = 360.985647

# Value used for every rise/set/transit output when the sun does not rise or set that day.
NO_RISE_SET = -99999


def _to_utc(when):
    """Returns the supplied datetime in UTC, treating naive datetimes as already being UTC."""
    if not isinstance(when, datetime):
        raise InvalidInputError('Expected a datetime, got {!r}'.format(when))
    if when.tzinfo is None or when.utcoffset() is None:
        return when.replace(tzinfo=tz.UTC)
    return when.astimezone(tz.UTC)


def _check_finite(**values):
    for name, value in values.items():
        if not isinstance(value, (int, float)) or not isfinite(value):
            raise InvalidInputError('{} must be a finite number, got {!r}'.format(name, value))


#--------------------------------------------------------------
# Time scales
#--------------------------------------------------------------

def day_fraction(when):
    """Returns the fraction of the UTC day that has elapsed at the supplied datetime."""
    utc = _to_utc(when)
    midnight = datetime.combine(utc.date(), datetime.min.time(), tz.UTC)
    return (utc - midnight) / timedelta(days=1)


def julian_day(when, delta_ut1=0.0):
    """Returns the julian day for a datetime, optionally corrected by DUT1 = UT1 - UTC seconds."""
    # Equation 4
    _check_finite(delta_ut1=delta_ut1)
    utc = _to_utc(when) + timedelta(seconds=delta_ut1)

    # Count January and February as months 13 and 14 of the previous year.
    year, month = utc.year, utc.month
    if month <= 2:
        year -= 1
        month += 12

    jd = (trunc(365.25 * (year + 4716)) + trunc(30.6001 * (month + 1))
          + utc.day + day_fraction(utc) - 1524.5)

    if jd >= GREGORIAN_START_JD:
        A = trunc(year / 100)
        jd += 2 - A + trunc(A / 4)
    return jd


_DELTA_T_BY_QUARTER = dict(spa_data.DELTA_T)
_FIRST_DELTA_T = spa_data.DELTA_T[0]
_LAST_DELTA_T = spa_data.DELTA_T[-1]


def lookup_delta_t(when):
    """Returns ΔT = TT - UT in seconds for the quarter year containing the supplied date, clamping
    to the first or last table entry outside the range of the table."""
    if not isinstance(when, date):
        raise InvalidInputError('Expected a date, got {!r}'.format(when))
    ordinal = when.timetuple().tm_yday
    days_in_year = date(when.year, 12, 31).timetuple().tm_yday
    quarter = floor((ordinal / days_in_year) / 0.25) * 0.25
    key = when.year + quarter

    if key < _FIRST_DELTA_T[0]:
        log.debug('ΔT for %s precedes table, using %s', when, _FIRST_DELTA_T[1])
        return _FIRST_DELTA_T[1]
    if key > _LAST_DELTA_T[0]:
        log.debug('ΔT for %s follows table, using %s', when, _LAST_DELTA_T[1])
        return _LAST_DELTA_T[1]
    return _DELTA_T_BY_QUARTER[key]


def julian_ephemeris_day(jd, delta_t):
    """Returns the julian ephemeris day for a julian day and ΔT in seconds."""
    # Equation 5
    return jd + delta_t / SEC_IN_DAY


def julian_century(jd, century_days=DAYS_IN_JULIAN_CENTURY):
    """Returns the julian century for a julian day."""
    # Equation 6
    return (jd - J2000) / century_days


def julian_ephemeris_century(jde):
    """Returns the julian ephemeris century for a julian ephemeris day."""
    # Equation 7
    return (jde - J2000) / DAYS_IN_JULIAN_CENTURY


def julian_ephemeris_millennium(jce):
    """Returns the julian ephemeris millennium for a julian ephemeris century."""
    # Equation 8
    return jce / 10.0


#--------------------------------------------------------------
# Earth heliocentric position
#--------------------------------------------------------------

def earth_periodic_term_summation(terms, jme):
    """Sums A * cos(B + C * JME) over one sub-table of earth periodic terms."""
    # Equation 9
    return sum(a * cos(b + c * jme) for _, a, b, c in terms)


def earth_values(term_sums, jme):
    """Combines the sums for each power of JME into a single heliocentric value."""
    # Equation 11
    return sum(term_sum * jme ** power for power, term_sum in enumerate(term_sums)) / 1e8


def _earth_heliocentric_value(tables, jme):
    return earth_values([earth_periodic_term_summation(terms, jme) for terms in tables], jme)


def heliocentric_longitude(jme):
    """Returns the earth heliocentric longitude (L) in degrees, in the range [0, 360>."""
    return normalize_degrees(_earth_heliocentric_value(spa_data.EARTH_LONGITUDE, jme) * RAD_TO_DEG)


def heliocentric_latitude(jme):
    """Returns the earth heliocentric latitude (B) in degrees."""
    return _earth_heliocentric_value(spa_data.EARTH_LATITUDE, jme) * RAD_TO_DEG


def heliocentric_radius(jme):
    """Returns the earth radius vector (R) in astronomical units."""
    return _earth_heliocentric_value(spa_data.EARTH_RADIUS, jme)


#--------------------------------------------------------------
# Geocentric position and nutation
#--------------------------------------------------------------

def geocentric_longitude(l):
    """Returns the geocentric longitude of the sun (Theta) in degrees."""
    # Equation 13
    return normalize_degrees(l + 180.0)


def geocentric_latitude(b):
    """Returns the geocentric latitude of the sun (beta) in degrees."""
    # Equation 14
    return -b


def x_factors(jce):
    """Returns the nutation arguments X0 to X4 in degrees for a julian ephemeris century."""
    # Equations 15-19
    return tuple(sum(coefficient * jce ** power for power, coefficient in enumerate(coefficients))
                 for coefficients in spa_data.NUTATION_X_COEFFICIENTS)


def _nutation_argument(term, x):
    return sum(x_i * y_i for x_i, y_i in zip(x, term[:5])) * DEG_TO_RAD


def nutation_longitude(jce, x=None):
    """Returns the nutation in longitude (delta psi) in degrees."""
    # Equations 20 and 22
    x = x if x is not None else x_factors(jce)
    total = sum((term[5] + term[6] * jce) * sin(_nutation_argument(term, x))
                for term in spa_data.NUTATION_TERMS)
    return total / 36000000.0


def nutation_obliquity(jce, x=None):
    """Returns the nutation in obliquity (delta epsilon) in degrees."""
    # Equations 21 and 23
    x = x if x is not None else x_factors(jce)
    total = sum((term[7] + term[8] * jce) * cos(_nutation_argument(term, x))
                for term in spa_data.NUTATION_TERMS)
    return total / 36000000.0


def nutation(jce):
    """Returns (delta psi, delta epsilon) in degrees for a julian ephemeris century."""
    x = x_factors(jce)
    return (nutation_longitude(jce, x), nutation_obliquity(jce, x))


def mean_ecliptic_obliquity(jme):
    """Returns the mean obliquity of the ecliptic (epsilon zero) in arc seconds."""
    # Equation 24
    U = jme / 10.0
    return sum(coefficient * U ** power
               for power, coefficient in enumerate(spa_data.MEAN_OBLIQUITY_COEFFICIENTS))


def true_ecliptic_obliquity(epsilon0, del_epsilon):
    """Returns the true obliquity of the ecliptic in degrees, given the mean obliquity in arc
    seconds and the nutation in obliquity in degrees."""
    # Equation 25
    return epsilon0 / 3600.0 + del_epsilon


#--------------------------------------------------------------
# Apparent and topocentric position
#--------------------------------------------------------------

def aberration_correction(r):
    """Returns the aberration correction (delta tau) in degrees for an earth radius vector in AU."""
    # Equation 26
    return -20.4898 / (3600.0 * r)


def apparent_sun_longitude(theta, del_psi, del_tau):
    """Returns the apparent sun longitude (lambda) in degrees."""
    # Equation 27
    return theta + del_psi + del_tau


def greenwich_mean_sidereal_time(jd, jc):
    """Returns the mean sidereal time at Greenwich (nu zero) in degrees."""
    # Equation 28
    return normalize_degrees(280.46061837 + 360.98564736629 * (jd - J2000)
                             + 0.000387933 * jc * jc - jc * jc * jc / 38710000.0)


def greenwich_apparent_sidereal_time(nu0, del_psi, epsilon):
    """Returns the apparent sidereal time at Greenwich (nu) in degrees."""
    # Equation 29
    return nu0 + del_psi * cos(epsilon * DEG_TO_RAD)


def geocentric_right_ascension(lamda, epsilon, beta):
    """Returns the geocentric sun right ascension (alpha) in degrees, in the range [0, 360>."""
    # Equation 30
    lamda_rad = lamda * DEG_TO_RAD
    epsilon_rad = epsilon * DEG_TO_RAD
    alpha = atan2(sin(lamda_rad) * cos(epsilon_rad) - tan(beta * DEG_TO_RAD) * sin(epsilon_rad),
                  cos(lamda_rad))
    return normalize_degrees(alpha * RAD_TO_DEG)


def geocentric_declination(lamda, epsilon, beta):
    """Returns the geocentric sun declination (delta) in degrees."""
    # Equation 31
    beta_rad = beta * DEG_TO_RAD
    epsilon_rad = epsilon * DEG_TO_RAD
    return asin(sin(beta_rad) * cos(epsilon_rad)
                + cos(beta_rad) * sin(epsilon_rad) * sin(lamda * DEG_TO_RAD)) * RAD_TO_DEG


def observer_local_hour_angle(nu, longitude, alpha):
    """Returns the observer local hour angle (H) in degrees, measured westward from south."""
    # Equation 32
    return normalize_degrees(nu + longitude - alpha)


def topocentric_sun_position(latitude, elevation, r, h, delta, alpha):
    """Corrects the geocentric position for the parallax of an observer at the supplied latitude
    (degrees) and elevation (meters), returning a tuple of (topocentric right ascension,
    topocentric declination, topocentric local hour angle, parallax in right ascension), all in
    degrees."""
    lat_rad = latitude * DEG_TO_RAD
    delta_rad = delta * DEG_TO_RAD
    h_rad = h * DEG_TO_RAD

    # Equatorial horizontal parallax of the sun, Equation 33
    xi = 8.794 / (3600.0 * r) * DEG_TO_RAD
    # Equations 34-36
    u = atan((1 - EARTH_FLATTENING) * tan(lat_rad))
    x = cos(u) + elevation * cos(lat_rad) / EARTH_EQUATORIAL_RADIUS
    y = (1 - EARTH_FLATTENING) * sin(u) + elevation * sin(lat_rad) / EARTH_EQUATORIAL_RADIUS

    # Parallax in the sun right ascension, Equation 37
    denominator = cos(delta_rad) - x * sin(xi) * cos(h_rad)
    del_alpha = atan2(-x * sin(xi) * sin(h_rad), denominator)
    # Equation 39
    delta_prime = atan2((sin(delta_rad) - y * sin(xi)) * cos(del_alpha), denominator)

    del_alpha_deg = del_alpha * RAD_TO_DEG
    # Equations 38 and 40
    return (alpha + del_alpha_deg, delta_prime * RAD_TO_DEG, h - del_alpha_deg, del_alpha_deg)


def topocentric_elevation_angle(latitude, delta_prime, h_prime):
    """Returns the topocentric elevation angle without refraction (e zero) in degrees."""
    # Equation 41
    lat_rad = latitude * DEG_TO_RAD
    delta_prime_rad = delta_prime * DEG_TO_RAD
    return asin(sin(lat_rad) * sin(delta_prime_rad)
                + cos(lat_rad) * cos(delta_prime_rad) * cos(h_prime * DEG_TO_RAD)) * RAD_TO_DEG


def atmospheric_refraction_correction(pressure, temperature, e0,
                                      atmos_refract=DEFAULT_ATMOS_REFRACT):
    """Returns the atmospheric refraction correction (delta e) in degrees for the supplied
    pressure (millibars) and temperature (celsius). No correction is made once the upper limb of
    the sun is below the horizon."""
    # Equation 42
    if e0 < -(SUN_RADIUS + atmos_refract):
        return 0.0
    return ((pressure / 1010.0) * (283.0 / (273.0 + temperature))
            * 1.02 / (60.0 * tan((e0 + 10.3 / (e0 + 5.11)) * DEG_TO_RAD)))


def topocentric_zenith_angle(e):
    """Returns the topocentric zenith angle in degrees from the corrected elevation angle."""
    # Equation 44
    return 90.0 - e


def topocentric_azimuth_angle_astro(h_prime, latitude, delta_prime):
    """Returns the topocentric azimuth angle in degrees, measured westward from south as used by
    astronomers."""
    # Equation 45
    h_prime_rad = h_prime * DEG_TO_RAD
    lat_rad = latitude * DEG_TO_RAD
    gamma = atan2(sin(h_prime_rad),
                  cos(h_prime_rad) * sin(lat_rad) - tan(delta_prime * DEG_TO_RAD) * cos(lat_rad))
    return normalize_degrees(gamma * RAD_TO_DEG)


def topocentric_azimuth_angle(azimuth_astro):
    """Returns the topocentric azimuth angle in degrees, measured eastward from north as used by
    navigators."""
    # Equation 46
    return normalize_degrees(azimuth_astro + 180.0)


def sun_mean_longitude(jme):
    """Returns the sun's mean longitude (M) in degrees."""
    # Equation A2
    return normalize_degrees(sum(
        coefficient * jme ** power
        for power, coefficient in enumerate(spa_data.SUN_MEAN_LONGITUDE_COEFFICIENTS)))


def equation_of_time(m, alpha, del_psi, epsilon):
    """Returns the equation of time in minutes, in the range [-20, 20]."""
    # Equation A1
    minutes = 4.0 * (m - 0.0057183 - alpha + del_psi * cos(epsilon * DEG_TO_RAD))
    if minutes < -20.0:
        return minutes + 1440.0
    if minutes > 20.0:
        return minutes - 1440.0
    return minutes


def pressure_at_elevation(elevation):
    """Returns the approximate atmospheric pressure in millibars at an elevation in meters above
    sea level, ignoring weather."""
    p0 = 1013.25          # Sea level standard pressure, millibars
    cp = 1004.68506       # Constant pressure specific heat, J/(kg*K)
    T0 = 288.16           # Sea level standard temperature, K
    g = 9.80665           # Gravitational acceleration, m/s^2
    M = 0.02896968        # Molar mass of dry air, kg/mol
    R0 = 8.314462618      # Universal gas constant, J/(mol*K)
    return p0 * (1 - g * elevation / (cp * T0)) ** (cp * M / R0)


#--------------------------------------------------------------
# Solar position
#--------------------------------------------------------------

@dataclass(frozen=True)
class SolarPosition:
    """The inputs and every intermediate and final value of the solar position algorithm for one
    observer at one instant. Angles are in degrees. Instances are built by compute_solar_position
    and never change; use add_days to get the position for another day."""
    # Inputs
    when: datetime
    latitude: float
    longitude: float
    elevation: float
    temperature: float
    pressure: float
    delta_t: float
    delta_ut1: float
    atmos_refract: float
    century_days: float
    # Time scales
    jd: float
    jc: float
    jde: float
    jce: float
    jme: float
    # Heliocentric and geocentric position
    l: float
    b: float
    r: float
    theta: float
    beta: float
    x: tuple
    del_psi: float
    del_epsilon: float
    epsilon0: float
    epsilon: float
    del_tau: float
    lamda: float
    nu0: float
    nu: float
    alpha: float
    delta: float
    # Topocentric position
    h: float
    del_alpha: float
    alpha_prime: float
    delta_prime: float
    h_prime: float
    e0: float
    del_e: float
    e: float
    zenith: float
    azimuth_astro: float
    azimuth: float
    eot: float

    def add_days(self, days):
        """Returns the position at the same location and time of day, a number of days later."""
        return compute_solar_position(
            self.when + timedelta(days=days), self.latitude, self.longitude,
            elevation=self.elevation, temperature=self.temperature, pressure=self.pressure,
            delta_t=self.delta_t, delta_ut1=self.delta_ut1, atmos_refract=self.atmos_refract,
            century_days=self.century_days)


def _validate_inputs(latitude, longitude, elevation, temperature, pressure, delta_t, delta_ut1,
                     atmos_refract, century_days):
    _check_finite(latitude=latitude, longitude=longitude, elevation=elevation,
                  temperature=temperature, pressure=pressure, delta_ut1=delta_ut1,
                  atmos_refract=atmos_refract, century_days=century_days)
    if delta_t is not None:
        _check_finite(delta_t=delta_t)
        if abs(delta_t) > 8000:
            raise InvalidInputError('ΔT of {} seconds is out of range'.format(delta_t))
    if not -90.0 <= latitude <= 90.0:
        raise InvalidInputError('Latitude {} is outside [-90, 90]'.format(latitude))
    if elevation < -6500000:
        raise InvalidInputError('Elevation {} is below the center of the earth'.format(elevation))
    if not 0 < pressure <= 5000:
        raise InvalidInputError('Pressure {} mbar is out of range'.format(pressure))
    if not -273.15 < temperature <= 6000:
        raise InvalidInputError('Temperature {} C is out of range'.format(temperature))
    if not -1 < delta_ut1 < 1:
        raise InvalidInputError('ΔUT1 of {} seconds is out of range'.format(delta_ut1))
    if abs(atmos_refract) > 5:
        raise InvalidInputError('Refraction of {} degrees is out of range'.format(atmos_refract))
    if century_days <= 0:
        raise InvalidInputError('Century length must be positive')


def compute_solar_position(when, latitude, longitude, elevation=0.0,
                           temperature=DEFAULT_TEMPERATURE, pressure=DEFAULT_PRESSURE,
                           delta_t=None, delta_ut1=0.0, atmos_refract=DEFAULT_ATMOS_REFRACT,
                           century_days=DAYS_IN_JULIAN_CENTURY):
    """Calculates the position of the sun for an observer at the supplied latitude and longitude
    (degrees, east positive) and elevation (meters) at the supplied datetime, for the supplied
    temperature (celsius) and pressure (millibars). ΔT is looked up from the date if not supplied.
    Naive datetimes are treated as UTC. Raises InvalidInputError for malformed inputs."""
    if not isinstance(when, datetime):
        raise InvalidInputError('Expected a datetime, got {!r}'.format(when))
    # Sunrise and sunset need the positions on the neighbouring days.
    if not date.min < when.date() < date.max:
        raise InvalidInputError('{} is too close to the limits of the calendar'.format(when))
    _validate_inputs(latitude, longitude, elevation, temperature, pressure, delta_t, delta_ut1,
                     atmos_refract, century_days)
    if when.tzinfo is None or when.utcoffset() is None:
        when = when.replace(tzinfo=tz.UTC)
    if delta_t is None:
        delta_t = lookup_delta_t(when)
    return _solar_position(when, latitude, normalize_signed_degrees(longitude), elevation,
                           temperature, pressure, delta_t, delta_ut1, atmos_refract, century_days)


def _solar_position(when, latitude, longitude, elevation, temperature, pressure, delta_t,
                    delta_ut1, atmos_refract, century_days):
    """Builds a SolarPosition from inputs that are already validated, with an aware when, a
    normalized longitude and a resolved ΔT."""
    # Section 3.1, time scales
    jd = julian_day(when, delta_ut1)
    jc = julian_century(jd, century_days)
    jde = julian_ephemeris_day(jd, delta_t)
    jce = julian_ephemeris_century(jde)
    jme = julian_ephemeris_millennium(jce)

    # Sections 3.2-3.3, heliocentric then geocentric position
    l = heliocentric_longitude(jme)
    b = heliocentric_latitude(jme)
    r = heliocentric_radius(jme)
    theta = geocentric_longitude(l)
    beta = geocentric_latitude(b)

    # Sections 3.4-3.5, nutation and obliquity
    x = x_factors(jce)
    del_psi = nutation_longitude(jce, x)
    del_epsilon = nutation_obliquity(jce, x)
    epsilon0 = mean_ecliptic_obliquity(jme)
    epsilon = true_ecliptic_obliquity(epsilon0, del_epsilon)

    # Sections 3.6-3.10, apparent position and sidereal time
    del_tau = aberration_correction(r)
    lamda = apparent_sun_longitude(theta, del_psi, del_tau)
    nu0 = greenwich_mean_sidereal_time(jd, jc)
    nu = greenwich_apparent_sidereal_time(nu0, del_psi, epsilon)
    alpha = geocentric_right_ascension(lamda, epsilon, beta)
    delta = geocentric_declination(lamda, epsilon, beta)

    # Sections 3.11-3.15, topocentric position for the observer
    h = observer_local_hour_angle(nu, longitude, alpha)
    alpha_prime, delta_prime, h_prime, del_alpha = topocentric_sun_position(
        latitude, elevation, r, h, delta, alpha)
    e0 = topocentric_elevation_angle(latitude, delta_prime, h_prime)
    del_e = atmospheric_refraction_correction(pressure, temperature, e0, atmos_refract)
    e = e0 + del_e
    zenith = topocentric_zenith_angle(e)
    azimuth_astro = topocentric_azimuth_angle_astro(h_prime, latitude, delta_prime)
    azimuth = topocentric_azimuth_angle(azimuth_astro)

    eot = equation_of_time(sun_mean_longitude(jme), alpha, del_psi, epsilon)

    return SolarPosition(
        when=when, latitude=latitude, longitude=longitude, elevation=elevation,
        temperature=temperature, pressure=pressure, delta_t=delta_t, delta_ut1=delta_ut1,
        atmos_refract=atmos_refract, century_days=century_days,
        jd=jd, jc=jc, jde=jde, jce=jce, jme=jme,
        l=l, b=b, r=r, theta=theta, beta=beta, x=x,
        del_psi=del_psi, del_epsilon=del_epsilon, epsilon0=epsilon0, epsilon=epsilon,
        del_tau=del_tau, lamda=lamda, nu0=nu0, nu=nu, alpha=alpha, delta=delta,
        h=h, del_alpha=del_alpha, alpha_prime=alpha_prime, delta_prime=delta_prime,
        h_prime=h_prime, e0=e0, del_e=del_e, e=e, zenith=zenith,
        azimuth_astro=azimuth_astro, azimuth=azimuth, eot=eot)


#--------------------------------------------------------------
# Sunrise, sun transit and sunset
#--------------------------------------------------------------

class Interpolator:
    """A convenient object oriented wrapper around the spline interpolation provided by scipy."""
    def __init__(self, x_values, y_values):
        self.interp = interpolate.splrep(x_values, y_values, k=min(3, len(x_values)-1))

    def at(self, x):
        """Returns the interpolated y value at position x."""
        return float(interpolate.splev([x], self.interp)[0])


RiseSetTransit = namedtuple('RiseSetTransit', [
    'sunrise_hour_angle', 'sunset_hour_angle', 'transit_hour_angle', 'transit_altitude',
    'sunrise', 'sunset', 'transit'])
RiseSetTransit.__doc__ = """Sunrise, sunset and sun transit for one day. Hour angles and the
transit altitude are in degrees, the times are timezone aware datetimes in the observer's zone.
Every field is NO_RISE_SET when the sun stays above or below the horizon all day."""
RiseSetTransit.rises_and_sets = property(lambda self: self.transit != NO_RISE_SET)

NEVER_RISES_OR_SETS = RiseSetTransit(*([NO_RISE_SET] * len(RiseSetTransit._fields)))


def approx_sun_transit_time(alpha_zero, longitude, nu):
    """Returns the approximate sun transit time as a fraction of the day."""
    # Equation A3
    return (alpha_zero - longitude - nu) / 360.0


def sun_hour_angle_at_rise_set(latitude, delta_zero, h0_prime):
    """Returns the local hour angle in degrees at which the center of the sun reaches elevation
    h0_prime, or NO_RISE_SET if it never does."""
    # Equation A4
    lat_rad = latitude * DEG_TO_RAD
    delta_zero_rad = delta_zero * DEG_TO_RAD
    argument = ((sin(h0_prime * DEG_TO_RAD) - sin(lat_rad) * sin(delta_zero_rad))
                / (cos(lat_rad) * cos(delta_zero_rad)))
    if abs(argument) > 1.0:
        return NO_RISE_SET
    return normalize_degrees(acos(argument) * RAD_TO_DEG, 180.0)


def approx_sun_rise_and_set(m0, h0):
    """Returns the approximate (transit, sunrise, sunset) times as fractions of the day."""
    # Equations A5-A7
    return (normalize_degrees(m0, 1.0),
            normalize_degrees(m0 - h0 / 360.0, 1.0),
            normalize_degrees(m0 + h0 / 360.0, 1.0))


def rts_alpha_delta_prime(values, n):
    """Interpolates the values for the previous day, the day and the next day at n, a fraction of
    a day relative to the middle value. Differences of two degrees or more are assumed to be a
    wrap through 360 and are folded back into range before interpolating."""
    # Equation A10
    a = values[1] - values[0]
    b = values[2] - values[1]
    if abs(a) >= 2.0:
        a = normalize_degrees(a)
    if abs(b) >= 2.0:
        b = normalize_degrees(b)
    return Interpolator((-1.0, 0.0, 1.0), (values[1] - a, values[1], values[1] + b)).at(n)


def rts_sun_altitude(latitude, delta_prime, h_prime):
    """Returns the sun altitude in degrees at one of the rise/transit/set times."""
    # Equation A13
    lat_rad = latitude * DEG_TO_RAD
    delta_prime_rad = delta_prime * DEG_TO_RAD
    return asin(sin(lat_rad) * sin(delta_prime_rad)
                + cos(lat_rad) * cos(delta_prime_rad) * cos(h_prime * DEG_TO_RAD)) * RAD_TO_DEG


def sun_rise_and_set(m_rts, h_rts, delta_prime, latitude, h_prime, h0_prime, index):
    """Returns the refined sunrise (index 1) or sunset (index 2) time as a fraction of the day."""
    # Equations A15-A16
    return m_rts[index] + (h_rts[index] - h0_prime) / (
        360.0 * cos(delta_prime[index] * DEG_TO_RAD) * cos(latitude * DEG_TO_RAD)
        * sin(h_prime[index] * DEG_TO_RAD))


def dayfrac_to_local(dayfrac, when):
    """Converts a fraction of a day measured from 0h UT on the local date of when into a datetime
    on that local date in the timezone of when."""
    offset = when.utcoffset()
    local_days = normalize_degrees(dayfrac + offset / timedelta(days=1), 1.0)
    local_midnight = datetime(when.year, when.month, when.day, tzinfo=tz.UTC) - offset
    return (local_midnight + timedelta(days=local_days)).astimezone(when.tzinfo)


def compute_rise_set_transit(position):
    """Calculates sunrise, sunset and sun transit on the local date of a SolarPosition, returning
    a RiseSetTransit. Returns NEVER_RISES_OR_SETS when the sun is circumpolar that day."""
    # Appendix A.2
    h0_prime = -(SUN_RADIUS + position.atmos_refract)
    midnight_ut = datetime(position.when.year, position.when.month, position.when.day,
                           tzinfo=tz.UTC)

    def position_at(days, delta_t):
        return _solar_position(
            midnight_ut + timedelta(days=days), position.latitude, position.longitude,
            position.elevation, position.temperature, position.pressure, delta_t, 0.0,
            position.atmos_refract, position.century_days)

    # Apparent sidereal time at 0 UT, then the geocentric positions at 0 TT on the
    # previous day, the day and the next day.
    nu = position_at(0, position.delta_t).nu
    days = [position_at(day, 0.0) for day in (-1, 0, 1)]
    alpha = [day.alpha for day in days]
    delta = [day.delta for day in days]

    m0 = approx_sun_transit_time(alpha[1], position.longitude, nu)
    h0 = sun_hour_angle_at_rise_set(position.latitude, delta[1], h0_prime)
    if h0 < 0:
        log.debug('Sun does not rise or set at %s, %s on %s',
                  position.latitude, position.longitude, position.when.date())
        return NEVER_RISES_OR_SETS

    m_rts = approx_sun_rise_and_set(m0, h0)
    alpha_prime, delta_prime, h_prime, h_rts = [], [], [], []
    for m in m_rts:
        nu_rts = nu + SIDEREAL_DEGREES_PER_DAY * m
        n = m + position.delta_t / SEC_IN_DAY
        alpha_prime.append(rts_alpha_delta_prime(alpha, n))
        delta_prime.append(rts_alpha_delta_prime(delta, n))
        h_prime.append(normalize_signed_degrees(nu_rts + position.longitude - alpha_prime[-1]))
        h_rts.append(rts_sun_altitude(position.latitude, delta_prime[-1], h_prime[-1]))

    transit = m_rts[0] - h_prime[0] / 360.0
    sunrise = sun_rise_and_set(m_rts, h_rts, delta_prime, position.latitude, h_prime, h0_prime, 1)
    sunset = sun_rise_and_set(m_rts, h_rts, delta_prime, position.latitude, h_prime, h0_prime, 2)

    return RiseSetTransit(
        sunrise_hour_angle=h_prime[1],
        sunset_hour_angle=h_prime[2],
        transit_hour_angle=h_prime[0],
        transit_altitude=h_rts[0],
        sunrise=dayfrac_to_local(sunrise, position.when),
        sunset=dayfrac_to_local(sunset, position.when),
        transit=dayfrac_to_local(transit, position.when))


def rise_set_transit_at(when, latitude, longitude, elevation=0.0,
                        temperature=DEFAULT_TEMPERATURE, pressure=DEFAULT_PRESSURE, delta_t=None,
                        atmos_refract=DEFAULT_ATMOS_REFRACT):
    """Calculates sunrise, sunset and sun transit on the local date of when for an observer."""
    return compute_rise_set_transit(compute_solar_position(
        when, latitude, longitude, elevation=elevation, temperature=temperature,
        pressure=pressure, delta_t=delta_t, atmos_refract=atmos_refract))
