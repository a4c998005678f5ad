"""Locates the point on an observer's horizon where the sun will set, and describes a simple map
of the observer, their horizon circle and the sunset point as a set of draw commands."""

#==============================================================
# Copyright Jody M Sankey 2020
#
# This software may be modified and distributed under the terms
# of the MIT license. See the LICENCE.md file for details.
#==============================================================
# PublicPermissions: True
#==============================================================

import argparse
import logging
from collections import namedtuple
from datetime import datetime, timedelta
from math import sqrt

from dateutil import tz
from timezonefinder import TimezoneFinder

import spa
from geoutil import GeoPoint, normalize_signed_degrees, project_point

log = logging.getLogger(__name__)

# Distance in meters at which an observer with eyes 1.7m above the ground can just see the top
# of a 20m object on the horizon.
HORIZON_DISTANCE = 3.57 * (sqrt(1.7) + sqrt(20)) * 1000

# Observer conditions used when none are supplied.
DEFAULT_OBSERVER = GeoPoint(-44.67396323337423, 167.9256821)
DEFAULT_ELEVATION = 10.0
DEFAULT_TEMPERATURE = 27.0

INPUT_DATE_FORMAT = '%Y-%m-%d'
FALLBACK_ZONE = 'UTC'

_finder = TimezoneFinder()


SunsetLocation = namedtuple('SunsetLocation', ['observer', 'zone_name', 'sunset', 'azimuth',
                                               'point'])
SunsetLocation.__doc__ = """The sunset seen by an observer on one day. sunset, azimuth and point
are None when the sun does not set that day."""

SunriseLocation = namedtuple('SunriseLocation', ['observer', 'zone_name', 'sunrise', 'azimuth',
                                                 'point'])
SunriseLocation.__doc__ = """The sunrise seen by an observer on one day, laid out like
SunsetLocation."""

# Draw commands produced by render.
Marker = namedtuple('Marker', ['point'])
Circle = namedtuple('Circle', ['center', 'radius', 'color', 'weight'])
Polyline = namedtuple('Polyline', ['points', 'color', 'weight'])

MapState = namedtuple('MapState', ['observer', 'sunset', 'horizon_radius'],
                      defaults=[None, HORIZON_DISTANCE])
MapState.__doc__ = """Everything needed to draw the map. A missing sunset point is drawn on top
of the observer."""


def timezone_name_at(latitude, longitude):
    """Returns the IANA timezone name for a location, or UTC where none is known."""
    name = _finder.timezone_at(lng=normalize_signed_degrees(longitude), lat=latitude)
    if name is None:
        log.debug('No timezone at %s, %s, using %s', latitude, longitude, FALLBACK_ZONE)
        return FALLBACK_ZONE
    return name


def _zone(zone_name):
    zone = tz.gettz(zone_name)
    if zone is None:
        raise spa.InvalidInputError('Unknown timezone {!r}'.format(zone_name))
    return zone


def today_in_zone(zone_name):
    """Returns the current time in the named timezone."""
    return datetime.now(_zone(zone_name))


def date_from_input(text, zone_name):
    """Returns local midnight in the named timezone for a date in yyyy-mm-dd format."""
    try:
        parsed = datetime.strptime(text, INPUT_DATE_FORMAT)
    except (TypeError, ValueError) as e:
        raise spa.InvalidInputError('Could not parse date {!r}: {}'.format(text, e)) from e
    return parsed.replace(tzinfo=_zone(zone_name))


def format_input_date(when):
    """Returns the date of a datetime in yyyy-mm-dd format."""
    return when.strftime(INPUT_DATE_FORMAT)


def rezone_keep_local_time(when, zone_name):
    """Moves a datetime into the named timezone without changing its wall clock time."""
    return when.replace(tzinfo=_zone(zone_name))


def _position_at(position, when):
    """Returns the position for the same observer and conditions at a different time."""
    return spa.compute_solar_position(
        when, position.latitude, position.longitude, elevation=position.elevation,
        temperature=position.temperature, pressure=position.pressure,
        delta_ut1=position.delta_ut1, atmos_refract=position.atmos_refract,
        century_days=position.century_days)


def sun_event_azimuths(position):
    """Returns the (sunrise, sunset) navigator azimuths in degrees for the day of a SolarPosition,
    each None if the sun does not rise or set that day."""
    rts = spa.compute_rise_set_transit(position)
    if not rts.rises_and_sets:
        return (None, None)
    return (_position_at(position, rts.sunrise).azimuth,
            _position_at(position, rts.sunset).azimuth)


def _locate_event(event, latitude, longitude, when, elevation, temperature, pressure, distance):
    """Returns (observer, zone name, time, azimuth, point) for the 'sunrise' or 'sunset' of the
    local day of when."""
    observer = GeoPoint(latitude, longitude)
    zone_name = timezone_name_at(latitude, longitude)
    if when is None:
        when = today_in_zone(zone_name)
    elif when.tzinfo is None:
        when = rezone_keep_local_time(when, zone_name)

    position = spa.compute_solar_position(when, latitude, longitude, elevation=elevation,
                                          temperature=temperature, pressure=pressure)
    moment = getattr(spa.compute_rise_set_transit(position), event)
    if moment == spa.NO_RISE_SET:
        log.debug('No %s at %s on %s', event, observer, format_input_date(when))
        return (observer, zone_name, None, None, None)

    # The azimuth must be taken at the event itself, not at the time supplied.
    azimuth = _position_at(position, moment).azimuth
    return (observer, zone_name, moment, azimuth, project_point(observer, distance, azimuth))


def locate_sunset(latitude, longitude, when=None, elevation=DEFAULT_ELEVATION,
                  temperature=DEFAULT_TEMPERATURE, pressure=spa.DEFAULT_PRESSURE,
                  distance=HORIZON_DISTANCE):
    """Finds the sunset on the local day of when (today if not supplied) for an observer, and
    the point distance meters away in the direction of the setting sun. A naive when is taken
    as a wall clock time in the observer's timezone."""
    return SunsetLocation(*_locate_event('sunset', latitude, longitude, when, elevation,
                                         temperature, pressure, distance))


def locate_sunrise(latitude, longitude, when=None, elevation=DEFAULT_ELEVATION,
                   temperature=DEFAULT_TEMPERATURE, pressure=spa.DEFAULT_PRESSURE,
                   distance=HORIZON_DISTANCE):
    """Finds the sunrise on the local day of when and the point distance meters away in the
    direction of the rising sun, in the same way as locate_sunset."""
    return SunriseLocation(*_locate_event('sunrise', latitude, longitude, when, elevation,
                                          temperature, pressure, distance))


def map_state(location, horizon_radius=HORIZON_DISTANCE):
    """Returns the MapState showing a SunsetLocation."""
    return MapState(location.observer, location.point, horizon_radius)


def render(state):
    """Returns the tuple of draw commands that display a MapState."""
    sunset = state.sunset if state.sunset is not None else state.observer
    return (
        Marker(state.observer),
        Circle(state.observer, state.horizon_radius, 'red', 2),
        Marker(sunset),
        Polyline((state.observer, sunset), 'blue', 1),
    )


def describe(location):
    """Returns a single line summary of a SunsetLocation."""
    if location.sunset is None:
        return 'No sunset at {:.6f}, {:.6f} ({})'.format(
            location.observer.lat, location.observer.lng, location.zone_name)
    return '{} sunset at {} azimuth {:.2f} toward {:.6f}, {:.6f}'.format(
        format_input_date(location.sunset), location.sunset.strftime('%H:%M:%S %Z'),
        location.azimuth, location.point.lat, location.point.lng)


def main(argv=None):
    """Prints the sunset time and direction for an observer over one or more days."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument('--lat', type=float, default=DEFAULT_OBSERVER.lat,
                        help='Observer latitude in degrees, north positive')
    parser.add_argument('--lng', type=float, default=DEFAULT_OBSERVER.lng,
                        help='Observer longitude in degrees, east positive')
    parser.add_argument('--date', default=None, help='First date as YYYY-MM-DD (default today)')
    parser.add_argument('--days', type=int, default=1, help='Number of days to report')
    parser.add_argument('--elevation', type=float, default=DEFAULT_ELEVATION,
                        help='Observer elevation in meters')
    parser.add_argument('--temperature', type=float, default=DEFAULT_TEMPERATURE,
                        help='Air temperature in celsius')
    parser.add_argument('--pressure', type=float, default=None,
                        help='Air pressure in millibars (default estimated from elevation)')
    parser.add_argument('--distance', type=float, default=HORIZON_DISTANCE,
                        help='Distance to the projected sunset point in meters')
    parser.add_argument('--verbose', action='store_true', help='Enable debug logging')
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    pressure = (args.pressure if args.pressure is not None
                else spa.pressure_at_elevation(args.elevation))
    try:
        zone_name = timezone_name_at(args.lat, args.lng)
        start = (date_from_input(args.date, zone_name) if args.date is not None
                 else today_in_zone(zone_name))
        for day in range(args.days):
            location = locate_sunset(args.lat, args.lng, start + timedelta(days=day),
                                     elevation=args.elevation, temperature=args.temperature,
                                     pressure=pressure, distance=args.distance)
            print(describe(location))
    except ValueError as e:
        print('Error: {}'.format(e))
        return 1
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
