#!/usr/bin/python3

import unittest
from datetime import date, datetime, timedelta

from dateutil import tz

import geoutil
import spa
from spa import (NO_RISE_SET, NEVER_RISES_OR_SETS, LEGACY_CENTURY_DAYS, InvalidInputError,
                 compute_solar_position, compute_rise_set_transit)

# pylint: disable=missing-function-docstring

# The worked example from NREL/TP-560-34302 Table A4.1.
GOLDEN_ZONE = tz.tzoffset(None, -7 * 3600)
GOLDEN_TIME = datetime(2003, 10, 17, 12, 30, 30, tzinfo=GOLDEN_ZONE)
GOLDEN_LAT = 39.742476
GOLDEN_LNG = -105.1786


def golden_position(**kwargs):
    args = dict(elevation=1830.14, temperature=11, pressure=820, delta_t=67, delta_ut1=0,
                atmos_refract=0.5667)
    args.update(kwargs)
    return compute_solar_position(GOLDEN_TIME, GOLDEN_LAT, GOLDEN_LNG, **args)


def seconds_between(first, second):
    return abs((first - second).total_seconds())


class TestTimeScales(unittest.TestCase):
    """Unit tests covering the conversion between civil time and the julian time scales."""

    def test_julian_day_j2000(self):
        self.assertAlmostEqual(spa.julian_day(datetime(2000, 1, 1, 12, tzinfo=tz.UTC)), 2451545.0)

    def test_julian_day_meeus_example(self):
        # Based on the example p61.
        self.assertAlmostEqual(spa.julian_day(datetime(1957, 10, 4, 18, tzinfo=tz.UTC)),
                               2436116.25)

    def test_julian_day_with_offset(self):
        self.assertAlmostEqual(spa.julian_day(GOLDEN_TIME), 2452930.312847, places=6)

    def test_julian_day_naive_is_utc(self):
        naive = datetime(2003, 10, 17, 19, 30, 30)
        self.assertEqual(spa.julian_day(naive), spa.julian_day(naive.replace(tzinfo=tz.UTC)))

    def test_julian_day_january_shift(self):
        # Jan/Feb count as months 13/14 of the previous year, Meeus p61.
        self.assertAlmostEqual(spa.julian_day(datetime(1987, 1, 27, tzinfo=tz.UTC)), 2446822.5)
        self.assertAlmostEqual(spa.julian_day(datetime(1988, 1, 27, tzinfo=tz.UTC)), 2447187.5)

    def test_julian_day_delta_ut1(self):
        when = datetime(2020, 6, 1, 3, 0, 0, tzinfo=tz.UTC)
        self.assertAlmostEqual(spa.julian_day(when, 0.5) - spa.julian_day(when),
                               0.5 / spa.SEC_IN_DAY, places=9)

    def test_julian_day_rejects_non_datetime(self):
        with self.assertRaises(InvalidInputError):
            spa.julian_day('2003-10-17')

    def test_julian_century(self):
        self.assertEqual(spa.julian_century(spa.J2000), 0.0)
        self.assertAlmostEqual(spa.julian_century(spa.J2000 + 36525.0), 1.0)
        self.assertAlmostEqual(spa.julian_century(spa.J2000 + 35625.0, LEGACY_CENTURY_DAYS), 1.0)

    def test_ephemeris_scales(self):
        jde = spa.julian_ephemeris_day(2452930.312847, 67)
        self.assertAlmostEqual(jde, 2452930.3136225, places=6)
        jce = spa.julian_ephemeris_century(jde)
        self.assertAlmostEqual(jce, 0.037928, places=6)
        self.assertAlmostEqual(spa.julian_ephemeris_millennium(jce), jce / 10)


class TestDeltaT(unittest.TestCase):
    """Unit tests covering the quarter year ΔT lookup."""

    def test_quarters(self):
        self.assertEqual(spa.lookup_delta_t(date(2021, 1, 1)), 70.39)
        self.assertEqual(spa.lookup_delta_t(date(2021, 4, 15)), 70.55)
        self.assertEqual(spa.lookup_delta_t(date(2021, 7, 1)), 70.55)
        self.assertEqual(spa.lookup_delta_t(date(2021, 10, 1)), 70.76)

    def test_last_day_of_year_uses_next_year(self):
        self.assertEqual(spa.lookup_delta_t(date(2021, 12, 31)), 70.91)

    def test_clamps_outside_table(self):
        self.assertEqual(spa.lookup_delta_t(date(2000, 1, 1)), 69.34)
        self.assertEqual(spa.lookup_delta_t(date(2030, 6, 1)), 73.66)
        self.assertEqual(spa.lookup_delta_t(date(2027, 12, 31)), 73.66)

    def test_accepts_datetime(self):
        self.assertEqual(spa.lookup_delta_t(datetime(2024, 2, 1, 23, 0, tzinfo=tz.UTC)), 71.88)

    def test_used_when_not_supplied(self):
        position = compute_solar_position(datetime(2024, 8, 1, tzinfo=tz.UTC), 0, 0)
        self.assertEqual(position.delta_t, 72.15)


class TestSolarPosition(unittest.TestCase):
    """Unit tests covering the solar position against the NREL worked example."""

    def test_heliocentric(self):
        position = golden_position()
        self.assertAlmostEqual(position.l, 24.0182616917, places=6)
        self.assertAlmostEqual(position.b, -0.0001011219, places=9)
        self.assertAlmostEqual(position.r, 0.9965422974, places=7)

    def test_nutation_and_obliquity(self):
        position = golden_position()
        self.assertAlmostEqual(position.del_psi, -0.00399840, places=7)
        self.assertAlmostEqual(position.del_epsilon, 0.00166657, places=7)
        self.assertAlmostEqual(position.epsilon0, 84379.672625, places=3)
        self.assertAlmostEqual(position.epsilon, 23.440465, places=5)
        self.assertEqual(spa.nutation(position.jce), (position.del_psi, position.del_epsilon))

    def test_apparent_position(self):
        position = golden_position()
        self.assertAlmostEqual(position.lamda, 204.0085519281, places=6)
        self.assertAlmostEqual(position.nu, 318.5119, places=3)
        self.assertAlmostEqual(position.alpha, 202.22741, places=4)
        self.assertAlmostEqual(position.delta, -9.31434, places=4)
        self.assertAlmostEqual(position.h, 11.105900, places=4)

    def test_topocentric_position(self):
        position = golden_position()
        self.assertAlmostEqual(position.alpha_prime, 202.22704, places=4)
        self.assertAlmostEqual(position.delta_prime, -9.316179, places=5)
        self.assertAlmostEqual(position.h_prime, 11.10629, places=4)
        self.assertAlmostEqual(position.e0, 39.872046, places=4)
        self.assertAlmostEqual(position.del_e, 0.016332, places=5)
        self.assertAlmostEqual(position.e, 39.888378, places=4)
        self.assertAlmostEqual(position.zenith, 50.11162, places=4)
        self.assertAlmostEqual(position.azimuth, 194.34024, places=4)
        self.assertAlmostEqual(position.azimuth_astro, 14.34024, places=4)

    def test_equation_of_time(self):
        self.assertAlmostEqual(golden_position().eot, 14.641503, places=4)

    def test_ranges(self):
        for hour in range(0, 24, 3):
            position = compute_solar_position(datetime(2022, 3, 1, hour, tzinfo=tz.UTC),
                                              -33.9, 151.2)
            for angle in (position.l, position.theta, position.alpha, position.h,
                          position.azimuth, position.azimuth_astro, position.nu0):
                self.assertGreaterEqual(angle, 0.0)
                self.assertLess(angle, 360.0)
            self.assertGreaterEqual(position.eot, -20.0)
            self.assertLessEqual(position.eot, 20.0)
            self.assertAlmostEqual(position.zenith + position.e, 90.0)

    def test_deterministic(self):
        self.assertEqual(golden_position(), golden_position())

    def test_longitude_normalized(self):
        wrapped = compute_solar_position(GOLDEN_TIME, GOLDEN_LAT, GOLDEN_LNG + 360, delta_t=67)
        position = compute_solar_position(GOLDEN_TIME, GOLDEN_LAT, GOLDEN_LNG, delta_t=67)
        self.assertAlmostEqual(wrapped.longitude, GOLDEN_LNG)
        self.assertAlmostEqual(wrapped.azimuth, position.azimuth, places=9)

    def test_add_days(self):
        position = golden_position()
        later = position.add_days(2)
        self.assertEqual(later.when, GOLDEN_TIME + timedelta(days=2))
        self.assertAlmostEqual(later.jd - position.jd, 2.0, places=7)
        self.assertEqual(later.delta_t, position.delta_t)
        self.assertEqual((later.latitude, later.longitude, later.pressure),
                         (position.latitude, position.longitude, position.pressure))

    def test_legacy_century(self):
        position = golden_position()
        legacy = golden_position(century_days=LEGACY_CENTURY_DAYS)
        self.assertAlmostEqual(legacy.jc, position.jc * 36525.0 / 35625.0)
        self.assertEqual(legacy.jce, position.jce)
        self.assertNotEqual(legacy.nu0, position.nu0)
        self.assertAlmostEqual(legacy.azimuth, position.azimuth, places=4)

    def test_naive_datetime_is_utc(self):
        naive = compute_solar_position(datetime(2003, 10, 17, 19, 30, 30), GOLDEN_LAT, GOLDEN_LNG,
                                       delta_t=67)
        aware = compute_solar_position(GOLDEN_TIME, GOLDEN_LAT, GOLDEN_LNG, delta_t=67)
        self.assertEqual(naive.when.tzinfo, tz.UTC)
        self.assertAlmostEqual(naive.azimuth, aware.azimuth, places=9)

    def test_invalid_inputs(self):
        bad_inputs = (
            dict(latitude=90.5),
            dict(latitude=-91),
            dict(longitude=float('nan')),
            dict(elevation=-7000000),
            dict(pressure=0),
            dict(pressure=5001),
            dict(temperature=-274),
            dict(delta_t=8001),
            dict(delta_ut1=1),
            dict(atmos_refract=5.5),
            dict(elevation=float('inf')),
        )
        for bad in bad_inputs:
            args = dict(latitude=GOLDEN_LAT, longitude=GOLDEN_LNG)
            args.update(bad)
            with self.assertRaises(InvalidInputError, msg=str(bad)):
                compute_solar_position(GOLDEN_TIME, **args)
        with self.assertRaises(InvalidInputError):
            compute_solar_position(date(2003, 10, 17), GOLDEN_LAT, GOLDEN_LNG)

    def test_error_message(self):
        with self.assertRaises(InvalidInputError) as context:
            compute_solar_position(GOLDEN_TIME, 100, 0)
        self.assertIn('100', context.exception.message)

    def test_calendar_limits(self):
        for when in (datetime(1, 1, 1, 6, tzinfo=tz.UTC),
                     datetime(9999, 12, 31, 12, tzinfo=tz.UTC)):
            with self.assertRaises(InvalidInputError, msg=str(when)):
                compute_solar_position(when, 10, 20, delta_t=0)

    def test_shared_error_type(self):
        self.assertIs(InvalidInputError, geoutil.InvalidInputError)


class TestCorrections(unittest.TestCase):
    """Unit tests covering the individual corrections applied to the position."""

    def test_refraction_at_horizon(self):
        self.assertAlmostEqual(spa.atmospheric_refraction_correction(1010, 10, 0.0), 0.483,
                               places=3)

    def test_refraction_below_horizon(self):
        self.assertEqual(spa.atmospheric_refraction_correction(1010, 10, -0.9), 0.0)
        self.assertGreater(spa.atmospheric_refraction_correction(1010, 10, -0.8), 0.0)
        self.assertEqual(spa.atmospheric_refraction_correction(1010, 10, -0.8, 0.4), 0.0)

    def test_equation_of_time_wraps(self):
        self.assertAlmostEqual(spa.equation_of_time(0.0, 355.0, 0.0, 23.44),
                               4 * (-0.0057183 - 355.0) + 1440)
        self.assertAlmostEqual(spa.equation_of_time(356.0, 0.0, 0.0, 23.44),
                               4 * (356.0 - 0.0057183) - 1440)
        self.assertAlmostEqual(spa.equation_of_time(10.0, 8.0, 0.0, 23.44),
                               4 * (2.0 - 0.0057183))

    def test_azimuth_conventions(self):
        self.assertEqual(spa.topocentric_azimuth_angle(0.0), 180.0)
        self.assertEqual(spa.topocentric_azimuth_angle(270.0), 90.0)

    def test_pressure_at_elevation(self):
        self.assertAlmostEqual(spa.pressure_at_elevation(0), 1013.25)
        self.assertAlmostEqual(spa.pressure_at_elevation(1830), 810, delta=1.5)
        self.assertLess(spa.pressure_at_elevation(5000), spa.pressure_at_elevation(1000))


class TestRiseSetTransit(unittest.TestCase):
    """Unit tests covering sunrise, sunset and sun transit."""

    def test_interpolator(self):
        interp = spa.Interpolator([1, 2, 3, 4], [1, 4, 9, 16])
        self.assertAlmostEqual(interp.at(1), 1)
        self.assertAlmostEqual(interp.at(1.5), 2.25)
        self.assertAlmostEqual(interp.at(3.5), 12.25)

    def test_three_point_interpolation(self):
        self.assertAlmostEqual(spa.rts_alpha_delta_prime((10.0, 11.0, 13.0), 0.5), 11.875)
        self.assertAlmostEqual(spa.rts_alpha_delta_prime((10.0, 11.0, 13.0), 0.0), 11.0)

    def test_three_point_interpolation_wraps(self):
        self.assertAlmostEqual(spa.rts_alpha_delta_prime((359.0, 0.0, 1.0), 0.5), 0.5)
        self.assertAlmostEqual(spa.rts_alpha_delta_prime((359.0, 0.0, 1.0), -0.5), -0.5)
        self.assertAlmostEqual(spa.rts_alpha_delta_prime((358.0, 359.0, 0.0), 0.5), 359.5)

    def test_approximate_times(self):
        transit, rise, sunset = spa.approx_sun_rise_and_set(-0.1, 90.0)
        self.assertAlmostEqual(transit, 0.9)
        self.assertAlmostEqual(rise, 0.65)
        self.assertAlmostEqual(sunset, 0.15)
        self.assertAlmostEqual(spa.approx_sun_transit_time(100.0, -85.0, 5.0), 0.5)

    def test_hour_angle_at_rise_set(self):
        self.assertAlmostEqual(spa.sun_hour_angle_at_rise_set(0.0, 0.0, 0.0), 90.0)
        self.assertEqual(spa.sun_hour_angle_at_rise_set(80.0, 23.0, -0.8334), NO_RISE_SET)

    def test_golden(self):
        rts = compute_rise_set_transit(golden_position())
        self.assertTrue(rts.rises_and_sets)
        self.assertLess(seconds_between(rts.sunrise,
                                        datetime(2003, 10, 17, 6, 12, 43, tzinfo=GOLDEN_ZONE)), 5)
        self.assertLess(seconds_between(rts.transit,
                                        datetime(2003, 10, 17, 11, 46, 4, tzinfo=GOLDEN_ZONE)), 5)
        self.assertLess(seconds_between(rts.sunset,
                                        datetime(2003, 10, 17, 17, 20, 19, tzinfo=GOLDEN_ZONE)), 5)
        self.assertEqual(rts.sunset.utcoffset(), timedelta(hours=-7))

    def test_golden_hour_angles(self):
        rts = compute_rise_set_transit(golden_position())
        self.assertLess(abs(rts.transit_hour_angle), 1.0)
        self.assertLess(rts.sunrise_hour_angle, -80.0)
        self.assertGreater(rts.sunset_hour_angle, 80.0)
        self.assertAlmostEqual(rts.transit_altitude, 90 - GOLDEN_LAT - 9.3, delta=0.3)

    def test_same_day_for_any_time_of_day(self):
        midday = compute_rise_set_transit(golden_position())
        # 23:00 local is already the next day in UTC.
        late = compute_solar_position(datetime(2003, 10, 17, 23, 0, tzinfo=GOLDEN_ZONE),
                                      GOLDEN_LAT, GOLDEN_LNG, elevation=1830.14, temperature=11,
                                      pressure=820, delta_t=67)
        self.assertEqual(compute_rise_set_transit(late), midday)

    def test_midnight_sun(self):
        rts = spa.rise_set_transit_at(datetime(2024, 6, 21, 12, tzinfo=tz.UTC), 80.0, 0.0)
        self.assertFalse(rts.rises_and_sets)
        self.assertEqual(rts, NEVER_RISES_OR_SETS)
        for value in rts:
            self.assertEqual(value, NO_RISE_SET)

    def test_polar_night(self):
        rts = spa.rise_set_transit_at(datetime(2024, 12, 21, 12, tzinfo=tz.UTC), 80.0, 0.0)
        self.assertEqual(rts, NEVER_RISES_OR_SETS)

    def test_days_next_to_calendar_limits(self):
        for when in (datetime(1, 1, 2, 6, tzinfo=tz.UTC),
                     datetime(9999, 12, 30, 18, tzinfo=tz.UTC)):
            rts = compute_rise_set_transit(compute_solar_position(when, 10, 20, delta_t=0))
            self.assertTrue(rts.rises_and_sets)
            self.assertEqual(rts.sunrise.date(), when.date())
            self.assertEqual(rts.sunset.date(), when.date())

    def test_dayfrac_to_local(self):
        when = datetime(2003, 10, 17, 12, 30, tzinfo=GOLDEN_ZONE)
        # 0.75 of a day after 0h UT is 18:00 UT, 11:00 local.
        self.assertEqual(spa.dayfrac_to_local(0.75, when),
                         datetime(2003, 10, 17, 11, 0, tzinfo=GOLDEN_ZONE))
        # 0.1 of a day after 0h UT is the previous local evening, wrapped onto the same date.
        self.assertEqual(spa.dayfrac_to_local(0.1, when),
                         datetime(2003, 10, 17, 19, 24, tzinfo=GOLDEN_ZONE))


if __name__ == '__main__':
    unittest.main()
