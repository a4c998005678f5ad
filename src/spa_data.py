"""Coefficient tables for the NREL Solar Position Algorithm (Reda & Andreas, NREL/TP-560-34302,
revised 2008). Tables follow the appendix of the report: the Earth periodic terms (Table A4.2),
the periodic terms for nutation (Table A4.3) and the ΔT quarter-year predictions used when the
caller does not supply ΔT explicitly. Everything in here is an immutable tuple."""

#==============================================================
# Copyright Jody M Sankey 2020
#
# This software may be modified and distributed under the terms
# of the MIT license. See the LICENCE.md file for details.
#==============================================================
# PublicPermissions: True
#==============================================================

# Column alignment matters more than naming convention in the tables below.
# pylint: disable=bad-whitespace,invalid-name


# Earth periodic terms, each row is (index, A, B, C) and contributes A * cos(B + C * JME).

L0 = (
    ( 0,  175347046, 0,         0 ),
    ( 1,  3341656,   4.6692568, 6283.07585 ),
    ( 2,  34894,     4.6261,    12566.1517 ),
    ( 3,  3497,      2.7441,    5753.3849 ),
    ( 4,  3418,      2.8289,    3.5231 ),
    ( 5,  3136,      3.6277,    77713.7715 ),
    ( 6,  2676,      4.4181,    7860.4194 ),
    ( 7,  2343,      6.1352,    3930.2097 ),
    ( 8,  1324,      0.7425,    11506.7698 ),
    ( 9,  1273,      2.0371,    529.691 ),
    ( 10, 1199,      1.1096,    1577.3435 ),
    ( 11, 990,       5.233,     5884.927 ),
    ( 12, 902,       2.045,     26.298 ),
    ( 13, 857,       3.508,     398.149 ),
    ( 14, 780,       1.179,     5223.694 ),
    ( 15, 753,       2.533,     5507.553 ),
    ( 16, 505,       4.583,     18849.228 ),
    ( 17, 492,       4.205,     775.523 ),
    ( 18, 357,       2.92,      0.067 ),
    ( 19, 317,       5.849,     11790.629 ),
    ( 20, 284,       1.899,     796.298 ),
    ( 21, 271,       0.315,     10977.079 ),
    ( 22, 243,       0.345,     5486.778 ),
    ( 23, 206,       4.806,     2544.314 ),
    ( 24, 205,       1.869,     5573.143 ),
    ( 25, 202,       2.458,     6069.777 ),
    ( 26, 156,       0.833,     213.299 ),
    ( 27, 132,       3.411,     2942.463 ),
    ( 28, 126,       1.083,     20.775 ),
    ( 29, 115,       0.645,     0.98 ),
    ( 30, 103,       0.636,     4694.003 ),
    ( 31, 102,       0.976,     15720.839 ),
    ( 32, 102,       4.267,     7.114 ),
    ( 33, 99,        6.21,      2146.17 ),
    ( 34, 98,        0.68,      155.42 ),
    ( 35, 86,        5.98,      161000.69 ),
    ( 36, 85,        1.3,       6275.96 ),
    ( 37, 85,        3.67,      71430.7 ),
    ( 38, 80,        1.81,      17260.15 ),
    ( 39, 79,        3.04,      12036.46 ),
    ( 40, 75,        1.76,      5088.63 ),
    ( 41, 74,        3.5,       3154.69 ),
    ( 42, 74,        4.68,      801.82 ),
    ( 43, 70,        0.83,      9437.76 ),
    ( 44, 62,        3.98,      8827.39 ),
    ( 45, 61,        1.82,      7084.9 ),
    ( 46, 57,        2.78,      6286.6 ),
    ( 47, 56,        4.39,      14143.5 ),
    ( 48, 56,        3.47,      6279.55 ),
    ( 49, 52,        0.19,      12139.55 ),
    ( 50, 52,        1.33,      1748.02 ),
    ( 51, 51,        0.28,      5856.48 ),
    ( 52, 49,        0.49,      1194.45 ),
    ( 53, 41,        5.37,      8429.24 ),
    ( 54, 41,        2.4,       19651.05 ),
    ( 55, 39,        6.17,      10447.39 ),
    ( 56, 37,        6.04,      10213.29 ),
    ( 57, 37,        2.57,      1059.38 ),
    ( 58, 36,        1.71,      2352.87 ),
    ( 59, 36,        1.78,      6812.77 ),
    ( 60, 33,        0.59,      17789.85 ),
    ( 61, 30,        0.44,      83996.85 ),
    ( 62, 30,        2.74,      1349.87 ),
    ( 63, 25,        3.16,      4690.48 ))

L1 = (
    ( 0,  628331966747, 0,        0 ),
    ( 1,  206059,       2.678235, 6283.07585 ),
    ( 2,  4303,         2.6351,   12566.1517 ),
    ( 3,  425,          1.59,     3.523 ),
    ( 4,  119,          5.796,    26.298 ),
    ( 5,  109,          2.966,    1577.344 ),
    ( 6,  93,           2.59,     18849.23 ),
    ( 7,  72,           1.14,     529.69 ),
    ( 8,  68,           1.87,     398.15 ),
    ( 9,  67,           4.41,     5507.55 ),
    ( 10, 59,           2.89,     5223.69 ),
    ( 11, 56,           2.17,     155.42 ),
    ( 12, 45,           0.4,      796.3 ),
    ( 13, 36,           0.47,     775.52 ),
    ( 14, 29,           2.65,     7.11 ),
    ( 15, 21,           5.34,     0.98 ),
    ( 16, 19,           1.85,     5486.78 ),
    ( 17, 19,           4.97,     213.3 ),
    ( 18, 17,           2.99,     6275.96 ),
    ( 19, 16,           0.03,     2544.31 ),
    ( 20, 16,           1.43,     2146.17 ),
    ( 21, 15,           1.21,     10977.08 ),
    ( 22, 12,           2.83,     1748.02 ),
    ( 23, 12,           3.26,     5088.63 ),
    ( 24, 12,           5.27,     1194.45 ),
    ( 25, 12,           2.08,     4694 ),
    ( 26, 11,           0.77,     553.57 ),
    ( 27, 10,           1.3,      6286.6 ),
    ( 28, 10,           4.24,     1349.87 ),
    ( 29, 9,            2.7,      242.73 ),
    ( 30, 9,            5.64,     951.72 ),
    ( 31, 8,            5.3,      2352.87 ),
    ( 32, 6,            2.65,     9437.76 ),
    ( 33, 6,            4.67,     4690.48 ))

L2 = (
    ( 0,  52919, 0,      0 ),
    ( 1,  8720,  1.0721, 6283.0758 ),
    ( 2,  309,   0.867,  12566.152 ),
    ( 3,  27,    0.05,   3.52 ),
    ( 4,  16,    5.19,   26.3 ),
    ( 5,  16,    3.68,   155.42 ),
    ( 6,  10,    0.76,   18849.23 ),
    ( 7,  9,     2.06,   77713.77 ),
    ( 8,  7,     0.83,   775.52 ),
    ( 9,  5,     4.66,   1577.34 ),
    ( 10, 4,     1.03,   7.11 ),
    ( 11, 4,     3.44,   5573.14 ),
    ( 12, 3,     5.14,   796.3 ),
    ( 13, 3,     6.05,   5507.55 ),
    ( 14, 3,     1.19,   242.73 ),
    ( 15, 3,     6.12,   529.69 ),
    ( 16, 3,     0.31,   398.15 ),
    ( 17, 3,     2.28,   553.57 ),
    ( 18, 2,     4.38,   5223.69 ),
    ( 19, 2,     3.75,   0.98 ))

L3 = (
    ( 0, 289, 5.844, 6283.076 ),
    ( 1, 35,  0,     0 ),
    ( 2, 17,  5.49,  12566.15 ),
    ( 3, 3,   5.2,   155.42 ),
    ( 4, 1,   4.72,  3.52 ),
    ( 5, 1,   5.3,   18849.23 ),
    ( 6, 1,   5.97,  242.73 ))

L4 = (
    ( 0, 114, 3.142, 0 ),
    ( 1, 8,   4.13,  6283.08 ),
    ( 2, 1,   3.84,  12566.15 ))

L5 = (( 0, 1, 3.14, 0 ),)

B0 = (
    ( 0, 280, 3.199, 84334.662 ),
    ( 1, 102, 5.422, 5507.553 ),
    ( 2, 80,  3.88,  5223.69 ),
    ( 3, 44,  3.7,   2352.87 ),
    ( 4, 32,  4,     1577.34 ))

B1 = (
    ( 0, 9, 3.9,  5507.55 ),
    ( 1, 6, 1.73, 5223.69 ))

R0 = (
    ( 0,  100013989, 0,         0 ),
    ( 1,  1670700,   3.0984635, 6283.07585 ),
    ( 2,  13956,     3.05525,   12566.1517 ),
    ( 3,  3084,      5.1985,    77713.7715 ),
    ( 4,  1628,      1.1739,    5753.3849 ),
    ( 5,  1576,      2.8469,    7860.4194 ),
    ( 6,  925,       5.453,     11506.77 ),
    ( 7,  542,       4.564,     3930.21 ),
    ( 8,  472,       3.661,     5884.927 ),
    ( 9,  346,       0.964,     5507.553 ),
    ( 10, 329,       5.9,       5223.694 ),
    ( 11, 307,       0.299,     5573.143 ),
    ( 12, 243,       4.273,     11790.629 ),
    ( 13, 212,       5.847,     1577.344 ),
    ( 14, 186,       5.022,     10977.079 ),
    ( 15, 175,       3.012,     18849.228 ),
    ( 16, 110,       5.055,     5486.778 ),
    ( 17, 98,        0.89,      6069.78 ),
    ( 18, 86,        5.69,      15720.84 ),
    ( 19, 86,        1.27,      161000.69 ),
    ( 20, 65,        0.27,      17260.15 ),
    ( 21, 63,        0.92,      529.69 ),
    ( 22, 57,        2.01,      83996.85 ),
    ( 23, 56,        5.24,      71430.7 ),
    ( 24, 49,        3.25,      2544.31 ),
    ( 25, 47,        2.58,      775.52 ),
    ( 26, 45,        5.54,      9437.76 ),
    ( 27, 43,        6.01,      6275.96 ),
    ( 28, 39,        5.36,      4694 ),
    ( 29, 38,        2.39,      8827.39 ),
    ( 30, 37,        0.83,      19651.05 ),
    ( 31, 37,        4.9,       12139.55 ),
    ( 32, 36,        1.67,      12036.46 ),
    ( 33, 35,        1.84,      2942.46 ),
    ( 34, 33,        0.24,      7084.9 ),
    ( 35, 32,        0.18,      5088.63 ),
    ( 36, 32,        1.78,      398.15 ),
    ( 37, 28,        1.21,      6286.6 ),
    ( 38, 28,        1.9,       6279.55 ),
    ( 39, 26,        4.59,      10447.39 ))

R1 = (
    ( 0, 103019, 1.10749, 6283.07585 ),
    ( 1, 1721,   1.0644,  12566.1517 ),
    ( 2, 702,    3.142,   0 ),
    ( 3, 32,     1.02,    18849.23 ),
    ( 4, 31,     2.84,    5507.55 ),
    ( 5, 25,     1.32,    5223.69 ),
    ( 6, 18,     1.42,    1577.34 ),
    ( 7, 10,     5.91,    10977.08 ),
    ( 8, 9,      1.42,    6275.96 ),
    ( 9, 9,      0.27,    5486.78 ))

R2 = (
    ( 0, 4359, 5.7846, 6283.0758 ),
    ( 1, 124,  5.579,  12566.152 ),
    ( 2, 12,   3.14,   0 ),
    ( 3, 9,    3.63,   77713.77 ),
    ( 4, 6,    1.87,   5573.14 ),
    ( 5, 3,    5.47,   18849.23 ))

R3 = (
    ( 0, 145, 4.273, 6283.076 ),
    ( 1, 7,   3.92,  12566.15 ))

R4 = (( 0, 4, 2.56, 6283.08 ),)

# Sub-tables ordered by the power of JME they are multiplied with.
EARTH_LONGITUDE = (L0, L1, L2, L3, L4, L5)
EARTH_LATITUDE = (B0, B1)
EARTH_RADIUS = (R0, R1, R2, R3, R4)


# Polynomial coefficients (ascending powers of JCE, degrees) for the nutation arguments X0-X4:
# mean elongation of the moon from the sun, mean anomaly of the sun, mean anomaly of the moon,
# moon's argument of latitude, longitude of the ascending node of the moon's mean orbit.
NUTATION_X_COEFFICIENTS = (
    ( 297.85036, 445267.111480, -0.0019142, 1.0 / 189474 ),
    ( 357.52772, 35999.050340,  -0.0001603, -1.0 / 300000 ),
    ( 134.96298, 477198.867398, 0.0086972,  1.0 / 56250 ),
    ( 93.27191,  483202.017538, -0.0036825, 1.0 / 327270 ),
    ( 125.04452, -1934.136261,  0.0020708,  1.0 / 450000 ))

# Periodic terms for the nutation in longitude and obliquity. Each row is
# (Y0, Y1, Y2, Y3, Y4, a, b, c, d) with a, b, c, d in units of 0.0001 arc seconds.
NUTATION_TERMS = (
    ( 0,  0,  0,  0,  1, -171996, -174.2, 92025, 8.9 ),
    ( -2, 0,  0,  2,  2, -13187,  -1.6,   5736,  -3.1 ),
    ( 0,  0,  0,  2,  2, -2274,   -0.2,   977,   -0.5 ),
    ( 0,  0,  0,  0,  2, 2062,    0.2,    -895,  0.5 ),
    ( 0,  1,  0,  0,  0, 1426,    -3.4,   54,    -0.1 ),
    ( 0,  0,  1,  0,  0, 712,     0.1,    -7,    0 ),
    ( -2, 1,  0,  2,  2, -517,    1.2,    224,   -0.6 ),
    ( 0,  0,  0,  2,  1, -386,    -0.4,   200,   0 ),
    ( 0,  0,  1,  2,  2, -301,    0,      129,   -0.1 ),
    ( -2, -1, 0,  2,  2, 217,     -0.5,   -95,   0.3 ),
    ( -2, 0,  1,  0,  0, -158,    0,      0,     0 ),
    ( -2, 0,  0,  2,  1, 129,     0.1,    -70,   0 ),
    ( 0,  0,  -1, 2,  2, 123,     0,      -53,   0 ),
    ( 2,  0,  0,  0,  0, 63,      0,      0,     0 ),
    ( 0,  0,  1,  0,  1, 63,      0.1,    -33,   0 ),
    ( 2,  0,  -1, 2,  2, -59,     0,      26,    0 ),
    ( 0,  0,  -1, 0,  1, -58,     -0.1,   32,    0 ),
    ( 0,  0,  1,  2,  1, -51,     0,      27,    0 ),
    ( -2, 0,  2,  0,  0, 48,      0,      0,     0 ),
    ( 0,  0,  -2, 2,  1, 46,      0,      -24,   0 ),
    ( 2,  0,  0,  2,  2, -38,     0,      16,    0 ),
    ( 0,  0,  2,  2,  2, -31,     0,      13,    0 ),
    ( 0,  0,  2,  0,  0, 29,      0,      0,     0 ),
    ( -2, 0,  1,  2,  2, 29,      0,      -12,   0 ),
    ( 0,  0,  0,  2,  0, 26,      0,      0,     0 ),
    ( -2, 0,  0,  2,  0, -22,     0,      0,     0 ),
    ( 0,  0,  -1, 2,  1, 21,      0,      -10,   0 ),
    ( 0,  2,  0,  0,  0, 17,      -0.1,   0,     0 ),
    ( 2,  0,  -1, 0,  1, 16,      0,      -8,    0 ),
    ( -2, 2,  0,  2,  2, -16,     0.1,    7,     0 ),
    ( 0,  1,  0,  0,  1, -15,     0,      9,     0 ),
    ( -2, 0,  1,  0,  1, -13,     0,      7,     0 ),
    ( 0,  -1, 0,  0,  1, -12,     0,      6,     0 ),
    ( 0,  0,  2,  -2, 0, 11,      0,      0,     0 ),
    ( 2,  0,  -1, 2,  1, -10,     0,      5,     0 ),
    ( 2,  0,  1,  2,  2, -8,      0,      3,     0 ),
    ( 0,  1,  0,  2,  2, 7,       0,      -3,    0 ),
    ( -2, 1,  1,  0,  0, -7,      0,      0,     0 ),
    ( 0,  -1, 0,  2,  2, -7,      0,      3,     0 ),
    ( 2,  0,  0,  2,  1, -7,      0,      3,     0 ),
    ( 2,  0,  1,  0,  0, 6,       0,      0,     0 ),
    ( -2, 0,  2,  2,  2, 6,       0,      -3,    0 ),
    ( -2, 0,  1,  2,  1, 6,       0,      -3,    0 ),
    ( 2,  0,  -2, 0,  1, -6,      0,      3,     0 ),
    ( 2,  0,  0,  0,  1, -6,      0,      3,     0 ),
    ( 0,  -1, 1,  0,  0, 5,       0,      0,     0 ),
    ( -2, -1, 0,  2,  1, -5,      0,      3,     0 ),
    ( -2, 0,  0,  0,  1, -5,      0,      3,     0 ),
    ( 0,  0,  2,  2,  1, -5,      0,      3,     0 ),
    ( -2, 0,  2,  0,  1, 4,       0,      0,     0 ),
    ( -2, 1,  0,  2,  1, 4,       0,      0,     0 ),
    ( 0,  0,  1,  -2, 0, 4,       0,      0,     0 ),
    ( -1, 0,  1,  0,  0, -4,      0,      0,     0 ),
    ( -2, 1,  0,  0,  0, -4,      0,      0,     0 ),
    ( 1,  0,  0,  0,  0, -4,      0,      0,     0 ),
    ( 0,  0,  1,  2,  0, 3,       0,      0,     0 ),
    ( 0,  0,  -2, 2,  2, -3,      0,      0,     0 ),
    ( -1, -1, 1,  0,  0, -3,      0,      0,     0 ),
    ( 0,  1,  1,  0,  0, -3,      0,      0,     0 ),
    ( 0,  -1, 1,  2,  2, -3,      0,      0,     0 ),
    ( 2,  -1, -1, 2,  2, -3,      0,      0,     0 ),
    ( 0,  0,  3,  2,  2, -3,      0,      0,     0 ),
    ( 2,  -1, 0,  2,  2, -3,      0,      0,     0 ))


# Mean obliquity of the ecliptic in arc seconds, ascending powers of U = JME / 10 (Equation 24).
MEAN_OBLIQUITY_COEFFICIENTS = (
    84381.448, -4680.93, -1.55, 1999.25, -51.38, -249.67, -39.05, 7.12, 27.87, 5.79, 2.45)

# Sun's mean longitude in degrees, ascending powers of JME (Equation A2).
SUN_MEAN_LONGITUDE_COEFFICIENTS = (
    280.4664567, 360007.6982779, 0.03032028, 1.0 / 49931, -1.0 / 15300, -1.0 / 2000000)


# ΔT = TT - UT in seconds at the start of each quarter year, from the USNO predictions
# (maia.usno.navy.mil/ser7/deltat.preds). Lookups outside the table clamp to the end values.
DELTA_T = (
    ( 2019.00, 69.34 ),
    ( 2019.25, 69.48 ),
    ( 2019.50, 69.62 ),
    ( 2019.75, 69.71 ),
    ( 2020.00, 69.87 ),
    ( 2020.25, 70.03 ),
    ( 2020.50, 70.16 ),
    ( 2020.75, 70.24 ),
    ( 2021.00, 70.39 ),
    ( 2021.25, 70.55 ),
    ( 2021.50, 70.68 ),
    ( 2021.75, 70.76 ),
    ( 2022.00, 70.91 ),
    ( 2022.25, 71.06 ),
    ( 2022.50, 71.18 ),
    ( 2022.75, 71.25 ),
    ( 2023.00, 71.40 ),
    ( 2023.25, 71.54 ),
    ( 2023.50, 71.67 ),
    ( 2023.75, 71.74 ),
    ( 2024.00, 71.88 ),
    ( 2024.25, 72.03 ),
    ( 2024.50, 72.15 ),
    ( 2024.75, 72.22 ),
    ( 2025.00, 72.36 ),
    ( 2025.25, 72.50 ),
    ( 2025.50, 72.62 ),
    ( 2025.75, 72.69 ),
    ( 2026.00, 72.83 ),
    ( 2026.25, 72.98 ),
    ( 2026.50, 73.10 ),
    ( 2026.75, 73.17 ),
    ( 2027.00, 73.32 ),
    ( 2027.25, 73.46 ),
    ( 2027.50, 73.58 ),
    ( 2027.75, 73.66 ))
