"""
Static ASME B36.10M / B36.19M pipe dimensions.

Keyed by nominal size DN (mm). Each entry holds the outer diameter and the
wall thickness per schedule, both in mm. Lookups are by exact key and a
missing key is an ordinary outcome, reported as None.
"""
from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True)
class PipeSpec:
    DN: int
    schedule: str
    OD: float
    wall: float

    @property
    def inner_diameter(self):
        return self.OD - 2 * self.wall


_PIPE_TABLE = {
    6: (10.3, {'40': 1.73, '80': 2.41, 'STD': 1.73, 'XS': 2.41,
               '10S': 1.24, '40S': 1.73, '80S': 2.41}),
    8: (13.7, {'40': 2.24, '80': 3.02, 'STD': 2.24, 'XS': 3.02,
               '10S': 1.65, '40S': 2.24, '80S': 3.02}),
    10: (17.2, {'40': 2.31, '80': 3.32, 'STD': 2.31, 'XS': 3.32,
                '10S': 1.65, '20S': 2.0, '40S': 2.31, '80S': 3.32}),
    15: (21.3, {'40': 2.77, '80': 3.73, '160': 4.78, 'STD': 2.77,
                'XS': 3.73, 'XXS': 7.47, '5S': 1.65, '10S': 2.11,
                '20S': 2.5, '40S': 2.77, '80S': 3.73}),
    20: (26.9, {'40': 2.87, '80': 3.91, '160': 5.56, 'STD': 2.87,
                'XS': 3.91, 'XXS': 7.82, '5S': 1.65, '10S': 2.11,
                '20S': 2.5, '40S': 2.87, '80S': 3.91}),
    25: (33.7, {'40': 3.38, '80': 4.55, '160': 6.35, 'STD': 3.38,
                'XS': 4.55, 'XXS': 9.09, '5S': 1.65, '10S': 2.77,
                '20S': 3.0, '40S': 3.38, '80S': 4.55}),
    32: (42.4, {'40': 3.56, '80': 4.85, '160': 6.35, 'STD': 3.56,
                'XS': 4.85, 'XXS': 9.7, '5S': 1.65, '10S': 2.77,
                '20S': 3.0, '40S': 3.56, '80S': 4.85}),
    40: (48.3, {'40': 3.68, '80': 5.08, '160': 7.14, 'STD': 3.68,
                'XS': 5.08, 'XXS': 10.15, '5S': 1.65, '10S': 2.77,
                '20S': 3.0, '40S': 3.68, '80S': 5.08}),
    50: (60.3, {'40': 3.91, '80': 5.54, '160': 8.74, 'STD': 3.91,
                'XS': 5.54, 'XXS': 11.07, '5S': 1.65, '10S': 2.77,
                '20S': 3.5, '40S': 3.91, '80S': 5.54}),
    65: (76.1, {'40': 5.16, '80': 7.01, '160': 9.53, 'STD': 5.16,
                'XS': 7.01, 'XXS': 14.02, '5S': 2.11, '10S': 3.05,
                '20S': 3.5, '40S': 5.16, '80S': 7.01}),
    80: (88.9, {'40': 5.49, '80': 7.62, '160': 11.13, 'STD': 5.49,
                'XS': 7.62, 'XXS': 15.24, '5S': 2.11, '10S': 3.05,
                '20S': 4.0, '40S': 5.49, '80S': 7.62}),
    100: (114.3, {'40': 6.02, '80': 8.56, '120': 11.13, '160': 13.49,
                  'STD': 6.02, 'XS': 8.56, 'XXS': 17.12, '5S': 2.11,
                  '10S': 3.05, '20S': 4.0, '40S': 6.02, '80S': 8.56}),
    125: (139.7, {'40': 6.55, '80': 9.53, '120': 12.7, '160': 15.88,
                  'STD': 6.55, 'XS': 9.53, 'XXS': 19.05, '5S': 2.77,
                  '10S': 3.4, '20S': 5.0, '40S': 6.55, '80S': 9.53}),
    150: (168.3, {'40': 7.11, '80': 10.97, '120': 14.27, '160': 18.26,
                  'STD': 7.11, 'XS': 10.97, 'XXS': 21.95, '5S': 2.77,
                  '10S': 3.4, '20S': 5.0, '40S': 7.11, '80S': 10.97}),
    200: (219.1, {'20': 6.35, '30': 7.04, '40': 8.18, '60': 10.31,
                  '80': 12.7, '100': 15.09, '120': 18.26, '140': 20.62,
                  '160': 23.01, 'STD': 8.18, 'XS': 12.7, 'XXS': 22.23,
                  '5S': 2.77, '10S': 3.76, '20S': 6.5, '40S': 8.18,
                  '80S': 12.7}),
    250: (273.0, {'20': 6.35, '30': 7.8, '40': 9.27, '60': 12.7,
                  '80': 15.09, '100': 18.26, '120': 21.44, '140': 25.4,
                  '160': 28.58, 'STD': 9.27, 'XS': 12.7, 'XXS': 25.4,
                  '5S': 3.4, '10S': 4.19, '20S': 6.5, '40S': 9.27,
                  '80S': 12.7}),
    300: (323.9, {'20': 6.35, '30': 8.38, '40': 10.31, '60': 14.27,
                  '80': 17.48, '100': 21.44, '120': 25.4, '140': 28.58,
                  '160': 33.32, 'STD': 9.53, 'XS': 12.7, 'XXS': 25.4,
                  '5S': 3.96, '10S': 4.57, '20S': 6.5, '40S': 9.53,
                  '80S': 12.7}),
    # Larger sizes carry schedule 40 only
    350: (355.6, {'40': 11.13}),
    400: (406.4, {'40': 12.27}),
    450: (457.0, {'40': 14.27}),
    500: (508.0, {'40': 15.09}),
    600: (610.0, {'40': 17.45}),
}

PIPE_TABLE = MappingProxyType(
    {dn: (od, MappingProxyType(walls))
     for dn, (od, walls) in _PIPE_TABLE.items()})


def _key(DN):
    if DN is None or DN != int(DN):
        return None
    return int(DN)


def get_pipe_spec(DN, schedule='40'):
    """
    Look up pipe dimensions for a nominal size and schedule.

    Args:
        DN (float): Nominal size in mm.
        schedule (str): Pipe schedule, e.g. '40', '80S', 'XS'.

    Returns:
        PipeSpec or None: None when either key is absent.
    """
    entry = PIPE_TABLE.get(_key(DN))
    if entry is None:
        return None

    OD, walls = entry
    wall = walls.get(str(schedule))
    if wall is None:
        return None

    return PipeSpec(DN=int(DN), schedule=str(schedule), OD=OD, wall=wall)


def available_schedules(DN):
    """Schedules tabulated for a nominal size (empty tuple if unknown)."""
    entry = PIPE_TABLE.get(_key(DN))
    return tuple(entry[1]) if entry else ()


def supported_dns():
    return tuple(sorted(PIPE_TABLE))
