from dataclasses import dataclass


_DISPLAY_FORMAT = {
    # Temperature units
    'degC': '°C',                      # Celsius
    'degF': '°F',                      # Fahrenheit
    'degK': 'K',                       # Kelvin

    # Compound units
    'kg/m**3': 'kg/m³',                # Density
    'm**3/hour': 'm³/h',               # Volumetric flow
    'kg/hour': 'kg/h',                 # Mass flow
    'Nm**3/hour': 'Nm³/h',             # Standard volumetric flow
    'm**2/s': 'm²/s',                  # Kinematic viscosity
    'm/s': 'm/s',                      # Velocity
    'Pa*s': 'Pa·s',                    # Pascal-second

    # Basic units without changes
    'kPa': 'kPa',                      # Kilopascal
    'mm': 'mm',                        # Millimeter
    'Hz': 'Hz',                        # Hertz
    'W': 'W',                          # Watt
    'dBA': 'dB(A)',                    # A-weighted sound level
    '%': '%',                          # Valve travel
    }


@dataclass
class CANONICAL:
    """
    Canonical calculation units.

    Every converter in kvCalc.units normalizes into these units before
    any sizing or noise formula is evaluated.
    """
    units = {
        'PRESSURE': 'kPa',                 # Kilopascal, absolute
        'TEMPERATURE': 'degK',             # Kelvin
        'DENSITY': 'kg/m**3',              # Kilogram per cubic meter
        'VOLUMETRICFLOW': 'm**3/hour',     # Liquid volumetric flow
        'STDVOLUMETRICFLOW': 'Nm**3/hour',  # Gas flow at 101.325 kPa, 0 degC
        'MASSFLOW': 'kg/hour',             # Steam mass flow
        'VISCOSITY': 'm**2/s',             # Kinematic viscosity
        'LENGTH': 'mm',                    # Valve and pipe dimensions
        'VELOCITY': 'm/s',                 # Outlet velocity
        'FREQUENCY': 'Hz',                 # Peak frequency
        'POWER': 'W',                      # Acoustic power
        'NOISE': 'dBA',                    # Sound pressure level at 1 m
        'OPENING': '%',                    # Valve travel
    }
