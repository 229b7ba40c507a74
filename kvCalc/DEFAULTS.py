from dataclasses import dataclass
from typing import Literal
from .constants import WATER_CRITICAL_PRESSURE, STEAM_MOLECULAR_WEIGHT
from .noise.constants import WATER_SOUND_SPEED


@dataclass
class KvSettings:
    """Default values substituted for omitted valve sizing inputs."""
    Z: float = 1.0
    gamma: float = 1.4
    Fd: float = 0.42
    xT: float = 0.72
    Pc: float = WATER_CRITICAL_PRESSURE     # MPa
    rangeability: float = 50.0
    liquid_viscosity_cP: float = 1.0
    gas_viscosity_cP: float = 0.018
    steam_molecular_weight: float = STEAM_MOLECULAR_WEIGHT
    liquid_sound_speed: float = WATER_SOUND_SPEED  # m/s
    pipe_material: Literal['steel', 'stainless'] = 'steel'
    pipe_schedule: str = '40'
    valve_internals: Literal[
        'Standard', 'Multi-stage Pressure Reduction'] = 'Standard'


# Create the default instance
DEFAULTS = KvSettings()
