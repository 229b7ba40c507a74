# __init__.py

from kvCalc.datatypes import (
    FluidType, FlowCharacteristic, PressureUnit, TemperatureUnit, FlowUnit,
    DensityUnit, ViscosityUnit, ViscosityType, FlowState, TurbulenceState,
    FluidState, CavitationState, GasNoiseState, ValveInternals, PipeMaterial,
    FormulaVariant, FormulaCandidates, EngineeringInput, IntermediateValues,
    EngineeringResult, NoiseInput, GasNoiseIntermediate,
    LiquidNoiseIntermediate, NoiseResult)
from kvCalc.units import unit_handler, unit_converter, kv_to_cv, cv_to_kv
from kvCalc.calculator import (KvCalculator, kv_calculator, calculate,
                               calculate_with_noise)
from kvCalc.opening import valve_opening, kv_at_opening, validate_opening
from kvCalc.data import get_pipe_spec

from . import units
from . import piping
from . import fluid_physics
from . import reynolds
from . import regimes
from . import sizing
from . import noise
from . import opening

from kvCalc.logger import logger
from kvCalc.DEFAULTS import DEFAULTS
