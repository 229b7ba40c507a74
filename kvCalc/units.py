import pint
from .datatypes import (PressureUnit, TemperatureUnit, DensityUnit,
                        FlowUnit, ViscosityUnit, ViscosityType, FluidType)
from .constants import (GAUGE_OFFSET, STD_PRESSURE, STD_TEMPERATURE,
                        KV_TO_CV)
from .unitSystems import CANONICAL


class UnitHandler:
    """Class for handling units using the pint library."""

    def __init__(self):
        """Initialize the UnitHandler with a pint UnitRegistry."""
        self.ureg = pint.UnitRegistry()
        self.Q_ = self.ureg.Quantity

    def convert(self, value, input_unit, output_unit):
        """
        Convert quantities between different units.

        Args:
            value: The numeric value to convert.
            input_unit: The unit of the input value.
            output_unit: The desired unit of the output value.

        Returns:
            float: The converted value in the desired units.
        """
        return self.Q_(value, input_unit).to(output_unit).magnitude


unit_handler = UnitHandler()
unit_converter = unit_handler.convert


# Caller-facing unit tags mapped onto pint unit strings
_PRESSURE_UNITS = {
    PressureUnit.MPA_G: ('MPa', True),
    PressureUnit.MPA_A: ('MPa', False),
    PressureUnit.KPA_G: ('kPa', True),
    PressureUnit.KPA_A: ('kPa', False),
    PressureUnit.BAR_G: ('bar', True),
    PressureUnit.BAR_A: ('bar', False),
}

_TEMPERATURE_UNITS = {
    TemperatureUnit.CELSIUS: 'degC',
    TemperatureUnit.KELVIN: 'kelvin',
    TemperatureUnit.FAHRENHEIT: 'degF',
}

_DENSITY_UNITS = {
    DensityUnit.KG_M3: 'kg/m**3',
    DensityUnit.G_CM3: 'g/cm**3',
    # Standard-state density, magnitude is kept and interpreted by caller
    DensityUnit.KG_NM3: 'kg/m**3',
}

_MASS_FLOW_UNITS = {
    FlowUnit.KG_H: 'kg/hour',
    FlowUnit.KG_S: 'kg/s',
    FlowUnit.T_H: 'tonne/hour',
    FlowUnit.T_S: 'tonne/s',
}

_KINEMATIC_UNITS = {
    ViscosityUnit.M2_S: 'm**2/s',
    ViscosityUnit.MM2_S: 'mm**2/s',
    ViscosityUnit.CST: 'centistokes',
    ViscosityUnit.ST: 'stokes',
}

_DYNAMIC_UNITS = {
    ViscosityUnit.PA_S: 'Pa*s',
    ViscosityUnit.MPA_S: 'mPa*s',
    ViscosityUnit.CP: 'centipoise',
}


def convert_pressure(value, unit):
    """
    Convert a pressure to absolute kPa.

    Gauge units add a fixed 100 kPa atmospheric offset.

    Args:
        value (float): Pressure value.
        unit (PressureUnit or str): Pressure unit tag.

    Returns:
        float: Absolute pressure in kPa.
    """
    pint_unit, gauge = _PRESSURE_UNITS[PressureUnit(unit)]
    kPa = unit_converter(value, pint_unit, 'kPa')
    if gauge:
        kPa += GAUGE_OFFSET
    return kPa


def convert_temperature(value, unit):
    """Convert a temperature to Kelvin."""
    return unit_converter(value, _TEMPERATURE_UNITS[TemperatureUnit(unit)],
                          'kelvin')


def convert_temperature_to_celsius(value, unit):
    """Convert a temperature to degC."""
    return unit_converter(value, _TEMPERATURE_UNITS[TemperatureUnit(unit)],
                          'degC')


def convert_density(value, unit):
    """
    Convert a density to kg/m3.

    A 'Kg/Nm3' density is returned unchanged; it describes the gas at the
    standard reference state and must be corrected with
    standard_to_actual_density before use at line conditions.
    """
    return unit_converter(value, _DENSITY_UNITS[DensityUnit(unit)],
                          CANONICAL.units['DENSITY'])


def standard_to_actual_density(rhoN, P1, T1):
    """
    Ideal-gas correction of a standard-state density to line conditions.

    Args:
        rhoN (float): Density at 101.325 kPa and 273.15 K (kg/Nm3).
        P1 (float): Absolute pressure (kPa).
        T1 (float): Absolute temperature (K).

    Returns:
        float: Actual density in kg/m3.
    """
    return rhoN * P1 * STD_TEMPERATURE / (STD_PRESSURE * T1)


def actual_to_standard_density(rho, P1, T1):
    """Inverse of standard_to_actual_density."""
    return rho * STD_PRESSURE * T1 / (P1 * STD_TEMPERATURE)


def convert_viscosity(value, unit, kind, density):
    """
    Convert a viscosity to kinematic viscosity in m2/s.

    Args:
        value (float): Viscosity value.
        unit (ViscosityUnit or str): Viscosity unit tag.
        kind (ViscosityType or str): Kinematic or dynamic. The generic
            'Viscosity' kind is treated as dynamic.
        density (float): Density in kg/m3, needed for dynamic input.

    Returns:
        float: Kinematic viscosity in m2/s.

    Raises:
        ValueError: If the unit does not match the viscosity kind.
    """
    unit = ViscosityUnit(unit)
    kind = ViscosityType(kind)

    if kind is ViscosityType.KINEMATIC:
        if unit not in _KINEMATIC_UNITS:
            raise ValueError(f"'{unit.value}' is not a kinematic viscosity "
                             "unit")
        return unit_converter(value, _KINEMATIC_UNITS[unit], 'm**2/s')

    if unit not in _DYNAMIC_UNITS:
        raise ValueError(f"'{unit.value}' is not a dynamic viscosity unit")

    mu = unit_converter(value, _DYNAMIC_UNITS[unit], 'Pa*s')
    return mu / density


def convert_liquid_flow(value, unit, density):
    """
    Convert a liquid flow rate to m3/h.

    Args:
        value (float): Flow rate.
        unit (FlowUnit or str): Flow unit tag.
        density (float): Liquid density in kg/m3.

    Returns:
        float: Volumetric flow in m3/h.
    """
    unit = FlowUnit(unit)
    if unit is FlowUnit.M3_H:
        return value
    if unit in _MASS_FLOW_UNITS:
        return unit_converter(value, _MASS_FLOW_UNITS[unit],
                              'kg/hour') / density
    raise ValueError(f"'{unit.value}' is not a valid liquid flow unit")


def convert_gas_flow(value, unit, rhoN, P1, T1):
    """
    Convert a gas flow rate to standard volumetric flow in Nm3/h.

    Args:
        value (float): Flow rate.
        unit (FlowUnit or str): Flow unit tag.
        rhoN (float): Standard-state density in kg/Nm3.
        P1 (float): Inlet absolute pressure in kPa.
        T1 (float): Inlet absolute temperature in K.

    Returns:
        float: Flow at 101.325 kPa and 273.15 K in Nm3/h.
    """
    unit = FlowUnit(unit)
    if unit is FlowUnit.NM3_H:
        return value
    if unit is FlowUnit.M3_H:
        # Actual volume at inlet conditions
        return value * (P1 / STD_PRESSURE) * (STD_TEMPERATURE / T1)
    return unit_converter(value, _MASS_FLOW_UNITS[unit], 'kg/hour') / rhoN


def convert_steam_flow(value, unit, density):
    """
    Convert a steam flow rate to mass flow in kg/h.

    Args:
        value (float): Flow rate.
        unit (FlowUnit or str): Flow unit tag.
        density (float): Inlet steam density in kg/m3.

    Returns:
        float: Mass flow in kg/h.
    """
    unit = FlowUnit(unit)
    if unit is FlowUnit.M3_H:
        return value * density
    if unit in _MASS_FLOW_UNITS:
        return unit_converter(value, _MASS_FLOW_UNITS[unit], 'kg/hour')
    raise ValueError(f"'{unit.value}' is not a valid steam flow unit")


def convert_flow(value, unit, fluid_type, density, rhoN=None, P1=None,
                 T1=None):
    """Dispatch a flow conversion on fluid type."""
    fluid_type = FluidType(fluid_type)
    if fluid_type is FluidType.LIQUID:
        return convert_liquid_flow(value, unit, density)
    elif fluid_type is FluidType.GAS:
        return convert_gas_flow(value, unit, rhoN, P1, T1)
    else:
        return convert_steam_flow(value, unit, density)


def kv_to_cv(kv):
    """Convert a metric Kv (m3/h at 1 bar) to Cv (US gpm at 1 psi)."""
    return kv * KV_TO_CV


def cv_to_kv(cv):
    """Convert Cv to Kv."""
    return cv / KV_TO_CV
