import pytest
import math
import numpy as np
from dataclasses import replace
import kvCalc as kc


@pytest.fixture
def water():
    return kc.EngineeringInput(
        fluid_type='Liquid', flow_rate=80, flow_unit='m3/h',
        inlet_pressure=1.5, outlet_pressure=0.2, pressure_unit='MPa(G)',
        temperature=40, temperature_unit='℃', density=995,
        density_unit='Kg/m3', viscosity=0.8, viscosity_unit='cP',
        viscosity_type='Dynamic Viscosity', valve_size=100, FL=0.85,
        rated_kv=250, flow_characteristic='Equal Percentage',
        rangeability=50)


@pytest.fixture
def air():
    return kc.EngineeringInput(
        fluid_type='Gas', flow_rate=5000, flow_unit='Nm3/h',
        inlet_pressure=0.6, outlet_pressure=0.1, pressure_unit='MPa(G)',
        temperature=20, temperature_unit='℃', density=1.293,
        density_unit='Kg/Nm3', molecular_weight=29, gamma=1.4,
        valve_size=100, FL=0.9, xT=0.72, rated_kv=250)


@pytest.fixture
def steam():
    return kc.EngineeringInput(
        fluid_type='Steam', flow_rate=2000, flow_unit='Kg/h',
        inlet_pressure=1.0, outlet_pressure=0.5, pressure_unit='MPa(G)',
        temperature=200, temperature_unit='℃', density=5.15,
        density_unit='Kg/m3', gamma=1.3, valve_size=80, FL=0.9, xT=0.72,
        rated_kv=160)


def test_input_coercion(water):
    assert water.fluid_type is kc.FluidType.LIQUID
    assert water.pressure_unit is kc.PressureUnit.MPA_G
    assert water.viscosity_unit is kc.ViscosityUnit.CP
    assert water.flow_characteristic is \
        kc.FlowCharacteristic.EQUAL_PERCENTAGE
    assert water.valve_internals is None


@pytest.mark.parametrize("field, value", [
    ('fluid_type', 'Plasma'),
    ('pressure_unit', 'psi(G)'),
    ('flow_characteristic', 'Butterfly'),
    ('temperature_unit', 'Rankine'),
])
def test_invalid_tags(water, field, value):
    with pytest.raises(ValueError):
        replace(water, **{field: value})


def test_invalid_unit_for_fluid(water, steam):
    with pytest.raises(ValueError):
        kc.calculate(replace(water, flow_unit='Nm3/h'))
    with pytest.raises(ValueError):
        kc.calculate(replace(steam, flow_unit='Nm3/h'))
    with pytest.raises(ValueError):
        kc.calculate(replace(water, viscosity_type='Kinematic Viscosity'))


def test_liquid_scenario(water):
    result = kc.calculate_with_noise(water)

    assert result.valid
    assert result.flow_state is kc.FlowState.CHOKED
    assert result.turbulence_state is kc.TurbulenceState.TURBULENT
    # xF = 0.82 exceeds FL**2 = 0.72
    assert result.fluid_state is kc.FluidState.CAVITATION
    assert 20 < result.kv < 30
    assert math.isclose(result.kv, 23.52, abs_tol=0.02)
    assert math.isclose(result.cv, result.kv*1.156, rel_tol=1e-12)
    assert 30 < result.opening < 50
    assert result.formula is kc.FormulaVariant.CHOKED
    assert result.used_formula == 'Liquid choked flow without fittings'
    assert not result.has_fittings

    iv = result.intermediate
    assert math.isclose(iv.P1, 1600, rel_tol=1e-12)
    assert math.isclose(iv.P2, 300, rel_tol=1e-12)
    assert math.isclose(iv.T1, 313.15, rel_tol=1e-12)
    assert math.isclose(iv.Pv, 7.3588, abs_tol=1e-3)
    assert iv.Pc == pytest.approx(22120)
    assert iv.sum_K == 0.0
    assert iv.FP == 1.0
    assert iv.FLP == 0.85
    assert iv.FR == 1.0
    assert math.isclose(iv.kinematic_viscosity, 0.0008/995, rel_tol=1e-9)
    assert iv.saturation_temp > 40
    assert math.isclose(result.outlet_velocity,
                        80/(math.pi*0.1**2/4)/3600, rel_tol=1e-9)

    assert result.noise_result is not None
    assert result.noise_result.state is \
        kc.CavitationState.CONSTANT_CAVITATION
    assert 30 <= result.noise <= 150


def test_gas_scenario(air):
    result = kc.calculate_with_noise(air)

    assert result.valid
    assert result.flow_state is kc.FlowState.NON_CHOKED
    assert result.formula is kc.FormulaVariant.NON_CHOKED
    assert result.fluid_state is None
    assert math.isclose(result.kv, 47.3, abs_tol=0.1)

    iv = result.intermediate
    assert math.isclose(iv.standard_density, 1.293, rel_tol=1e-12)
    assert math.isclose(iv.density, 8.3233, rel_tol=1e-4)
    assert iv.molecular_weight == 29
    assert math.isclose(iv.Y, 1 - (500/700)/2.16, rel_tol=1e-9)
    assert iv.xTP == 0.72
    assert iv.FR == 1.0

    assert result.noise_result.state is kc.GasNoiseState.STATE_IV
    assert 80 <= result.noise <= 110


def test_gas_actual_density(air):
    """An actual inlet density gives the same sizing as its standard one."""
    standard = kc.calculate(air)
    rho1 = standard.intermediate.density
    actual = kc.calculate(replace(air, density=rho1, density_unit='Kg/m3'))

    assert math.isclose(actual.kv, standard.kv, rel_tol=1e-9)
    assert math.isclose(actual.intermediate.standard_density, 1.293,
                        rel_tol=1e-9)


def test_gas_default_molecular_weight(air):
    result = kc.calculate(replace(air, molecular_weight=None))
    assert math.isclose(result.intermediate.molecular_weight, 1.293*22.4,
                        rel_tol=1e-12)


def test_steam_scenario(steam):
    result = kc.calculate_with_noise(steam)

    assert result.valid
    assert not np.isnan(result.kv)
    assert math.isclose(result.kv, 16.13, abs_tol=0.05)
    assert result.flow_state is kc.FlowState.NON_CHOKED
    assert result.intermediate.molecular_weight == 18.0152
    assert 65 <= result.noise <= 100
    assert result.noise_result.state is kc.GasNoiseState.STATE_III


def test_fittings(water):
    result = kc.calculate(replace(water, seat_size=80))

    assert result.has_fittings
    assert result.formula in (kc.FormulaVariant.CHOKED_FITTINGS,
                              kc.FormulaVariant.NON_CHOKED_FITTINGS)
    assert math.isclose(result.intermediate.D1, 102.26, rel_tol=1e-12)
    assert result.intermediate.sum_K > 0
    assert result.intermediate.FP < 1
    assert 'with fittings' in result.used_formula


def test_explicit_pipe(water):
    result = kc.calculate(replace(water, upstream_od=114.3,
                                  upstream_wall=6.02, downstream_od=114.3,
                                  downstream_wall=6.02))
    assert result.has_fittings
    assert math.isclose(result.intermediate.D2, 102.26, rel_tol=1e-12)


def test_laminar_liquid():
    viscous = kc.EngineeringInput(
        fluid_type='Liquid', flow_rate=1, flow_unit='m3/h',
        inlet_pressure=500, outlet_pressure=400, pressure_unit='KPa(A)',
        temperature=20, temperature_unit='℃', density=900,
        density_unit='Kg/m3', viscosity=10000, viscosity_unit='cSt',
        viscosity_type='Kinematic Viscosity', valve_size=15, FL=0.9,
        rated_kv=5)
    result = kc.calculate(viscous)

    assert result.turbulence_state is kc.TurbulenceState.LAMINAR
    assert result.formula is kc.FormulaVariant.LAMINAR
    assert result.intermediate.FR < 1
    assert result.kv == result.intermediate.candidates.C5
    assert result.kv > result.intermediate.candidates.C1


def test_validation_errors(water):
    result = kc.calculate(replace(water, inlet_pressure=0.1,
                                  outlet_pressure=0.2))

    assert not result.valid
    assert 'Inlet pressure must be greater than outlet pressure' in \
        result.errors
    assert isinstance(result.kv, float)


def test_saturation_errors(water):
    # 250 degC water at 0.3 MPa abs boils
    result = kc.calculate(replace(water, temperature=250,
                                  inlet_pressure=0.3, outlet_pressure=0.1,
                                  pressure_unit='MPa(A)'))

    assert 'Medium temperature is above saturation temperature' in \
        result.errors
    assert 'Inlet pressure is below vapor pressure' in result.errors


@pytest.mark.parametrize("changes, message", [
    ({'rated_kv': 0}, 'Rated Kv must be greater than 0'),
    ({'rangeability': 1}, 'Rangeability must be greater than 1'),
    ({'FL': 1.2}, 'FL must be greater than 0 and not exceed 1'),
])
def test_input_invariants(water, changes, message):
    result = kc.calculate(replace(water, **changes))
    assert message in result.errors


@pytest.mark.parametrize("fluid", ['water', 'air', 'steam'])
@pytest.mark.parametrize("FL", [0, -0.5, 1.2])
def test_invalid_FL_is_reported(request, fluid, FL):
    inputs = replace(request.getfixturevalue(fluid), FL=FL)
    result = kc.calculate(inputs)

    assert not result.valid
    assert 'FL must be greater than 0 and not exceed 1' in result.errors
    assert isinstance(result.kv, float)


def test_opening_warnings(water):
    oversized = kc.calculate(replace(water, rated_kv=1000))
    assert oversized.valid
    assert oversized.opening < 10
    assert any('smaller valve' in w for w in oversized.warnings)

    undersized = kc.calculate(replace(water, rated_kv=20))
    assert undersized.valid
    assert undersized.opening > 100
    assert any('undersized' in w for w in undersized.warnings)


def test_noise_optional(air):
    result = kc.calculate_with_noise(air, include_noise=False)
    assert result.noise is None
    assert result.noise_result is None


def test_noise_without_pipe_data(air):
    # No DN90 in the pipe table
    inputs = replace(air, valve_size=90)
    result = kc.calculate_with_noise(inputs)

    assert not np.isnan(result.kv)
    assert result.noise is None

    explicit = kc.calculate_with_noise(replace(inputs, downstream_od=101.6,
                                               downstream_wall=5.74))
    assert explicit.noise is not None


def test_noise_input(air):
    result = kc.calculate(air)
    noise_input = kc.kv_calculator.noise_input(air, result)

    assert noise_input.fluid_type is kc.FluidType.GAS
    assert math.isclose(noise_input.mass_flow, 5000*1.293, rel_tol=1e-12)
    assert math.isclose(noise_input.Di, 102.26, rel_tol=1e-12)
    assert noise_input.tp == 6.02
    assert noise_input.pipe_material is kc.PipeMaterial.STEEL

    # The noise model runs on the outlet density the record carries
    assert math.isclose(noise_input.outlet_density,
                        result.intermediate.density*200/700, rel_tol=1e-12)
    noise = kc.kv_calculator.calculate_noise(air, result)
    assert noise.gas.rho2 == noise_input.outlet_density


def test_result_table(water):
    result = kc.calculate(water)
    text = str(result)

    assert 'Valve Sizing' in text
    assert 'Kv' in text
    assert repr(result) == text


def test_calculator_instance(water):
    calculator = kc.KvCalculator()
    assert calculator.calculate(water).kv == kc.calculate(water).kv
