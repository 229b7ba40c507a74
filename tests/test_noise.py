import pytest
import math
from dataclasses import replace
import kvCalc as kc
from kvCalc.noise import (predict_noise, describe_gas_state, outlet_density,
                          describe_cavitation_state)
from kvCalc.noise.acoustics import (a_weighting, distance_correction,
                                    clamp_level, internal_level)
from kvCalc.noise.gas import transmission_loss as gas_tl
from kvCalc.noise.liquid import xFzp


@pytest.fixture
def air_noise():
    """Air at 700 -> 200 kPa abs through Kv 47.3, DN100 SCH40 outlet."""
    return kc.NoiseInput(
        fluid_type='Gas', P1=700.0, P2=200.0, dP=500.0, T1=293.15,
        mass_flow=5000*1.293, density=8.3233, kv=47.33, cv=54.71, FL=0.9,
        Fd=0.42, Di=102.26, tp=6.02, d=100.0, gamma=1.4,
        molecular_weight=29.0)


@pytest.fixture
def water_noise():
    """Water at 1600 -> 300 kPa abs through Kv 23.5, DN100 SCH40 outlet."""
    return kc.NoiseInput(
        fluid_type='Liquid', P1=1600.0, P2=300.0, dP=1300.0, T1=313.15,
        mass_flow=80*995.0, density=995.0, kv=23.52, cv=27.19, FL=0.85,
        Fd=0.42, Di=102.26, tp=6.02, d=100.0, Pv=7.357)


def test_acoustics_helpers():
    # A-weighting is close to zero at 1 kHz
    assert math.isclose(a_weighting(1000), 0.0, abs_tol=0.01)
    assert a_weighting(0) == 0.0
    assert a_weighting(100) < -15

    assert clamp_level(10) == 30
    assert clamp_level(200) == 150
    assert clamp_level(90.5) == 90.5

    assert 0 < distance_correction(0.10226, 0.00602) < 0.1
    assert internal_level(0, 1.2, 343, 0.1) == 30


def test_gas_transmission_loss():
    TL = gas_tl(0.00602, 5367, 0.10226, 2.378, 343.0)
    assert -80 < TL < -60
    # Heavier wall attenuates more
    assert gas_tl(0.012, 5367, 0.10226, 2.378, 343.0) < TL


def test_gas_noise(air_noise):
    result = predict_noise(air_noise)

    assert result.state is kc.GasNoiseState.STATE_IV
    assert result.flow_state == 'State IV (constant acoustic efficiency)'
    assert 85 < result.noise_level < 97
    assert result.noise_level == round(result.noise_level, 1)
    assert result.liquid is None
    assert result.intermediate is result.gas

    gas = result.gas
    assert gas.Mvc == 1.0
    assert gas.Mj > 1
    assert gas.c2 == gas.c1
    assert math.isclose(gas.rho2, 8.3233*200/700, rel_tol=1e-12)
    assert 100 <= gas.fp <= 10000
    assert math.isclose(result.noise_level,
                        round(gas.Lpe + gas.delta_LA, 1), abs_tol=1e-9)

    assert any('sonic' in w for w in result.warnings)
    assert any('exceeds 85 dBA' in w for w in result.warnings)


def test_gas_noise_outlet_density(air_noise):
    isothermal = predict_noise(air_noise)
    denser = predict_noise(replace(air_noise, outlet_density=4.0))

    assert isothermal.gas.rho2 == outlet_density(8.3233, 700.0, 200.0)
    assert denser.gas.rho2 == 4.0
    assert denser.gas.Lpi > isothermal.gas.Lpi


def test_gas_noise_subsonic(air_noise):
    inputs = replace(air_noise, P2=650.0, dP=50.0, mass_flow=1000.0)
    result = predict_noise(inputs)

    assert result.state is kc.GasNoiseState.STATE_I
    assert result.gas.Mvc < 1
    assert result.noise_level < predict_noise(air_noise).noise_level


def test_liquid_noise(water_noise):
    result = predict_noise(water_noise)

    assert result.state is kc.CavitationState.CONSTANT_CAVITATION
    assert result.flow_state == 'Constant Cavitation'
    assert 30 <= result.noise_level <= 150
    assert result.gas is None

    liquid = result.liquid
    assert liquid.xFzp < liquid.xF < 1
    assert liquid.eta_cav > 0
    assert liquid.rw == 0.25
    assert math.isclose(liquid.dPc, 0.7225*(1600 - 7.357), rel_tol=1e-12)
    assert math.isclose(result.noise_level,
                        round(min(max(liquid.Lpi + liquid.TL + 3, 30), 150),
                              1),
                        abs_tol=1e-9)

    assert any('constant cavitation' in w for w in result.warnings)
    assert any('erosion' in w for w in result.warnings)


def test_liquid_noise_turbulent(water_noise):
    inputs = replace(water_noise, P2=1500.0, dP=100.0, kv=79.8, cv=92.25)
    result = predict_noise(inputs)

    assert result.state is kc.CavitationState.NO_CAVITATION
    assert result.flow_state == 'Turbulent'
    assert result.liquid.eta_cav == 0


def test_liquid_noise_flashing(water_noise):
    inputs = replace(water_noise, P2=5.0, dP=1595.0)
    result = predict_noise(inputs)

    assert result.state is kc.CavitationState.FLASHING
    assert result.noise_level == 0.0
    assert result.warnings == ['Medium is flashing, noise calculation not '
                               'accurate']


def test_liquid_noise_options(water_noise):
    steel = predict_noise(water_noise)
    stainless = predict_noise(replace(water_noise, pipe_material='stainless'))
    multistage = predict_noise(replace(
        water_noise, valve_internals=kc.ValveInternals.MULTISTAGE))

    assert stainless.liquid.TL < steel.liquid.TL
    assert stainless.noise_level <= steel.noise_level
    assert multistage.liquid.rw == 0.15
    assert multistage.liquid.xFz != steel.liquid.xFz


def test_xFzp():
    # Equal to xFz at the 6 bar reference pressure
    assert math.isclose(xFzp(0.3, 600), 0.3, rel_tol=1e-12)
    assert xFzp(0.3, 1600) < 0.3


@pytest.mark.parametrize("P1, P2, mass_flow, kv", [
    (700.0, 690.0, 100.0, 10.0),
    (700.0, 500.0, 3000.0, 30.0),
    (2000.0, 300.0, 20000.0, 40.0),
    (5000.0, 120.0, 80000.0, 80.0),
])
def test_gas_noise_clamp(air_noise, P1, P2, mass_flow, kv):
    density = 8.3233*P1/700
    inputs = replace(air_noise, P1=P1, P2=P2, dP=P1 - P2,
                     mass_flow=mass_flow, kv=kv, cv=kv*1.156,
                     density=density)
    result = predict_noise(inputs)
    assert 30 <= result.noise_level <= 150


@pytest.mark.parametrize("P2, kv", [
    (1590.0, 5.0),
    (1200.0, 40.0),
    (400.0, 24.0),
])
def test_liquid_noise_clamp(water_noise, P2, kv):
    inputs = replace(water_noise, P2=P2, dP=1600 - P2, kv=kv,
                     cv=kv*1.156)
    result = predict_noise(inputs)
    assert 30 <= result.noise_level <= 150


def test_state_descriptions():
    assert 'sonic' in describe_gas_state('State III')
    assert 'choked' in describe_gas_state(kc.GasNoiseState.STATE_V)
    assert 'vaporizing' in describe_cavitation_state('Flashing')


def test_noise_result_table(air_noise):
    text = str(predict_noise(air_noise))
    assert 'Valve Noise' in text
    assert 'State IV' in text
