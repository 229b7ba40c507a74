import pytest
import numpy as np
import kvCalc as kc
from kvCalc.fluid_physics import FF, xF
from kvCalc.regimes import (classify, liquid_critical_dP, liquid_flow_state,
                            gas_flow_state, liquid_fluid_state,
                            cavitation_state, gas_noise_boundaries,
                            gas_noise_state)


def test_classify_ascending():
    states = ['low', 'mid', 'high']
    assert classify(1, [2, 4], states) == 'low'
    assert classify(2, [2, 4], states) == 'low'
    assert classify(2, [2, 4], states, inclusive=False) == 'mid'
    assert classify(5, [2, 4], states) == 'high'


def test_classify_descending():
    states = ['high', 'mid', 'low']
    assert classify(5, [4, 2], states, descending=True) == 'high'
    assert classify(4, [4, 2], states, descending=True) == 'high'
    assert classify(3, [4, 2], states, descending=True) == 'mid'
    assert classify(1, [4, 2], states, descending=True) == 'low'


def test_classify_boundary_count():
    with pytest.raises(ValueError):
        classify(1, [2], ['a', 'b', 'c'])


def _ordinal(state):
    return list(type(state)).index(state)


def test_liquid_regime_consistency():
    P1, Pv, FL = 1600.0, 7.357, 0.85
    critical = liquid_critical_dP(P1, FF(Pv, 22.12), Pv, FL)

    states = [liquid_flow_state(dP, critical)
              for dP in np.linspace(P1, 0.01, 4001)]
    ordinals = [_ordinal(s) for s in states]

    # Choked at large dP, then non-choked for good
    assert states[0] is kc.FlowState.CHOKED
    assert states[-1] is kc.FlowState.NON_CHOKED
    assert all(a <= b for a, b in zip(ordinals, ordinals[1:]))
    assert sum(a != b for a, b in zip(states, states[1:])) == 1

    assert liquid_flow_state(critical, critical) is kc.FlowState.CHOKED
    assert liquid_flow_state(critical*0.999, critical) is \
        kc.FlowState.NON_CHOKED


def test_liquid_critical_dP_with_fittings():
    # FLP/FP = FL recovers the fitting-free threshold
    assert liquid_critical_dP(1000, 0.95, 5, 0.9, FP=0.8, FLP=0.72) == \
        pytest.approx(liquid_critical_dP(1000, 0.95, 5, 0.9))


def test_gas_regime_consistency():
    xT, Fg = 0.72, 1.0
    states = [gas_flow_state(x, Fg, xT) for x in np.linspace(0.99, 0, 2001)]
    ordinals = [_ordinal(s) for s in states]

    assert states[0] is kc.FlowState.CHOKED
    assert states[-1] is kc.FlowState.NON_CHOKED
    assert all(a <= b for a, b in zip(ordinals, ordinals[1:]))
    assert sum(a != b for a, b in zip(states, states[1:])) == 1
    assert gas_flow_state(0.72, 1.0, 0.72) is kc.FlowState.CHOKED


@pytest.mark.parametrize("classifier, enum", [
    (liquid_fluid_state, kc.FluidState),
    (cavitation_state, kc.CavitationState),
])
def test_cavitation_ordering(classifier, enum):
    P1, Pv, FL, xFz = 1600.0, 7.357, 0.85, 0.33

    states = [classifier(xF(P1, P2, Pv), xFz, FL)
              for P2 in np.linspace(P1, 0, 4001)]
    ordinals = [_ordinal(s) for s in states]

    assert all(a <= b for a, b in zip(ordinals, ordinals[1:]))
    assert set(states) == set(enum)


def test_gas_noise_boundaries_ordered():
    bounds = gas_noise_boundaries(1000, 1.4, 0.9)

    assert bounds['Pvcc'] == pytest.approx(528.28, abs=0.01)
    assert (bounds['P2C'] > bounds['Pvcc'] > bounds['P2B']
            > bounds['P2CE'] > 0)
    assert bounds['alpha'] == pytest.approx(bounds['Pvcc']/bounds['P2C'])


def test_gas_noise_state_ordering():
    bounds = gas_noise_boundaries(1000, 1.4, 0.9)

    states = [gas_noise_state(P2, bounds)
              for P2 in np.linspace(1000, 1, 5000)]
    ordinals = [_ordinal(s) for s in states]

    assert all(a <= b for a, b in zip(ordinals, ordinals[1:]))
    assert set(states) == set(kc.GasNoiseState)
    assert gas_noise_state(bounds['P2C'], bounds) is \
        kc.GasNoiseState.STATE_I
    assert gas_noise_state(bounds['P2CE'], bounds) is \
        kc.GasNoiseState.STATE_IV
