"""
Boundary classification shared by the sizing and noise models.

Every regime in kvCalc (choked flow, liquid cavitation, gas noise states) is
an ordered set of states separated by boundary values. The helpers here
compute those boundaries and classify against them through one function.
"""
from .datatypes import (FlowState, FluidState, CavitationState,
                        GasNoiseState)


def classify(value, boundaries, states, inclusive=True, descending=False):
    """
    Return the state whose interval contains value.

    States are ordered so that states[k] applies while value is on the
    near side of boundaries[k]; the final state applies beyond the last
    boundary.

    Args:
        value (float): Quantity being classified.
        boundaries (sequence): Monotonic boundary values,
            len(states) - 1 of them.
        states (sequence): Ordered states.
        inclusive (bool): Whether a value equal to a boundary belongs to
            the earlier state.
        descending (bool): True when states advance as value decreases.

    Returns:
        The matching member of states.
    """
    if len(boundaries) != len(states) - 1:
        raise ValueError('classify needs one boundary fewer than states')

    for boundary, state in zip(boundaries, states):
        if descending:
            inside = value >= boundary if inclusive else value > boundary
        else:
            inside = value <= boundary if inclusive else value < boundary
        if inside:
            return state

    return states[-1]


def liquid_critical_dP(P1, FF, Pv, FL, FP=1.0, FLP=None):
    """
    Pressure drop at which liquid flow chokes.

    Without fittings this is FL**2*(P1 - FF*Pv); with fittings FL is replaced
    by FLP/FP.
    """
    ratio = FL if FLP is None else FLP/FP
    return ratio**2*(P1 - FF*Pv)


def liquid_flow_state(dP, critical_dP):
    return classify(dP, [critical_dP],
                    [FlowState.NON_CHOKED, FlowState.CHOKED],
                    inclusive=False)


def gas_flow_state(x, Fgamma, xT):
    """Choked when x reaches Fgamma*xT (xT or the fitting corrected xTP)."""
    return classify(x, [Fgamma*xT],
                    [FlowState.NON_CHOKED, FlowState.CHOKED],
                    inclusive=False)


def liquid_fluid_state(xF, xFz, FL):
    return classify(xF, [xFz, FL**2, 1.0],
                    [FluidState.NO_CAVITATION,
                     FluidState.INCIPIENT_CAVITATION,
                     FluidState.CAVITATION,
                     FluidState.FLASHING])


def cavitation_state(xF, xFzp, FL):
    return classify(xF, [xFzp, FL**2, 1.0],
                    [CavitationState.NO_CAVITATION,
                     CavitationState.INCIPIENT_CAVITATION,
                     CavitationState.CONSTANT_CAVITATION,
                     CavitationState.FLASHING])


def gas_noise_boundaries(P1, gamma, FL):
    """
    Outlet pressure boundaries of the five gas noise states.

    Args:
        P1 (float): Inlet absolute pressure in kPa.
        gamma (float): Specific heat ratio.
        FL (float): Liquid pressure recovery factor.

    Returns:
        dict: Pvcc, P2C, alpha, P2B and P2CE (pressures in kPa).
    """
    Pvcc = P1*(2/(gamma + 1))**(gamma/(gamma - 1))
    P2C = P1 - FL**2*(P1 - Pvcc)
    alpha = Pvcc/P2C
    P2CE = P1/22/alpha
    P2B = P1/alpha*(1/gamma)**(gamma/(gamma - 1))

    return {'Pvcc': Pvcc, 'P2C': P2C, 'alpha': alpha, 'P2B': P2B,
            'P2CE': P2CE}


def gas_noise_state(P2, boundaries):
    return classify(P2, [boundaries['P2C'], boundaries['Pvcc'],
                         boundaries['P2B'], boundaries['P2CE']],
                    list(GasNoiseState), descending=True)
