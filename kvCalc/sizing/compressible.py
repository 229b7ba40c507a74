from ..datatypes import FormulaCandidates, FlowState
from ..fluid_physics import expansion_factor
from ..regimes import gas_flow_state
from .selection import SizingResult, resolve


def two_pass(kv_flow, kv_choked, kv_laminar, x, Fgamma, xT, geometry, FR):
    """
    Two-stage piping correction shared by gas and steam sizing.

    Pass 1 sizes the valve without fittings. Pass 2, run only when fittings
    are present, evaluates FP and xTP at the pass 1 Kv of the pass 1 regime
    and recomputes the regime, expansion factor and Kv from them.

    Args:
        kv_flow (callable): kv_flow(Y, FP) for non-choked flow.
        kv_choked (callable): kv_choked(xT, FP) for choked flow.
        kv_laminar (callable): kv_laminar(FR) for non-turbulent flow.
        x (float): Pressure differential ratio.
        Fgamma (float): Specific heat ratio factor.
        xT (float): Pressure differential ratio factor.
        geometry (PipeGeometry): Seat and pipe bores.
        FR (float): Reynolds number correction factor.

    Returns:
        SizingResult
    """
    # Pass 1: no fittings
    Y = expansion_factor(x, Fgamma, xT)
    regime = gas_flow_state(x, Fgamma, xT)
    c1 = kv_flow(Y, 1.0)
    c3 = kv_choked(xT, 1.0)

    if geometry.has_fittings:
        # Pass 2: piping correction seeded from pass 1
        C = c3 if regime is FlowState.CHOKED else c1
        FP = geometry.FP(C)
        x_TP = geometry.xTP(xT, C)
        Y_fittings = expansion_factor(x, Fgamma, x_TP)
        regime_fittings = gas_flow_state(x, Fgamma, x_TP)
        c2 = kv_flow(Y_fittings, FP)
        c4 = kv_choked(x_TP, FP)
    else:
        FP, x_TP, Y_fittings, regime_fittings = 1.0, xT, Y, regime
        c2, c4 = c1, c3

    candidates = FormulaCandidates(
        C1=c1, C2=c2, C3=c3, C4=c4,
        C5=kv_laminar(FR) if FR < 1 else None)

    kv, variant, flow_state = resolve(candidates, FR, geometry.has_fittings,
                                      regime, regime_fittings)

    return SizingResult(
        kv=kv, variant=variant, flow_state=flow_state,
        candidates=candidates, FP=FP, x=x, Fgamma=Fgamma,
        Y=Y_fittings if geometry.has_fittings else Y, xTP=x_TP)
