from dataclasses import dataclass
from typing import Optional
from ..datatypes import FlowState, FormulaVariant, FormulaCandidates


# (fittings present, regime) -> formula, for turbulent flow
_DECISION_TABLE = {
    (False, FlowState.NON_CHOKED): FormulaVariant.NON_CHOKED,
    (False, FlowState.CHOKED): FormulaVariant.CHOKED,
    (True, FlowState.NON_CHOKED): FormulaVariant.NON_CHOKED_FITTINGS,
    (True, FlowState.CHOKED): FormulaVariant.CHOKED_FITTINGS,
}


def select_formula(FR, has_fittings, regime):
    """
    Pick the Kv formula for a call.

    The laminar formula takes precedence whenever FR < 1, regardless of the
    choked/non-choked regime.

    Args:
        FR (float): Reynolds number correction factor.
        has_fittings (bool): Whether reducers/expanders are attached.
        regime (FlowState): Regime for the chosen fitting case.

    Returns:
        FormulaVariant
    """
    if FR < 1:
        return FormulaVariant.LAMINAR
    return _DECISION_TABLE[(has_fittings, regime)]


@dataclass(frozen=True)
class SizingResult:
    """Chosen Kv plus the diagnostics that led to it."""
    kv: float
    variant: FormulaVariant
    flow_state: FlowState
    candidates: FormulaCandidates
    FP: float
    FLP: Optional[float] = None
    FP_assumed: Optional[float] = None
    critical_dP: Optional[float] = None
    FF: Optional[float] = None
    xF: Optional[float] = None
    xFz: Optional[float] = None
    fluid_state: Optional[object] = None
    x: Optional[float] = None
    Fgamma: Optional[float] = None
    Y: Optional[float] = None
    xTP: Optional[float] = None


def resolve(candidates, FR, has_fittings, regime, regime_fittings):
    """
    Apply select_formula and report the regime that belongs to it.

    Returns:
        tuple: (kv, variant, flow_state)
    """
    regime_used = regime_fittings if has_fittings else regime
    variant = select_formula(FR, has_fittings, regime_used)
    if variant is FormulaVariant.LAMINAR:
        # Laminar sizing reports the fitting-free regime
        regime_used = regime
    return candidates[variant], variant, regime_used
