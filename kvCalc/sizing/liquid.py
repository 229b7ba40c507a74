from ..constants import N1, CI_FACTOR
from ..datatypes import FormulaCandidates, ValveInternals
from ..fluid_physics import FF, relative_density, xF, xFz
from ..regimes import (liquid_critical_dP, liquid_flow_state,
                       liquid_fluid_state)
from .selection import SizingResult, resolve
import numpy as np


def C1(Q, G, dP):
    """Non-choked, no fittings."""
    return Q/N1*np.sqrt(G/dP)


def C2(Q, FP, G, dP):
    """Non-choked, with fittings."""
    return Q/(N1*FP)*np.sqrt(G/dP)


def C3(Q, FL, G, P1, FF, Pv):
    """Choked, no fittings."""
    return Q/(N1*FL)*np.sqrt(G/(P1 - FF*Pv))


def C4(Q, FLP, G, P1, FF, Pv):
    """Choked, with fittings."""
    return Q/(N1*FLP)*np.sqrt(G/(P1 - FF*Pv))


def C5(Q, FR, G, dP):
    """Non-turbulent flow."""
    return Q/(N1*FR)*np.sqrt(G/dP)


def size_liquid(Q, P1, P2, density, Pv, Pc, FL, Fd, geometry, rated_kv,
                FR=1.0, internals=ValveInternals.STANDARD):
    """
    Liquid flow coefficient per IEC 60534-2-1.

    FP and FLP are evaluated at an assumed coefficient of 1.3 times the
    rated Kv. All five candidates are computed; the cavitation state is
    reported alongside but does not influence the choice.

    Args:
        Q (float): Volumetric flow in m3/h.
        P1 (float): Inlet absolute pressure in kPa.
        P2 (float): Outlet absolute pressure in kPa.
        density (float): Liquid density in kg/m3.
        Pv (float): Vapor pressure in kPa.
        Pc (float): Critical pressure in MPa.
        FL (float): Liquid pressure recovery factor.
        Fd (float): Valve style modifier.
        geometry (PipeGeometry): Seat and pipe bores.
        rated_kv (float): Rated Kv of the valve.
        FR (float): Reynolds number correction factor.
        internals (ValveInternals): Trim type for the xFz correlation.

    Returns:
        SizingResult
    """
    dP = P1 - P2
    G = relative_density(density)
    ff = FF(Pv, Pc)

    Ci = rated_kv*CI_FACTOR
    FP = geometry.FP(Ci)
    FLP = geometry.FLP(FL, Ci)

    critical = liquid_critical_dP(P1, ff, Pv, FL)
    critical_fittings = liquid_critical_dP(P1, ff, Pv, FL, FP, FLP)
    regime = liquid_flow_state(dP, critical)
    regime_fittings = liquid_flow_state(dP, critical_fittings)

    candidates = FormulaCandidates(
        C1=C1(Q, G, dP),
        C2=C2(Q, FP, G, dP),
        C3=C3(Q, FL, G, P1, ff, Pv),
        C4=C4(Q, FLP, G, P1, ff, Pv),
        C5=C5(Q, FR, G, dP) if FR < 1 else None)

    x_F = xF(P1, P2, Pv)
    x_Fz = xFz(candidates.C1, FL, Fd, internals)
    fluid_state = liquid_fluid_state(x_F, x_Fz, FL)

    kv, variant, flow_state = resolve(candidates, FR, geometry.has_fittings,
                                      regime, regime_fittings)

    return SizingResult(
        kv=kv, variant=variant, flow_state=flow_state,
        candidates=candidates, FP=FP, FLP=FLP, FP_assumed=FP,
        critical_dP=critical_fittings if geometry.has_fittings else critical,
        FF=ff, xF=x_F, xFz=x_Fz, fluid_state=fluid_state)
