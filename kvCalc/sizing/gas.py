import numpy as np
from ..constants import N9, N18, Y_MIN
from ..fluid_physics import Fgamma as F_gamma, pressure_ratio
from .compressible import two_pass


def gas_kv(Qn, P1, Y, M, Z, T1, x, FP=1.0):
    """Non-choked gas Kv from standard volumetric flow."""
    return Qn/(N9*FP*P1*Y)*np.sqrt(M*Z*T1/x)


def gas_kv_choked(Qn, P1, M, Z, T1, xT, Fgamma, FP=1.0):
    """Choked gas Kv, xT is replaced by xTP with fittings."""
    return Qn/(Y_MIN*N9*FP*P1)*np.sqrt(M*Z*T1/(xT*Fgamma))


def gas_kv_laminar(Qn, FR, M, T1, dP, P1, P2):
    """Non-turbulent gas Kv."""
    return Qn/(N18*FR)*np.sqrt(M*T1/(dP*(P1 + P2)))


def size_gas(Qn, P1, P2, T1, M, Z, gamma, xT, geometry, FR=1.0):
    """
    Gas flow coefficient per IEC 60534-2-1.

    Args:
        Qn (float): Flow at 101.325 kPa and 273.15 K in Nm3/h.
        P1 (float): Inlet absolute pressure in kPa.
        P2 (float): Outlet absolute pressure in kPa.
        T1 (float): Inlet temperature in K.
        M (float): Molar mass in kg/kmol.
        Z (float): Compressibility factor.
        gamma (float): Specific heat ratio.
        xT (float): Pressure differential ratio factor.
        geometry (PipeGeometry): Seat and pipe bores.
        FR (float): Reynolds number correction factor.

    Returns:
        SizingResult
    """
    dP = P1 - P2
    x = pressure_ratio(dP, P1)
    Fg = F_gamma(gamma)

    return two_pass(
        kv_flow=lambda Y, FP: gas_kv(Qn, P1, Y, M, Z, T1, x, FP),
        kv_choked=lambda xT_, FP: gas_kv_choked(Qn, P1, M, Z, T1, xT_, Fg,
                                                FP),
        kv_laminar=lambda FR_: gas_kv_laminar(Qn, FR_, M, T1, dP, P1, P2),
        x=x, Fgamma=Fg, xT=xT, geometry=geometry, FR=FR)
