import numpy as np
from ..constants import N6, N18, Y_MIN, STEAM_MOLECULAR_WEIGHT
from ..fluid_physics import Fgamma as F_gamma, pressure_ratio
from .compressible import two_pass


def steam_kv(W, Y, x, P1, rho1, FP=1.0):
    """Non-choked steam Kv from mass flow and inlet density."""
    return W/(N6*FP*Y*np.sqrt(x*P1*rho1))


def steam_kv_choked(W, Fgamma, xT, P1, rho1, FP=1.0):
    """Choked steam Kv, xT is replaced by xTP with fittings."""
    return W/(Y_MIN*N6*FP*np.sqrt(Fgamma*xT*P1*rho1))


def steam_kv_laminar(W, FR, T1, dP, P1, P2, M=STEAM_MOLECULAR_WEIGHT):
    """Non-turbulent steam Kv."""
    return W/(N18*FR)*np.sqrt(T1/(dP*(P1 + P2)*M))


def size_steam(W, P1, P2, T1, rho1, gamma, xT, geometry, FR=1.0,
               M=STEAM_MOLECULAR_WEIGHT):
    """
    Steam flow coefficient.

    Same regime and expansion logic as gas, with the coefficient formulas
    written on mass flow and inlet density.

    Args:
        W (float): Mass flow in kg/h.
        P1 (float): Inlet absolute pressure in kPa.
        P2 (float): Outlet absolute pressure in kPa.
        T1 (float): Inlet temperature in K.
        rho1 (float): Inlet density in kg/m3.
        gamma (float): Specific heat ratio.
        xT (float): Pressure differential ratio factor.
        geometry (PipeGeometry): Seat and pipe bores.
        FR (float): Reynolds number correction factor.
        M (float): Molar mass in kg/kmol.

    Returns:
        SizingResult
    """
    dP = P1 - P2
    x = pressure_ratio(dP, P1)
    Fg = F_gamma(gamma)

    return two_pass(
        kv_flow=lambda Y, FP: steam_kv(W, Y, x, P1, rho1, FP),
        kv_choked=lambda xT_, FP: steam_kv_choked(W, Fg, xT_, P1, rho1, FP),
        kv_laminar=lambda FR_: steam_kv_laminar(W, FR_, T1, dP, P1, P2, M),
        x=x, Fgamma=Fg, xT=xT, geometry=geometry, FR=FR)
