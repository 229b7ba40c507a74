from dataclasses import dataclass
from typing import Optional
import numpy as np
from .constants import N2, N4, TURBULENT_RE
from .datatypes import TurbulenceState
from .regimes import classify


@dataclass(frozen=True)
class ReynoldsResult:
    Rev: float
    FR: float
    turbulence_state: TurbulenceState
    lambda_: float
    lambda2: Optional[float]
    FR1: Optional[float]
    FR2: float


def Rev(Fd, Q, nu, C, FL, D):
    """
    Valve Reynolds number.

    Args:
        Fd (float): Valve style modifier.
        Q (float): Volumetric flow in m3/h.
        nu (float): Kinematic viscosity in m2/s.
        C (float): Flow coefficient (Kv).
        FL (float): Liquid pressure recovery factor.
        D (float): Upstream pipe bore in mm.
    """
    term = (FL**2*C**2/(N2*D**4) + 1)**0.25
    return N4*Fd*Q/(nu*np.sqrt(C*FL))*term


def lambda_(C, d):
    return N2/(C/d**2)**2


def lambda2(sumK, C, d):
    return 1 + sumK*(C/d**2)**(2/3)


def FR1(FL, lam, Re):
    return 1 + (0.33*np.sqrt(FL)/lam**0.25)*np.log10(Re/TURBULENT_RE)


def FR2(FL, lam, Re):
    return 0.026/FL*np.sqrt(lam*Re)


def turbulence_state(Re):
    return classify(Re, [TURBULENT_RE],
                    [TurbulenceState.LAMINAR, TurbulenceState.TURBULENT],
                    inclusive=False)


def reynolds_correction(Q, nu, C, FL, Fd, d, D, sumK=0.0):
    """
    Reynolds number and the non-turbulent correction factor FR.

    Evaluated once from a provisional flow coefficient; FR < 1 switches the
    sizing to the laminar formula.

    Args:
        Q (float): Volumetric flow in m3/h at inlet conditions.
        nu (float): Kinematic viscosity in m2/s.
        C (float): Provisional flow coefficient (Kv).
        FL (float): Liquid pressure recovery factor.
        Fd (float): Valve style modifier.
        d (float): Seat diameter in mm.
        D (float): Upstream pipe bore in mm.
        sumK (float): Sum of fitting coefficients.

    Returns:
        ReynoldsResult
    """
    Re = Rev(Fd, Q, nu, C, FL, D)
    lam = lambda_(C, d)
    lam2 = lambda2(sumK, C, d)
    effective = lam2 if sumK > 0 else lam

    state = turbulence_state(Re)
    fr2 = FR2(FL, effective, Re)
    if state is TurbulenceState.TURBULENT:
        fr1 = FR1(FL, effective, Re)
        FR = min(fr1, fr2, 1.0)
    else:
        fr1 = None
        FR = fr2

    return ReynoldsResult(Rev=Re, FR=FR, turbulence_state=state,
                          lambda_=lam, lambda2=lam2, FR1=fr1, FR2=fr2)
