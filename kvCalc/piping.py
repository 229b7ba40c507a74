from dataclasses import dataclass
import numpy as np
from .constants import N2, N5, BORE_TOLERANCE
from .data.pipe_specs import get_pipe_spec
from .logger import logger


def bore(d, DN, OD=None, wall=None, schedule='40'):
    """
    Resolve the internal diameter of the pipe on one side of the valve.

    Explicit dimensions win. A line-size valve (seat equal to DN) is taken
    to have no reducers. Otherwise the pipe table is consulted, and when it
    has no entry the bore falls back to the seat diameter.

    Args:
        d (float): Valve seat diameter in mm.
        DN (float): Nominal valve size in mm.
        OD (float, optional): Pipe outer diameter in mm.
        wall (float, optional): Pipe wall thickness in mm.
        schedule (str): Pipe schedule for the table lookup.

    Returns:
        float: Pipe internal diameter in mm.
    """
    if OD is not None and wall is not None:
        return OD - 2*wall

    if d == DN:
        return d

    spec = get_pipe_spec(DN, schedule)
    if spec is None:
        logger.debug(f"No pipe data for DN{DN} schedule {schedule}, "
                     "using seat diameter as bore")
        return d

    return spec.inner_diameter


def K1(d, D1):
    """Inlet reducer resistance coefficient."""
    return 0.5*(1 - (d/D1)**2)**2


def K2(d, D2):
    """Outlet expander resistance coefficient."""
    return (1 - (d/D2)**2)**2


def KB1(d, D1):
    """Inlet Bernoulli coefficient."""
    return 1 - (d/D1)**4


def KB2(d, D2):
    """Outlet Bernoulli coefficient."""
    return 1 - (d/D2)**4


def same_bore(d, D1, D2):
    return abs(d - D1) < BORE_TOLERANCE and abs(d - D2) < BORE_TOLERANCE


def sum_K(d, D1, D2):
    """
    Sum of the velocity head coefficients of the attached fittings.

    Exactly zero when both bores equal the seat within 0.1 mm.
    """
    if same_bore(d, D1, D2):
        return 0.0
    return K1(d, D1) + K2(d, D2) + KB1(d, D1) - KB2(d, D2)


def FP(sumK, C, d):
    """
    Piping geometry factor.

    Args:
        sumK (float): Sum of fitting coefficients.
        C (float): Assumed flow coefficient (Kv).
        d (float): Seat diameter in mm.
    """
    return 1/np.sqrt(1 + sumK/N2*(C/d**2)**2)


def FLP(FL, sumK, C, d):
    """Combined liquid pressure recovery and piping geometry factor."""
    return FL/np.sqrt(1 + FL**2/N2*sumK*(C/d**2)**2)


def xTP(xT, FP, K1_KB1, C, d):
    """
    Pressure differential ratio factor corrected for inlet fittings.

    Args:
        xT (float): Valve pressure differential ratio factor.
        FP (float): Piping geometry factor.
        K1_KB1 (float): Inlet coefficients K1 + KB1.
        C (float): Assumed flow coefficient (Kv).
        d (float): Seat diameter in mm.
    """
    return xT/FP**2/(1 + xT*K1_KB1/N5*(C/d**2)**2)


@dataclass(frozen=True)
class PipeGeometry:
    d: float
    D1: float
    D2: float

    @property
    def K1(self):
        return K1(self.d, self.D1)

    @property
    def K2(self):
        return K2(self.d, self.D2)

    @property
    def KB1(self):
        return KB1(self.d, self.D1)

    @property
    def KB2(self):
        return KB2(self.d, self.D2)

    @property
    def sum_K(self):
        return sum_K(self.d, self.D1, self.D2)

    @property
    def has_fittings(self):
        return not same_bore(self.d, self.D1, self.D2)

    def FP(self, C):
        return FP(self.sum_K, C, self.d)

    def FLP(self, FL, C):
        return FLP(FL, self.sum_K, C, self.d)

    def xTP(self, xT, C):
        """Fitting corrected xT with FP evaluated at the same C."""
        return xTP(xT, self.FP(C), self.K1 + self.KB1, C, self.d)


def resolve_geometry(DN, seat_size=None, upstream=(None, None),
                     downstream=(None, None), schedule='40'):
    """
    Resolve seat and pipe bores for a valve installation.

    Args:
        DN (float): Nominal valve size in mm.
        seat_size (float, optional): Seat diameter in mm, defaults to DN.
        upstream (tuple): (OD, wall) of the inlet pipe in mm.
        downstream (tuple): (OD, wall) of the outlet pipe in mm.
        schedule (str): Pipe schedule used for table lookups.

    Returns:
        PipeGeometry
    """
    d = seat_size or DN
    D1 = bore(d, DN, *upstream, schedule=schedule)
    D2 = bore(d, DN, *downstream, schedule=schedule)
    return PipeGeometry(d=d, D1=D1, D2=D2)
