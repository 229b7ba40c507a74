"""Helpers common to the gas and liquid noise models."""
import numpy as np
from ..datatypes import PipeMaterial
from .constants import (A1, A2, A3, A4, INTERNAL_NOISE_COEF, MIN_NOISE,
                        MAX_NOISE, STEEL_DENSITY, STAINLESS_DENSITY)


_MATERIAL_DENSITY = {
    PipeMaterial.STEEL: STEEL_DENSITY,
    PipeMaterial.STAINLESS: STAINLESS_DENSITY,
}


def pipe_density(material):
    return _MATERIAL_DENSITY[PipeMaterial(material)]


def a_weighting(fp):
    """
    A-weighting correction at the peak frequency.

    Args:
        fp (float): Peak frequency in Hz.

    Returns:
        float: Correction in dB, 0 for non-positive fp.
    """
    if fp <= 0:
        return 0.0
    L = np.log10(fp)
    return A1 + A2*L + A3*L**2 + A4*L**3


def internal_level(Wa, rho, c, Di):
    """
    Internal sound pressure level in the downstream pipe.

    Args:
        Wa (float): Acoustic power in W.
        rho (float): Fluid density in kg/m3.
        c (float): Speed of sound in the fluid in m/s.
        Di (float): Pipe bore in m.
    """
    if Wa <= 0:
        return MIN_NOISE
    return 10*np.log10(INTERNAL_NOISE_COEF*Wa*rho*c/Di**2)


def distance_correction(Di, tp):
    """Correction from the pipe wall to 1 m, Di and tp in m."""
    outer = Di + 2*tp
    return 10*np.log10((outer + 0.002)/outer)


def clamp_level(level):
    return min(max(level, MIN_NOISE), MAX_NOISE)


def clamp(value, bounds):
    low, high = bounds
    return min(max(value, low), high)
