import numpy as np
from .constants import (ANTOINE_A, ANTOINE_B, ANTOINE_C, WATER_DENSITY,
                        AIR_GAMMA, Y_MIN, MOLAR_VOLUME, R_GAS, N34)
from .datatypes import ValveInternals


def vapor_pressure(T):
    """
    Saturation pressure of water from the Antoine correlation.

    Args:
        T (float): Temperature in degC.

    Returns:
        float: Vapor pressure in kPa.
    """
    return 10**(ANTOINE_A - ANTOINE_B / (ANTOINE_C + T))


def saturation_temperature(P):
    """
    Inverse Antoine correlation.

    Args:
        P (float): Absolute pressure in kPa.

    Returns:
        float: Saturation temperature in degC, NaN for P <= 0.
    """
    if P <= 0:
        return np.nan
    return ANTOINE_B / (ANTOINE_A - np.log10(P)) - ANTOINE_C


def FF(Pv, Pc):
    """
    Liquid critical pressure ratio factor.

    Args:
        Pv (float): Vapor pressure in kPa.
        Pc (float): Critical pressure in MPa.
    """
    return 0.96 - 0.28*np.sqrt(Pv/(Pc*1000))


def Fgamma(gamma):
    """Specific heat ratio factor relative to air."""
    return gamma/AIR_GAMMA


def pressure_ratio(dP, P1):
    """Pressure differential ratio x = dP/P1."""
    return dP/P1


def expansion_factor(x, Fgamma, xT):
    """
    Expansion factor Y, floored at 0.667.

    Args:
        x (float): Pressure differential ratio.
        Fgamma (float): Specific heat ratio factor.
        xT (float): Pressure differential ratio factor (xT or xTP).
    """
    return max(1 - x/(3*Fgamma*xT), Y_MIN)


def relative_density(density):
    """Liquid density relative to water at 15 degC."""
    return density/WATER_DENSITY


def xF(P1, P2, Pv):
    """Liquid pressure differential ratio (P1 - P2)/(P1 - Pv)."""
    return (P1 - P2)/(P1 - Pv)


def molecular_weight(rhoN):
    """Ideal-gas molar mass (kg/kmol) from a standard density (kg/Nm3)."""
    return rhoN*MOLAR_VOLUME


def sound_speed(gamma, T, M):
    """
    Ideal-gas speed of sound.

    Args:
        gamma (float): Specific heat ratio.
        T (float): Temperature in K.
        M (float): Molar mass in kg/kmol.

    Returns:
        float: Sound speed in m/s.
    """
    return np.sqrt(gamma*R_GAS*T/M)


def xFz(C, FL, Fd, internals=ValveInternals.STANDARD):
    """
    Incipient cavitation pressure differential ratio.

    Args:
        C (float): Flow coefficient.
        FL (float): Liquid pressure recovery factor.
        Fd (float): Valve style modifier.
        internals (ValveInternals): Standard or multi-stage trim.
    """
    if ValveInternals(internals) is ValveInternals.MULTISTAGE:
        return 1/np.sqrt(4.5 + 1.7*C/(N34*FL))
    return 0.9/np.sqrt(1 + 3*Fd*np.sqrt(C/(N34*FL)))
