"""
Hydrodynamic valve noise, IEC 60534-8-4.
"""
import numpy as np
from ..constants import N14, N34
from ..datatypes import (CavitationState, ValveInternals,
                         LiquidNoiseIntermediate, NoiseResult)
from ..fluid_physics import xF as x_F, xFz as x_Fz
from ..logger import logger
from ..regimes import cavitation_state
from .acoustics import pipe_density, internal_level, clamp_level, clamp
from .constants import (A_ETA_TURB, RW_STANDARD, RW_MULTISTAGE, RHO_0, C0,
                        CP_PIPE, LIQUID_FP_RANGE, NOISE_LIMIT, NOISE_HIGH,
                        EROSION_VELOCITY)


_STATE_DESCRIPTIONS = {
    CavitationState.NO_CAVITATION: 'Pressure ratio below cavitation '
                                   'inception, flow is stable',
    CavitationState.INCIPIENT_CAVITATION: 'Cavitation bubbles starting to '
                                          'form, noise increasing',
    CavitationState.CONSTANT_CAVITATION: 'Stable cavitation, significant '
                                         'noise and vibration',
    CavitationState.FLASHING: 'Medium vaporizing, severe noise and '
                              'vibration',
}

_POWER_RATIO = {
    ValveInternals.STANDARD: RW_STANDARD,
    ValveInternals.MULTISTAGE: RW_MULTISTAGE,
}


def describe_cavitation_state(state):
    return _STATE_DESCRIPTIONS[CavitationState(state)]


def xFzp(xFz, P1):
    """Incipient cavitation ratio corrected to the inlet pressure (kPa)."""
    return xFz*(6e5/(P1*1000))**0.125


def cavitation_efficiency(eta_turb, xF, xFzp, P1, P2, dPc):
    """
    Additional acoustic efficiency due to cavitation.

    Zero outside 0 < xFzp < xF < 1.
    """
    if xF <= xFzp or not 0 < xFzp < 1 or dPc <= 0 or xF >= 1:
        return 0.0

    return (0.32*eta_turb*np.sqrt((P1 - P2)/dPc)*np.exp(5*xFzp)
            * np.sqrt((1 - xFzp)/(1 - xF))*(xF/xFzp)**5
            * (xF - xFzp)**1.5)


def strouhal(FL, C, Fd, xFzp, d, d0, P1, Pv):
    """
    Strouhal number of the turbulent peak frequency.

    Args:
        d, d0 (float): Valve inlet and seat diameters in m.
        P1, Pv (float): Inlet and vapor pressure in Pa.
    """
    denominator = N34*xFzp**1.5*d*d0*max(1.0, P1 - Pv)**0.57
    return 0.036*FL**2*C*Fd**0.75/denominator


def transmission_loss(tp, fp, Di, material):
    """
    Pipe wall transmission loss for liquid, tp and Di in m.
    """
    fr = CP_PIPE/(np.pi*Di)
    TL_fr = -10 - 10*np.log10(CP_PIPE*pipe_density(material)*tp
                              / (RHO_0*C0*Di))
    dTL = -20*np.log10(fr/fp + (fp/fr)**1.5)
    return TL_fr + dTL


def liquid_noise(inputs):
    """
    Predict liquid valve noise.

    Flashing flow cannot be predicted and returns a zero level carrying a
    warning.

    Args:
        inputs (NoiseInput): Canonical noise inputs. P in kPa, mass flow
            in kg/h, lengths in mm.

    Returns:
        NoiseResult
    """
    warnings = []

    P1, P2, FL, Fd = inputs.P1, inputs.P2, inputs.FL, inputs.Fd
    Pv = inputs.Pv
    rho = inputs.density
    cL = inputs.sound_speed
    C = inputs.cv

    xF = x_F(P1, P2, Pv)
    xFz = x_Fz(C, FL, Fd, inputs.valve_internals)
    xFz_p = xFzp(xFz, P1)
    state = cavitation_state(xF, xFz_p, FL)
    logger.debug(f"Liquid noise {state.value}: xF={xF:.3f}, "
                 f"xFzp={xFz_p:.3f}")

    if state is CavitationState.FLASHING:
        warnings.append('Medium is flashing, noise calculation not accurate')
        return NoiseResult(
            noise_level=0.0, state=state, flow_state=state.value,
            peak_frequency=0.0,
            liquid=LiquidNoiseIntermediate(state=state, xF=xF, xFz=xFz,
                                           xFzp=xFz_p, cL=cL),
            warnings=warnings)

    cavitating = state is not CavitationState.NO_CAVITATION

    dPc = min(inputs.dP, FL**2*(P1 - Pv))
    Uvc = 1/FL*np.sqrt(2*dPc*1000/rho)

    eta_turb = 10**A_ETA_TURB*Uvc/cL
    eta_cav = (cavitation_efficiency(eta_turb, xF, xFz_p, P1, P2, dPc)
               if cavitating else 0.0)

    m = inputs.mass_flow/3600
    Wm = m*Uvc**2*FL**2/2
    rw = _POWER_RATIO[ValveInternals(inputs.valve_internals)]
    if cavitating:
        Wa = (eta_turb + eta_cav)*Wm*rw
    else:
        Wa = eta_turb*Wm

    d = inputs.d/1000
    Dj = N14*Fd*np.sqrt(C*FL)
    Nstr = strouhal(FL, C, Fd, xFz_p, d, d, P1*1000, Pv*1000)
    fp_turb = Nstr*Uvc/Dj
    if cavitating and 0 < xF < 1:
        fp_cav = 6*fp_turb*((1 - xF)/(1 - xFz_p))**2*(xFz_p/xF)**2.5
    else:
        fp_cav = fp_turb
    fp = clamp(fp_cav if cavitating else fp_turb, LIQUID_FP_RANGE)

    Di = inputs.Di/1000
    tp = inputs.tp/1000
    Lpi = internal_level(Wa, rho, cL, Di)
    TL = transmission_loss(tp, fp, Di, inputs.pipe_material)
    if cavitating and eta_cav > 0:
        TL += 10*np.log10(250*fp_cav**1.5/fp_turb**2
                          * eta_cav/(eta_turb + eta_cav))

    Lpe = Lpi + TL + 3
    level = clamp_level(Lpe)

    if state is CavitationState.CONSTANT_CAVITATION:
        warnings.append('Valve is in constant cavitation, may cause valve '
                        'damage')
    if level > NOISE_LIMIT:
        warnings.append(f"Noise level {level:.1f} dBA exceeds 85 dBA, "
                        "noise reduction measures needed")
    if level > NOISE_HIGH:
        warnings.append('Noise level exceeds 100 dBA, consider an '
                        'anti-cavitation trim')
    if Uvc > EROSION_VELOCITY:
        warnings.append(f"Vena contracta velocity {Uvc:.1f} m/s is high, "
                        "may cause severe erosion")

    intermediate = LiquidNoiseIntermediate(
        state=state, xF=xF, xFz=xFz, xFzp=xFz_p, dPc=dPc, Uvc=Uvc, cL=cL,
        eta_turb=eta_turb, eta_cav=eta_cav, Wm=Wm, Wa=Wa, rw=rw, Dj=Dj,
        Nstr=Nstr, fp_turb=fp_turb, fp_cav=fp_cav, fp=fp, Lpi=Lpi, TL=TL,
        Lpe=Lpe)

    flow_state = ('Turbulent' if state is CavitationState.NO_CAVITATION
                  else state.value)

    return NoiseResult(
        noise_level=round(level, 1),
        state=state,
        flow_state=flow_state,
        peak_frequency=fp,
        liquid=intermediate,
        warnings=warnings)
