"""
Aerodynamic valve noise, IEC 60534-8-3.

The outlet pressure places the valve in one of five states. Each state has
its own vena contracta conditions, acoustic efficiency and peak frequency;
the internal sound pressure level is then reduced by the pipe transmission
loss and carried to 1 m from the pipe wall.
"""
import numpy as np
from ..constants import N14
from ..datatypes import (GasNoiseState, GasNoiseIntermediate, NoiseResult)
from ..fluid_physics import Fgamma as F_gamma, sound_speed
from ..logger import logger
from ..regimes import gas_noise_boundaries, gas_noise_state
from .acoustics import (a_weighting, internal_level, distance_correction,
                        clamp_level, clamp)
from .constants import (ETA_REF, ETA_MAX, MACH_MIN, RW_STANDARD, C0,
                        CP_PIPE, TL_COEF_GAS, GX, GAS_FP_RANGE, NOISE_LIMIT,
                        NOISE_HIGH, OUTLET_MACH_LIMIT, MAX_OUTLET_MACH)


_STATE_NAMES = {
    GasNoiseState.STATE_I: 'subsonic flow',
    GasNoiseState.STATE_II: 'transitional flow',
    GasNoiseState.STATE_III: 'critical flow',
    GasNoiseState.STATE_IV: 'constant acoustic efficiency',
    GasNoiseState.STATE_V: 'fully choked flow',
}

_STATE_DESCRIPTIONS = {
    GasNoiseState.STATE_I: 'Subsonic flow, vena contracta velocity below '
                           'sonic',
    GasNoiseState.STATE_II: 'Transitional flow, approaching critical flow',
    GasNoiseState.STATE_III: 'Critical flow, sonic vena contracta',
    GasNoiseState.STATE_IV: 'Constant acoustic efficiency, high pressure '
                            'ratio',
    GasNoiseState.STATE_V: 'Fully choked flow, maximum noise state',
}

_SUPERSONIC_JET = (GasNoiseState.STATE_IV, GasNoiseState.STATE_V)


def describe_gas_state(state):
    return _STATE_DESCRIPTIONS[GasNoiseState(state)]


def outlet_density(rho1, P1, P2):
    """Isothermal outlet density in kg/m3."""
    return rho1*P2/P1


def jet_mach(P1, P2, alpha, gamma, state):
    """Free expansion jet Mach number; State V uses the fixed ratio 22."""
    if state is GasNoiseState.STATE_V:
        ratio = 22.0
    else:
        ratio = P1/(alpha*P2)
    M2 = 2/(gamma - 1)*(ratio**((gamma - 1)/gamma) - 1)
    return np.sqrt(max(0.0, M2))


def acoustic_efficiency(state, Mvc, Mj, FL):
    """
    Acoustic efficiency factor for each noise state, capped at 0.01.
    """
    Mvc = max(MACH_MIN, Mvc)
    Mj = max(MACH_MIN, Mj)

    if state is GasNoiseState.STATE_I:
        eta = ETA_REF*Mvc**3.6
    elif state in _SUPERSONIC_JET:
        eta = ETA_REF*Mj**2/2*np.sqrt(2)**(6.6*FL**2)
    else:
        eta = ETA_REF*Mj**(6.6*FL**2)

    return min(eta, ETA_MAX)


def transmission_loss(tp, fp, Di, rho2, c2):
    """
    Pipe wall transmission loss for gas.

    Args:
        tp (float): Wall thickness in m.
        fp (float): Peak frequency in Hz.
        Di (float): Pipe bore in m.
        rho2 (float): Outlet density in kg/m3.
        c2 (float): Outlet speed of sound in m/s.

    Returns:
        float: Transmission loss in dB (negative).
    """
    fr = CP_PIPE/(np.pi*Di)             # ring frequency
    f0 = fr/4*(c2/C0)                   # internal coincidence frequency
    fg = C0**2*np.sqrt(3)/(CP_PIPE*np.pi*tp)  # external coincidence

    if fp < f0:
        Gy = f0/fg if f0 < fg else 1.0
    elif fp < fg:
        Gy = fp/fg
    else:
        Gy = 1.0

    term = TL_COEF_GAS*(c2/(tp*fp))**2*GX
    return 10*np.log10(term/(rho2*c2/(415*Gy) + 1))


def gas_noise(inputs):
    """
    Predict gas or steam valve noise.

    Args:
        inputs (NoiseInput): Canonical noise inputs. P in kPa, T in K,
            mass flow in kg/h, lengths in mm.

    Returns:
        NoiseResult
    """
    warnings = []

    P1, P2, T1 = inputs.P1, inputs.P2, inputs.T1
    gamma, M, FL = inputs.gamma, inputs.molecular_weight, inputs.FL
    rho1 = inputs.density
    m = inputs.mass_flow/3600

    bounds = gas_noise_boundaries(P1, gamma, FL)
    state = gas_noise_state(P2, bounds)
    Pvcc = bounds['Pvcc']
    logger.debug(f"Gas noise {state.value}: Pvcc={Pvcc:.2f} kPa, "
                 f"P2C={bounds['P2C']:.2f} kPa")

    c1 = sound_speed(gamma, T1, M)
    # Isothermal outlet
    c2 = c1
    rho2 = inputs.outlet_density
    if rho2 is None:
        rho2 = outlet_density(rho1, P1, P2)

    if state is GasNoiseState.STATE_I:
        Pvc = P1 - (P1 - P2)/FL**2
        Mvc = np.sqrt(max(0.0, 2/(gamma - 1)*(
            (P1/Pvc)**((gamma - 1)/gamma) - 1)))
        Tvc = T1*(Pvc/P1)**((gamma - 1)/gamma)
    else:
        Pvc = Pvcc
        Mvc = 1.0
        Tvc = 2*T1/(1 + gamma)

    Mj = jet_mach(P1, P2, bounds['alpha'], gamma, state)
    Uvc = Mvc*c1*(Pvc/P1)**((gamma - 1)/(2*gamma))
    cvc = sound_speed(gamma, Tvc, M)

    rw = RW_STANDARD
    eta = acoustic_efficiency(state, Mvc, Mj, FL)

    if state is GasNoiseState.STATE_I:
        Wm = m*Uvc**2/2
        Wa = eta*rw*Wm*FL**2
    else:
        cvcc = sound_speed(gamma, 2*T1/(1 + gamma), M)
        Wm = m*cvcc**2/2
        if state is GasNoiseState.STATE_II:
            Wa = eta*rw*Wm*(P1 - P2)/(P1 - Pvcc)
        else:
            Wa = eta*rw*Wm

    Dj = N14*inputs.Fd*np.sqrt(inputs.kv*FL)
    if state is GasNoiseState.STATE_I:
        fp = 0.2*Uvc/Dj
    elif state in _SUPERSONIC_JET:
        fp = 0.35*cvc/(1.25*Dj*np.sqrt(max(0.01, Mj**2 - 1)))
    else:
        fp = 0.2*Mj*cvc/Dj
    fp = clamp(fp, GAS_FP_RANGE)

    Di = inputs.Di/1000
    tp = inputs.tp/1000
    A_pipe = np.pi*Di**2/4

    Lpi = internal_level(Wa, rho2, c2, Di)
    TL = transmission_loss(tp, fp, Di, rho2, c2)

    M0 = 4*m/(np.pi*(inputs.d/1000)**2*rho2*c2)
    M2 = min(4*m/(np.pi*Di**2*rho2*c2), MAX_OUTLET_MACH)
    Lg = 16*np.log10(1/(1 - M2)) if M2 > 0 else 0.0

    Lpe = 5 + Lpi + TL + Lg - distance_correction(Di, tp)
    delta_LA = a_weighting(fp)
    level = clamp_level(Lpe + delta_LA)

    if Mvc >= 1:
        warnings.append('Vena contracta velocity is sonic, expect high noise')
    if level > NOISE_LIMIT:
        warnings.append(f"Noise level {level:.1f} dBA exceeds 85 dBA, "
                        "noise reduction measures needed")
    if level > NOISE_HIGH:
        warnings.append('Noise level exceeds 100 dBA, consider a low noise '
                        'trim or a silencer')
    if M0 > OUTLET_MACH_LIMIT:
        warnings.append(f"Outlet Mach number {M0:.2f} is high, a high Mach "
                        "number correction may be required")

    intermediate = GasNoiseIntermediate(
        state=state, Pvcc=Pvcc, P2C=bounds['P2C'], P2B=bounds['P2B'],
        P2CE=bounds['P2CE'], alpha=bounds['alpha'], Pvc=Pvc, c1=c1, c2=c2,
        rho2=rho2, Tvc=Tvc, cvc=cvc, Mvc=Mvc, Mj=Mj, Uvc=Uvc,
        U2=m/(rho2*A_pipe), eta=eta, rw=rw, Wm=Wm, Wa=Wa, Dj=Dj, fp=fp,
        Lpi=Lpi, TL=TL, M0=M0, Lg=Lg, Lpe=Lpe,
        distance_correction=distance_correction(Di, tp),
        delta_LA=delta_LA, Fgamma=F_gamma(gamma))

    return NoiseResult(
        noise_level=round(level, 1),
        state=state,
        flow_state=f"{state.value} ({_STATE_NAMES[state]})",
        peak_frequency=fp,
        gas=intermediate,
        warnings=warnings)
