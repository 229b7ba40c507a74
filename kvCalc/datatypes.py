from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Optional, List
from rich.console import Console
from rich.table import Table
from .unitSystems import CANONICAL, _DISPLAY_FORMAT


class _TaggedEnum(str, Enum):
    """str-valued Enum constructible from its display tag."""

    def __str__(self):
        return self.value


class FluidType(_TaggedEnum):
    LIQUID = 'Liquid'
    GAS = 'Gas'
    STEAM = 'Steam'


class FlowCharacteristic(_TaggedEnum):
    EQUAL_PERCENTAGE = 'Equal Percentage'
    LINEAR = 'Linear'
    QUICK_OPENING = 'Quick Opening'


class PressureUnit(_TaggedEnum):
    MPA_G = 'MPa(G)'
    MPA_A = 'MPa(A)'
    KPA_G = 'KPa(G)'
    KPA_A = 'KPa(A)'
    BAR_G = 'bar(G)'
    BAR_A = 'bar(A)'


class TemperatureUnit(_TaggedEnum):
    CELSIUS = '℃'
    KELVIN = 'K'
    FAHRENHEIT = 'F'

    @classmethod
    def _missing_(cls, value):
        aliases = {'°C': cls.CELSIUS, 'C': cls.CELSIUS, 'degC': cls.CELSIUS,
                   '°F': cls.FAHRENHEIT, 'degF': cls.FAHRENHEIT}
        return aliases.get(value)


class FlowUnit(_TaggedEnum):
    M3_H = 'm3/h'
    KG_H = 'Kg/h'
    KG_S = 'Kg/s'
    T_H = 't/h'
    T_S = 't/s'
    NM3_H = 'Nm3/h'


class DensityUnit(_TaggedEnum):
    KG_M3 = 'Kg/m3'
    G_CM3 = 'g/cm3'
    KG_NM3 = 'Kg/Nm3'


class ViscosityUnit(_TaggedEnum):
    M2_S = 'm2/s'
    MM2_S = 'mm2/s'
    ST = 'St'
    CST = 'cSt'
    CP = 'cP'
    PA_S = 'Pa.S'
    MPA_S = 'mPa.S'


class ViscosityType(_TaggedEnum):
    KINEMATIC = 'Kinematic Viscosity'
    DYNAMIC = 'Dynamic Viscosity'
    # Generic tag, interpreted as dynamic viscosity
    VISCOSITY = 'Viscosity'


class FlowState(_TaggedEnum):
    CHOKED = 'Choked'
    NON_CHOKED = 'Non-choked'


class TurbulenceState(_TaggedEnum):
    TURBULENT = 'Turbulent'
    LAMINAR = 'Laminar'


class FluidState(_TaggedEnum):
    """Liquid cavitation state, ordered by increasing xF."""
    NO_CAVITATION = 'No Cavitation'
    INCIPIENT_CAVITATION = 'Incipient Cavitation'
    CAVITATION = 'Cavitation'
    FLASHING = 'Flashing'


class CavitationState(_TaggedEnum):
    """Liquid noise cavitation state, ordered by increasing xF."""
    NO_CAVITATION = 'No Cavitation'
    INCIPIENT_CAVITATION = 'Incipient Cavitation'
    CONSTANT_CAVITATION = 'Constant Cavitation'
    FLASHING = 'Flashing'


class GasNoiseState(_TaggedEnum):
    """Gas noise regime, ordered by decreasing outlet pressure."""
    STATE_I = 'State I'
    STATE_II = 'State II'
    STATE_III = 'State III'
    STATE_IV = 'State IV'
    STATE_V = 'State V'


class ValveInternals(_TaggedEnum):
    STANDARD = 'Standard'
    MULTISTAGE = 'Multi-stage Pressure Reduction'


class PipeMaterial(_TaggedEnum):
    STEEL = 'steel'
    STAINLESS = 'stainless'


class FormulaVariant(_TaggedEnum):
    NON_CHOKED = 'C1'
    NON_CHOKED_FITTINGS = 'C2'
    CHOKED = 'C3'
    CHOKED_FITTINGS = 'C4'
    LAMINAR = 'C5'


_FORMULA_DESCRIPTIONS = {
    FormulaVariant.NON_CHOKED: 'non-choked flow without fittings',
    FormulaVariant.NON_CHOKED_FITTINGS: 'non-choked flow with fittings',
    FormulaVariant.CHOKED: 'choked flow without fittings',
    FormulaVariant.CHOKED_FITTINGS: 'choked flow with fittings',
    FormulaVariant.LAMINAR: 'non-turbulent flow',
}


def describe_formula(fluid_type, variant):
    """Human-readable name of a formula variant, e.g. 'Gas choked flow...'"""
    return f"{FluidType(fluid_type).value} {_FORMULA_DESCRIPTIONS[variant]}"


def _coerce(instance, name, enum_cls):
    # frozen dataclass, so bypass __setattr__
    value = getattr(instance, name)
    if value is not None and not isinstance(value, enum_cls):
        object.__setattr__(instance, name, enum_cls(value))


@dataclass(frozen=True)
class EngineeringInput:
    """
    Process conditions and valve data for one sizing call.

    Pressures share one unit. Optional values left as None are resolved
    from kvCalc.DEFAULTS during the calculation.
    """
    fluid_type: FluidType
    flow_rate: float
    flow_unit: FlowUnit
    inlet_pressure: float
    outlet_pressure: float
    pressure_unit: PressureUnit
    temperature: float
    temperature_unit: TemperatureUnit
    density: float
    density_unit: DensityUnit
    valve_size: float                   # DN, mm
    FL: float
    rated_kv: float
    flow_characteristic: FlowCharacteristic = \
        FlowCharacteristic.EQUAL_PERCENTAGE
    rangeability: Optional[float] = None
    seat_size: Optional[float] = None   # mm
    xT: Optional[float] = None
    Fd: Optional[float] = None
    viscosity: Optional[float] = None
    viscosity_unit: Optional[ViscosityUnit] = None
    viscosity_type: Optional[ViscosityType] = None
    molecular_weight: Optional[float] = None
    Z: Optional[float] = None
    gamma: Optional[float] = None
    critical_pressure: Optional[float] = None  # MPa
    upstream_od: Optional[float] = None        # mm
    upstream_wall: Optional[float] = None      # mm
    downstream_od: Optional[float] = None      # mm
    downstream_wall: Optional[float] = None    # mm
    pipe_schedule: Optional[str] = None
    pipe_material: Optional[PipeMaterial] = None
    valve_internals: Optional[ValveInternals] = None

    def __post_init__(self):
        _coerce(self, 'fluid_type', FluidType)
        _coerce(self, 'flow_unit', FlowUnit)
        _coerce(self, 'pressure_unit', PressureUnit)
        _coerce(self, 'temperature_unit', TemperatureUnit)
        _coerce(self, 'density_unit', DensityUnit)
        _coerce(self, 'flow_characteristic', FlowCharacteristic)
        _coerce(self, 'viscosity_unit', ViscosityUnit)
        _coerce(self, 'viscosity_type', ViscosityType)
        _coerce(self, 'pipe_material', PipeMaterial)
        _coerce(self, 'valve_internals', ValveInternals)


@dataclass(frozen=True)
class FormulaCandidates:
    """Every Kv candidate evaluated for one call, keyed by variant."""
    C1: float = float('nan')
    C2: float = float('nan')
    C3: float = float('nan')
    C4: float = float('nan')
    C5: Optional[float] = None

    def __getitem__(self, variant):
        return getattr(self, FormulaVariant(variant).value)


@dataclass(frozen=True)
class IntermediateValues:
    """All derived quantities of a sizing call, in canonical units."""
    P1: float                           # kPa abs
    P2: float                           # kPa abs
    dP: float                           # kPa
    T1: float                           # K
    density: float                      # kg/m3, actual at inlet
    kinematic_viscosity: float          # m2/s
    flow: float                         # m3/h, Nm3/h or kg/h by fluid
    reynolds_flow: float                # m3/h at inlet conditions
    d: float                            # seat, mm
    D1: float                           # mm
    D2: float                           # mm
    K1: float
    K2: float
    KB1: float
    KB2: float
    sum_K: float
    FP: float
    FLP: float
    Rev: float
    FR: float
    lambda_: float
    candidates: FormulaCandidates
    saturation_temp: Optional[float] = None  # degC
    relative_density: Optional[float] = None
    standard_density: Optional[float] = None  # kg/Nm3
    molecular_weight: Optional[float] = None
    gamma: Optional[float] = None
    Z: Optional[float] = None
    Pv: Optional[float] = None
    Pc: Optional[float] = None               # kPa
    FF: Optional[float] = None
    critical_dP: Optional[float] = None
    xF: Optional[float] = None
    xFz: Optional[float] = None
    x: Optional[float] = None
    Fgamma: Optional[float] = None
    Y: Optional[float] = None
    xT: Optional[float] = None
    xTP: Optional[float] = None
    FP_assumed: Optional[float] = None

    def as_dict(self):
        return {f.name: getattr(self, f.name) for f in fields(self)
                if f.name != 'candidates'}


@dataclass(frozen=True)
class NoiseInput:
    """Noise model inputs in canonical units (kPa abs, K, kg/h, mm)."""
    fluid_type: FluidType
    P1: float
    P2: float
    dP: float
    T1: float
    mass_flow: float                    # kg/h
    density: float                      # kg/m3, inlet
    kv: float
    cv: float
    FL: float
    Fd: float
    Di: float                           # downstream pipe bore, mm
    tp: float                           # downstream pipe wall, mm
    d: float                            # seat, mm
    outlet_density: Optional[float] = None  # kg/m3, gas and steam
    gamma: float = 1.4
    molecular_weight: float = 29.0
    Pv: Optional[float] = None
    sound_speed: float = 1480.0
    pipe_material: PipeMaterial = PipeMaterial.STEEL
    valve_internals: ValveInternals = ValveInternals.STANDARD


@dataclass(frozen=True)
class GasNoiseIntermediate:
    state: GasNoiseState
    Pvcc: float
    P2C: float
    P2B: float
    P2CE: float
    alpha: float
    Pvc: float
    c1: float
    c2: float
    rho2: float
    Tvc: float
    cvc: float
    Mvc: float
    Mj: float
    Uvc: float
    U2: float
    eta: float
    rw: float
    Wm: float
    Wa: float
    Dj: float
    fp: float
    Lpi: float
    TL: float
    M0: float
    Lg: float
    Lpe: float
    distance_correction: float
    delta_LA: float
    Fgamma: float


@dataclass(frozen=True)
class LiquidNoiseIntermediate:
    state: CavitationState
    xF: float
    xFz: float
    xFzp: float
    dPc: float = 0.0
    Uvc: float = 0.0
    cL: float = 1480.0
    eta_turb: float = 0.0
    eta_cav: float = 0.0
    Wm: float = 0.0
    Wa: float = 0.0
    rw: float = 0.25
    Dj: float = 0.0
    Nstr: float = 0.0
    fp_turb: float = 0.0
    fp_cav: float = 0.0
    fp: float = 0.0
    Lpi: float = 0.0
    TL: float = 0.0
    Lpe: float = 0.0

    @property
    def eta(self):
        return self.eta_turb + self.eta_cav


def _label(quantity):
    unit = CANONICAL.units[quantity]
    return _DISPLAY_FORMAT.get(unit, unit)


def _render(table, **kwargs):
    console = Console(**kwargs)
    with console.capture() as capture:
        console.print(table)
    return capture.get()


def _fmt(value):
    if isinstance(value, float):
        return f"{value:.4g}"
    return f"{value}"


@dataclass(frozen=True)
class NoiseResult:
    """
    Predicted valve noise at 1 m from the downstream pipe wall.

    Attributes:
        noise_level (float): Sound pressure level in dBA.
        state: GasNoiseState or CavitationState.
        flow_state (str): Descriptor such as 'State III (critical flow)'.
        peak_frequency (float): Peak frequency in Hz.
        gas / liquid: Model-specific intermediates, one of which is set.
        warnings (list): Advisory messages.
    """
    noise_level: float
    state: object
    flow_state: str
    peak_frequency: float
    gas: Optional[GasNoiseIntermediate] = None
    liquid: Optional[LiquidNoiseIntermediate] = None
    warnings: List[str] = field(default_factory=list)

    @property
    def intermediate(self):
        return self.gas if self.gas is not None else self.liquid

    def __str__(self):
        return self.__makeTable()

    def __makeTable(self, **kwargs):
        table = Table(title='Valve Noise')
        table.add_column('Parameter')
        table.add_column('Value')
        table.add_column('Units')

        table.add_row('Noise level', f"{self.noise_level:.1f}",
                      _label('NOISE'))
        table.add_row('Flow state', self.flow_state, '')
        table.add_row('Peak frequency', f"{self.peak_frequency:.0f}",
                      _label('FREQUENCY'))
        for f in fields(self.intermediate):
            table.add_row(f.name, _fmt(getattr(self.intermediate, f.name)),
                          '')
        for warning in self.warnings:
            table.add_row('Warning', warning, '')

        return _render(table, **kwargs)


@dataclass(frozen=True)
class EngineeringResult:
    """
    Result of a valve sizing call.

    Errors and warnings are collected, not raised; numeric fields carry
    best-effort values (possibly NaN) even when errors are present.
    """
    kv: float
    cv: float
    opening: float
    flow_state: FlowState
    turbulence_state: TurbulenceState
    outlet_velocity: float
    formula: FormulaVariant
    used_formula: str
    has_fittings: bool
    intermediate: IntermediateValues
    fluid_state: Optional[FluidState] = None
    warnings: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    noise: Optional[float] = None
    noise_result: Optional[NoiseResult] = None

    @property
    def valid(self):
        return not self.errors

    def __repr__(self):
        return self.__makeTable()

    def __str__(self):
        return self.__makeTable()

    def __makeTable(self, **kwargs):
        table = Table(title='Valve Sizing')
        table.add_column('Parameter')
        table.add_column('Value')
        table.add_column('Units')

        rows = [
            ('Kv', _fmt(self.kv), ''),
            ('Cv', _fmt(self.cv), ''),
            ('Opening', f"{self.opening:.1f}", _label('OPENING')),
            ('Flow state', str(self.flow_state), ''),
            ('Turbulence', str(self.turbulence_state), ''),
            ('Fluid state', str(self.fluid_state or '-'), ''),
            ('Formula', f"{self.formula} ({self.used_formula})", ''),
            ('Fittings', str(self.has_fittings), ''),
            ('Outlet velocity', _fmt(self.outlet_velocity),
             _label('VELOCITY')),
            ('P1', _fmt(self.intermediate.P1), _label('PRESSURE')),
            ('P2', _fmt(self.intermediate.P2), _label('PRESSURE')),
            ('T1', _fmt(self.intermediate.T1), _label('TEMPERATURE')),
            ('FP', _fmt(self.intermediate.FP), ''),
            ('Rev', _fmt(self.intermediate.Rev), ''),
            ('FR', _fmt(self.intermediate.FR), ''),
        ]
        if self.noise is not None:
            rows.append(('Noise', f"{self.noise:.1f}", _label('NOISE')))

        for row in rows:
            table.add_row(*row)
        for error in self.errors:
            table.add_row('[red]Error[/red]', error, '')
        for warning in self.warnings:
            table.add_row('[yellow]Warning[/yellow]', warning, '')

        return _render(table, **kwargs)
