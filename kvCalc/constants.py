# IEC 60534-2-1 numerical constants for the metric unit set used
# internally (kPa, m3/h, kg/h, mm, kg/m3, K).
N1 = 0.1
N2 = 0.0016
N4 = 0.0707
N5 = 0.0018
N6 = 3.16
N9 = 24.6
N14 = 0.0049
N18 = 17.3
# Valve style constant of the incipient cavitation correlation
N34 = 1.0

# Antoine coefficients for water, log10(Pv[kPa]) = A - B/(C + T[degC])
ANTOINE_A = 7.07406
ANTOINE_B = 1657.46
ANTOINE_C = 227.02

WATER_DENSITY = 1000.0          # kg/m3
WATER_CRITICAL_PRESSURE = 22.12  # MPa
STEAM_MOLECULAR_WEIGHT = 18.0152  # kg/kmol
AIR_GAMMA = 1.4

# Standard (normal) reference state
STD_PRESSURE = 101.325  # kPa
STD_TEMPERATURE = 273.15  # K
MOLAR_VOLUME = 22.4  # Nm3/kmol

# Atmospheric offset applied to gauge pressures (kPa)
GAUGE_OFFSET = 100.0

KV_TO_CV = 1.156

# Seed multiplier for the assumed flow coefficient in FP/FLP
CI_FACTOR = 1.3

# Tolerance (mm) for treating pipe bore as equal to the seat diameter
BORE_TOLERANCE = 0.1

# Expansion factor floor
Y_MIN = 0.667

TURBULENT_RE = 10000.0

# Opening advisory band (%)
OPENING_LOW = 10.0
OPENING_HIGH = 90.0

# Universal gas constant (J/kmol/K)
R_GAS = 8314.0
