# Reference values
RHO_0 = 1.293       # air density (kg/m3)
C0 = 343.0          # speed of sound in air (m/s)

# Pipe materials (kg/m3)
STEEL_DENSITY = 7800.0
STAINLESS_DENSITY = 8000.0

# Longitudinal sound speed in the pipe wall (m/s)
CP_PIPE = 5000.0

WATER_SOUND_SPEED = 1480.0

# Acoustic efficiency
ETA_REF = 1e-4
ETA_MAX = 0.01
A_ETA_TURB = -4.6
MACH_MIN = 0.01

# Acoustic power ratios
RW_STANDARD = 0.25
RW_MULTISTAGE = 0.15

# Internal sound pressure and transmission loss coefficients
INTERNAL_NOISE_COEF = 3.2e9
TL_COEF_GAS = 7.6e-7
GX = 1.9e-3

# A-weighting polynomial in log10(fp)
A1 = -145.528
A2 = 98.262
A3 = -19.509
A4 = 0.975

# Peak frequency limits (Hz)
GAS_FP_RANGE = (100.0, 10000.0)
LIQUID_FP_RANGE = (100.0, 20000.0)

# Output limits (dBA)
MIN_NOISE = 30.0
MAX_NOISE = 150.0

# Advisory thresholds
NOISE_LIMIT = 85.0
NOISE_HIGH = 100.0
EROSION_VELOCITY = 30.0   # m/s
OUTLET_MACH_LIMIT = 0.3
MAX_OUTLET_MACH = 0.8
