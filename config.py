"""
Global configuration and constants for the ChemSentry hazard monitoring dashboard.
"""

# --- Logging ---
LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# --- Scenario Defaults (initial operator state) ---
DEFAULT_WIND_SPEED_KMH = 15.0
DEFAULT_WIND_DIRECTION = 90.0   # Degrees, 90 = East
DEFAULT_PRESSURE_BAR = 10.0
DEFAULT_TEMPERATURE_C = 25.0
DEFAULT_LEAK_RATE = 75.0        # Intensity percentage (0-100)
MAIN_SOURCE_ID = "MAIN"         # Sentinel: leak at the main facility, not a sector

# --- Risk Assessment ---
# Base severity per scenario category (ppm)
BASE_SEVERITY_PPM = {
    "NORMAL": 0.0,
    "MINOR_LEAK": 30.0,
    "CATASTROPHIC_BURST": 150.0,
    "FIRE_HAZARD": 400.0,       # Smoke + toxic combustion products
}

# Weather dispersion factors; anything unlisted disperses neutrally
DISPERSION_FACTORS = {
    "RAIN": 0.7,                # Rain washes gas out of the air
    "STORM": 0.7,
    "FOG": 1.2,                 # Fog keeps the cloud low and concentrated
}
NEUTRAL_DISPERSION = 1.0

LEAK_RATE_CALIBRATION = 50.0    # leak_rate at which intensity multiplier = 1.0
PRESSURE_GAS_COEFF = 0.5        # ppm added per bar of line pressure

AMBIENT_NOISE_PPM = (0.0, 2.0)      # Baseline sensor jitter under normal operations
FIRE_SURGE_RANGE = (300.0, 500.0)   # Thermal surge drawn during a fire
FIRE_SURGE_CALIBRATION = 80.0       # leak_rate at which the surge is unscaled

# Risk radius = (wind * WIND_COEFF + pressure * PRESSURE_COEFF) * leak_rate / CALIBRATION
RADIUS_WIND_COEFF = 12.0
RADIUS_PRESSURE_COEFF = 8.0
RADIUS_CALIBRATION = 60.0

# --- Status Thresholds ---
# Strictly-greater-than comparisons
EVACUATE_GAS_PPM = 200.0
CRITICAL_GAS_PPM = 50.0
CRITICAL_THERMAL = 150.0
WARNING_GAS_PPM = 20.0
WARNING_THERMAL = 60.0

# --- Financial Exposure ---
WARNING_EXPOSURE = 500_000.0
SEVERE_EXPOSURE = 50_000_000.0      # Critical and Evacuate
CURRENCY_SYMBOL = "₹"          # INR

# --- Forecast ---
FORECAST_HORIZON_MIN = 60
FORECAST_STEP_MIN = 5
GROWTH_RATE = 0.1                   # Logistic steepness (per minute)
GROWTH_MIDPOINT_MIN = 20.0          # Minute at which growth factor = 0.5
GROWTH_BASELINE = 0.5               # Prediction = current * (BASELINE + growth)
STEADY_STATE_NOISE_PPM = (0.0, 5.0)
FORECAST_DECIMALS = 1

# --- Facility Map ---
MAP_WIDTH_M = 600.0
MAP_HEIGHT_M = 400.0

# --- Sensor Network ---
SENSOR_SPACING_M = 75.0             # Grid spacing between fixed gas sensors
SENSOR_MDL_PPM = 1.0                # Minimum reading counted as "detecting gas"
PLUME_DRIFT_FRACTION = 0.3          # Downwind offset of the plume centre, as fraction of radius
