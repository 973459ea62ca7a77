"""
Centralised, edit‑in‑one‑place constants for the thermocalc package.
Only passive data lives here; no imports from other project modules.
"""

# --- Range policy ---
RANGE_POLICIES = ("extrapolate", "clamp", "reject")
DEFAULT_RANGE_POLICY = "extrapolate"

# --- Logging ---
LOGGER_NAME = "ThermoCalc"
LOG_FILE_NAME = None               # set to a path to mirror console output to a file
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# --- Reference tables ---
BUFFER_LIMIT = 5000                # rows before flushing CSV buffer
DEFAULT_TABLE_STEP = 10.0          # °C
TABLE_HEADER = ["temperature_c", "emf_mv"]
