# qubitsim/config.py
import os
from pathlib import Path
from typing import Optional

PROJECT_ROOT = Path(__file__).parent.parent

# Logging settings
LOG_LEVEL = os.getenv("QUBITSIM_LOG_LEVEL", "INFO")
LOG_COLOR = os.getenv("QUBITSIM_LOG_COLOR", "true").lower() == "true"

# Simulation settings
DEFAULT_TRIALS = int(os.getenv("QUBITSIM_TRIALS", "1000"))
DEFAULT_BACKEND = os.getenv("QUBITSIM_BACKEND", "serial")


def _seed_from_env() -> Optional[int]:
    raw = os.getenv("QUBITSIM_SEED", "").strip()
    return int(raw) if raw else None


DEFAULT_SEED = _seed_from_env()

# Output
DATA_DIR = Path(os.getenv("QUBITSIM_DATA_DIR", PROJECT_ROOT / "data"))
