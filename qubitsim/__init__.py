from .position import (
    BACK_QUARTER_TURN,
    FLIP,
    ONE,
    QUARTER_TURN,
    ZERO,
    QuantumPosition,
)
from .gates import NOT, PHASE, ROTATE, SUPERPOSITION, QuantumGate, QuantumOperator
from .qubit import Qubit
from .register import QubitRegister
from .simulation import simulate_superposition
from .report import SimulationReport, report

__version__ = "0.1.0"
