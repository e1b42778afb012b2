# qubitsim/register.py
from dataclasses import dataclass
from typing import List, Optional

from .gates import QuantumGate
from .log import get_logger
from .qubit import Qubit

log = get_logger(__name__)


@dataclass
class QubitRegister:
    """
    A fixed-size row of independently evolving qubits. There is no joint
    state: a gate at index k only ever touches qubits[k].
    """
    qubits: List[Qubit]

    @staticmethod
    def new(n: int) -> "QubitRegister":
        if n < 0:
            raise ValueError(f"n must be non-negative, got {n}")
        return QubitRegister([Qubit.zero() for _ in range(n)])

    def __len__(self) -> int:
        return len(self.qubits)

    def is_empty(self) -> bool:
        return len(self.qubits) == 0

    def _in_range(self, index: int) -> bool:
        return 0 <= index < len(self.qubits)

    def get(self, index: int) -> Optional[Qubit]:
        return self.qubits[index] if self._in_range(index) else None

    def get_mut(self, index: int) -> Optional[Qubit]:
        """Same lookup as `get`; the returned qubit is the live register slot."""
        return self.get(index)

    def apply_single_qubit_gate(self, gate: QuantumGate, index: int) -> bool:
        if not self._in_range(index):
            log.error(f"Invalid qubit index {index} for register of size {len(self)}")
            return False
        self.qubits[index] = self.qubits[index].apply_gate(gate)
        return True

    def __str__(self) -> str:
        return "<" + ", ".join(str(q) for q in self.qubits) + ">"
