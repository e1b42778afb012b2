# qubitsim/position.py
import sys
from dataclasses import dataclass

import numpy as np

EPSILON = sys.float_info.epsilon


@dataclass(frozen=True)
class QuantumPosition:
    initial: complex   # alpha, amplitude of |0>
    possible: complex  # beta, amplitude of |1>

    def __post_init__(self):
        # coerce numpy scalars / ints so equality and display stay plain python
        object.__setattr__(self, "initial", complex(self.initial))
        object.__setattr__(self, "possible", complex(self.possible))

    def norm2(self) -> float:
        return abs(self.initial) ** 2 + abs(self.possible) ** 2

    def has_valid_amplitude(self) -> bool:
        """|alpha|^2 + |beta|^2 == 1 within a few ulps (gate products are not exact)."""
        return abs(self.norm2() - 1.0) < 10.0 * EPSILON

    def probability(self) -> float:
        """Born-rule probability of reading |0>."""
        return abs(self.initial) ** 2

    def as_array(self) -> np.ndarray:
        return np.array([self.initial, self.possible], dtype=np.complex128)


ZERO = QuantumPosition(1, 0)
ONE = QuantumPosition(0, 1)
FLIP = QuantumPosition(0, -1)
QUARTER_TURN = QuantumPosition(1j, 0)
BACK_QUARTER_TURN = QuantumPosition(0, -1j)


def format_amplitude(z: complex) -> str:
    """Real part only when the imaginary part is exactly zero."""
    z = complex(z.real + 0.0, z.imag)  # -0.0 -> 0.0
    if z.imag == 0.0:
        return repr(z.real)
    return str(z)
