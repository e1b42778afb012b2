# qubitsim/tests/test_register.py
import logging
import pytest
from qubitsim.gates import NOT, SUPERPOSITION
from qubitsim.position import ONE
from qubitsim.qubit import Qubit
from qubitsim.register import QubitRegister

def test_new_empty_register():
    reg = QubitRegister.new(0)
    assert len(reg) == 0
    assert reg.is_empty()

def test_new_register_is_all_zero():
    reg = QubitRegister.new(5)
    assert len(reg) == 5
    assert not reg.is_empty()
    assert all(q == Qubit.zero() for q in reg.qubits)

def test_new_rejects_negative_size():
    with pytest.raises(ValueError):
        QubitRegister.new(-1)

def test_get_out_of_range_is_none():
    reg = QubitRegister.new(5)
    assert reg.get(999) is None
    assert reg.get(-1) is None
    assert reg.get_mut(5) is None
    assert QubitRegister.new(0).get(0) is None

def test_get_in_range():
    reg = QubitRegister.new(5)
    assert reg.get(0) == Qubit.zero()
    assert reg.get_mut(4) is reg.qubits[4]

def test_get_mut_is_live():
    reg = QubitRegister.new(2)
    reg.get_mut(1).update(ONE)
    assert len(reg.get(1).positions) == 2
    assert len(reg.get(0).positions) == 1

def test_single_qubit_gate_touches_only_target():
    reg = QubitRegister.new(5)
    assert reg.apply_single_qubit_gate(NOT, 1) is True
    assert reg.get(1) == Qubit.one()
    for k in (0, 2, 3, 4):
        assert reg.get(k) == Qubit.zero()

def test_single_qubit_gate_superposition():
    expected = Qubit.zero().apply_gate(SUPERPOSITION).initial_position()
    reg = QubitRegister.new(10)
    reg.apply_single_qubit_gate(SUPERPOSITION, 0)
    assert reg.get_mut(0).initial_position() == expected

def test_single_qubit_gate_out_of_range_logs_and_skips(caplog):
    reg = QubitRegister.new(5)
    with caplog.at_level(logging.ERROR, logger="qubitsim"):
        ok = reg.apply_single_qubit_gate(NOT, 999)
    assert ok is False
    assert all(q == Qubit.zero() for q in reg.qubits)
    assert any("Invalid qubit index 999" in r.getMessage() for r in caplog.records)
    assert caplog.records[-1].levelno == logging.ERROR

def test_display():
    reg = QubitRegister.new(2)
    reg.apply_single_qubit_gate(NOT, 1)
    assert str(reg) == "<1.0|0⟩ + 0.0|1⟩, 0.0|0⟩ + 1.0|1⟩>"
    assert str(QubitRegister.new(0)) == "<>"
