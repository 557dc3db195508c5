import pytest

from qpassgen import PasswordConfig, PasswordGenerator, meets_requirements
from qpassgen.quantum_engine import QuantumEngine


def test_next_bits_returns_measured_bits():
    engine = QuantumEngine()

    bits = engine.next_bits(7)

    assert len(bits) == 7
    assert set(bits) <= {0, 1}
    assert engine.last_raw_bits == bits
    assert engine.last_circuit is not None
    assert engine.runs == 1


def test_circuit_is_reused_per_width():
    engine = QuantumEngine()
    engine.next_bits(7)
    first = engine.last_circuit
    engine.next_bits(7)
    assert engine.last_circuit is first


def test_seeded_engines_are_reproducible():
    config = PasswordConfig(simulator_seed=1234)
    a = QuantumEngine(config)
    b = QuantumEngine(config)

    assert [a.next_bits(7) for _ in range(5)] == [b.next_bits(7) for _ in range(5)]


def test_rejects_non_positive_counts():
    with pytest.raises(ValueError):
        QuantumEngine().next_bits(0)


def test_rejects_requests_beyond_backend_limit():
    engine = QuantumEngine()
    engine.max_qubits = 4
    with pytest.raises(ValueError):
        engine.next_bits(5)


def test_generates_password_from_simulator():
    password = PasswordGenerator(config=PasswordConfig(simulator_seed=7)).generate()

    assert len(password) == 16
    assert meets_requirements(password)
