"""
Quantum engine: puts qubits in superposition, measures them and returns
the outcome as random bits.
"""

from __future__ import annotations

import logging
from typing import List

from qiskit import QuantumCircuit
from qiskit_aer import AerSimulator
from qiskit import transpile

from .config import PasswordConfig, DEFAULT_CONFIG

logger = logging.getLogger(__name__)


class QuantumEngine:
    """
    Random bit source backed by a local quantum circuit simulator.

    Each request for n bits runs an n-qubit circuit once. The generator asks
    for one character's worth of bits at a time, so the circuit width stays
    at the alphabet bit width instead of growing with the password length.
    """

    def __init__(self, config: PasswordConfig | None = None) -> None:
        self.config = config or DEFAULT_CONFIG
        # Local simulator backend.
        self.backend = AerSimulator()

        # Kept for callers that want to inspect the most recent run.
        self.last_raw_bits: list[int] | None = None
        self.last_circuit: QuantumCircuit | None = None
        self.runs = 0

        # Transpiled circuits keyed by width; the generator reuses one width.
        self._circuits: dict[int, QuantumCircuit] = {}

        self.max_qubits = self._backend_qubit_limit()

        # Safety: ensure the per-character bit width fits on the backend.
        if self.max_qubits is not None and self.config.bit_width > self.max_qubits:
            raise ValueError(
                f"Alphabet needs {self.config.bit_width} qubits per character, "
                f"backend limit is {self.max_qubits}. "
                "Use fewer characters in PasswordConfig."
            )

    def _backend_qubit_limit(self) -> int | None:
        configuration = getattr(self.backend, "configuration", None)
        if configuration is None:
            return None
        return getattr(configuration(), "num_qubits", None)

    def _build_circuit(self, n: int) -> QuantumCircuit:
        """
        Prepare n qubits, put each into superposition with an H gate and
        measure them in the computational basis.
        """
        qc = QuantumCircuit(n, n)
        for i in range(n):
            qc.h(i)
        qc.measure(range(n), range(n))
        return qc

    def _circuit_for(self, n: int) -> QuantumCircuit:
        tqc = self._circuits.get(n)
        if tqc is None:
            logger.debug("Transpiling %d-qubit circuit for %s", n, self.backend.name)
            tqc = transpile(self._build_circuit(n), self.backend)
            self._circuits[n] = tqc
        return tqc

    def next_bits(self, n: int) -> List[int]:
        """
        Run the circuit once and return n measured bits, qubit 0 first.
        """
        if n < 1:
            raise ValueError(f"Bit count must be positive, got {n}.")
        if self.max_qubits is not None and n > self.max_qubits:
            raise ValueError(
                f"Requested {n} bits exceeds backend limit ({self.max_qubits})."
            )

        tqc = self._circuit_for(n)

        run_options = {"shots": 1}
        if self.config.simulator_seed is not None:
            # A fixed seed would repeat the same outcome on every run.
            run_options["seed_simulator"] = self.config.simulator_seed + self.runs
        # Run with a single shot: one random outcome
        result = self.backend.run(tqc, **run_options).result()
        self.runs += 1
        counts = result.get_counts()

        # counts is a dict like {'0101...': 1}
        bitstring = next(iter(counts.keys()))

        # Qiskit orders bits as [q_(n-1) ... q_0]; reverse so index 0 is first qubit.
        bits = [int(b) for b in bitstring[::-1]]

        self.last_raw_bits = bits
        self.last_circuit = tqc
        return bits
