# MIT License (see LICENSE)
"""
Core physics for the demo.

This subpackage provides:
    - Integrators: fixed-step Euler under gravity.
    - Invariants: kinetic, potential and mechanical energy of the ball.

Typical usage:
    from ramp_ball.core import euler_step

    euler_step(ball, np.array([0.0, 120.0]), dt=1/30)
"""
from .integrators import euler_step
from .invariants import kinetic_energy, potential_energy, mechanical_energy

__all__ = [
    # Integrators
    "euler_step",
    # Invariants
    "kinetic_energy",
    "potential_energy",
    "mechanical_energy",
]
