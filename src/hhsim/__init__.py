"""
hhsim - single-cell Hodgkin-Huxley simulation with a fixed-step Heun integrator.
"""
import logging

from .parameters import DEFAULT_PARAMETERS, HHParameters
from .rates import alpha_h, alpha_m, alpha_n, beta_h, beta_m, beta_n, heaviside
from .model import applied_current, derivatives, ionic_currents
from .heun import (
    SimulationResult,
    final_voltage,
    heun_step,
    initial_state,
    simulate,
    time_grid,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    'DEFAULT_PARAMETERS',
    'HHParameters',
    'alpha_n',
    'beta_n',
    'alpha_m',
    'beta_m',
    'alpha_h',
    'beta_h',
    'heaviside',
    'applied_current',
    'ionic_currents',
    'derivatives',
    'SimulationResult',
    'time_grid',
    'initial_state',
    'heun_step',
    'simulate',
    'final_voltage',
]
