"""Brian2 rendition of the single-cell model, used to cross-check the numpy integrator.

The equations mirror :mod:`hhsim.model`. Integration uses a custom explicit
state updater with the same Heun scheme, corrector evaluated at time t.
"""
import logging

import numpy as np

from .heun import SimulationResult
from .parameters import DEFAULT_PARAMETERS, HHParameters

logger = logging.getLogger(__name__)

try:
    import brian2 as b2
except ImportError:  # pragma: no cover - depends on the environment
    b2 = None

# =========================
# Hodgkin–Huxley equations
# =========================
EQUATIONS = '''
dv/dt = (I_app - I_K - I_Na - I_L) / C_m : volt

I_app = I_amp * int(t - I_start >= 1*ms) * int(I_end - t >= 1*ms) : amp/meter**2

I_K  = g_K*n**4*(v - V_K)      : amp/meter**2
I_Na = g_Na*m**3*h*(v - V_Na)  : amp/meter**2
I_L  = g_L*(v - V_L)           : amp/meter**2

dn/dt = alpha_n*(1 - n) - beta_n*n : 1
dm/dt = alpha_m*(1 - m) - beta_m*m : 1
dh/dt = alpha_h*(1 - h) - beta_h*h : 1

alpha_n = 0.01*(10 - v/mV)/(exp((10 - v/mV)/10) - 1)/ms : Hz
beta_n  = 0.125*exp(-v/mV/80)/ms                       : Hz

alpha_m = 0.1*(25 - v/mV)/(exp((25 - v/mV)/10) - 1)/ms  : Hz
beta_m  = 4*exp(-v/mV/18)/ms                            : Hz

alpha_h = 0.07*exp(-v/mV/20)/ms                         : Hz
beta_h  = 1/(exp((30 - v/mV)/10) + 1)/ms                : Hz
'''

# Heun predictor-corrector, both stages at the same t
HEUN_DESCRIPTION = '''
k = dt * f(x, t)
x_new = x + 0.5 * (k + dt * f(x + k, t))
'''


def _require_brian():
    if b2 is None:
        raise ImportError("the brian backend needs brian2: pip install 'hhsim[brian]'")
    return b2


def namespace(params: HHParameters = DEFAULT_PARAMETERS) -> dict:
    """Model constants with brian2 units."""
    b2 = _require_brian()
    ms, mV = b2.ms, b2.mV
    uF, msiemens, uA, cm = b2.uF, b2.msiemens, b2.uA, b2.cm
    return {
        'C_m': params.C_m * uF / cm ** 2,
        'g_K': params.g_K * msiemens / cm ** 2,
        'g_Na': params.g_Na * msiemens / cm ** 2,
        'g_L': params.g_L * msiemens / cm ** 2,
        'V_K': params.V_K * mV,
        'V_Na': params.V_Na * mV,
        'V_L': params.V_L * mV,
        'I_amp': params.I * uA / cm ** 2,
        'I_start': params.I_start_time * ms,
        'I_end': params.I_end_time * ms,
    }


def simulate_brian(params: HHParameters = DEFAULT_PARAMETERS,
                   record: bool = False, target: str = 'numpy') -> SimulationResult:
    """
    Run the model through brian2 for num_steps - 1 steps.

    Only the voltage trace is recorded when ``record`` is set; n, m and h are
    left as None. ``target`` is the brian2 code generation target.
    """
    b2 = _require_brian()
    b2.start_scope()
    b2.prefs.codegen.target = target

    dt = params.dt * b2.ms
    ns = namespace(params)
    heun = b2.ExplicitStateUpdater(HEUN_DESCRIPTION)

    neuron = b2.NeuronGroup(1, EQUATIONS, method=heun, dt=dt, namespace=ns)

    # Initial conditions: V_L and the opening rates at V_L
    neuron.v = ns['V_L']
    neuron.n = 'alpha_n*ms'
    neuron.m = 'alpha_m*ms'
    neuron.h = 'alpha_h*ms'

    objects = [neuron]
    monitor = None
    if record:
        monitor = b2.StateMonitor(neuron, 'v', record=0, dt=dt)
        objects.append(monitor)

    net = b2.Network(*objects)
    steps = params.num_steps - 1
    logger.debug("brian2: running %d steps", steps)
    net.run(steps * dt)

    final_state = (float(neuron.v[0] / b2.mV), float(neuron.n[0]),
                   float(neuron.m[0]), float(neuron.h[0]))
    if not record:
        return SimulationResult(params, final_state)

    # the monitor samples before each step, so append the final value
    t = np.append(np.asarray(monitor.t / b2.ms), steps * params.dt)
    V = np.append(np.asarray(monitor.v[0] / b2.mV), final_state[0])
    return SimulationResult(params, final_state, t=t, V=V)
