"""Fixed-step Heun integration of the single-cell Hodgkin-Huxley system.

Given dy/dt = f(t, y), each step advances the solution as

    k1    = f(t, y)
    y_hat = y + dt * k1
    k2    = f(t, y_hat)
    y(t + dt) = y(t) + (dt / 2) * (k1 + k2)

The corrector stage is evaluated at the same time t as the predictor stage.
The applied current is the only time-dependent term, so this only matters on
the step where the stimulus gate switches.
"""
import logging
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from .model import derivatives
from .parameters import DEFAULT_PARAMETERS, HHParameters
from .rates import alpha_h, alpha_m, alpha_n

logger = logging.getLogger(__name__)

State = Tuple[float, float, float, float]


@dataclass
class SimulationResult:
    """Outcome of a run. Trajectories are None when the run was not recorded."""

    params: HHParameters
    final_state: State
    t: Optional[np.ndarray] = None
    V: Optional[np.ndarray] = None
    n: Optional[np.ndarray] = None
    m: Optional[np.ndarray] = None
    h: Optional[np.ndarray] = None

    @property
    def final_voltage(self) -> float:
        return float(self.final_state[0])

    @property
    def num_steps(self) -> int:
        return self.params.num_steps

    @property
    def recorded(self) -> bool:
        return self.V is not None

    def _traces(self):
        return [x for x in (self.V, self.n, self.m, self.h) if x is not None]

    @property
    def finite(self) -> bool:
        """False when any state variable went NaN or infinite."""
        if not np.all(np.isfinite(self.final_state)):
            return False
        return all(bool(np.all(np.isfinite(x))) for x in self._traces())

    def first_non_finite_step(self) -> Optional[int]:
        """Index of the first time point with a non-finite state, if recorded."""
        traces = self._traces()
        if not traces:
            return None
        bad = np.zeros(len(traces[0]), dtype=bool)
        for x in traces:
            bad |= ~np.isfinite(x)
        idx = np.flatnonzero(bad)
        return int(idx[0]) if idx.size else None


def time_grid(params: HHParameters = DEFAULT_PARAMETERS) -> np.ndarray:
    """Read-only grid t[0] = 0, t[i] = t[i-1] + dt, ceil(t_max/dt) points."""
    t = np.full(params.num_steps, params.dt, dtype=np.float64)
    t[0] = 0.0
    # sequential accumulation, same rounding as t[i] = t[i-1] + dt
    np.cumsum(t, out=t)
    t.flags.writeable = False
    return t


def initial_state(params: HHParameters = DEFAULT_PARAMETERS) -> State:
    """
    V(0) = V_L, and each gating variable starts at its opening rate at V(0):

        n(0) = α_n(V_L),  m(0) = α_m(V_L),  h(0) = α_h(V_L)

    This is not the steady state α/(α+β).
    """
    V0 = params.V_L
    return V0, alpha_n(V0), alpha_m(V0), alpha_h(V0)


def heun_step(t, state: State, dt: float,
              params: HHParameters = DEFAULT_PARAMETERS) -> State:
    """
    One Heun step from (V, n, m, h) at time t:

        k1 = f(t, y)
        k2 = f(t, y + dt*k1)      (same t, not t + dt)
        y_next = y + (dt/2) * (k1 + k2)
    """
    V, n, m, h = state

    # predictor: k1 = f(t, y)
    dV1, dn1, dm1, dh1 = derivatives(t, V, n, m, h, params)

    aV = V + dV1 * dt
    aN = n + dn1 * dt
    aM = m + dm1 * dt
    aH = h + dh1 * dt

    # corrector: k2 = f(t, y + dt*k1)
    dV2, dn2, dm2, dh2 = derivatives(t, aV, aN, aM, aH, params)

    return (V + (dV1 + dV2) * dt / 2.0,
            n + (dn1 + dn2) * dt / 2.0,
            m + (dm1 + dm2) * dt / 2.0,
            h + (dh1 + dh2) * dt / 2.0)


def simulate(params: HHParameters = DEFAULT_PARAMETERS,
             record: bool = True) -> SimulationResult:
    """
    Integrate from the initial state over the whole time grid.

    Parameters:
        params : model constants, horizon and step size
        record : keep the full trajectories (otherwise only a rolling state)

    Exactly num_steps - 1 Heun steps are taken. NaN/Inf values are not
    trapped; they propagate and are reported through ``result.finite``.
    """
    num_ts = params.num_steps
    dt = params.dt
    logger.debug("integrating %d time points (dt=%g, t_max=%g, record=%s)",
                 num_ts, dt, params.t_max, record)

    state = initial_state(params)

    if record:
        t = time_grid(params)
        traj = np.empty((4, num_ts), dtype=np.float64)
        traj[:, 0] = state
        for i in range(num_ts - 1):
            state = heun_step(t[i], state, dt, params)
            traj[:, i + 1] = state
        V, n, m, h = traj
        result = SimulationResult(params, state, t, V, n, m, h)
    else:
        t_i = 0.0
        for _ in range(num_ts - 1):
            state = heun_step(t_i, state, dt, params)
            t_i = t_i + dt
        result = SimulationResult(params, state)

    if result.finite:
        logger.info("simulation finished: V[%d] = %g", num_ts - 1, result.final_voltage)
    else:
        bad = result.first_non_finite_step()
        if bad is None:
            logger.warning("simulation finished with a non-finite state: %s",
                           result.final_state)
        else:
            logger.warning("state became non-finite at step %d (t=%g)",
                           bad, result.t[bad])
    return result


def final_voltage(params: HHParameters = DEFAULT_PARAMETERS) -> float:
    """Membrane voltage at the last time point, V[N-1]."""
    return simulate(params, record=False).final_voltage
