import numpy as np
import pytest

from hhsim import DEFAULT_PARAMETERS as P
from hhsim.heun import time_grid
from hhsim.model import applied_current, derivatives, ionic_currents
from hhsim.rates import alpha_h, alpha_m, alpha_n, beta_h, beta_m, beta_n


@pytest.mark.parametrize('t, expected', [
    (0.0, 0.0),
    (1000.0, 0.0),
    (1000.5, 0.0),
    (1001.0, 12.0),
    (3000.0, 12.0),
    (4999.0, 12.0),
    (4999.5, 0.0),
    (5000.0, 0.0),
    (9999.0, 0.0),
])
def test_applied_current_pulse(t, expected):
    assert applied_current(t, P) == expected


def test_applied_current_on_time_grid():
    t = time_grid(P)
    eps = 1e-6
    for lo, hi in [(990.0, 1010.0), (4990.0, 5010.0)]:
        for ti in t[(t > lo) & (t < hi)]:
            if ti < P.I_start_time + 1.0 - eps or ti > P.I_end_time - 1.0 + eps:
                assert applied_current(ti, P) == 0.0
            elif P.I_start_time + 1.0 + eps <= ti <= P.I_end_time - 1.0 - eps:
                assert applied_current(ti, P) == P.I
    assert applied_current(t[0], P) == 0.0
    assert applied_current(t[-1], P) == 0.0


def test_ionic_currents_vanish_at_reversal():
    I_K, _, _ = ionic_currents(P.V_K, 0.5, 0.5, 0.5, P)
    _, I_Na, _ = ionic_currents(P.V_Na, 0.5, 0.5, 0.5, P)
    _, _, I_L = ionic_currents(P.V_L, 0.5, 0.5, 0.5, P)
    assert I_K == 0.0
    assert I_Na == 0.0
    assert I_L == 0.0


def test_ionic_currents_values():
    I_K, I_Na, I_L = ionic_currents(20.0, 0.5, 0.4, 0.3, P)
    assert I_K == pytest.approx(36.0 * 0.5 ** 4 * 32.0)
    assert I_Na == pytest.approx(120.0 * 0.4 ** 3 * 0.3 * -95.0)
    assert I_L == pytest.approx(0.3 * 9.4)


def test_derivatives_formula():
    t, V, n, m, h = 2000.0, 5.0, 0.3, 0.1, 0.6
    dV, dn, dm, dh = derivatives(t, V, n, m, h, P)

    I_ion = (36.0 * n ** 4 * (V + 12.0)
             + 120.0 * m ** 3 * h * (V - 115.0)
             + 0.3 * (V - 10.6))
    assert dV == pytest.approx((12.0 - I_ion) / 1.0, rel=1e-12)
    assert dn == pytest.approx(alpha_n(V) * (1 - n) - beta_n(V) * n, rel=1e-12)
    assert dm == pytest.approx(alpha_m(V) * (1 - m) - beta_m(V) * m, rel=1e-12)
    assert dh == pytest.approx(alpha_h(V) * (1 - h) - beta_h(V) * h, rel=1e-12)


def test_gating_at_steady_state_is_stationary():
    V = 0.0
    n = alpha_n(V) / (alpha_n(V) + beta_n(V))
    m = alpha_m(V) / (alpha_m(V) + beta_m(V))
    h = alpha_h(V) / (alpha_h(V) + beta_h(V))
    _, dn, dm, dh = derivatives(0.0, V, n, m, h, P)
    assert abs(dn) < 1e-12
    assert abs(dm) < 1e-12
    assert abs(dh) < 1e-12


def test_derivatives_are_pure():
    args = (3000.0, 40.0, 0.4, 0.8, 0.2, P)
    first = derivatives(*args)
    second = derivatives(*args)
    assert first == second
    assert np.all(np.isfinite(first))


def test_stimulus_only_changes_voltage_derivative():
    state = (5.0, 0.3, 0.1, 0.6)
    off = derivatives(0.0, *state, P)
    on = derivatives(3000.0, *state, P)
    assert on[0] - off[0] == pytest.approx(P.I / P.C_m)
    assert on[1:] == off[1:]


def test_applied_current_array():
    t = np.array([0.0, 1000.5, 1001.0, 3000.0, 4999.5, 6000.0])
    np.testing.assert_array_equal(applied_current(t, P),
                                  [0.0, 0.0, 12.0, 12.0, 0.0, 0.0])
