from .parameters import DEFAULT_PARAMETERS
from .rates import alpha_h, alpha_m, alpha_n, beta_h, beta_m, beta_n, heaviside


def applied_current(t, params=DEFAULT_PARAMETERS):
    """Rectangular stimulus pulse I_app(t).

    I_app(t) = I * H(t - I_start_time) * H(I_end_time - t)

    with H the thresholded step from :func:`hhsim.rates.heaviside`.
    """
    return (params.I
            * heaviside(t - params.I_start_time)
            * heaviside(params.I_end_time - t))


def ionic_currents(V, n, m, h, params=DEFAULT_PARAMETERS):
    # I_K  = g_K  * n⁴     * (V - V_K)
    # I_Na = g_Na * m³ * h * (V - V_Na)
    # I_L  = g_L           * (V - V_L)
    I_K = params.g_K * n ** 4 * (V - params.V_K)
    I_Na = params.g_Na * m ** 3 * h * (V - params.V_Na)
    I_L = params.g_L * (V - params.V_L)
    return I_K, I_Na, I_L


def derivatives(t, V, n, m, h, params=DEFAULT_PARAMETERS):
    """
    Instantaneous vector field of the single-cell HH system.

      C_m * dV/dt = I_app(t) - I_K - I_Na - I_L
      dn/dt = α_n(V)*(1 - n) - β_n(V)*n
      dm/dt = α_m(V)*(1 - m) - β_m(V)*m
      dh/dt = α_h(V)*(1 - h) - β_h(V)*h

    Returns the tuple (dV, dn, dm, dh).
    """
    I_app = applied_current(t, params)
    I_K, I_Na, I_L = ionic_currents(V, n, m, h, params)

    dV = (I_app - I_K - I_Na - I_L) / params.C_m
    dn = alpha_n(V) * (1.0 - n) - beta_n(V) * n
    dm = alpha_m(V) * (1.0 - m) - beta_m(V) * m
    dh = alpha_h(V) * (1.0 - h) - beta_h(V) * h

    return dV, dn, dm, dh
