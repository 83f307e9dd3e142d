"""Voltage-dependent gating rates and the stimulus gate.

Voltages are relative to rest (mV), rates are per ms. All functions accept
scalars or numpy arrays.

alpha_n and alpha_m are 0/0 at v = 10 and v = 25 respectively. They are
evaluated as written, so those points give NaN (numpy emits a RuntimeWarning).
"""
import numpy as np


def alpha_n(v):
    # α_n(v) = 0.01 * (10 - v) / (exp((10 - v) / 10) - 1)
    return 0.01 * (10.0 - v) / (np.exp((10.0 - v) / 10.0) - 1.0)


def beta_n(v):
    # β_n(v) = 0.125 * exp(-v / 80)
    return 0.125 * np.exp(-v / 80.0)


def alpha_m(v):
    # α_m(v) = 0.1 * (25 - v) / (exp((25 - v) / 10) - 1)
    return 0.1 * (25.0 - v) / (np.exp((25.0 - v) / 10.0) - 1.0)


def beta_m(v):
    # β_m(v) = 4 * exp(-v / 18)
    return 4.0 * np.exp(-v / 18.0)


def alpha_h(v):
    # α_h(v) = 0.07 * exp(-v / 20)
    return 0.07 * np.exp(-v / 20.0)


def beta_h(v):
    # β_h(v) = 1 / (exp((30 - v) / 10) + 1)
    return 1.0 / (np.exp((30.0 - v) / 10.0) + 1.0)


def heaviside(x):
    """Thresholded step: 1.0 for x >= 1.0, else 0.0.

    The threshold sits at 1, not 0, so the stimulus gate opens one time unit
    after ``I_start_time`` and closes one time unit before ``I_end_time``.
    """
    if isinstance(x, np.ndarray):
        return np.where(x >= 1.0, 1.0, 0.0)
    if x >= 1.0:
        return 1.0
    return 0.0
