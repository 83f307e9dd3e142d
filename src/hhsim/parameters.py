import math
from dataclasses import dataclass


@dataclass(frozen=True)
class HHParameters:
    """Hodgkin-Huxley model constants.

    Voltages are measured relative to the resting potential (mV), times in ms.
    """

    # Membrane
    C_m: float = 1.0     # membrane capacitance (uF/cm^2)

    # Maximal conductances (mS/cm^2)
    g_K: float = 36.0
    g_Na: float = 120.0
    g_L: float = 0.3

    # Reversal potentials (mV)
    V_K: float = -12.0
    V_Na: float = 115.0
    V_L: float = 10.6

    # Simulation horizon and step (ms)
    t_max: float = 10000.0
    dt: float = 0.01

    # Applied current pulse
    I_start_time: float = 1000.0
    I_end_time: float = 5000.0
    I: float = 12.0      # uA/cm^2

    def __post_init__(self):
        if not self.dt > 0:
            raise ValueError(f"dt must be positive, got {self.dt}")
        if not self.t_max > 0:
            raise ValueError(f"t_max must be positive, got {self.t_max}")
        if self.C_m == 0:
            raise ValueError("C_m must be non-zero")

    @property
    def num_steps(self) -> int:
        """Number of time points, ceil(t_max / dt)."""
        return int(math.ceil(self.t_max / self.dt))


DEFAULT_PARAMETERS = HHParameters()
