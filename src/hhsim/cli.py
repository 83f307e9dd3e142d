"""Command line entry point: run the fixed simulation and print V[N-1]."""
import argparse
import logging
import sys

from .heun import simulate
from .parameters import DEFAULT_PARAMETERS

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="hhsim",
        description="Single-cell Hodgkin-Huxley simulation (Heun's method). "
                    "Prints the final membrane voltage.")
    ap.add_argument("--backend", choices=("numpy", "brian"), default="numpy",
                    help="Integration backend. Default: numpy.")
    ap.add_argument("-v", "--verbose", action="count", default=0,
                    help="Log progress to stderr (-vv for debug output).")
    return ap


def configure_logging(verbosity: int) -> None:
    if verbosity <= 0:
        return
    level = logging.INFO if verbosity == 1 else logging.DEBUG
    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(logging.Formatter("[%(levelname)s] %(name)s: %(message)s"))
    root = logging.getLogger("hhsim")
    root.addHandler(handler)
    root.setLevel(level)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    if args.backend == "brian":
        from .brian_hh import simulate_brian
        result = simulate_brian(DEFAULT_PARAMETERS)
    else:
        result = simulate(DEFAULT_PARAMETERS, record=False)

    if not result.finite:
        logger.warning("final voltage is not finite")

    # 6 significant digits, like a default-formatted stream
    print(f"{result.final_voltage:g}")
    return 0
