"""Benchmarks for the polynomial multiplication kernels.

Times the naive Cauchy-product kernels and the scaled add on random operands,
with ``numpy.convolve`` as a baseline.

Run with ``python -m polymulpy.benchmark.bench_kernels --a-len 64 --b-len 256``.
"""

from __future__ import annotations

import argparse

import numpy as np
import pyperf

from polymulpy.config import Config
from polymulpy.kernels import add_sum_product, product, scaled_add, warmup


def _add_worker_args(cmd: list[str], args: argparse.Namespace) -> None:
    """Populate pyperf worker command-line arguments."""
    cmd.extend(["--a-len", str(args.a_len)])
    cmd.extend(["--b-len", str(args.b_len)])
    cmd.extend(["--dtype", str(args.dtype)])
    cmd.extend(["--seed", str(args.seed)])

    if args.no_checks:
        cmd.append("--no-checks")


def _build_runner() -> tuple[pyperf.Runner, argparse.ArgumentParser]:
    """Create the pyperf runner and CLI parser."""
    parser = argparse.ArgumentParser(
        description="Benchmark naive polynomial multiplication kernels",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--a-len",
        type=int,
        default=64,
        dest="a_len",
        help="Length of the first operand",
    )
    parser.add_argument(
        "--b-len",
        type=int,
        default=256,
        dest="b_len",
        help="Length of the second operand",
    )
    parser.add_argument(
        "--dtype",
        choices=("int8", "int16", "int32", "int64"),
        default="int64",
        help="Coefficient dtype",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=0,
        help="RNG seed for deterministic operands",
    )
    parser.add_argument(
        "--no-checks",
        dest="no_checks",
        action="store_true",
        help="Disable argument contract checks in the wrappers",
    )

    runner = pyperf.Runner(
        _argparser=parser,
        add_cmdline_args=_add_worker_args,
        processes=1,
        warmups=1,
    )
    return runner, parser


def main() -> None:
    """CLI entry point for the kernel benchmark."""
    runner, _ = _build_runner()
    args = runner.parse_args()

    dtype = np.dtype(args.dtype)
    info = np.iinfo(dtype)
    bound = min(info.max, 100)

    rng = np.random.default_rng(args.seed)
    a0 = rng.integers(-bound, bound, size=args.a_len, dtype=dtype)
    a1 = rng.integers(-bound, bound, size=args.a_len, dtype=dtype)
    b = rng.integers(-bound, bound, size=args.b_len, dtype=dtype)
    p = np.zeros(args.a_len + args.b_len - 1, dtype=dtype)

    config = Config(check_contracts=not args.no_checks)
    warmup([dtype])

    def _bench_product() -> None:
        product(p, a0, b, config=config)

    def _bench_add_sum_product() -> None:
        add_sum_product(p, a0, a1, b, config=config)

    def _bench_scaled_add() -> None:
        scaled_add(p, b, 3, config=config)

    def _bench_convolve() -> np.ndarray:
        return np.convolve(a0, b)

    runner.bench_func("product", _bench_product)
    runner.bench_func("add_sum_product", _bench_add_sum_product)
    runner.bench_func("scaled_add", _bench_scaled_add)
    runner.bench_func("numpy_convolve", _bench_convolve)


if __name__ == "__main__":
    main()
