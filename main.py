"""
CLI entry point for allocating a tensor and reporting its metrics.

Usage with config file:
    python main.py -c configuration.toml

Usage with command-line args:
    python main.py --dtype float32 --shape 4 16
    python main.py --dtype float64 --shape 4 16 --fill 5
"""
import argparse
import logging
import sys

from mdarray.domain.errors import MdarrayError
from mdarray.domain.use_cases.allocate_tensor import AllocateTensor, AllocationResult
from mdarray.infrastructure.configuration import AllocationConfiguration, LoggingConfiguration
from mdarray.infrastructure.cpu.allocator import CpuAllocator
from mdarray.infrastructure.cpu.tensor import Tensor
from mdarray.infrastructure.logging import setup_logging

logger = logging.getLogger(__name__)


def _fill_rule(text: str) -> str | int | float:
    if text in ("zeros", "ones"):
        return text
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"invalid fill {text!r}: expected 'zeros', 'ones' or a number"
        ) from None


def parse_args(argv=None):
    """
    Parse command-line arguments.

    Parameters
    ----------
    argv : list[str] | None
        Command-line arguments. If None, uses sys.argv.

    Returns
    -------
    argparse.Namespace
        Parsed arguments.
    """
    parser = argparse.ArgumentParser(
        description="Allocate a pre-filled tensor and report its shape, element count and size."
    )
    parser.add_argument(
        "-c",
        "--config",
        help="Path to TOML configuration file (if provided, other args are ignored)",
    )
    parser.add_argument(
        "--dtype",
        default="float32",
        help="Element type, e.g. float32, float64, int32 (default: float32)",
    )
    parser.add_argument(
        "--shape",
        type=int,
        nargs="*",
        default=[],
        help="Axis extents, outermost first (default: empty shape)",
    )
    parser.add_argument(
        "--fill",
        type=_fill_rule,
        default="zeros",
        help="'zeros', 'ones' or a numeric fill value (default: zeros)",
    )
    parser.add_argument(
        "--max-bytes",
        type=int,
        default=None,
        help="Refuse allocations larger than this many bytes (default: no limit)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    return parser.parse_args(argv)


def allocate(config: AllocationConfiguration) -> AllocationResult:
    """
    Allocate a tensor as described by the configuration.

    Parameters
    ----------
    config : AllocationConfiguration
        Element type, shape, fill rule and allocation ceiling.

    Returns
    -------
    AllocationResult
        The allocated tensor and its metrics.
    """
    factory = Tensor.of(config.dtype, allocator=CpuAllocator(max_bytes=config.max_bytes))

    use_case = AllocateTensor(factory=factory, shape=config.shape, fill=config.fill)
    return use_case.run()


def main(argv=None) -> int:
    """
    Main entry point.

    Parameters
    ----------
    argv : list[str] | None
        Command-line arguments. If None, uses sys.argv.

    Returns
    -------
    int
        Process exit code: 0 on success, 1 if the tensor could not be allocated
        or the dtype, shape or fill value is invalid.
    """
    args = parse_args(argv)

    if args.config:
        setup_logging(LoggingConfiguration.load(args.config).level)
        config = AllocationConfiguration.load(args.config)
    else:
        setup_logging(args.log_level)
        config = AllocationConfiguration(
            dtype=args.dtype,
            shape=args.shape,
            fill=args.fill,
            max_bytes=args.max_bytes,
        )

    try:
        result = allocate(config)
    except (MdarrayError, OverflowError, TypeError, ValueError) as e:
        logger.error(f"Allocation failed: {e}")
        return 1

    print(f"dtype={config.dtype} shape={result.shape} numel={result.numel} size={result.size}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
