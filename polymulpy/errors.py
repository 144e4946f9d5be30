"""Exception types raised by polymulpy."""


class PolymulError(Exception):
    """Base class for all polymulpy errors."""


class InvalidArgumentError(PolymulError, ValueError):
    """A kernel call violated its argument contract.

    Raised for zero or out-of-range lengths, misordered operands, undersized or
    read-only destination buffers, aliased buffers and unsupported dtypes.
    """


class ConfigError(PolymulError):
    """A configuration file could not be read or contains unknown keys."""
