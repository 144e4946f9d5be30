"""Process-wide kernel configuration.

The configuration only controls the Python-side wrappers in
:mod:`polymulpy.kernels`: whether argument contracts are validated before a
kernel runs, and whether misordered operands are swapped. The Numba kernels
themselves take no configuration.

Defaults are read from the environment:

- ``POLYMUL_CHECK_CONTRACTS``
- ``POLYMUL_NORMALIZE_ORDER``

Invalid values fall back to the default (``True``) rather than raising.
"""

from __future__ import annotations

import json
import os
from pathlib import Path

import yaml

from polymulpy import log
from polymulpy.errors import ConfigError

_KEYS = ("check_contracts", "normalize_order")


def parse_bool_env(name: str, *, default: bool) -> bool:
    """Parse a boolean environment variable.

    Parameters
    ----------
    name:
        Environment variable name.
    default:
        Default value used when the variable is unset or invalid.

    Returns
    -------
    bool
        Parsed boolean value.
    """

    raw = os.environ.get(name, "").strip().lower()
    if raw in {"1", "true", "yes", "on"}:
        return True
    if raw in {"0", "false", "no", "off"}:
        return False
    return default


class Config:
    """Switches for the kernel wrappers.

    Parameters
    ----------
    check_contracts : bool, optional
        Validate lengths, dtypes, capacities and aliasing before every call.
        ``None`` reads ``POLYMUL_CHECK_CONTRACTS``.
    normalize_order : bool, optional
        Swap the operands of a two-operand kernel when the first one is longer.
        ``None`` reads ``POLYMUL_NORMALIZE_ORDER``.
    """

    check_contracts: bool = True
    normalize_order: bool = True

    def __init__(
        self,
        check_contracts: bool | None = None,
        normalize_order: bool | None = None,
    ):
        self.log = log.kernel_logger(__name__)

        if check_contracts is None:
            check_contracts = parse_bool_env("POLYMUL_CHECK_CONTRACTS", default=True)
        if normalize_order is None:
            normalize_order = parse_bool_env("POLYMUL_NORMALIZE_ORDER", default=True)

        self.check_contracts = bool(check_contracts)
        self.normalize_order = bool(normalize_order)

        if not self.check_contracts:
            self.log.warning(
                "Contract checks are disabled; invalid arguments have undefined results."
            )

    @classmethod
    def from_file(cls, path_config: str | Path) -> "Config":
        """Build a configuration from a json or yaml file.

        The file holds an optional ``kernels`` mapping with the keys
        ``check_contracts`` and ``normalize_order``. Missing keys fall back to
        the environment defaults.

        Parameters
        ----------
        path_config : str or pathlib.Path
            Path to a ``.json``, ``.yaml`` or ``.yml`` file.

        Returns
        -------
        Config
            The loaded configuration.

        Raises
        ------
        ConfigError
            If the file is missing, has an unsupported suffix, or contains
            unknown keys.
        """
        _path_config = Path(path_config)
        if not _path_config.is_file():
            raise ConfigError(f"Could not read config file {path_config}.")

        match _path_config.suffix:
            case ".json":
                with open(_path_config) as data:
                    content = json.load(data)
            case ".yaml" | ".yml":
                with open(_path_config) as data:
                    content = yaml.safe_load(data)
            case _:
                raise ConfigError("The provided config file needs to be a json or yaml file!")

        if content is None:
            content = {}
        if not isinstance(content, dict):
            raise ConfigError(f"Config file {path_config} must contain a mapping.")

        section = content.get("kernels", {}) or {}
        if not isinstance(section, dict):
            raise ConfigError("The 'kernels' section needs to be a mapping.")
        unknown = set(section) - set(_KEYS)
        if unknown:
            raise ConfigError(f"Unknown kernel config keys: {sorted(unknown)}")

        config = cls(**{key: section[key] for key in _KEYS if key in section})
        config.log.info(f"Loaded kernel configuration from {_path_config}")
        return config

    def __repr__(self) -> str:
        return (
            f"Config(check_contracts={self.check_contracts}, "
            f"normalize_order={self.normalize_order})"
        )


_active: Config | None = None


def get_config() -> Config:
    """Return the process-wide default configuration, creating it on first use."""
    global _active
    if _active is None:
        _active = Config()
    return _active


def set_config(config: Config | None) -> None:
    """Replace the process-wide default; ``None`` resets it to the environment defaults."""
    global _active
    _active = config
