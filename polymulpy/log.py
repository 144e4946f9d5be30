import logging
import os

NUMERICS = 15
logging.addLevelName(NUMERICS, "NUMERICS")

_FORMAT = "%(levelname)s (%(name)s): %(message)s"


class KernelLogger(logging.Logger):
    """Logger with an extra ``numerics`` level for compile and timing output."""

    def numerics(self, msg, *args, **kwargs):
        if self.isEnabledFor(NUMERICS):
            self._log(NUMERICS, msg, args, **kwargs)


def _level_from_env(default: int = logging.WARNING) -> int:
    raw = os.environ.get("POLYMUL_LOG_LEVEL", "").strip().upper()
    if not raw:
        return default
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw)
    return level if isinstance(level, int) else default


def _configure_root() -> logging.Logger:
    root = logging.getLogger("polymulpy")
    if not getattr(root, "_polymul_configured", False):
        console = logging.StreamHandler()
        console.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(console)
        root.setLevel(_level_from_env())
        root._polymul_configured = True
    return root


def kernel_logger(name: str) -> KernelLogger:
    """Return a :class:`KernelLogger` below the ``polymulpy`` logger tree.

    Parameters
    ----------
    name : str
        Usually the caller's ``__name__``.

    Returns
    -------
    KernelLogger
        The logger. Handlers live on the ``polymulpy`` root only, so messages
        propagate there and are printed once.
    """
    _configure_root()

    previous = logging.getLoggerClass()
    logging.setLoggerClass(KernelLogger)
    try:
        logger = logging.getLogger(name)
    finally:
        logging.setLoggerClass(previous)

    # Loggers created before this call keep their original class.
    if not isinstance(logger, KernelLogger):
        logger.__class__ = KernelLogger
    return logger
