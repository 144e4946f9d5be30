from .config import Config, get_config, set_config
from .errors import ConfigError, InvalidArgumentError, PolymulError
from .kernels import (
    add_product,
    add_sum_product,
    multiply,
    product,
    scaled_add,
    warmup,
)

__version__ = "0.1.0"
