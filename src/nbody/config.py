import math
from nbody.constants import DEFAULT_DT
from nbody.errors import InvalidArgument


def default_config() -> dict:
    return {'dt': DEFAULT_DT}


def validate_config(config: dict) -> dict:
    try:
        dt = config['dt']
    except KeyError:
        raise InvalidArgument("dt hasn't been found in config") from None
    if isinstance(dt, bool) or not isinstance(dt, (int, float)):
        raise InvalidArgument(f'dt must be a number, got {dt!r}')
    if not math.isfinite(dt) or dt <= 0:
        raise InvalidArgument(f'dt must be positive and finite, got {dt!r}')
    return config
