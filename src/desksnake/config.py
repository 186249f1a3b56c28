from dataclasses import dataclass
import tomllib

from .errors import ConfigError

# ----- Files & folders -----
CONFIG_FILE = "config.toml"
SNAKE_DIR_NAME = "snake"
FILE_PREFIX = "ds_"

# ----- Bitmaps -----
PIXEL_SIZE = 256  # side of each icon bitmap, in pixels

# ----- Colors -----
BLACK = (0, 0, 0)
RED   = (255, 0, 0)

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)

# ----- Pacing -----
# The icon cache won't refresh much faster than this
TICK_MS = 1200


@dataclass(frozen=True)
class Config:
    width: int   # grid columns
    height: int  # grid rows
    offset: int  # decoy files written ahead of the grid


def _read_int(data: dict, key: str, minimum: int) -> int:
    if key not in data:
        raise ConfigError(f"missing key {key!r}")
    value = data[key]
    # bool is an int subclass; `width = true` is not a size
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"{key!r} must be an integer, got {value!r}")
    if value < minimum:
        raise ConfigError(f"{key!r} must be >= {minimum}, got {value}")
    return value


def load_config(path: str = CONFIG_FILE) -> Config:
    """
    Read width / height / offset from a TOML file.
    Raises ConfigError if the file is missing, unparsable or incomplete.
    """
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except OSError as exc:
        raise ConfigError(f"cannot read {path}: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"cannot parse {path}: {exc}") from exc

    return Config(
        width=_read_int(data, "width", 1),
        height=_read_int(data, "height", 1),
        offset=_read_int(data, "offset", 0),
    )
