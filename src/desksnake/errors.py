"""Errors that stop the game. All of them are fatal except inside the keyboard thread."""


class DeskSnakeError(Exception):
    """Base class; main() turns any of these into exit code 1."""


class ConfigError(DeskSnakeError):
    """config.toml is missing, unparsable or has bad values."""


class DesktopNotFoundError(DeskSnakeError):
    """The desktop (or the snake folder on it) can't be located."""


class CleanupError(DeskSnakeError):
    """A file left over from a previous run couldn't be listed or deleted."""


class RenderError(DeskSnakeError):
    """A cell bitmap couldn't be written."""
