import pytest

from desksnake.config import Config, load_config
from desksnake.errors import ConfigError


def write(tmp_path, text):
    path = tmp_path / "config.toml"
    path.write_text(text)
    return str(path)


def test_load_config(tmp_path):
    path = write(tmp_path, "width = 3\nheight = 2\noffset = 1\n")
    assert load_config(path) == Config(width=3, height=2, offset=1)


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError):
        load_config(str(tmp_path / "config.toml"))


def test_unparsable_file(tmp_path):
    with pytest.raises(ConfigError):
        load_config(write(tmp_path, "width = = 3"))


def test_missing_key(tmp_path):
    with pytest.raises(ConfigError, match="offset"):
        load_config(write(tmp_path, "width = 3\nheight = 2\n"))


@pytest.mark.parametrize("text", [
    'width = "3"\nheight = 2\noffset = 0',
    "width = 3.5\nheight = 2\noffset = 0",
    "width = true\nheight = 2\noffset = 0",
    "width = 0\nheight = 2\noffset = 0",
    "width = 3\nheight = 2\noffset = -1",
])
def test_bad_values(tmp_path, text):
    with pytest.raises(ConfigError):
        load_config(write(tmp_path, text))


def test_zero_offset_is_fine(tmp_path):
    assert load_config(write(tmp_path, "width = 1\nheight = 1\noffset = 0")).offset == 0
