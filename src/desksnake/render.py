# render.py
"""
Cells are drawn by writing bitmap files into a folder on the desktop; the
file manager's icon view is the screen. Each cell owns one file, so a
"pixel" changes color when its file is overwritten.
"""
import logging
from pathlib import Path

from platformdirs import user_desktop_dir  # type: ignore

from .config import FILE_PREFIX, SNAKE_DIR_NAME
from .errors import CleanupError, DesktopNotFoundError, RenderError
from .game import Cell
from .images import CellImages, make_cell_images

logger = logging.getLogger(__name__)


# ---------- File naming ----------
def cell_filename(cell: Cell) -> str:
    col, row = cell
    return f"{FILE_PREFIX}p{row}-{col}.bmp"


def decoy_filename(index: int) -> str:
    return f"{FILE_PREFIX}o{index}.bmp"


# ---------- Folder discovery / cleanup ----------
def find_snake_dir() -> Path:
    """Locate <desktop>/snake. The folder has to exist already."""
    desktop = user_desktop_dir()
    if not desktop:
        raise DesktopNotFoundError("could not resolve the desktop directory")
    target = Path(desktop) / SNAKE_DIR_NAME
    if not target.is_dir():
        raise DesktopNotFoundError(f"{target} does not exist; create it first")
    return target


def clear_old_files(directory: Path) -> int:
    """Delete the ds_* files a previous run left behind. Returns how many."""
    removed = 0
    try:
        for path in directory.iterdir():
            if path.is_file() and path.name.startswith(FILE_PREFIX):
                path.unlink()
                removed += 1
    except OSError as exc:
        raise CleanupError(f"cannot clear old files in {directory}: {exc}") from exc
    return removed


# ---------- Renderer ----------
class FileCellRenderer:
    """Writes the red or black bitmap to the file of the cell being drawn."""

    def __init__(self, directory: Path, images: CellImages | None = None):
        self.directory = Path(directory)
        self.images = images or make_cell_images()

    def _write(self, name: str, data: bytes) -> None:
        path = self.directory / name
        try:
            path.write_bytes(data)
        except OSError as exc:
            raise RenderError(f"cannot write {path}: {exc}") from exc

    def draw(self, cell: Cell, occupied: bool) -> None:
        self._write(cell_filename(cell), self.images.for_state(occupied))

    def prerender(self, width: int, height: int, offset: int) -> None:
        """
        Blank out the whole board before the first tick.
        Decoys go first; they only pad the icon layout and are never touched again.
        """
        for o in range(offset):
            self._write(decoy_filename(o), self.images.empty)

        for row in range(height):
            for col in range(width):
                self.draw((col, row), False)

        logger.info("Pre-rendered %d cells and %d decoys in %s",
                    width * height, offset, self.directory)
