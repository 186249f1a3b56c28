# images.py
from dataclasses import dataclass
from io import BytesIO
from typing import Tuple

import numpy as np  # type: ignore
import pygame       # type: ignore

from .config import PIXEL_SIZE, BLACK, RED


def solid_surface(color: Tuple[int, int, int], size: int = PIXEL_SIZE) -> pygame.Surface:
    """Square surface filled with a single color. No display needed."""
    pixels = np.empty((size, size, 3), dtype=np.uint8)  # [W, H, RGB]
    pixels[:] = color
    return pygame.surfarray.make_surface(pixels)


def encode_bmp(surface: pygame.Surface) -> bytes:
    buf = BytesIO()
    pygame.image.save(surface, buf, "cell.bmp")
    return buf.getvalue()


@dataclass(frozen=True)
class CellImages:
    """The two bitmaps every cell file is written from, encoded once."""
    empty: bytes     # black
    occupied: bytes  # red (snake or food)

    def for_state(self, occupied: bool) -> bytes:
        return self.occupied if occupied else self.empty


def make_cell_images(size: int = PIXEL_SIZE) -> CellImages:
    return CellImages(
        empty=encode_bmp(solid_surface(BLACK, size)),
        occupied=encode_bmp(solid_surface(RED, size)),
    )
