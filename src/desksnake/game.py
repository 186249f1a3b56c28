# game.py
import logging
from dataclasses import dataclass, field
from typing import List, Protocol, Tuple

import numpy as np  # type: ignore

from .config import Config, RIGHT

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]  # (column, row)
Update = Tuple[Cell, bool]  # (cell, occupied)


class CellRenderer(Protocol):
    def draw(self, cell: Cell, occupied: bool) -> None: ...


# ---------- Helpers ----------
def wrap(value: int, size: int) -> int:
    """Torus edges: stepping off one side re-enters on the other."""
    if value < 0:
        return size - 1
    if value >= size:
        return 0
    return value


def next_cell(head: Cell, direction: Tuple[int, int], width: int, height: int) -> Cell:
    hx, hy = head
    dx, dy = direction
    return (wrap(hx + dx, width), wrap(hy + dy, height))


def spawn_food(rng: np.random.Generator, width: int, height: int) -> Cell:
    # Anywhere on the board, including under the snake
    return (int(rng.integers(width)), int(rng.integers(height)))


# ---------- State ----------
@dataclass
class GameState:
    width: int
    height: int
    snake: List[Cell]             # oldest first, head is the last element
    direction: Tuple[int, int]
    food: Cell
    score: int = 0
    ticks: int = 0
    updates: List[Update] = field(default_factory=list)  # not yet drawn

    @property
    def head(self) -> Cell:
        return self.snake[-1]


def new_game_state(cfg: Config) -> GameState:
    return GameState(
        width=cfg.width,
        height=cfg.height,
        snake=[(1 % cfg.width, 1 % cfg.height)],
        direction=RIGHT,
        food=(2 % cfg.width, 1 % cfg.height),
    )


# ---------- Update / Draw ----------
def step_game(state: GameState, direction: Tuple[int, int],
              rng: np.random.Generator) -> List[Update]:
    """
    Advance the snake by one cell and queue the cells that changed.
    Always queues exactly two updates: the new head, then either the
    freed tail or the relocated food. No collision checks.
    """
    state.direction = direction
    new_head = next_cell(state.head, direction, state.width, state.height)

    state.snake.append(new_head)
    updates: List[Update] = [(new_head, True)]

    if new_head == state.food:
        # Grow: the tail stays
        state.score += 1
        state.food = spawn_food(rng, state.width, state.height)
        updates.append((state.food, True))
        logger.info("Food eaten at %s, score %d, next food at %s",
                    new_head, state.score, state.food)
    else:
        tail = state.snake.pop(0)
        updates.append((tail, False))

    state.updates.extend(updates)
    state.ticks += 1
    return updates


def flush_updates(state: GameState, renderer: CellRenderer) -> None:
    """Draw queued updates in order, then forget them."""
    for cell, occupied in state.updates:
        renderer.draw(cell, occupied)
    state.updates.clear()
