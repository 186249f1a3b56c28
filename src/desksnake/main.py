# main.py
import logging
import time
from typing import Callable, Optional

import numpy as np  # type: ignore

from .config import CONFIG_FILE, TICK_MS, load_config
from .controls import DirectionState, InputSource, KeyboardListener
from .errors import DeskSnakeError
from .game import CellRenderer, GameState, new_game_state, step_game, flush_updates
from .render import FileCellRenderer, find_snake_dir, clear_old_files

logger = logging.getLogger(__name__)


def setup_logging(level: int = logging.INFO) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
    )


def run_game(
    state: GameState,
    renderer: CellRenderer,
    source: InputSource,
    tick_ms: int = TICK_MS,
    max_ticks: Optional[int] = None,
    sleep: Callable[[float], None] = time.sleep,
    rng: Optional[np.random.Generator] = None,
) -> None:
    """
    The game loop. Runs forever unless max_ticks is given; a RenderError
    from the renderer ends it.
    """
    rng = rng if rng is not None else np.random.default_rng()

    while max_ticks is None or state.ticks < max_ticks:
        # 1) input (never waits for a key)
        direction = source.poll()

        # 2) update
        step_game(state, direction, rng)
        logger.debug("Tick %d: head=%s", state.ticks, state.head)

        # 3) render
        flush_updates(state, renderer)

        sleep(tick_ms / 1000)


def main() -> int:
    setup_logging()

    try:
        cfg = load_config(CONFIG_FILE)
        logger.info("Board %dx%d, %d decoys", cfg.width, cfg.height, cfg.offset)

        target = find_snake_dir()
        removed = clear_old_files(target)
        logger.info("Cleared %d old files from %s", removed, target)

        renderer = FileCellRenderer(target)
        renderer.prerender(cfg.width, cfg.height, cfg.offset)

        controls = DirectionState()
        KeyboardListener(controls).start()

        run_game(new_game_state(cfg), renderer, controls)
    except DeskSnakeError as exc:
        logger.error("%s: %s", type(exc).__name__, exc)
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
