"""
Game session around the minesweeper engine.

MinesweeperGame owns the current EngineState and the game phase:

    start ──reset()──> playing ──reveal()──> won
                          │
                          └──reveal() on a mine──> lost ──undo()──> playing

    • Mines are placed on the first reveal (first-click safety).
    • Before a fatal reveal the state is snapshotted; undo() restores it
      once per loss.
    • won, and lost without undo, are terminal until the next reset().
    • tick() advances the elapsed-seconds counter; the caller owns the clock.

Rendering, input and timing devices stay outside; the UI reads get_obs()
and forwards gestures to reveal() / flag().
"""

from __future__ import annotations
import logging
import numpy as np
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from board_generation import mesh_for_config
from density import GameConfig, mine_count_for
from minesweeper import (
    EngineState,
    check_win,
    init_game_tiles,
    place_mines,
    reveal_all_mines,
    reveal_tile,
    toggle_flag,
)
from tiles import Tile, check_tile_id


logger = logging.getLogger(__name__)

START = "start"
PLAYING = "playing"
WON = "won"
LOST = "lost"


@dataclass
class MinesweeperGame:
    """
    One game instance on a sphere or cube mesh.

    Args:
        config: mode, size and mine density
        seed: seed for mine placement; None draws fresh entropy
    """

    config: GameConfig = field(default_factory=GameConfig)
    seed: Optional[int] = None

    # Dynamic fields (created in reset)
    state: EngineState = field(init=False, default_factory=EngineState)
    phase: str = field(init=False, default=START)
    elapsed: int = field(init=False, default=0)
    undo_snapshot: Optional[EngineState] = field(init=False, default=None)
    rng: np.random.Generator = field(init=False, repr=False)

    def __post_init__(self):
        self.rng = np.random.default_rng(self.seed)

    # ----------------------------------------------------------
    # RESET
    # ----------------------------------------------------------
    def reset(self, mesh: Optional[List[Tile]] = None) -> Dict[str, Any]:
        """Generate a new mesh (unless one is given) and start playing."""
        if mesh is None:
            mesh = mesh_for_config(self.config)
        tiles = init_game_tiles(mesh)

        self.state = EngineState(
            tiles=tiles,
            mine_count=mine_count_for(len(tiles), self.config.density),
        )
        self.phase = PLAYING
        self.elapsed = 0
        self.undo_snapshot = None

        logger.info(
            "new %s game: %d tiles, %d mines",
            self.config.mode, len(tiles), self.state.mine_count,
        )
        return self.get_obs()

    # ----------------------------------------------------------
    # SNAPSHOT / RESTORE
    # ----------------------------------------------------------
    def snapshot(self) -> EngineState:
        """Copy of tiles, flag count and the first-click flag."""
        return self.state.copy()

    def load_snapshot(self, snap: EngineState):
        self.state = snap.copy()

    # ----------------------------------------------------------
    # ACTIONS
    # ----------------------------------------------------------
    @property
    def tiles(self) -> List[Tile]:
        return self.state.tiles

    @property
    def flags_remaining(self) -> int:
        return self.state.mine_count - self.state.flag_count

    @property
    def can_undo(self) -> bool:
        return self.phase == LOST and self.undo_snapshot is not None

    def reveal(self, tile_id: int) -> str:
        """
        Reveal a tile and return the resulting phase.

        Ignored outside the playing phase and on revealed or flagged tiles.
        """
        if self.phase != PLAYING:
            return self.phase
        tile_id = check_tile_id(self.state.tiles, tile_id)
        tile = self.state.tiles[tile_id]
        if tile.is_revealed or tile.is_flagged:
            return self.phase

        if not self.state.mines_placed:
            self.state.tiles = place_mines(
                self.state.tiles, self.state.mine_count, tile_id, rng=self.rng
            )
            self.state.mines_placed = True

        if self.state.tiles[tile_id].is_mine:
            self.undo_snapshot = self.snapshot()
            self.state.tiles = reveal_all_mines(reveal_tile(self.state.tiles, tile_id))
            self.phase = LOST
            logger.info("mine hit on tile %d", tile_id)
            return self.phase

        self.state.tiles = reveal_tile(self.state.tiles, tile_id)
        if check_win(self.state.tiles):
            self.phase = WON
            logger.info("board cleared in %d s", self.elapsed)
        return self.phase

    def flag(self, tile_id: int) -> bool:
        """Toggle a flag. Returns True if the board changed."""
        if self.phase != PLAYING:
            return False
        tile_id = check_tile_id(self.state.tiles, tile_id)
        tile = self.state.tiles[tile_id]
        if tile.is_revealed:
            return False

        self.state.tiles = toggle_flag(self.state.tiles, tile_id)
        self.state.flag_count += -1 if tile.is_flagged else 1
        return True

    def undo(self) -> bool:
        """
        Return to the state just before the fatal reveal.

        Available once per loss; returns False when there is nothing to undo.
        """
        if not self.can_undo:
            return False
        self.load_snapshot(self.undo_snapshot)
        self.undo_snapshot = None
        self.phase = PLAYING
        logger.info("undo after loss")
        return True

    def tick(self):
        """Advance the elapsed-seconds counter while playing."""
        if self.phase == PLAYING:
            self.elapsed += 1

    # ----------------------------------------------------------
    # OBSERVATION
    # ----------------------------------------------------------
    def get_obs(self) -> Dict[str, Any]:
        """
        Read-only view for renderers and HUDs.

        Returns:
            {
                "tiles": list of Tile,
                "phase": str,
                "mine_count": int,
                "flag_count": int,
                "flags_remaining": int,
                "elapsed": int,
                "can_undo": bool,
            }
        """
        return {
            "tiles": self.state.tiles,
            "phase": self.phase,
            "mine_count": self.state.mine_count,
            "flag_count": self.state.flag_count,
            "flags_remaining": self.flags_remaining,
            "elapsed": self.elapsed,
            "can_undo": self.can_undo,
        }
