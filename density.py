"""
density.py — Game configuration presets

A game is described by:

    - mode:    "sphere" (Goldberg polyhedron) or "cube"
    - size:    preset name, mapped to a frequency / grid size per mode
    - density: fraction of tiles that hold mines

The session layer calls:
    cfg = GameConfig(mode="cube", size="medium", density=0.18)
    cfg.size_param, cfg.tile_count, cfg.mine_count
"""

from __future__ import annotations
import math
from dataclasses import dataclass


MODES = ("sphere", "cube")

# size_param is the Goldberg frequency (sphere) or the per-face grid size (cube)
SIZE_CONFIG = {
    "sphere": {
        "small": {"size_param": 3, "label": "Small"},
        "medium": {"size_param": 5, "label": "Medium"},
        "large": {"size_param": 7, "label": "Large"},
    },
    "cube": {
        "small": {"size_param": 4, "label": "Small"},
        "medium": {"size_param": 6, "label": "Medium"},
        "large": {"size_param": 9, "label": "Large"},
    },
}

DIFFICULTIES = {
    "easy": {"mode": "sphere", "size": "small", "density": 0.15, "label": "Easy"},
    "medium": {"mode": "sphere", "size": "medium", "density": 0.18, "label": "Medium"},
    "hard": {"mode": "sphere", "size": "large", "density": 0.20, "label": "Hard"},
}


# ------------------------------------------------------------------

def tile_count_for(mode: str, size_param: int) -> int:
    """Tile count of a mesh without building it."""
    if mode == "sphere":
        return 10 * size_param * size_param + 2
    if mode == "cube":
        return 6 * size_param * size_param
    raise ValueError(f"unknown mode {mode!r}, expected one of {MODES}")


def get_tile_count(mode: str, size: str) -> int:
    return tile_count_for(mode, SIZE_CONFIG[mode][size]["size_param"])


def mine_count_for(tile_count: int, density: float) -> int:
    """floor(tile_count * density)."""
    return int(math.floor(tile_count * density))


# ------------------------------------------------------------------

@dataclass(frozen=True)
class GameConfig:
    """
    Validated game settings.

    Args:
        mode:    one of MODES
        size:    key of SIZE_CONFIG[mode]
        density: mine fraction in [0, 1)
    """

    mode: str = "sphere"
    size: str = "small"
    density: float = 0.15

    def __post_init__(self):
        if self.mode not in SIZE_CONFIG:
            raise ValueError(f"unknown mode {self.mode!r}, expected one of {MODES}")
        if self.size not in SIZE_CONFIG[self.mode]:
            raise ValueError(
                f"unknown size {self.size!r} for mode {self.mode!r}, "
                f"expected one of {tuple(SIZE_CONFIG[self.mode])}"
            )
        if not 0.0 <= self.density < 1.0:
            raise ValueError(f"density must be in [0, 1), got {self.density}")

    @classmethod
    def from_difficulty(cls, key: str) -> "GameConfig":
        preset = DIFFICULTIES[key]
        return cls(mode=preset["mode"], size=preset["size"], density=preset["density"])

    @property
    def size_param(self) -> int:
        return SIZE_CONFIG[self.mode][self.size]["size_param"]

    @property
    def label(self) -> str:
        return SIZE_CONFIG[self.mode][self.size]["label"]

    @property
    def tile_count(self) -> int:
        return tile_count_for(self.mode, self.size_param)

    @property
    def mine_count(self) -> int:
        return mine_count_for(self.tile_count, self.density)
