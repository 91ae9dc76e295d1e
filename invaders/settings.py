"""
Game settings
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from invaders.constants import FPS, TITLE


@dataclass
class GameSettings:
    """
    Runtime settings for the game.

    The window size is fixed at ``WIDTH`` x ``HEIGHT`` and is not part of the
    settings.
    """

    title: str = TITLE
    fps: int = FPS
    seed: int | None = None
    live_bounds: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GameSettings":
        """
        Build settings from a nested dictionary.

        Unknown sections and keys are ignored.

        :param data: ``{"window": {...}, "game": {...}, "logging": {...}}``
        :type data: dict

        :return: GameSettings
        """
        window = data.get("window", {})
        game = data.get("game", {})
        logging_cfg = data.get("logging", {})

        defaults = cls()
        seed = game.get("seed", defaults.seed)
        return cls(
            title=str(window.get("title", defaults.title)),
            fps=int(game.get("fps", defaults.fps)),
            seed=None if seed is None else int(seed),
            live_bounds=bool(game.get("live_bounds", defaults.live_bounds)),
            log_level=str(logging_cfg.get("level", defaults.log_level)),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the settings in the shape accepted by ``from_dict``."""
        return {
            "window": {"title": self.title},
            "game": {
                "fps": self.fps,
                "seed": self.seed,
                "live_bounds": self.live_bounds,
            },
            "logging": {"level": self.log_level},
        }
