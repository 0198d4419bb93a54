"""Game and bot settings.

Settings arrive as a mapping with the sections and key names of the
``settings.json`` file used by the desktop game::

    {
        "Bot": {"IsWhiteBot": false, "IsBlackBot": true,
                "WhiteBotLevel": 3, "BlackBotLevel": 3,
                "BotScoringType": "NumberAndPotential", "NoRandom": false,
                "Optimization": "None", "BotDelayMS": 0},
        "Game": {"MaxNumTurns": 120}
    }

Every value is validated and every enumeration resolved once, here.
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from checkie.core.enums import Color
from checkie.engine.minimax import MinimaxEngine
from checkie.engine.search import Optimization, ScoringMode

_LOGGER = logging.getLogger(__name__)

_DEFAULT_MAX_TURNS = 120

_COMMENT = re.compile(r'("(?:[^"\\]|\\.)*")|//[^\n]*|/\*.*?\*/', re.S)


class SettingsError(ValueError):
    """Settings are missing, malformed or out of range."""


@dataclass(frozen=True, slots=True)
class BotSettings:
    """Who is a bot, and how each bot searches."""

    white_is_bot: bool = False
    black_is_bot: bool = True
    white_depth: int = 3
    black_depth: int = 3
    scoring_mode: ScoringMode = ScoringMode.NUMBER
    optimization: Optimization = Optimization.NONE
    randomize: bool = True
    seed: int = 0
    delay_ms: int = 0

    def __post_init__(self) -> None:
        for name in ("white_depth", "black_depth", "delay_ms"):
            if getattr(self, name) < 0:
                raise SettingsError(f"{name} must be >= 0")

    def is_bot(self, color: Color) -> bool:
        return self.white_is_bot if color == Color.WHITE else self.black_is_bot

    def depth_for(self, color: Color) -> int:
        return self.white_depth if color == Color.WHITE else self.black_depth

    def make_engine(self) -> MinimaxEngine:
        """Engine configured from these settings.

        Without randomisation the engine is seeded with :attr:`seed`, so the
        same position always yields the same turn.
        """
        return MinimaxEngine(
            self.scoring_mode,
            seed=None if self.randomize else self.seed,
            optimization=self.optimization,
        )


@dataclass(frozen=True, slots=True)
class Settings:
    """All settings consumed by the game layer."""

    max_turns: int = _DEFAULT_MAX_TURNS
    bot: BotSettings = field(default_factory=BotSettings)

    def __post_init__(self) -> None:
        if self.max_turns <= 0:
            raise SettingsError("max_turns must be > 0")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Settings:
        """Build settings from a parsed ``settings.json`` mapping.

        Missing sections and keys keep their defaults.
        """
        bot = _section(data, "Bot")
        game = _section(data, "Game")
        defaults = BotSettings()
        try:
            scoring = bot.get("BotScoringType", defaults.scoring_mode.value)
            optimization = bot.get("Optimization", defaults.optimization.value)
            bot_settings = BotSettings(
                white_is_bot=_bool(bot, "IsWhiteBot", defaults.white_is_bot),
                black_is_bot=_bool(bot, "IsBlackBot", defaults.black_is_bot),
                white_depth=_int(bot, "WhiteBotLevel", defaults.white_depth),
                black_depth=_int(bot, "BlackBotLevel", defaults.black_depth),
                scoring_mode=ScoringMode.from_name(str(scoring)),
                optimization=Optimization.from_name(str(optimization)),
                randomize=not _bool(bot, "NoRandom", not defaults.randomize),
                seed=_int(bot, "Seed", defaults.seed),
                delay_ms=_int(bot, "BotDelayMS", defaults.delay_ms),
            )
            return cls(
                max_turns=_int(game, "MaxNumTurns", _DEFAULT_MAX_TURNS),
                bot=bot_settings,
            )
        except SettingsError:
            raise
        except ValueError as exc:
            raise SettingsError(str(exc)) from exc


def load_settings(path: str | Path) -> Settings:
    """Read settings from a JSON file; ``//`` and ``/* */`` comments are allowed."""
    path = Path(path)
    _LOGGER.debug("Loading settings from %s", path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SettingsError(f"Cannot read settings file {path}: {exc}") from exc
    try:
        data = json.loads(_strip_comments(text))
    except json.JSONDecodeError as exc:
        raise SettingsError(f"Invalid settings file {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise SettingsError(f"Settings file {path} must hold a JSON object")
    return Settings.from_mapping(data)


# ── Value helpers ────────────────────────────────────────────────────────────


def _strip_comments(text: str) -> str:
    # String literals are kept verbatim; a comment becomes a single space.
    return _COMMENT.sub(lambda m: " " if m.group(1) is None else m.group(1), text)


def _section(data: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    section = data.get(name, {})
    if not isinstance(section, Mapping):
        raise SettingsError(f"Settings section {name!r} must be an object")
    return section


def _bool(section: Mapping[str, Any], key: str, default: bool) -> bool:
    value = section.get(key, default)
    if not isinstance(value, bool):
        raise SettingsError(f"Setting {key!r} must be true or false, got {value!r}")
    return value


def _int(section: Mapping[str, Any], key: str, default: int) -> int:
    value = section.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int):
        raise SettingsError(f"Setting {key!r} must be an integer, got {value!r}")
    return value
