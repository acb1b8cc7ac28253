from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path

from .modifiers import ModifiersSpec


@dataclass(frozen=True)
class ParallelWayConfig:
    snap_threshold: float
    snap_default: bool
    copy_tags_default: bool
    snap_modifier_combo: str
    copy_tags_modifier_combo: str
    initial_move_delay_ms: int

    @staticmethod
    def default_path() -> Path:
        return _user_config_dir() / "parallelway.json"

    @staticmethod
    def load_default() -> "ParallelWayConfig":
        user_path = ParallelWayConfig.default_path()
        if user_path.exists():
            return ParallelWayConfig.from_json(user_path)
        return ParallelWayConfig.from_dict({})

    @staticmethod
    def from_json(path: Path) -> "ParallelWayConfig":
        data = json.loads(path.read_text(encoding="utf-8"))
        return ParallelWayConfig.from_dict(data)

    @staticmethod
    def from_dict(data: dict) -> "ParallelWayConfig":
        snap_threshold = float(data.get("snap_threshold", 0.35))
        snap_default = bool(data.get("snap_default", True))
        copy_tags_default = bool(data.get("copy_tags_default", True))
        snap_modifier_combo = str(data.get("snap_modifier_combo", "?sC"))
        copy_tags_modifier_combo = str(data.get("copy_tags_modifier_combo", "As?"))
        initial_move_delay_ms = int(data.get("initial_move_delay_ms", 200))
        return ParallelWayConfig(
            snap_threshold=snap_threshold,
            snap_default=snap_default,
            copy_tags_default=copy_tags_default,
            snap_modifier_combo=snap_modifier_combo,
            copy_tags_modifier_combo=copy_tags_modifier_combo,
            initial_move_delay_ms=initial_move_delay_ms,
        )

    @property
    def snap_modifiers(self) -> ModifiersSpec:
        return ModifiersSpec.parse(self.snap_modifier_combo)

    @property
    def copy_tags_modifiers(self) -> ModifiersSpec:
        return ModifiersSpec.parse(self.copy_tags_modifier_combo)

    def validate(self) -> None:
        if not 0.0 <= self.snap_threshold <= 0.5:
            raise ValueError("snap_threshold must be in [0, 0.5]")
        if self.initial_move_delay_ms < 0:
            raise ValueError("initial_move_delay_ms must be >= 0")
        for name in ("snap_modifier_combo", "copy_tags_modifier_combo"):
            try:
                ModifiersSpec.parse(getattr(self, name))
            except ValueError as exc:
                raise ValueError(f"{name} is invalid: {exc}") from exc


def _user_config_dir() -> Path:
    if os.name == "nt":
        base = os.environ.get("APPDATA") or os.environ.get("USERPROFILE")
        if base:
            return Path(base) / "ParallelWay"
    base = os.environ.get("XDG_CONFIG_HOME")
    if base:
        return Path(base) / "parallelway"
    return Path.home() / ".config" / "parallelway"
