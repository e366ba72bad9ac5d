import os
from dataclasses import dataclass, fields
from typing import Optional

from dotenv import load_dotenv

from .logging_utils import reconfigure

# env var -> (field, parser)
ENV_MAP = {
    'DUNGEON_MAX_SIZE': ('max_size', 'int'),
    'DUNGEON_MAX_ATTEMPTS': ('max_attempts', 'int'),
    'DUNGEON_SEED': ('seed', 'int'),
    'DUNGEON_ENABLE_GENERATION_METRICS': ('enable_metrics', 'bool'),
}


def _parse(env_key: str, raw: str, kind: str):
    if kind == 'bool':
        return raw.strip().lower() not in {'0', 'false', 'no', ''}
    try:
        return int(raw.strip())
    except ValueError:
        raise ValueError(f"{env_key} must be an integer, got {raw!r}") from None


@dataclass
class GeneratorConfig:
    max_size: int = 36
    max_attempts: int = 20
    seed: Optional[int] = None
    enable_metrics: bool = True
    corridor_chance: float = 0.5
    room_min_size: int = 5
    room_max_size: int = 8

    def validate(self) -> "GeneratorConfig":
        if self.max_size < 1:
            raise ValueError(f"max_size must be at least 1, got {self.max_size}")
        if self.max_attempts < 0:
            raise ValueError(f"max_attempts must not be negative, got {self.max_attempts}")
        if self.room_min_size > self.room_max_size:
            raise ValueError("room_min_size must not exceed room_max_size")
        return self

    @classmethod
    def from_env(cls, **overrides) -> "GeneratorConfig":
        """Build a config from defaults, then ``.env``/environment, then ``overrides``."""
        load_dotenv()
        reconfigure()
        cfg = cls()
        for env_key, (attr, kind) in ENV_MAP.items():
            if env_key in os.environ:
                setattr(cfg, attr, _parse(env_key, os.environ[env_key], kind))
        known = {f.name for f in fields(cls)}
        for key, value in overrides.items():
            if key not in known:
                raise TypeError(f"unknown config option {key!r}")
            if value is not None:
                setattr(cfg, key, value)
        return cfg.validate()


__all__ = ["GeneratorConfig", "ENV_MAP"]
