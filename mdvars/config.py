from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .errors import ConfigError

DEFAULT_CFG_FILE = "mdvars.yaml"

# Пресеты markdown-it-py, не требующие дополнительных зависимостей
PRESETS = ("commonmark", "default", "zero")

# --------------------------------------------------------------------------- #
# YAML loader
# --------------------------------------------------------------------------- #
_yaml = YAML(typ="safe")


@dataclass(frozen=True)
class RenderConfig:
    """
    Настройки рендеринга документа.

    Attributes:
        preset: Пресет markdown-it ("commonmark", "default", "zero")
        html: Разрешить сырой HTML в исходнике
        typographer: Включить типографские замены и умные кавычки
        breaks: Переводить одиночные переводы строк в <br>
    """
    preset: str = "commonmark"
    html: bool = False
    typographer: bool = False
    breaks: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RenderConfig":
        """Создание экземпляра из словаря (из YAML) со строгой проверкой полей."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(str(k) for k in set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")

        preset = data.get("preset", cls.preset)
        if preset not in PRESETS:
            raise ConfigError(f"preset: expected one of {', '.join(PRESETS)}, got {preset!r}")

        flags: Dict[str, bool] = {}
        for key in ("html", "typographer", "breaks"):
            val = data.get(key, getattr(cls, key))
            if not isinstance(val, bool):
                raise ConfigError(f"{key}: expected bool, got {type(val).__name__}")
            flags[key] = val

        return cls(preset=preset, **flags)

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


def load_config(path: Path) -> RenderConfig:
    """
    Загрузить mdvars.yaml.

    • Если файла нет, вернуть дефолты.
    • Пустой файл эквивалентен пустой мапе.
    • Корень YAML обязан быть мапой.
    """
    if not path.is_file():
        return RenderConfig()

    try:
        raw = _yaml.load(path.read_text(encoding="utf-8")) or {}
    except (OSError, YAMLError) as e:
        raise ConfigError(f"Failed to read config {path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"YAML must be a mapping: {path}")

    try:
        return RenderConfig.from_dict(raw)
    except ConfigError as e:
        raise ConfigError(f"{path}: {e}") from e


__all__ = ["DEFAULT_CFG_FILE", "PRESETS", "RenderConfig", "load_config"]
