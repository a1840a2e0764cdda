"""
Загрузка и валидация конфигурации RabbitHole.
Схема описана на Pydantic; файлы конфигурации — YAML или JSON.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, FrozenSet, Tuple, Union

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
)

__all__ = (
    "IGNORED_EXTENSIONS",
    "CONTAINER_SELECTORS",
    "ScraperConfig",
    "load_config",
)

#: Расширения файлов, которые не являются HTML-документами и пропускаются при обходе.
IGNORED_EXTENSIONS: FrozenSet[str] = frozenset(
    {
        ".7z", ".apk", ".avi", ".bz2", ".css", ".csv", ".dmg", ".doc", ".docx",
        ".exe", ".flv", ".gif", ".gz", ".iso", ".jpeg", ".jpg", ".js", ".json",
        ".jsx", ".md", ".mov", ".mp3", ".mp4", ".msi", ".ogg", ".pdf", ".png",
        ".ppt", ".pptx", ".rar", ".rpm", ".svg", ".tar", ".ts", ".tsx", ".txt",
        ".webm", ".webp", ".wmv", ".xls", ".xlsx", ".xml", ".xz", ".zip",
    }
)

#: Порядок выбора контейнера с основным текстом страницы.
CONTAINER_SELECTORS: Tuple[str, ...] = ("article", "main", '[class*="content"]')


class ScraperConfig(BaseModel):
    """Настройки HTTP-клиента, обхода ссылок и извлечения текста."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    timeout: float = Field(60.0, gt=0, description="Таймаут на один запрос (секунд).")
    user_agent: str = Field("RabbitHole/0.1.0", min_length=1, description="Заголовок User-Agent.")
    depth: int = Field(2, ge=0, description="Глубина обхода по умолчанию (корень = 1).")
    ignored_extensions: FrozenSet[str] = Field(
        default=IGNORED_EXTENSIONS, description="Расширения, которые не обходятся."
    )
    container_selectors: Tuple[str, ...] = Field(
        default=CONTAINER_SELECTORS, min_length=1, description="CSS-селекторы контейнера с контентом."
    )

    @field_validator("ignored_extensions", mode="before")
    @classmethod
    def _normalize_extensions(cls, v: Any) -> Any:
        if isinstance(v, str):
            v = [v]
        if isinstance(v, (list, tuple, set, frozenset)):
            out = set()
            for ext in v:
                ext = str(ext).strip().lower()
                if not ext:
                    continue
                out.add(ext if ext.startswith(".") else f".{ext}")
            return frozenset(out)
        return v

    @field_validator("container_selectors")
    @classmethod
    def _check_selectors(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        cleaned = tuple(s.strip() for s in v if s.strip())
        if not cleaned:
            raise ValueError("container_selectors must contain at least one selector")
        return cleaned


_DEFAULT_CFG = Path("configs/default.yaml")


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Неправильный YAML в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень YAML должен быть mapping, получено {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Неправильный JSON в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень JSON должен быть mapping, получено {type(data).__name__}")
    return data


def load_config(path: Union[str, Path, None] = None) -> ScraperConfig:
    """
    Читает YAML или JSON и возвращает проверенный объект ScraperConfig.
    Без явного пути использует configs/default.yaml, если он есть, иначе значения по умолчанию.
    Явно указанный, но отсутствующий файл — FileNotFoundError.
    """
    if path is None:
        if not _DEFAULT_CFG.is_file():
            return ScraperConfig()
        path_obj = _DEFAULT_CFG
    else:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        data = _read_yaml(path_obj)
    elif suffix == ".json":
        data = _read_json(path_obj)
    else:
        raise ValueError(f"Неподдерживаемый формат конфига: {suffix}")

    return ScraperConfig(**data)
