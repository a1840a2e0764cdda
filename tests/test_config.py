import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from rabbit_hole.config import CONTAINER_SELECTORS, IGNORED_EXTENSIONS, ScraperConfig, load_config


def write_file(tmp_path: Path, content: str, suffix: str) -> Path:
    path = tmp_path / f"config{suffix}"
    path.write_text(content, encoding="utf-8")
    return path


@pytest.mark.parametrize(
    "content,suffix,expect_exc",
    [
        ("timeout: 5\ndepth: 3", ".yaml", None),
        (json.dumps({"timeout": 5, "depth": 3}), ".json", None),
        ("timeout: -1", ".yaml", ValidationError),
        ("unknown_field: 1", ".yml", ValidationError),
        ("not: a: mapping", ".yaml", ValueError),
        ("- just\n- a list", ".yaml", TypeError),
        ("{broken", ".json", ValueError),
        ("timeout = 5", ".toml", ValueError),
    ],
)
def test_load_config_variants(tmp_path, content, suffix, expect_exc):
    cfg_path = write_file(tmp_path, content, suffix)
    if expect_exc:
        with pytest.raises(expect_exc):
            load_config(cfg_path)
    else:
        cfg = load_config(cfg_path)
        assert isinstance(cfg, ScraperConfig)
        assert cfg.timeout == 5
        assert cfg.depth == 3


def test_defaults():
    cfg = ScraperConfig()
    assert cfg.timeout == 60.0
    assert cfg.depth == 2
    assert cfg.ignored_extensions == IGNORED_EXTENSIONS
    assert cfg.container_selectors == CONTAINER_SELECTORS == ("article", "main", '[class*="content"]')


def test_config_is_frozen():
    cfg = ScraperConfig()
    with pytest.raises(ValidationError):
        cfg.timeout = 1.0


def test_ignored_extensions_are_normalized():
    cfg = ScraperConfig(ignored_extensions=["PDF", ".Zip", " ", "tar.gz"])
    assert cfg.ignored_extensions == frozenset({".pdf", ".zip", ".tar.gz"})


def test_empty_container_selectors_rejected():
    with pytest.raises(ValidationError):
        ScraperConfig(container_selectors=[" "])


def test_load_config_default_missing_uses_defaults(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert load_config(None) == ScraperConfig()


def test_load_config_default_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "configs").mkdir()
    (tmp_path / "configs" / "default.yaml").write_text("user_agent: Custom/2.0\n", encoding="utf-8")
    assert load_config(None).user_agent == "Custom/2.0"


def test_explicit_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")


def test_shipped_default_config_is_valid():
    shipped = Path(__file__).resolve().parent.parent / "configs" / "default.yaml"
    cfg = load_config(shipped)
    assert cfg.container_selectors == CONTAINER_SELECTORS
    assert cfg.timeout == 60
