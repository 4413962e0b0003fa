from __future__ import annotations

from pathlib import Path

import pytest

from utils.config import load_api_config


def test_project_default_config_loads(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("FLAG_LOADER_API_CONFIG", raising=False)
    cfg = load_api_config()
    assert cfg.base_url == "https://restcountries.com"
    assert cfg.endpoint == "/v3.1/all"
    assert cfg.container_id == "main"
    assert cfg.params == {}


def test_env_path_precedence(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    p = tmp_path / "api.yaml"
    p.write_text(
        "api:\n"
        "  base_url: https://mirror.example.com/\n"
        "  endpoint: /v3.1/all\n"
        "  timeout_seconds: 5\n"
        "  fields: [name, flags]\n"
        "  container_id: flags\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("FLAG_LOADER_API_CONFIG", str(p))

    cfg = load_api_config()
    assert cfg.base_url == "https://mirror.example.com/"
    assert cfg.timeout_seconds == 5.0
    assert cfg.fields == ("name", "flags")
    assert cfg.params == {"fields": "name,flags"}
    assert cfg.container_id == "flags"


def test_missing_keys_are_reported(tmp_path: Path) -> None:
    p = tmp_path / "api.yaml"
    p.write_text("api:\n  base_url: https://restcountries.com\n", encoding="utf-8")

    with pytest.raises(ValueError) as exc:
        load_api_config(str(p))
    assert "api.endpoint" in str(exc.value)
    assert "api.timeout_seconds" in str(exc.value)


def test_fields_must_be_a_list(tmp_path: Path) -> None:
    p = tmp_path / "api.yaml"
    p.write_text(
        "api:\n  base_url: https://restcountries.com\n  endpoint: /v3.1/all\n  timeout_seconds: 1\n  fields: name\n",
        encoding="utf-8",
    )
    with pytest.raises(ValueError):
        load_api_config(str(p))
