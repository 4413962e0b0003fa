from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import os
import yaml
from dotenv import load_dotenv


@dataclass(frozen=True)
class APIConfig:
    base_url: str
    endpoint: str
    timeout_seconds: float
    fields: tuple[str, ...] = field(default_factory=tuple)
    container_id: str = "main"

    @property
    def params(self) -> dict[str, Any]:
        # /v3.1/all takes an optional comma-separated `fields` filter
        if not self.fields:
            return {}
        return {"fields": ",".join(self.fields)}


DEFAULT_API_CONFIG = APIConfig(
    base_url="https://restcountries.com",
    endpoint="/v3.1/all",
    timeout_seconds=30.0,
)


def _project_root() -> Path:
    # Resolve from this file: .../src/utils/config.py -> project root is 3 parents up.
    return Path(__file__).resolve().parents[2]


def load_api_config(path: str | None = None) -> APIConfig:
    """
    Load API config from YAML.

    Precedence:
    - explicit `path`
    - env `FLAG_LOADER_API_CONFIG`
    - project default `config/api.yaml`
    """
    load_dotenv()
    cfg_path = Path(path or os.getenv("FLAG_LOADER_API_CONFIG") or (_project_root() / "config" / "api.yaml"))
    cfg = load_yaml(cfg_path)
    api = cfg.get("api") or {}

    base_url = api.get("base_url")
    endpoint = api.get("endpoint")
    timeout_seconds = api.get("timeout_seconds")
    fields = api.get("fields") or []
    container_id = api.get("container_id") or "main"

    missing: list[str] = []
    if not base_url:
        missing.append("api.base_url")
    if not endpoint:
        missing.append("api.endpoint")
    if timeout_seconds is None:
        missing.append("api.timeout_seconds")
    if missing:
        raise ValueError(f"Missing {', '.join(missing)} in {cfg_path}")

    if not isinstance(fields, list):
        raise ValueError(f"api.fields must be a list in {cfg_path}")

    return APIConfig(
        base_url=str(base_url),
        endpoint=str(endpoint),
        timeout_seconds=float(timeout_seconds),
        fields=tuple(str(f) for f in fields),
        container_id=str(container_id),
    )


def load_yaml(path: str | Path) -> dict[str, Any]:
    p = Path(path)
    return yaml.safe_load(p.read_text(encoding="utf-8")) or {}
