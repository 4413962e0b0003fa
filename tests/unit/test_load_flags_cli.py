from __future__ import annotations

import importlib.util
import logging
from pathlib import Path

import pytest
import structlog

from collector.api_client import APIServerError
from transforms.countries import ImageReference


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    logging.getLogger().handlers.clear()
    structlog.reset_defaults()


def _load_script():
    p = Path(__file__).resolve().parents[2] / "scripts" / "load_flags.py"
    spec = importlib.util.spec_from_file_location("load_flags_script", p)
    mod = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(mod)
    return mod


@pytest.mark.asyncio
async def test_output_writes_html(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys) -> None:
    mod = _load_script()

    async def fake_load_flags(container, *, config, attach):
        refs = [ImageReference(src="https://example.com/t.png", alt="Testland"), ImageReference(src=None)]
        if attach:
            for r in refs:
                container.append(r)
        return refs

    monkeypatch.setattr(mod, "load_flags", fake_load_flags)
    out = tmp_path / "flags.html"

    rc = await mod.main(["--output", str(out)])

    assert rc == 0
    assert '<img src="https://example.com/t.png" alt="Testland">' in out.read_text(encoding="utf-8")
    assert "2 flag images created (1 without png)" in capsys.readouterr().out


@pytest.mark.asyncio
async def test_client_error_exits_1(monkeypatch: pytest.MonkeyPatch) -> None:
    mod = _load_script()

    async def failing_load_flags(container, *, config, attach):
        raise APIServerError("API server error (502)")

    monkeypatch.setattr(mod, "load_flags", failing_load_flags)

    assert await mod.main([]) == 1
