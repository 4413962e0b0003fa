from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"
sys.path.insert(0, str(SRC_DIR))

from collector.api_client import APIClientError  # noqa: E402
from loader.flag_loader import load_flags  # noqa: E402
from surface.document import Document  # noqa: E402
from utils.config import load_api_config  # noqa: E402
from utils.logging import get_logger, setup_logging  # noqa: E402


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Fetch all countries and build one flag image per country")
    p.add_argument("--config", default=None, help="Path to api.yaml (default: config/api.yaml)")
    p.add_argument("--attach", action="store_true", help="Append each flag image to the container")
    p.add_argument("--output", default=None, help="Write the rendered document as HTML (implies --attach)")
    return p.parse_args(argv)


async def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    setup_logging()
    logger = get_logger(component="load_flags")

    cfg = load_api_config(args.config)
    doc = Document([cfg.container_id])
    container = doc.get_element_by_id(cfg.container_id)
    attach = bool(args.attach or args.output)

    try:
        refs = await load_flags(container, config=cfg, attach=attach)
    except APIClientError as e:
        logger.error("load_flags_failed", error=str(e), error_type=type(e).__name__)
        print(f"❌ load failed: {e}")
        return 1

    missing = sum(1 for r in refs if r.src is None)
    print(f"✅ {len(refs)} flag images created ({missing} without png)")

    if args.output:
        out = Path(args.output)
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(doc.render_html(), encoding="utf-8")
        print(f"  - written to {out}")

    return 0


if __name__ == "__main__":
    raise SystemExit(asyncio.run(main()))
