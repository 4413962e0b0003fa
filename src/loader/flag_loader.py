from __future__ import annotations

from collector.api_client import APIClient, APIPayloadError
from surface.document import Container
from transforms.countries import ImageReference, to_image_reference, transform_countries
from utils.config import DEFAULT_API_CONFIG, APIConfig
from utils.logging import get_logger


logger = get_logger(component="flag_loader")


async def fetch_countries(*, client: APIClient, config: APIConfig) -> list:
    """
    Single GET of the country list. Errors propagate from the client unchanged.
    """
    result = await client.get(config.endpoint, params=config.params)
    if not isinstance(result.data, list):
        raise APIPayloadError(f"Expected a JSON array from {config.endpoint}, got {type(result.data).__name__}")
    return result.data


async def load_flags(
    container: Container | None = None,
    *,
    client: APIClient | None = None,
    config: APIConfig | None = None,
    attach: bool = False,
) -> list[ImageReference]:
    """
    Fetch every country and build one ImageReference per record, in payload order.

    - `container` is only written to when `attach` is true.
    - An injected `client` is left open; a client created here is closed before returning.
    """
    cfg = config or DEFAULT_API_CONFIG
    owned = client is None
    if client is None:
        client = APIClient(base_url=cfg.base_url, timeout_seconds=cfg.timeout_seconds)

    try:
        logger.info("flags_fetch_start", url=f"{client.base_url}{cfg.endpoint}")
        payload = await fetch_countries(client=client, config=cfg)
    finally:
        if owned:
            await client.aclose()

    records = transform_countries(payload)
    refs = [to_image_reference(r) for r in records]

    for i, record in enumerate(records):
        if record.flag_png is None:
            logger.warning("flag_missing_png", index=i, name=record.common_name)

    attached = attach and container is not None
    if attached:
        for ref in refs:
            container.append(ref)

    logger.info("flags_loaded", count=len(refs), attached=attached)
    return refs
