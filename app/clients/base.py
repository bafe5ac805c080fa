import logging
from typing import Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from app.clients.result import Found, LookupResult, NotFound, TransportError

logger = logging.getLogger("app.clients")

M = TypeVar("M", bound=BaseModel)


async def fetch_entity(
    http: httpx.AsyncClient,
    url: str,
    entity_id: str,
    model: Type[M],
) -> LookupResult[M]:
    """
    GET url -> Found(model) / NotFound / TransportError
    不重試、不轉換例外，交給呼叫端決定。
    """
    try:
        resp = await http.get(url, headers={"Accept": "application/json"})
    except httpx.HTTPError as e:
        logger.error("GET %s failed: %s", url, e)
        return TransportError(entity_id=entity_id, reason=str(e) or type(e).__name__)

    if resp.status_code == 404:
        logger.info("GET %s -> 404", url)
        return NotFound(entity_id=entity_id)

    if resp.status_code != 200:
        logger.error("GET %s -> unexpected status %s", url, resp.status_code)
        return TransportError(
            entity_id=entity_id,
            reason=f"unexpected status {resp.status_code}",
            status_code=resp.status_code,
        )

    try:
        entity = model.model_validate(resp.json())
    except (ValueError, ValidationError) as e:
        logger.error("GET %s returned an unreadable body: %s", url, e)
        return TransportError(entity_id=entity_id, reason="unreadable response body", status_code=200)

    return Found(entity)
