import logging

from fastapi import APIRouter, Depends, HTTPException

from pubsub_push.client import PubSubClientAsync
from pubsub_push.deps import Settings, get_settings
from pubsub_push.exceptions import PubSubResponseError, PubSubValidationError
from .models import PushAddChannelsRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/push", tags=["push"])

async def get_pubsub_client(settings: Settings = Depends(get_settings)):
    client = PubSubClientAsync(settings)
    try:
        yield client
    finally:
        await client.close()

@router.post("/channels/add")
async def add_channels(
    req: PushAddChannelsRequest,
    client: PubSubClientAsync = Depends(get_pubsub_client),
):
    endpoint = (
        client.add_channels_to_push()
        .set_channels(req.channels)
        .set_device_id(req.device_id)
        .set_push_type(req.push_type)
    )
    if req.topic:
        endpoint.set_topic(req.topic)
    if req.environment:
        endpoint.set_environment(req.environment)

    try:
        await endpoint.run_async()
    except PubSubValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except PubSubResponseError as e:
        # błąd po stronie serwisu pub/sub propagujemy jako 502
        raise HTTPException(
            status_code=502,
            detail=f"Upstream error {e.status_code}: {e.body or e}",
        )

    logger.info("push channels added device=%s count=%s", req.device_id, len(endpoint.channels))
    return {"ok": True}
