# pubsub_push/client.py

import json
import logging
from typing import Any, Optional

import httpx
import requests

from pubsub_push.deps import Settings, get_settings
from pubsub_push.exceptions import PubSubResponseError, PubSubValidationError
from pubsub_push.push.add_channels_to_push import AddChannelsToPush
from pubsub_push.push.models import RequestDescriptor

logger = logging.getLogger(__name__)


class PubSubClientCommon:
    def __init__(self, settings: Optional[Settings] = None):
        if not settings:
            settings = get_settings()
        self.settings = settings
        self.request_counter = 0
        self.error_counter = 0

    def add_channels_to_push(self) -> AddChannelsToPush:
        return AddChannelsToPush(self)

    def prepare(self, endpoint) -> RequestDescriptor:
        """
        Waliduje endpoint i zwraca gotowy deskryptor żądania
        (z uuid oraz auth, jeśli endpoint go wymaga).
        """
        try:
            endpoint.validate()
        except PubSubValidationError as e:
            logger.warning("%s validation failed: %s", endpoint.get_name(), e)
            raise

        descriptor = endpoint.build_request()
        params = dict(descriptor.params)
        params["uuid"] = self.settings.get_uuid()

        auth_key = self.settings.get_auth_key()
        if descriptor.auth_required and auth_key:
            params["auth"] = auth_key

        return descriptor.model_copy(update={"params": params})

    def finish(self, endpoint, descriptor: RequestDescriptor, status_code: int, body: str):
        if status_code >= 400:
            self.error_counter += 1
            logger.error(
                "%s failed: status=%s body=%s", descriptor.name, status_code, (body or "")[:400]
            )
            raise PubSubResponseError(
                f"{descriptor.name} error {status_code}", status_code=status_code, body=body
            )

        try:
            payload: Any = json.loads(body)
        except ValueError:
            self.error_counter += 1
            logger.error("%s returned non-JSON body: %s", descriptor.name, (body or "")[:400])
            raise PubSubResponseError(
                f"{descriptor.name} returned invalid JSON", status_code=status_code, body=body
            )

        logger.info("%s ok (%s)", descriptor.name, descriptor.path)
        return endpoint.parse_response(payload)


class PubSubClient(PubSubClientCommon):
    def __init__(self, settings: Optional[Settings] = None, session=None):
        super().__init__(settings=settings)
        self.session = session or requests.Session()

    def execute(self, method: str, path: str, params: dict[str, str],
                request_timeout: int, connect_timeout: int) -> tuple[int, str]:
        resp = self.session.request(
            method,
            f"{self.settings.base_url()}{path}",
            params=params,
            timeout=(connect_timeout, request_timeout),
        )
        return resp.status_code, resp.text

    def request(self, endpoint):
        descriptor = self.prepare(endpoint)
        self.request_counter += 1
        try:
            status_code, body = self.execute(
                descriptor.method.value,
                descriptor.path,
                descriptor.params,
                descriptor.request_timeout,
                descriptor.connect_timeout,
            )
        except requests.RequestException as e:
            self.error_counter += 1
            raise PubSubResponseError(f"{descriptor.name} request failed: {e}") from e
        return self.finish(endpoint, descriptor, status_code, body)

    def close(self) -> None:
        self.session.close()


class PubSubClientAsync(PubSubClientCommon):
    def __init__(self, settings: Optional[Settings] = None, transport: Optional[httpx.AsyncBaseTransport] = None):
        super().__init__(settings=settings)
        self.client = httpx.AsyncClient(base_url=self.settings.base_url(), transport=transport)

    async def execute(self, method: str, path: str, params: dict[str, str],
                      request_timeout: int, connect_timeout: int) -> tuple[int, str]:
        resp = await self.client.request(
            method,
            path,
            params=params,
            timeout=httpx.Timeout(request_timeout, connect=connect_timeout),
        )
        return resp.status_code, resp.text

    async def request(self, endpoint):
        descriptor = self.prepare(endpoint)
        self.request_counter += 1
        try:
            status_code, body = await self.execute(
                descriptor.method.value,
                descriptor.path,
                descriptor.params,
                descriptor.request_timeout,
                descriptor.connect_timeout,
            )
        except httpx.RequestError as e:
            self.error_counter += 1
            raise PubSubResponseError(f"{descriptor.name} request failed: {e}") from e
        return self.finish(endpoint, descriptor, status_code, body)

    async def close(self) -> None:
        await self.client.aclose()
