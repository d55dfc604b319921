# pubsub_push/endpoint.py

from typing import Any, Optional

from pubsub_push.enums import HttpMethod, OperationType
from pubsub_push.exceptions import PubSubValidationError
from pubsub_push.push.models import RequestDescriptor


class Endpoint:
    """
    Wspólna baza endpointów REST.

    Dispatcher woła kolejno: validate(), build_request(), transport,
    parse_response(). Instancja jest jednorazowa i nie jest thread-safe,
    na każde wywołanie tworzymy nową.
    """

    def __init__(self, client):
        self.client = client

    @property
    def settings(self):
        return self.client.settings

    # ---------- hooki do nadpisania ----------

    def validate_params(self) -> None:
        raise NotImplementedError

    def custom_params(self) -> dict[str, str]:
        raise NotImplementedError

    def build_data(self) -> Optional[Any]:
        raise NotImplementedError

    def build_path(self) -> str:
        raise NotImplementedError

    def create_response(self, json: Any):
        raise NotImplementedError

    def is_auth_required(self) -> bool:
        raise NotImplementedError

    def get_request_timeout(self) -> int:
        raise NotImplementedError

    def get_connect_timeout(self) -> int:
        raise NotImplementedError

    def http_method(self) -> HttpMethod:
        raise NotImplementedError

    def get_operation_type(self) -> OperationType:
        raise NotImplementedError

    def get_name(self) -> str:
        raise NotImplementedError

    # ---------- wspólne ----------

    def validate_subscribe_key(self) -> None:
        key = self.settings.get_subscribe_key()
        if not isinstance(key, str) or len(key) == 0:
            raise PubSubValidationError("Subscribe Key not configured")

    def validate(self) -> None:
        self.validate_params()

    def build_request(self) -> RequestDescriptor:
        """Zakłada, że validate() zostało już wywołane."""
        return RequestDescriptor(
            method=self.http_method(),
            path=self.build_path(),
            params=self.custom_params(),
            body=self.build_data(),
            auth_required=self.is_auth_required(),
            operation_type=self.get_operation_type(),
            name=self.get_name(),
            request_timeout=self.get_request_timeout(),
            connect_timeout=self.get_connect_timeout(),
        )

    def parse_response(self, payload: Any):
        return self.create_response(payload)

    def sync(self):
        return self.client.request(self)

    async def run_async(self):
        return await self.client.request(self)
