# pubsub_push/push/add_channels_to_push.py

from typing import Any, Optional, Sequence, Union

from pubsub_push.endpoint import Endpoint
from pubsub_push.enums import HttpMethod, OperationType, PushEnvironment, PushType
from pubsub_push.exceptions import PubSubValidationError
from pubsub_push.push.models import PushAddChannelResult
from pubsub_push.utils import extend_items, join_items, url_encode

PATH = "/v1/push/sub-key/{sub_key}/devices/{device_id}"
PATH_APNS2 = "/v2/push/sub-key/{sub_key}/devices-apns2/{device_id}"

DEFAULT_ENVIRONMENT = PushEnvironment.DEVELOPMENT.value


class AddChannelsToPush(Endpoint):
    """Rejestruje kanały do powiadomień push dla tokena urządzenia."""

    def __init__(self, client):
        super().__init__(client)
        self.channels: list[str] = []
        self.device_id: Optional[str] = None
        self.push_type: Optional[PushType] = None
        self.topic: Optional[str] = None
        self.environment: Optional[str] = None

    def set_channels(self, channels: Union[str, Sequence[str]]) -> "AddChannelsToPush":
        self.channels = extend_items(self.channels, channels)
        return self

    def set_device_id(self, device_id: str) -> "AddChannelsToPush":
        self.device_id = device_id
        return self

    def set_push_type(self, push_type: Union[PushType, str, None]) -> "AddChannelsToPush":
        if push_type is None:
            # brak typu zgłasza dopiero validate()
            self.push_type = None
            return self

        if not isinstance(push_type, PushType):
            try:
                push_type = PushType(str(push_type).lower())
            except ValueError:
                raise PubSubValidationError(f"Unknown push type: {push_type}")

        # FCM jest nowe, wewnętrznie nadal używamy GCM
        if push_type == PushType.FCM:
            push_type = PushType.GCM

        self.push_type = push_type
        return self

    def set_topic(self, topic: str) -> "AddChannelsToPush":
        self.topic = topic
        return self

    def set_environment(self, environment: Union[PushEnvironment, str]) -> "AddChannelsToPush":
        if isinstance(environment, PushEnvironment):
            environment = environment.value
        self.environment = environment
        return self

    def validate_params(self) -> None:
        # kolejność ma znaczenie, zgłaszamy pierwszy brak
        self.validate_subscribe_key()

        if len(self.channels) == 0:
            raise PubSubValidationError("Channel missing")

        if not isinstance(self.device_id, str) or len(self.device_id) == 0:
            raise PubSubValidationError("Device ID is missing for push operation")

        if self.push_type is None:
            raise PubSubValidationError("Push Type is missing")

        if self.push_type == PushType.APNS2 and (not isinstance(self.topic, str) or len(self.topic) == 0):
            raise PubSubValidationError("APNS2 topic is missing")

    def custom_params(self) -> dict[str, str]:
        params = {"add": join_items(self.channels)}

        if self.push_type != PushType.APNS2:
            # v1 -> sam typ
            params["type"] = self.push_type.value
        else:
            # apns2 -> topic + environment
            params["topic"] = self.topic
            params["environment"] = self.environment or DEFAULT_ENVIRONMENT

        return params

    def build_data(self) -> None:
        return None

    def build_path(self) -> str:
        template = PATH_APNS2 if self.push_type == PushType.APNS2 else PATH
        return template.format(
            sub_key=url_encode(self.settings.get_subscribe_key()),
            device_id=url_encode(self.device_id),
        )

    def create_response(self, json: Any) -> PushAddChannelResult:
        return PushAddChannelResult()

    def is_auth_required(self) -> bool:
        return True

    def get_request_timeout(self) -> int:
        return self.settings.get_non_subscribe_request_timeout()

    def get_connect_timeout(self) -> int:
        return self.settings.get_connect_timeout()

    def http_method(self) -> HttpMethod:
        return HttpMethod.GET

    def get_operation_type(self) -> OperationType:
        return OperationType.ADD_PUSH_NOTIFICATIONS_ON_CHANNELS

    def get_name(self) -> str:
        return "AddChannelsToPush"
