from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional

from pubsub_push.enums import HttpMethod, OperationType, PushEnvironment, PushType

class RequestDescriptor(BaseModel):
    method: HttpMethod
    path: str                   # np. "/v1/push/sub-key/sub-c-1/devices/dev1"
    params: Dict[str, str] = Field(default_factory=dict)
    body: Optional[Any] = None
    auth_required: bool = False
    operation_type: Optional[OperationType] = None
    name: str = ""
    request_timeout: int
    connect_timeout: int

class PushAddChannelResult(BaseModel):
    # serwis nic sensownego nie zwraca, sam obiekt oznacza sukces
    def __str__(self) -> str:
        return "Channel(s) added"

class PushAddChannelsRequest(BaseModel):
    channels: List[str] = Field(default_factory=list)
    device_id: str
    push_type: PushType
    topic: Optional[str] = None
    environment: Optional[PushEnvironment] = None
