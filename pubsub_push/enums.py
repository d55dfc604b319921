# pubsub_push/enums.py

from enum import Enum


class PushType(str, Enum):
    APNS = "apns"
    APNS2 = "apns2"
    GCM = "gcm"
    # tylko jako wartość wejściowa, na drucie zawsze leci "gcm"
    FCM = "fcm"
    MPNS = "mpns"


class PushEnvironment(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"


class HttpMethod(str, Enum):
    GET = "GET"


class OperationType(str, Enum):
    ADD_PUSH_NOTIFICATIONS_ON_CHANNELS = "add_push_notifications_on_channels"
