# pubsub_push/exceptions.py


class PubSubError(Exception):
    """Bazowy błąd klienta pub/sub."""
    pass


class PubSubValidationError(PubSubError):
    """Niepoprawne parametry endpointu, zgłaszane przed wysłaniem żądania."""
    pass


class PubSubResponseError(PubSubError):
    """Błąd odpowiedzi serwisu (status >= 400 albo body, które nie jest JSON-em)."""

    def __init__(self, message: str, status_code: int | None = None, body: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body
