from typing import List


class DeckGuideError(Exception):
    """Base class for every error the pipeline raises."""


class NetworkError(DeckGuideError):
    """Fetch or webhook delivery failed (transport error, non-2xx, bad body)."""

    def __init__(self, message: str, status_code: int | None = None, response_body: str | None = None):
        self.status_code = status_code
        self.response_body = response_body
        super().__init__(message)


class TransformError(DeckGuideError):
    pass


class DataShapeError(TransformError):
    """A raw guide record is missing fields or has the wrong shape."""


class CredentialMissingError(DeckGuideError):
    def __init__(self, missing: List[str]):
        self.missing = missing
        super().__init__(f"{', '.join(missing)} missing")
