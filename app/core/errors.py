from typing import Optional
from app.schemas.common import IrasResponse


class IrasError(Exception):
    """Short-circuits an IRAS endpoint with a ready envelope and HTTP status"""

    def __init__(self, status_code: int, envelope: IrasResponse):
        super().__init__(envelope.info.message if envelope.info else str(envelope.returnCode))
        self.status_code = status_code
        self.envelope = envelope


class APIError(Exception):
    """Failure on the internal {success, message, error} endpoints"""

    def __init__(self, status_code: int, message: str, error: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.error = error
