"""Maps a request failure onto exactly one outcome variant."""

from __future__ import annotations

from pyreq.kernel.exceptions import (
    DeserializationException,
    NoConnectivityException,
    TransportException,
)
from pyreq.request.types import (
    DeserializationFailure,
    HttpErrorCategory,
    HttpFailure,
    NoConnectivity,
    Outcome,
    TransportFailure,
)

STATUS_CATEGORIES: dict[int, HttpErrorCategory] = {
    400: HttpErrorCategory.BAD_REQUEST,
    401: HttpErrorCategory.UNAUTHORIZED,
    404: HttpErrorCategory.NOT_FOUND,
    408: HttpErrorCategory.TIMEOUT,
    500: HttpErrorCategory.INTERNAL_SERVER_ERROR,
}


class ErrorClassifier:
    """Total mapping from a failure cause to an Outcome.

    ============================================  ======================
    cause                                         outcome
    ============================================  ======================
    NoConnectivityException                       NoConnectivity
    TransportException without a response         TransportFailure
    TransportException with a response            HttpFailure(status)
    DeserializationException                      DeserializationFailure
    anything else                                 TransportFailure
    ============================================  ======================
    """

    def classify(self, exc: Exception) -> Outcome:
        if isinstance(exc, NoConnectivityException):
            return NoConnectivity(cause=exc)
        if isinstance(exc, TransportException):
            if exc.response is None:
                return TransportFailure(cause=exc)
            status = exc.response.status_code
            return HttpFailure(
                status_code=status,
                category=STATUS_CATEGORIES.get(status, HttpErrorCategory.OTHER),
                cause=exc,
            )
        if isinstance(exc, DeserializationException):
            return DeserializationFailure(cause=exc)
        return TransportFailure(cause=exc)
