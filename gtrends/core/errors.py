"""
errors.py — Exception hierarchy for the trends client.

Every failure the client reports is a TrendsError subclass, so callers
can catch the whole family or a single category:

    try:
        widgets = await client.explore(request)
    except RequestFailedError as exc:
        if exc.status_code == 429:
            ...

Wrapped causes are chained with `raise ... from exc` and stay reachable
through `__cause__`. asyncio.CancelledError is never wrapped.
"""


class TrendsError(Exception):
    """Base class for all trends client errors."""


class InvalidRequestError(TrendsError):
    """A request object could not be serialized. Raised before any network call."""

    def __init__(self, cause: object) -> None:
        super().__init__(f"invalid request param: {cause}")


class RequestCreationError(TrendsError):
    """The HTTP request could not be built (bad URL, bad protocol)."""

    def __init__(self, cause: object) -> None:
        super().__init__(f"failed to create request: {cause}")


class TransportError(TrendsError):
    """Network-level failure while sending. Never retried."""

    def __init__(self, cause: object) -> None:
        super().__init__(f"failed to perform request: {cause}")


class RequestFailedError(TrendsError):
    """The final response status was not 200 OK."""

    def __init__(self, status_code: int, reason: str) -> None:
        self.status_code = status_code
        self.reason = reason
        super().__init__(
            f"failed to perform http request: "
            f"request data: code = {status_code}, status = {status_code} {reason}"
        )


class DecodeError(TrendsError):
    """Response body was not valid JSON (after guard removal) or had the wrong shape."""

    def __init__(self, cause: object) -> None:
        super().__init__(f"failed to parse json: {cause}")


class ExtractionError(TrendsError):
    """No line of a batch response matched the expected nested shape."""

    def __init__(self) -> None:
        super().__init__("no valid JSON found in response")


class InvalidWidgetTypeError(TrendsError):
    """The widget passed to a detail fetch is of the wrong type."""

    def __init__(self, widget_id: str, expected: tuple[str, ...] = ()) -> None:
        self.widget_id = widget_id
        self.expected = expected
        super().__init__("invalid widget type")

