"""Exception taxonomy for the client.

Every failure a public operation can produce is one of these types. None of
them is retried inside the client.
"""


class PrismicError(Exception):
    """Base class for all client errors."""


class DecodeError(PrismicError):
    """Raw JSON did not have the shape a decoder expected."""

    def __init__(self, expected: str, found: object, path: str = "", tag: str | None = None):
        self.expected = expected
        self.found = found
        self.path = path
        self.tag = tag
        where = f" at {path}" if path else ""
        super().__init__(f"expected {expected}{where}, found {_describe(found)}")

    @classmethod
    def unknown_tag(cls, kind: str, tag: object, path: str = "") -> "DecodeError":
        """Build the error for an unrecognized ``type`` discriminant."""
        name = tag if isinstance(tag, str) else None
        return cls(f"a known {kind} type", tag, path=path, tag=name)


class RequestBuildError(PrismicError):
    """A builder step could not resolve a form, ref or bookmark."""


class FormNotFound(RequestBuildError):
    def __init__(self, form_id: str):
        self.form_id = form_id
        super().__init__(f"form not found: {form_id!r}")


class RefNotFound(RequestBuildError):
    def __init__(self, ref_id: str):
        self.ref_id = ref_id
        super().__init__(f"ref not found: {ref_id!r}")


class BookmarkNotFound(RequestBuildError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"bookmark not found: {name!r}")


class TransportError(PrismicError):
    """The transport could not return a JSON value for a URL."""

    def __init__(self, url: str, cause: object):
        self.url = url
        self.cause = cause
        super().__init__(f"GET {url} failed: {cause}")


class ApiFetchError(PrismicError):
    """The API descriptor could not be fetched or decoded."""

    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(f"could not fetch API descriptor: {cause}")


class SubmitRequestError(PrismicError):
    """The document query failed at the transport level."""

    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(f"query request failed: {cause}")


class SubmitDecodeError(PrismicError):
    """The document query response could not be decoded."""

    def __init__(self, cause: Exception):
        self.cause = cause
        self.tag = getattr(cause, "tag", None)
        super().__init__(f"could not decode query response: {cause}")


def _describe(value: object) -> str:
    if value is None:
        return "null"
    if isinstance(value, str):
        return repr(value)
    if isinstance(value, bool):
        return "a boolean"
    if isinstance(value, (int, float)):
        return "a number"
    if isinstance(value, list):
        return "an array"
    if isinstance(value, dict):
        return "an object"
    return type(value).__name__
