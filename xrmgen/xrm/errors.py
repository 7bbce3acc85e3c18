"""Errors raised by the runtime the generated unit-of-work code runs on."""


class XrmError(Exception):
    """Base class for runtime errors."""


class QueryError(XrmError):
    """A single-result query did not return exactly one row."""


class NoResultError(QueryError):
    pass


class MultipleResultsError(QueryError):
    pass


class EntityAlreadyTrackedError(XrmError):
    """Another instance with the same logical name and id is already attached."""


class ReferenceTypeError(XrmError):
    """A typed reference was built from a reference to another entity kind."""


class ContextDisposedError(XrmError):
    """The service context was used after its unit of work was disposed."""
