"""Errors raised while building a generation run."""


class FilterDefinitionError(Exception):
    """
    Malformed filter definition. Fatal: the run stops before any decision is made.

    Attributes:
        position: 1-based ordinal of the offending declaration within its section, if known.
        name: Name of the offending declaration, if it was read before the failure.
    """

    def __init__(self, message: str, position: int = None, name: str = None):
        super().__init__(message)
        self.position = position
        self.name = name


class WorkflowDefinitionError(Exception):
    """A workflow definition payload could not be decoded into an action signature."""


class RegistryStateError(RuntimeError):
    """A model registry was reused without being reset."""
