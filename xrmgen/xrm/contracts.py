"""
Interfaces the generated declarations implement.

Entities take the four image roles a plugin step can hand them in; typed
references carry only an identifier; repositories and units of work declare
the data-access surface the generator fills in per accepted entity.
"""

import abc
import uuid
from typing import Generic, Optional, TypeVar

from .errors import ReferenceTypeError
from .sdk import Entity, EntityReference, OrganizationRequest, OrganizationResponse

T = TypeVar("T", bound=Entity)


class Target(Generic[T]):
    """Entity received as the target of a step."""


class Preimage(Generic[T]):
    """Entity state before the operation."""


class Postimage(Generic[T]):
    """Entity state after the operation."""


class Mergedimage(Generic[T]):
    """Pre-image overlaid with the target's changed attributes."""


class TargetReference(Generic[T]):
    """Identifier-only reference to one entity kind."""

    _logical_name: Optional[str] = None

    def __init__(self, target: EntityReference):
        if target.logical_name != self._logical_name:
            raise ReferenceTypeError(
                f"{type(self).__name__} expects {self._logical_name}, got {target.logical_name}"
            )
        self.value = target

    @property
    def id(self) -> uuid.UUID:
        return self.value.id

    @property
    def logical_name(self) -> str:
        return self.value.logical_name


class ActionTarget(abc.ABC, Generic[T]):
    """Request contract of an action bound to an entity."""

    @property
    @abc.abstractmethod
    def Target(self) -> EntityReference:
        ...


class IRepository(abc.ABC, Generic[T]):
    @abc.abstractmethod
    def get_query(self):
        ...

    @abc.abstractmethod
    def add(self, entity: T) -> None:
        ...

    @abc.abstractmethod
    def update(self, entity: T) -> None:
        ...

    @abc.abstractmethod
    def delete(self, entity: T) -> None:
        ...

    @abc.abstractmethod
    def attach(self, entity: T) -> None:
        ...

    @abc.abstractmethod
    def detach(self, entity: T) -> None:
        ...

    @abc.abstractmethod
    def get_by_id(self, id: uuid.UUID) -> T:
        ...


class IUnitOfWork(abc.ABC):
    """
    Disposable handle over a connection and its attached-entity cache.

    Use it as a context manager so the cache and the connection are released
    on every exit path; exceptions raised inside the block propagate.
    """

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.dispose()

    @abc.abstractmethod
    def dispose(self) -> None:
        ...

    @abc.abstractmethod
    def execute_request(self, request: OrganizationRequest, response_type=None) -> OrganizationResponse:
        ...

    @abc.abstractmethod
    def execute(self, request: OrganizationRequest) -> OrganizationResponse:
        ...

    @abc.abstractmethod
    def create(self, entity: Entity) -> uuid.UUID:
        ...

    @abc.abstractmethod
    def update(self, entity: Entity) -> None:
        ...

    @abc.abstractmethod
    def delete(self, entity: Entity) -> None:
        ...

    @abc.abstractmethod
    def clear_context(self) -> None:
        ...

    @abc.abstractmethod
    def detach(self, logical_name: str, *ids: uuid.UUID) -> None:
        ...


class IAdminUnitOfWork(IUnitOfWork):
    """Unit of work running with elevated privileges."""


class IService(abc.ABC):
    @abc.abstractmethod
    def on_step_finalized(self) -> None:
        """Called by the plugin host when the owning execution step completes."""
