"""
Attached-entity cache behind every generated unit of work.

A context tracks at most one instance per (logical name, id). It has no
locking: one unit of work, and therefore one context, belongs to a single
execution step at a time.
"""

from typing import Callable, Dict, Generic, Iterator, List, Optional, Tuple, TypeVar

from .errors import (
    ContextDisposedError,
    EntityAlreadyTrackedError,
    MultipleResultsError,
    NoResultError,
)
from .sdk import Entity, OrganizationRequest, OrganizationResponse

T = TypeVar("T", bound=Entity)


class Query(Generic[T]):
    """Lazy, filterable query over one entity kind; rows are tracked as they are read."""

    def __init__(self, context: "OrganizationServiceContext", entity_type, predicates=()):
        self._context = context
        self._entity_type = entity_type
        self._predicates: Tuple[Callable[[T], bool], ...] = tuple(predicates)

    def where(self, predicate: Callable[[T], bool]) -> "Query[T]":
        return Query(self._context, self._entity_type, self._predicates + (predicate,))

    def __iter__(self) -> Iterator[T]:
        logical_name = self._entity_type.entity_logical_name
        for row in self._context.service.retrieve_multiple(logical_name):
            candidate = row.to_entity(self._entity_type)
            if all(predicate(candidate) for predicate in self._predicates):
                yield self._context.track(candidate)

    def to_list(self) -> List[T]:
        return list(self)

    def first_or_default(self) -> Optional[T]:
        return next(iter(self), None)

    def single(self) -> T:
        rows = list(self)
        if not rows:
            raise NoResultError(f"No {self._entity_type.entity_logical_name} matched the query")
        if len(rows) > 1:
            raise MultipleResultsError(
                f"{len(rows)} {self._entity_type.entity_logical_name} rows matched a single-result query"
            )
        return rows[0]


class OrganizationServiceContext:
    def __init__(self, service):
        self._service = service
        self._attached: Dict[Tuple[str, object], Entity] = {}
        self._disposed = False

    @property
    def service(self):
        if self._disposed:
            raise ContextDisposedError("The service context has been disposed")
        return self._service

    # ------------------------------------------------------------------
    # attached-entity cache

    def attach(self, entity: Entity) -> None:
        if entity.id is None:
            raise ValueError(f"Cannot attach {entity.logical_name} without an id")
        tracked = self._attached.get(entity.key)
        if tracked is not None and tracked is not entity:
            raise EntityAlreadyTrackedError(
                f"{entity.logical_name} {entity.id} is already tracked by this context"
            )
        self._attached[entity.key] = entity

    def detach(self, entity: Entity) -> bool:
        return self._attached.pop(entity.key, None) is not None

    def is_attached(self, entity: Entity) -> bool:
        return entity.key in self._attached

    def get_attached(self, logical_name: str, id) -> Optional[Entity]:
        return self._attached.get((logical_name, id))

    def get_attached_entities(self) -> List[Entity]:
        return list(self._attached.values())

    def track(self, entity: Entity) -> Entity:
        """Return the tracked instance for *entity*'s key, attaching *entity* if none is."""
        tracked = self._attached.get(entity.key)
        if tracked is None:
            self._attached[entity.key] = entity
            return entity
        return tracked

    def clear(self) -> None:
        self._attached.clear()

    # ------------------------------------------------------------------

    def create_query(self, entity_type) -> Query:
        return Query(self, entity_type)

    def execute(self, request: OrganizationRequest) -> OrganizationResponse:
        return self.service.execute(request)

    def dispose(self) -> None:
        self._attached.clear()
        self._service = None
        self._disposed = True
