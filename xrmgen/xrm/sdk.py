"""
Plain data types shared by the generated code and the organization service.

These mirror the platform SDK types the generated entities, repositories and
action contracts are written against: entities as attribute bags keyed by
logical name, references, option values, money and request/response envelopes.
"""

import uuid
from decimal import Decimal
from typing import Any, Dict, Iterable, List, Optional, Protocol


class EntityReference:
    """Identifier-only pointer to an entity (logical name + id)."""

    def __init__(self, logical_name: str, id: uuid.UUID, name: Optional[str] = None):
        self.logical_name = logical_name
        self.id = id
        self.name = name

    def __eq__(self, other):
        if not isinstance(other, EntityReference):
            return NotImplemented
        return self.logical_name == other.logical_name and self.id == other.id

    def __hash__(self):
        return hash((self.logical_name, self.id))

    def __repr__(self):
        return f"EntityReference({self.logical_name!r}, {self.id!r})"


class OptionSetValue:
    def __init__(self, value: int):
        self.value = int(value)

    def __eq__(self, other):
        if not isinstance(other, OptionSetValue):
            return NotImplemented
        return self.value == other.value

    def __hash__(self):
        return hash(self.value)

    def __repr__(self):
        return f"OptionSetValue({self.value})"


class Money:
    def __init__(self, value):
        self.value = Decimal(value)

    def __eq__(self, other):
        if not isinstance(other, Money):
            return NotImplemented
        return self.value == other.value

    def __hash__(self):
        return hash(self.value)

    def __repr__(self):
        return f"Money({self.value})"


class Entity:
    """
    Attribute bag for one record.

    Subclasses emitted by the generator set ``entity_logical_name`` and expose
    typed properties over :attr:`attributes`; the base stays usable as a
    late-bound entity for any logical name.
    """

    entity_logical_name: Optional[str] = None

    def __init__(self, logical_name: Optional[str] = None, id: Optional[uuid.UUID] = None,
                 attributes: Optional[Dict[str, Any]] = None):
        self.logical_name = logical_name or type(self).entity_logical_name
        if not self.logical_name:
            raise ValueError(f"{type(self).__name__} requires a logical name")
        self.id = id
        self.attributes: Dict[str, Any] = dict(attributes or {})

    def __getitem__(self, key: str) -> Any:
        return self.attributes[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self.attributes[key] = value

    def __contains__(self, key: str) -> bool:
        return key in self.attributes

    def __repr__(self):
        return f"{type(self).__name__}({self.logical_name!r}, id={self.id!r})"

    @property
    def key(self):
        return (self.logical_name, self.id)

    def get_attribute_value(self, key: str, default: Any = None) -> Any:
        return self.attributes.get(key, default)

    def set_attribute_value(self, key: str, value: Any) -> None:
        self.attributes[key] = value

    def get_option_value(self, key: str, enum_type=None):
        raw = self.attributes.get(key)
        if raw is None:
            return None
        value = raw.value if isinstance(raw, OptionSetValue) else int(raw)
        return enum_type(value) if enum_type is not None else value

    def set_option_value(self, key: str, value) -> None:
        self.attributes[key] = None if value is None else OptionSetValue(int(value))

    def get_option_values(self, key: str, enum_type=None) -> Optional[List[Any]]:
        raw = self.attributes.get(key)
        if raw is None:
            return None
        values = [r.value if isinstance(r, OptionSetValue) else int(r) for r in raw]
        if enum_type is None:
            return values
        return [enum_type(v) for v in values]

    def set_option_values(self, key: str, values: Optional[Iterable[int]]) -> None:
        if values is None:
            self.attributes[key] = None
        else:
            self.attributes[key] = [OptionSetValue(int(v)) for v in values]

    def merge_attributes(self, other: "Entity") -> None:
        """Overwrite this instance's attributes with every attribute set on *other*."""
        for key, value in other.attributes.items():
            self.attributes[key] = value

    def to_entity_reference(self) -> EntityReference:
        return EntityReference(self.logical_name, self.id)

    def to_entity(self, entity_type):
        """Return this record as an instance of *entity_type*, sharing no state."""
        if type(self) is entity_type:
            return self
        return entity_type(self.logical_name, self.id, self.attributes)


class EntityCollection(list):
    def __init__(self, entities: Iterable[Entity] = (), entity_name: Optional[str] = None):
        super().__init__(entities)
        self.entity_name = entity_name


class OrganizationRequest:
    def __init__(self, request_name: str, parameters: Optional[Dict[str, Any]] = None):
        self.request_name = request_name
        self.parameters: Dict[str, Any] = dict(parameters or {})


class OrganizationResponse:
    def __init__(self, response_name: str, results: Optional[Dict[str, Any]] = None):
        self.response_name = response_name
        self.results: Dict[str, Any] = dict(results or {})


class OrganizationService(Protocol):
    """Connection to the remote store the generated unit of work forwards to."""

    def create(self, entity: Entity) -> uuid.UUID: ...

    def update(self, entity: Entity) -> None: ...

    def delete(self, logical_name: str, id: uuid.UUID) -> None: ...

    def retrieve_multiple(self, logical_name: str) -> Iterable[Entity]: ...

    def execute(self, request: OrganizationRequest) -> OrganizationResponse: ...
