"""
Schema metadata offered by the platform for each candidate element.

The host enumerates these and asks the filter service, element by element,
whether code should be generated for it.
"""

from dataclasses import dataclass, field
from typing import List, Optional

MULTI_SELECT_PICKLIST = "MultiSelectPicklist"


@dataclass
class OptionMetadata:
    label: str
    value: int


@dataclass
class OptionSetMetadata:
    name: str
    is_global: bool = False
    options: List[OptionMetadata] = field(default_factory=list)


@dataclass
class AttributeMetadata:
    entity_logical_name: str
    logical_name: str
    schema_name: str
    attribute_type: str = "String"
    optionset: Optional[OptionSetMetadata] = None

    @property
    def is_multi_select(self) -> bool:
        return self.attribute_type == MULTI_SELECT_PICKLIST


@dataclass
class RelationshipMetadata:
    schema_name: str
    referenced_entity: str
    referencing_entity: str


@dataclass
class EntityMetadata:
    logical_name: str
    schema_name: str
    attributes: List[AttributeMetadata] = field(default_factory=list)
    relationships: List[RelationshipMetadata] = field(default_factory=list)
