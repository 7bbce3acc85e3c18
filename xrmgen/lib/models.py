"""
Internal model of a generation run.

Filter declarations (entities, option sets, actions) and the action signatures
recovered from workflow definitions. Instances are created by the filter
parser and the action resolver; the only later mutation is the decision
engine setting an entity option set's ``multi`` flag from live metadata.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass
class OptionValue:
    name: str
    value: int


@dataclass
class OptionSetModel:
    """Enumerated value set; ``id`` is set for platform-global sets only."""
    name: str
    logical_name: Optional[str] = None
    id: Optional[str] = None
    multi: bool = False
    values: List[OptionValue] = field(default_factory=list)

    @property
    def is_global(self) -> bool:
        return self.id is not None


@dataclass
class EntityModel:
    logical_name: str
    service_name: str
    optionsets: List[OptionSetModel] = field(default_factory=list)

    def find_optionset(self, attribute_logical_name: str) -> Optional[OptionSetModel]:
        for optionset in self.optionsets:
            if optionset.logical_name == attribute_logical_name:
                return optionset
        return None


@dataclass
class ActionModel:
    """Action declaration: generated type name plus the remote message it is bound to."""
    name: str
    logical_name: str


@dataclass
class ActivityMember:
    name: str
    type_name: str
    required: bool = True
    entity: Optional[str] = None


@dataclass
class ActivityModel:
    """Signature of an action as declared by its workflow definition."""
    logical_name: Optional[str] = None
    input_members: List[ActivityMember] = field(default_factory=list)
    output_members: List[ActivityMember] = field(default_factory=list)

    def requires_entity(self, logical_name: str) -> bool:
        return self.logical_name is not None and self.logical_name.lower() == logical_name.lower()


@dataclass
class FilterDefinition:
    """Parsed filter file: what the parser hands to the registry."""
    entities: Dict[str, EntityModel] = field(default_factory=dict)
    global_optionsets: Dict[str, OptionSetModel] = field(default_factory=dict)
    actions: List[ActionModel] = field(default_factory=list)
    suppress_mapped_standard_optionset_properties: bool = False
