"""
Model registry: the state one generation run accumulates.

The parser loads the filter into it, the action resolver adds signatures, the
decision engine records accepted entities and attribute schema names while
the host enumerates metadata, and the emitter reads it once at the end. A
registry is built per run and passed explicitly; reuse requires ``reset()``.
"""

from typing import Dict, List, Optional, Tuple

from xrmgen.errors import RegistryStateError
from xrmgen.lib.models import ActionModel, ActivityModel, EntityModel, FilterDefinition, OptionSetModel


class ModelRegistry:
    def __init__(self):
        self.reset()

    def reset(self) -> None:
        # filter declarations, keyed by lower-case logical name
        self.valid_entities: Dict[str, EntityModel] = {}
        # accepted entities, keyed by schema name, in enumeration order
        self.entities: Dict[str, EntityModel] = {}
        self.global_optionsets: Dict[str, OptionSetModel] = {}
        self.attribute_schema_names: Dict[Tuple[str, str], str] = {}
        self.generated_attributes: Dict[str, List[str]] = {}
        self.logical_to_schema: Dict[str, str] = {}
        self.actions: List[ActionModel] = []
        self.activities: Dict[str, ActivityModel] = {}
        self.suppress_mapped_standard_optionset_properties = False
        self._loaded = False

    def load(self, definition: FilterDefinition) -> None:
        if self._loaded:
            raise RegistryStateError("Registry already holds a filter definition; reset() it first")
        self.valid_entities = dict(definition.entities)
        self.global_optionsets = dict(definition.global_optionsets)
        self.actions = list(definition.actions)
        self.suppress_mapped_standard_optionset_properties = definition.suppress_mapped_standard_optionset_properties
        self._loaded = True

    # ------------------------------------------------------------------
    # recorded by the decision engine

    def accept_entity(self, schema_name: str, entity: EntityModel) -> None:
        self.entities[schema_name] = entity

    def record_schema_name(self, logical_name: str, schema_name: str) -> None:
        self.logical_to_schema[logical_name.lower()] = schema_name

    def record_attribute(self, entity_logical_name: str, attribute_logical_name: str, schema_name: str) -> None:
        self.attribute_schema_names[(entity_logical_name.lower(), attribute_logical_name)] = schema_name

    def mark_attribute_generated(self, entity_logical_name: str, attribute_logical_name: str) -> None:
        generated = self.generated_attributes.setdefault(entity_logical_name.lower(), [])
        if attribute_logical_name not in generated:
            generated.append(attribute_logical_name)

    # ------------------------------------------------------------------
    # read by the emitter

    def attribute_schema_name(self, entity_logical_name: str, attribute_logical_name: str) -> Optional[str]:
        return self.attribute_schema_names.get((entity_logical_name.lower(), attribute_logical_name))

    def schema_name(self, logical_name: str) -> Optional[str]:
        return self.logical_to_schema.get(logical_name.lower())

    def resolved_actions(self) -> List[Tuple[ActionModel, ActivityModel]]:
        return [(action, self.activities[action.name]) for action in self.actions if action.name in self.activities]

    def referenced_entities(self) -> Dict[str, str]:
        """Entities included only because an action is bound to them (logical name -> schema name)."""
        return {
            logical: schema
            for logical, schema in self.logical_to_schema.items()
            if logical not in self.valid_entities
        }
