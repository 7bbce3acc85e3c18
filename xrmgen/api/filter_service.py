"""
Schema filter decision engine.

CodeWriterFilter answers, for each element the host enumerates, whether code
is generated for it. It sits in front of a default filter service with the
same capabilities and hands over every case it has no policy for. Decisions
never raise: the filter definition was validated when it was parsed.
"""

from typing import Protocol

from xrmgen.api.gen_logging import get_logger
from xrmgen.api.metadata import (
    AttributeMetadata,
    EntityMetadata,
    OptionMetadata,
    OptionSetMetadata,
    RelationshipMetadata,
)

logger = get_logger(__name__)


class FilterService(Protocol):
    def generate_entity(self, entity: EntityMetadata, services=None) -> bool: ...

    def generate_attribute(self, attribute: AttributeMetadata, services=None) -> bool: ...

    def generate_option(self, option: OptionMetadata, services=None) -> bool: ...

    def generate_option_set(self, optionset: OptionSetMetadata, services=None) -> bool: ...

    def generate_relationship(self, relationship: RelationshipMetadata,
                              other_entity: EntityMetadata, services=None) -> bool: ...


class DefaultFilterService:
    """Pass-through policy: everything offered is generated."""

    def generate_entity(self, entity, services=None):
        return True

    def generate_attribute(self, attribute, services=None):
        return True

    def generate_option(self, option, services=None):
        return True

    def generate_option_set(self, optionset, services=None):
        return True

    def generate_relationship(self, relationship, other_entity, services=None):
        return True


class CodeWriterFilter:
    """
    Filter-definition policy composed over a default filter service.

    Args:
        registry: ModelRegistry holding the loaded filter and resolved actions.
            Accepted entities and attribute schema names are recorded into it.
        default_service: FilterService consulted whenever no custom rule applies.
    """

    def __init__(self, registry, default_service: FilterService = None):
        self._registry = registry
        self._default = default_service or DefaultFilterService()
        # read once, applied to every decision of the run
        self._suppress = registry.suppress_mapped_standard_optionset_properties

    def generate_entity(self, entity, services=None):
        key = entity.logical_name.lower()
        model = self._registry.valid_entities.get(key)
        if model is not None:
            self._registry.accept_entity(entity.schema_name, model)
            self._registry.record_schema_name(key, entity.schema_name)
            logger.debug(f"  [ENTITY] {entity.logical_name} -> {entity.schema_name}")
            return True

        if any(activity.requires_entity(key) for activity in self._registry.activities.values()):
            self._registry.record_schema_name(key, entity.schema_name)
            logger.debug(f"  [ENTITY] {entity.logical_name} -> {entity.schema_name} (action target)")
            return True

        return False

    def generate_attribute(self, attribute, services=None):
        entity_key = attribute.entity_logical_name.lower()
        model = self._registry.valid_entities.get(entity_key)
        if model is None:
            return self._default.generate_attribute(attribute, services)

        if self._suppress:
            optionset = model.find_optionset(attribute.logical_name)
            if optionset is not None:
                optionset.multi = attribute.is_multi_select
                self._registry.record_attribute(entity_key, attribute.logical_name, attribute.schema_name)
                logger.debug(
                    f"  [SUPPRESS] {entity_key}.{attribute.logical_name} mapped to optionset {optionset.name}"
                )
                return False

        self._registry.record_attribute(entity_key, attribute.logical_name, attribute.schema_name)
        generate = self._default.generate_attribute(attribute, services)
        if generate:
            self._registry.mark_attribute_generated(entity_key, attribute.logical_name)
        return generate

    def generate_option(self, option, services=None):
        return self._default.generate_option(option, services)

    def generate_option_set(self, optionset, services=None):
        return self._default.generate_option_set(optionset, services)

    def generate_relationship(self, relationship, other_entity, services=None):
        return self._default.generate_relationship(relationship, other_entity, services)
