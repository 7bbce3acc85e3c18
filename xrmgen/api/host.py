"""
Reference host: drives a filter service over a metadata source.

Entities are decided before any of their attributes, option sets or
relationships, which is the order the decision engine relies on.
"""

from typing import Iterable, Optional, Protocol

from xrmgen.api.gen_logging import get_logger
from xrmgen.api.metadata import EntityMetadata, OptionSetMetadata

logger = get_logger(__name__)


class MetadataSource(Protocol):
    def iter_entities(self) -> Iterable[EntityMetadata]: ...

    def iter_global_optionsets(self) -> Iterable[OptionSetMetadata]: ...

    def get_entity(self, logical_name: str) -> Optional[EntityMetadata]: ...


def _decide_optionset(filter_service, optionset, services, summary):
    if not filter_service.generate_option_set(optionset, services):
        return
    summary["optionsets"] += 1
    for option in optionset.options:
        if filter_service.generate_option(option, services):
            summary["options"] += 1


def run_filter(source: MetadataSource, filter_service, services=None) -> dict:
    """
    Offer every element of *source* to *filter_service*.

    Returns:
        dict with counts of included entities, attributes, optionsets,
        options and relationships
    """
    summary = {"entities": 0, "attributes": 0, "optionsets": 0, "options": 0, "relationships": 0}

    for optionset in source.iter_global_optionsets():
        _decide_optionset(filter_service, optionset, services, summary)

    for entity in source.iter_entities():
        if not filter_service.generate_entity(entity, services):
            continue
        summary["entities"] += 1

        for attribute in entity.attributes:
            if not filter_service.generate_attribute(attribute, services):
                continue
            summary["attributes"] += 1
            if attribute.optionset is not None and not attribute.optionset.is_global:
                _decide_optionset(filter_service, attribute.optionset, services, summary)

        for relationship in entity.relationships:
            other_name = relationship.referenced_entity
            if other_name.lower() == entity.logical_name.lower():
                other_name = relationship.referencing_entity
            other = source.get_entity(other_name)
            if other is None:
                logger.debug(f"  [RELATIONSHIP] {relationship.schema_name}: {other_name} not in metadata")
                continue
            if filter_service.generate_relationship(relationship, other, services):
                summary["relationships"] += 1

    logger.info(
        f"  Included {summary['entities']} entities, {summary['attributes']} attributes, "
        f"{summary['relationships']} relationships"
    )
    return summary
