"""
Template contexts built from the model registry.

Each builder returns plain dicts in registry insertion order, so rendering
the same registry twice yields the same text.
"""

import keyword

from xrmgen.api.extractors import map_to_python_type
from xrmgen.api.gen_logging import get_logger
from xrmgen.api.utils import to_identifier, to_member_names

logger = get_logger(__name__)


def _members(values):
    names = to_member_names((v.name, v.value) for v in values)
    return [{"name": name, "value": v.value} for name, v in zip(names, values)]


def build_global_optionset_contexts(registry):
    return [
        {"class_name": optionset.name, "id": optionset_id, "members": _members(optionset.values)}
        for optionset_id, optionset in registry.global_optionsets.items()
    ]


def _optionset_context(registry, entity, class_name, optionset):
    attribute_schema_name = registry.attribute_schema_name(entity.logical_name, optionset.logical_name)
    context = {
        "property": optionset.name,
        "logical_name": optionset.logical_name,
        "attribute_schema_name": attribute_schema_name or optionset.logical_name,
        "multi": optionset.multi,
        "local": not optionset.is_global,
        "enum_name": f"{optionset.name}Enum",
        "members": [],
    }
    if not optionset.is_global:
        context["members"] = _members(optionset.values)
        context["enum_ref"] = f"{class_name}.{context['enum_name']}"
    elif optionset.id in registry.global_optionsets:
        context["enum_ref"] = registry.global_optionsets[optionset.id].name
    else:
        logger.warning(
            f"  [OPTIONSET] {entity.logical_name}.{optionset.logical_name} references undeclared "
            f"global optionset {optionset.id}; exposing raw values"
        )
        context["enum_ref"] = "None"
    return context


def build_entity_contexts(registry):
    """
    Contexts for accepted entities, in the order the host offered them.

    Returns:
        list of dicts with keys: class_name, logical_name, service_name,
        field_name, attributes, optionsets
    """
    contexts = []
    for schema_name, entity in registry.entities.items():
        optionset_properties = {optionset.name for optionset in entity.optionsets}
        attributes = []
        for attribute in registry.generated_attributes.get(entity.logical_name.lower(), []):
            prop = registry.attribute_schema_name(entity.logical_name, attribute)
            if prop is None or not prop.isidentifier() or prop in optionset_properties:
                continue
            attributes.append({"property": prop, "logical_name": attribute})

        contexts.append({
            "class_name": schema_name,
            "logical_name": entity.logical_name.lower(),
            "service_name": entity.service_name,
            "field_name": f"_repo_{entity.service_name.lower()}",
            "attributes": attributes,
            "optionsets": [
                _optionset_context(registry, entity, schema_name, optionset) for optionset in entity.optionsets
            ],
        })
    return contexts


def build_referenced_entity_contexts(registry):
    """Entities present only as action targets; they get a bare entity class."""
    return [
        {"class_name": schema_name, "logical_name": logical_name}
        for logical_name, schema_name in registry.referenced_entities().items()
    ]


def _member_attribute(name):
    if name.isidentifier() and not keyword.iskeyword(name):
        return name
    return to_identifier(name)


def _member_context(member):
    return {
        "name": member.name,
        "attribute": _member_attribute(member.name),
        "python_type": map_to_python_type(member.type_name),
        "required": member.required,
    }


def build_action_contexts(registry):
    """Contexts for actions whose signature resolved, in filter order."""
    contexts = []
    for action, activity in registry.resolved_actions():
        target_class = None
        if activity.logical_name:
            target_class = registry.schema_name(activity.logical_name)
            if target_class is None:
                logger.warning(
                    f"  [ACTION] {action.name} targets {activity.logical_name}, which the metadata "
                    f"source never offered; the request is emitted unbound"
                )
        contexts.append({
            "name": action.name,
            "message_name": action.logical_name,
            "target_class": target_class,
            "inputs": [_member_context(m) for m in activity.input_members],
            "outputs": [_member_context(m) for m in activity.output_members],
        })
    return contexts
