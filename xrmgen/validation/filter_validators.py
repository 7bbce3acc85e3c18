"""
Filter-definition validators.

Every failure raises FilterDefinitionError naming the declaration's position
within its section and, when it was already read, its name.
"""

import keyword

from xrmgen.errors import FilterDefinitionError

# members of the generated unit of work that a repository property would shadow
UNIT_OF_WORK_MEMBERS = frozenset({
    "context",
    "dispose",
    "execute_request",
    "execute",
    "create",
    "update",
    "delete",
    "clear_context",
    "detach",
    "detach_reference",
    "detach_entity",
    "on_step_finalized",
})


def require_attribute(element, attribute, message, position=None, name=None):
    """Return a required, non-empty XML attribute or raise *message*."""
    value = element.get(attribute)
    if value is None or not value.strip():
        raise FilterDefinitionError(message, position=position, name=name)
    return value.strip()


def verify_entities(entities):
    """
    Entity declarations must be unique by logical name and by service name.

    Args:
        entities: list of (position, EntityModel) in declaration order
    """
    seen_logical = {}
    seen_service = {}
    for position, entity in entities:
        _verify_identifier(entity.service_name, f"Service name of entity number {position}", position)
        if entity.service_name in UNIT_OF_WORK_MEMBERS or entity.service_name.startswith("_"):
            raise FilterDefinitionError(
                f"Service name of entity number {position} '{entity.service_name}' is reserved by the unit of work",
                position=position,
                name=entity.service_name,
            )
        key = entity.logical_name.lower()
        if key in seen_logical:
            raise FilterDefinitionError(
                f"Entity number {position} : {entity.service_name} repeats logical name "
                f"'{entity.logical_name}' of entity number {seen_logical[key]}",
                position=position,
                name=entity.service_name,
            )
        seen_logical[key] = position

        service_key = entity.service_name.lower()
        if service_key in seen_service:
            raise FilterDefinitionError(
                f"Entity number {position} : {entity.service_name} repeats the service name "
                f"of entity number {seen_service[service_key]}",
                position=position,
                name=entity.service_name,
            )
        seen_service[service_key] = position

        _verify_entity_optionsets(position, entity)


def _verify_entity_optionsets(position, entity):
    seen = set()
    for optionset in entity.optionsets:
        _verify_identifier(optionset.name, f"Optionset name on {entity.logical_name}", position)
        if optionset.logical_name in seen:
            raise FilterDefinitionError(
                f"Entity number {position} : {entity.logical_name} declares optionset "
                f"'{optionset.logical_name}' more than once",
                position=position,
                name=entity.service_name,
            )
        seen.add(optionset.logical_name)
        if not optionset.is_global and not optionset.values:
            raise FilterDefinitionError(
                f"Local optionset on {entity.logical_name} {optionset.name} does not define any values",
                position=position,
                name=optionset.name,
            )


def verify_global_optionsets(optionsets):
    """
    Global option sets need a unique id and at least one value.

    Args:
        optionsets: list of (position, OptionSetModel) in declaration order
    """
    index = {}
    for position, optionset in optionsets:
        _verify_identifier(optionset.name, f"Name of global optionset definition {position}", position)
        if optionset.id in index:
            raise FilterDefinitionError(
                f"Global optionset definition {position} : {optionset.name} id '{optionset.id}' is not unique",
                position=position,
                name=optionset.name,
            )
        if not optionset.values:
            raise FilterDefinitionError(
                f"Global optionset {position} : {optionset.name} does not define any values",
                position=position,
                name=optionset.name,
            )
        index[optionset.id] = optionset
    return index


def verify_actions(actions):
    seen = {}
    for position, action in actions:
        _verify_identifier(action.name, f"Name of action number {position}", position)
        if action.name in seen:
            raise FilterDefinitionError(
                f"Action number {position} : {action.name} is already declared by action number {seen[action.name]}",
                position=position,
                name=action.name,
            )
        seen[action.name] = position


def _verify_identifier(value, what, position):
    # names become generated class and property names
    if not value.isidentifier() or keyword.iskeyword(value):
        raise FilterDefinitionError(f"{what} '{value}' is not a valid identifier", position=position, name=value)
