"""Type mapping from workflow argument types to Python annotations in generated code."""

from xrmgen.api.gen_logging import get_logger

logger = get_logger(__name__)

# workflow markup type (namespace prefix dropped) -> annotation in the generated module
_PYTHON_TYPES = {
    "String": "str",
    "Int32": "int",
    "Boolean": "bool",
    "Decimal": "decimal.Decimal",
    "Double": "float",
    "DateTime": "datetime.datetime",
    "Guid": "uuid.UUID",
    "EntityReference": "xrm.EntityReference",
    "OptionSetValue": "xrm.OptionSetValue",
    "Money": "xrm.Money",
    "Entity": "xrm.Entity",
    "EntityCollection": "xrm.EntityCollection",
}


def strip_type_prefix(type_name: str) -> str:
    """'mxs:EntityReference' -> 'EntityReference'."""
    return type_name.rsplit(":", 1)[-1].strip()


def map_to_python_type(type_name: str) -> str:
    """Map a workflow argument type to the annotation used in generated code."""
    bare = strip_type_prefix(type_name)
    python_type = _PYTHON_TYPES.get(bare)
    if python_type is None:
        logger.warning(f"  [TYPE] Unknown workflow argument type '{type_name}', using typing.Any")
        return "typing.Any"
    return python_type
