"""
Filter-definition parser.

Reads the XML filter file that selects which entities, option sets and
actions are exposed, and turns it into a FilterDefinition:

    <filter supress-mapped-standard-optionset-properties="true">
      <entities>
        <entity servicename="Accounts" logicalname="account">
          <optionset logicalname="industrycode" name="Industry">
            <value name="Accounting">1</value>
          </optionset>
        </entity>
      </entities>
      <optionsets>
        <optionset id="..." name="Currency"><value name="Euro">1</value></optionset>
      </optionsets>
      <actions>
        <action name="WinDeal">new_windeal</action>
      </actions>
    </filter>

All three sections are optional. Any structural problem raises
FilterDefinitionError before a single schema decision is made.
"""

import xml.etree.ElementTree as ET
from pathlib import Path

from xrmgen.errors import FilterDefinitionError
from xrmgen.lib.models import ActionModel, EntityModel, FilterDefinition, OptionSetModel, OptionValue
from xrmgen.validation import (
    require_attribute,
    verify_actions,
    verify_entities,
    verify_global_optionsets,
)

# ------------------------------------------------------------------------------
# Constants
SUPPRESS_FLAG = "supress-mapped-standard-optionset-properties"


# ------------------------------------------------------------------------------
# Public builders

def build_filter(filter_path, registry=None) -> FilterDefinition:
    """Parse & validate a filter file; load it into *registry* when one is given."""
    try:
        root = ET.parse(Path(filter_path)).getroot()
    except ET.ParseError as e:
        raise FilterDefinitionError(f"Filter file {filter_path} is not well-formed XML: {e}") from e
    return _build(root, registry)


def build_filter_str(filter_str: str, registry=None) -> FilterDefinition:
    """Parse & validate a filter definition from a string."""
    try:
        root = ET.fromstring(filter_str)
    except ET.ParseError as e:
        raise FilterDefinitionError(f"Filter definition is not well-formed XML: {e}") from e
    return _build(root, registry)


def _build(root, registry):
    definition = FilterDefinition(
        entities=_parse_entities(root.find("entities")),
        global_optionsets=_parse_global_optionsets(root.find("optionsets")),
        actions=_parse_actions(root.find("actions")),
        suppress_mapped_standard_optionset_properties=_parse_flag(root.get(SUPPRESS_FLAG)),
    )
    if registry is not None:
        registry.load(definition)
    return definition


def _parse_flag(value) -> bool:
    return value is not None and value.strip().lower() == "true"


# ------------------------------------------------------------------------------
# Entities

def _parse_entities(entities_element):
    if entities_element is None:
        return {}

    parsed = []
    for row, entity_element in enumerate(entities_element.findall("entity"), start=1):
        service_name = require_attribute(
            entity_element, "servicename", f"No servicename on entity number {row}", position=row,
        )
        logical_name = require_attribute(
            entity_element, "logicalname",
            f"No logical name on entity number {row} : {service_name}",
            position=row, name=service_name,
        )
        optionsets = [
            _parse_entity_optionset(optionset_element, index, logical_name, row)
            for index, optionset_element in enumerate(entity_element.findall("optionset"), start=1)
        ]
        parsed.append((row, EntityModel(logical_name=logical_name, service_name=service_name, optionsets=optionsets)))

    verify_entities(parsed)
    return {entity.logical_name.lower(): entity for _, entity in parsed}


def _parse_entity_optionset(element, index, entity_logical_name, row):
    name = require_attribute(
        element, "name",
        f"Optionset number {index} on entity number {row} : {entity_logical_name} does not have a name",
        position=row, name=entity_logical_name,
    )
    logical_name = require_attribute(
        element, "logicalname",
        f"Optionset number {index} on entity number {row} : {entity_logical_name} {name} does not have a logical name",
        position=row, name=name,
    )
    optionset_id = element.get("id")
    optionset = OptionSetModel(
        name=name,
        logical_name=logical_name,
        id=optionset_id.strip() if optionset_id and optionset_id.strip() else None,
        multi=_parse_flag(element.get("multi")),
    )
    # sets carrying an id reference a global set and take their values from it
    if not optionset.is_global:
        optionset.values = _parse_values(element, f"optionset {name} on {entity_logical_name}", row)
    return optionset


def _parse_values(element, owner, row):
    values = []
    for index, value_element in enumerate(element.findall("value"), start=1):
        name = require_attribute(
            value_element, "name", f"Value number {index} of {owner} does not have a name", position=row,
        )
        text = (value_element.text or "").strip()
        try:
            value = int(text)
        except ValueError:
            raise FilterDefinitionError(
                f"Value {name} of {owner} is not an integer: '{text}'", position=row, name=name,
            ) from None
        values.append(OptionValue(name=name, value=value))
    return values


# ------------------------------------------------------------------------------
# Global option sets

def _parse_global_optionsets(optionsets_element):
    if optionsets_element is None:
        return {}

    parsed = []
    for row, element in enumerate(optionsets_element.findall("optionset"), start=1):
        name = require_attribute(
            element, "name", f"Global optionset definition {row} does not have a name", position=row,
        )
        optionset_id = require_attribute(
            element, "id", f"Global optionset definition {row} : {name} does not have an id",
            position=row, name=name,
        )
        optionset = OptionSetModel(
            name=name,
            id=optionset_id,
            multi=_parse_flag(element.get("multi")),
            values=_parse_values(element, f"global optionset {name}", row),
        )
        parsed.append((row, optionset))

    return verify_global_optionsets(parsed)


# ------------------------------------------------------------------------------
# Actions

def _parse_actions(actions_element):
    if actions_element is None:
        return []

    parsed = []
    for row, element in enumerate(actions_element.findall("action"), start=1):
        name = require_attribute(element, "name", f"Action number {row} must have a name attribute", position=row)
        logical_name = (element.text or "").strip()
        if not logical_name:
            raise FilterDefinitionError(
                f"Action number {row} : {name} must set its message logical name inside the action tag",
                position=row, name=name,
            )
        parsed.append((row, ActionModel(name=name, logical_name=logical_name)))

    verify_actions(parsed)
    return [action for _, action in parsed]
