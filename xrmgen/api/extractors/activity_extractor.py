"""
Decoding of action workflow definitions (XAML) into ActivityModel signatures.

An action's arguments are declared as ``x:Property`` members of the workflow:

    <x:Property Name="Target" Type="InArgument(mxs:EntityReference)">
      <x:Property.Attributes>
        <mxsw:ArgumentRequiredAttribute Value="True" />
        <mxsw:ArgumentTargetAttribute Value="True" />
        <mxsw:ArgumentDirectionAttribute Value="Input" />
        <mxsw:ArgumentEntityAttribute Value="account" />
      </x:Property.Attributes>
    </x:Property>

The target argument binds the action to an entity and is not a regular input.
"""

import re
import xml.etree.ElementTree as ET

from xrmgen.errors import WorkflowDefinitionError
from xrmgen.lib.models import ActivityMember, ActivityModel

XAML_NAMESPACE = "http://schemas.microsoft.com/winfx/2006/xaml"
TARGET_ARGUMENT = "Target"

_ARGUMENT_TYPE = re.compile(r"^\s*(In|Out|InOut)Argument\((?P<type>.+)\)\s*$")


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _argument_attributes(property_element) -> dict:
    """Collect ``Argument*Attribute`` values of one property, keyed by short name."""
    found = {}
    for element in property_element.iter():
        name = _local_name(element.tag)
        if name.startswith("Argument") and name.endswith("Attribute"):
            found[name[len("Argument"):-len("Attribute")]] = element.get("Value")
    return found


def _is_true(value) -> bool:
    return value is not None and value.strip().lower() == "true"


def _entity_name(value):
    # unbound (global) actions declare their target entity as "none"
    if value is None or not value.strip() or value.strip().lower() == "none":
        return None
    return value.strip()


def decode_activity(xaml: str) -> ActivityModel:
    """
    Decode a workflow definition payload into an ActivityModel.

    Raises:
        WorkflowDefinitionError: The payload is not XML, or an argument has no
            name or an unrecognised argument type.
    """
    try:
        root = ET.fromstring(xaml)
    except ET.ParseError as e:
        raise WorkflowDefinitionError(f"Workflow definition is not well-formed XAML: {e}") from e

    activity = ActivityModel()
    members = root.find(f"{{{XAML_NAMESPACE}}}Members")
    if members is None:
        return activity

    for prop in members.findall(f"{{{XAML_NAMESPACE}}}Property"):
        name = prop.get("Name")
        if not name:
            raise WorkflowDefinitionError("Workflow argument without a Name")

        match = _ARGUMENT_TYPE.match(prop.get("Type", ""))
        if match is None:
            raise WorkflowDefinitionError(f"Workflow argument {name} has unsupported type '{prop.get('Type')}'")
        attributes = _argument_attributes(prop)

        direction = attributes.get("Direction")
        if direction is None:
            direction = "Output" if match.group(1) == "Out" else "Input"

        member = ActivityMember(
            name=name,
            type_name=match.group("type").strip(),
            required=_is_true(attributes.get("Required")),
            entity=_entity_name(attributes.get("Entity")),
        )

        if direction == "Output":
            activity.output_members.append(member)
        elif name == TARGET_ARGUMENT or _is_true(attributes.get("Target")):
            activity.logical_name = member.entity.lower() if member.entity else None
        else:
            # inputs are always required by the action contract
            member.required = True
            activity.input_members.append(member)

    return activity
