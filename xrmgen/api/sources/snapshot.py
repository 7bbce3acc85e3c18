"""
Offline metadata source.

A YAML (or JSON) snapshot of the platform's schema and action workflows,
serving both as the metadata source the host enumerates and as the workflow
lookup the action resolver queries:

    entities:
      - logicalname: account
        schemaname: Account
        attributes:
          - {logicalname: name, schemaname: Name, type: String}
          - logicalname: industrycode
            schemaname: IndustryCode
            type: Picklist
            optionset: {name: account_industrycode, options: [{label: Accounting, value: 1}]}
        relationships:
          - {schemaname: contact_customer_accounts, referenced: account, referencing: contact}
    optionsets:
      - {name: currency, options: [{label: Euro, value: 1}]}
    workflows:
      - {name: Win deal, message: new_windeal, type: 2, state: Activated, xaml: "<Activity .../>"}
"""

from pathlib import Path

import yaml

from xrmgen.api.builders.action_resolver import (
    WORKFLOW_STATE_ACTIVATED,
    WORKFLOW_TYPE_ACTIVATION,
    InMemoryWorkflowCatalog,
    WorkflowDefinition,
)
from xrmgen.api.metadata import (
    AttributeMetadata,
    EntityMetadata,
    OptionMetadata,
    OptionSetMetadata,
    RelationshipMetadata,
)


def _optionset(data, is_global=False):
    if data is None:
        return None
    return OptionSetMetadata(
        name=data["name"],
        is_global=data.get("global", is_global),
        options=[OptionMetadata(label=o["label"], value=int(o["value"])) for o in data.get("options", [])],
    )


def _entity(data):
    logical_name = data["logicalname"]
    return EntityMetadata(
        logical_name=logical_name,
        schema_name=data["schemaname"],
        attributes=[
            AttributeMetadata(
                entity_logical_name=logical_name,
                logical_name=a["logicalname"],
                schema_name=a["schemaname"],
                attribute_type=a.get("type", "String"),
                optionset=_optionset(a.get("optionset")),
            )
            for a in data.get("attributes", [])
        ],
        relationships=[
            RelationshipMetadata(
                schema_name=r["schemaname"],
                referenced_entity=r["referenced"],
                referencing_entity=r["referencing"],
            )
            for r in data.get("relationships", [])
        ],
    )


class MetadataSnapshot(InMemoryWorkflowCatalog):
    def __init__(self, entities=(), optionsets=(), workflows=()):
        super().__init__(workflows)
        self._entities = list(entities)
        self._by_name = {e.logical_name.lower(): e for e in self._entities}
        self._optionsets = list(optionsets)

    @classmethod
    def from_dict(cls, data: dict) -> "MetadataSnapshot":
        data = data or {}
        return cls(
            entities=[_entity(e) for e in data.get("entities", [])],
            optionsets=[_optionset(o, is_global=True) for o in data.get("optionsets", [])],
            workflows=[
                WorkflowDefinition(
                    name=w.get("name", w["message"]),
                    message_name=w["message"],
                    xaml=w["xaml"],
                    workflow_type=int(w.get("type", WORKFLOW_TYPE_ACTIVATION)),
                    state=w.get("state", WORKFLOW_STATE_ACTIVATED),
                )
                for w in data.get("workflows", [])
            ],
        )

    @classmethod
    def from_file(cls, path) -> "MetadataSnapshot":
        with open(Path(path), encoding="utf-8") as handle:
            return cls.from_dict(yaml.safe_load(handle))

    def iter_entities(self):
        return iter(self._entities)

    def iter_global_optionsets(self):
        return iter(self._optionsets)

    def get_entity(self, logical_name):
        return self._by_name.get(logical_name.lower())
