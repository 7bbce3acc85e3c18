"""
Pytest configuration and shared fixtures for the xrmgen test suite.
"""

import shutil
import tempfile
import types
import uuid
from pathlib import Path

import pytest

from xrmgen import xrm
from xrmgen.api.builders import InMemoryWorkflowCatalog, WorkflowDefinition
from xrmgen.api.sources import MetadataSnapshot
from xrmgen.language import build_filter_str
from xrmgen.lib.registry import ModelRegistry


@pytest.fixture(scope="session")
def project_root():
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def temp_output_dir():
    """Create a temporary directory for generated code output."""
    temp_dir = tempfile.mkdtemp(prefix="xrmgen_test_")
    yield Path(temp_dir)
    # Cleanup after test
    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def write_filter_file(temp_output_dir):
    """Factory fixture to write filter XML to a temporary file."""
    def _write(content: str, filename: str = "filter.xml") -> Path:
        file_path = temp_output_dir / filename
        file_path.write_text(content)
        return file_path
    return _write


@pytest.fixture
def build_registry():
    """Factory fixture: parse filter XML into a fresh registry."""
    def _build(content: str) -> ModelRegistry:
        registry = ModelRegistry()
        build_filter_str(content, registry)
        return registry
    return _build


# Workflow definitions

def make_xaml(*properties: str) -> str:
    """Wrap x:Property elements in a minimal activity document."""
    return (
        '<Activity x:Class="XrmWorkflow" '
        'xmlns="http://schemas.microsoft.com/netfx/2009/xaml/activities" '
        'xmlns:x="http://schemas.microsoft.com/winfx/2006/xaml" '
        'xmlns:mxs="clr-namespace:Microsoft.Xrm.Sdk;assembly=Microsoft.Xrm.Sdk" '
        'xmlns:mxsw="clr-namespace:Microsoft.Xrm.Sdk.Workflow;assembly=Microsoft.Xrm.Sdk.Workflow">'
        "<x:Members>" + "".join(properties) + "</x:Members></Activity>"
    )


def make_argument(name: str, type_name: str, direction: str = "Input", required: bool = False,
                  target: bool = False, entity: str = None) -> str:
    kind = "OutArgument" if direction == "Output" else "InArgument"
    attributes = [
        f'<mxsw:ArgumentRequiredAttribute Value="{required}" />',
        f'<mxsw:ArgumentTargetAttribute Value="{target}" />',
        f'<mxsw:ArgumentDirectionAttribute Value="{direction}" />',
    ]
    if entity is not None:
        attributes.append(f'<mxsw:ArgumentEntityAttribute Value="{entity}" />')
    return (
        f'<x:Property Name="{name}" Type="{kind}({type_name})">'
        "<x:Property.Attributes>" + "".join(attributes) + "</x:Property.Attributes></x:Property>"
    )


WIN_DEAL_XAML = make_xaml(
    make_argument("Target", "mxs:EntityReference", required=True, target=True, entity="opportunity"),
    make_argument("Amount", "mxs:Money"),
    make_argument("Reason", "x:String"),
    make_argument("Won", "x:Boolean", direction="Output", required=True),
    make_argument("Note", "x:String", direction="Output"),
)

PING_XAML = make_xaml(
    make_argument("Reply", "x:String", direction="Output", required=True),
)


@pytest.fixture
def win_deal_xaml():
    return WIN_DEAL_XAML


@pytest.fixture
def workflow_catalog():
    """Activated workflows for new_windeal and new_ping; nothing for other messages."""
    return InMemoryWorkflowCatalog([
        WorkflowDefinition(name="Win deal", message_name="new_windeal", xaml=WIN_DEAL_XAML),
        WorkflowDefinition(name="Ping", message_name="new_ping", xaml=PING_XAML),
    ])


# Filter + metadata for a full run

SAMPLE_FILTER = """
<filter supress-mapped-standard-optionset-properties="true">
  <entities>
    <entity servicename="Accounts" logicalname="account">
      <optionset logicalname="industrycode" name="Industry">
        <value name="Accounting">1</value>
        <value name="Consulting">2</value>
      </optionset>
      <optionset logicalname="new_currency" name="Currency" id="currency" />
    </entity>
    <entity servicename="Contacts" logicalname="contact" />
  </entities>
  <optionsets>
    <optionset id="currency" name="Currency">
      <value name="Euro">1</value>
      <value name="Dollar">2</value>
    </optionset>
  </optionsets>
  <actions>
    <action name="WinDeal">new_windeal</action>
    <action name="Ping">new_ping</action>
    <action name="Missing">new_missing</action>
  </actions>
</filter>
"""

SAMPLE_METADATA = {
    "entities": [
        {
            "logicalname": "account",
            "schemaname": "Account",
            "attributes": [
                {"logicalname": "name", "schemaname": "Name"},
                {"logicalname": "industrycode", "schemaname": "IndustryCode", "type": "Picklist",
                 "optionset": {"name": "account_industrycode",
                               "options": [{"label": "Accounting", "value": 1}]}},
                {"logicalname": "new_currency", "schemaname": "new_Currency", "type": "MultiSelectPicklist"},
            ],
            "relationships": [
                {"schemaname": "contact_customer_accounts", "referenced": "account", "referencing": "contact"},
            ],
        },
        {
            "logicalname": "contact",
            "schemaname": "Contact",
            "attributes": [{"logicalname": "fullname", "schemaname": "FullName"}],
        },
        {
            "logicalname": "opportunity",
            "schemaname": "Opportunity",
            "attributes": [{"logicalname": "name", "schemaname": "Name"}],
        },
        {
            "logicalname": "lead",
            "schemaname": "Lead",
            "attributes": [{"logicalname": "subject", "schemaname": "Subject"}],
        },
    ],
    "optionsets": [
        {"name": "new_currency", "options": [{"label": "Euro", "value": 1}, {"label": "Dollar", "value": 2}]},
    ],
    "workflows": [
        {"name": "Win deal", "message": "new_windeal", "xaml": WIN_DEAL_XAML},
        {"name": "Ping", "message": "new_ping", "xaml": PING_XAML},
        {"name": "Old ping", "message": "new_ping", "state": "Draft", "xaml": PING_XAML},
    ],
}


@pytest.fixture
def sample_filter():
    return SAMPLE_FILTER


@pytest.fixture
def sample_snapshot():
    return MetadataSnapshot.from_dict(SAMPLE_METADATA)


# Runtime fakes

class FakeOrganizationService:
    """In-memory store; every read hands out fresh instances."""

    def __init__(self):
        self.records = {}
        self.calls = []
        self.responses = {}

    def add_record(self, logical_name, id=None, **attributes):
        id = id or uuid.uuid4()
        self.records[(logical_name, id)] = dict(attributes)
        return id

    def create(self, entity):
        id = entity.id or uuid.uuid4()
        self.records[(entity.logical_name, id)] = dict(entity.attributes)
        self.calls.append(("create", entity.logical_name, id))
        return id

    def update(self, entity):
        self.records[(entity.logical_name, entity.id)].update(entity.attributes)
        self.calls.append(("update", entity.logical_name, entity.id))

    def delete(self, logical_name, id):
        del self.records[(logical_name, id)]
        self.calls.append(("delete", logical_name, id))

    def retrieve_multiple(self, logical_name):
        return xrm.EntityCollection(
            [xrm.Entity(name, id, dict(attributes))
             for (name, id), attributes in self.records.items() if name == logical_name],
            entity_name=logical_name,
        )

    def execute(self, request):
        self.calls.append(("execute", request.request_name))
        return self.responses.get(request.request_name, xrm.OrganizationResponse(request.request_name))


@pytest.fixture
def org_service():
    return FakeOrganizationService()


@pytest.fixture
def load_generated():
    """Factory fixture: execute generated source as a throwaway module."""
    def _load(code: str, name: str = "generated_unit_of_work"):
        module = types.ModuleType(name)
        exec(compile(code, f"<{name}>", "exec"), module.__dict__)
        return module
    return _load


@pytest.fixture
def xaml():
    """Builders for workflow definition payloads: xaml.document(*args), xaml.argument(...)."""
    return types.SimpleNamespace(document=make_xaml, argument=make_argument)
