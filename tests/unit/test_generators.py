"""
Unit tests for the render units and module assembly.

Each render unit is checked against a fixed context; module assembly is
checked on a registry populated by the decision engine.
"""

import re
import types

import pytest

from xrmgen import __version__
from xrmgen.api.filter_service import CodeWriterFilter
from xrmgen.api.generator import GenerationOptions, default_action_namespace, render_source
from xrmgen.api.generators import (
    render_action_request,
    render_action_request_impl,
    render_action_response,
    render_entity,
    render_entity_reference,
    render_global_optionset,
    render_registration,
    render_unit_of_work_interface,
)
from xrmgen.api.host import run_filter
from xrmgen.api.sources import MetadataSnapshot
from xrmgen.lib import ActionModel, ActivityMember, ActivityModel, FilterDefinition, ModelRegistry

ACCOUNT = {
    "class_name": "Account",
    "logical_name": "account",
    "service_name": "Accounts",
    "field_name": "_repo_accounts",
    "attributes": [{"property": "Name", "logical_name": "name"}],
    "optionsets": [],
}

WIN_DEAL = {
    "name": "WinDeal",
    "message_name": "new_windeal",
    "target_class": "Opportunity",
    "inputs": [{"name": "Amount", "attribute": "Amount", "python_type": "xrm.Money", "required": True}],
    "outputs": [{"name": "Won", "attribute": "Won", "python_type": "bool", "required": True}],
}


class TestRenderUnits:

    def test_entity_reference(self):
        assert render_entity_reference(ACCOUNT) == (
            "@typing.final\n"
            'class AccountReference(xrm.TargetReference["Account"]):\n'
            "    _logical_name = Account.entity_logical_name\n"
        )

    def test_global_optionset(self):
        optionset = {
            "class_name": "Currency",
            "id": "currency",
            "members": [{"name": "Euro", "value": 1}, {"name": "Dollar", "value": 2}],
        }
        assert render_global_optionset(optionset) == (
            "class Currency(enum.IntEnum):\n"
            "    Euro = 1\n"
            "    Dollar = 2\n"
        )

    def test_action_response(self):
        assert render_action_response(WIN_DEAL) == (
            "class WinDealResponse(xrm.ActionResponse):\n"
            '    """Outputs of the new_windeal action."""\n'
            "\n"
            '    Won: bool = xrm.output("Won", True)\n'
        )

    def test_empty_registration(self):
        assert render_registration([]) == "xrm.register_entity_types({})\n"

    def test_registration(self):
        code = render_registration([ACCOUNT])
        assert "Account.entity_logical_name: Account," in code

    def test_entity_declares_image_roles(self):
        code = render_entity(ACCOUNT)
        for role in ("Target", "Preimage", "Postimage", "Mergedimage"):
            assert f'class IAccount{role}(xrm.{role}["Account"]):' in code
        assert 'entity_logical_name = "account"' in code
        assert 'return self.get_attribute_value("name")' in code

    def test_entity_optionset_properties(self):
        entity = dict(ACCOUNT, optionsets=[
            {
                "property": "Industry",
                "logical_name": "industrycode",
                "attribute_schema_name": "IndustryCode",
                "multi": False,
                "local": True,
                "enum_name": "IndustryEnum",
                "members": [{"name": "Accounting", "value": 1}],
                "enum_ref": "Account.IndustryEnum",
            },
            {
                "property": "Tags",
                "logical_name": "new_tags",
                "attribute_schema_name": "new_Tags",
                "multi": True,
                "local": False,
                "enum_name": "TagsEnum",
                "members": [],
                "enum_ref": "Tags",
            },
        ])
        code = render_entity(entity)
        assert "    class IndustryEnum(enum.IntEnum):\n        Accounting = 1\n" in code
        assert "TagsEnum" not in code
        assert 'self.get_option_value("industrycode", Account.IndustryEnum)' in code
        assert 'self.get_option_values("new_tags", Tags)' in code
        assert 'self.set_option_values("new_tags", value)' in code

    def test_unit_of_work_interface(self):
        contact = dict(ACCOUNT, class_name="Contact", service_name="Contacts")
        code = render_unit_of_work_interface([ACCOUNT, contact])
        assert "def Accounts(self) -> xrm.IRepository[Account]:" in code
        assert "def Contacts(self) -> xrm.IRepository[Contact]:" in code
        assert "class IAdminUnitOfWork(xrm.IAdminUnitOfWork, IUnitOfWork):" in code

    def test_bound_action_request(self):
        code = render_action_request(WIN_DEAL)
        assert code.startswith("class IWinDealRequest(xrm.ActionTarget[Opportunity]):")
        assert "def Amount(self) -> xrm.Money:" in code

    def test_unbound_action_request(self):
        code = render_action_request(dict(WIN_DEAL, target_class=None, inputs=[]))
        assert code.startswith("class IWinDealRequest(abc.ABC):")
        assert "def " not in code

    def test_action_request_impl(self):
        code = render_action_request_impl(WIN_DEAL)
        assert "class WinDealRequest(xrm.AbstractActionRequest, IWinDealRequest):" in code
        assert 'return self.value_of("Target")' in code
        assert 'return self.value_of("Amount")' in code


class TestNamespaces:

    @pytest.mark.parametrize("namespace, expected", [
        ("Contoso.Entities", "Contoso.Actions"),
        ("Contoso.Entities.Sales", "Contoso.Actions.Sales"),
        ("Entities.Crm.Entities", "Actions.Crm.Actions"),
        ("Contoso.Model", "Contoso.Model"),
    ])
    def test_default_action_namespace(self, namespace, expected):
        assert default_action_namespace(namespace) == expected

    def test_explicit_action_namespace_wins(self):
        options = GenerationOptions("Contoso.Entities", "XrmContext", action_namespace="Contoso.Messages")
        assert options.resolved_action_namespace == "Contoso.Messages"
        assert options.version == __version__


class TestRenderSource:

    @pytest.fixture
    def account_only(self, build_registry):
        registry = build_registry(
            '<filter><entities><entity servicename="Accounts" logicalname="account" /></entities></filter>'
        )
        snapshot = MetadataSnapshot.from_dict({"entities": [
            {"logicalname": "account", "schemaname": "Account",
             "attributes": [{"logicalname": "name", "schemaname": "Name"}]},
            {"logicalname": "contact", "schemaname": "Contact"},
        ]})
        run_filter(snapshot, CodeWriterFilter(registry))
        return registry

    def test_single_entity_module(self, account_only):
        code = render_source(account_only, GenerationOptions("Contoso.Entities", "XrmContext"))

        repositories = re.findall(r"def (\w+)\(self\) -> xrm\.IRepository\[(\w+)\]:", code)
        # interface, standard and elevated unit of work
        assert repositories == [("Accounts", "Account")] * 3
        assert "CrmRepository(Account, self.context, self._service)" in code
        assert "class Contact" not in code

        assert not re.search(r"^class \w*Request\b", code, re.MULTILINE)
        assert "xrm.ActionResponse" not in code
        assert "# Contoso.Actions" not in code

    def test_module_header(self, account_only):
        code = render_source(account_only, GenerationOptions("Contoso.Entities", "XrmContext", version="2.1.0"))
        assert code.startswith("# Plugin Version: 2.1.0")
        assert 'NAMESPACE = "Contoso.Entities"' in code
        assert 'ACTION_NAMESPACE = "Contoso.Actions"' in code
        assert "class XrmContext(xrm.OrganizationServiceContext):" in code
        assert code.endswith("\n") and not code.endswith("\n\n")

    def test_rendering_is_deterministic(self, account_only):
        options = GenerationOptions("Contoso.Entities", "XrmContext")
        assert render_source(account_only, options) == render_source(account_only, options)

    def test_module_compiles(self, account_only):
        code = render_source(account_only, GenerationOptions("Contoso.Entities", "XrmContext"))
        compile(code, "<generated>", "exec")


class TestKeywordArguments:

    @pytest.fixture
    def move_registry(self):
        registry = ModelRegistry()
        registry.load(FilterDefinition(actions=[ActionModel("Move", "new_move")]))
        registry.activities["Move"] = ActivityModel(
            input_members=[ActivityMember("from", "x:String")],
            output_members=[ActivityMember("import", "x:String", required=False)],
        )
        return registry

    def test_keyword_members_get_converted_attributes(self, move_registry):
        code = render_source(move_registry, GenerationOptions("Contoso.Entities", "XrmContext"))
        compile(code, "<generated>", "exec")
        assert "def From(self) -> str:" in code
        assert 'return self.value_of("from")' in code
        assert 'Import: str = xrm.output("import", False)' in code

    def test_keyword_members_read_original_names(self, move_registry, load_generated):
        module = load_generated(render_source(move_registry, GenerationOptions("Contoso.Entities", "XrmContext")))
        request = module.MoveRequest(types.SimpleNamespace(input_parameters={"from": "warehouse"}))
        assert request.From == "warehouse"

        response = module.MoveResponse()
        response.Import = "done"
        assert response.to_output_parameters() == {"import": "done"}
