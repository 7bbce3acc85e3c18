"""
Runtime support for generated unit-of-work modules.

Generated code imports this package as ``from xrmgen import xrm`` and uses
only the names exported here.
"""

from .actions import AbstractActionRequest, ActionResponse, OutputProperty, output
from .context import OrganizationServiceContext, Query
from .contracts import (
    ActionTarget,
    IAdminUnitOfWork,
    IRepository,
    IService,
    IUnitOfWork,
    Mergedimage,
    Postimage,
    Preimage,
    Target,
    TargetReference,
)
from .errors import (
    ContextDisposedError,
    EntityAlreadyTrackedError,
    MultipleResultsError,
    NoResultError,
    QueryError,
    ReferenceTypeError,
    XrmError,
)
from .extensions import entity_type, entity_types, export, exports, register_entity_types
from .sdk import (
    Entity,
    EntityCollection,
    EntityReference,
    Money,
    OptionSetValue,
    OrganizationRequest,
    OrganizationResponse,
    OrganizationService,
)

__all__ = [
    "AbstractActionRequest",
    "ActionResponse",
    "ActionTarget",
    "ContextDisposedError",
    "Entity",
    "EntityAlreadyTrackedError",
    "EntityCollection",
    "EntityReference",
    "IAdminUnitOfWork",
    "IRepository",
    "IService",
    "IUnitOfWork",
    "Mergedimage",
    "Money",
    "MultipleResultsError",
    "NoResultError",
    "OptionSetValue",
    "OrganizationRequest",
    "OrganizationResponse",
    "OrganizationService",
    "OrganizationServiceContext",
    "OutputProperty",
    "Postimage",
    "Preimage",
    "Query",
    "QueryError",
    "ReferenceTypeError",
    "Target",
    "TargetReference",
    "XrmError",
    "entity_type",
    "entity_types",
    "export",
    "exports",
    "output",
    "register_entity_types",
]
