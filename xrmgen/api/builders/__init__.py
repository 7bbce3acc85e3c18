"""Builders: action signature resolution and template contexts."""

from .action_resolver import (
    InMemoryWorkflowCatalog,
    WorkflowDefinition,
    WorkflowLookup,
    resolve_actions,
    resolve_registry_actions,
)
from .context_builders import (
    build_action_contexts,
    build_entity_contexts,
    build_global_optionset_contexts,
    build_referenced_entity_contexts,
)

__all__ = [
    "InMemoryWorkflowCatalog",
    "WorkflowDefinition",
    "WorkflowLookup",
    "resolve_actions",
    "resolve_registry_actions",
    "build_action_contexts",
    "build_entity_contexts",
    "build_global_optionset_contexts",
    "build_referenced_entity_contexts",
]
