"""
Action signature resolution.

Each declared action names a remote message. The workflow lookup is asked for
the activated action workflow bound to that message, and its definition is
decoded into the action's typed input/output signature. Exactly one match is
required; anything else drops the action with a diagnostic and generation
carries on without it.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Protocol

from xrmgen.api.extractors import decode_activity
from xrmgen.api.gen_logging import get_logger
from xrmgen.errors import WorkflowDefinitionError
from xrmgen.lib.models import ActionModel, ActivityModel

logger = get_logger(__name__)

WORKFLOW_TYPE_ACTIVATION = 2
WORKFLOW_STATE_ACTIVATED = "Activated"


@dataclass
class WorkflowDefinition:
    name: str
    message_name: str
    xaml: str
    workflow_type: int = WORKFLOW_TYPE_ACTIVATION
    state: str = WORKFLOW_STATE_ACTIVATED


class WorkflowLookup(Protocol):
    def find_workflows(self, message_name: str, workflow_type: int, state: str) -> List[WorkflowDefinition]: ...


class InMemoryWorkflowCatalog:
    """Fixed catalog of workflow definitions."""

    def __init__(self, workflows: Iterable[WorkflowDefinition] = ()):
        self._workflows = list(workflows)

    def add(self, workflow: WorkflowDefinition) -> None:
        self._workflows.append(workflow)

    def find_workflows(self, message_name, workflow_type, state):
        return [
            w for w in self._workflows
            if w.message_name == message_name and w.workflow_type == workflow_type and w.state == state
        ]


def resolve_actions(actions: Iterable[ActionModel], lookup: WorkflowLookup) -> Dict[str, ActivityModel]:
    """
    Resolve action signatures.

    Args:
        actions: Declared actions, in filter order.
        lookup: Workflow lookup capability (live service or in-memory catalog).

    Returns:
        Mapping of action name to its signature, for the actions that resolved.
    """
    activities = {}
    for action in actions:
        matches = lookup.find_workflows(action.logical_name, WORKFLOW_TYPE_ACTIVATION, WORKFLOW_STATE_ACTIVATED)
        if not matches:
            logger.warning(f"Error: Could not find action message for {action.name}. It is ignored.")
            continue
        if len(matches) > 1:
            logger.warning(
                f"Error: Found {len(matches)} activated workflows for action message {action.logical_name} "
                f"({action.name}). It is ignored."
            )
            continue

        try:
            activity = decode_activity(matches[0].xaml)
        except WorkflowDefinitionError as e:
            logger.warning(f"Error: Could not decode workflow {matches[0].name} for {action.name}: {e}. It is ignored.")
            continue

        logger.debug(
            f"  [ACTION] {action.name}: {len(activity.input_members)} input(s), "
            f"{len(activity.output_members)} output(s), target={activity.logical_name}"
        )
        activities[action.name] = activity
    return activities


def resolve_registry_actions(registry, lookup: WorkflowLookup) -> Dict[str, ActivityModel]:
    """Resolve the registry's declared actions and store the signatures in it."""
    if not registry.actions:
        return {}
    activities = resolve_actions(registry.actions, lookup)
    registry.activities.update(activities)
    return activities
