"""Render units, one per emitted declaration kind."""

from .action_generator import render_action_request, render_action_request_impl, render_action_response
from .entity_generator import (
    render_entity,
    render_entity_reference,
    render_referenced_entity,
    render_registration,
)
from .optionset_generator import render_global_optionset
from .repository_generator import render_repository
from .unit_of_work_generator import (
    render_header,
    render_service_context,
    render_unit_of_work,
    render_unit_of_work_interface,
)

__all__ = [
    "render_action_request",
    "render_action_request_impl",
    "render_action_response",
    "render_entity",
    "render_entity_reference",
    "render_referenced_entity",
    "render_registration",
    "render_global_optionset",
    "render_repository",
    "render_header",
    "render_service_context",
    "render_unit_of_work",
    "render_unit_of_work_interface",
]
