"""
Main entry point for xrmgen code generation.

Steps
-----
1. Parse/validate the filter file            -> ModelRegistry (filter declarations)
2. Resolve action signatures                  -> ModelRegistry.activities
3. Drive the decision engine over metadata    -> accepted entities, schema names
4. Render one module from the registry        -> <out>.py

Rendering is a single deterministic pass over the registry: entities and
actions come out in registry insertion order.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from xrmgen import __version__
from xrmgen.api.builders import (
    build_action_contexts,
    build_entity_contexts,
    build_global_optionset_contexts,
    build_referenced_entity_contexts,
    resolve_registry_actions,
)
from xrmgen.api.filter_service import CodeWriterFilter, DefaultFilterService
from xrmgen.api.gen_logging import get_logger
from xrmgen.api.generators import (
    render_action_request,
    render_action_request_impl,
    render_action_response,
    render_entity,
    render_entity_reference,
    render_global_optionset,
    render_header,
    render_referenced_entity,
    render_registration,
    render_repository,
    render_service_context,
    render_unit_of_work,
    render_unit_of_work_interface,
)
from xrmgen.api.host import run_filter
from xrmgen.api.utils import format_python_code
from xrmgen.language import build_filter
from xrmgen.lib.registry import ModelRegistry

logger = get_logger(__name__)

ENTITIES_SEGMENT = "Entities"
ACTIONS_SEGMENT = "Actions"


def default_action_namespace(namespace: str) -> str:
    """'Contoso.Entities' -> 'Contoso.Actions'; every occurrence of the segment is replaced."""
    return namespace.replace(ENTITIES_SEGMENT, ACTIONS_SEGMENT)


@dataclass
class GenerationOptions:
    namespace: str
    service_context_name: str
    action_namespace: Optional[str] = None
    version: str = __version__

    @property
    def resolved_action_namespace(self) -> str:
        return self.action_namespace or default_action_namespace(self.namespace)


def render_source(registry: ModelRegistry, options: GenerationOptions) -> str:
    """Render the whole module for *registry*; the result is unformatted text."""
    entities = build_entity_contexts(registry)
    actions = build_action_contexts(registry)
    context_name = options.service_context_name

    sections = [
        render_header(options.version, options.namespace, options.resolved_action_namespace),
        render_service_context(context_name),
    ]
    sections += [render_global_optionset(o) for o in build_global_optionset_contexts(registry)]
    sections += [render_entity(e) for e in entities]
    sections += [render_referenced_entity(e) for e in build_referenced_entity_contexts(registry)]
    sections += [render_entity_reference(e) for e in entities]
    sections.append(render_unit_of_work_interface(entities))
    sections.append(render_repository(context_name))
    sections.append(render_unit_of_work(entities, context_name))
    sections.append(render_registration(entities))

    if actions:
        sections.append(f"# {options.resolved_action_namespace}")
        for action in actions:
            sections.append(render_action_request(action))
            sections.append(render_action_response(action))

        with_inputs = [a for a in actions if a["inputs"]]
        if with_inputs:
            sections.append(f"# {options.resolved_action_namespace}.Implement")
            sections += [render_action_request_impl(a) for a in with_inputs]

    logger.info(f"  Rendered {len(entities)} entities, {len(actions)} actions")
    return "\n\n\n".join(section.strip("\n") for section in sections) + "\n"


def write_source(registry: ModelRegistry, options: GenerationOptions, out_path) -> Path:
    """Render, format and write the module. Returns the written path."""
    code = format_python_code(render_source(registry, options))
    out_file = Path(out_path)
    out_file.parent.mkdir(parents=True, exist_ok=True)
    out_file.write_text(code, encoding="utf-8")
    logger.info(f"[GENERATED] Unit of work: {out_file}")
    return out_file


def run_codegen(filter_path, metadata_source, options: GenerationOptions, out_path,
                registry: Optional[ModelRegistry] = None) -> Path:
    """
    Run the whole pipeline for one filter file.

    Args:
        filter_path: Path to the filter definition XML.
        metadata_source: Object offering the host's metadata enumeration and the
            workflow lookup (e.g. MetadataSnapshot).
        options: Namespaces, context name, version.
        out_path: Module file to write.
        registry: Registry to populate; a fresh one when omitted.
    """
    registry = registry if registry is not None else ModelRegistry()

    logger.info("[PHASE 1] Parsing filter definition...")
    build_filter(filter_path, registry)

    logger.info("[PHASE 2] Resolving action signatures...")
    resolve_registry_actions(registry, metadata_source)

    logger.info("[PHASE 3] Filtering schema metadata...")
    run_filter(metadata_source, CodeWriterFilter(registry, DefaultFilterService()))

    logger.info("[PHASE 4] Rendering unit of work...")
    return write_source(registry, options, out_path)
