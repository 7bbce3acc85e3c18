"""
Unit-of-work declarations.

The standard and the elevated unit of work are rendered from one macro, so
their bodies are identical apart from class name and interface.
"""

from xrmgen.templates import env as jinja_env


def render_header(version: str, namespace: str, action_namespace: str) -> str:
    return jinja_env.get_template("header.jinja").render(
        version=version,
        namespace=namespace,
        action_namespace=action_namespace,
    )


def render_service_context(context_name: str) -> str:
    return jinja_env.get_template("service_context.jinja").render(context_name=context_name)


def render_unit_of_work_interface(entities) -> str:
    """IUnitOfWork with one abstract repository property per accepted entity, plus IAdminUnitOfWork."""
    return jinja_env.get_template("unit_of_work_interface.jinja").render(entities=entities)


def render_unit_of_work(entities, context_name: str) -> str:
    return jinja_env.get_template("unit_of_work.jinja").render(
        entities=entities,
        context_name=context_name,
    )
