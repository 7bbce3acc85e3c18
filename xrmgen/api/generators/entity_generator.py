"""Entity declarations: image interfaces, sealed entity class, typed reference, type registration."""

from xrmgen.templates import env as jinja_env


def render_entity(entity: dict) -> str:
    """Four image-role interfaces plus the sealed entity class implementing them."""
    return jinja_env.get_template("entity.jinja").render(entity=entity)


def render_referenced_entity(entity: dict) -> str:
    """Bare entity class for an entity reached only as an action target."""
    return jinja_env.get_template("referenced_entity.jinja").render(entity=entity)


def render_entity_reference(entity: dict) -> str:
    return jinja_env.get_template("entity_reference.jinja").render(entity=entity)


def render_registration(entities) -> str:
    """Static lookup from logical name to generated class, run when the module is imported."""
    return jinja_env.get_template("registration.jinja").render(entities=entities)
