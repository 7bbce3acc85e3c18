"""Generic repository bound per entity by the unit of work."""

from xrmgen.templates import env as jinja_env


def render_repository(context_name: str) -> str:
    return jinja_env.get_template("repository.jinja").render(context_name=context_name)
