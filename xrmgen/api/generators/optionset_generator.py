"""Global option sets as IntEnum classes."""

from xrmgen.templates import env as jinja_env


def render_global_optionset(optionset: dict) -> str:
    return jinja_env.get_template("global_optionset.jinja").render(optionset=optionset)
