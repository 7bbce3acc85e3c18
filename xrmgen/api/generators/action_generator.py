"""Action contracts: request interface, response type, request implementation."""

from xrmgen.templates import env as jinja_env


def render_action_request(action: dict) -> str:
    return jinja_env.get_template("action_request.jinja").render(action=action)


def render_action_response(action: dict) -> str:
    return jinja_env.get_template("action_response.jinja").render(action=action)


def render_action_request_impl(action: dict) -> str:
    """Concrete request reading inputs from the execution context; only for actions with inputs."""
    return jinja_env.get_template("action_request_impl.jinja").render(action=action)
