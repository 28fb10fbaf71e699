"""Jinja2 rendering for outgoing email bodies."""

from typing import Any

from jinja2 import StrictUndefined
from jinja2.sandbox import SandboxedEnvironment

_env = SandboxedEnvironment(
    autoescape=True,
    undefined=StrictUndefined,
    keep_trailing_newline=False,
)


def render_template(template_str: str, context: dict[str, Any]) -> str:
    """Render a Jinja2 template string with the given context.

    Uses SandboxedEnvironment to prevent SSTI and StrictUndefined
    to raise on missing variables. Values are autoescaped, so names and
    descriptions typed by users cannot inject markup into the email.
    """
    template = _env.from_string(template_str)
    return template.render(context)
