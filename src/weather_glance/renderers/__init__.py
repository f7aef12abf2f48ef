"""Pure rendering functions: view state -> strings.

All renderers follow the same pattern:
  - Input: ``ViewState`` (from state.py) plus the selected ``Unit``
  - Output: str (HTML fragment or a plain-text line)
  - No side effects, no I/O, no Prefect decorators

Used by flows/report.py and the CLI.

Public API:
  - card: build_weather_card_html, format_summary

Adding a renderer
-----------------
1. Create ``renderers/{name}.py`` with a build function::

       from weather_glance.renderers import render_template

       def build_mywidget_html(state: ViewState, unit: Unit) -> str:
           return render_template("mywidget.html.j2", state=state)

2. Create a Jinja2 template in ``templates/{name}.html.j2``.
   Templates produce HTML fragments (no <html>/<body> tags).

3. Add tests: render sample states and assert on the returned string.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import jinja2

# Shared Jinja2 environment for all renderers
_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
_jinja_env = jinja2.Environment(
    loader=jinja2.FileSystemLoader(str(_TEMPLATE_DIR)),
    autoescape=True,
)


def render_template(template_name: str, **kwargs: Any) -> str:
    """Render a Jinja2 template by name."""
    return _jinja_env.get_template(template_name).render(**kwargs)
