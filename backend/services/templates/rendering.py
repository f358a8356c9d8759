from pathlib import Path

from jinja2 import Environment, FileSystemLoader


_LAYOUTS = Path(__file__).parent / "layouts"
env = Environment(
    loader=FileSystemLoader(_LAYOUTS),
    autoescape=True,
    trim_blocks=True,
    lstrip_blocks=True,
)


def render_layout(name: str, **context) -> str:
    """Render one of the bundled HTML layouts."""
    return env.get_template(name).render(**context)
