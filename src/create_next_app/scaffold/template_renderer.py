"""Load and render the bundled Jinja2 project templates."""

from pathlib import Path

import jinja2

TEMPLATES_DIR = Path(__file__).parent / "templates"


def render_template(template_name: str, **kwargs) -> str:
    """Load a Jinja2 template by name and render it with the given arguments.

    Args:
        template_name: Path relative to scaffold/templates/ (e.g. "default/package.json.j2")
        **kwargs: Template variables.

    Returns:
        The rendered template string.

    Raises:
        FileNotFoundError: If the template file does not exist
    """
    template_path = TEMPLATES_DIR / template_name
    if not template_path.is_file():
        raise FileNotFoundError(f"Template not found: {template_path}")
    source = template_path.read_text(encoding="utf-8")
    return jinja2.Template(source, keep_trailing_newline=True).render(**kwargs)
