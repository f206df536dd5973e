from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from folio.utils import format_long_date

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


def build_environment(templates_dir: Path = TEMPLATES_DIR) -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(templates_dir)),
        autoescape=select_autoescape(["html"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["long_date"] = format_long_date
    return env


environment = build_environment()


def render_page(template_name: str, **context) -> str:
    return environment.get_template(template_name).render(**context)
