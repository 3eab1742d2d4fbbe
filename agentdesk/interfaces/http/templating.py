"""Template and static asset locations."""

from pathlib import Path

from fastapi.templating import Jinja2Templates

from agentdesk import __version__
from agentdesk.core.config import get_settings

PACKAGE_DIR = Path(__file__).resolve().parents[2]
PROJECT_ROOT = PACKAGE_DIR.parent


def resolve_path(path: Path) -> Path:
    if path.is_absolute():
        return path
    return (PROJECT_ROOT / path).resolve()


settings = get_settings()
STATIC_DIR = resolve_path(settings.static_dir)
TEMPLATE_DIR = resolve_path(settings.template_dir)

templates = Jinja2Templates(directory=str(TEMPLATE_DIR))
# Appended to static asset URLs as ?v=... for cache busting
templates.env.globals["static_version"] = __version__
templates.env.globals["project_name"] = settings.project_name
