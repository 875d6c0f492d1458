from fastapi.templating import Jinja2Templates
from pathlib import Path

FRONTEND_DIR = Path(__file__).parent.parent / "front"


def setup_templates(frontend_dir: Path) -> Jinja2Templates:
    templates_dir = Path(frontend_dir) / "templates"
    return Jinja2Templates(directory=str(templates_dir))


templates = setup_templates(FRONTEND_DIR)
