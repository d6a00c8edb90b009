"""Project information utilities."""

from pathlib import Path
import tomllib

from pydantic import BaseModel


class ProjectInfo(BaseModel):
    """Project information from pyproject.toml."""

    name: str
    description: str
    version: str


def get_project_info() -> ProjectInfo:
    """Get project information from pyproject.toml file.

    Returns:
        ProjectInfo: A Pydantic model containing name, description and version.

    """
    # pyproject.toml sits at the project root, above src/pyfmt
    current_file = Path(__file__)
    project_root = current_file.parent.parent.parent
    pyproject_path = project_root / "pyproject.toml"

    if not pyproject_path.exists():
        return ProjectInfo(
            name="pyfmt",
            description="Project description not available",
            version="Version not available",
        )

    try:
        with pyproject_path.open("rb") as f:
            config = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        return ProjectInfo(
            name="pyfmt",
            description=f"Error reading project info: {e}",
            version="Version not available",
        )

    project_info = config.get("project", {})
    return ProjectInfo(
        name=project_info.get("name", "pyfmt"),
        description=project_info.get(
            "description", "Project description not available"
        ),
        version=project_info.get("version", "Version not available"),
    )
