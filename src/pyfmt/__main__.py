"""Main entry point for pyfmt when run as a module."""

from pyfmt.project_info import get_project_info


def main():
    """Print project name, description and version."""
    info = get_project_info()
    print(f"{info.name} v{info.version}: {info.description}")


if __name__ == "__main__":
    main()
