"""Package version."""

__version__ = "0.3.0"


def version_info(program: str = "namenode_exporter") -> str:
    """Return the one-line version banner printed by ``--version``."""
    return f"{program}, version {__version__}"
