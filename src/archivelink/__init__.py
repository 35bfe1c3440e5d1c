"""archivelink - Archive a selected URL with monolith and link the saved copy"""

__version__ = "1.0.0"
__description__ = "Archive a selected URL with monolith and link the saved copy"

__all__ = ["main", "ArchiveLink", "__version__"]


def __getattr__(name: str):
    """Lazy import to avoid triggering pynput initialization on package import.

    This allows importing archivelink.config or archivelink.links without
    requiring an X display, which is needed for CI/headless environments.
    """
    if name == "ArchiveLink":
        from .main import ArchiveLink

        return ArchiveLink
    if name == "main":
        from .main import main

        return main
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
