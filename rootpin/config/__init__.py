"""Rootpin configuration module."""

__all__ = [
    "RootEntry", "RootsFile",
    "RootsFileError", "load_roots_file", "dump_roots",
]


# Lazy imports so the registry does not pay for PyYAML/Pydantic at import time
def __getattr__(name):
    if name in ("RootEntry", "RootsFile"):
        from rootpin.config.models import RootEntry, RootsFile
        return {"RootEntry": RootEntry, "RootsFile": RootsFile}[name]
    if name in ("RootsFileError", "load_roots_file", "dump_roots"):
        from rootpin.config import loader
        return getattr(loader, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
