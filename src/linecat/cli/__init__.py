"""Command-line surface for linecat.

``cli`` (the click command) and ``main`` (the console-script entry point)
are resolved on first attribute access, so importing ``linecat.cli`` stays
cheap and ``python -m linecat.cli.main`` runs the module exactly once.
"""

__all__ = ["cli", "main"]


def __getattr__(name):
    if name == "cli":
        from .main import cli

        return cli
    if name == "main":
        from .main import main

        return main
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
