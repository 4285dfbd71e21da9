"""Models, selection helpers and SSH/Docker tools for GPU compute executors and pods."""

__version__ = "0.1.0"

__all__ = [
    "docker",
    "errors",
    "filters",
    "formatters",
    "gpu",
    "ids",
    "models",
    "optimization",
    "parsers",
    "pods",
    "resolvers",
    "ssh",
]