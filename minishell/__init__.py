"""A small interactive shell with builtins, pipelines and job control."""

__version__ = "0.1.0"
__all__ = ["commands", "execute", "jobs", "shell"]