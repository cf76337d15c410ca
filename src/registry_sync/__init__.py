"""Keep a project's UI components in sync with a remote component registry."""

__version__ = "0.1.0"
