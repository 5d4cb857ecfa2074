"""evry — run shell commands every so often, using exit codes for control flow."""

__version__ = "0.1.0"
