"""Single source of the package version."""

__version__: str = "1.0.0"
