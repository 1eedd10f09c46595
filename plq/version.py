"""plq release number, read by packaging and by ``plq --version``."""

__version__ = "0.1.0"

__all__ = ["__version__"]
