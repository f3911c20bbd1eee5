"""Code Translator: resolve numeric Windows codes to readable descriptions."""

__all__ = ["__version__"]

__version__ = "0.1.0"
