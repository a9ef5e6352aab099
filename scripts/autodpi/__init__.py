"""AUTODPI: switch the Xfce font DPI when the primary display resolution changes."""

APP_NAME = "AUTODPI"
__version__ = "0.1"

__all__ = ["APP_NAME", "__version__"]
