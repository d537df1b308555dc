"""cashdrawer — cash drawer with inventory-aware change making."""

__version__ = "0.1.0"
