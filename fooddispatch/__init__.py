"""Food delivery order dispatch: order queue, driver scheduling and tracking."""

__version__ = "0.1.0"
__all__ = ["__version__"]