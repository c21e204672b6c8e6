"""Edge Plugins - macOS browser extension inventory for endpoint agents."""

__version__ = "1.1.1.3"
