"""livefx - interactive live-video filter tool."""

__version__ = "0.1.0"
