"""ClipStack: video editing project, media, and timeline service."""

__version__ = "0.1.0"
