"""Tk image gallery viewer with eased slide transitions, an animator and a line chart widget."""

__version__ = "0.1.0"
__all__ = ["easing", "animator", "chart", "gallery", "app"]