"""2D box collision, framebuffer drawing, ring buffers and config tables."""

__version__ = "0.1.0"