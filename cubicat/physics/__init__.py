"""2D vector maths, box-shaped rigid bodies and box-versus-box contact generation."""

__all__ = ["math_utils", "body", "collide"]