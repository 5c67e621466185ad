"""
Menagerie Geometry

Area formulas over a fixed PI constant.
"""

PI = 3.14159265359


def area_of_circle(radius: float) -> float:
    return PI * radius * radius


def area_of_rectangle(length: float, width: float) -> float:
    return length * width


def area_of_cylinder(radius: float, height: float) -> float:
    """Total surface area: both caps plus the side, ``2 * PI * r * (r + h)``."""
    return 2 * PI * radius * (radius + height)


__all__ = ["PI", "area_of_circle", "area_of_rectangle", "area_of_cylinder"]
