"""2D shape geometry: vertices and indices ready to be drawn as batches."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional

from .color import Color
from .vector import Vec2, Vec3

# Smallest f32 step above 1.0; shorter normals give no visible line.
_EPSILON = 1.1920929e-07


class DrawMode(Enum):
    TRIANGLES = auto()
    LINES = auto()


@dataclass(frozen=True)
class Vertex:
    """A vertex with position, texture coordinates and colour."""

    position: Vec3
    uv: Vec2
    color: Color


@dataclass(frozen=True)
class Geometry:
    """One batch of indexed vertices to draw untextured."""

    mode: DrawMode
    vertices: tuple[Vertex, ...]
    indices: tuple[int, ...]
    texture: Optional[object] = None


@dataclass(frozen=True)
class DrawRectangleParams:
    """Options for rectangle_ex."""

    offset: Vec2 = field(default_factory=Vec2)
    rotation: float = 0.0
    color: Color = field(default_factory=lambda: Color.from_rgba(255, 255, 255, 255))


def _vertex(x: float, y: float, z: float, u: float, v: float, color: Color) -> Vertex:
    return Vertex(Vec3(x, y, z), Vec2(u, v), color)


def _triangles(vertices: list[Vertex], indices: list[int]) -> Geometry:
    return Geometry(DrawMode.TRIANGLES, tuple(vertices), tuple(indices))


def triangle(v1: Vec2, v2: Vec2, v3: Vec2, color: Color) -> list[Geometry]:
    """A solid triangle between three points."""
    vertices = [_vertex(p.x, p.y, 0.0, 0.0, 0.0, color) for p in (v1, v2, v3)]
    return [_triangles(vertices, [0, 1, 2])]


def triangle_lines(
    v1: Vec2, v2: Vec2, v3: Vec2, thickness: float, color: Color
) -> list[Geometry]:
    """A triangle outline made of three lines."""
    return [
        *line(v1.x, v1.y, v2.x, v2.y, thickness, color),
        *line(v2.x, v2.y, v3.x, v3.y, thickness, color),
        *line(v3.x, v3.y, v1.x, v1.y, thickness, color),
    ]


def rectangle(x: float, y: float, w: float, h: float, color: Color) -> list[Geometry]:
    """A solid rectangle with its top-left corner at (x, y)."""
    vertices = [
        _vertex(x, y, 0.0, 0.0, 0.0, color),
        _vertex(x + w, y, 0.0, 1.0, 0.0, color),
        _vertex(x + w, y + h, 0.0, 1.0, 1.0, color),
        _vertex(x, y + h, 0.0, 0.0, 1.0, color),
    ]
    return [_triangles(vertices, [0, 1, 2, 0, 2, 3])]


def rectangle_lines(
    x: float, y: float, w: float, h: float, thickness: float, color: Color
) -> list[Geometry]:
    """A rectangle outline of the given thickness, drawn inside its bounds."""
    t = thickness / 2.0
    vertices = [
        _vertex(x, y, 0.0, 0.0, 1.0, color),
        _vertex(x + w, y, 0.0, 1.0, 0.0, color),
        _vertex(x + w, y + h, 0.0, 1.0, 1.0, color),
        _vertex(x, y + h, 0.0, 0.0, 0.0, color),
        _vertex(x + t, y + t, 0.0, 0.0, 0.0, color),
        _vertex(x + w - t, y + t, 0.0, 0.0, 0.0, color),
        _vertex(x + w - t, y + h - t, 0.0, 0.0, 0.0, color),
        _vertex(x + t, y + h - t, 0.0, 0.0, 0.0, color),
    ]
    indices = [
        0, 1, 4, 1, 4, 5, 1, 5, 6, 1, 2, 6,
        3, 7, 2, 2, 7, 6, 0, 4, 3, 3, 4, 7,
    ]
    return [_triangles(vertices, indices)]


def rectangle_ex(
    x: float, y: float, w: float, h: float, params: Optional[DrawRectangleParams] = None
) -> list[Geometry]:
    """A solid rectangle at (x, y), scaled, offset and rotated by params."""
    params = params or DrawRectangleParams()
    cos_r = math.cos(params.rotation)
    sin_r = math.sin(params.rotation)

    def transform(px: float, py: float) -> tuple[float, float]:
        sx = (px - params.offset.x) * w
        sy = (py - params.offset.y) * h
        return (x + cos_r * sx - sin_r * sy, y + sin_r * sx + cos_r * sy)

    corners = [transform(0.0, 0.0), transform(0.0, 1.0), transform(1.0, 1.0), transform(1.0, 0.0)]
    uvs = [(0.0, 1.0), (1.0, 0.0), (1.0, 1.0), (1.0, 0.0)]
    vertices = [
        _vertex(cx, cy, 0.0, u, v, params.color) for (cx, cy), (u, v) in zip(corners, uvs)
    ]
    return [_triangles(vertices, [0, 1, 2, 0, 2, 3])]


def hexagon(
    x: float,
    y: float,
    size: float,
    border: float,
    vertical: bool,
    border_color: Color,
    fill_color: Color,
) -> list[Geometry]:
    """A filled hexagon with an optional outline; vertical points it along y."""
    rotation = 90.0 if vertical else 0.0
    batches = poly(x, y, 6, size, rotation, fill_color)
    if border > 0.0:
        batches.extend(poly_lines(x, y, 6, size, rotation, border, border_color))
    return batches


def _check_sides(sides: int) -> None:
    if not 1 <= sides <= 255:
        raise ValueError(f"sides must be in 1..255, got {sides}")


def _ring_point(i: int, sides: int, rot: float) -> tuple[float, float]:
    angle = i / sides * math.pi * 2.0 + rot
    return (math.cos(angle), math.sin(angle))


def poly(
    x: float, y: float, sides: int, radius: float, rotation: float, color: Color
) -> list[Geometry]:
    """A solid regular polygon; rotation is clockwise in degrees."""
    _check_sides(sides)
    rot = math.radians(rotation)
    vertices = [_vertex(x, y, 0.0, 0.0, 0.0, color)]
    indices: list[int] = []
    for i in range(sides + 1):
        rx, ry = _ring_point(i, sides, rot)
        vertices.append(_vertex(x + radius * rx, y + radius * ry, 0.0, rx, ry, color))
        if i != sides:
            indices.extend((0, i + 1, i + 2))
    return [_triangles(vertices, indices)]


def poly_lines(
    x: float,
    y: float,
    sides: int,
    radius: float,
    rotation: float,
    thickness: float,
    color: Color,
) -> list[Geometry]:
    """A regular polygon outline; rotation is clockwise in degrees."""
    _check_sides(sides)
    rot = math.radians(rotation)
    batches: list[Geometry] = []
    for i in range(sides):
        rx0, ry0 = _ring_point(i, sides, rot)
        rx1, ry1 = _ring_point(i + 1, sides, rot)
        batches.extend(
            line(
                x + radius * rx0,
                y + radius * ry0,
                x + radius * rx1,
                y + radius * ry1,
                thickness,
                color,
            )
        )
    return batches


def circle(x: float, y: float, r: float, color: Color) -> list[Geometry]:
    """A solid circle approximated by a 20-sided polygon."""
    return poly(x, y, 20, r, 0.0, color)


def circle_lines(
    x: float, y: float, r: float, thickness: float, color: Color
) -> list[Geometry]:
    """A circle outline approximated by a 20-sided polygon."""
    return poly_lines(x, y, 20, r, 0.0, thickness, color)


def line(
    x1: float, y1: float, x2: float, y2: float, thickness: float, color: Color
) -> list[Geometry]:
    """A line as a quad; empty when the line or its thickness is degenerate."""
    if thickness == 0.0:
        return []
    nx = -(y2 - y1)
    ny = x2 - x1
    tlen = math.sqrt(nx * nx + ny * ny) / (thickness * 0.5)
    if tlen < _EPSILON:
        return []
    tx = nx / tlen
    ty = ny / tlen
    vertices = [
        _vertex(x1 + tx, y1 + ty, 0.0, 0.0, 0.0, color),
        _vertex(x1 - tx, y1 - ty, 0.0, 0.0, 0.0, color),
        _vertex(x2 + tx, y2 + ty, 0.0, 0.0, 0.0, color),
        _vertex(x2 - tx, y2 - ty, 0.0, 0.0, 0.0, color),
    ]
    return [_triangles(vertices, [0, 1, 2, 2, 1, 3])]