# -*- coding: utf-8 -*-
"""affine3d: an epsilon-tolerant 3D affine geometry kernel"""
from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("affine3d")
except PackageNotFoundError:  # pragma: no cover - handled when package not installed
    __version__ = "unknown"

from affine3d.config import DEFAULT_EPSILON, Environment
from affine3d.errors import DegenerateGeometryError
from affine3d.vector import I, J, K, ZERO, Vector
from affine3d.point import Point
from affine3d.geometry import Geometry, IntersectionResult
from affine3d.line import Line, LineSegment, Ray
from affine3d.plane import Equation, Plane
from affine3d.triangle import Triangle
from affine3d.convex import ConvexArea, get_geometry
from affine3d.tetrahedron import Tetrahedron

__all__ = [
    "DEFAULT_EPSILON",
    "Environment",
    "DegenerateGeometryError",
    "Vector",
    "ZERO",
    "I",
    "J",
    "K",
    "Point",
    "Geometry",
    "IntersectionResult",
    "Line",
    "Ray",
    "LineSegment",
    "Plane",
    "Equation",
    "Triangle",
    "ConvexArea",
    "get_geometry",
    "Tetrahedron",
]
