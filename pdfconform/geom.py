"""Geometry primitives: points, sizes, rectangles, transforms and paths."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from itertools import islice
from typing import Iterable, Iterator

_NEARLY_ZERO = 1.0 / (1 << 12)


def _all_finite(*values: float) -> bool:
    return all(math.isfinite(v) for v in values)


@dataclass(frozen=True)
class Point:
    """A point."""

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def from_xy(cls, x: float, y: float) -> Point:
        """Create a point from its x and y coordinates."""
        return cls(float(x), float(y))


@dataclass(frozen=True)
class Size:
    """A size whose width and height are both finite and greater than zero."""

    width: float
    height: float

    def __post_init__(self) -> None:
        if not (
            _all_finite(self.width, self.height) and self.width > 0 and self.height > 0
        ):
            raise ValueError(
                f"invalid size: width={self.width!r}, height={self.height!r}"
            )

    @classmethod
    def from_wh(cls, width: float, height: float) -> Size:
        """Create a size; raises ValueError unless both sides are > 0."""
        return cls(float(width), float(height))


@dataclass(frozen=True)
class Transform:
    """An affine transformation matrix.

    A point (x, y) is mapped to (sx*x + kx*y + tx, ky*x + sy*y + ty).
    The matrix is not validated: degenerate and non-finite values are allowed.
    """

    sx: float = 1.0
    ky: float = 0.0
    kx: float = 0.0
    sy: float = 1.0
    tx: float = 0.0
    ty: float = 0.0

    @classmethod
    def identity(cls) -> Transform:
        """Return the identity transform."""
        return cls()

    @classmethod
    def from_row(
        cls, sx: float, ky: float, kx: float, sy: float, tx: float, ty: float
    ) -> Transform:
        """Create a transform from its six components."""
        return cls(float(sx), float(ky), float(kx), float(sy), float(tx), float(ty))

    @classmethod
    def from_translate(cls, tx: float, ty: float) -> Transform:
        """Create a translating transform."""
        return cls.from_row(1.0, 0.0, 0.0, 1.0, tx, ty)

    @classmethod
    def from_scale(cls, sx: float, sy: float) -> Transform:
        """Create a scaling transform."""
        return cls.from_row(sx, 0.0, 0.0, sy, 0.0, 0.0)

    @classmethod
    def from_skew(cls, kx: float, ky: float) -> Transform:
        """Create a skewing transform."""
        return cls.from_row(1.0, ky, kx, 1.0, 0.0, 0.0)

    @classmethod
    def from_rotate(cls, angle: float) -> Transform:
        """Create a rotating transform; `angle` is in degrees."""
        radians = math.radians(angle)
        sin, cos = math.sin(radians), math.cos(radians)
        return cls.from_row(cos, sin, -sin, cos, 0.0, 0.0)

    @classmethod
    def from_rotate_at(cls, angle: float, tx: float, ty: float) -> Transform:
        """Create a transform rotating by `angle` degrees around (tx, ty)."""
        return (
            cls.from_translate(tx, ty)
            .pre_concat(cls.from_rotate(angle))
            .pre_concat(cls.from_translate(-tx, -ty))
        )

    def is_identity(self) -> bool:
        """Whether this is the identity transform."""
        return self == Transform()

    def _is_translate_only(self) -> bool:
        return self.sx == 1.0 and self.ky == 0.0 and self.kx == 0.0 and self.sy == 1.0

    def invert(self) -> Transform:
        """Return the inverse transform; raises ValueError if it is singular."""
        if self.is_identity():
            return self
        if self._is_translate_only():
            return Transform.from_translate(-self.tx, -self.ty)

        det = self.sx * self.sy - self.kx * self.ky
        if not math.isfinite(det) or abs(det) <= _NEARLY_ZERO**3:
            raise ValueError("transform is not invertible")

        inv = 1.0 / det
        result = Transform(
            sx=self.sy * inv,
            ky=-self.ky * inv,
            kx=-self.kx * inv,
            sy=self.sx * inv,
            tx=(self.kx * self.ty - self.sy * self.tx) * inv,
            ty=(self.ky * self.tx - self.sx * self.ty) * inv,
        )
        if not _all_finite(*result.to_pdf_transform()):
            raise ValueError("transform is not invertible")
        return result

    @staticmethod
    def _concat(a: Transform, b: Transform) -> Transform:
        return Transform(
            sx=a.sx * b.sx + a.kx * b.ky,
            ky=a.ky * b.sx + a.sy * b.ky,
            kx=a.sx * b.kx + a.kx * b.sy,
            sy=a.ky * b.kx + a.sy * b.sy,
            tx=a.sx * b.tx + a.kx * b.ty + a.tx,
            ty=a.ky * b.tx + a.sy * b.ty + a.ty,
        )

    def pre_concat(self, other: Transform) -> Transform:
        """Return self * other: `other` is applied first, then self."""
        return self._concat(self, other)

    def post_concat(self, other: Transform) -> Transform:
        """Return other * self: self is applied first, then `other`."""
        return self._concat(other, self)

    def map_point(self, x: float, y: float) -> Point:
        """Apply the transform to a point."""
        return Point(
            self.sx * x + self.kx * y + self.tx,
            self.ky * x + self.sy * y + self.ty,
        )

    def to_pdf_transform(self) -> tuple[float, float, float, float, float, float]:
        """The six components in PDF matrix order."""
        return (self.sx, self.ky, self.kx, self.sy, self.tx, self.ty)


@dataclass(frozen=True)
class Rect:
    """A rectangle defined by left, top, right and bottom edges."""

    left: float
    top: float
    right: float
    bottom: float

    def __post_init__(self) -> None:
        valid = (
            _all_finite(self.left, self.top, self.right, self.bottom)
            and self.left <= self.right
            and self.top <= self.bottom
            and _all_finite(self.right - self.left, self.bottom - self.top)
        )
        if not valid:
            raise ValueError(
                "invalid rect: "
                f"ltrb=({self.left!r}, {self.top!r}, {self.right!r}, {self.bottom!r})"
            )

    @classmethod
    def from_ltrb(cls, left: float, top: float, right: float, bottom: float) -> Rect:
        """Create a rect from its edges; raises ValueError if they are invalid."""
        return cls(float(left), float(top), float(right), float(bottom))

    @classmethod
    def from_xywh(cls, x: float, y: float, w: float, h: float) -> Rect:
        """Create a rect from its origin and size."""
        return cls.from_ltrb(x, y, x + w, y + h)

    @classmethod
    def from_points(cls, points: Iterable[Point]) -> Rect:
        """The smallest rect containing all points; raises ValueError if none."""
        pts = list(points)
        if not pts:
            raise ValueError("cannot compute the bounds of no points")
        xs = [p.x for p in pts]
        ys = [p.y for p in pts]
        return cls.from_ltrb(min(xs), min(ys), max(xs), max(ys))

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    def transform(self, transform: Transform) -> Rect:
        """The bounding box of this rect after applying `transform`."""
        if transform.is_identity():
            return self
        corners = (
            transform.map_point(self.left, self.top),
            transform.map_point(self.right, self.top),
            transform.map_point(self.right, self.bottom),
            transform.map_point(self.left, self.bottom),
        )
        return Rect.from_points(corners)

    def expand(self, other: Rect) -> Rect:
        """The smallest rect containing both this rect and `other`."""
        return Rect.from_ltrb(
            min(self.left, other.left),
            min(self.top, other.top),
            max(self.right, other.right),
            max(self.bottom, other.bottom),
        )

    def to_pdf_rect(self) -> tuple[float, float, float, float]:
        """The rect as a PDF rectangle (x1, y1, x2, y2)."""
        return (
            self.left,
            self.top,
            self.left + self.width,
            self.top + self.height,
        )


@dataclass(frozen=True)
class Quadrilateral:
    """A quadrilateral in a y-down coordinate system.

    Points are ordered bottom-left, bottom-right, top-right, top-left.
    """

    points: tuple[Point, Point, Point, Point]

    def __post_init__(self) -> None:
        if len(self.points) != 4:
            raise ValueError("a quadrilateral needs exactly four points")

    @classmethod
    def from_rect(cls, rect: Rect) -> Quadrilateral:
        """The quadrilateral covering `rect`."""
        return cls(
            (
                Point(rect.left, rect.bottom),
                Point(rect.right, rect.bottom),
                Point(rect.right, rect.top),
                Point(rect.left, rect.top),
            )
        )


class PathVerb(enum.Enum):
    """A path drawing command."""

    MOVE = "move"
    LINE = "line"
    QUAD = "quad"
    CUBIC = "cubic"
    CLOSE = "close"


_POINTS_PER_VERB = {
    PathVerb.MOVE: 1,
    PathVerb.LINE: 1,
    PathVerb.QUAD: 2,
    PathVerb.CUBIC: 3,
    PathVerb.CLOSE: 0,
}


@dataclass(frozen=True)
class PathSegment:
    """One segment of a path: a verb with the points it uses."""

    verb: PathVerb
    points: tuple[Point, ...] = ()


@dataclass(frozen=True)
class Path:
    """An immutable path made of verbs and points."""

    verbs: tuple[PathVerb, ...]
    points: tuple[Point, ...]

    def bounds(self) -> Rect:
        """The bounding box of all points, control points included."""
        return Rect.from_points(self.points)

    def segments(self) -> Iterator[PathSegment]:
        """Yield the path's segments in order."""
        pts = iter(self.points)
        for verb in self.verbs:
            yield PathSegment(verb, tuple(islice(pts, _POINTS_PER_VERB[verb])))

    def transform(self, transform: Transform) -> Path:
        """Apply a transform; raises ValueError if the result is not finite."""
        points = tuple(transform.map_point(p.x, p.y) for p in self.points)
        result = Path(self.verbs, points)
        result.bounds()
        return result


class PathBuilder:
    """Builds a path contour by contour."""

    def __init__(self) -> None:
        self._verbs: list[PathVerb] = []
        self._points: list[Point] = []
        self._move_to_required = True
        self._last_move_to_index = 0

    def move_to(self, x: float, y: float) -> None:
        """Begin a new contour."""
        point = Point.from_xy(x, y)
        if self._verbs and self._verbs[-1] is PathVerb.MOVE:
            self._points[-1] = point
        else:
            self._last_move_to_index = len(self._points)
            self._move_to_required = False
            self._verbs.append(PathVerb.MOVE)
            self._points.append(point)

    def _inject_move_to_if_needed(self) -> None:
        if self._move_to_required:
            if self._last_move_to_index < len(self._points):
                start = self._points[self._last_move_to_index]
                self.move_to(start.x, start.y)
            else:
                self.move_to(0.0, 0.0)

    def line_to(self, x: float, y: float) -> None:
        """Add a line from the last point."""
        self._inject_move_to_if_needed()
        self._verbs.append(PathVerb.LINE)
        self._points.append(Point.from_xy(x, y))

    def quad_to(self, x1: float, y1: float, x: float, y: float) -> None:
        """Add a quadratic curve from the last point to (x, y)."""
        self._inject_move_to_if_needed()
        self._verbs.append(PathVerb.QUAD)
        self._points.extend((Point.from_xy(x1, y1), Point.from_xy(x, y)))

    def cubic_to(
        self, x1: float, y1: float, x2: float, y2: float, x: float, y: float
    ) -> None:
        """Add a cubic curve from the last point to (x, y)."""
        self._inject_move_to_if_needed()
        self._verbs.append(PathVerb.CUBIC)
        self._points.extend(
            (Point.from_xy(x1, y1), Point.from_xy(x2, y2), Point.from_xy(x, y))
        )

    def close(self) -> None:
        """Close the current contour."""
        if self._verbs and self._verbs[-1] is not PathVerb.CLOSE:
            self._verbs.append(PathVerb.CLOSE)
        self._move_to_required = True

    def push_rect(self, rect: Rect) -> None:
        """Add a closed rectangular contour."""
        self.move_to(rect.left, rect.top)
        self.line_to(rect.right, rect.top)
        self.line_to(rect.right, rect.bottom)
        self.line_to(rect.left, rect.bottom)
        self.close()

    def finish(self) -> Path:
        """Return the path; raises ValueError if it is empty or not finite."""
        if len(self._verbs) <= 1:
            raise ValueError("path has no drawable segments")
        path = Path(tuple(self._verbs), tuple(self._points))
        path.bounds()
        return path