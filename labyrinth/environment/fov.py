"""Line-of-sight visibility for observers on a maze grid.

An observer sees a cell when the Bresenham line from the observer to that
cell crosses only traversable cells. The first wall on a line is itself
visible and stops the line. A diagonal step between two walls that touch at
a corner is never seen through, even when the far cell is open.

After the sweep, Cone and Plane views keep only the cells in front of the
observer's facing direction. Full views skip line of sight entirely and see
every traversable cell.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from labyrinth.environment.directions import (
    Circle,
    Cone,
    Direction,
    Full,
    Plane,
    View,
)
from labyrinth.types import Position

if TYPE_CHECKING:
    from labyrinth.environment.positions import ValidPositions


def _bresenham(start: Position, end: Position) -> list[Position]:
    """Rasterize a sloped line, always walking from the low end of its major axis.

    Steep lines are transposed first. The minor coordinate advances as soon
    as the accumulated error reaches half a cell, so ties round away from
    the starting end.
    """
    (x0, y0), (x1, y1) = start, end
    steep = abs(y1 - y0) > abs(x1 - x0)
    if steep:
        x0, y0, x1, y1 = y0, x0, y1, x1
    if x0 > x1:
        x0, y0, x1, y1 = x1, y1, x0, y0

    delta_x = x1 - x0
    delta_y = abs(y1 - y0)
    y_step = 1 if y0 < y1 else -1
    error = 0
    y = y0
    points: list[Position] = []
    for x in range(x0, x1 + 1):
        points.append((y, x) if steep else (x, y))
        error += delta_y
        if 2 * error >= delta_x:
            y += y_step
            error -= delta_x
    return points


def get_line(start: Position, end: Position) -> list[Position]:
    """Return the Bresenham line from ``start`` to ``end``, both inclusive.

    Vertical and horizontal lines are enumerated directly. Sloped lines are
    rasterized independently of endpoint order, so (a, b) and (b, a) cover
    the same cells; the result is reversed when needed so the first cell is
    always ``start``.
    """
    (x0, y0), (x1, y1) = start, end
    if x0 == x1:
        step = 1 if y1 >= y0 else -1
        return [(x0, y) for y in range(y0, y1 + step, step)]
    if y0 == y1:
        step = 1 if x1 >= x0 else -1
        return [(x, y0) for x in range(x0, x1 + step, step)]
    points = _bresenham(start, end)
    if points[0] != start:
        points.reverse()
    return points


def cuts_corner(valid: ValidPositions, current: Position, step: Position) -> bool:
    """True if a diagonal step from ``current`` to ``step`` squeezes between walls.

    The step is blocked when the target is open but both orthogonal cells
    that share the corner with it are walls. Orthogonal steps never cut.
    """
    x, y = current
    nx, ny = step
    dx, dy = nx - x, ny - y
    if dx == 0 or dy == 0:
        return False
    return (
        valid.is_valid(step)
        and not valid.is_valid((x + dx, y))
        and not valid.is_valid((x, y + dy))
    )


def _walk_line(
    valid: ValidPositions, line: list[Position], visible: set[Position]
) -> None:
    """Add the cells of ``line`` to ``visible`` until sight is blocked."""
    last = len(line) - 1
    for index, cell in enumerate(line):
        # The wall that blocks the line is visible as well.
        visible.add(cell)
        if not valid.is_valid(cell):
            return
        if index < last and cuts_corner(valid, cell, line[index + 1]):
            return


def in_view(view: View, direction: Direction, dx: int, dy: int) -> bool:
    """Directional filter for a cell at offset (dx, dy) from the observer."""
    match view:
        case Cone():
            match direction:
                case Direction.NORTH:
                    return dy <= dx <= -dy
                case Direction.EAST:
                    return -dx <= dy <= dx
                case Direction.SOUTH:
                    return -dy <= dx <= dy
                case Direction.WEST:
                    return dx <= dy <= -dx
                case Direction.NORTH_EAST:
                    return dx >= 0 and dy <= 0
                case Direction.SOUTH_EAST:
                    return dx >= 0 and dy >= 0
                case Direction.SOUTH_WEST:
                    return dx <= 0 and dy >= 0
                case Direction.NORTH_WEST:
                    return dx <= 0 and dy <= 0
        case Plane():
            match direction:
                case Direction.NORTH:
                    return dy < 0
                case Direction.EAST:
                    return dx > 0
                case Direction.SOUTH:
                    return dy > 0
                case Direction.WEST:
                    return dx < 0
                case Direction.NORTH_EAST:
                    return dx > dy
                case Direction.SOUTH_EAST:
                    return dx > -dy
                case Direction.SOUTH_WEST:
                    return dx < dy
                case Direction.NORTH_WEST:
                    return dx < -dy
        case Circle() | Full():
            return True
    raise TypeError(f"Unsupported view mode: {view!r}")


def compute_visible_positions(
    valid: ValidPositions,
    position: Position,
    direction: Direction,
    view: View,
) -> frozenset[Position]:
    """Compute the cells an observer at ``position`` can currently see."""
    if isinstance(view, Full):
        return frozenset(valid.positions)

    x, y = position
    radius = view.radius
    visible: set[Position] = set()

    for ty in range(max(y - radius, 0), min(y + radius, valid.height) + 1):
        for tx in range(max(x - radius, 0), min(x + radius, valid.width) + 1):
            # Origin is always visible.
            if (tx, ty) == position:
                visible.add(position)
                continue
            if (tx, ty) in visible:
                continue
            _walk_line(valid, get_line(position, (tx, ty)), visible)

    return frozenset(
        (vx, vy)
        for vx, vy in visible
        if 0 <= vx < valid.width
        and 0 <= vy < valid.height
        and in_view(view, direction, vx - x, vy - y)
    )
