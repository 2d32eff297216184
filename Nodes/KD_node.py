from enum import Enum

from Nodes.Point import Point
from Nodes.Rectangle import Rectangle


class Orientation(Enum):
    VERTICAL = 0    # divide por x: izquierda / derecha
    HORIZONTAL = 1  # divide por y: abajo / arriba

    def flip(self):
        return Orientation.HORIZONTAL if self is Orientation.VERTICAL else Orientation.VERTICAL

    def key(self, point):
        """Coordenada que usa esta orientación para comparar."""
        return point.x if self is Orientation.VERTICAL else point.y


class KdNode:
    """Nodo del 2d-tree.

    `region` es el rectángulo que cubre todo el subárbol; se fija al crear el
    nodo y no cambia nunca (no hay borrado ni rebalanceo).
    """
    __slots__ = ("point", "value", "region", "orientation", "left", "right")

    def __init__(self, point: Point, value, region: Rectangle, orientation: Orientation):
        self.point = point
        self.value = value
        self.region = region
        self.orientation = orientation
        self.left = None   # coordenada estrictamente menor
        self.right = None  # coordenada mayor o igual

    def goes_left(self, point: Point) -> bool:
        """Los empates en la coordenada de corte van a la derecha."""
        return self.orientation.key(point) < self.orientation.key(self.point)

    def child(self, go_left: bool):
        return self.left if go_left else self.right

    def child_region(self, go_left: bool) -> Rectangle:
        """Región del hijo: la del nodo recortada por su recta de corte."""
        cut = self.orientation.key(self.point)
        if self.orientation is Orientation.VERTICAL:
            return self.region.clip(xmax=cut) if go_left else self.region.clip(xmin=cut)
        return self.region.clip(ymax=cut) if go_left else self.region.clip(ymin=cut)

    def attach(self, go_left: bool, point: Point, value) -> "KdNode":
        node = KdNode(point, value, self.child_region(go_left), self.orientation.flip())
        if go_left:
            self.left = node
        else:
            self.right = node
        return node

    def __repr__(self):
        return f"KdNode({self.point!r}, {self.orientation.name})"
