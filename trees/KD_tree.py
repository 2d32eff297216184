import math
from collections import deque

from Nodes.errors import InvalidArgumentError
from Nodes.KD_node import KdNode, Orientation
from Nodes.Point import Point
from Nodes.Rectangle import Rectangle
from trees.logger import logger


class KdTreeST:
    """Tabla de símbolos punto -> valor organizada como 2d-tree.

    La raíz divide por x (VERTICAL) y la orientación alterna con la
    profundidad. Cada nodo guarda el rectángulo de su subárbol, que se usa
    para podar en `range` y `nearest`. La forma del árbol depende solo del
    orden de inserción: no hay borrado ni rebalanceo.

    Los recorridos son iterativos para que una inserción ordenada (árbol
    degenerado) no choque con el límite de recursión.
    """

    def __init__(self, items=None):
        self.root = None
        self._size = 0
        if items is not None:
            for point, value in items:
                self.put(point, value)

    def is_empty(self) -> bool:
        return self.root is None

    def size(self) -> int:
        return self._size

    def __len__(self):
        return self._size

    def put(self, point, value) -> None:
        """Asocia `value` a `point`; si el punto ya existe solo sustituye el valor."""
        point = Point.of(point)
        if value is None:
            raise InvalidArgumentError("el valor no puede ser None")

        if self.root is None:
            self.root = KdNode(point, value, Rectangle.plane(), Orientation.VERTICAL)
            self._size = 1
            logger.debug("raíz creada en %r", point)
            return

        x = self.root
        while True:
            if point == x.point:
                x.value = value
                return
            go_left = x.goes_left(point)
            child = x.child(go_left)
            if child is None:
                node = x.attach(go_left, point, value)
                self._size += 1
                logger.debug("nodo %r creado con región %r", point, node.region)
                return
            x = child

    def _find(self, point):
        x = self.root
        while x is not None:
            if point == x.point:
                return x
            x = x.child(x.goes_left(point))
        return None

    def get(self, point):
        """Valor asociado a `point`, o None si no está en la tabla."""
        point = Point.of(point)
        node = self._find(point)
        return node.value if node is not None else None

    def contains(self, point) -> bool:
        return self.get(point) is not None

    def __contains__(self, point):
        return self.contains(point)

    def points(self):
        """Todos los puntos, en orden por niveles."""
        result = []
        queue = deque([self.root])
        while queue:
            x = queue.popleft()
            if x is None:
                continue
            result.append(x.point)
            queue.append(x.left)
            queue.append(x.right)
        return result

    def __iter__(self):
        return iter(self.points())

    def range(self, rect):
        """Puntos dentro del rectángulo (borde incluido)."""
        rect = Rectangle.of(rect)

        found = []
        visited = 0
        queue = deque([self.root])
        while queue:
            x = queue.popleft()
            if x is None:
                continue
            # ningún punto del subárbol puede caer en rect
            if not x.region.intersects(rect):
                continue
            visited += 1
            if rect.contains(x.point):
                found.append(x.point)
            queue.append(x.left)
            queue.append(x.right)

        logger.debug("range %r: %d nodos visitados, %d puntos", rect, visited, len(found))
        return found

    def nearest(self, point):
        """Punto almacenado más cercano a `point`, o None si el árbol está vacío.

        Entre candidatos a la misma distancia no se garantiza cuál se devuelve.
        """
        point = Point.of(point)

        best = None
        best_dist = math.inf
        visited = 0
        stack = [self.root]
        while stack:
            x = stack.pop()
            if x is None:
                continue
            # la región no puede mejorar al mejor candidato actual
            if best_dist < x.region.distance_squared_to(point):
                continue
            visited += 1

            dist = x.point.distance_squared_to(point)
            # con coordenadas enormes dist puede desbordar a inf
            if best is None or dist < best_dist:
                best = x.point
                best_dist = dist

            # decidir qué lado explorar primero: el del punto de consulta
            go_left = x.goes_left(point)
            first = x.child(go_left)
            second = x.child(not go_left)
            stack.append(second)
            stack.append(first)

        logger.debug("nearest %r -> %r: %d nodos visitados", point, best, visited)
        return best

    def height(self) -> int:
        """Número de niveles del árbol (0 si está vacío)."""
        levels = 0
        level = [self.root] if self.root is not None else []
        while level:
            levels += 1
            level = [c for x in level for c in (x.left, x.right) if c is not None]
        return levels

    def __repr__(self):
        return f"KdTreeST(size={self._size})"
