import math
from dataclasses import dataclass, replace

from Nodes.errors import InvalidArgumentError
from Nodes.Point import Point


@dataclass(frozen=True)
class Rectangle:
    """Rectángulo alineado a los ejes, cerrado (incluye su borde).

    Los límites pueden ser +-inf: la región de la raíz es el plano completo.
    Un rectángulo con xmin > xmax o ymin > ymax se rechaza al construirlo.
    """
    xmin: float
    ymin: float
    xmax: float
    ymax: float

    def __post_init__(self):
        try:
            has_nan = any(math.isnan(v) for v in (self.xmin, self.ymin, self.xmax, self.ymax))
        except TypeError as e:
            raise InvalidArgumentError(
                f"límites no numéricos: ({self.xmin!r}, {self.ymin!r}, {self.xmax!r}, {self.ymax!r})"
            ) from e
        if has_nan:
            raise InvalidArgumentError("límites NaN en el rectángulo")
        if self.xmin > self.xmax or self.ymin > self.ymax:
            raise InvalidArgumentError(
                f"rectángulo mal formado: ({self.xmin}, {self.ymin}, {self.xmax}, {self.ymax})"
            )

    @classmethod
    def of(cls, obj):
        """Acepta un Rectangle o una secuencia (xmin, ymin, xmax, ymax)."""
        if obj is None:
            raise InvalidArgumentError("el rectángulo no puede ser None")
        if isinstance(obj, Rectangle):
            return obj
        try:
            xmin, ymin, xmax, ymax = (float(v) for v in obj)
        except (TypeError, ValueError) as e:
            raise InvalidArgumentError(f"no es un rectángulo: {obj!r}") from e
        return cls(xmin, ymin, xmax, ymax)

    @classmethod
    def plane(cls):
        inf = math.inf
        return cls(-inf, -inf, inf, inf)

    def contains(self, p: Point) -> bool:
        return self.xmin <= p.x <= self.xmax and self.ymin <= p.y <= self.ymax

    def intersects(self, other: "Rectangle") -> bool:
        return not (self.xmax < other.xmin or
                    self.xmin > other.xmax or
                    self.ymax < other.ymin or
                    self.ymin > other.ymax)

    def distance_squared_to(self, p: Point) -> float:
        """Distancia al cuadrado desde p al punto más cercano del rectángulo (0 si p está dentro)."""
        dx = 0.0
        dy = 0.0
        if p.x < self.xmin:
            dx = p.x - self.xmin
        elif p.x > self.xmax:
            dx = p.x - self.xmax
        if p.y < self.ymin:
            dy = p.y - self.ymin
        elif p.y > self.ymax:
            dy = p.y - self.ymax
        return dx * dx + dy * dy

    def distance_to(self, p: Point) -> float:
        return math.sqrt(self.distance_squared_to(p))

    def width(self):
        return self.xmax - self.xmin

    def height(self):
        return self.ymax - self.ymin

    def area(self):
        return self.width() * self.height()

    def clip(self, xmin=None, ymin=None, xmax=None, ymax=None):
        """Copia con los límites indicados sustituidos."""
        changes = {k: v for k, v in (("xmin", xmin), ("ymin", ymin),
                                     ("xmax", xmax), ("ymax", ymax)) if v is not None}
        return replace(self, **changes)

    def __repr__(self):
        return f"[{self.xmin}, {self.xmax}] x [{self.ymin}, {self.ymax}]"
