import math
from dataclasses import dataclass

from Nodes.errors import InvalidArgumentError


@dataclass(frozen=True)
class Point:
    """Punto inmutable del plano; es la clave de la tabla de símbolos."""
    x: float
    y: float

    def __post_init__(self):
        # NaN rompe la igualdad y el orden de las comparaciones
        try:
            finite = math.isfinite(self.x) and math.isfinite(self.y)
        except TypeError as e:
            raise InvalidArgumentError(f"coordenadas no numéricas: ({self.x!r}, {self.y!r})") from e
        if not finite:
            raise InvalidArgumentError(f"coordenadas no finitas: ({self.x}, {self.y})")

    @classmethod
    def of(cls, obj):
        """Acepta un Point o cualquier secuencia (x, y), incluido un np.array."""
        if obj is None:
            raise InvalidArgumentError("el punto no puede ser None")
        if isinstance(obj, Point):
            return obj
        try:
            x, y = obj
            x, y = float(x), float(y)
        except (TypeError, ValueError) as e:
            raise InvalidArgumentError(f"no es un punto 2D: {obj!r}") from e
        return cls(x, y)

    def distance_squared_to(self, other: "Point") -> float:
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy

    def distance_to(self, other: "Point") -> float:
        return math.sqrt(self.distance_squared_to(other))

    def __iter__(self):
        yield self.x
        yield self.y

    def __repr__(self):
        return f"({self.x}, {self.y})"
