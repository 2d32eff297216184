import matplotlib.pyplot as plt

from Nodes.KD_node import Orientation
from Nodes.Rectangle import Rectangle

DEFAULT_PADDING = 1.0


def _viewport(tree, padding):
    pts = tree.points()
    if not pts:
        return Rectangle(0.0, 0.0, 1.0, 1.0)
    xs = [p.x for p in pts]
    ys = [p.y for p in pts]
    return Rectangle(min(xs) - padding, min(ys) - padding,
                     max(xs) + padding, max(ys) + padding)


def _clamp(v, lo, hi):
    return max(lo, min(v, hi))


def draw_tree(tree, ax=None, bounds=None, padding=DEFAULT_PADDING):
    """Dibuja los puntos y las rectas de corte de cada nodo.

    Los cortes verticales van en rojo y los horizontales en azul; cada
    segmento se recorta a la región del nodo y a `bounds` (si no se indica,
    la caja de los puntos con `padding`). Devuelve el Axes.
    """
    if ax is None:
        _, ax = plt.subplots(figsize=(6, 6))
    view = Rectangle.of(bounds) if bounds is not None else _viewport(tree, padding)

    stack = [tree.root]
    while stack:
        node = stack.pop()
        if node is None:
            continue
        r = node.region
        if node.orientation is Orientation.VERTICAL:
            y0 = _clamp(r.ymin, view.ymin, view.ymax)
            y1 = _clamp(r.ymax, view.ymin, view.ymax)
            ax.plot([node.point.x, node.point.x], [y0, y1], color="red", linewidth=1)
        else:
            x0 = _clamp(r.xmin, view.xmin, view.xmax)
            x1 = _clamp(r.xmax, view.xmin, view.xmax)
            ax.plot([x0, x1], [node.point.y, node.point.y], color="blue", linewidth=1)
        stack.append(node.left)
        stack.append(node.right)

    pts = tree.points()
    if pts:
        ax.scatter([p.x for p in pts], [p.y for p in pts], s=12, color="black", zorder=3)

    ax.set_xlim(view.xmin, view.xmax)
    ax.set_ylim(view.ymin, view.ymax)
    ax.set_aspect("equal", adjustable="box")
    ax.set_title(f"2d-tree ({tree.size()} puntos)")
    return ax
