from trees.KD_tree import KdTreeST
from trees.kd_plot import draw_tree
from Nodes.Point import Point
from Nodes.Rectangle import Rectangle

tree = KdTreeST()

a = Point(0, 0)
b = Point(1, 1)
c = Point(2, 1)

tree.put(a, 1)
tree.put(b, 2)
tree.put(c, 3)

print("vacío:", tree.is_empty())     # False
print("tamaño:", tree.size())        # 3
print("get a:", tree.get(a))         # 1
print("get b:", tree.get(b))         # 2

tree.put(b, 4)
print("tamaño:", tree.size())        # 3
print("get b:", tree.get(b))         # 4

print("contiene (2, 2):", tree.contains(Point(2, 2)))  # False

print("puntos:", tree.points())      # a, b y c

print("range:", tree.range(Rectangle(-1, -1, 1, 1)))   # a y b

print("nearest a:", tree.nearest(a))                   # a
print("nearest (-1, 1):", tree.nearest(Point(-1, 1)))  # a

if __name__ == "__main__":
    import matplotlib.pyplot as plt
    draw_tree(tree)
    plt.show()
