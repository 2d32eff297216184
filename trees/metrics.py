import time
import tracemalloc
import gc

import numpy as np

from .KD_tree import KdTreeST
from Nodes.Point import Point
from Nodes.Rectangle import Rectangle


def _get_kdtree_depth_stats(root):
    # devuelve (height, num_leaves, avg_leaf_depth)
    depths = []
    stack = [(root, 1)] if root is not None else []
    while stack:
        node, depth = stack.pop()
        if node.left is None and node.right is None:
            depths.append(depth)
            continue
        for child in (node.left, node.right):
            if child is not None:
                stack.append((child, depth + 1))
    if not depths:
        return 0, 0, 0.0
    return max(depths), len(depths), sum(depths) / len(depths)


def _brute_force_nearest(coords, q):
    d2 = ((coords - q) ** 2).sum(axis=1)
    return coords[int(np.argmin(d2))]


def benchmark_kdtree(sizes, queries=100, query_size=0.1, seed=None):
    """Inserta puntos aleatorios en [0,1)^2 y mide construcción y consultas.

    Retorna dict con listas: sizes, build_times, mem_peaks, heights,
    avg_leaf_depths, range_times, nearest_times, brute_nearest_times.
    Los tiempos de consulta son el total de `queries` consultas.
    """
    rng = np.random.default_rng(seed)
    sizes = list(sizes)
    build_times = []
    mem_peaks = []
    heights = []
    avg_leaf_depths = []
    range_times = []
    nearest_times = []
    brute_times = []

    for n in sizes:
        coords = rng.random((n, 2))

        gc.collect()
        tracemalloc.start()
        start = time.perf_counter()

        tree = KdTreeST()
        for i, (x, y) in enumerate(coords):
            tree.put(Point(float(x), float(y)), i)

        elapsed = time.perf_counter() - start
        current, peak = tracemalloc.get_traced_memory()
        tracemalloc.stop()

        height, _, avg_depth = _get_kdtree_depth_stats(tree.root)

        corners = rng.random((queries, 2)) * (1.0 - query_size)
        start = time.perf_counter()
        for x, y in corners:
            tree.range(Rectangle(float(x), float(y), float(x) + query_size, float(y) + query_size))
        range_times.append(time.perf_counter() - start)

        targets = rng.random((queries, 2))
        start = time.perf_counter()
        for q in targets:
            tree.nearest(q)
        nearest_times.append(time.perf_counter() - start)

        start = time.perf_counter()
        for q in targets:
            _brute_force_nearest(coords, q)
        brute_times.append(time.perf_counter() - start)

        build_times.append(elapsed)
        mem_peaks.append(peak)
        heights.append(height)
        avg_leaf_depths.append(avg_depth)

    return {
        'sizes': sizes,
        'build_times': build_times,
        'mem_peaks': mem_peaks,
        'heights': heights,
        'avg_leaf_depths': avg_leaf_depths,
        'range_times': range_times,
        'nearest_times': nearest_times,
        'brute_nearest_times': brute_times,
    }


def analyze_kdtree_instance(tree: KdTreeST):
    """Analiza un KdTreeST existente y devuelve métricas de forma similares a benchmark_kdtree."""
    gc.collect()
    tracemalloc.start()
    start = time.perf_counter()

    height, num_leaves, avg_depth = _get_kdtree_depth_stats(tree.root)

    elapsed = time.perf_counter() - start
    current, peak = tracemalloc.get_traced_memory()
    tracemalloc.stop()

    return {
        'sizes': [tree.size()],
        'times': [elapsed],
        'mem_peaks': [peak],
        'heights': [height],
        'num_leaves': [num_leaves],
        'avg_leaf_depths': [avg_depth],
    }
