# examples/demo_quickhull.py
from cg2d.quickhull import quickhull

if __name__ == "__main__":
    # сітка 3x3: лишаються тільки кути
    grid = [(x, y) for x in (-1, 0, 1) for y in (-1, 0, 1)]
    print("grid hull:", quickhull(grid))

    # майже колінеарна трійка з допуском
    print("sliver:", quickhull([(0, 0), (1, 1e-9), (2, 0)], tolerance=1e-6))
    print("two points:", quickhull([(0, 0), (1, 1)]))
