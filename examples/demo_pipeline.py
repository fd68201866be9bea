# examples/demo_pipeline.py
from cg2d.pipeline import triangulate_points

if __name__ == "__main__":
    square = [
        (0, 0), (4, 0), (4, 4), (0, 4),
        (1, 1), (3, 1.5), (2, 3), (1, 1),   # дублікат прибере пайплайн
    ]

    pts, hull, tris = triangulate_points(square, backend="internal")  # або "scipy"
    print("Vertices:", len(pts))
    print("Hull:", hull)
    print("Triangles:", len(tris))
