"""Example: copying versus transferring a polygon's vertices."""

from frameshapes import EmptyPolygonError, Polygon


def main() -> None:
    original = Polygon([(0, 0), (4, 0), (4, 3), (0, 3)])

    duplicate = original.copy()
    duplicate.scale(2)
    print("original area:", original.area())
    print("scaled copy area:", duplicate.area())

    moved = original.transfer()
    print("moved area:", moved.area(), "centroid:", moved.centroid)
    print("source empty:", original.is_empty)
    try:
        original.area()
    except EmptyPolygonError as exc:
        print("source unusable:", exc)

    original.assign(moved)
    print("reassigned source area:", original.area())


if __name__ == "__main__":
    main()
