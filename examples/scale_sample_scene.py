"""Example: dilate the sample scene about a point and compare reports."""

from frameshapes import default_scene, format_scene, scale_about_point


def main() -> None:
    scene = default_scene()
    print(format_scene(scene))

    scale_about_point(scene, 2.0, (-2.5, 0.0))
    print("After scaling by 2 about (-2.5; 0):\n")
    print(format_scene(scene))


if __name__ == "__main__":
    main()
