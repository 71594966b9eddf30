import pytest

from structural_patterns.shapes import (
    Circle,
    CompositeShape,
    Rectangle,
    Shape,
    Triangle,
    main,
)

HEADER = "Drawing a composite shape:"


def _lines(capsys):
    return capsys.readouterr().out.splitlines()


def test_circle_draw(capsys):
    Circle(5).draw()
    assert _lines(capsys) == ["Drawing a circle with radius 5"]


def test_rectangle_draw(capsys):
    Rectangle(10, 20).draw()
    assert _lines(capsys) == ["Drawing a rectangle with width 10 and height 20"]


def test_triangle_draw(capsys):
    Triangle(3, 4, 5).draw()
    assert _lines(capsys) == ["Drawing a triangle with sides 3, 4, and 5"]


def test_shape_is_abstract():
    with pytest.raises(TypeError):
        Shape()


def test_composite_draws_members_in_order(capsys):
    circle, rect = Circle(1), Rectangle(2, 3)
    composite = CompositeShape()
    composite.add_shape(circle)
    composite.add_shape(rect)
    composite.draw()
    lines = _lines(capsys)

    circle.draw()
    rect.draw()
    expected = [HEADER] + _lines(capsys)
    assert lines == expected


def test_remove_shape(capsys):
    circle, rect, tri = Circle(5), Rectangle(10, 20), Triangle(3, 4, 5)
    composite = CompositeShape()
    for shape in (circle, rect, tri):
        composite.add_shape(shape)
    composite.remove_shape(rect)
    assert len(composite) == 2
    composite.draw()
    lines = _lines(capsys)
    circle.draw()
    tri.draw()
    assert lines == [HEADER] + _lines(capsys)


def test_remove_absent_shape_is_noop():
    composite = CompositeShape()
    composite.add_shape(Circle(1))
    composite.remove_shape(Circle(1))
    assert len(composite) == 1


def test_remove_only_first_occurrence():
    circle = Circle(2)
    composite = CompositeShape()
    composite.add_shape(circle)
    composite.add_shape(circle)
    composite.remove_shape(circle)
    assert len(composite) == 1


def test_nested_composite(capsys):
    inner = CompositeShape()
    inner.add_shape(Circle(1))
    outer = CompositeShape()
    outer.add_shape(inner)
    outer.draw()
    lines = _lines(capsys)
    assert lines[:2] == [HEADER, HEADER]
    assert len(lines) == 3


def test_empty_composite_prints_header_only(capsys):
    CompositeShape().draw()
    assert _lines(capsys) == [HEADER]


def test_main(capsys):
    assert main([]) == 0
    lines = _lines(capsys)
    assert lines.count(HEADER) == 2
    assert lines.count("Drawing a rectangle with width 10 and height 20") == 1
    assert len(lines) == 7