import numpy as np
import pytest

from hexmatch.scene import GameObject, Renderer


class FakeDrawable:
    def __init__(self, size=(10, 20), log=None, name=None):
        self.size = size
        self.calls = []
        self.log = log
        self.name = name

    def draw(self, data):
        self.calls.append(data)
        if self.log is not None:
            self.log.append(self.name)


def test_invisible_object_is_not_drawn():
    drawable = FakeDrawable()
    obj = GameObject(drawable, visible=False)
    assert obj.draw() is None
    assert drawable.calls == []


def test_object_without_drawable_draws_nothing():
    assert GameObject().draw() is None


def test_draw_passes_model_scaled_to_drawable_size():
    drawable = FakeDrawable(size=(10, 20))
    obj = GameObject(drawable, z_index=3)
    obj.draw()
    data = drawable.calls[0]
    point = data.model @ np.array([0.5, 0.5, 0, 1.0])
    assert point == pytest.approx([5, 10, 3, 1])


def test_pivot_shifts_draw_origin():
    drawable = FakeDrawable(size=(10, 20))
    obj = GameObject(drawable, pivot=(5, 4))
    data = obj.draw()
    origin = data.model @ np.array([0, 0, 0, 1.0])
    assert origin[:2] == pytest.approx([-5, -4])


def test_game_object_child_management():
    parent, child = GameObject(), GameObject()
    parent.add_child(child)
    assert parent.children == [child]
    parent.remove_child(child)
    assert parent.children == []


def test_render_order_sorts_tree_by_z_index():
    low, mid, high = GameObject(z_index=1), GameObject(z_index=5), GameObject(z_index=9)
    high.add_child(low)
    renderer = Renderer([high, mid])
    assert renderer.render_order() == [low, mid, high]


def test_update_draws_in_z_order():
    log = []
    back = GameObject(FakeDrawable(log=log, name="back"), z_index=-1)
    front = GameObject(FakeDrawable(log=log, name="front"), z_index=10)
    renderer = Renderer()
    renderer.add_children([front, back])
    renderer.update()
    assert log == ["back", "front"]


def test_renderer_remove_child_drops_every_copy():
    obj, other = GameObject(), GameObject()
    renderer = Renderer([obj, other, obj])
    renderer.remove_child(obj)
    assert renderer.children == [other]