import pytest

from gorobot.managers import ComponentManager, ComponentObject, RenderManager, RenderObject


class RecordingComponent(ComponentObject):
    def __init__(self, name, log):
        super().__init__()
        self.name = name
        self.log = log

    def update(self, delta_time):
        self.log.append((self.name, delta_time))


class RecordingRenderer(RenderObject):
    def __init__(self, name, log):
        self.name = name
        self.log = log

    def render(self, surface):
        self.log.append((self.name, surface))


@pytest.fixture
def log():
    return []


def test_component_add_is_idempotent(log):
    manager = ComponentManager()
    component = RecordingComponent("a", log)
    manager.add(component)
    manager.add(component)
    assert len(manager) == 1
    assert list(manager) == [component]


def test_component_update_in_insertion_order(log):
    manager = ComponentManager()
    first = RecordingComponent("first", log)
    second = RecordingComponent("second", log)
    manager.add(first)
    manager.add(second)
    assert list(manager) == [first, second]
    manager.update(0.25)
    assert log == [("first", 0.25), ("second", 0.25)]
    assert list(manager) == [first, second]


def test_component_remove(log):
    manager = ComponentManager()
    first = RecordingComponent("first", log)
    second = RecordingComponent("second", log)
    manager.add(first)
    manager.add(second)
    manager.remove(first)
    assert list(manager) == [second]
    manager.update(1.0)
    assert log == [("second", 1.0)]


def test_component_remove_absent_leaves_list(log):
    manager = ComponentManager()
    kept = RecordingComponent("kept", log)
    manager.add(kept)
    manager.remove(RecordingComponent("other", log))
    assert list(manager) == [kept]


def test_equal_but_distinct_objects_are_both_kept():
    manager = ComponentManager()
    manager.add(ComponentObject())
    manager.add(ComponentObject())
    assert len(manager) == 2


def test_base_component_move_defaults():
    component = ComponentObject()
    component.next_x_move = 4.0
    assert (component.next_x_move, component.next_y_move) == (4.0, 0.0)


def test_render_update_passes_surface(log):
    manager = RenderManager()
    surface = object()
    one = RecordingRenderer("one", log)
    two = RecordingRenderer("two", log)
    manager.add(one)
    manager.add(two)
    manager.add(one)
    assert list(manager) == [one, two]
    manager.update(surface)
    assert log == [("one", surface), ("two", surface)]


def test_render_remove(log):
    manager = RenderManager()
    renderer = RecordingRenderer("r", log)
    manager.add(renderer)
    manager.remove(renderer)
    assert len(manager) == 0
    manager.update(None)
    assert log == []