import pytest

from kokiri.component import Component, ComponentType
from kokiri.entity import Entity, EntityProperties
from kokiri.vector import Vector2


class FakeSprite(Component):
    def __init__(self):
        super().__init__(ComponentType.SPRITE)
        self.calls = []

    def render(self, x=None, y=None):
        self.calls.append((x, y))


class FakeTrack(Component):
    def __init__(self):
        super().__init__(ComponentType.SOUNDTRACK)
        self.played = 0

    def play(self, times=-1):
        self.played += 1


def make_entity(name="player", size=(0, 0), position=(0, 0)):
    return Entity(EntityProperties(name, Vector2(*size), Vector2(*position)))


def test_properties_default_to_zero_vectors():
    props = EntityProperties("world")
    assert props.size == Vector2(0, 0)
    assert props.position == Vector2(0, 0)


def test_entity_takes_name_size_and_position():
    entity = make_entity("world", size=(1024, 600), position=(3, 4))
    assert entity.name == "world"
    assert entity.size == Vector2(1024, 600)
    assert entity.position == Vector2(3, 4)


def test_uuid_is_unique_and_shaped():
    a = make_entity()
    b = make_entity()
    assert a.uuid != b.uuid
    assert [len(p) for p in a.uuid.split("-")] == [8, 4, 4, 4, 12]


def test_set_position_with_coordinates_and_vector():
    entity = make_entity()
    entity.set_position(10, 20)
    assert entity.position == Vector2(10, 20)
    entity.set_position(Vector2(7, 9))
    assert entity.position == Vector2(7, 9)


def test_set_position_requires_y_for_scalars():
    with pytest.raises(TypeError):
        make_entity().set_position(5)


def test_add_and_remove_components():
    entity = make_entity()
    sprite = FakeSprite()
    track = FakeTrack()
    entity.add_component(sprite)
    entity.add_component(track)
    entity.add_component(sprite)
    assert entity.components == (sprite, track, sprite)
    entity.remove_component(sprite)
    assert entity.components == (track,)
    entity.remove_component(FakeSprite())
    assert entity.components == (track,)


def test_render_draws_sprites_at_position():
    entity = make_entity(position=(5, 6))
    sprite = FakeSprite()
    entity.add_component(sprite)
    entity.add_component(FakeTrack())
    entity.render()
    entity.set_position(8, 9)
    entity.render()
    assert sprite.calls == [(5, 6), (8, 9)]


def test_play_uses_first_soundtrack_only():
    entity = make_entity()
    first, second = FakeTrack(), FakeTrack()
    entity.add_component(FakeSprite())
    entity.add_component(first)
    entity.add_component(second)
    entity.play("")
    assert (first.played, second.played) == (1, 0)


def test_play_without_soundtrack_does_nothing():
    entity = make_entity()
    sprite = FakeSprite()
    entity.add_component(sprite)
    entity.play("")
    assert sprite.calls == []


def test_position_is_a_copy():
    entity = make_entity(position=(1, 2))
    entity.position.x = 100
    assert entity.position == Vector2(1, 2)