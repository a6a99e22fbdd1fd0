import pytest

from map_sites import (
    BombedWall,
    Door,
    DoorNeedingSpell,
    EnchantedRoom,
    Room,
    RoomWithABomb,
    Wall,
)
from maze import Maze
from maze_factory import (
    KIT_REGISTRY,
    BombedMazeKit,
    EnchantedMazeKit,
    MazeFactory,
    kit_for_name,
)


def test_standard_kit_makes_base_products(standard_kit):
    room1, room2 = standard_kit.make_room(1), standard_kit.make_room(2)

    assert type(standard_kit.make_maze()) is Maze
    assert type(standard_kit.make_wall()) is Wall
    assert type(room1) is Room
    assert type(standard_kit.make_door(room1, room2)) is Door


def test_bombed_kit_overrides_wall_and_room_only(bombed_kit):
    room1, room2 = bombed_kit.make_room(1), bombed_kit.make_room(2)
    wall = bombed_kit.make_wall()

    assert isinstance(wall, BombedWall) and not wall.bombed
    assert isinstance(room1, RoomWithABomb) and not room1.bomb
    assert type(bombed_kit.make_door(room1, room2)) is Door
    assert type(bombed_kit.make_maze()) is Maze


def test_enchanted_kit_overrides_room_and_door_only(enchanted_kit):
    room1, room2 = enchanted_kit.make_room(1), enchanted_kit.make_room(2)

    assert isinstance(room1, EnchantedRoom)
    assert room1.spell is not None
    assert room1.spell is not room2.spell
    assert isinstance(enchanted_kit.make_door(room1, room2), DoorNeedingSpell)
    assert type(enchanted_kit.make_wall()) is Wall
    assert type(enchanted_kit.make_maze()) is Maze


@pytest.mark.parametrize("kit_cls", [BombedMazeKit, EnchantedMazeKit])
def test_specialized_kits_override_a_strict_subset(kit_cls):
    operations = ("make_maze", "make_wall", "make_room", "make_door")
    overridden = [name for name in operations if getattr(kit_cls, name) is not getattr(MazeFactory, name)]

    assert len(overridden) == 2


def test_kit_products_are_fresh(any_kit):
    assert any_kit.make_wall() is not any_kit.make_wall()
    assert any_kit.make_maze() is not any_kit.make_maze()


def test_kit_for_name_resolves_registry():
    assert set(KIT_REGISTRY) == {"standard", "bombed", "enchanted"}
    assert isinstance(kit_for_name("bombed"), BombedMazeKit)
    assert type(kit_for_name("standard")) is MazeFactory

    with pytest.raises(ValueError) as excinfo:
        kit_for_name("haunted")

    assert "enchanted" in str(excinfo.value)
