import sys
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parent.parent
CODE_DIR = ROOT_DIR / "code"
if str(CODE_DIR) not in sys.path:
    sys.path.insert(0, str(CODE_DIR))

from maze import Maze
from maze_builder import build_maze
from maze_factory import BombedMazeKit, EnchantedMazeKit, MazeFactory

KIT_CLASSES = (MazeFactory, BombedMazeKit, EnchantedMazeKit)


@pytest.fixture
def standard_kit() -> MazeFactory:
    return MazeFactory()


@pytest.fixture
def bombed_kit() -> BombedMazeKit:
    return BombedMazeKit()


@pytest.fixture
def enchanted_kit() -> EnchantedMazeKit:
    return EnchantedMazeKit()


@pytest.fixture(params=KIT_CLASSES, ids=lambda kit_cls: kit_cls.name)
def any_kit(request) -> MazeFactory:
    return request.param()


@pytest.fixture
def standard_maze(standard_kit: MazeFactory) -> Maze:
    return build_maze(standard_kit)


@pytest.fixture
def bombed_maze(bombed_kit: BombedMazeKit) -> Maze:
    return build_maze(bombed_kit)


@pytest.fixture
def enchanted_maze(enchanted_kit: EnchantedMazeKit) -> Maze:
    return build_maze(enchanted_kit)
