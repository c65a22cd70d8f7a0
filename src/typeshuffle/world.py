import random

from esper import World


def create_world(rng: random.Random | None = None) -> World:
    """Create the ECS world shared by text blocks and their collaborators.

    The random source is stored on the world so every system that draws random
    values (cell delays, glyphs, stagger order) can be made deterministic in tests.
    """
    world = World()
    setattr(world, "random", rng or random.Random())
    return world
