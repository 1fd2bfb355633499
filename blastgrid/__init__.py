"""Grid, collision, entity, bomb, enemy AI, camera and input logic for a bomb-laying arcade game."""

__version__ = "0.1.0"