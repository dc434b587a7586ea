"""A small top-down world simulation with a camera, animations, sprite maps and an entity-component system."""

__version__ = "0.1.0"