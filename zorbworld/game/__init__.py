"""Game state, entity-component system, systems, spawnables and the game's entry points."""