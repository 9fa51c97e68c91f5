from hunter.behaviors.core import Behavior, BehaviorRegistry
from hunter.behaviors.species import (
    BirdBehavior,
    GroundWalkerBehavior,
    PigBehavior,
    RabbitBehavior,
    SquirrelBehavior,
    at_platform_edge,
)

# Register the built-in species
BehaviorRegistry.register("rabbit", RabbitBehavior())
BehaviorRegistry.register("bird", BirdBehavior())
BehaviorRegistry.register("squirrel", SquirrelBehavior())
BehaviorRegistry.register("pig", PigBehavior())

__all__ = [
    "Behavior",
    "BehaviorRegistry",
    "GroundWalkerBehavior",
    "RabbitBehavior",
    "PigBehavior",
    "BirdBehavior",
    "SquirrelBehavior",
    "at_platform_edge",
]
