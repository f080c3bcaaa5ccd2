from .logic import advance, advance_scene
from .scheduler import FrameScheduler, SchedulerState
from .state import Entity, Free, Parked, Scene, Seeking, Target, make_entity

__all__ = [
    "Entity",
    "Free",
    "FrameScheduler",
    "Parked",
    "Scene",
    "SchedulerState",
    "Seeking",
    "Target",
    "advance",
    "advance_scene",
    "make_entity",
]
