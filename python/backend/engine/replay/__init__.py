from backend.engine.replay.replay import SolveReplay
from backend.engine.replay.scheduler import FrameScheduler, Scheduler, TimerHandle

__all__ = ["FrameScheduler", "Scheduler", "SolveReplay", "TimerHandle"]
