"""Guided workout driver."""

from lumbar.workout.guided import GuidedWorkout, WorkoutPhase, WorkoutSummary

__all__ = ["GuidedWorkout", "WorkoutPhase", "WorkoutSummary"]
