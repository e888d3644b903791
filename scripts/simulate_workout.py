"""Walk through today's morning routine without a database.

Seeds in-memory stores, runs a guided workout on an asyncio loop with a
fast tick, and prints the resulting summary and adherence statistics.

Usage:
    python scripts/simulate_workout.py [--tick 0.05]
"""

import argparse
import asyncio
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from lumbar.catalog import seed_catalog
from lumbar.core.logger import setup_logger
from lumbar.db.repositories import (
    InMemoryExerciseRepository,
    InMemoryRoutineRepository,
    InMemorySessionLogRepository,
    InMemorySettingsRepository,
)
from lumbar.schemas.routine import RoutineKind
from lumbar.services import RoutineService, SessionService
from lumbar.workout import GuidedWorkout


async def run(tick: float) -> None:
    exercises = InMemoryExerciseRepository()
    routines = InMemoryRoutineRepository()
    seed_catalog(exercises, routines)

    routine_service = RoutineService(routines, exercises, InMemorySettingsRepository())
    session_service = SessionService(InMemorySessionLogRepository(), routine_service)

    morning = routine_service.get_by_kind(RoutineKind.MORNING)
    workout = GuidedWorkout.begin(session_service, morning.id, asyncio.get_running_loop(), tick_seconds=tick)

    print(f"{morning.name}: {len(workout.exercises)} exercises, "
          f"~{routine_service.routine_duration_minutes(morning.id)} min")
    print("-" * 60)

    summary = None
    while summary is None:
        exercise = workout.current_exercise
        if exercise.is_timed:
            # Let the timer run for the prescribed hold
            await asyncio.sleep(exercise.duration_seconds * tick + tick / 2)
            label = f"held {workout.elapsed_seconds}s"
        else:
            label = f"{exercise.reps} reps"
        print(f"[{workout.progress_percent:3d}%] {exercise.name:<28} {label}")
        summary = workout.complete_current(actual_reps=exercise.reps)

    workout.close()
    stats = session_service.statistics()
    print("-" * 60)
    print(f"Completed {summary.exercises_completed}/{summary.exercise_count} exercises "
          f"in {summary.duration_minutes} min")
    print(f"Streak: {stats.current_streak} (longest {stats.longest_streak}), "
          f"completion rate {stats.completion_rate}%")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--tick", type=float, default=0.05, help="Seconds per simulated timer second")
    args = parser.parse_args()

    setup_logger(level="WARNING")
    asyncio.run(run(args.tick))
