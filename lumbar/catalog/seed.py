"""First-launch seeding of the catalog and the two default routines."""

from loguru import logger

from lumbar.catalog.seed_data import BUILTIN_EXERCISES, DEFAULT_ROUTINES
from lumbar.db.repositories.interfaces import ExerciseStore, RoutineStore
from lumbar.schemas.routine import Routine


def seed_catalog(exercises: ExerciseStore, routines: RoutineStore) -> bool:
    """Populate an empty catalog.

    Skipped entirely when the exercise store already has entries, so it
    is safe to call on every startup.

    Returns:
        True if seeding happened, False if it was skipped
    """
    if exercises.count() > 0:
        logger.debug("Catalog already seeded")
        return False

    for exercise in BUILTIN_EXERCISES:
        exercises.save(exercise)

    for name, kind, exercise_ids in DEFAULT_ROUTINES:
        routines.save(Routine(name=name, kind=kind, exercise_ids=list(exercise_ids)))

    logger.info(f"Catalog seeded: {len(BUILTIN_EXERCISES)} exercises, {len(DEFAULT_ROUTINES)} routines")
    return True
