"""
Exercise repository.

Handles database operations for the exercise catalog and maps rows to
:class:`~lumbar.schemas.exercise.ExerciseDefinition`.
"""

from typing import Optional

from sqlalchemy import func
from sqlmodel import select

from lumbar.db.repositories.base import SQLRepository
from lumbar.models.exercise import Exercise
from lumbar.schemas.exercise import ExerciseCategory, ExerciseDefinition, ExerciseModifications


class ExerciseRepository(SQLRepository):
    """Repository for Exercise database operations."""

    def get_all(self) -> list[ExerciseDefinition]:
        with self._storage("get_all"):
            rows = self.session.exec(select(Exercise).order_by(Exercise.created_at, Exercise.id)).all()
        return [self._to_domain(row) for row in rows]

    def get_by_id(self, exercise_id: str) -> Optional[ExerciseDefinition]:
        with self._storage("get_by_id"):
            row = self.session.get(Exercise, exercise_id)
        return self._to_domain(row) if row else None

    def get_by_category(self, category: ExerciseCategory) -> list[ExerciseDefinition]:
        statement = (select(Exercise).where(Exercise.category == ExerciseCategory(category).value)
                     .order_by(Exercise.created_at, Exercise.id))
        with self._storage("get_by_category"):
            rows = self.session.exec(statement).all()
        return [self._to_domain(row) for row in rows]

    def count(self) -> int:
        with self._storage("count"):
            return self.session.exec(select(func.count()).select_from(Exercise)).one()

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def save(self, exercise: ExerciseDefinition) -> ExerciseDefinition:
        with self._storage("save"):
            self.session.add(self._to_row(exercise))
            self.session.commit()
        return exercise

    def update(self, exercise: ExerciseDefinition) -> ExerciseDefinition:
        with self._storage("update"):
            row = self.session.get(Exercise, exercise.exercise_id)
            if row is None:
                row = self._to_row(exercise)
            else:
                for key, value in self._columns(exercise).items():
                    setattr(row, key, value)
            self.session.add(row)
            self.session.commit()
        return exercise

    def delete(self, exercise_id: str) -> bool:
        with self._storage("delete"):
            row = self.session.get(Exercise, exercise_id)
            if row:
                self.session.delete(row)
                self.session.commit()
                return True
        return False

    # ------------------------------------------------------------------
    # Mapping
    # ------------------------------------------------------------------

    @staticmethod
    def _columns(exercise: ExerciseDefinition) -> dict:
        data = exercise.model_dump(mode="json")
        return {
            "name": data["name"],
            "description": data["description"],
            "category": data["category"],
            "mode": data["mode"],
            "reps": data["reps"],
            "duration_seconds": data["duration_seconds"],
            "sets": data["sets"],
            "rest_between_sets": data["rest_between_sets"],
            "difficulty": data["difficulty"],
            "equipment": data["equipment"],
            "image_url": data["image_url"],
            "target_muscles": data["target_muscles"],
            "instructions": data["instructions"],
            "form_cues": data["form_cues"],
            "contraindications": data["contraindications"],
            "modifications": data["modifications"],
        }

    @classmethod
    def _to_row(cls, exercise: ExerciseDefinition) -> Exercise:
        return Exercise(id=exercise.exercise_id, **cls._columns(exercise))

    @staticmethod
    def _to_domain(row: Exercise) -> ExerciseDefinition:
        return ExerciseDefinition(exercise_id=row.id, name=row.name, description=row.description,
                                  category=row.category, mode=row.mode, reps=row.reps,
                                  duration_seconds=row.duration_seconds, sets=row.sets,
                                  rest_between_sets=row.rest_between_sets, difficulty=row.difficulty,
                                  equipment=row.equipment, image_url=row.image_url,
                                  target_muscles=tuple(row.target_muscles or ()),
                                  instructions=tuple(row.instructions or ()),
                                  form_cues=tuple(row.form_cues or ()),
                                  contraindications=tuple(row.contraindications or ()),
                                  modifications=ExerciseModifications(**(row.modifications or {})), )
