"""
Built-in exercise catalog.

Twenty low-load exercises for lower-back care, split into two disjoint
default routines:

* **Morning**: nerve gliding, core stability and safe strengthening.
* **Evening**: decompression, flexibility and gentle strengthening.

Rep-based entries set ``reps``; timed holds set ``duration_seconds``.
"""

from __future__ import annotations

from lumbar.schemas.exercise import (
    Difficulty,
    ExerciseCategory,
    ExerciseDefinition,
    ExerciseModifications,
    MeasurementMode,
)
from lumbar.schemas.routine import RoutineKind

# ======================================================================
# Helpers
# ======================================================================

STR = ExerciseCategory.STRETCHING
STG = ExerciseCategory.STRENGTHENING
FLX = ExerciseCategory.FLEXIBILITY
POS = ExerciseCategory.POSTURE
MOB = ExerciseCategory.MOBILITY
COR = ExerciseCategory.CORE
UPB = ExerciseCategory.UPPER_BODY
LWB = ExerciseCategory.LOWER_BODY

INT = Difficulty.INTERMEDIATE


def _reps(exercise_id: str, name: str, category: ExerciseCategory, reps: int, **kwargs) -> ExerciseDefinition:
    return ExerciseDefinition(exercise_id=exercise_id, name=name, category=category, mode=MeasurementMode.REPS,
                              reps=reps, **kwargs)


def _hold(exercise_id: str, name: str, category: ExerciseCategory, seconds: int, **kwargs) -> ExerciseDefinition:
    return ExerciseDefinition(exercise_id=exercise_id, name=name, category=category,
                              mode=MeasurementMode.DURATION, duration_seconds=seconds, **kwargs)


def _mods(easier: str, harder: str) -> ExerciseModifications:
    return ExerciseModifications(easier=easier, harder=harder)


# ======================================================================
# Morning exercises
# ======================================================================

_MORNING: list[ExerciseDefinition] = [
    _reps(
        "cat_cow", "Cat-Cow", MOB, 10, sets=2, rest_between_sets=15,
        description="Alternate between arching and rounding the spine on hands and knees.",
        target_muscles=("erector_spinae", "abdominals"),
        instructions=("Start on hands and knees, wrists under shoulders.",
                      "Inhale, drop the belly and lift the chest.",
                      "Exhale, round the back towards the ceiling."),
        form_cues=("Move one vertebra at a time.", "Keep the movement pain-free."),
        contraindications=("Acute disc herniation flare-up",),
        modifications=_mods("Reduce the range of motion.", "Pause three seconds at each end."),
    ),
    _reps(
        "bird_dog", "Bird Dog", COR, 8, sets=2, rest_between_sets=20,
        description="Extend opposite arm and leg while keeping the trunk still.",
        target_muscles=("multifidus", "glutes", "transverse_abdominis"),
        instructions=("Start on hands and knees.",
                      "Extend the right arm and left leg until level with the trunk.",
                      "Return and switch sides."),
        form_cues=("Keep hips square to the floor.", "Do not arch the lower back."),
        modifications=_mods("Extend the leg only.", "Draw a small square with hand and foot."),
    ),
    _reps(
        "dead_bug", "Dead Bug", COR, 8, sets=2, rest_between_sets=20,
        description="Lower opposite arm and leg from a supine tabletop position.",
        target_muscles=("transverse_abdominis", "rectus_abdominis"),
        instructions=("Lie on your back, arms to the ceiling, knees over hips.",
                      "Lower the right arm and left leg towards the floor.",
                      "Return and alternate."),
        form_cues=("Keep the lower back pressed into the floor.", "Exhale as you lower."),
        modifications=_mods("Move the legs only, heels tapping the floor.", "Hold a light weight overhead."),
    ),
    _reps(
        "wall_push_up", "Wall Push-ups", UPB, 10, sets=2, rest_between_sets=20, equipment="wall",
        description="Push-up performed standing against a wall.",
        target_muscles=("pectorals", "triceps", "anterior_deltoids"),
        instructions=("Stand arm's length from a wall, hands at shoulder height.",
                      "Bend the elbows to bring the chest towards the wall.",
                      "Push back to the start."),
        form_cues=("Body stays in one straight line.",),
        modifications=_mods("Step closer to the wall.", "Step further from the wall."),
    ),
    _hold(
        "plank", "Plank", COR, 20, sets=2, rest_between_sets=30, difficulty=INT,
        description="Hold a straight-body position on forearms and toes.",
        target_muscles=("rectus_abdominis", "transverse_abdominis", "glutes"),
        instructions=("Rest on forearms, elbows under shoulders.",
                      "Lift the hips until the body forms a straight line.",
                      "Hold while breathing steadily."),
        form_cues=("Squeeze the glutes.", "Do not let the hips sag."),
        contraindications=("Shoulder pain on weight bearing",),
        modifications=_mods("Hold from the knees.", "Lift one foot off the floor."),
    ),
    _hold(
        "side_plank", "Side Plank", COR, 15, sets=2, rest_between_sets=20, difficulty=INT,
        description="Hold the body sideways on one forearm.",
        target_muscles=("obliques", "quadratus_lumborum", "gluteus_medius"),
        instructions=("Lie on one side, elbow under the shoulder.",
                      "Lift the hips to form a straight line.",
                      "Hold, then switch sides."),
        form_cues=("Stack the hips.", "Keep the neck neutral."),
        modifications=_mods("Bend the knees and hold from them.", "Raise the top leg."),
    ),
    _reps(
        "scapular_wall_slide", "Scapular Wall Slides", POS, 10, sets=2, rest_between_sets=15, equipment="wall",
        description="Slide the arms up and down a wall keeping contact.",
        target_muscles=("lower_trapezius", "serratus_anterior"),
        instructions=("Stand with back and arms against the wall, elbows bent.",
                      "Slide the arms overhead keeping contact.",
                      "Slide back down slowly."),
        form_cues=("Keep the ribs down.",),
        modifications=_mods("Reduce the overhead range.", "Step away from the wall and hover."),
    ),
    _reps(
        "glute_bridge", "Glute Bridges", LWB, 12, sets=2, rest_between_sets=20,
        description="Lift the hips from a supine bent-knee position.",
        target_muscles=("glutes", "hamstrings"),
        instructions=("Lie on your back, knees bent, feet flat.",
                      "Drive through the heels to lift the hips.",
                      "Lower slowly."),
        form_cues=("Do not over-arch at the top.",),
        modifications=_mods("Reduce the lift height.", "Perform on one leg."),
    ),
    _hold(
        "chest_stretch", "Chest Stretch", STR, 30, equipment="doorway",
        description="Open the chest against a doorway.",
        target_muscles=("pectorals", "anterior_deltoids"),
        instructions=("Place forearms on either side of a doorway.",
                      "Step forward until a stretch is felt across the chest."),
        form_cues=("Keep the shoulders down.",),
        modifications=_mods("Use a smaller step.", "Raise the elbows slightly."),
    ),
    _hold(
        "childs_pose", "Child's Pose", STR, 30,
        description="Kneeling rest stretch with arms extended forward.",
        target_muscles=("latissimus_dorsi", "erector_spinae"),
        instructions=("Kneel and sit back on the heels.",
                      "Walk the hands forward and rest the forehead down."),
        form_cues=("Breathe into the lower back.",),
        contraindications=("Knee pain when fully flexed",),
        modifications=_mods("Place a pillow between heels and hips.", "Walk the hands to each side."),
    ),
]

# ======================================================================
# Evening exercises
# ======================================================================

_EVENING: list[ExerciseDefinition] = [
    _reps(
        "pelvic_tilt", "Pelvic Tilts", MOB, 12, sets=2, rest_between_sets=15,
        description="Rock the pelvis to flatten and release the lower back.",
        target_muscles=("abdominals", "erector_spinae"),
        instructions=("Lie on your back, knees bent.",
                      "Tighten the abdominals to press the lower back down.",
                      "Release."),
        form_cues=("Small, controlled motion.",),
        modifications=_mods("Perform standing against a wall.", "Hold each tilt five seconds."),
    ),
    _reps(
        "superman", "Superman", STG, 8, sets=2, rest_between_sets=20, difficulty=INT,
        description="Lift arms and legs from a prone position.",
        target_muscles=("erector_spinae", "glutes"),
        instructions=("Lie face down, arms overhead.",
                      "Lift arms, chest and legs slightly off the floor.",
                      "Lower with control."),
        form_cues=("Look at the floor.", "Lift only a few centimetres."),
        contraindications=("Spondylolisthesis",),
        modifications=_mods("Lift arms only.", "Hold three seconds at the top."),
    ),
    _reps(
        "push_up", "Push-ups", UPB, 8, sets=2, rest_between_sets=30, difficulty=INT,
        description="Classic floor push-up.",
        target_muscles=("pectorals", "triceps", "core"),
        instructions=("Hands under shoulders, body straight.",
                      "Lower the chest towards the floor.",
                      "Press back up."),
        form_cues=("Keep the core braced.",),
        modifications=_mods("Perform from the knees.", "Slow three-second lowering."),
    ),
    _reps(
        "shoulder_tap", "Shoulder Taps", COR, 10, sets=2, rest_between_sets=20, difficulty=INT,
        description="Tap opposite shoulders from a high plank.",
        target_muscles=("obliques", "transverse_abdominis", "deltoids"),
        instructions=("Start in a high plank.",
                      "Lift one hand to tap the opposite shoulder.",
                      "Alternate sides."),
        form_cues=("Hips stay still.",),
        modifications=_mods("Widen the feet.", "Bring the feet together."),
    ),
    _reps(
        "quadruped_hip_extension", "Quadruped Hip Extension", LWB, 10, sets=2, rest_between_sets=15,
        description="Extend one leg backwards from hands and knees.",
        target_muscles=("glutes", "hamstrings"),
        instructions=("Start on hands and knees.",
                      "Extend one leg back until level with the trunk.",
                      "Lower and repeat, then switch."),
        form_cues=("Do not rotate the pelvis.",),
        modifications=_mods("Keep the knee bent.", "Add an ankle weight."),
    ),
    _hold(
        "knee_plank", "Knee Plank", COR, 20, sets=2, rest_between_sets=20,
        description="Plank held from the knees.",
        target_muscles=("transverse_abdominis", "rectus_abdominis"),
        instructions=("Rest on forearms and knees.",
                      "Align shoulders, hips and knees.",
                      "Hold."),
        form_cues=("Keep the lower back flat.",),
        modifications=_mods("Shorten the hold.", "Progress to a full plank."),
    ),
    _reps(
        "wall_angel", "Wall Angels", POS, 10, sets=2, rest_between_sets=15, equipment="wall",
        description="Move the arms in a snow-angel pattern against a wall.",
        target_muscles=("rhomboids", "lower_trapezius"),
        instructions=("Stand with the back flat against a wall.",
                      "Raise and lower the arms keeping wrists and elbows on the wall."),
        form_cues=("Keep the chin tucked.",),
        modifications=_mods("Reduce the range.", "Hold at the top for two seconds."),
    ),
    _reps(
        "prone_ytw", "Prone Y-T-W", POS, 6, sets=2, rest_between_sets=20, difficulty=INT,
        description="Trace Y, T and W shapes with the arms lying face down.",
        target_muscles=("lower_trapezius", "rhomboids", "rear_deltoids"),
        instructions=("Lie face down, forehead on a towel.",
                      "Lift the arms into a Y, then a T, then a W."),
        form_cues=("Squeeze the shoulder blades.",),
        modifications=_mods("Perform one letter per set.", "Hold each letter three seconds."),
    ),
    _hold(
        "hip_flexor_stretch", "Hip Flexor Stretch", FLX, 30, sets=2, rest_between_sets=10,
        description="Half-kneeling lunge stretch for the front of the hip.",
        target_muscles=("iliopsoas", "rectus_femoris"),
        instructions=("Kneel on one knee, other foot in front.",
                      "Shift the hips forward until a stretch is felt.",
                      "Hold, then switch sides."),
        form_cues=("Tuck the pelvis under.",),
        contraindications=("Knee pain when kneeling",),
        modifications=_mods("Put a cushion under the knee.", "Raise the arm on the stretching side."),
    ),
    _hold(
        "cobra", "Cobra", FLX, 20,
        description="Gentle prone press-up into spinal extension.",
        target_muscles=("erector_spinae", "abdominals"),
        instructions=("Lie face down, hands under the shoulders.",
                      "Press the chest up, keeping the hips down.",
                      "Hold, then lower."),
        form_cues=("Stop before any pain.", "Relax the glutes."),
        contraindications=("Spinal stenosis",),
        modifications=_mods("Rest on the forearms (sphinx).", "Straighten the arms further."),
    ),
]

BUILTIN_EXERCISES: list[ExerciseDefinition] = _MORNING + _EVENING

# (name, kind, ordered exercise ids)
DEFAULT_ROUTINES: list[tuple[str, RoutineKind, tuple[str, ...]]] = [
    ("Morning Routine", RoutineKind.MORNING, tuple(e.exercise_id for e in _MORNING)),
    ("Evening Routine", RoutineKind.EVENING, tuple(e.exercise_id for e in _EVENING)),
]
