"""
catalog.py: the static bodyweight exercise library and read-only queries over it.

Entries are frozen pydantic models built once at import time.
"""

from typing import Iterable, Optional

from daily_floor.models import Exercise, MovementType

# ─────────────────────────────────────────────
# Exercise Library
# ─────────────────────────────────────────────

EXERCISES: tuple[Exercise, ...] = (
    # --- Push ---
    Exercise(
        id="push-ups-standard",
        name="Push-Ups",
        movement_type="push",
        muscle_groups=["chest", "shoulders", "triceps", "core"],
        is_primary=True,
        is_support=False,
        base_reps=10,
        goal="Control the descent; drive through your palms.",
        instructions=[
            "Hands slightly wider than shoulders, fingers spread",
            "Lower until chest nearly touches floor, elbows at 45°",
            "Push up explosively while keeping core tight",
        ],
        common_mistake="Letting hips sag or pike up. Keep body in a straight line.",
        easier_variant="Incline push-ups (hands on elevated surface)",
        harder_variant="Diamond push-ups (hands close together)",
        contraindications=["wrist", "shoulder"],
        difficulty_level=2,
    ),
    Exercise(
        id="push-ups-incline",
        name="Incline Push-Ups",
        movement_type="push",
        muscle_groups=["chest", "shoulders", "triceps"],
        is_primary=True,
        is_support=False,
        base_reps=12,
        goal="Use an elevated surface to reduce load while keeping form.",
        instructions=[
            "Place hands on a sturdy elevated surface (chair, counter)",
            "Walk feet back until body forms a straight line",
            "Lower chest to the edge, then push back up",
        ],
        common_mistake="Standing too close. Step back to get the proper angle.",
        easier_variant="Wall push-ups",
        harder_variant="Standard push-ups",
        contraindications=["wrist"],
        difficulty_level=1,
    ),
    Exercise(
        id="pike-push-ups",
        name="Pike Push-Ups",
        movement_type="push",
        muscle_groups=["shoulders", "triceps", "core"],
        is_primary=True,
        is_support=False,
        base_reps=8,
        goal="Target shoulders by creating an inverted V shape.",
        instructions=[
            "Start in push-up position, walk feet toward hands forming a V",
            "Bend elbows and lower head toward floor between hands",
            "Push back up to start, keeping hips high throughout",
        ],
        common_mistake="Not piking high enough. Get hips as high as possible.",
        easier_variant="Standard push-ups",
        harder_variant="Feet elevated pike push-ups",
        contraindications=["wrist", "shoulder", "neck"],
        difficulty_level=3,
    ),
    # --- Pull ---
    Exercise(
        id="supermans",
        name="Supermans",
        movement_type="pull",
        muscle_groups=["back", "glutes", "shoulders"],
        is_primary=True,
        is_support=True,
        base_reps=10,
        goal="Strengthen posterior chain without equipment.",
        instructions=[
            "Lie face down, arms extended overhead, legs straight",
            "Lift arms, chest, and legs off floor simultaneously",
            "Hold 1-2 seconds at top, squeezing glutes and back",
        ],
        common_mistake="Using momentum. Lift with control, not jerking.",
        easier_variant="Lift only arms OR only legs",
        harder_variant="Hold at top for 3-5 seconds",
        contraindications=["lower-back", "neck"],
        difficulty_level=2,
    ),
    Exercise(
        id="prone-y-raises",
        name="Prone Y-Raises",
        movement_type="pull",
        muscle_groups=["back", "shoulders"],
        is_primary=False,
        is_support=True,
        base_reps=10,
        goal="Target lower traps and improve posture.",
        instructions=[
            "Lie face down, arms extended in Y shape (thumbs up)",
            "Lift arms off floor while squeezing shoulder blades",
            "Lower with control, keep head neutral",
        ],
        common_mistake="Craning neck up. Keep forehead near floor.",
        easier_variant="Arms at 45° (T position)",
        harder_variant="Hold each rep for 3 seconds",
        contraindications=["shoulder", "neck"],
        difficulty_level=2,
    ),
    # --- Squat / hinge ---
    Exercise(
        id="bodyweight-squats",
        name="Squats",
        movement_type="squat",
        muscle_groups=["quads", "glutes", "hamstrings", "core"],
        is_primary=True,
        is_support=False,
        base_reps=12,
        goal="Sit back and down; drive through heels to stand.",
        instructions=[
            "Feet shoulder-width apart, toes slightly out",
            "Push hips back and bend knees, keeping chest up",
            "Descend until thighs parallel, then drive up through heels",
        ],
        common_mistake="Knees caving in. Push them out over toes.",
        easier_variant="Box squats (sit to a chair)",
        harder_variant="Pause squats (3-second hold at bottom)",
        contraindications=["knee"],
        difficulty_level=2,
    ),
    Exercise(
        id="glute-bridges",
        name="Glute Bridges",
        movement_type="hinge",
        muscle_groups=["glutes", "hamstrings", "core"],
        is_primary=True,
        is_support=True,
        base_reps=12,
        goal="Squeeze glutes hard at top; don't hyperextend back.",
        instructions=[
            "Lie on back, knees bent, feet flat near glutes",
            "Drive through heels to lift hips toward ceiling",
            "Squeeze glutes at top, pause, then lower with control",
        ],
        common_mistake="Arching lower back. Focus on glute squeeze, not height.",
        easier_variant="Smaller range of motion",
        harder_variant="Single-leg glute bridges",
        contraindications=[],
        difficulty_level=1,
    ),
    Exercise(
        id="reverse-lunges",
        name="Reverse Lunges",
        movement_type="squat",
        muscle_groups=["quads", "glutes", "hamstrings"],
        is_primary=True,
        is_support=False,
        base_reps=8,
        goal="Step back with control; front knee tracks over ankle.",
        instructions=[
            "Stand tall, step one foot straight back",
            "Lower until both knees at 90°, back knee hovering",
            "Push through front heel to return to standing",
        ],
        common_mistake="Front knee shooting forward. Keep shin vertical.",
        easier_variant="Hold onto something for balance",
        harder_variant="Walking lunges",
        contraindications=["knee"],
        difficulty_level=2,
    ),
    # --- Core ---
    Exercise(
        id="plank",
        name="Plank",
        movement_type="core",
        muscle_groups=["core", "shoulders"],
        is_primary=False,
        is_support=True,
        base_time=30,
        goal="Keep ribs down; squeeze glutes; breathe normally.",
        instructions=[
            "Forearms on floor, elbows under shoulders",
            "Form a straight line from head to heels",
            "Brace core like expecting a punch, hold position",
        ],
        common_mistake="Hips too high or sagging. Check in a mirror or record.",
        easier_variant="Kneeling plank",
        harder_variant="Plank with shoulder taps",
        contraindications=["wrist", "shoulder"],
        difficulty_level=2,
    ),
    Exercise(
        id="dead-bugs",
        name="Dead Bugs",
        movement_type="core",
        muscle_groups=["core", "hip-flexors"],
        is_primary=False,
        is_support=True,
        base_reps=10,
        goal="Keep lower back pressed into floor throughout.",
        instructions=[
            "Lie on back, arms toward ceiling, knees at 90°",
            "Slowly extend opposite arm and leg toward floor",
            "Return to start, repeat on other side",
        ],
        common_mistake="Lower back arching. Flatten it before each rep.",
        easier_variant="Only move legs, arms stay up",
        harder_variant="Slow 3-count on each extension",
        contraindications=["lower-back"],
        difficulty_level=2,
    ),
    Exercise(
        id="bird-dogs",
        name="Bird Dogs",
        movement_type="core",
        muscle_groups=["core", "glutes", "back"],
        is_primary=False,
        is_support=True,
        base_reps=10,
        goal="Move slowly; keep hips and shoulders square.",
        instructions=[
            "Start on hands and knees, wrists under shoulders",
            "Extend opposite arm and leg until parallel to floor",
            "Hold briefly, return with control, switch sides",
        ],
        common_mistake="Rotating hips or shoulders. Keep them level.",
        easier_variant="Only extend arm OR leg, not both",
        harder_variant="Hold each rep for 5 seconds",
        contraindications=["wrist"],
        difficulty_level=1,
    ),
    Exercise(
        id="hollow-hold",
        name="Hollow Hold",
        movement_type="core",
        muscle_groups=["core", "hip-flexors"],
        is_primary=False,
        is_support=True,
        base_time=20,
        goal="Press lower back into floor; pull ribs down.",
        instructions=[
            "Lie on back, arms overhead, legs straight",
            'Lift shoulders and legs off floor, creating a "banana" shape',
            "Keep lower back glued to floor, hold position",
        ],
        common_mistake="Lower back lifting. Bend knees if needed to maintain contact.",
        easier_variant="Bent knees, arms at sides",
        harder_variant="Rock gently while maintaining position",
        contraindications=["lower-back", "neck"],
        difficulty_level=3,
    ),
    Exercise(
        id="mountain-climbers",
        name="Mountain Climbers",
        movement_type="core",
        muscle_groups=["core", "hip-flexors", "shoulders"],
        is_primary=True,
        is_support=True,
        base_reps=16,
        goal="Stay low and controlled; hips stay level.",
        instructions=[
            "Start in high plank position, hands under shoulders",
            "Drive one knee toward chest, then quickly switch",
            "Keep core tight and hips from bouncing",
        ],
        common_mistake="Hips piking up. Maintain a straight plank position.",
        easier_variant="Slow mountain climbers (step instead of hop)",
        harder_variant="Cross-body mountain climbers",
        contraindications=["wrist", "shoulder"],
        difficulty_level=2,
    ),
    # --- Mobility ---
    Exercise(
        id="cat-cow",
        name="Cat-Cow",
        movement_type="mobility",
        muscle_groups=["back", "core"],
        is_primary=False,
        is_support=True,
        base_reps=10,
        goal="Move slowly through full range; sync with breath.",
        instructions=[
            "Start on hands and knees, wrists under shoulders",
            "Inhale: drop belly, lift chest and tailbone (cow)",
            "Exhale: round spine toward ceiling, tuck chin (cat)",
        ],
        common_mistake="Moving too fast. Take 2-3 seconds for each position.",
        easier_variant="Seated cat-cow (on chair)",
        harder_variant="Add 3-second pause in each position",
        contraindications=["wrist"],
        difficulty_level=1,
    ),
    Exercise(
        id="hip-circles",
        name="Hip Circles",
        movement_type="mobility",
        muscle_groups=["hip-flexors", "glutes"],
        is_primary=False,
        is_support=True,
        base_reps=8,
        goal="Open up tight hips with controlled circles.",
        instructions=[
            "Stand on one leg, hold wall for balance if needed",
            "Lift knee, rotate hip out and around in circles",
            "Reverse direction, then switch legs",
        ],
        common_mistake="Moving from knee, not hip. Initiate from the hip joint.",
        easier_variant="Smaller circles with support",
        harder_variant="No support, larger circles",
        contraindications=["knee"],
        difficulty_level=1,
    ),
    Exercise(
        id="worlds-greatest-stretch",
        name="World's Greatest Stretch",
        movement_type="mobility",
        muscle_groups=["hip-flexors", "hamstrings", "back", "shoulders"],
        is_primary=False,
        is_support=True,
        base_reps=6,
        goal="Full-body opener; hit multiple areas in one move.",
        instructions=[
            "Lunge forward, place both hands inside front foot",
            "Rotate torso, reach same-side arm toward ceiling",
            "Hold briefly, return hand down, step back, switch sides",
        ],
        common_mistake="Rushing. Spend 2-3 seconds in the twist.",
        easier_variant="Skip the rotation, just hold the lunge",
        harder_variant="Add hamstring stretch by straightening front leg",
        contraindications=["knee", "lower-back"],
        difficulty_level=2,
    ),
    Exercise(
        id="thoracic-rotations",
        name="Thoracic Rotations",
        movement_type="mobility",
        muscle_groups=["back", "core"],
        is_primary=False,
        is_support=True,
        base_reps=8,
        goal="Improve upper back rotation and reduce stiffness.",
        instructions=[
            "Side-lying position, knees stacked and bent at 90°",
            "Top arm reaches over, rotate upper back to open chest",
            "Follow hand with eyes, hold, return with control",
        ],
        common_mistake="Knees lifting. Keep them stacked and still.",
        easier_variant="Place pillow between knees for comfort",
        harder_variant="Hold each rotation for 5 seconds",
        contraindications=["shoulder", "lower-back"],
        difficulty_level=1,
    ),
)

_BY_ID: dict[str, Exercise] = {ex.id: ex for ex in EXERCISES}


def as_values(items: Iterable[str]) -> set[str]:
    """Plain string values for a mix of enum members and strings."""
    return {getattr(item, "value", item) for item in items}


# ─────────────────────────────────────────────
# Queries
# ─────────────────────────────────────────────

def get_exercise_by_id(exercise_id: str) -> Optional[Exercise]:
    """Return the catalog exercise with this id, or None if unknown."""
    return _BY_ID.get(exercise_id)


def get_primary_exercises() -> list[Exercise]:
    """All exercises that can serve as the main movement."""
    return [ex for ex in EXERCISES if ex.is_primary]


def get_support_exercises() -> list[Exercise]:
    """All exercises that can serve as the secondary movement."""
    return [ex for ex in EXERCISES if ex.is_support]


def get_exercises_by_type(movement_type: MovementType | str) -> list[Exercise]:
    """All exercises of one movement type, in catalog order."""
    return [ex for ex in EXERCISES if ex.movement_type == movement_type]


def get_safe_exercises(constraints: Iterable[str]) -> list[Exercise]:
    """Exercises whose contraindications do not intersect ``constraints``."""
    avoid = as_values(constraints)
    return [ex for ex in EXERCISES if ex.is_safe_for(avoid)]
