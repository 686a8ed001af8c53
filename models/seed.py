from __future__ import annotations

from typing import Any, Dict, List


def _ex(name: str, duration: int, rest: int) -> Dict[str, Any]:
    return {"name": name, "duration": duration, "rest": rest}


DEFAULT_WORKOUTS: List[Dict[str, Any]] = [
    {
        "key": "workout-1",
        "name": "Quick Morning Workout",
        "category": "hiit",
        "difficulty": "beginner",
        "duration": 10,
        "description": "An energizing 10-minute workout to start the day",
        "exercises": [
            _ex("Jumping Jacks", 30, 10),
            _ex("Squats", 30, 10),
            _ex("Push-ups", 30, 10),
            _ex("Mountain Climbers", 30, 10),
            _ex("Plank", 30, 10),
            _ex("Burpees", 30, 10),
            _ex("High Knees", 30, 10),
            _ex("Lunges", 30, 10),
            _ex("Russian Twists", 30, 10),
            _ex("Cool Down Stretch", 60, 0),
        ],
    },
    {
        "key": "workout-2",
        "name": "Strength & Endurance",
        "category": "strength",
        "difficulty": "intermediate",
        "duration": 20,
        "description": "Combined full-body strength and endurance training",
        "exercises": [
            _ex("Warm-up Jog", 60, 10),
            _ex("Push-ups", 45, 15),
            _ex("Squats", 45, 15),
            _ex("Dips", 45, 15),
            _ex("Lunges", 45, 15),
            _ex("Plank Hold", 60, 15),
            _ex("Bicycle Crunches", 45, 15),
            _ex("Jump Squats", 30, 15),
            _ex("Mountain Climbers", 45, 15),
            _ex("Cool Down", 90, 0),
        ],
    },
    {
        "key": "workout-3",
        "name": "Cardio Boost",
        "category": "cardio",
        "difficulty": "intermediate",
        "duration": 15,
        "description": "Intense cardio session for fat burning",
        "exercises": [
            _ex("Warm-up", 60, 10),
            _ex("High Knees", 45, 15),
            _ex("Burpees", 30, 15),
            _ex("Jump Rope (simulated)", 60, 15),
            _ex("Mountain Climbers", 45, 15),
            _ex("Jumping Jacks", 45, 15),
            _ex("Sprint in Place", 30, 15),
            _ex("Box Jumps (simulated)", 30, 15),
            _ex("Cool Down Jog", 90, 0),
        ],
    },
    {
        "key": "workout-4",
        "name": "Yoga Flow",
        "category": "flexibility",
        "difficulty": "beginner",
        "duration": 15,
        "description": "Relaxing yoga sequence for flexibility and balance",
        "exercises": [
            _ex("Child's Pose", 60, 5),
            _ex("Cat-Cow Stretch", 45, 5),
            _ex("Downward Dog", 60, 5),
            _ex("Warrior I", 45, 5),
            _ex("Warrior II", 45, 5),
            _ex("Triangle Pose", 45, 5),
            _ex("Tree Pose", 45, 5),
            _ex("Pigeon Pose", 60, 5),
            _ex("Seated Forward Bend", 60, 5),
            _ex("Savasana", 120, 0),
        ],
    },
    {
        "key": "workout-5",
        "name": "Core Crusher",
        "category": "strength",
        "difficulty": "advanced",
        "duration": 12,
        "description": "Intense core training for a strong midsection",
        "exercises": [
            _ex("Plank", 60, 10),
            _ex("Side Plank (left)", 45, 10),
            _ex("Side Plank (right)", 45, 10),
            _ex("Russian Twists", 45, 10),
            _ex("Bicycle Crunches", 45, 10),
            _ex("Leg Raises", 45, 10),
            _ex("Mountain Climbers", 45, 10),
            _ex("V-Ups", 30, 10),
            _ex("Hollow Hold", 30, 10),
            _ex("Cool Down Stretch", 60, 0),
        ],
    },
    {
        "key": "workout-6",
        "name": "Push-up Challenge",
        "category": "strength",
        "difficulty": "intermediate",
        "duration": 15,
        "description": "Focused push-up training with several variations",
        "exercises": [
            _ex("Warm-up Arm Circles", 30, 10),
            _ex("Standard Push-ups", 40, 20),
            _ex("Wide Push-ups", 40, 20),
            _ex("Close-grip Push-ups (triceps)", 40, 20),
            _ex("Decline Push-ups", 40, 20),
            _ex("Diamond Push-ups", 30, 20),
            _ex("Explosive Push-ups", 30, 20),
            _ex("Slow Push-ups (3 s down)", 45, 20),
            _ex("Plank Hold", 45, 15),
            _ex("Final Set Standard Push-ups", 40, 10),
            _ex("Chest & Shoulder Stretch", 60, 0),
        ],
    },
    {
        "key": "workout-7",
        "name": "Squat Power",
        "category": "strength",
        "difficulty": "beginner",
        "duration": 12,
        "description": "Effective leg training with squat variations",
        "exercises": [
            _ex("Leg Warm-up", 30, 10),
            _ex("Bodyweight Squats", 45, 15),
            _ex("Sumo Squats", 45, 15),
            _ex("Pause Squats", 45, 15),
            _ex("Single-leg Squats (left)", 30, 10),
            _ex("Single-leg Squats (right)", 30, 10),
            _ex("Jump Squats", 30, 20),
            _ex("Pulse Squats", 40, 15),
            _ex("Deep Squats", 45, 15),
            _ex("Final Set Squats", 45, 10),
            _ex("Leg Stretch", 60, 0),
        ],
    },
    {
        "key": "workout-8",
        "name": "Ab Wheel Core Training",
        "category": "strength",
        "difficulty": "advanced",
        "duration": 10,
        "description": "High-intensity ab training with the ab wheel and core work",
        "exercises": [
            _ex("Core Activation Plank", 30, 10),
            _ex("Ab Wheel Rollouts (kneeling)", 40, 20),
            _ex("Plank Shoulder Taps", 40, 15),
            _ex("Ab Wheel Side Rollouts (left)", 30, 15),
            _ex("Ab Wheel Side Rollouts (right)", 30, 15),
            _ex("Dead Bug", 45, 15),
            _ex("Ab Wheel Rollouts (advanced)", 40, 20),
            _ex("Hollow Body Hold", 30, 15),
            _ex("Ab Wheel Final Round", 30, 15),
            _ex("Cobra Stretch", 45, 0),
        ],
    },
]
