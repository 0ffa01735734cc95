"""
Sample exercise catalog.

Seeded into an empty store and re-inserted by ExerciseRepository.reset().
Mobility drills are tagged "warmup" so a fresh catalog can always open a
workout.
"""

from typing import Any, Dict, List

SAMPLE_EXERCISES: List[Dict[str, Any]] = [
    # Warmup
    {"name": "Forward Fold", "category": "warmup", "description": "Standing forward bend stretch", "equipment": "none", "duration_seconds": 30},
    {"name": "Hip Circles", "category": "warmup", "description": "Circular hip mobility movement", "equipment": "none", "duration_seconds": 30},
    {"name": "Arm Circles", "category": "warmup", "description": "Circular arm movement for shoulder mobility", "equipment": "none", "duration_seconds": 30},
    {"name": "Cat-Cow Stretch", "category": "warmup", "description": "Spinal mobility movement", "equipment": "none", "duration_seconds": 30},

    # Cardio
    {"name": "Jumping Jacks", "category": "cardio", "description": "Full body jumping exercise", "equipment": "none", "duration_seconds": 30},
    {"name": "High Knees", "category": "cardio", "description": "Running in place with high knees", "equipment": "none", "duration_seconds": 30},
    {"name": "Burpees", "category": "cardio", "description": "Full body explosive movement", "equipment": "none", "duration_seconds": 30},
    {"name": "Mountain Climbers", "category": "cardio", "description": "Core and cardio exercise", "equipment": "none", "duration_seconds": 30},
    {"name": "Jump Squats", "category": "cardio", "description": "Explosive squat jumps", "equipment": "none", "duration_seconds": 30},
    {"name": "Butt Kicks", "category": "cardio", "description": "Running in place kicking heels to glutes", "equipment": "none", "duration_seconds": 30},
    {"name": "Star Jumps", "category": "cardio", "description": "Jumping jacks with arms and legs spread wide", "equipment": "none", "duration_seconds": 30},
    {"name": "Sprint in Place", "category": "cardio", "description": "Fast running in place", "equipment": "none", "duration_seconds": 30},
    {"name": "Dumbbell Thrusters", "category": "cardio", "description": "Squat to overhead press with dumbbells", "equipment": "dumbbells", "duration_seconds": 30},
    {"name": "Kettlebell Snatches", "category": "cardio", "description": "Explosive overhead movement", "equipment": "kettlebells", "duration_seconds": 30},
    {"name": "Band Jumping Jacks", "category": "cardio", "description": "Jumping jacks with resistance band overhead", "equipment": "resistance-bands", "duration_seconds": 30},

    # Strength
    {"name": "Push-ups", "category": "strength", "description": "Upper body strength exercise", "equipment": "none", "duration_seconds": 30},
    {"name": "Squats", "category": "strength", "description": "Lower body strength exercise", "equipment": "none", "duration_seconds": 30},
    {"name": "Lunges", "category": "strength", "description": "Leg strength and balance", "equipment": "none", "duration_seconds": 30},
    {"name": "Plank", "category": "strength", "description": "Core strength hold", "equipment": "none", "duration_seconds": 45},
    {"name": "Dips", "category": "strength", "description": "Tricep dips using body weight", "equipment": "none", "duration_seconds": 30},
    {"name": "Wall Sit", "category": "strength", "description": "Isometric squat against wall", "equipment": "none", "duration_seconds": 45},
    {"name": "Glute Bridges", "category": "strength", "description": "Hip thrust exercise", "equipment": "none", "duration_seconds": 30},
    {"name": "Calf Raises", "category": "strength", "description": "Rising onto toes", "equipment": "none", "duration_seconds": 30},
    {"name": "Dumbbell Curls", "category": "strength", "description": "Bicep curls with weights", "equipment": "dumbbells", "duration_seconds": 30},
    {"name": "Dumbbell Press", "category": "strength", "description": "Chest press with weights", "equipment": "dumbbells", "duration_seconds": 30},
    {"name": "Dumbbell Rows", "category": "strength", "description": "Bent-over row with dumbbells", "equipment": "dumbbells", "duration_seconds": 30},
    {"name": "Dumbbell Shoulder Press", "category": "strength", "description": "Overhead press with dumbbells", "equipment": "dumbbells", "duration_seconds": 30},
    {"name": "Dumbbell Lunges", "category": "strength", "description": "Lunges holding dumbbells", "equipment": "dumbbells", "duration_seconds": 30},
    {"name": "Dumbbell Squats", "category": "strength", "description": "Squats holding dumbbells", "equipment": "dumbbells", "duration_seconds": 30},
    {"name": "Dumbbell Tricep Extensions", "category": "strength", "description": "Overhead tricep extension", "equipment": "dumbbells", "duration_seconds": 30},
    {"name": "Kettlebell Swings", "category": "strength", "description": "Hip hinge movement with kettlebell", "equipment": "kettlebells", "duration_seconds": 30},
    {"name": "Kettlebell Goblet Squats", "category": "strength", "description": "Squats holding a kettlebell", "equipment": "kettlebells", "duration_seconds": 30},
    {"name": "Kettlebell Rows", "category": "strength", "description": "Bent-over row with kettlebell", "equipment": "kettlebells", "duration_seconds": 30},
    {"name": "Kettlebell Press", "category": "strength", "description": "Overhead press with kettlebell", "equipment": "kettlebells", "duration_seconds": 30},
    {"name": "Kettlebell Lunges", "category": "strength", "description": "Lunges holding kettlebell", "equipment": "kettlebells", "duration_seconds": 30},
    {"name": "Kettlebell Deadlift", "category": "strength", "description": "Hip hinge movement with kettlebell", "equipment": "kettlebells", "duration_seconds": 30},
    {"name": "Band Rows", "category": "strength", "description": "Back exercise with resistance band", "equipment": "resistance-bands", "duration_seconds": 30},
    {"name": "Band Chest Press", "category": "strength", "description": "Chest exercise with resistance band", "equipment": "resistance-bands", "duration_seconds": 30},
    {"name": "Band Pull-Aparts", "category": "strength", "description": "Shoulder and upper back exercise", "equipment": "resistance-bands", "duration_seconds": 30},
    {"name": "Band Bicep Curls", "category": "strength", "description": "Bicep curls with resistance band", "equipment": "resistance-bands", "duration_seconds": 30},
    {"name": "Band Tricep Extensions", "category": "strength", "description": "Tricep extension with resistance band", "equipment": "resistance-bands", "duration_seconds": 30},
    {"name": "Band Squats", "category": "strength", "description": "Squats with resistance band", "equipment": "resistance-bands", "duration_seconds": 30},
    {"name": "Band Lateral Raises", "category": "strength", "description": "Shoulder lateral raises with band", "equipment": "resistance-bands", "duration_seconds": 30},

    # Core
    {"name": "Crunches", "category": "core", "description": "Abdominal crunches", "equipment": "none", "duration_seconds": 30},
    {"name": "Leg Raises", "category": "core", "description": "Lower ab exercise", "equipment": "none", "duration_seconds": 30},
    {"name": "Russian Twists", "category": "core", "description": "Rotational core exercise", "equipment": "none", "duration_seconds": 30},
    {"name": "Bicycle Crunches", "category": "core", "description": "Alternating knee-to-elbow crunches", "equipment": "none", "duration_seconds": 30},
    {"name": "Side Plank", "category": "core", "description": "Lateral core strength hold", "equipment": "none", "duration_seconds": 30},
    {"name": "Dead Bug", "category": "core", "description": "Core stability exercise on back", "equipment": "none", "duration_seconds": 30},
    {"name": "Hollow Body Hold", "category": "core", "description": "Full body core isometric hold", "equipment": "none", "duration_seconds": 30},
    {"name": "Kettlebell Turkish Get-Up", "category": "core", "description": "Full body movement with kettlebell", "equipment": "kettlebells", "duration_seconds": 30},

    # Balance
    {"name": "Single Leg Stand", "category": "balance", "description": "Balance on one leg", "equipment": "none", "duration_seconds": 30},
    {"name": "Tree Pose", "category": "balance", "description": "Yoga balance pose", "equipment": "none", "duration_seconds": 30},
    {"name": "Single Leg Deadlift", "category": "balance", "description": "Balance and hamstring exercise", "equipment": "none", "duration_seconds": 30},
    {"name": "Dumbbell Single Leg Deadlift", "category": "balance", "description": "Single leg deadlift with weight", "equipment": "dumbbells", "duration_seconds": 30},
    {"name": "Kettlebell Single Leg Deadlift", "category": "balance", "description": "Single leg deadlift with kettlebell", "equipment": "kettlebells", "duration_seconds": 30},
    {"name": "Warrior III", "category": "balance", "description": "Yoga balance pose", "equipment": "none", "duration_seconds": 30},

    # Flexibility
    {"name": "Stretching", "category": "flexibility", "description": "General stretching", "equipment": "none", "duration_seconds": 60},
    {"name": "Yoga Flow", "category": "flexibility", "description": "Gentle yoga sequence", "equipment": "none", "duration_seconds": 60},
    {"name": "Quad Stretch", "category": "flexibility", "description": "Standing quadricep stretch", "equipment": "none", "duration_seconds": 30},
    {"name": "Hamstring Stretch", "category": "flexibility", "description": "Seated or standing hamstring stretch", "equipment": "none", "duration_seconds": 30},
    {"name": "Shoulder Stretch", "category": "flexibility", "description": "Cross-body shoulder stretch", "equipment": "none", "duration_seconds": 30},
    {"name": "Child's Pose", "category": "flexibility", "description": "Restorative yoga pose", "equipment": "none", "duration_seconds": 30},
    {"name": "Band Assisted Stretches", "category": "flexibility", "description": "Stretching with resistance band assistance", "equipment": "resistance-bands", "duration_seconds": 30},
]
