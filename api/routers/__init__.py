"""
Router package for the Workout Roulette API.

This package contains all API routers organized by domain:
- health: Health check endpoint
- exercises: Exercise catalog CRUD and metadata (admin panel)
- workouts: Workout generation and history (mobile app)
"""

from api.routers.health import router as health_router
from api.routers.exercises import router as exercises_router
from api.routers.workouts import router as workouts_router

__all__ = [
    "health_router",
    "exercises_router",
    "workouts_router",
]
