"""
Application Layer for the Workout Roulette API.

This package contains:
- ports/: Abstract repository interfaces (what the domain needs)
- use_cases/: Workflows coordinating domain models and ports
- exceptions.py: Errors shared by the application and API layers
"""
