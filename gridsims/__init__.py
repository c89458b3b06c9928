"""Headless game-AI simulations: catch the cat, maze walls, Perlin noise and flocking boids."""

__version__ = "0.1.0"
__all__ = ["catchthecat", "maze", "perlin", "rules", "flock"]