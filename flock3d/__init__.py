"""Interactive 3D boids flocking simulation with a spatial grid and a control panel."""

__version__ = "0.1.0"

__all__ = ["__version__"]