"""Domain layer for wsquery."""
