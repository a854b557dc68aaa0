"""Default adapters shipped with wsquery."""
