"""Weekly planner: travel-aware Monday-Friday scheduling."""
