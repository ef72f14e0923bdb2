"""Domain rules - pure functions without I/O or side effects."""
