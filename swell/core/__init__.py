"""Core layer: domain rules, progression state and use-cases."""
