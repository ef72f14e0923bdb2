"""Swell Getaway: progression and reward engine."""
