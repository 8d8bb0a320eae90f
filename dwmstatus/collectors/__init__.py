"""Samplers turning kernel counters into status line fields."""
