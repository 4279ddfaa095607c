"""
Deterministic calculation engine.

Pure Python math. No I/O.
Given a loaded Project, produce a CostBreakdown and per-opening
production schedules (cutting list + glass schedule).
"""
