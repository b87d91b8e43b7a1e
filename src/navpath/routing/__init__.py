"""Routing — config normalization, state walking and path assembly.

Configs are normalized once per call into an immutable pattern tree,
then walked in lock-step with the navigation state.
"""
