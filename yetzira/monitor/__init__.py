"""Yetzira project monitor - read-only projection plus terminal rendering.

Modules
-------
projection
    ``DashboardProjection`` fetches a snapshot from the record store and
    produces ``DashboardView`` - a frozen, point-in-time view of the project.
renderer
    ``DashboardRenderer`` turns ``DashboardView`` into Rich renderables, one
    per dashboard tab.
"""
