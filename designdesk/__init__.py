"""
DesignDesk - Design-team management dashboard.

Designer profiles, a skills matrix, learning modules with lessons and tests,
projects and a calendar, kept in one local document store.
"""

__version__ = "0.1.0"
