"""Attendance Dashboard package.

Organized by feature modules (records, view, metrics, chart, dashboard)
with a thin Flask controller layer over plain service objects.
"""
