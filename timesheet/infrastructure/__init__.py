"""
Infrastructure layer for the timesheet system.
Contains the repository adapters and the web layer.
"""
