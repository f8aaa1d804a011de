"""
Configuration helpers for jsonsmith.
"""
