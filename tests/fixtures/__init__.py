"""
Reusable test fixtures for carthage-cache.
"""
