"""
carthage-cache: a per-toolchain cache for Carthage framework builds.
"""
