"""
svg rendering of rearrangement profiles
"""
