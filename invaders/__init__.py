"""
Space Invaders
"""
