"""
Spotify refresh token generator
"""
__version__ = '1.0.0'
