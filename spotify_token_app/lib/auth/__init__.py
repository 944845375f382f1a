"""
Authentication modules
"""
from .spotify_oauth import SpotifyOAuthClient
from .state import ClientCredentials, encode_state, decode_state

__all__ = ['SpotifyOAuthClient', 'ClientCredentials', 'encode_state', 'decode_state']
