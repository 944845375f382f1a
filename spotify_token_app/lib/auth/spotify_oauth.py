#!/usr/bin/env python3
"""
Spotify OAuth 2.0 Client
Builds authorization URLs and talks to the accounts service token endpoint without external OAuth libraries.
The client holds no credentials: every call receives the caller's client id and secret.
"""
from typing import Dict, Any, List, Optional
from urllib.parse import urlencode
import requests
import urllib3
from urllib3.exceptions import InsecureRequestWarning

from spotify_token_app.config import Config
from spotify_token_app.lib.auth.state import ClientCredentials, encode_state
from spotify_token_app.lib.errors import InternalError, MissingParameters, TokenExchangeFailed
from spotify_token_app.lib.utils.logger import auth_logger as logger, mask


class SpotifyOAuthClient:
    """Spotify OAuth 2.0 client implementation"""

    def __init__(self,
                 redirect_uri: Optional[str] = None,
                 scopes: Optional[List[str]] = None,
                 authorization_url: Optional[str] = None,
                 token_url: Optional[str] = None):
        """Initialize the client with endpoints from config unless given explicitly"""
        self.redirect_uri = redirect_uri or Config.SPOTIFY_REDIRECT_URI
        self.scopes = list(scopes or Config.SPOTIFY_SCOPE_LIST)
        self.authorization_url = authorization_url or Config.SPOTIFY_AUTH_URL
        self.token_url = token_url or Config.SPOTIFY_TOKEN_URL
        self.verify_account = Config.SPOTIFY_API_ACCOUNT_SSL_VERIFY
        self.timeout = Config.SPOTIFY_REQUEST_TIMEOUT
        if not self.verify_account:
            # Suppress urllib3 warnings when SSL verification is intentionally disabled via config.
            urllib3.disable_warnings(InsecureRequestWarning)
        if not self.redirect_uri:
            raise ValueError("Spotify redirect URI not configured. Set spotify.api.redirectUri or SPOTIFY_REDIRECT_URI")

    @property
    def scope(self) -> str:
        return ' '.join(self.scopes)

    def get_authorization_url(self, client_id: str, client_secret: str) -> str:
        if not client_id or not client_secret:
            raise MissingParameters("Missing client_id or client_secret parameters")
        params = {
            'client_id': client_id,
            'response_type': 'code',
            'redirect_uri': self.redirect_uri,
            'scope': self.scope,
            'state': encode_state(client_id, client_secret),
        }
        url = f"{self.authorization_url}?{urlencode(params)}"
        logger.info(f"Generated Spotify OAuth URL for client {mask(client_id)}")
        return url

    def exchange_code_for_tokens(self, code: str, client_id: str, client_secret: str) -> Dict[str, Any]:
        if not code or not client_id or not client_secret:
            raise MissingParameters.for_fields('code', 'client_id', 'client_secret')
        data = {
            'grant_type': 'authorization_code',
            'code': code,
            'redirect_uri': self.redirect_uri,
        }
        logger.info(f"Exchanging authorization code for tokens (client {mask(client_id)})")
        tokens = self._request_tokens(
            data,
            ClientCredentials(client_id, client_secret),
            failure_message='Failed to exchange code for tokens',
        )
        logger.info("✅ Successfully obtained access and refresh tokens from Spotify")
        result = {
            'access_token': tokens.get('access_token'),
            'expires_in': tokens.get('expires_in'),
            'token_type': tokens.get('token_type'),
            'scope': tokens.get('scope'),
        }
        if tokens.get('refresh_token'):
            result['refresh_token'] = tokens['refresh_token']
        return result

    def refresh_access_token(self, refresh_token: str, client_id: str, client_secret: str) -> Dict[str, Any]:
        if not refresh_token or not client_id or not client_secret:
            raise MissingParameters.for_fields('refresh_token', 'client_id', 'client_secret')
        data = {
            'grant_type': 'refresh_token',
            'refresh_token': refresh_token,
        }
        logger.info(f"Refreshing Spotify access token (client {mask(client_id)})")
        tokens = self._request_tokens(
            data,
            ClientCredentials(client_id, client_secret),
            failure_message='Failed to refresh token',
        )
        result = {
            'access_token': tokens.get('access_token'),
            'expires_in': tokens.get('expires_in'),
            'token_type': tokens.get('token_type'),
            'scope': tokens.get('scope'),
        }
        # Spotify omits refresh_token when the old one stays valid
        if tokens.get('refresh_token'):
            result['refresh_token'] = tokens['refresh_token']
            logger.info("✅ Successfully refreshed access token (new refresh token issued)")
        else:
            logger.info("✅ Successfully refreshed access token")
        return result

    def _request_tokens(self, data: Dict[str, str], credentials: ClientCredentials,
                        failure_message: str) -> Dict[str, Any]:
        """POST to the token endpoint once and return the decoded JSON body"""
        try:
            response = requests.post(
                self.token_url,
                data=data,
                headers={
                    'Content-Type': 'application/x-www-form-urlencoded',
                    'Authorization': credentials.basic_auth_header(),
                },
                timeout=self.timeout,
                verify=self.verify_account,
            )
        except requests.RequestException as e:
            logger.error(f"❌ Network error calling Spotify token endpoint: {str(e)}")
            raise InternalError(details=str(e)) from e

        # Any non-2xx counts as a rejection, including redirects requests did not follow
        if not 200 <= response.status_code < 300:
            logger.error(f"❌ {failure_message}: {response.status_code} - {response.text}")
            raise TokenExchangeFailed(
                failure_message,
                details=response.text,
                upstream_status=response.status_code,
            )

        try:
            tokens = response.json()
        except ValueError as e:
            logger.error(f"❌ Invalid token response: {str(e)}")
            raise InternalError(details=f"Invalid token response: {str(e)}") from e

        if not isinstance(tokens, dict) or 'access_token' not in tokens:
            logger.error("❌ Invalid token response: missing access_token")
            raise InternalError(details="Invalid token response: missing access_token")
        return tokens
