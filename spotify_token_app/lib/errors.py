#!/usr/bin/env python3
"""
Error types for the token service
Each error carries the HTTP status and the JSON body the API returns for it
"""
from typing import Any, Dict, Optional


class TokenServiceError(Exception):
    """Base error; terminal for the request that raised it"""

    status_code = 500
    default_message = 'Internal server error'

    def __init__(self, message: Optional[str] = None, details: Optional[str] = None):
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {'error': self.message}
        if self.details is not None:
            body['details'] = self.details
        return body


class MissingParameters(TokenServiceError):
    status_code = 400
    default_message = 'Missing required parameters'

    @classmethod
    def for_fields(cls, *fields: str) -> 'MissingParameters':
        return cls(f"Missing required parameters: {', '.join(fields)}")


class AuthorizationDenied(TokenServiceError):
    status_code = 400
    default_message = 'Authorization failed'


class TokenExchangeFailed(TokenServiceError):
    """The accounts service rejected the token request"""

    status_code = 400
    default_message = 'Failed to exchange code for tokens'

    def __init__(self, message: Optional[str] = None, details: Optional[str] = None,
                 upstream_status: Optional[int] = None):
        super().__init__(message, details)
        self.upstream_status = upstream_status


class CallbackProcessingFailed(TokenServiceError):
    status_code = 500
    default_message = 'Failed to process callback'


class InternalError(TokenServiceError):
    status_code = 500
    default_message = 'Internal server error'


class InvalidState(TokenServiceError):
    """The OAuth state parameter could not be decoded into client credentials"""

    status_code = 400
    default_message = 'Invalid state parameter'
