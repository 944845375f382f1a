#!/usr/bin/env python3
"""
OAuth state codec

The state parameter carries the client credentials across the authorization
redirect as base64(JSON({clientId, clientSecret})). The JSON is compact so the
value matches what the entry page builds with btoa(JSON.stringify(...)).
"""
import base64
import binascii
import json
from dataclasses import dataclass

from spotify_token_app.lib.errors import InvalidState


@dataclass(frozen=True)
class ClientCredentials:
    client_id: str
    client_secret: str

    def basic_auth_header(self) -> str:
        raw = f"{self.client_id}:{self.client_secret}".encode('utf-8')
        return f"Basic {base64.b64encode(raw).decode('ascii')}"


def encode_state(client_id: str, client_secret: str) -> str:
    payload = json.dumps(
        {'clientId': client_id, 'clientSecret': client_secret},
        separators=(',', ':'),
        ensure_ascii=False,
    )
    return base64.b64encode(payload.encode('utf-8')).decode('ascii')


def decode_state(state: str) -> ClientCredentials:
    """Recover the credentials embedded by encode_state.

    Raises InvalidState for anything that is not base64 of a JSON object with
    string clientId and clientSecret members.
    """
    try:
        raw = base64.b64decode(state, validate=True)
        payload = json.loads(raw.decode('utf-8'))
    except (binascii.Error, UnicodeDecodeError, ValueError) as e:
        raise InvalidState(details=str(e)) from e

    if not isinstance(payload, dict):
        raise InvalidState(details='state payload is not a JSON object')

    client_id = payload.get('clientId')
    client_secret = payload.get('clientSecret')
    if not isinstance(client_id, str) or not isinstance(client_secret, str):
        raise InvalidState(details='state payload is missing clientId or clientSecret')

    return ClientCredentials(client_id, client_secret)
