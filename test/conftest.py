"""
Shared fixtures: Flask test client and a stand-in for the Spotify token endpoint
"""
import json
import os
from unittest.mock import patch

import pytest
import requests

os.environ.setdefault('ENV', 'dev')

from spotify_token_app.app import app as flask_app  # noqa: E402
from spotify_token_app.config import Config  # noqa: E402


def make_response(status_code, body):
    """Build a real requests.Response as the token endpoint would return it"""
    response = requests.Response()
    response.status_code = status_code
    response.url = Config.SPOTIFY_TOKEN_URL
    response.encoding = 'utf-8'
    if isinstance(body, (dict, list)):
        response._content = json.dumps(body).encode('utf-8')
        response.headers['Content-Type'] = 'application/json'
    else:
        response._content = body.encode('utf-8')
        response.headers['Content-Type'] = 'text/plain'
    return response


@pytest.fixture
def client():
    flask_app.config['TESTING'] = True
    with flask_app.test_client() as test_client:
        yield test_client


@pytest.fixture
def mock_post():
    with patch('spotify_token_app.lib.auth.spotify_oauth.requests.post') as post:
        yield post


@pytest.fixture
def token_payload():
    return {
        'access_token': 'A',
        'refresh_token': 'R',
        'expires_in': 3600,
        'token_type': 'Bearer',
        'scope': 'x y',
    }
