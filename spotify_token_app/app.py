#!/usr/bin/env python3
"""
Flask app for generating Spotify access and refresh tokens

Routes:
    GET  /              entry form (browser builds the authorize URL and redirects)
    GET  /callback      Spotify redirect target; exchanges the code and shows the tokens
    GET  /api/tokens    authorize URL for the given client credentials
    POST /api/tokens    exchange an authorization code for tokens
    POST /api/refresh   refresh an access token
"""
from functools import wraps
from flask import Flask, request, jsonify, render_template
from flask_cors import CORS

from spotify_token_app.config import Config
from spotify_token_app.lib.auth.spotify_oauth import SpotifyOAuthClient
from spotify_token_app.lib.auth.state import decode_state
from spotify_token_app.lib.errors import (
    AuthorizationDenied,
    CallbackProcessingFailed,
    InternalError,
    MissingParameters,
    TokenServiceError,
)
from spotify_token_app.lib.utils.logger import server_logger

app = Flask(__name__)
CORS(app, resources={r'/api/*': {'origins': Config.CORS_ORIGINS}})
spotify_client = SpotifyOAuthClient()


def json_errors(f):
    """Turn any failure inside an API route into a JSON error response."""
    @wraps(f)
    def wrapper(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except TokenServiceError:
            raise
        except Exception as e:
            server_logger.exception(f"Unexpected error in {request.path}")
            raise InternalError(details=str(e)) from e
    return wrapper


@app.errorhandler(TokenServiceError)
def handle_token_service_error(e: TokenServiceError):
    server_logger.warning(f"{request.method} {request.path} -> {e.status_code}: {e.message}")
    return jsonify(e.to_dict()), e.status_code


@app.after_request
def add_headers(response):
    # Pages and API bodies carry live tokens
    response.headers['Cache-Control'] = 'no-store'
    return response


# =============================================================================
# Views
# =============================================================================

@app.route('/')
def index():
    return render_template(
        'index.html',
        redirect_uri=spotify_client.redirect_uri,
        authorization_url=spotify_client.authorization_url,
        scope=spotify_client.scope,
    )


@app.route('/callback')
def callback():
    error = request.args.get('error')
    code = request.args.get('code')
    state = request.args.get('state')

    if error:
        server_logger.warning(f"Spotify authorization denied: {error}")
        return _error_page(AuthorizationDenied())

    if not code or not state:
        return _error_page(MissingParameters("Missing authorization code or state"))

    try:
        credentials = decode_state(state)
        tokens = spotify_client.exchange_code_for_tokens(code, credentials.client_id, credentials.client_secret)
    except TokenServiceError as e:
        server_logger.error(f"Callback failed ({type(e).__name__}): {e.message}")
        return _error_page(CallbackProcessingFailed())
    except Exception:
        server_logger.exception("Callback failed with an unexpected error")
        return _error_page(CallbackProcessingFailed())

    return render_template('callback.html', tokens=tokens)


def _error_page(e: TokenServiceError):
    return render_template('error.html', status_code=e.status_code, message=e.message), e.status_code


# =============================================================================
# Token API
# =============================================================================

@app.route('/api/tokens', methods=['GET'])
@json_errors
def api_authorize_url():
    client_id = request.args.get('client_id')
    client_secret = request.args.get('client_secret')
    if not client_id or not client_secret:
        raise MissingParameters("Missing client_id or client_secret parameters")

    auth_url = spotify_client.get_authorization_url(client_id, client_secret)
    return jsonify({
        'message': 'Navigate to this URL to authorize and get tokens',
        'authUrl': auth_url,
        'redirectUri': spotify_client.redirect_uri,
        'scopes': spotify_client.scopes,
    })


@app.route('/api/tokens', methods=['POST'])
@json_errors
def api_exchange_code():
    tokens = spotify_client.exchange_code_for_tokens(
        request.form.get('code'),
        request.form.get('client_id'),
        request.form.get('client_secret'),
    )
    return jsonify(tokens)


@app.route('/api/refresh', methods=['POST'])
@json_errors
def api_refresh():
    tokens = spotify_client.refresh_access_token(
        request.form.get('refresh_token'),
        request.form.get('client_id'),
        request.form.get('client_secret'),
    )
    return jsonify(tokens)


def main():
    Config.print_config()
    app.run(host=Config.HOST, port=Config.PORT, debug=Config.DEBUG)


if __name__ == '__main__':
    main()
