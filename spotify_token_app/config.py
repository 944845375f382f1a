#!/usr/bin/env python3
"""
Configuration Management
Loads application settings from environment variables (.env) and JSON config files (conf/{ENV}.json)
"""
import os
import json
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from the package .env file (with fallback to the working directory)
APP_DIR = Path(__file__).parent
ROOT_DIR = APP_DIR.parent
APP_ENV_FILE = APP_DIR / '.env'
CWD_ENV_FILE = Path.cwd() / '.env'

if APP_ENV_FILE.exists():
    load_dotenv(APP_ENV_FILE)
    print(f"✅ Loaded environment from: {APP_ENV_FILE}")
elif CWD_ENV_FILE.exists():
    load_dotenv(CWD_ENV_FILE)
    print(f"✅ Loaded environment from: {CWD_ENV_FILE} (fallback)")

# Load JSON configuration based on ENV
ENV = os.getenv('ENV', 'dev')
CONF_DIR = APP_DIR / 'conf'
CONF_FILE = CONF_DIR / f'{ENV}.json'

if not CONF_FILE.exists():
    raise FileNotFoundError(f"Configuration file not found: {CONF_FILE}")

try:
    with open(CONF_FILE, 'r') as f:
        CONFIG = json.load(f)
except json.JSONDecodeError as e:
    raise ValueError(f"Invalid JSON in configuration file {CONF_FILE}: {e}")


def _as_bool(raw) -> bool:
    return raw if isinstance(raw, bool) else str(raw).lower() == 'true'


class Config:
    """Application configuration - combines environment variables (.env) and JSON config (conf/{ENV}.json)"""

    # =============================================================================
    # ENVIRONMENT
    # =============================================================================
    ENV = ENV

    # =============================================================================
    # SERVER SETTINGS (JSON config, overridable from .env)
    # =============================================================================
    _server_cfg = CONFIG.get('server', {})
    HOST = os.getenv('HOST', _server_cfg.get('host', '127.0.0.1'))
    PORT = int(os.getenv('PORT', _server_cfg.get('port', 5000)))
    DEBUG = _as_bool(_server_cfg.get('debug', False))

    # =============================================================================
    # SPOTIFY OAUTH SETTINGS (combined from JSON config and .env)
    # =============================================================================
    _spotify_api_cfg = CONFIG.get('spotify', {}).get('api', {})
    _spotify_account_cfg = _spotify_api_cfg.get('account', {})

    SPOTIFY_API_ACCOUNT_BASE_URL = _spotify_account_cfg.get('baseUrl', 'https://accounts.spotify.com').rstrip('/')
    SPOTIFY_API_ACCOUNT_SSL_VERIFY = _as_bool(_spotify_account_cfg.get('sslVerify', True))

    SPOTIFY_REDIRECT_URI = os.getenv('SPOTIFY_REDIRECT_URI', _spotify_api_cfg.get('redirectUri', ''))
    _spotify_scope_raw = os.getenv('SPOTIFY_SCOPE', _spotify_api_cfg.get('scope', ''))
    SPOTIFY_SCOPE = _spotify_scope_raw
    SPOTIFY_SCOPE_LIST = [s for s in _spotify_scope_raw.split(' ') if s] if isinstance(_spotify_scope_raw, str) else []

    # None leaves the HTTP client's default in place
    SPOTIFY_REQUEST_TIMEOUT = _spotify_api_cfg.get('requestTimeoutSeconds')

    SPOTIFY_AUTH_URL = f"{SPOTIFY_API_ACCOUNT_BASE_URL}/authorize"
    SPOTIFY_TOKEN_URL = f"{SPOTIFY_API_ACCOUNT_BASE_URL}/api/token"

    # =============================================================================
    # CORS SETTINGS (from JSON config)
    # =============================================================================
    CORS_ORIGINS = CONFIG.get('cors', {}).get('origins', '*')

    # =============================================================================
    # LOGGING (from JSON config)
    # =============================================================================
    _logging_cfg = CONFIG.get('logging', {})
    LOG_LEVEL = _logging_cfg.get('level', 'info').upper()
    LOG_FORMAT = _logging_cfg.get('format', 'detailed')

    # =============================================================================
    # PATHS
    # =============================================================================
    APP_DIR = APP_DIR
    ROOT_DIR = ROOT_DIR
    CONF_DIR = CONF_DIR

    @classmethod
    def validate(cls):
        """Validate required configuration"""
        errors = []

        if not cls.SPOTIFY_REDIRECT_URI:
            errors.append("spotify.api.redirectUri (or SPOTIFY_REDIRECT_URI) is not set")
        if not cls.SPOTIFY_SCOPE_LIST:
            errors.append("spotify.api.scope (or SPOTIFY_SCOPE) is empty")
        if not (1 <= cls.PORT <= 65535):
            errors.append(f"PORT must be between 1-65535, got {cls.PORT}")
        if cls.SPOTIFY_REQUEST_TIMEOUT is not None and cls.SPOTIFY_REQUEST_TIMEOUT <= 0:
            errors.append(f"spotify.api.requestTimeoutSeconds must be positive, got {cls.SPOTIFY_REQUEST_TIMEOUT}")

        if errors:
            print("\n❌ Configuration Errors:")
            for error in errors:
                print(f"   • {error}")
            raise ValueError(f"Invalid configuration: {len(errors)} error(s) found")

    @classmethod
    def print_config(cls):
        """Print current configuration"""
        print("\n" + "=" * 60)
        print("APPLICATION CONFIGURATION")
        print("=" * 60)
        print(f"Environment:        {cls.ENV} ({'Development' if cls.DEBUG else 'Production'})")
        print(f"Config File:        {CONF_FILE}")
        print(f"Server:             {cls.HOST}:{cls.PORT}")
        print(f"Accounts Service:   {cls.SPOTIFY_API_ACCOUNT_BASE_URL}")
        print(f"SSL Verify:         {cls.SPOTIFY_API_ACCOUNT_SSL_VERIFY}")
        print(f"Redirect URI:       {cls.SPOTIFY_REDIRECT_URI}")
        print(f"Scopes:             {len(cls.SPOTIFY_SCOPE_LIST)} requested")
        print(f"Request Timeout:    {cls.SPOTIFY_REQUEST_TIMEOUT or 'client default'}")
        print(f"Log Level:          {cls.LOG_LEVEL}")
        print("=" * 60 + "\n")


# Validate configuration on import
Config.validate()


if __name__ == '__main__':
    Config.print_config()
