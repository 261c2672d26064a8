# File: sceudl/auth/google_auth.py
"""
Google API authentication module.
Handles the OAuth2 flow and the Calendar service handle.
"""

from typing import Optional
from google.auth.exceptions import RefreshError
from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import InstalledAppFlow
from googleapiclient.discovery import build, Resource
from googleapiclient.errors import HttpError

from sceudl.core.config_manager import Config
from sceudl.utils.logger import setup_logger

logger = setup_logger(__name__)


def _authenticate() -> Optional[Credentials]:
    """
    Load the saved token, refreshing it when expired.

    Returns:
        Credentials object or None if no usable token exists
    """
    creds = None

    if Config.TOKEN_FILE.exists():
        logger.debug(f"Loading existing token from {Config.TOKEN_FILE}")
        creds = Credentials.from_authorized_user_file(
            str(Config.TOKEN_FILE),
            Config.GOOGLE_SCOPES
        )

    if not creds or not creds.valid:
        if creds and creds.expired and creds.refresh_token:
            logger.info("Refreshing expired credentials")
            try:
                creds.refresh(Request())
            except RefreshError as e:
                logger.error(f"Error refreshing token: {e}", exc_info=True)
                logger.warning("Deleting invalid token file")
                Config.TOKEN_FILE.unlink(missing_ok=True)
                return None
            logger.info("Credentials refreshed successfully")
        else:
            logger.warning("No valid credentials found")
            return None

        logger.debug("Saving refreshed credentials")
        with open(Config.TOKEN_FILE, "w") as token_file:
            token_file.write(creds.to_json())

    return creds


def create_initial_token() -> bool:
    """
    Run the interactive, browser-based auth flow and save token.json.

    Returns:
        True if authentication successful, False otherwise
    """
    logger.info("Starting interactive authentication flow")

    if not Config.CREDENTIALS_FILE.exists():
        logger.error(f"credentials.json not found at {Config.CREDENTIALS_FILE}")
        logger.error("Please download it from Google Cloud Console and place it in the project root")
        return False

    try:
        flow = InstalledAppFlow.from_client_secrets_file(
            str(Config.CREDENTIALS_FILE),
            Config.GOOGLE_SCOPES
        )
        logger.info("Opening browser for authentication...")
        creds = flow.run_local_server(port=0)

        with open(Config.TOKEN_FILE, "w") as token_file:
            token_file.write(creds.to_json())

        logger.info(f"Authentication successful! Token saved to {Config.TOKEN_FILE}")
        return True

    except Exception as e:
        logger.error(f"Authentication flow failed: {e}", exc_info=True)
        return False


def get_calendar_service() -> Optional[Resource]:
    """
    Build the authenticated Calendar v3 resource from token.json.

    Returns:
        Calendar API resource, or None if authentication fails
    """
    logger.info("Initializing Google Calendar service")

    creds = _authenticate()
    if not creds:
        logger.error("Authentication failed: token.json is missing or invalid")
        logger.error("Run create_initial_token() once to authorize calendar access")
        return None

    try:
        service = build("calendar", "v3", credentials=creds)
    except HttpError as err:
        logger.error(f"HTTP error occurred building the calendar service: {err}", exc_info=True)
        return None

    logger.info("Google Calendar service initialized")
    return service
