"""
Google OAuth Scopes for the letter relay.

Letters only touch files the app itself creates, so Drive access is limited
to the drive.file scope.
"""

from typing import List

# Base OAuth scopes required for user identification
USERINFO_PROFILE_SCOPE = "https://www.googleapis.com/auth/userinfo.profile"
USERINFO_EMAIL_SCOPE = "https://www.googleapis.com/auth/userinfo.email"

BASE_SCOPES = [USERINFO_PROFILE_SCOPE, USERINFO_EMAIL_SCOPE]

# Google Drive scopes
DRIVE_FILE_SCOPE = "https://www.googleapis.com/auth/drive.file"

SCOPES = BASE_SCOPES + [DRIVE_FILE_SCOPE]


def get_scopes() -> List[str]:
    """
    Get the list of OAuth scopes requested at consent time.

    Returns:
        List of unique OAuth scopes, in request order.
    """
    return list(dict.fromkeys(SCOPES))
