"""Centralized constants for the letter relay."""

# MIME Types - Google Apps
GOOGLE_MIME_TYPES = {
    'doc': 'application/vnd.google-apps.document',
    'folder': 'application/vnd.google-apps.folder',
}

# Storage root for every letter
LETTERS_FOLDER_NAME = 'Letters'

# Docs insertion point right after the implicit start-of-body marker
DOCUMENT_START_INDEX = 1

DOCUMENT_URL_TEMPLATE = 'https://docs.google.com/document/d/{document_id}/edit'

# Drive field selectors
FOLDER_FIELDS = 'files(id, name)'
LETTER_LIST_FIELDS = 'files(id, name, webViewLink, createdTime)'
PARENT_FIELDS = 'id, parents'

# Response messages
MSG_LETTER_SAVED = 'Letter saved successfully'
MSG_MISSING_FIELDS = 'Missing required fields'
MSG_TOKEN_REQUIRED = 'Access token is required'
MSG_AUTH_FAILED = 'Authentication failed'
MSG_SAVE_FAILED = 'Failed to save letter to Google Drive'
MSG_LIST_FAILED = 'Failed to fetch letters from Google Drive'
MSG_READ_FAILED = 'Failed to fetch letter from Google Drive'
