"""
Limits and user-facing error messages shared by routes and services.

Error messages are returned verbatim in the `{"error": ...}` body, so the
frontend can show them directly.
"""

# At most this many product names are woven into one answer
MAX_MODELS = 3

# Snippets per product that make it into the search digest
DIGEST_ITEMS_PER_MODEL = 4

# Upstream error bodies are cut to this length before reaching the client
UPSTREAM_ERROR_PREVIEW = 200

ERROR_MESSAGES = {
    'TITLE_REQUIRED': 'title required',
    'MODEL_REQUIRED': 'model required',
    'MISSING_SEARCH_DATA': 'missing search data',
    'CREDENTIAL_NOT_CONFIGURED': 'credential not configured',
    'SEARCH_UNAVAILABLE': 'could not retrieve results, please try again later',
    'SEARCH_EMPTY': 'could not retrieve results: no results found for this model',
    'GENERATION_FAILED': 'generation failed',
    'INVALID_REQUEST': 'invalid request body',
}
