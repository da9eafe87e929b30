"""Access-log serializers for services that expose formatted catalog data.

Notes:
- API keys never reach the log: x-api-key is removed from headers.
"""
