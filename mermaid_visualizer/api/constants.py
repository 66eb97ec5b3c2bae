"""
API path constants.

Shared by the application factory, the convert router and the editor page.
"""

API_PREFIX = "/api/v1"
CONVERT_PATH = "/convert"
CONVERT_URL = f"{API_PREFIX}{CONVERT_PATH}"
