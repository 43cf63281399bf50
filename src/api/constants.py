"""API-related constants."""

# HTTP Headers
ORIGIN_HEADER = "Origin"
CONTENT_LENGTH_HEADER = "content-length"

# Cross-origin policy
JSON_CONTENT_TYPE = "application/json"
CORS_ALLOWED_METHODS = ("GET", "OPTIONS", "POST", "DELETE", "PUT")
CORS_ALLOWED_HEADERS = (
    "Origin",
    "X-Requested-With",
    "Content-Type",
    "X-Content-Type",
    "Authentication",
    "Authorization",
    "X-Access-Token",
    "Accept",
)

# Request logging
WEBSOCKET_METHOD = "WEBSOCKET"
