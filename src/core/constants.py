"""Core application constants."""

# Configuration defaults
DEFAULT_PORT = 9004
DEFAULT_DOMAIN = "http://localhost"
MIN_PORT = 1
MAX_PORT = 65535

# Security and redaction
REDACTED = "[REDACTED]"
SENSITIVE_HEADERS = [
    "authorization",
    "authentication",
    "cookie",
    "set-cookie",
    "x-access-token",
    "proxy-authorization",
]
