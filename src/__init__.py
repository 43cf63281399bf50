"""Auth server - HTTP front-end of the authentication service.

Architecture Overview:
- **API Layer**: FastAPI application, controllers and the request pipeline
- **Core Layer**: Configuration, logging, shutdown and shared types

Every request passes through the same pipeline: request logging, CORS
headers, controller dispatch and, on failure, error reporting.
"""
