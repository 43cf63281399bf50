"""HTTP layer of the auth server front-end.

Key components:
- **server**: Orchestrator owning configuration, composition and lifecycle
- **application**: Builder and adapter over FastAPI and uvicorn
- **controllers**: Route-owning units in fixed registration order
- **middleware**: Request pipeline with logging, CORS and error reporting
- **utils**: orjson-backed JSON responses
"""
