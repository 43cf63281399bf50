"""Core infrastructure shared by the HTTP layer.

- **config**: Settings resolved once from the environment
- **logging**: Loguru sinks and standard library interception
- **shutdown**: Signal-driven process exit
- **exceptions**: Errors raised by misuse of the application wiring
- **types**: Handler and callback type aliases
"""
