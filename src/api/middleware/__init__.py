"""Request pipeline package for cross-cutting request/response concerns.

- **RequestPipelineMiddleware**: Runs the ordered request handlers before
  controller dispatch and feeds failures to the error handlers
- **log_request_information**: Request handler logging every request
- **apply_cors_headers**: Request handler granting cross-origin access
- **report_error**: Error handler logging unhandled failures

Per request the order is fixed: logging, then CORS headers, then dispatch,
then error reporting if anything raised.
"""
