"""Build an OpenAPI 3.0 document from declared routes and serve it over WSGI."""

__version__ = "0.1.0"
__all__ = [
    "app",
    "models",
    "redirect",
    "resource",
    "responses",
    "route",
    "scope",
    "service_config",
    "spec",
    "utils",
]