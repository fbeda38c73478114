from moviecatalog.api.controller import Controller, HttpMethod

__all__ = ["Controller", "HttpMethod"]
