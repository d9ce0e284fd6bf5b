from .app import SESSION_FACTORY, create_app

__all__ = ["SESSION_FACTORY", "create_app"]
