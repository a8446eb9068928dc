from gitstore.models import Git

__all__ = ["Git"]
