from .check_options import CheckOptions

__all__ = ["CheckOptions"]
