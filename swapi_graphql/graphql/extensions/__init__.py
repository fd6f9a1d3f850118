from .error_handler import CustomErrorHandler, format_error

__all__ = ["CustomErrorHandler", "format_error"]
