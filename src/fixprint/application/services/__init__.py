from .print_service import InputUnavailableError, PrintLogService, PrintRequest

__all__ = ["InputUnavailableError", "PrintLogService", "PrintRequest"]
