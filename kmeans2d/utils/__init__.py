from .logging import setup_logger, format_run_prefix

__all__ = ["setup_logger", "format_run_prefix"]
