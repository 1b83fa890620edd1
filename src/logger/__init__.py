from logger.u_logger import configure_logger, get_logger

__all__ = [
    "configure_logger",
    "get_logger",
]
