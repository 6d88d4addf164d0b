from .logger import get_logger
from .query_builder import build_query

__all__ = ["get_logger", "build_query"]
