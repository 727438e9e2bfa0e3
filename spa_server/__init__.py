from .config import ServerConfig, load_config
from .content_types import CONTENT_TYPES, content_type_for
from .files import FileReadError, read_file
from .handlers import RequestProcessor, build_handler, build_handler_from_config
from .resolver import Resolver

__all__ = [
    "CONTENT_TYPES",
    "FileReadError",
    "RequestProcessor",
    "Resolver",
    "ServerConfig",
    "build_handler",
    "build_handler_from_config",
    "content_type_for",
    "load_config",
    "read_file",
]
