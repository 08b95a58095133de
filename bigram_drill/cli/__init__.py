from .cli import CLI, build_parser, build_session, main

__all__ = ["CLI", "build_parser", "build_session", "main"]
