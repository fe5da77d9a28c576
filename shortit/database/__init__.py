from .connection import Base, build_engine, build_session_factory

__all__ = ["Base", "build_engine", "build_session_factory"]
