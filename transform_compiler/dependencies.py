"""FastAPI dependency injection."""

from __future__ import annotations

from transform_compiler.config import Settings, settings
from transform_compiler.engine.config import CompilerConfig

_compiler_config = CompilerConfig()


def get_settings() -> Settings:
    return settings


def get_compiler_config() -> CompilerConfig:
    return _compiler_config
