"""Environment configuration for page-composer.

Categories:
    codegen: semantic tags and indentation
    catalog: snippet catalog file
    logging: CLI log level
"""

from .lib import (
    EnvConfig,
    EnvVar,
    get_catalog_path,
    get_environment,
    get_indent_width,
    get_semantic_default,
    list_environment_variables,
)

__all__ = [
    # Core types
    "EnvConfig",
    "EnvVar",
    # Main interface
    "get_environment",
    # Convenience functions
    "get_semantic_default",
    "get_indent_width",
    "get_catalog_path",
    # Introspection
    "list_environment_variables",
]
