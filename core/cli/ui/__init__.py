"""
core/cli/ui - Rich 콘솔 출력 유틸리티
"""

from .console import (
    get_console,
    get_logger,
    print_error,
    print_header,
    print_info,
    print_success,
    print_warning,
)

__all__ = [
    "get_console",
    "get_logger",
    "print_success",
    "print_error",
    "print_warning",
    "print_info",
    "print_header",
]
