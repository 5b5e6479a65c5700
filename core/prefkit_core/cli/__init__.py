from .main import build_parser, main, run_cli

__all__ = [
    "build_parser",
    "main",
    "run_cli",
]
