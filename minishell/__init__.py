"""Parts of a small shell: lexer, environment, built-ins, command execution and prompt."""

__version__ = "0.1.0"

__all__ = ["builtins", "environment", "executor", "lexer", "prompt", "utils"]