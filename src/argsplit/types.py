"""
Type aliases for argsplit.

This module provides centralized type definitions used throughout the package
to keep signatures consistent between the classifier, its storage and the CLI.

Type Aliases:
    ArgsList: List of raw command-line tokens
    TokenList: Read-only ordered view of classified tokens
    Buffer: Backing storage slots handed out by an allocator
    ExitCode: Integer representing exit codes
    ConfigData: Dictionary representing raw configuration key/values
"""

from typing import Dict, List, Optional, Tuple

ArgsList = List[str]
"""List of string arguments, usually ``sys.argv``."""

TokenList = Tuple[str, ...]
"""Ordered, read-only view of the tokens stored in a string array."""

Buffer = List[Optional[str]]
"""Fixed-size list of slots; unused slots hold ``None``."""

ExitCode = int
"""Integer representing process exit codes (0 ok, 1 user error, 2 fatal)."""

ConfigData = Dict[str, str]
"""Dictionary of raw configuration keys and values as read from a file."""
