"""Custom exceptions for argsplit."""

USER_ERROR_EXIT_CODE = 1
FATAL_ERROR_EXIT_CODE = 2


class ArgsplitError(Exception):
    """Base exception for argsplit errors."""

    exit_code = USER_ERROR_EXIT_CODE

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class UserError(ArgsplitError):
    """Raised when the command line itself is invalid."""

    exit_code = USER_ERROR_EXIT_CODE


class DoubleDashAfterPositionalError(UserError):
    """Raised when '--' follows a positional argument."""

    def __init__(self, token: str, last_positional: str):
        super().__init__(
            f"Double dash ('{token}') cannot be specified after the positional "
            f"argument ('{last_positional}')."
        )
        self.token = token
        self.last_positional = last_positional


class FatalError(ArgsplitError):
    """Raised when storage for classified tokens cannot be provided."""

    exit_code = FATAL_ERROR_EXIT_CODE


class AllocationError(FatalError):
    """Raised when an allocator cannot provide a buffer."""

    def __init__(self, what: str, size: int | None = None):
        message = f"Unable to allocate memory for {what}"
        if size is not None:
            message += f" ({size} slots)"
        super().__init__(message + ".")
        self.what = what
        self.size = size


class CapacityExceededError(FatalError):
    """Raised when a fixed-capacity array is full."""

    def __init__(self, capacity: int, token: str):
        super().__init__(
            f"Fixed-capacity array is full ({capacity} slots), cannot store '{token}'"
        )
        self.capacity = capacity
        self.token = token


class ArrayReleasedError(ArgsplitError):
    """Raised when a string array is used after its storage was released."""

    # Misuse of storage, never bad input: reported like a fatal error.
    exit_code = FATAL_ERROR_EXIT_CODE

    def __init__(self, operation: str):
        super().__init__(f"Cannot {operation}: array storage has been released")
        self.operation = operation


class InvalidConfigError(ArgsplitError):
    """Raised when config file has invalid format or content."""

    def __init__(
        self,
        path: str,
        line_num: int | None = None,
        message: str = "Invalid config format",
    ):
        full_message = f"Invalid config in {path}"
        if line_num:
            full_message += f" at line {line_num}"
        full_message += f": {message}"
        super().__init__(full_message)
        self.path = path
        self.line_num = line_num
