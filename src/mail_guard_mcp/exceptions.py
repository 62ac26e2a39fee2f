"""Custom exceptions for mail-guard-mcp."""


class MailGuardError(Exception):
    """Base exception for mail-guard-mcp."""


class ConfigError(MailGuardError):
    """Raised when there is a configuration error.

    Carries the location of the problem when it comes from a config file.
    """

    def __init__(
        self,
        message: str,
        file_path: str | None = None,
        line: int | None = None,
        col: int | None = None,
    ) -> None:
        self.file_path = file_path
        self.line = line
        self.col = col
        full_message = message
        if file_path:
            location = f" in {file_path}"
            if line is not None:
                location += f" at line {line}"
                if col is not None:
                    location += f", column {col}"
            full_message = f"Configuration error{location}: {message}"
        super().__init__(full_message)


class MessageNotFoundError(MailGuardError):
    """Raised when a message id does not exist in the selected folder."""

    def __init__(self, message_id: str, folder: str | None = None) -> None:
        self.message_id = message_id
        self.folder = folder
        where = f"{folder}/{message_id}" if folder else message_id
        super().__init__(f"Message not found: {where}")


class NotConnectedError(MailGuardError, RuntimeError):
    """Raised when a connector is used before connect() was called."""

    def __init__(self) -> None:
        super().__init__("Not connected. Call connect() first.")
