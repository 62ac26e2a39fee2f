"""Abstract base class for mail transports."""

from abc import ABC, abstractmethod
from types import TracebackType

from mail_guard_mcp.email.models import Folder, FolderStats, Message, SearchOptions


class BaseConnector(ABC):
    """Abstract base class defining the interface for mail transports.

    Message ids are only meaningful within the currently selected folder, so
    callers select a folder before listing, reading, moving or copying.
    """

    @abstractmethod
    def connect(self) -> None:
        """Establish connection to the mail server."""
        ...

    @abstractmethod
    def disconnect(self) -> None:
        """Close connection to the mail server."""
        ...

    @abstractmethod
    def select_folder(self, folder: str) -> None:
        """Select the folder subsequent operations apply to."""
        ...

    @abstractmethod
    def list_folders(self) -> list[Folder]:
        """List all available folders/mailboxes."""
        ...

    @abstractmethod
    def list_messages(self, options: SearchOptions | None = None) -> list[Message]:
        """List messages in the selected folder.

        Args:
            options: Filter and pagination criteria. Defaults to the first 50
                messages regardless of read state.

        Returns:
            Messages in listing order.
        """
        ...

    @abstractmethod
    def get_message(self, message_id: str) -> Message:
        """Fetch a single message from the selected folder.

        Raises:
            MessageNotFoundError: If the id does not exist.
        """
        ...

    @abstractmethod
    def move_message(self, message_id: str, destination: str) -> None:
        """Move a message from the selected folder to destination."""
        ...

    @abstractmethod
    def copy_message(self, message_id: str, destination: str) -> None:
        """Copy a message from the selected folder to destination."""
        ...

    @abstractmethod
    def get_folder_stats(self, folder: str) -> FolderStats:
        """Return unread and total message counts for a folder."""
        ...

    def __enter__(self) -> "BaseConnector":
        """Context manager entry - connect to server."""
        self.connect()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Context manager exit - disconnect from server."""
        self.disconnect()
