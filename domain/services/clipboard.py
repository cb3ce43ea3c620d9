from abc import ABC, abstractmethod


class Clipboard(ABC):
    """Interface for the platform clipboard."""

    @abstractmethod
    def copy_text(self, text: str) -> bool:
        """Place ``text`` on the clipboard. Returns ``False`` if it could not."""
        raise NotImplementedError
