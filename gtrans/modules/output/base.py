"""Output strategy abstract class."""

from abc import ABC, abstractmethod


class OutputStrategy(ABC):
    """Delivers a text to the user in a given target language."""

    @abstractmethod
    def deliver(self, text: str, target: str) -> None:
        """Deliver ``text`` translated into ``target``.

        Raises:
            GtransError: On any failure the user should see.
        """
