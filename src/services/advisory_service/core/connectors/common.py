from abc import ABC, abstractmethod


class AdvisoryTextGenerator(ABC):
    """
    Turns a prompt into free text. Implementations may raise any exception;
    the advisory service maps failures to a fallback message.
    """

    @abstractmethod
    def generate(self, prompt: str) -> str: ...
