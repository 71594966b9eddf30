"""Bridge pattern: text sharers delegating text preparation to handlers."""

from abc import ABC, abstractmethod

from structural_patterns.sharing import xor_encrypt


class TextHandler(ABC):
    """Prepares a message before it is shared."""

    @abstractmethod
    def prepare_message(self, text: str) -> str:
        """Return the text to be shared."""


class PlainTextHandler(TextHandler):
    def prepare_message(self, text: str) -> str:
        print("PlainTextHandler::prepareMessage() returning original text...")
        return text


class EncryptedTextHandler(TextHandler):
    def prepare_message(self, text: str) -> str:
        print("EncryptedTextHandler::prepareMessage() encrypting text...")
        return xor_encrypt(text)


class TextSharer(ABC):
    """Shares text after passing it through its handler."""

    def __init__(self, handler: TextHandler) -> None:
        self._handler = handler

    @property
    @abstractmethod
    def label(self) -> str:
        """Name the sharer reports itself under."""

    def share_text(self, text: str) -> bool:
        """Prepare text with the handler, then share it."""
        return self._share_prepared_text(self._handler.prepare_message(text))

    def _share_prepared_text(self, text: str) -> bool:
        print(f"{self.label}::shareText() sharing text: {text}")
        return True


class EmailSharer(TextSharer):
    label = "EmailShare"


class EncryptedEmailSharer(TextSharer):
    label = "EmailShareEncrypted"


def main(argv: list[str] | None = None) -> int:
    """Share a message in plain and encrypted form."""
    content = "Beam me up, Scotty!"
    for sharer in (
        EmailSharer(PlainTextHandler()),
        EncryptedEmailSharer(EncryptedTextHandler()),
    ):
        sharer.share_text(content)
        print()
    return 0