"""Text sharing services built by inheritance, one subclass per combination."""

from abc import ABC, abstractmethod

DEFAULT_KEY = 64


def xor_encrypt(text: str, key: int = DEFAULT_KEY) -> str:
    """XOR every character of text with key; applying it twice restores text."""
    return "".join(chr(ord(char) ^ key) for char in text)


def _share(service: str, text: str) -> bool:
    print(f"{service}::shareText() sharing text: {text}")
    return True


def _encrypting(service: str, text: str) -> str:
    print(f"{service}::shareText() encrypting text...")
    return xor_encrypt(text)


class TextShare(ABC):
    """Interface of services that share a piece of text."""

    @abstractmethod
    def share_text(self, text: str) -> bool:
        """Share text; return True on success."""


class EmailShare(TextShare):
    def share_text(self, text: str) -> bool:
        return _share("EmailShare", text)


class SMSShare(TextShare):
    def share_text(self, text: str) -> bool:
        return _share("SMSShare", text)


class EmailShareEncrypted(EmailShare):
    """E-mail sharing that encrypts the text first."""

    def share_text(self, text: str) -> bool:
        return super().share_text(_encrypting("EmailShareEncrypted", text))


class SMSShareEncrypted(SMSShare):
    """SMS sharing that encrypts the text first."""

    def share_text(self, text: str) -> bool:
        return super().share_text(_encrypting("SMSShareEncrypted", text))


def main(argv: list[str] | None = None) -> int:
    """Share a message through every service."""
    content = "Beam me up, Scotty!"
    for service in (EmailShare(), SMSShare(), EmailShareEncrypted(), SMSShareEncrypted()):
        service.share_text(content)
        print()
    return 0