from abc import ABC, abstractmethod


class IEmailSender(ABC):
    """Outbound email transport"""

    @abstractmethod
    async def send(self, to: str, subject: str, html: str) -> None:
        pass
