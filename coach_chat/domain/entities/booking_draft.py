from dataclasses import dataclass


@dataclass
class BookingDraft:
    name: str = ""
    email: str = ""

    def is_complete(self) -> bool:
        return bool(self.name.strip()) and bool(self.email.strip())

    def clear(self) -> None:
        self.name = ""
        self.email = ""
