from dataclasses import dataclass


@dataclass(frozen=True)
class TokenClaims:
    user_id: str
    username: str
    email: str

    def to_payload(self) -> dict:
        return {"userId": self.user_id, "username": self.username, "email": self.email}
