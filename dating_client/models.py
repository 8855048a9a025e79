# dating_client/models.py

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, Mapping


@dataclass(frozen=True)
class User:
    """
    The logged-in member as returned by register / login.
    """

    id: str
    display_name: str
    email: str
    token: str

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "User":
        return cls(
            id=str(data["id"]),
            display_name=str(data["displayName"]),
            email=str(data["email"]),
            token=str(data["token"]),
        )

    def to_json(self) -> Dict[str, str]:
        return {
            "id": self.id,
            "displayName": self.display_name,
            "email": self.email,
            "token": self.token,
        }

    def dumps(self) -> str:
        return json.dumps(self.to_json())

    @classmethod
    def loads(cls, raw: str) -> "User":
        return cls.from_json(json.loads(raw))


@dataclass(frozen=True)
class Member:
    """
    A member as listed by the Member API.
    """

    id: str
    display_name: str
    email: str
    created_at: str

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "Member":
        return cls(
            id=str(data["id"]),
            display_name=str(data["displayName"]),
            email=str(data["email"]),
            created_at=str(data["createdAt"]),
        )


@dataclass
class LoginCredentials:
    """
    Two-way bound login form state.
    """

    email: str = ""
    password: str = ""

    def to_json(self) -> Dict[str, str]:
        return {"email": self.email, "password": self.password}

    def clear(self) -> None:
        self.email = ""
        self.password = ""


@dataclass
class RegisterForm:
    email: str = ""
    display_name: str = ""
    password: str = ""

    def to_json(self) -> Dict[str, str]:
        return {
            "email": self.email,
            "displayName": self.display_name,
            "password": self.password,
        }

    def clear(self) -> None:
        self.email = ""
        self.display_name = ""
        self.password = ""


__all__ = ["User", "Member", "LoginCredentials", "RegisterForm"]
