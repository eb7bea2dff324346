from typing import Any

__all__ = ["ClaimError", "MethodRejected", "InvalidAddress"]


class ClaimError(Exception):
    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message

    def __str__(self) -> str:
        return f"Claim rejected: {self.status_code} {self.message}"


class MethodRejected(ClaimError):
    def __init__(self, method: str) -> None:
        super().__init__(405, "Method not allowed")
        self.method = method


class InvalidAddress(ClaimError):
    def __init__(self, value: Any = None) -> None:
        super().__init__(400, "Invalid wallet address")
        self.value = value
