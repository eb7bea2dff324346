class FaucetError(Exception):
    def __init__(self, url: str, message: str) -> None:
        self.url = url
        self.message = message

    def __str__(self) -> str:
        return f"Faucet request to {self.url} failed: {self.message}"
