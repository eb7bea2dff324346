from pydantic import BaseModel, JsonValue


class FaucetResponse(BaseModel):
    status_code: int
    body: JsonValue = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300
