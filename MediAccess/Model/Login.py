from pydantic import BaseModel, ConfigDict


class LoginData(BaseModel):
    model_config = ConfigDict(frozen=True)
    email: str
    password: str
