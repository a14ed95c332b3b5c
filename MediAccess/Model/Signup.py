from pydantic import BaseModel, ConfigDict


class SignupData(BaseModel):
    model_config = ConfigDict(frozen=True)
    full_name: str
    email: str
    password: str
    phone_number: str
