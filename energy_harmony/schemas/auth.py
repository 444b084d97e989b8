from pydantic import BaseModel
from energy_harmony.schemas.user import UserResponse

class AuthData(BaseModel):
    token: str
    user: UserResponse
