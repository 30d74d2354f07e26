from core.models.base import WireModel


class UserOut(WireModel):
    id: str
    name: str | None
    avatar: str | None
    email: str
