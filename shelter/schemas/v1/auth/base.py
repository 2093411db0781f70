from shelter.schemas.base import CommonBaseSchema


class CurrentUserSchema(CommonBaseSchema):
    """
    Аутентифицированный пользователь запроса.

    Attributes:
        id: ID пользователя.
        email: Email.
        role: Роль.
    """

    id: int
    email: str
    role: str
