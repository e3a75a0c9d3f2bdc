import uuid


class UserNotFoundError(LookupError):
    """Пользователь не существует"""

    def __init__(self, user_id: uuid.UUID) -> None:
        self.user_id = user_id
        super().__init__("User not found")
