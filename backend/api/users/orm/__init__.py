from api.users.orm.user_model import UserModel, UserRole

__all__ = ["UserModel", "UserRole"]
