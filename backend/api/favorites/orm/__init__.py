from api.favorites.orm.favorite_model import FavoriteModel

__all__ = ["FavoriteModel"]
