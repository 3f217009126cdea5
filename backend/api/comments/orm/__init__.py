from api.comments.orm.comment_model import CommentModel

__all__ = ["CommentModel"]
