from api.disciplines.orm.discipline_model import DisciplineModel

__all__ = ["DisciplineModel"]
