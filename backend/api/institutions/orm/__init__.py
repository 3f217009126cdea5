from api.institutions.orm.institution_model import InstitutionModel, PlanType

__all__ = ["InstitutionModel", "PlanType"]
