"""
Dependency injection utilities
"""
from fastapi import Depends
from sqlalchemy.orm import Session

from landing_backend.app.db.session import SessionLocal
from landing_backend.app.services.application_service import ApplicationService
from landing_backend.app.services.blog_service import BlogService
from landing_backend.app.services.card_configuration_service import CardConfigurationService
from landing_backend.app.services.curriculum_service import CurriculumService
from landing_backend.app.services.external_service_client import get_external_service_client
from landing_backend.app.services.skill_service import SkillService
from landing_backend.app.services.solution_service import SolutionService
from landing_backend.app.services.user_service import UserService
from landing_backend.app.services.vacancy_service import VacancyService
from landing_backend.app.services.work_experience_service import WorkExperienceService


def get_db() -> Session:
    """Get database session"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_vacancy_service(db: Session = Depends(get_db)) -> VacancyService:
    return VacancyService(db)


def get_application_service(db: Session = Depends(get_db)) -> ApplicationService:
    return ApplicationService(db)


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    return UserService(db, notifier=get_external_service_client())


def get_card_configuration_service(users: UserService = Depends(get_user_service)) -> CardConfigurationService:
    return users.card_configurations


def get_curriculum_service(users: UserService = Depends(get_user_service)) -> CurriculumService:
    return users.curricula


def get_skill_service(users: UserService = Depends(get_user_service)) -> SkillService:
    return SkillService(users.db, users)


def get_work_experience_service(users: UserService = Depends(get_user_service)) -> WorkExperienceService:
    return WorkExperienceService(users.db, users)


def get_blog_service(users: UserService = Depends(get_user_service)) -> BlogService:
    return BlogService(users.db, users)


def get_solution_service(db: Session = Depends(get_db)) -> SolutionService:
    return SolutionService(db)
