from landing_backend.app.models.user import User
from landing_backend.app.models.card_configuration import CardConfiguration
from landing_backend.app.models.curriculum import Curriculum
from landing_backend.app.models.skill import Skill
from landing_backend.app.models.work_experience import WorkExperience
from landing_backend.app.models.blog import Blog, BlogSection, BlogSectionListStyle, BlogSectionType
from landing_backend.app.models.vacancy import Vacancy
from landing_backend.app.models.application import Application
from landing_backend.app.models.solution import Feature, Solution
