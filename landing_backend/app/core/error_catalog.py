"""
Error catalogs per module: stable error code, user-facing message (Spanish), HTTP status.
"""
from landing_backend.app.core.exceptions import ErrorDefinition

_DATABASE_ERROR_MESSAGE = "Error en la base de datos"
_USER_MISSING_MESSAGE = "El usuario no existe"
_INVALID_USER_ID_MESSAGE = "El ID de usuario no es válido"


class VacancyErrors:
    INVALID_JOB_TITLE = ErrorDefinition("VACANCY_INVALID_JOB_TITLE", "El título del puesto no puede estar vacío", 400)
    INVALID_MODE = ErrorDefinition("VACANCY_INVALID_MODE", "La modalidad debe ser Remoto, Presencial o Híbrido", 400)
    INVALID_YEARS_EXPERIENCE = ErrorDefinition(
        "VACANCY_INVALID_YEARS_EXPERIENCE",
        "Los años de experiencia deben ser un número entero no negativo",
        400,
    )
    INVALID_STATUS = ErrorDefinition("VACANCY_INVALID_STATUS", "El estado debe ser open, closed o on_hold", 400)
    INVALID_STACK = ErrorDefinition("VACANCY_INVALID_STACK", "Debe incluir al menos una tecnología requerida", 400)
    NOT_FOUND = ErrorDefinition("VACANCY_NOT_FOUND", "Vacante no encontrada", 404)
    SLUG_NOT_FOUND = ErrorDefinition("VACANCY_SLUG_NOT_FOUND", "Vacante con ese slug no encontrada", 404)
    CLOSED = ErrorDefinition("VACANCY_CLOSED", "Esta vacante está cerrada y no acepta nuevas aplicaciones", 403)
    INVALID_SLUG = ErrorDefinition("VACANCY_INVALID_SLUG", "El slug debe contener al menos una letra o número", 400)
    SLUG_ALREADY_EXISTS = ErrorDefinition("VACANCY_SLUG_ALREADY_EXISTS", "Ya existe una vacante con ese slug", 409)
    DATABASE_ERROR = ErrorDefinition("VACANCY_DATABASE_ERROR", _DATABASE_ERROR_MESSAGE, 500)


class ApplicationErrors:
    INVALID_VACANCY_ID = ErrorDefinition("APPLICATION_INVALID_VACANCY_ID", "El ID de vacante no es válido", 400)
    INVALID_NAME = ErrorDefinition("APPLICATION_INVALID_NAME", "El nombre no puede estar vacío", 400)
    INVALID_EMAIL = ErrorDefinition("APPLICATION_INVALID_EMAIL", "El email debe tener un formato válido", 400)
    INVALID_PHONE = ErrorDefinition("APPLICATION_INVALID_PHONE", "El teléfono no puede estar vacío", 400)
    INVALID_CV_URL = ErrorDefinition("APPLICATION_INVALID_CV_URL", "La URL del CV debe tener un formato válido", 400)
    INVALID_STATUS = ErrorDefinition(
        "APPLICATION_INVALID_STATUS",
        "El estado debe ser pending, in_review, accepted o rejected",
        400,
    )
    NOT_FOUND = ErrorDefinition("APPLICATION_NOT_FOUND", "Aplicación no encontrada", 404)
    NOT_CREATED = ErrorDefinition("APPLICATION_NOT_CREATED", "Aplicación no creada", 500)
    VACANCY_NOT_FOUND = ErrorDefinition("APPLICATION_VACANCY_NOT_FOUND", "La vacante no existe", 404)
    VACANCY_CLOSED = ErrorDefinition(
        "APPLICATION_VACANCY_CLOSED",
        "La vacante está cerrada y no acepta nuevas aplicaciones",
        403,
    )
    ALREADY_APPLIED = ErrorDefinition(
        "APPLICATION_ALREADY_APPLIED", "Ya has aplicado a esta vacante con este email", 409
    )
    VACANCY_INACTIVE = ErrorDefinition("APPLICATION_VACANCY_INACTIVE", "La vacante no está activa", 403)
    ALREADY_EXISTS = ErrorDefinition(
        "APPLICATION_ALREADY_EXISTS", "Ya existe una aplicación con este email para esta vacante", 409
    )
    CV_UPLOAD_ERROR = ErrorDefinition(
        "APPLICATION_CV_UPLOAD_ERROR", "Error al subir el CV. Por favor, inténtalo de nuevo", 500
    )
    CV_TOO_LARGE = ErrorDefinition(
        "APPLICATION_CV_TOO_LARGE", "El tamaño del CV excede el límite permitido (5MB)", 400
    )
    DATABASE_ERROR = ErrorDefinition("APPLICATION_DATABASE_ERROR", _DATABASE_ERROR_MESSAGE, 500)


class UserErrors:
    INVALID_EMAIL = ErrorDefinition("USER_INVALID_EMAIL", "El formato del email no es válido", 400)
    INVALID_NAME = ErrorDefinition("USER_INVALID_NAME", "El nombre no puede estar vacío", 400)
    ALREADY_EXISTS = ErrorDefinition("USER_ALREADY_EXISTS", "Ya existe un usuario con ese email", 409)
    NOT_FOUND = ErrorDefinition("USER_NOT_FOUND", "Usuario no encontrado", 404)
    SLUG_NOT_FOUND = ErrorDefinition("USER_SLUG_NOT_FOUND", "Usuario con ese slug no encontrado", 404)
    INACTIVE = ErrorDefinition("USER_INACTIVE", "El usuario está inactivo", 403)
    DATABASE_ERROR = ErrorDefinition("USER_DATABASE_ERROR", _DATABASE_ERROR_MESSAGE, 500)
    EXTERNAL_SERVICE_ERROR = ErrorDefinition("USER_EXTERNAL_SERVICE_ERROR", "Error en el servicio externo", 503)


class CardConfigurationErrors:
    INVALID_USER_ID = ErrorDefinition("CARD_CONFIG_INVALID_USER_ID", _INVALID_USER_ID_MESSAGE, 400)
    INVALID_COLOR = ErrorDefinition("CARD_CONFIG_INVALID_COLOR", "El color debe ser un código hexadecimal válido", 400)
    ALREADY_EXISTS = ErrorDefinition("CARD_CONFIG_ALREADY_EXISTS", "Ya existe una configuración para este usuario", 409)
    NOT_FOUND = ErrorDefinition("CARD_CONFIG_NOT_FOUND", "Configuración de tarjeta no encontrada", 404)
    USER_NOT_FOUND = ErrorDefinition("CARD_CONFIG_USER_NOT_FOUND", _USER_MISSING_MESSAGE, 404)
    DATABASE_ERROR = ErrorDefinition("CARD_CONFIG_DATABASE_ERROR", _DATABASE_ERROR_MESSAGE, 500)


class CurriculumErrors:
    INVALID_USER_ID = ErrorDefinition("CURRICULUM_INVALID_USER_ID", _INVALID_USER_ID_MESSAGE, 400)
    ALREADY_EXISTS = ErrorDefinition("CURRICULUM_ALREADY_EXISTS", "Ya existe un currículum para este usuario", 409)
    NOT_FOUND = ErrorDefinition("CURRICULUM_NOT_FOUND", "Currículum no encontrado", 404)
    USER_NOT_FOUND = ErrorDefinition("CURRICULUM_USER_NOT_FOUND", _USER_MISSING_MESSAGE, 404)
    DATABASE_ERROR = ErrorDefinition("CURRICULUM_DATABASE_ERROR", _DATABASE_ERROR_MESSAGE, 500)


class SkillErrors:
    INVALID_USER_ID = ErrorDefinition("SKILL_INVALID_USER_ID", _INVALID_USER_ID_MESSAGE, 400)
    INVALID_NAME = ErrorDefinition("SKILL_INVALID_NAME", "El nombre de la habilidad no puede estar vacío", 400)
    INVALID_URL = ErrorDefinition("SKILL_INVALID_URL", "La URL del certificado no tiene un formato válido", 400)
    NOT_FOUND = ErrorDefinition("SKILL_NOT_FOUND", "Habilidad no encontrada", 404)
    USER_NOT_FOUND = ErrorDefinition("SKILL_USER_NOT_FOUND", _USER_MISSING_MESSAGE, 404)
    DATABASE_ERROR = ErrorDefinition("SKILL_DATABASE_ERROR", _DATABASE_ERROR_MESSAGE, 500)


class WorkExperienceErrors:
    INVALID_USER_ID = ErrorDefinition("WORK_EXPERIENCE_INVALID_USER_ID", _INVALID_USER_ID_MESSAGE, 400)
    INVALID_ROLE = ErrorDefinition("WORK_EXPERIENCE_INVALID_ROLE", "El rol no puede estar vacío", 400)
    INVALID_COMPANY_NAME = ErrorDefinition(
        "WORK_EXPERIENCE_INVALID_COMPANY_NAME", "El nombre de la empresa no puede estar vacío", 400
    )
    INVALID_FROM_YEAR = ErrorDefinition(
        "WORK_EXPERIENCE_INVALID_FROM_YEAR", "La fecha de inicio debe tener un formato válido", 400
    )
    INVALID_UNTIL_YEAR = ErrorDefinition(
        "WORK_EXPERIENCE_INVALID_UNTIL_YEAR", "La fecha de fin debe tener un formato válido", 400
    )
    UNTIL_BEFORE_FROM = ErrorDefinition(
        "WORK_EXPERIENCE_UNTIL_BEFORE_FROM", "La fecha de fin no puede ser anterior a la fecha de inicio", 400
    )
    NOT_FOUND = ErrorDefinition("WORK_EXPERIENCE_NOT_FOUND", "Experiencia laboral no encontrada", 404)
    USER_NOT_FOUND = ErrorDefinition("WORK_EXPERIENCE_USER_NOT_FOUND", _USER_MISSING_MESSAGE, 404)
    DATABASE_ERROR = ErrorDefinition("WORK_EXPERIENCE_DATABASE_ERROR", _DATABASE_ERROR_MESSAGE, 500)


class BlogErrors:
    INVALID_USER_ID = ErrorDefinition("BLOG_INVALID_USER_ID", _INVALID_USER_ID_MESSAGE, 400)
    INVALID_TITLE = ErrorDefinition("BLOG_INVALID_TITLE", "El título no puede estar vacío", 400)
    INVALID_SECTION_TYPE = ErrorDefinition(
        "BLOG_INVALID_SECTION_TYPE", "El tipo de sección debe ser uno de los valores permitidos", 400
    )
    INVALID_LIST_STYLE = ErrorDefinition("BLOG_INVALID_LIST_STYLE", "El estilo de lista debe ser ordered o unordered", 400)
    MISSING_REQUIRED_FIELDS = ErrorDefinition(
        "BLOG_MISSING_REQUIRED_FIELDS", "Faltan campos requeridos para el tipo de sección especificado", 400
    )
    NOT_FOUND = ErrorDefinition("BLOG_NOT_FOUND", "Blog no encontrado", 404)
    SECTION_NOT_FOUND = ErrorDefinition("BLOG_SECTION_NOT_FOUND", "Sección de blog no encontrada", 404)
    USER_NOT_FOUND = ErrorDefinition("BLOG_USER_NOT_FOUND", _USER_MISSING_MESSAGE, 404)
    SLUG_ALREADY_EXISTS = ErrorDefinition("BLOG_SLUG_ALREADY_EXISTS", "Ya existe un blog con ese slug", 409)
    DATABASE_ERROR = ErrorDefinition("BLOG_DATABASE_ERROR", _DATABASE_ERROR_MESSAGE, 500)


class SolutionErrors:
    NOT_FOUND = ErrorDefinition("SOLUTION_NOT_FOUND", "No se encontró la solución", 404)
    FEATURE_NOT_FOUND = ErrorDefinition("SOLUTION_FEATURE_NOT_FOUND", "No se encontró la característica", 404)
    DATABASE_ERROR = ErrorDefinition("SOLUTION_DATABASE_ERROR", _DATABASE_ERROR_MESSAGE, 500)
    VALIDATION_ERROR = ErrorDefinition("SOLUTION_VALIDATION_ERROR", "Error de validación", 400)
