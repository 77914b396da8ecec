"""
Blog service - posts and their ordered, typed sections.

Section fields required per type:
    paragraph / heading / subheading -> content
    image                            -> src, alt
    list                             -> style (ordered|unordered), items (>= 1)
"""
from sqlalchemy import String, cast, or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload, selectinload

from landing_backend.app.core.config import DEFAULT_LIMIT, DEFAULT_PAGE
from landing_backend.app.core.error_catalog import BlogErrors
from landing_backend.app.core.exceptions import AppError, handle_service_errors
from landing_backend.app.core.logging_config import get_logger
from landing_backend.app.models.blog import Blog, BlogSection, BlogSectionListStyle, BlogSectionType
from landing_backend.app.schemas.blog import BlogCreate, BlogSectionCreate, BlogSectionUpdate, BlogUpdate
from landing_backend.app.services.user_lookup import require_user
from landing_backend.app.services.user_service import UserService
from landing_backend.app.utils.pagination import paginate
from landing_backend.app.utils.slug import generate_slug
from landing_backend.app.utils.validators import is_blank

logger = get_logger("services.blog")

SECTION_FIELDS = ("order", "type", "content", "src", "alt", "caption", "style", "items")
REORDER_MISMATCH_MESSAGE = "Una o más secciones no existen o no pertenecen a este blog"


def _missing(field_name: str, section_type: BlogSectionType, extra: str = "") -> AppError:
    return AppError(
        BlogErrors.MISSING_REQUIRED_FIELDS,
        message=f"El campo '{field_name}' es requerido{extra} para el tipo de sección '{section_type.value}'",
    )


def validate_section(fields: dict) -> BlogSectionType:
    """Check the type-dependent required fields of a (possibly merged) section. Returns its type."""
    try:
        section_type = BlogSectionType(fields.get("type") or BlogSectionType.PARAGRAPH.value)
    except ValueError:
        raise AppError(BlogErrors.INVALID_SECTION_TYPE, details={"type": fields.get("type")}) from None

    match section_type:
        case BlogSectionType.PARAGRAPH | BlogSectionType.HEADING | BlogSectionType.SUBHEADING:
            if is_blank(fields.get("content")):
                raise _missing("content", section_type)
        case BlogSectionType.IMAGE:
            for name in ("src", "alt"):
                if is_blank(fields.get(name)):
                    raise _missing(name, section_type)
        case BlogSectionType.LIST:
            style = fields.get("style")
            if is_blank(style):
                raise _missing("style", section_type)
            if style not in {s.value for s in BlogSectionListStyle}:
                raise AppError(BlogErrors.INVALID_LIST_STYLE)
            if not fields.get("items"):
                raise _missing("items", section_type, extra=" y debe tener al menos un elemento")
    return section_type


def _build_section(payload: BlogSectionCreate, default_order: int) -> BlogSection:
    data = payload.model_dump(exclude_unset=True, include=set(SECTION_FIELDS))
    section_type = validate_section(data)
    data["type"] = section_type.value
    if data.get("order") is None:
        data["order"] = default_order
    return BlogSection(**data)


class BlogService:
    def __init__(self, db: Session, users: UserService | None = None):
        self.db = db
        self.users = users or UserService(db)

    def _guard(self, action: str):
        return handle_service_errors(self.db, BlogErrors.DATABASE_ERROR, logger, action)

    def _base_query(self, include_sections: bool):
        query = self.db.query(Blog).options(joinedload(Blog.user))
        if include_sections:
            query = query.options(selectinload(Blog.sections))
        return query

    def _slug_taken(self, slug: str, exclude_id: str | None = None) -> bool:
        query = self.db.query(Blog.id).filter(Blog.slug == slug)
        if exclude_id:
            query = query.filter(Blog.id != exclude_id)
        return query.first() is not None

    def _commit(self, blog: Blog) -> Blog:
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            raise AppError(BlogErrors.SLUG_ALREADY_EXISTS) from exc
        self.db.refresh(blog)
        return blog

    def find_all(
        self,
        page: int = DEFAULT_PAGE,
        limit: int = DEFAULT_LIMIT,
        is_active: bool | None = None,
        user_id: str | None = None,
        category: str | None = None,
        search: str | None = None,
        include_sections: bool = False,
    ) -> dict:
        with self._guard("blog.find_all"):
            query = self._base_query(include_sections)
            if is_active is not None:
                query = query.filter(Blog.is_active == is_active)
            if user_id:
                query = query.filter(Blog.user_id == user_id)
            if category:
                query = query.filter(cast(Blog.categories, String).ilike(f"%{category.strip()}%"))
            if search:
                term = f"%{search.strip()}%"
                query = query.filter(or_(Blog.title.ilike(term), Blog.short_description.ilike(term)))
            return paginate(query.order_by(Blog.created_at.desc()), page, limit)

    def find_by_id(self, blog_id: str, include_sections: bool = True) -> Blog:
        with self._guard("blog.find_by_id"):
            blog = self._base_query(include_sections).filter(Blog.id == blog_id).first()
            if not blog:
                raise AppError(BlogErrors.NOT_FOUND)
            return blog

    def find_by_slug(self, slug: str, include_sections: bool = True) -> Blog:
        with self._guard("blog.find_by_slug"):
            blog = self._base_query(include_sections).filter(Blog.slug == slug).first()
            if not blog:
                raise AppError(BlogErrors.NOT_FOUND)
            return blog

    def find_by_user_id(self, user_id: str, include_sections: bool = False) -> list[Blog]:
        with self._guard("blog.find_by_user_id"):
            require_user(self.users, user_id, BlogErrors.USER_NOT_FOUND)
            return (
                self._base_query(include_sections)
                .filter(Blog.user_id == user_id)
                .order_by(Blog.created_at.desc())
                .all()
            )

    def create(self, payload: BlogCreate) -> Blog:
        with self._guard("blog.create"):
            if is_blank(payload.title):
                raise AppError(BlogErrors.INVALID_TITLE)
            require_user(self.users, payload.user_id, BlogErrors.USER_NOT_FOUND)

            slug = generate_slug(payload.slug or "") or generate_slug(payload.title)
            if not slug:
                raise AppError(BlogErrors.INVALID_TITLE)
            if self._slug_taken(slug):
                raise AppError(BlogErrors.SLUG_ALREADY_EXISTS)

            blog = Blog(
                user_id=payload.user_id,
                title=payload.title.strip(),
                slug=slug,
                image=payload.image,
                short_description=payload.short_description,
                categories=list(payload.categories),
                is_active=True if payload.is_active is None else payload.is_active,
            )
            for index, section in enumerate(payload.sections):
                blog.sections.append(_build_section(section, index))
            self.db.add(blog)
            blog = self._commit(blog)
            logger.info("Blog created id=%s slug=%s sections=%d", blog.id, blog.slug, len(payload.sections))
            return blog

    def update(self, blog_id: str, payload: BlogUpdate) -> Blog:
        """A non-empty `sections` list replaces every existing section."""
        with self._guard("blog.update"):
            blog = self.find_by_id(blog_id)
            data = payload.model_dump(exclude_unset=True, exclude={"sections"})
            data = {k: v for k, v in data.items() if v is not None or k == "image"}

            if "title" in data and is_blank(data["title"]):
                raise AppError(BlogErrors.INVALID_TITLE)
            if "user_id" in data and data["user_id"] != blog.user_id:
                require_user(self.users, data["user_id"], BlogErrors.USER_NOT_FOUND)

            explicit_slug = generate_slug(data.pop("slug", "") or "")
            new_slug = explicit_slug or (generate_slug(data["title"]) if "title" in data else "")
            if new_slug and new_slug != blog.slug:
                if self._slug_taken(new_slug, exclude_id=blog.id):
                    raise AppError(BlogErrors.SLUG_ALREADY_EXISTS)
                data["slug"] = new_slug

            for key, value in data.items():
                setattr(blog, key, value)

            if payload.sections:
                new_sections = [_build_section(s, index) for index, s in enumerate(payload.sections)]
                blog.sections.clear()
                self.db.flush()
                blog.sections.extend(new_sections)

            blog = self._commit(blog)
            logger.info("Blog updated id=%s fields=%s sections_replaced=%s", blog.id, sorted(data), bool(payload.sections))
            return blog

    def delete(self, blog_id: str) -> bool:
        """Physical delete; sections go with the blog."""
        with self._guard("blog.delete"):
            blog = self.find_by_id(blog_id, include_sections=False)
            self.db.delete(blog)
            self.db.commit()
            logger.info("Blog deleted id=%s", blog_id)
            return True

    def _get_section(self, blog_id: str, section_id: str) -> BlogSection:
        section = (
            self.db.query(BlogSection)
            .filter(BlogSection.id == section_id, BlogSection.blog_id == blog_id)
            .first()
        )
        if not section:
            raise AppError(BlogErrors.SECTION_NOT_FOUND)
        return section

    def create_section(self, blog_id: str, payload: BlogSectionCreate) -> BlogSection:
        with self._guard("blog.create_section"):
            blog = self.find_by_id(blog_id)
            section = _build_section(payload, len(blog.sections))
            section.blog_id = blog.id
            self.db.add(section)
            self.db.commit()
            self.db.refresh(section)
            return section

    def update_section(self, blog_id: str, section_id: str, payload: BlogSectionUpdate) -> BlogSection:
        """The merged section (stored values overlaid with the patch) must satisfy its type."""
        with self._guard("blog.update_section"):
            self.find_by_id(blog_id, include_sections=False)
            section = self._get_section(blog_id, section_id)
            data = payload.model_dump(exclude_unset=True)
            if data.get("type") is None:
                data.pop("type", None)

            target_blog_id = data.pop("blog_id", None)
            if target_blog_id and target_blog_id != section.blog_id:
                self.find_by_id(target_blog_id, include_sections=False)
                data["blog_id"] = target_blog_id

            merged = {name: getattr(section, name) for name in SECTION_FIELDS}
            merged.update({k: v for k, v in data.items() if k in SECTION_FIELDS})
            data["type"] = validate_section(merged).value
            if data.get("order") is None:
                data.pop("order", None)

            for key, value in data.items():
                setattr(section, key, value)
            self.db.commit()
            self.db.refresh(section)
            return section

    def delete_section(self, blog_id: str, section_id: str) -> bool:
        with self._guard("blog.delete_section"):
            self.find_by_id(blog_id, include_sections=False)
            section = self._get_section(blog_id, section_id)
            self.db.delete(section)
            self.db.commit()
            return True

    def reorder_sections(self, blog_id: str, section_ids: list[str]) -> list[BlogSection]:
        """`section_ids` must name every section of the blog exactly once; order becomes the list index."""
        with self._guard("blog.reorder_sections"):
            self.find_by_id(blog_id, include_sections=False)
            current = self.db.query(BlogSection).filter(BlogSection.blog_id == blog_id).all()
            by_id = {section.id: section for section in current}

            requested = set(section_ids)
            if len(requested) != len(section_ids) or len(requested) != len(current) or not requested <= by_id.keys():
                raise AppError(BlogErrors.SECTION_NOT_FOUND, message=REORDER_MISMATCH_MESSAGE)

            for index, section_id in enumerate(section_ids):
                by_id[section_id].order = index
            self.db.commit()
            logger.info("Blog sections reordered blog_id=%s count=%d", blog_id, len(section_ids))
            return (
                self.db.query(BlogSection)
                .filter(BlogSection.blog_id == blog_id)
                .order_by(BlogSection.order.asc())
                .all()
            )
