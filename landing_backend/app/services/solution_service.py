"""
Solution service - services showcased on the landing page and their feature bullets
"""
from sqlalchemy.orm import Session, selectinload

from landing_backend.app.core.error_catalog import SolutionErrors
from landing_backend.app.core.exceptions import AppError, handle_service_errors
from landing_backend.app.core.logging_config import get_logger
from landing_backend.app.models.solution import Feature, Solution
from landing_backend.app.schemas.solution import FeatureCreate, FeatureUpdate, SolutionCreate, SolutionUpdate
from landing_backend.app.utils.validators import is_blank

logger = get_logger("services.solution")


def _build_feature(payload: FeatureCreate) -> Feature:
    if is_blank(payload.feature_description):
        raise AppError(SolutionErrors.VALIDATION_ERROR, message="La descripción de la característica es requerida")
    return Feature(
        feature_description=payload.feature_description.strip(),
        is_active=True if payload.is_active is None else payload.is_active,
    )


class SolutionService:
    def __init__(self, db: Session):
        self.db = db

    def _guard(self, action: str):
        return handle_service_errors(self.db, SolutionErrors.DATABASE_ERROR, logger, action)

    def find_all(self) -> list[Solution]:
        """Active solutions for the public page, by display order."""
        with self._guard("solution.find_all"):
            return (
                self.db.query(Solution)
                .options(selectinload(Solution.features))
                .filter(Solution.is_active.is_(True))
                .order_by(Solution.order.asc(), Solution.created_at.asc())
                .all()
            )

    def find_all_admin(self) -> list[Solution]:
        with self._guard("solution.find_all_admin"):
            return (
                self.db.query(Solution)
                .options(selectinload(Solution.features))
                .order_by(Solution.order.asc(), Solution.created_at.asc())
                .all()
            )

    def find_by_id(self, solution_id: str) -> Solution:
        with self._guard("solution.find_by_id"):
            solution = (
                self.db.query(Solution)
                .options(selectinload(Solution.features))
                .filter(Solution.id == solution_id)
                .first()
            )
            if not solution:
                raise AppError(SolutionErrors.NOT_FOUND)
            return solution

    def create(self, payload: SolutionCreate) -> Solution:
        with self._guard("solution.create"):
            if is_blank(payload.title) or is_blank(payload.description):
                raise AppError(SolutionErrors.VALIDATION_ERROR)
            solution = Solution(
                title=payload.title.strip(),
                icon=payload.icon,
                description=payload.description,
                is_active=True if payload.is_active is None else payload.is_active,
                order=payload.order or 0,
            )
            solution.features = [_build_feature(f) for f in payload.features]
            self.db.add(solution)
            self.db.commit()
            self.db.refresh(solution)
            logger.info("Solution created id=%s features=%d", solution.id, len(payload.features))
            return solution

    def update(self, solution_id: str, payload: SolutionUpdate) -> Solution:
        """Scalar fields are patched; given features are appended to the existing ones."""
        with self._guard("solution.update"):
            solution = self.find_by_id(solution_id)
            data = payload.model_dump(exclude_unset=True, exclude={"features"})
            data = {k: v for k, v in data.items() if v is not None or k == "icon"}
            if any(is_blank(data[k]) for k in ("title", "description") if k in data):
                raise AppError(SolutionErrors.VALIDATION_ERROR)

            for key, value in data.items():
                setattr(solution, key, value)
            for feature in payload.features or []:
                solution.features.append(_build_feature(feature))
            self.db.commit()
            self.db.refresh(solution)
            return solution

    def delete(self, solution_id: str) -> bool:
        with self._guard("solution.delete"):
            solution = self.find_by_id(solution_id)
            # delete-orphan cascade removes the feature rows before the solution row
            self.db.delete(solution)
            self.db.commit()
            logger.info("Solution deleted id=%s", solution_id)
            return True

    def get_features(self, solution_id: str) -> list[Feature]:
        with self._guard("solution.get_features"):
            return list(self.find_by_id(solution_id).features)

    def _get_feature(self, solution_id: str, feature_id: str) -> Feature:
        feature = (
            self.db.query(Feature)
            .filter(Feature.id == feature_id, Feature.solution_id == solution_id)
            .first()
        )
        if not feature:
            raise AppError(SolutionErrors.FEATURE_NOT_FOUND)
        return feature

    def create_feature(self, solution_id: str, payload: FeatureCreate) -> Feature:
        with self._guard("solution.create_feature"):
            solution = self.find_by_id(solution_id)
            feature = _build_feature(payload)
            feature.solution_id = solution.id
            self.db.add(feature)
            self.db.commit()
            self.db.refresh(feature)
            return feature

    def update_feature(self, solution_id: str, feature_id: str, payload: FeatureUpdate) -> Feature:
        with self._guard("solution.update_feature"):
            self.find_by_id(solution_id)
            feature = self._get_feature(solution_id, feature_id)
            data = {k: v for k, v in payload.model_dump(exclude_unset=True).items() if v is not None}
            if "feature_description" in data and is_blank(data["feature_description"]):
                raise AppError(SolutionErrors.VALIDATION_ERROR)
            for key, value in data.items():
                setattr(feature, key, value)
            self.db.commit()
            self.db.refresh(feature)
            return feature

    def delete_feature(self, solution_id: str, feature_id: str) -> bool:
        with self._guard("solution.delete_feature"):
            self.find_by_id(solution_id)
            feature = self._get_feature(solution_id, feature_id)
            self.db.delete(feature)
            self.db.commit()
            return True
