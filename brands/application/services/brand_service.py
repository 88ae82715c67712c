"""
BrandService.

Create, read, update and delete brands through the BrandRepository port.
"""
import logging
from typing import List

from brands.application.dto.brand_dto import BrandDTO, BrandSerializer
from brands.domain.brand import Brand
from brands.ports.brand_repository import BrandRepository
from core.application.serializers import collect_violations
from core.domain.exceptions import BrandNotFoundError, NameAlreadyTakenError, ValidationError
from core.infrastructure.database import transactional

logger = logging.getLogger(__name__)


class BrandService:
    """Application service for brands."""

    def __init__(self, brand_repository: BrandRepository):
        """Initialize service with its repository."""
        self.brand_repository = brand_repository

    @transactional
    def list_all(self) -> List[BrandDTO]:
        """
        List every brand in storage order.

        Returns:
            List of BrandDTO
        """
        return [self._to_dto(brand) for brand in self.brand_repository.find_all()]

    @transactional
    def get_by_id(self, brand_id: int) -> BrandDTO:
        """
        Get a brand by id.

        Args:
            brand_id: Brand id

        Returns:
            BrandDTO

        Raises:
            BrandNotFoundError: If brand not found
        """
        return self._to_dto(self._get_brand(brand_id))

    @transactional
    def create(self, dto: BrandDTO) -> BrandDTO:
        """
        Create a new brand.

        Args:
            dto: Brand data; its id is ignored

        Returns:
            BrandDTO of the saved brand, with its assigned id

        Raises:
            ValidationError: If the name is blank or too long
            NameAlreadyTakenError: If a brand with this name exists
        """
        self._validate(dto)
        self._ensure_name_is_not_taken(dto.name)

        saved = self.brand_repository.save(Brand.create(name=dto.name))

        logger.info("Brand created", extra={"brand_id": saved.id, "brand_name": saved.name})
        return self._to_dto(saved)

    @transactional
    def update(self, brand_id: int, dto: BrandDTO) -> BrandDTO:
        """
        Rename an existing brand.

        Name uniqueness is not re-checked here; the store's unique
        constraint rejects a rename onto a taken name.

        Args:
            brand_id: Id of the brand to update
            dto: New brand data; its id is ignored

        Returns:
            BrandDTO of the updated brand

        Raises:
            ValidationError: If the name is blank or too long
            BrandNotFoundError: If brand not found
        """
        self._validate(dto)
        brand = self._get_brand(brand_id)

        saved = self.brand_repository.save(brand.update_name(dto.name))

        logger.info("Brand updated", extra={"brand_id": saved.id, "brand_name": saved.name})
        return self._to_dto(saved)

    @transactional
    def delete(self, brand_id: int) -> None:
        """
        Delete a brand. Deleting an absent id is not an error.

        Args:
            brand_id: Brand id
        """
        self.brand_repository.delete_by_id(brand_id)
        logger.info("Brand deleted", extra={"brand_id": brand_id})

    def _validate(self, dto: BrandDTO) -> None:
        violations = collect_violations(BrandSerializer, dto)
        if violations:
            logger.warning(
                "Brand rejected: %d constraint violation(s)",
                len(violations),
                extra={"violations": [str(v) for v in violations]},
            )
            raise ValidationError(violations)

    def _ensure_name_is_not_taken(self, name: str) -> None:
        if self.brand_repository.exists_by_name(name):
            logger.warning("Brand name already taken", extra={"brand_name": name})
            raise NameAlreadyTakenError("Brand", name)

    def _get_brand(self, brand_id: int) -> Brand:
        brand = self.brand_repository.find_by_id(brand_id)
        if brand is None:
            raise BrandNotFoundError(f"Brand {brand_id} not found")
        return brand

    @staticmethod
    def _to_dto(brand: Brand) -> BrandDTO:
        return BrandDTO(id=brand.id, name=brand.name)
