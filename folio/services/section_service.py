from typing import Any, Dict, List

from pydantic import ValidationError as PydanticValidationError

from ..core.exceptions import NotFound, ValidationError
from ..database.models import SECTION_TYPES, MAX_INTEGER
from ..database.repositories.section_repository import SectionRepository
from ..dto.section import SectionCreateRequest, SectionItem, SectionUpdateRequest


def parse_section_id(value: Any) -> int:
    if value is None or value == "":
        raise ValidationError("Section id is required")

    if isinstance(value, bool):
        raise ValidationError("Invalid section id")
    if isinstance(value, int):
        section_id = value
    elif isinstance(value, str) and value.isascii() and value.isdigit():
        section_id = int(value)
    else:
        raise ValidationError("Invalid section id")

    if section_id <= 0 or section_id > MAX_INTEGER:
        raise ValidationError("Invalid section id")
    return section_id


def normalize_items(items: Any) -> List[Dict[str, Any]]:
    if not isinstance(items, list):
        raise ValidationError("Items must be an array")

    normalized = []
    for item in items:
        if not isinstance(item, dict):
            raise ValidationError("Invalid section item")
        try:
            normalized.append(SectionItem.model_validate(item).model_dump(exclude_none=True))
        except PydanticValidationError:
            raise ValidationError("Invalid section item")
    return normalized


class SectionService:
    def __init__(self, section_repo: SectionRepository):
        self.section_repo = section_repo

    def list_sections(self, user_id: int) -> List[Dict[str, Any]]:
        return self.section_repo.list_for_user(user_id)

    def create_section(self, user_id: int, payload: SectionCreateRequest) -> Dict[str, Any]:
        if not payload.type or not payload.title or not payload.title.strip():
            raise ValidationError("Section type and title are required")

        if payload.type not in SECTION_TYPES:
            raise ValidationError("Invalid section type")

        items = normalize_items(payload.items) if "items" in payload.model_fields_set else []

        return self.section_repo.create(
            user_id=user_id,
            type=payload.type,
            title=payload.title,
            items=items,
            visible=payload.visible if payload.visible is not None else True,
            order=payload.order if payload.order is not None else 0,
        )

    def update_section(self, user_id: int, payload: SectionUpdateRequest) -> Dict[str, Any]:
        """Apply the supplied fields; ``items`` replaces the stored list wholesale."""
        section_id = parse_section_id(payload.id)

        changes = {}
        if "items" in payload.model_fields_set:
            changes["items"] = normalize_items(payload.items)
        if payload.title is not None:
            if not payload.title.strip():
                raise ValidationError("Section title cannot be empty")
            changes["title"] = payload.title
        if payload.visible is not None:
            changes["visible"] = payload.visible
        if payload.order is not None:
            changes["order"] = payload.order

        section = self.section_repo.update(user_id, section_id, changes)
        if not section:
            raise NotFound("Section not found")
        return section

    def delete_section(self, user_id: int, raw_section_id: Any) -> Dict[str, Any]:
        section_id = parse_section_id(raw_section_id)

        section = self.section_repo.delete(user_id, section_id)
        if not section:
            raise NotFound("Section not found")
        return section
