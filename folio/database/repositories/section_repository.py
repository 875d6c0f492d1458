from typing import List, Optional, Dict, Any
from sqlalchemy.orm import Session
from ..models.section import Section
from ...core.logger import logger


def section_to_dict(section: Section) -> Dict[str, Any]:
    return {
        '_id': str(section.id),
        'userId': str(section.user_id),
        'type': section.type,
        'title': section.title,
        'items': section.items if isinstance(section.items, list) else [],
        'visible': section.visible,
        'order': section.order,
        'createdAt': section.created_at,
        'updatedAt': section.updated_at,
    }


class SectionRepository:
    def __init__(self, db: Session):
        self.db = db

    def _get_owned(self, user_id: int, section_id: int) -> Optional[Section]:
        return self.db.query(Section).filter(
            Section.id == section_id,
            Section.user_id == user_id
        ).first()

    def list_for_user(self, user_id: int) -> List[Dict[str, Any]]:
        sections = self.db.query(Section).filter(
            Section.user_id == user_id
        ).order_by(Section.created_at.asc(), Section.id.asc()).all()

        return [section_to_dict(section) for section in sections]

    def list_visible_for_user(self, user_id: int) -> List[Dict[str, Any]]:
        sections = self.db.query(Section).filter(
            Section.user_id == user_id,
            Section.visible.is_(True)
        ).order_by(Section.order.asc(), Section.id.asc()).all()

        return [section_to_dict(section) for section in sections]

    def create(self, user_id: int, type: str, title: str, items: List[Dict[str, Any]],
               visible: bool = True, order: int = 0) -> Dict[str, Any]:
        try:
            section = Section(
                user_id=user_id,
                type=type,
                title=title,
                items=items,
                visible=visible,
                order=order
            )
            self.db.add(section)
            self.db.commit()
            self.db.refresh(section)
            return section_to_dict(section)
        except Exception as e:
            self.db.rollback()
            logger.error(f"Error creating section for user {user_id}: {e}")
            raise

    def update(self, user_id: int, section_id: int, changes: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        try:
            section = self._get_owned(user_id, section_id)
            if not section:
                return None

            for column, value in changes.items():
                setattr(section, column, value)

            self.db.commit()
            self.db.refresh(section)
            return section_to_dict(section)
        except Exception as e:
            self.db.rollback()
            logger.error(f"Error updating section {section_id}: {e}")
            raise

    def delete(self, user_id: int, section_id: int) -> Optional[Dict[str, Any]]:
        try:
            section = self._get_owned(user_id, section_id)
            if not section:
                return None

            summary = section_to_dict(section)
            self.db.delete(section)
            self.db.commit()
            return summary
        except Exception as e:
            self.db.rollback()
            logger.error(f"Error deleting section {section_id}: {e}")
            raise
