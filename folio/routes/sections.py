from typing import Optional

from fastapi import APIRouter, Depends, Query

from ..core.exceptions import FolioError, InternalError
from ..core.logger import logger
from ..dependencies.auth_dependencies import get_current_user_id
from ..dependencies.section_dependencies import get_section_service
from ..dto.section import SectionCreateRequest, SectionUpdateRequest
from ..services.section_service import SectionService
from ..utils import success_response

router = APIRouter(prefix="/sections", tags=["sections"])


@router.post("/create")
def create_section(
    payload: SectionCreateRequest,
    user_id: int = Depends(get_current_user_id),
    section_service: SectionService = Depends(get_section_service),
):
    try:
        section = section_service.create_section(user_id, payload)
    except FolioError:
        raise
    except Exception as e:
        logger.error(f"Section create error: {e}")
        raise InternalError()

    return success_response(section, "Section created successfully")


@router.get("/list")
def list_sections(
    user_id: int = Depends(get_current_user_id),
    section_service: SectionService = Depends(get_section_service),
):
    try:
        sections = section_service.list_sections(user_id)
    except FolioError:
        raise
    except Exception as e:
        logger.error(f"Sections list error: {e}")
        raise InternalError()

    return success_response(sections, "Sections fetched successfully")


@router.patch("/update")
def update_section(
    payload: SectionUpdateRequest,
    user_id: int = Depends(get_current_user_id),
    section_service: SectionService = Depends(get_section_service),
):
    try:
        section = section_service.update_section(user_id, payload)
    except FolioError:
        raise
    except Exception as e:
        logger.error(f"Section update error: {e}")
        raise InternalError()

    return success_response(section, "Section updated successfully")


@router.delete("/delete")
def delete_section(
    id: Optional[str] = Query(None, description="Section id"),
    user_id: int = Depends(get_current_user_id),
    section_service: SectionService = Depends(get_section_service),
):
    try:
        section = section_service.delete_section(user_id, id)
    except FolioError:
        raise
    except Exception as e:
        logger.error(f"Section delete error: {e}")
        raise InternalError()

    return success_response(section, "Section deleted successfully")
