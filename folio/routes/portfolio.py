from fastapi import APIRouter, Depends, Request

from ..dependencies.portfolio_dependencies import get_portfolio_service
from ..services.portfolio_service import PortfolioService
from ..web.templates import templates

router = APIRouter(tags=["portfolio"])


@router.get("/profile/{username}")
def portfolio_page(
    request: Request,
    username: str,
    portfolio_service: PortfolioService = Depends(get_portfolio_service),
):
    """Public portfolio page: profile header plus the visible sections."""
    data = portfolio_service.get_portfolio_page_data(username)
    if not data:
        return templates.TemplateResponse(
            request,
            "not_found.html",
            {"username": username},
            status_code=404,
        )

    return templates.TemplateResponse(request, "portfolio.html", data)
