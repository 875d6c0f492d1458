from typing import Any, Dict, Optional

from ..auth.validators import sanitize_social_links
from ..database.repositories.profile_repository import ProfileRepository
from ..database.repositories.section_repository import SectionRepository

THEME_COLORS = {
    'blue': {'background': '#eef2ff', 'accent': '#2563eb', 'text': '#1d4ed8'},
    'green': {'background': '#ecfdf5', 'accent': '#16a34a', 'text': '#15803d'},
    'purple': {'background': '#faf5ff', 'accent': '#9333ea', 'text': '#7e22ce'},
    'orange': {'background': '#fff7ed', 'accent': '#ea580c', 'text': '#c2410c'},
    'dark': {'background': '#1f2937', 'accent': '#f3f4f6', 'text': '#e5e7eb'},
}

SOCIAL_LINK_LABELS = {
    'github': 'GitHub',
    'linkedin': 'LinkedIn',
    'twitter': 'Twitter',
    'instagram': 'Instagram',
    'website': 'Website',
    'email': 'Email',
}


class PortfolioService:
    def __init__(self, profile_repo: ProfileRepository, section_repo: SectionRepository):
        self.profile_repo = profile_repo
        self.section_repo = section_repo

    def get_portfolio_page_data(self, username: str) -> Optional[Dict[str, Any]]:
        profile = self.profile_repo.get_by_username(username.lower())
        if not profile:
            return None

        sections = self.section_repo.list_visible_for_user(int(profile['userId']))

        return {
            'profile': profile,
            'sections': sections,
            'theme': THEME_COLORS.get(profile['theme'], THEME_COLORS['blue']),
            'social_links': self._social_links(profile['socialLinks']),
        }

    def _social_links(self, links: Dict[str, str]) -> list:
        rendered = []
        for key, url in sanitize_social_links(links).items():
            if not url:
                continue
            if key == 'email' and not url.lower().startswith('mailto:'):
                url = f"mailto:{url}"
            rendered.append({'label': SOCIAL_LINK_LABELS[key], 'url': url})
        return rendered
