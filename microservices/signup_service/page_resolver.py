"""
Page Resolver

Turns a route code into the data the signup form renders: the page stored
under the normalized code in the request's campaign, joined with its
creator's first name.

Every call queries the data store (page first, then creator); nothing is
cached and no partial view is ever returned.
"""

import logging

from pydantic import ValidationError

from .models import Campaign, PageResolution, ResolvedPageView
from .page_codes import normalize_page_code
from .protocols import (
    CreatorNotFoundError,
    DataStoreError,
    SignupRepositoryProtocol,
)

logger = logging.getLogger(__name__)


class PageResolver:
    """Read path from (code, campaign) to a resolved page view"""

    def __init__(self, repository: SignupRepositoryProtocol):
        self.repository = repository

    async def resolve(self, code: str, campaign: Campaign) -> PageResolution:
        """
        Resolve a page code within a campaign.

        Returns:
            FOUND with the view, NOT_FOUND when no page matches, or ERROR
            carrying the cause when the data store fails or the page's
            creator no longer exists.
        """
        normalized_code = normalize_page_code(code)
        campaign_id = str(campaign.id)

        try:
            page = await self.repository.find_page(normalized_code, campaign_id)
            if page is None:
                logger.info(f"No page {normalized_code!r} in campaign {campaign_id}")
                return PageResolution.not_found(normalized_code)

            creator = None
            if page.created_by:
                creator = await self.repository.find_user(page.created_by)
        except (DataStoreError, ValidationError) as e:
            logger.error(f"Failed to resolve page {normalized_code!r}: {e}")
            return PageResolution.failed(normalized_code, e)

        if creator is None:
            error = CreatorNotFoundError(
                f"Page {normalized_code!r} references missing user {page.created_by!r}",
                user_id=page.created_by,
            )
            logger.error(str(error))
            return PageResolution.failed(normalized_code, error)

        return PageResolution.found(
            ResolvedPageView(
                code=normalized_code,
                title=page.title,
                subtitle=page.subtitle,
                background=page.background,
                created_by_first_name=creator.first_name,
            )
        )
