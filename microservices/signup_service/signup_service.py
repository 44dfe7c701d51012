"""
Signup Service Business Logic

Campaign lookup by domain, page resolution, and recording of signup steps.
"""

import logging
from typing import Optional

from .models import (
    Campaign,
    PageResolution,
    ResolutionStatus,
    SignupRequest,
    SignupResponse,
)
from .page_resolver import PageResolver
from .protocols import (
    CampaignNotFoundError,
    PageNotFoundError,
    PageResolverProtocol,
    SignupRepositoryProtocol,
)

logger = logging.getLogger(__name__)


class SignupService:
    """Signup service business logic layer"""

    def __init__(
        self,
        repository: SignupRepositoryProtocol,
        resolver: Optional[PageResolverProtocol] = None,
    ):
        self.repository = repository
        self.resolver = resolver or PageResolver(repository)

    async def get_campaign_for_domain(self, domain: str) -> Campaign:
        """Get the campaign serving a host; raises CampaignNotFoundError"""
        campaign = await self.repository.find_campaign_by_domain(domain)
        if campaign is None:
            raise CampaignNotFoundError(f"No campaign serves {domain}", domain=domain)
        return campaign

    async def resolve_page(self, code: str, campaign: Campaign) -> PageResolution:
        """Resolve a page code within a campaign"""
        return await self.resolver.resolve(code, campaign)

    async def record_signup(
        self, request: SignupRequest, campaign: Campaign
    ) -> SignupResponse:
        """
        Record one step of a signup.

        Values are merged into the signup identified by (campaign, page,
        email), so each step adds to what earlier steps stored.
        """
        resolution = await self.resolve_page(request.code, campaign)

        if resolution.status == ResolutionStatus.NOT_FOUND:
            raise PageNotFoundError(f"Page {resolution.code!r} not found", code=resolution.code)
        if resolution.status == ResolutionStatus.ERROR:
            raise resolution.error

        await self.repository.upsert_signup(
            campaign_id=str(campaign.id),
            code=resolution.code,
            values=request.submitted_values(),
        )

        logger.info(f"Recorded signup step for page {resolution.code!r} in campaign {campaign.id}")
        return SignupResponse()
