import logging
from sqlalchemy import select

from app.core.exceptions import InvalidArgumentError
from app.models.recruitment.candidate import Candidate
from app.models.shared.enums import ResourceType
from app.schemas.recruitment.candidate_schema import CandidateCreate
from app.services.common.owned_resource_service import OwnedResourceService

logger = logging.getLogger(__name__)


class CandidateService(OwnedResourceService):
    resource_type = ResourceType.CANDIDATE

    async def _validate_create(self, data: CandidateCreate) -> None:
        result = await self.session.execute(
            select(Candidate.id).where(Candidate.email == data.email).limit(1)
        )
        if result.scalar_one_or_none() is not None:
            raise InvalidArgumentError("Email already exists")
