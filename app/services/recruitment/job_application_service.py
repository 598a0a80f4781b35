import logging
from sqlalchemy import select

from app.core.exceptions import InvalidArgumentError
from app.models.recruitment.candidate import Candidate
from app.models.shared.enums import ResourceType
from app.schemas.recruitment.job_application_schema import JobApplicationCreate
from app.services.common.owned_resource_service import OwnedResourceService

logger = logging.getLogger(__name__)


class JobApplicationService(OwnedResourceService):
    resource_type = ResourceType.JOB_APPLICATION

    async def _validate_create(self, data: JobApplicationCreate) -> None:
        result = await self.session.execute(
            select(Candidate.id).where(Candidate.id == data.candidate_id)
        )
        if result.scalar_one_or_none() is None:
            raise InvalidArgumentError(f"Candidate with ID {data.candidate_id} not found")
