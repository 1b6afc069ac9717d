"""Partner (refill point) query client."""
import logging
from typing import List

from pydantic import ValidationError

from h2ok.core.exceptions import DecodeError
from h2ok.models.internal_models import FilterCriteria
from h2ok.schemas.partner import PartnerListResponse, PointRecord
from h2ok.services.backend_client import BackendClient
from h2ok.services.filter_state import to_query_parameters

logger = logging.getLogger(__name__)

PARTNERS_PATH = "/api/partners"


class PartnerQueryClient(BackendClient):
    async def fetch(self, criteria: FilterCriteria) -> List[PointRecord]:
        """
        Fetch the points matching ``criteria``.

        Returns the complete item list, possibly empty. Raises NetworkError or
        DecodeError and never returns a partial list. Holds no state of its
        own; merging results is the caller's job.
        """
        params = to_query_parameters(criteria)
        payload = await self._get_json(PARTNERS_PATH, params)
        try:
            items = PartnerListResponse.model_validate(payload).items
        except ValidationError as e:
            logger.warning(f"Partner payload failed validation: {e.error_count()} errors")
            raise DecodeError(details={"error_count": e.error_count()}) from e
        logger.debug(f"Fetched {len(items)} partners for {params}")
        return items
