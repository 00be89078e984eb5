"""Update strategy that marks replaced loan records as superseded."""

from datetime import datetime, timezone

import structlog
from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities import Loan
from src.domain.exceptions import LoanExtensionConflictException
from src.domain.interfaces import ResourceUpdateStrategy
from src.infrastructure.database.models import LoanModel

logger = structlog.get_logger(__name__)


class SupersedeLoanStrategy(ResourceUpdateStrategy[Loan]):
    """
    Stamps ``superseded_at`` on the record being replaced.

    The stamp is a compare-and-swap: it only applies while the record is
    still current, so of two concurrent extensions of the same loan only
    one can supersede the record both of them read.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def update_resource(self, resource: Loan) -> None:
        stmt = (
            update(LoanModel)
            .where(LoanModel.id == str(resource.id))
            .where(LoanModel.superseded_at.is_(None))
            .values(superseded_at=datetime.now(timezone.utc))
        )
        result = await self._session.execute(stmt)

        if result.rowcount != 1:
            logger.warning(
                "loan_extension_conflict",
                loan_id=str(resource.loan_id),
                record_id=str(resource.id),
            )
            raise LoanExtensionConflictException(
                loan_id=str(resource.loan_id),
                record_id=str(resource.id),
            )
