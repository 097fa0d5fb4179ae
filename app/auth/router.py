"""Auth domain router.

Issues bearer credentials. The identity claim is verified upstream by the
client's identity provider; this service only signs it.
"""

import logging

from fastapi import APIRouter

from app.auth.dependencies import TokenServiceDep
from app.auth.schemas import TokenRequest, TokenResponse
from app.core.constants import CommonResponses, Routes

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix=Routes.AUTH.prefix,
    tags=[Routes.AUTH.tag],
    responses={**CommonResponses.BAD_REQUEST},
)


@router.post("/jwt", response_model=TokenResponse)
async def issue_token(token_request: TokenRequest, tokens: TokenServiceDep):
    """Issue a credential for the supplied email claim."""
    issued = tokens.issue(token_request.email)
    logger.debug("Issued credential", extra={"actor": token_request.email})
    return TokenResponse(token=issued.token, expires_at=issued.expires_at)
