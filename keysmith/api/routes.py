import base64
import logging
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Request

from .models import AlgorithmInfo, HealthResponse, KeyRequest, KeyResponse
from ..core.errors import InvalidKeySize, UnknownAlgorithm
from ..core.registry import ProviderRegistry

logger = logging.getLogger(__name__)

router = APIRouter()


def _registry(request: Request) -> ProviderRegistry:
    return request.app.state.registry


@router.get("/", response_model=HealthResponse)
async def health_check(request: Request):
    return HealthResponse(algorithms_available=len(_registry(request)))


@router.get("/algorithms", response_model=List[AlgorithmInfo])
async def list_algorithms(request: Request):
    registry = _registry(request)
    algorithms_info = []

    for name in registry.list_algorithms():
        config = registry.describe(name)
        if config is None:
            algorithms_info.append(AlgorithmInfo(name=name))
            continue

        algorithms_info.append(AlgorithmInfo(
            name=name,
            default_key_size=config.default_key_size,
            fixed_key_size=config.fixed_key_size,
            min_key_size=config.min_key_size,
            max_key_size=config.max_key_size,
            aliases=list(config.aliases),
        ))

    return algorithms_info


@router.post("/keys/{algorithm}", response_model=KeyResponse)
async def generate_key(algorithm: str, request: Request, body: Optional[KeyRequest] = None):
    # Fresh binding per request, generators are not shared across requests
    try:
        binding = _registry(request).create(algorithm)
    except UnknownAlgorithm as e:
        raise HTTPException(status_code=404, detail=str(e))

    if body is not None and body.key_size is not None:
        try:
            binding.init_with_size(body.key_size)
        except InvalidKeySize as e:
            raise HTTPException(status_code=422, detail=str(e))

    key = binding.generate_key()
    logger.info("Generated %d bit %s key", binding.key_size, key.algorithm)

    return KeyResponse(
        algorithm=key.algorithm,
        key_size=binding.key_size,
        format=key.format,
        key=base64.b64encode(key.encoded).decode("ascii"),
    )
