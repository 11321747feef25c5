from typing import List, Optional
from pydantic import BaseModel, Field

# Largest key size in bits served over HTTP
MAX_REQUEST_KEY_SIZE = 65536


class KeyRequest(BaseModel):
    key_size: Optional[int] = Field(
        default=None, ge=1, le=MAX_REQUEST_KEY_SIZE,
        description="Key size in bits; algorithm default when omitted"
    )


class KeyResponse(BaseModel):
    algorithm: str
    key_size: int = Field(..., description="Key size in bits")
    format: str = "RAW"
    key: str = Field(..., description="Base64 encoded key material")


class AlgorithmInfo(BaseModel):
    name: str
    # Size fields are null for algorithms registered with a custom factory
    default_key_size: Optional[int] = None
    fixed_key_size: Optional[int] = None
    min_key_size: Optional[int] = None
    max_key_size: Optional[int] = None
    aliases: List[str] = Field(default_factory=list)


class HealthResponse(BaseModel):
    status: str = "healthy"
    version: str = "0.1.0"
    algorithms_available: int = 0
