from typing import Optional, Union
from app.models.shared.enums import ResourceType

ACCESS_REQUEST_PREFIX = "AR-"

# display prefix and zero padding per resource type
RESOURCE_ID_FORMATS = {
    ResourceType.DEPARTMENT: ("D-", 2),
    ResourceType.EMPLOYEE: ("E-", 0),
    ResourceType.CANDIDATE: ("C-", 3),
    ResourceType.JOB_APPLICATION: ("APP-", 3),
    ResourceType.LEAVE_REQUEST: ("L-", 0),
}


def _parse_prefixed(raw: Union[str, int, None], prefixes) -> Optional[int]:
    if raw is None:
        return None
    if isinstance(raw, int) and not isinstance(raw, bool):
        return raw
    value = str(raw).strip()
    if not value:
        return None
    upper = value.upper()
    for prefix in prefixes:
        if upper.startswith(prefix):
            value = value[len(prefix):]
            break
    if not (value.isascii() and value.isdigit()):
        return None
    return int(value)


def parse_resource_type(raw: Optional[str]) -> Optional[ResourceType]:
    """Case-insensitive match on the type tag ("employee", "JobApplication", ...)."""
    if not raw:
        return None
    normalized = raw.strip().replace("_", "").replace("-", "").lower()
    for resource_type in ResourceType:
        if resource_type.value.lower() == normalized:
            return resource_type
    return None


def parse_resource_id(resource_type: ResourceType, raw: Union[str, int, None]) -> Optional[int]:
    """Accepts a bare number or the type's display form (``E-7``, ``APP-003``)."""
    prefix, _ = RESOURCE_ID_FORMATS[resource_type]
    return _parse_prefixed(raw, (prefix,))


def format_resource_id(resource_type: ResourceType, resource_id: int) -> str:
    prefix, width = RESOURCE_ID_FORMATS[resource_type]
    return f"{prefix}{resource_id:0{width}d}" if width else f"{prefix}{resource_id}"


def parse_access_request_id(raw: Union[str, int, None]) -> Optional[int]:
    return _parse_prefixed(raw, (ACCESS_REQUEST_PREFIX,))


def format_access_request_id(access_request_id: int) -> str:
    return f"{ACCESS_REQUEST_PREFIX}{access_request_id}"
