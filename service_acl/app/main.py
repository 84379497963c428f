"""
ACL service factory.
"""

from typing import Any, Mapping, Optional, Union

from acl_common.config import AclSettings, get_settings
from acl_common.logging import configure_logging, get_logger

from .acl.models import AclConfig
from .acl.service import AclService


def create_service(
    acl_config: Union[AclConfig, Mapping[str, Any]],
    settings: Optional[AclSettings] = None
) -> AclService:
    """Create an ACL service with logging configured from settings.

    ``acl_config`` may be an AclConfig or a plain mapping in the same shape
    (``defaultGroup``/``default_group``, ``groups``, ``roles``).
    """
    settings = settings or get_settings()
    configure_logging(settings.service_name, settings.log_level)

    if not isinstance(acl_config, AclConfig):
        acl_config = AclConfig.model_validate(acl_config)

    service = AclService(acl_config)
    get_logger(f"{settings.service_name}.main").info(
        "ACL service created",
        env=settings.env,
        default_group=acl_config.default_group,
        groups=len(acl_config.groups),
        roles=len(acl_config.roles)
    )
    return service
