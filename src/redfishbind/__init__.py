# -*- coding: utf-8 -*-
"""
Redfish client binding: typed resources that PATCH only what changed
"""

__version__ = '1.0.0'

from .rest import (
    AuthMethod,
    HttpClient,
    RestError,
    redfish_client,
)

from .common import (
    Entity,
    CollectionError,
    ResourceError,
    ResourceUpdateError,
)

from .config import (
    RedfishConfig,
    client_from_config,
)
