# -*- coding: utf-8 -*-
"""
REST transport implementation
"""

from .containers import (
    RisObject,
    RestRequest,
    RestResponse,
    StaticRestResponse,
)

from .v1 import (
    RestError,
    RetriesExhaustedError,
    TooManyRedirectsError,
    InvalidCredentialsError,
    ServerDownOrUnreachableError,
    JsonDecodingError,
    AuthMethod,
    HttpClient,
    get_client_instance,
    redfish_client,
)
