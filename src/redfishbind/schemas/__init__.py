###
# Copyright 2019 Hewlett Packard Enterprise, Inc. All rights reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#  http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
###
# -*- coding: utf-8 -*-
"""Redfish resource types and the registry resolving ``@odata.type``"""

#---------Imports---------

import inspect
import logging

from redfishbind.common.entity import Entity
from redfishbind.common.errors import check_response, ResourceDecodeError

from redfishbind.schemas import security, accounts, storage, network, \
                        fabrics, managers, systems, chassis, \
                        powerdistribution, telemetry, composition, services, \
                        serviceroot

from .accounts import *
from .chassis import *
from .composition import *
from .fabrics import *
from .managers import *
from .network import *
from .powerdistribution import *
from .security import *
from .serviceroot import *
from .services import *
from .storage import *
from .systems import *
from .telemetry import *

#---------End of imports---------

#---------Debug logger---------

LOGGER = logging.getLogger(__name__)

#---------End of debug logger---------

MODULES = (security, accounts, storage, network, fabrics, managers, systems, \
           chassis, powerdistribution, telemetry, composition, services, \
           serviceroot)

#: objects embedded in the array of a parent, never fetched on their own
EMBEDDED = ('AssemblyData', 'ThermalFan', 'ThermalTemperature', \
                                                            'PowerSupplyUnit')

def _build_registry():
    registry = dict()
    for module in MODULES:
        for name, cls in inspect.getmembers(module, inspect.isclass):
            if cls.__module__ != module.__name__ or \
                                            not issubclass(cls, Entity):
                continue
            if name in EMBEDDED:
                continue
            registry[name] = cls
    return registry

TYPES = _build_registry()

def get_type(odata_type):
    """Resolve the class of a resource from its ``@odata.type``

    :param odata_type: value such as ``#ManagerAccount.v1_8_0.ManagerAccount``.
    :type odata_type: str.
    :returns: Entity subclass or None for an unknown type

    """
    if not odata_type:
        return None
    return TYPES.get(odata_type.lstrip('#').split('.')[-1])

def get_resource(client, uri):
    """Fetch a resource and decode it as the type the service reports

    Unknown types are decoded as a plain read-only Entity.

    :param client: transport client.
    :type client: HttpClient.
    :param uri: URI of the resource.
    :type uri: str.

    """
    resp = client.get(uri)
    check_response(resp, uri)

    try:
        odata_type = resp.dict.get('@odata.type')
    except (ValueError, AttributeError) as excp:
        raise ResourceDecodeError('Unable to decode %s: %s' % (uri, excp))

    cls = get_type(odata_type)
    if cls is None:
        LOGGER.debug('No resource type registered for %s, decoding %s as '\
                                                'Entity', odata_type, uri)
        cls = Entity

    entity = cls.decode(resp.raw, client=client)
    entity._etag = resp.getheader('ETag')
    return entity
