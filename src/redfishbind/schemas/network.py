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
"""Network adapters, ports and device functions"""

from redfishbind.common.entity import Entity

class AllowDeny(Entity):
    """A permit or deny rule for network traffic"""
    readwrite_fields = (
        'AllowType',
        'DestinationPortLower',
        'DestinationPortUpper',
        'Direction',
        'IANAProtocolNumber',
        'IPAddressLower',
        'IPAddressType',
        'IPAddressUpper',
        'SourcePortLower',
        'SourcePortUpper',
        'StatefulSession',
    )

class NetworkAdapterMetrics(Entity):
    """Usage and health statistics of a network adapter"""
    pass

class NetworkDeviceFunctionMetrics(Entity):
    """Usage and health statistics of a network device function"""
    pass

class NetworkDeviceFunction(Entity):
    """A logical interface exposed by a network adapter"""
    readwrite_fields = (
        'BootMode',
        'DeviceEnabled',
        'NetDevFuncType',
        'SAVIEnabled',
    )

    def allow_deny(self):
        """Returns the permit and deny rules of the function"""
        return self._list_linked(AllowDeny, 'AllowDeny')

    def metrics(self):
        """Returns the metrics of the function"""
        return self._get_linked(NetworkDeviceFunctionMetrics, 'Metrics')

class NetworkPort(Entity):
    """A discrete physical port of a network adapter"""
    readwrite_fields = (
        'ActiveLinkTechnology',
        'CurrentLinkSpeedMbps',
        'EEEEnabled',
        'FlowControlConfiguration',
        'WakeOnLANEnabled',
    )

class NetworkAdapter(Entity):
    """A physical network adapter"""
    readwrite_fields = (
        'LLDPEnabled',
    )

    def network_device_functions(self):
        """Returns the device functions of the adapter"""
        return self._list_linked(NetworkDeviceFunction, \
                                                    'NetworkDeviceFunctions')

    def network_ports(self):
        """Returns the ports of the adapter"""
        return self._list_linked(NetworkPort, 'NetworkPorts')

    def metrics(self):
        """Returns the metrics of the adapter"""
        return self._get_linked(NetworkAdapterMetrics, 'Metrics')

class NetworkInterface(Entity):
    """The links between a system and a network adapter"""

    def network_adapter(self):
        """Returns the network adapter behind the interface"""
        links = getattr(self, 'Links', None) or {}
        adapter = links.get('NetworkAdapter') or {}
        if '@odata.id' not in adapter:
            return None
        return NetworkAdapter.get(self.client, adapter['@odata.id'])

class VLanNetworkInterface(Entity):
    """A VLAN configured on a network interface"""
    readwrite_fields = (
        'VLANEnable',
        'VLANId',
        'VLANPriority',
    )
