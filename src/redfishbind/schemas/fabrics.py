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
"""Fabrics, switches, ports, endpoints and zones"""

from redfishbind.common.entity import Entity

class AddressPool(Entity):
    """A pool of addresses assignable to endpoints"""
    pass

class Connection(Entity):
    """Access permissions between initiators and resources"""
    pass

class Endpoint(Entity):
    """An entity that sends or receives protocol messages over a fabric"""
    pass

class EndpointGroup(Entity):
    """A group of endpoints managed as a unit"""
    readwrite_fields = (
        'GroupType',
        'TargetEndpointGroupIdentifier',
    )

class PortMetrics(Entity):
    """Usage and health statistics of a port"""
    pass

class Port(Entity):
    """A port of a switch, controller or other device"""
    readwrite_fields = (
        'Enabled',
        'InterfaceEnabled',
        'LinkState',
        'LinkTransitionIndicator',
        'LocationIndicatorActive',
    )

    def metrics(self):
        """Returns the metrics of the port"""
        return self._get_linked(PortMetrics, 'Metrics')

class SwitchMetrics(Entity):
    """Usage and health statistics of a switch"""
    pass

class Switch(Entity):
    """A switch in a fabric"""
    readwrite_fields = (
        'AssetTag',
        'Enabled',
        'IsManaged',
        'LocationIndicatorActive',
    )

    def ports(self):
        """Returns the ports of the switch"""
        return self._list_linked(Port, 'Ports')

    def metrics(self):
        """Returns the metrics of the switch"""
        return self._get_linked(SwitchMetrics, 'Metrics')

class Zone(Entity):
    """A set of endpoints allowed to communicate with each other"""
    readwrite_fields = (
        'DefaultRoutingEnabled',
        'ExternalAccessibility',
        'ZoneType',
    )

class RouteEntry(Entity):
    """An entry of a Gen-Z linear forwarding table"""
    readwrite_fields = (
        'MinimumHopCount',
        'RawEntryHex',
    )

class RouteSetEntry(Entity):
    """An entry of a Gen-Z route set"""
    readwrite_fields = (
        'EgressIdentifier',
        'HopCount',
        'VCAction',
        'Valid',
    )

class VCATEntry(Entity):
    """An entry of a Gen-Z virtual channel action table"""
    readwrite_fields = (
        'RawEntryHex',
    )

class FabricAdapter(Entity):
    """A fabric adapter such as a Gen-Z or CXL interface"""
    readwrite_fields = (
        'FabricType',
        'LocationIndicatorActive',
    )

    def ports(self):
        """Returns the ports of the adapter"""
        return self._list_linked(Port, 'Ports')

class Fabric(Entity):
    """A simple fabric of switches, endpoints and zones"""
    readwrite_fields = (
        'UUID',
    )

    def address_pools(self):
        """Returns the address pools of the fabric"""
        return self._list_linked(AddressPool, 'AddressPools')

    def connections(self):
        """Returns the connections of the fabric"""
        return self._list_linked(Connection, 'Connections')

    def endpoint_groups(self):
        """Returns the endpoint groups of the fabric"""
        return self._list_linked(EndpointGroup, 'EndpointGroups')

    def endpoints(self):
        """Returns the endpoints of the fabric"""
        return self._list_linked(Endpoint, 'Endpoints')

    def switches(self):
        """Returns the switches of the fabric"""
        return self._list_linked(Switch, 'Switches')

    def zones(self):
        """Returns the zones of the fabric"""
        return self._list_linked(Zone, 'Zones')
