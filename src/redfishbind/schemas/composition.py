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
"""Composition and aggregation services"""

from redfishbind.common.entity import Entity

class ResourceBlock(Entity):
    """A set of resources composable into a system"""
    readwrite_fields = (
        'Client',
        'Pool',
    )

class CompositionReservation(Entity):
    """A reservation of resource blocks"""
    pass

class CompositionService(Entity):
    """The composition service"""
    readwrite_fields = (
        'AllowOverprovisioning',
        'ReservationDuration',
        'ServiceEnabled',
    )

    def resource_blocks(self):
        """Returns the resource blocks of the service"""
        return self._list_linked(ResourceBlock, 'ResourceBlocks')

    def reservations(self):
        """Returns the active reservations"""
        return self._list_linked(CompositionReservation, \
                                                'CompositionReservations')

class Aggregate(Entity):
    """A grouping of resources acted upon as a unit"""
    pass

class ConnectionMethod(Entity):
    """A connection method for reaching aggregated services"""
    pass

class AggregationSource(Entity):
    """A source of aggregated resources such as a BMC"""
    readwrite_fields = (
        'AggregationType',
        'HostName',
        'Password',
        'UserName',
    )

class AggregationService(Entity):
    """The aggregation service"""
    readwrite_fields = (
        'ServiceEnabled',
    )

    def aggregates(self):
        """Returns the aggregates of the service"""
        return self._list_linked(Aggregate, 'Aggregates')

    def aggregation_sources(self):
        """Returns the aggregation sources of the service"""
        return self._list_linked(AggregationSource, 'AggregationSources')

    def connection_methods(self):
        """Returns the connection methods of the service"""
        return self._list_linked(ConnectionMethod, 'ConnectionMethods')
