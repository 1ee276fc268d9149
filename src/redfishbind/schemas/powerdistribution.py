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
"""Power distribution equipment: PDUs, circuits and outlets"""

from redfishbind.common.entity import Entity

class Circuit(Entity):
    """An electrical circuit such as a branch or a feed"""
    readwrite_fields = (
        'ConfigurationLocked',
        'CriticalCircuit',
        'ElectricalConsumerNames',
        'ElectricalSourceManagerURI',
        'ElectricalSourceName',
        'LocationIndicatorActive',
        'PowerControlLocked',
        'PowerCycleDelaySeconds',
        'PowerOffDelaySeconds',
        'PowerOnDelaySeconds',
        'PowerRestoreDelaySeconds',
        'PowerRestorePolicy',
        'UserLabel',
    )

class Outlet(Entity):
    """An electrical outlet"""
    readwrite_fields = (
        'ConfigurationLocked',
        'ElectricalConsumerNames',
        'LocationIndicatorActive',
        'PowerControlLocked',
        'PowerCycleDelaySeconds',
        'PowerOffDelaySeconds',
        'PowerOnDelaySeconds',
        'PowerRestoreDelaySeconds',
        'PowerRestorePolicy',
        'UserLabel',
    )

class OutletGroup(Entity):
    """A group of outlets controlled together"""
    readwrite_fields = (
        'ConfigurationLocked',
        'CreatedBy',
        'PowerControlLocked',
        'PowerCycleDelaySeconds',
        'PowerOffDelaySeconds',
        'PowerOnDelaySeconds',
        'PowerRestoreDelaySeconds',
        'PowerRestorePolicy',
    )

class PowerDistributionMetrics(Entity):
    """Usage statistics of a power distribution unit"""
    pass

class PowerDistribution(Entity):
    """A power distribution unit, switchgear or transfer switch"""
    readwrite_fields = (
        'AssetTag',
    )

    def branches(self):
        """Returns the branch circuits"""
        return self._list_linked(Circuit, 'Branches')

    def feeders(self):
        """Returns the feeder circuits"""
        return self._list_linked(Circuit, 'Feeders')

    def mains(self):
        """Returns the mains circuits"""
        return self._list_linked(Circuit, 'Mains')

    def subfeeds(self):
        """Returns the subfeed circuits"""
        return self._list_linked(Circuit, 'Subfeeds')

    def outlets(self):
        """Returns the outlets"""
        return self._list_linked(Outlet, 'Outlets')

    def outlet_groups(self):
        """Returns the outlet groups"""
        return self._list_linked(OutletGroup, 'OutletGroups')

    def metrics(self):
        """Returns the metrics of the equipment"""
        return self._get_linked(PowerDistributionMetrics, 'Metrics')

class PowerDomain(Entity):
    """A power domain of a facility"""
    pass

class PowerEquipment(Entity):
    """The set of power equipment of a facility"""

    def floor_pdus(self):
        return self._list_linked(PowerDistribution, 'FloorPDUs')

    def rack_pdus(self):
        return self._list_linked(PowerDistribution, 'RackPDUs')

    def switchgear(self):
        return self._list_linked(PowerDistribution, 'Switchgear')

    def transfer_switches(self):
        return self._list_linked(PowerDistribution, 'TransferSwitches')
