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
"""Chassis and the physical, thermal and power components they contain.

Some objects such as the fans and temperature readings of the legacy
``Thermal`` resource are embedded in an array of their parent yet carry their
own ``@odata.id``. They are decoded from the parent document and PATCHed at
their own URI.
"""

from redfishbind.common.entity import Entity
from redfishbind.schemas.managers import LogService
from redfishbind.schemas.network import NetworkAdapter
from redfishbind.schemas.security import TrustedComponent
from redfishbind.schemas.storage import Drive

class AssemblyData(Entity):
    """An assembly record embedded in an Assembly resource"""
    readwrite_fields = (
        'LocationIndicatorActive',
    )

class Assembly(Entity):
    """The assembly records of a component"""
    readwrite_fields = (
        'Assemblies',
    )

    def assemblies(self):
        """Returns the assembly records as resources of their own"""
        return self._embedded(AssemblyData, 'Assemblies')

class Cable(Entity):
    """A cable between two connectors"""
    readwrite_fields = (
        'AssetTag',
        'CableClass',
        'CableStatus',
        'CableType',
        'DownstreamConnectorTypes',
        'DownstreamName',
        'LengthMeters',
        'Manufacturer',
        'Model',
        'PartNumber',
        'SKU',
        'SerialNumber',
        'UpstreamConnectorTypes',
        'UpstreamName',
        'UserDescription',
        'UserLabel',
        'Vendor',
    )

class Facility(Entity):
    """A location containing equipment such as a room or a building"""
    pass

class Fan(Entity):
    """A cooling fan"""
    readwrite_fields = (
        'LocationIndicatorActive',
    )

class Redundancy(Entity):
    """A redundancy group of components"""
    readwrite_fields = (
        'Mode',
        'RedundancyEnabled',
    )

class ThermalFan(Entity):
    """A fan listed in the legacy Thermal resource"""
    readwrite_fields = (
        'IndicatorLED',
    )

class ThermalTemperature(Entity):
    """A temperature reading listed in the legacy Thermal resource"""
    readwrite_fields = (
        'LowerThresholdUser',
        'UpperThresholdUser',
    )

class Thermal(Entity):
    """Legacy thermal properties of a chassis"""
    readwrite_fields = (
        'Fans',
        'Temperatures',
    )

    def fans(self):
        """Returns the fans as resources of their own"""
        return self._embedded(ThermalFan, 'Fans')

    def temperatures(self):
        """Returns the temperature readings as resources of their own"""
        return self._embedded(ThermalTemperature, 'Temperatures')

    def redundancy(self):
        """Returns the redundancy groups of the cooling subsystem"""
        return self._embedded(Redundancy, 'Redundancy')

class ThermalMetrics(Entity):
    """Summary of the thermal readings of a chassis"""
    pass

class ThermalSubsystem(Entity):
    """The cooling subsystem of a chassis"""

    def fans(self):
        """Returns the fans of the subsystem"""
        return self._list_linked(Fan, 'Fans')

    def thermal_metrics(self):
        """Returns the thermal metrics of the subsystem"""
        return self._get_linked(ThermalMetrics, 'ThermalMetrics')

class PowerSupplyUnit(Entity):
    """A power supply listed in the legacy Power resource"""
    readwrite_fields = (
        'IndicatorLED',
    )

class Power(Entity):
    """Legacy power properties of a chassis"""

    def power_supplies(self):
        """Returns the power supplies as resources of their own"""
        return self._embedded(PowerSupplyUnit, 'PowerSupplies')

    def redundancy(self):
        """Returns the redundancy groups of the power subsystem"""
        return self._embedded(Redundancy, 'Redundancy')

class PowerSupplyMetrics(Entity):
    """Usage and health statistics of a power supply"""
    pass

class PowerSupply(Entity):
    """A power supply unit"""
    readwrite_fields = (
        'ElectricalSourceManagerURIs',
        'ElectricalSourceNames',
        'LocationIndicatorActive',
    )

    def metrics(self):
        """Returns the metrics of the power supply"""
        return self._get_linked(PowerSupplyMetrics, 'Metrics')

class BatteryMetrics(Entity):
    """Usage and health statistics of a battery"""
    pass

class PowerSubsystem(Entity):
    """The power subsystem of a chassis"""

    def power_supplies(self):
        """Returns the power supplies of the subsystem"""
        return self._list_linked(PowerSupply, 'PowerSupplies')

class Sensor(Entity):
    """A sensor and its reading"""
    readwrite_fields = (
        'AveragingInterval',
        'Calibration',
        'CalibrationTime',
    )

class Control(Entity):
    """A control point such as a power limit"""
    readwrite_fields = (
        'ControlDelaySeconds',
        'ControlMode',
        'DeadBand',
        'SetPoint',
        'SettingMax',
        'SettingMin',
    )

class EnvironmentMetrics(Entity):
    """Environmental readings of a device"""
    readwrite_fields = (
        'PowerLimitWatts',
    )

class PCIeFunction(Entity):
    """A function of a PCIe device"""
    readwrite_fields = (
        'Enabled',
    )

class PCIeDevice(Entity):
    """A PCIe device"""
    readwrite_fields = (
        'AssetTag',
        'ReadyToRemove',
    )

    def pcie_functions(self):
        """Returns the functions of the device"""
        return self._list_linked(PCIeFunction, 'PCIeFunctions')

class PCIeSlots(Entity):
    """The PCIe slots of a chassis"""
    pass

class MediaController(Entity):
    """A media controller of a memory or storage device"""
    pass

class Chassis(Entity):
    """A physical enclosure such as a rack, blade or sled"""
    readwrite_fields = (
        'AssetTag',
        'ElectricalSourceManagerURIs',
        'ElectricalSourceNames',
        'EnvironmentalClass',
        'LocationIndicatorActive',
    )

    def assembly(self):
        """Returns the assembly records of the chassis"""
        return self._get_linked(Assembly, 'Assembly')

    def controls(self):
        """Returns the controls of the chassis"""
        return self._list_linked(Control, 'Controls')

    def drives(self):
        """Returns the drives in the chassis"""
        return self._list_linked(Drive, 'Drives')

    def environment_metrics(self):
        """Returns the environmental readings of the chassis"""
        return self._get_linked(EnvironmentMetrics, 'EnvironmentMetrics')

    def log_services(self):
        """Returns the logs of the chassis"""
        return self._list_linked(LogService, 'LogServices')

    def media_controllers(self):
        """Returns the media controllers of the chassis"""
        return self._list_linked(MediaController, 'MediaControllers')

    def network_adapters(self):
        """Returns the network adapters of the chassis"""
        return self._list_linked(NetworkAdapter, 'NetworkAdapters')

    def pcie_devices(self):
        """Returns the PCIe devices of the chassis"""
        return self._list_linked(PCIeDevice, 'PCIeDevices')

    def pcie_slots(self):
        """Returns the PCIe slots of the chassis"""
        return self._get_linked(PCIeSlots, 'PCIeSlots')

    def power(self):
        """Returns the legacy power properties of the chassis"""
        return self._get_linked(Power, 'Power')

    def power_subsystem(self):
        """Returns the power subsystem of the chassis"""
        return self._get_linked(PowerSubsystem, 'PowerSubsystem')

    def sensors(self):
        """Returns the sensors of the chassis"""
        return self._list_linked(Sensor, 'Sensors')

    def thermal(self):
        """Returns the legacy thermal properties of the chassis"""
        return self._get_linked(Thermal, 'Thermal')

    def thermal_subsystem(self):
        """Returns the cooling subsystem of the chassis"""
        return self._get_linked(ThermalSubsystem, 'ThermalSubsystem')

    def trusted_components(self):
        """Returns the trusted components of the chassis"""
        return self._list_linked(TrustedComponent, 'TrustedComponents')
