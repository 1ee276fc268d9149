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
"""Computer systems and their components"""

from redfishbind.common.entity import Entity
from redfishbind.schemas.managers import LogService
from redfishbind.schemas.network import NetworkInterface
from redfishbind.schemas.security import SecureBoot
from redfishbind.schemas.storage import SimpleStorage, Storage

class Bios(Entity):
    """BIOS attributes of a system"""
    pass

class BootOption(Entity):
    """A UEFI boot option"""
    readwrite_fields = (
        'BootOptionEnabled',
    )

class AccelerationFunction(Entity):
    """An acceleration function of a processor such as an FPGA"""
    pass

class OperatingConfig(Entity):
    """An operational configuration of a processor"""
    pass

class ProcessorMetrics(Entity):
    """Usage and health statistics of a processor"""
    pass

class Processor(Entity):
    """A processor of a system"""
    readwrite_fields = (
        'AppliedOperatingConfig',
        'Enabled',
        'LocationIndicatorActive',
        'OperatingSpeedRangeMHz',
        'SpeedLimitMHz',
        'SpeedLocked',
    )

    def acceleration_functions(self):
        """Returns the acceleration functions of the processor"""
        return self._list_linked(AccelerationFunction, \
                                                    'AccelerationFunctions')

    def operating_configs(self):
        """Returns the operating configurations of the processor"""
        return self._list_linked(OperatingConfig, 'OperatingConfigs')

    def metrics(self):
        """Returns the metrics of the processor"""
        return self._get_linked(ProcessorMetrics, 'Metrics')

class MemoryMetrics(Entity):
    """Usage and health statistics of a memory device"""
    pass

class Memory(Entity):
    """A memory device such as a DIMM"""
    readwrite_fields = (
        'Enabled',
        'LocationIndicatorActive',
        'OperatingSpeedRangeMHz',
        'SecurityState',
    )

    def metrics(self):
        """Returns the metrics of the memory device"""
        return self._get_linked(MemoryMetrics, 'Metrics')

class MemoryChunks(Entity):
    """A chunk of memory carved out of a memory domain"""
    readwrite_fields = (
        'DisplayName',
    )

class MemoryDomain(Entity):
    """A memory domain from which chunks can be allocated"""

    def memory_chunks(self):
        """Returns the memory chunks of the domain"""
        return self._list_linked(MemoryChunks, 'MemoryChunks')

class GraphicsController(Entity):
    """A graphics output device"""
    readwrite_fields = (
        'AssetTag',
    )

class USBController(Entity):
    """A USB controller"""
    pass

class ComputerSystem(Entity):
    """A computer system"""
    readwrite_fields = (
        'AssetTag',
        'HostName',
        'LocationIndicatorActive',
        'PowerCycleDelaySeconds',
        'PowerMode',
        'PowerOffDelaySeconds',
        'PowerOnDelaySeconds',
        'PowerRestorePolicy',
    )

    def bios(self):
        """Returns the BIOS of the system"""
        return self._get_linked(Bios, 'Bios')

    def boot_options(self):
        """Returns the UEFI boot options of the system"""
        boot = getattr(self, 'Boot', None) or {}
        link = boot.get('BootOptions') or {}
        return BootOption.list_referenced(self.client, link.get('@odata.id'))

    def graphics_controllers(self):
        """Returns the graphics controllers of the system"""
        return self._list_linked(GraphicsController, 'GraphicsControllers')

    def log_services(self):
        """Returns the logs of the system"""
        return self._list_linked(LogService, 'LogServices')

    def memory(self):
        """Returns the memory devices of the system"""
        return self._list_linked(Memory, 'Memory')

    def memory_domains(self):
        """Returns the memory domains of the system"""
        return self._list_linked(MemoryDomain, 'MemoryDomains')

    def network_interfaces(self):
        """Returns the network interfaces of the system"""
        return self._list_linked(NetworkInterface, 'NetworkInterfaces')

    def processors(self):
        """Returns the processors of the system"""
        return self._list_linked(Processor, 'Processors')

    def secure_boot(self):
        """Returns the secure boot settings of the system"""
        return self._get_linked(SecureBoot, 'SecureBoot')

    def simple_storage(self):
        """Returns the simple storage controllers of the system"""
        return self._list_linked(SimpleStorage, 'SimpleStorage')

    def storage(self):
        """Returns the storage subsystems of the system"""
        return self._list_linked(Storage, 'Storage')

    def usb_controllers(self):
        """Returns the USB controllers of the system"""
        return self._list_linked(USBController, 'USBControllers')
