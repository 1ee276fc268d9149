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
"""Managers and the services they host: logs, virtual media, serial and
host interfaces"""

from redfishbind.common.entity import Entity
from redfishbind.schemas.security import SecurityPolicy

class LogEntry(Entity):
    """An entry of a log"""
    readwrite_fields = (
        'Resolved',
    )

class LogService(Entity):
    """A log and its settings"""
    readwrite_fields = (
        'AutoDSTEnabled',
        'DateTime',
        'DateTimeLocalOffset',
        'ServiceEnabled',
    )

    def entries(self):
        """Returns the entries of the log"""
        return self._list_linked(LogEntry, 'Entries')

class HostInterface(Entity):
    """An interface between the host and the manager"""
    readwrite_fields = (
        'AuthNoneRoleId',
        'AuthenticationModes',
        'InterfaceEnabled',
    )

class SerialInterface(Entity):
    """A serial interface of the manager"""
    readwrite_fields = (
        'BitRate',
        'DataBits',
        'FlowControl',
        'InterfaceEnabled',
        'Parity',
        'StopBits',
    )

class VirtualMedia(Entity):
    """A virtual media device exposed by the manager"""
    readwrite_fields = (
        'Image',
        'Inserted',
        'Password',
        'TransferMethod',
        'TransferProtocolType',
        'UserName',
        'VerifyCertificate',
        'WriteProtected',
    )

class ManagerDiagnosticData(Entity):
    """Internal diagnostic data of a manager"""
    pass

class Manager(Entity):
    """A management subsystem such as a BMC"""
    readwrite_fields = (
        'AutoDSTEnabled',
        'DateTime',
        'DateTimeLocalOffset',
        'LocationIndicatorActive',
        'ServiceIdentification',
        'TimeZoneName',
    )

    def host_interfaces(self):
        """Returns the host interfaces of the manager"""
        return self._list_linked(HostInterface, 'HostInterfaces')

    def log_services(self):
        """Returns the logs of the manager"""
        return self._list_linked(LogService, 'LogServices')

    def serial_interfaces(self):
        """Returns the serial interfaces of the manager"""
        return self._list_linked(SerialInterface, 'SerialInterfaces')

    def virtual_media(self):
        """Returns the virtual media devices of the manager"""
        return self._list_linked(VirtualMedia, 'VirtualMedia')

    def diagnostic_data(self):
        """Returns the diagnostic data of the manager"""
        return self._get_linked(ManagerDiagnosticData, \
                                                    'ManagerDiagnosticData')

    def security_policy(self):
        """Returns the security policy of the manager"""
        return self._get_linked(SecurityPolicy, 'SecurityPolicy')
