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
"""Storage subsystems, controllers, drives and volumes"""

from redfishbind.common.entity import Entity

class Drive(Entity):
    """A disk drive or other physical storage medium"""
    readwrite_fields = (
        'AssetTag',
        'HotspareReplacementMode',
        'HotspareType',
        'LocationIndicatorActive',
        'ReadyToRemove',
        'StatusIndicator',
        'WriteCacheEnabled',
    )

class Volume(Entity):
    """A volume, such as a RAID set, exposed by a storage subsystem"""
    readwrite_fields = (
        'AccessCapabilities',
        'CapacityBytes',
        'CapacitySources',
        'Compressed',
        'Deduplicated',
        'DisplayName',
        'Encrypted',
        'EncryptionTypes',
        'IOPerfModeEnabled',
        'IsBootCapable',
        'LowSpaceWarningThresholdPercents',
        'ProvisioningPolicy',
        'ReadCachePolicy',
        'RecoverableCapacitySourceCount',
        'StripSizeBytes',
        'WriteCachePolicy',
        'WriteHoleProtectionPolicy',
    )

    def drives(self):
        """Returns the drives the volume is built on"""
        links = getattr(self, 'Links', None) or {}
        return self._fetch_links(Drive, [item.get('@odata.id') for item in \
                                                    links.get('Drives', [])])

class StorageController(Entity):
    """A storage controller"""
    readwrite_fields = (
        'AssetTag',
    )

class Storage(Entity):
    """A storage subsystem"""

    def controllers(self):
        """Returns the storage controllers"""
        return self._list_linked(StorageController, 'Controllers')

    def drives(self):
        """Returns the drives attached to the subsystem"""
        return self._list_linked(Drive, 'Drives')

    def volumes(self):
        """Returns the volumes of the subsystem"""
        return self._list_linked(Volume, 'Volumes')

class SimpleStorage(Entity):
    """A simple storage controller and its directly attached devices"""
    pass
