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
"""Certificates, licenses, secure boot and component integrity"""

from redfishbind.common.entity import Entity

class Certificate(Entity):
    """A certificate installed on the service or a device"""
    pass

class CertificateLocations(Entity):
    """Locations of all certificates installed on the service"""

    def certificates(self):
        """Returns the certificates listed in Links.Certificates"""
        links = getattr(self, 'Links', None) or {}
        return self._fetch_links(Certificate, [item.get('@odata.id') for item \
                                        in links.get('Certificates', [])])

class CertificateService(Entity):
    """Actions and settings for certificate management"""

    def certificate_locations(self):
        """Returns the CertificateLocations resource"""
        return self._get_linked(CertificateLocations, 'CertificateLocations')

class ComponentIntegrity(Entity):
    """Critical and pertinent security information about a component"""
    readwrite_fields = (
        'ComponentIntegrityEnabled',
    )

class TrustedComponent(Entity):
    """A trusted component such as a TPM or a root of trust"""

    def certificates(self):
        """Returns the certificates of the component"""
        return self._list_linked(Certificate, 'Certificates')

class SecurityPolicy(Entity):
    """The security policy settings of a device"""
    readwrite_fields = (
        'OverrideParentManager',
    )

class Signature(Entity):
    """A signature or hash in a secure boot database"""
    pass

class SecureBootDatabase(Entity):
    """A UEFI secure boot database"""

    def certificates(self):
        """Returns the certificates stored in the database"""
        return self._list_linked(Certificate, 'Certificates')

    def signatures(self):
        """Returns the signatures stored in the database"""
        return self._list_linked(Signature, 'Signatures')

class SecureBoot(Entity):
    """UEFI secure boot settings of a system"""
    readwrite_fields = (
        'SecureBootEnable',
    )

    def secure_boot_databases(self):
        """Returns the secure boot databases of the system"""
        return self._list_linked(SecureBootDatabase, 'SecureBootDatabases')

class License(Entity):
    """A license installed on the service"""
    pass

class LicenseService(Entity):
    """Actions and settings for license management"""
    readwrite_fields = (
        'LicenseExpirationWarningDays',
        'ServiceEnabled',
    )

    def licenses(self):
        """Returns the installed licenses"""
        return self._list_linked(License, 'Licenses')
