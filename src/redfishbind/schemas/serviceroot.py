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
"""The service root and the top level collections and services it links"""

from redfishbind.common.entity import Entity
from redfishbind.schemas.accounts import AccountService, SessionService, \
                                                            KeyService
from redfishbind.schemas.chassis import Cable, Chassis, Facility
from redfishbind.schemas.composition import AggregationService, \
                                                        CompositionService
from redfishbind.schemas.fabrics import Fabric
from redfishbind.schemas.managers import Manager
from redfishbind.schemas.powerdistribution import PowerEquipment
from redfishbind.schemas.security import CertificateService, \
                        ComponentIntegrity, LicenseService
from redfishbind.schemas.services import EventService, JobService, \
                    JsonSchemaFile, MessageRegistryFile, RegisteredClient, \
                    ServiceConditions, TaskService, UpdateService
from redfishbind.schemas.storage import Storage
from redfishbind.schemas.systems import ComputerSystem
from redfishbind.schemas.telemetry import TelemetryService

class ServiceRoot(Entity):
    """The root of a Redfish service"""

    @classmethod
    def get_root(cls, client):
        """Fetch the service root the client is rooted at

        :param client: transport client.
        :type client: HttpClient.

        """
        return cls.get(client, client.default_prefix)

    def systems(self):
        """Returns the computer systems of the service"""
        return self._list_linked(ComputerSystem, 'Systems')

    def chassis(self):
        """Returns the chassis of the service"""
        return self._list_linked(Chassis, 'Chassis')

    def managers(self):
        """Returns the managers of the service"""
        return self._list_linked(Manager, 'Managers')

    def fabrics(self):
        """Returns the fabrics of the service"""
        return self._list_linked(Fabric, 'Fabrics')

    def storage(self):
        """Returns the storage subsystems of the service"""
        return self._list_linked(Storage, 'Storage')

    def cables(self):
        """Returns the cables of the service"""
        return self._list_linked(Cable, 'Cables')

    def facilities(self):
        """Returns the facilities of the service"""
        return self._list_linked(Facility, 'Facilities')

    def component_integrity(self):
        return self._list_linked(ComponentIntegrity, 'ComponentIntegrity')

    def registered_clients(self):
        return self._list_linked(RegisteredClient, 'RegisteredClients')

    def json_schemas(self):
        return self._list_linked(JsonSchemaFile, 'JsonSchemas')

    def registries(self):
        return self._list_linked(MessageRegistryFile, 'Registries')

    def account_service(self):
        """Returns the account service"""
        return self._get_linked(AccountService, 'AccountService')

    def aggregation_service(self):
        return self._get_linked(AggregationService, 'AggregationService')

    def certificate_service(self):
        return self._get_linked(CertificateService, 'CertificateService')

    def composition_service(self):
        return self._get_linked(CompositionService, 'CompositionService')

    def event_service(self):
        """Returns the event service"""
        return self._get_linked(EventService, 'EventService')

    def job_service(self):
        return self._get_linked(JobService, 'JobService')

    def key_service(self):
        return self._get_linked(KeyService, 'KeyService')

    def license_service(self):
        return self._get_linked(LicenseService, 'LicenseService')

    def power_equipment(self):
        return self._get_linked(PowerEquipment, 'PowerEquipment')

    def service_conditions(self):
        return self._get_linked(ServiceConditions, 'ServiceConditions')

    def session_service(self):
        """Returns the session service"""
        return self._get_linked(SessionService, 'SessionService')

    def task_service(self):
        """Returns the task service"""
        return self._get_linked(TaskService, 'Tasks')

    def telemetry_service(self):
        return self._get_linked(TelemetryService, 'TelemetryService')

    def update_service(self):
        """Returns the update service"""
        return self._get_linked(UpdateService, 'UpdateService')
