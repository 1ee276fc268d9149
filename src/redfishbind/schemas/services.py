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
"""Event, task, job and update services together with the registries and
schema files published by the service"""

from redfishbind.common.entity import Entity

class Event(Entity):
    """An event delivered to a subscriber"""
    pass

class EventDestination(Entity):
    """An event subscription"""
    readwrite_fields = (
        'Context',
        'DeliveryRetryPolicy',
        'VerifyCertificate',
    )

class EventService(Entity):
    """The event service"""
    readwrite_fields = (
        'DeliveryRetryAttempts',
        'DeliveryRetryIntervalSeconds',
        'ServiceEnabled',
    )

    def event_destinations(self):
        """Returns the event subscriptions"""
        return self._list_linked(EventDestination, 'Subscriptions')

class Task(Entity):
    """A long running operation"""

    def sub_tasks(self):
        return self._list_linked(Task, 'SubTasks')

class TaskService(Entity):
    """The task service"""
    readwrite_fields = (
        'ServiceEnabled',
        'TaskAutoDeleteTimeoutMinutes',
    )

    def tasks(self):
        """Returns the tasks of the service"""
        return self._list_linked(Task, 'Tasks')

class Job(Entity):
    """A scheduled job"""
    readwrite_fields = (
        'JobState',
        'MaxExecutionTime',
    )

    def steps(self):
        return self._list_linked(Job, 'Steps')

class JobService(Entity):
    """The job service"""
    readwrite_fields = (
        'ServiceEnabled',
    )

    def jobs(self):
        """Returns the jobs of the service"""
        return self._list_linked(Job, 'Jobs')

class SoftwareInventory(Entity):
    """A firmware or software component"""
    readwrite_fields = (
        'WriteProtected',
    )

class UpdateService(Entity):
    """The update service"""
    readwrite_fields = (
        'HttpPushUriOptionsBusy',
        'HttpPushUriTargets',
        'HttpPushUriTargetsBusy',
        'ServiceEnabled',
        'VerifyRemoteServerCertificate',
    )

    def firmware_inventory(self):
        """Returns the firmware inventory"""
        return self._list_linked(SoftwareInventory, 'FirmwareInventory')

    def software_inventory(self):
        """Returns the software inventory"""
        return self._list_linked(SoftwareInventory, 'SoftwareInventory')

class ServiceConditions(Entity):
    """Conditions of the service that need attention"""
    pass

class ActionInfo(Entity):
    """The parameters an action accepts"""
    pass

class JsonSchemaFile(Entity):
    """The locations of a JSON schema"""
    pass

class MessageRegistry(Entity):
    """A message registry"""
    pass

class MessageRegistryFile(Entity):
    """The locations of a message registry"""
    pass

class AttributeRegistry(Entity):
    """An attribute registry such as the BIOS attributes"""
    pass

class RegisteredClient(Entity):
    """A client registered with the service"""
    readwrite_fields = (
        'ClientType',
        'ClientURI',
        'ExpirationDate',
    )

class Manifest(Entity):
    """A manifest of stanzas describing a request"""
    pass
