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
"""Telemetry service, metric definitions, reports and triggers"""

from redfishbind.common.entity import Entity

class MetricDefinition(Entity):
    """The metadata of a metric"""
    readwrite_fields = (
        'Calculable',
        'CalculationTimeInterval',
        'DiscreteValues',
        'IsLinear',
        'MetricDataType',
        'MetricProperties',
        'MetricType',
        'SensingInterval',
        'Units',
    )

class MetricReport(Entity):
    """A report of metric values"""
    pass

class Triggers(Entity):
    """A trigger raising events when metrics cross thresholds"""
    readwrite_fields = (
        'EventTriggers',
        'MetricIds',
        'MetricProperties',
    )

class TelemetryService(Entity):
    """The telemetry service"""
    readwrite_fields = (
        'ServiceEnabled',
        'SupportedCollectionFunctions',
    )

    def metric_definitions(self):
        """Returns the metric definitions of the service"""
        return self._list_linked(MetricDefinition, 'MetricDefinitions')

    def metric_reports(self):
        """Returns the metric reports of the service"""
        return self._list_linked(MetricReport, 'MetricReports')

    def triggers(self):
        """Returns the triggers of the service"""
        return self._list_linked(Triggers, 'Triggers')
