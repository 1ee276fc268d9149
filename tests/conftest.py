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
import json

import pytest

from redfishbind.rest import StaticRestResponse, RetriesExhaustedError

class FakeClient(object):
    """In memory stand in for HttpClient serving canned responses"""
    def __init__(self):
        self.resources = dict()
        self.broken = set()
        self.patches = list()
        self.gets = list()
        self.patch_status = 200
        self.patch_body = None
        self.patch_error = None
        self.etag_match = False
        self.default_prefix = '/redfish/v1/'

    def add(self, path, content, status=200, headers=None):
        if isinstance(content, dict):
            content = json.dumps(content).encode('utf-8')
        self.resources[path] = (status, content, headers or {})

    def add_collection(self, path, members, nextlink=None):
        body = {'@odata.id': path,
                'Members': [{'@odata.id': member} for member in members],
                'Members@odata.count': len(members)}
        if nextlink:
            body['Members@odata.nextLink'] = nextlink
        self.add(path, body)

    def get(self, path, args=None, headers=None):
        self.gets.append(path)
        if path in self.broken:
            raise RetriesExhaustedError('GET %s failed after 1 attempt(s)' % \
                                                                        path)
        if path not in self.resources:
            return StaticRestResponse(Status=404, Content={'error': {\
                '@Message.ExtendedInfo': [{'MessageId': \
                                    'Base.1.8.ResourceMissingAtURI'}]}})
        status, content, headers = self.resources[path]
        return StaticRestResponse(Status=status, Content=content, \
                                                            Headers=headers)

    def patch(self, path, body=None, headers=None):
        if self.patch_error is not None:
            raise self.patch_error
        self.patches.append((path, json.dumps(body), headers))
        return StaticRestResponse(Status=self.patch_status, \
                                        Content=self.patch_body or '')

@pytest.fixture
def client():
    return FakeClient()

ACCOUNT_URI = '/redfish/v1/AccountService/Accounts/2'

ACCOUNT_BODY = b'''{
    "@odata.type": "#ManagerAccount.v1_8_0.ManagerAccount",
    "@odata.id": "/redfish/v1/AccountService/Accounts/2",
    "@odata.etag": "W/\\"abc123\\"",
    "Id": "2",
    "Name": "User Account",
    "Description": "User Account",
    "Enabled": true,
    "Password": null,
    "UserName": "admin",
    "RoleId": "Administrator",
    "Locked": false,
    "AccountTypes": ["Redfish", "SNMP"],
    "Links": {"Role": {"@odata.id": "/redfish/v1/AccountService/Roles/Administrator"}},
    "Keys": {"@odata.id": "/redfish/v1/AccountService/Accounts/2/Keys"},
    "Oem": {"Contoso": {"Tier": 3}}
}'''

@pytest.fixture
def account_client(client):
    client.add(ACCOUNT_URI, ACCOUNT_BODY, headers={'ETag': 'W/"abc123"'})
    return client
