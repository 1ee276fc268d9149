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
import pytest

from redfishbind.common import (CollectionError, ResponseError, \
                                ResourceDecodeError, get_collection)
from redfishbind.rest import RetriesExhaustedError
from redfishbind.schemas import AccountService, ManagerAccount, Volume

ACCOUNTS = '/redfish/v1/AccountService/Accounts'

def account(uri, username):
    return {'@odata.id': uri,
            '@odata.type': '#ManagerAccount.v1_8_0.ManagerAccount',
            'UserName': username}

@pytest.fixture
def accounts_client(client):
    members = ['%s/%s' % (ACCOUNTS, idx) for idx in (1, 2, 3)]
    client.add_collection(ACCOUNTS, members)
    for idx, member in enumerate(members):
        client.add(member, account(member, 'user%s' % idx))
    return client

class TestGetCollection(object):
    def test_member_uris_in_order(self, accounts_client):
        assert get_collection(accounts_client, ACCOUNTS) == [\
            ACCOUNTS + '/1', ACCOUNTS + '/2', ACCOUNTS + '/3']

    def test_next_link_is_followed(self, client):
        client.add_collection(ACCOUNTS, [ACCOUNTS + '/1', ACCOUNTS + '/2'], \
                              nextlink=ACCOUNTS + '?$skip=2')
        client.add_collection(ACCOUNTS + '?$skip=2', [ACCOUNTS + '/3'])
        assert get_collection(client, ACCOUNTS) == [\
            ACCOUNTS + '/1', ACCOUNTS + '/2', ACCOUNTS + '/3']

    def test_next_link_loop_terminates(self, client):
        client.add_collection(ACCOUNTS, [ACCOUNTS + '/1'], nextlink=ACCOUNTS)
        assert get_collection(client, ACCOUNTS) == [ACCOUNTS + '/1']

    def test_missing_collection(self, client):
        with pytest.raises(ResponseError):
            get_collection(client, ACCOUNTS)

    def test_collection_not_an_object(self, client):
        client.add(ACCOUNTS, b'["/redfish/v1/AccountService/Accounts/1"]')
        with pytest.raises(ResourceDecodeError):
            get_collection(client, ACCOUNTS)

class TestListReferenced(object):
    def test_all_members(self, accounts_client):
        accounts = ManagerAccount.list_referenced(accounts_client, ACCOUNTS)
        assert [item.UserName for item in accounts] == ['user0', 'user1', \
                                                                    'user2']
        assert all(item.client is accounts_client for item in accounts)

    def test_empty_link_short_circuits(self, client):
        assert ManagerAccount.list_referenced(client, '') == []
        assert ManagerAccount.list_referenced(client, None) == []
        assert client.gets == []

    def test_empty_collection(self, client):
        client.add_collection(ACCOUNTS, [])
        assert ManagerAccount.list_referenced(client, ACCOUNTS) == []

    def test_failing_member_is_recorded(self, accounts_client):
        accounts_client.broken.add(ACCOUNTS + '/2')

        with pytest.raises(CollectionError) as excinfo:
            ManagerAccount.list_referenced(accounts_client, ACCOUNTS)

        error = excinfo.value
        assert list(error.failures.keys()) == [ACCOUNTS + '/2']
        assert isinstance(error.failures[ACCOUNTS + '/2'], \
                                                        RetriesExhaustedError)
        assert [item.ODataID for item in error.members] == [\
                                            ACCOUNTS + '/1', ACCOUNTS + '/3']
        assert ACCOUNTS + '/3' in accounts_client.gets
        assert ACCOUNTS + '/2' in str(error)

    def test_error_status_member_is_recorded(self, accounts_client):
        accounts_client.add(ACCOUNTS + '/1', {'error': 'boom'}, status=500)
        accounts_client.add(ACCOUNTS + '/3', b'{"UserName": ')

        with pytest.raises(CollectionError) as excinfo:
            ManagerAccount.list_referenced(accounts_client, ACCOUNTS)

        failures = excinfo.value.failures
        assert isinstance(failures[ACCOUNTS + '/1'], ResponseError)
        assert failures[ACCOUNTS + '/1'].status == 500
        assert isinstance(failures[ACCOUNTS + '/3'], ResourceDecodeError)
        assert [item.UserName for item in excinfo.value.members] == ['user1']

class TestNavigation(object):
    def test_collection_link_property(self, accounts_client):
        accounts_client.add('/redfish/v1/AccountService', \
                    {'@odata.id': '/redfish/v1/AccountService', \
                     'Accounts': {'@odata.id': ACCOUNTS}, \
                     'MinPasswordLength': 8})
        service = AccountService.get(accounts_client, \
                                                '/redfish/v1/AccountService')
        assert len(service.accounts()) == 3
        assert service.roles() == []
        assert service.privilege_map() is None

    def test_array_of_links(self, client):
        drives = ['/redfish/v1/Systems/1/Storage/1/Drives/%s' % idx for idx \
                                                                    in (0, 1)]
        for drive in drives:
            client.add(drive, {'@odata.id': drive, 'AssetTag': None})
        client.add('/redfish/v1/Systems/1/Storage/1/Volumes/1', \
                   {'@odata.id': '/redfish/v1/Systems/1/Storage/1/Volumes/1', \
                    'Links': {'Drives': [{'@odata.id': drive} for drive \
                                                                in drives]}})
        volume = Volume.get(client, '/redfish/v1/Systems/1/Storage/1/Volumes/1')
        assert [drive.ODataID for drive in volume.drives()] == drives

    def test_array_of_links_with_failure(self, client):
        drive = '/redfish/v1/Systems/1/Storage/1/Drives/0'
        client.add(drive, {'@odata.id': drive})
        client.add('/redfish/v1/Systems/1/Storage/1/Volumes/1', \
                   {'@odata.id': '/redfish/v1/Systems/1/Storage/1/Volumes/1', \
                    'Links': {'Drives': [{'@odata.id': drive}, \
                                         {'@odata.id': drive + '9'}]}})
        volume = Volume.get(client, '/redfish/v1/Systems/1/Storage/1/Volumes/1')
        with pytest.raises(CollectionError) as excinfo:
            volume.drives()
        assert list(excinfo.value.failures.keys()) == [drive + '9']
        assert len(excinfo.value.members) == 1
