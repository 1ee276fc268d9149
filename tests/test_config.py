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
from pytest_httpserver import HTTPServer

from redfishbind.config import RedfishConfig, client_from_config
from redfishbind.rest import AuthMethod

CONFIG = """[redfish]
url = https://10.0.0.100/
username = admin
password = password
auth = SESSION
timeout = 2.5
retries = 3
etag_match = yes
ca_certs = /etc/ssl/redfish.pem
"""

def write_config(tmp_path, text):
    path = tmp_path / 'redfish.conf'
    path.write_text(text)
    return str(path)

def test_load(tmp_path):
    config = RedfishConfig(write_config(tmp_path, CONFIG))
    config.load()

    assert config.get_url() == 'https://10.0.0.100'
    assert config.get_username() == 'admin'
    assert config.get_password() == 'password'
    assert config.get_auth() == AuthMethod.SESSION
    assert config.get_timeout() == 2.5
    assert config.get_retries() == 3
    assert config.get_etag_match() is True
    assert config.get_ca_certs() == '/etc/ssl/redfish.pem'
    assert config.get_proxy() is None

def test_defaults_when_file_missing(tmp_path):
    config = RedfishConfig(str(tmp_path / 'missing.conf'))
    config.load()

    assert config.get_auth() == AuthMethod.BASIC
    assert config.get_timeout() is None
    assert config.get_retries() is None
    assert config.get_etag_match() is False

def test_unknown_auth(tmp_path):
    config = RedfishConfig(write_config(tmp_path, '[redfish]\nauth = ntlm\n'))
    config.load()
    with pytest.raises(ValueError):
        config.get_auth()

def test_save(tmp_path):
    filename = str(tmp_path / 'saved.conf')
    config = RedfishConfig(filename)
    config.set_url('https://bmc.example.com')
    config.set_username('operator')
    config.save()

    loaded = RedfishConfig(filename)
    loaded.load()
    assert loaded.get_url() == 'https://bmc.example.com'
    assert loaded.get_username() == 'operator'
    assert 'password' not in (tmp_path / 'saved.conf').read_text()

def test_client_from_config(tmp_path, httpserver: HTTPServer):
    httpserver.expect_request('/redfish/v1/', method='GET').respond_with_json(\
                                            {'@odata.id': '/redfish/v1/'})
    httpserver.expect_request('/redfish/v1/SessionService/Sessions', \
                              method='GET').respond_with_json({'Members': []})
    filename = write_config(tmp_path, '[redfish]\nurl = %s\nusername = '\
            'admin\npassword = password\netag_match = true\n' % \
                                                    httpserver.url_for('/'))

    client = client_from_config(filename)
    assert client.etag_match is True
    assert client.get_authorization_key() == 'Basic YWRtaW46cGFzc3dvcmQ='
