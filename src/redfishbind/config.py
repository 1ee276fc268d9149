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
"""Connection configuration loaded from an ini file.

Example::

    [redfish]
    url = https://10.0.0.100
    username = admin
    password = password
    auth = session
    retries = 3
"""

#---------Imports---------

import os
import logging
import configparser

from redfishbind.rest.v1 import AuthMethod, get_client_instance

#---------End of imports---------

#---------Debug logger---------

LOGGER = logging.getLogger(__name__)

#---------End of debug logger---------

class AutoConfigParser(object):
    """Auto configuration parser. Every attribute named ``_ac__<key>`` is a
    setting read from and written to the configuration section."""
    _config_pattern = '_ac__'

    def __init__(self, filename=None):
        """Initialize AutoConfigParser

        :param filename: file name to be used for config loading.
        :type filename: str

        """
        self._sectionname = 'DEFAULT'
        self._configfile = filename

    def _get_ac_keys(self):
        """Return the configuration keys this parser manages"""
        return [key[len(self._config_pattern):] for key in self.__dict__ \
                                        if key.startswith(self._config_pattern)]

    def _get(self, key):
        """Return the value of a configuration key

        :param key: name of the setting.
        :type key: str

        """
        return getattr(self, self._config_pattern + key)

    def _set(self, key, value):
        """Set the value of a configuration key

        :param key: name of the setting.
        :type key: str
        :param value: new value.
        :type value: str

        """
        setattr(self, self._config_pattern + key, value)

    def load(self, filename=None):
        """Load configuration settings from the file

        :param filename: path to the configuration file.
        :type filename: str

        """
        fname = filename if filename else self._configfile
        if not fname or not os.path.isfile(fname):
            LOGGER.warning("Config file '%s' not found", fname)
            return

        parser = configparser.RawConfigParser()
        parser.read(fname)

        if not parser.has_section(self._sectionname):
            LOGGER.warning("Config file '%s' has no [%s] section", fname, \
                                                            self._sectionname)
            return

        for key in self._get_ac_keys():
            if parser.has_option(self._sectionname, key):
                self._set(key, parser.get(self._sectionname, key))

        self._configfile = fname

    def save(self, filename=None):
        """Save the current settings to the file

        :param filename: path to the configuration file.
        :type filename: str

        """
        fname = filename if filename else self._configfile
        if not fname:
            raise ValueError('No configuration file name given.')

        parser = configparser.RawConfigParser()
        if os.path.isfile(fname):
            parser.read(fname)
        if not parser.has_section(self._sectionname):
            parser.add_section(self._sectionname)

        for key in self._get_ac_keys():
            value = self._get(key)
            if value not in (None, ''):
                parser.set(self._sectionname, key, str(value))

        with open(fname, 'w') as configfh:
            parser.write(configfh)

class RedfishConfig(AutoConfigParser):
    """Redfish connection config object"""
    def __init__(self, filename=None):
        """Initialize RedfishConfig

        :param filename: file name to be used for config loading.
        :type filename: str

        """
        AutoConfigParser.__init__(self, filename=filename)
        self._sectionname = 'redfish'
        self._ac__url = ''
        self._ac__username = ''
        self._ac__password = ''
        self._ac__proxy = ''
        self._ac__ca_certs = ''
        self._ac__timeout = ''
        self._ac__retries = ''
        self._ac__auth = AuthMethod.BASIC
        self._ac__etag_match = ''

    def get_url(self):
        """Get the config file URL"""
        url = self._get('url')
        url = url[:-1] if url.endswith('/') else url

        return url

    def set_url(self, value):
        """Set the config file URL

        :param value: URL of the Redfish service
        :type value: str

        """
        return self._set('url', value)

    def get_username(self):
        """Get the config file user name"""
        return self._get('username')

    def set_username(self, value):
        """Set the config file user name

        :param value: user name for config file
        :type value: str

        """
        return self._set('username', value)

    def get_password(self):
        """Get the config file password"""
        return self._get('password')

    def set_password(self, value):
        """Set the config file password

        :param value: password for config file
        :type value: str

        """
        return self._set('password', value)

    def get_proxy(self):
        """Get proxy value to be set for communication"""
        return self._get('proxy') or None

    def get_ca_certs(self):
        """Get the CA bundle used to verify the service certificate"""
        return self._get('ca_certs') or None

    def get_timeout(self):
        """Get the request timeout in seconds"""
        timeout = self._get('timeout')
        return float(timeout) if timeout not in (None, '') else None

    def get_retries(self):
        """Get the number of attempts made for each request"""
        retries = self._get('retries')
        return int(retries) if retries not in (None, '') else None

    def get_auth(self):
        """Get the authentication method"""
        auth = (self._get('auth') or AuthMethod.BASIC).lower()
        if auth not in (AuthMethod.BASIC, AuthMethod.SESSION):
            raise ValueError("Unknown auth method '%s' in config" % auth)
        return auth

    def get_etag_match(self):
        """Get whether updates are sent with If-Match"""
        value = self._get('etag_match')
        if isinstance(value, bool):
            return value

        return str(value).lower() in ("yes", "true", "t", "1")

def client_from_config(filename):
    """Create a client from a configuration file and log it in

    :param filename: path to the configuration file.
    :type filename: str
    :returns: a logged in HttpClient object.

    """
    config = RedfishConfig(filename)
    config.load()

    client = get_client_instance(base_url=config.get_url(), \
                    username=config.get_username(), \
                    password=config.get_password(), \
                    proxy=config.get_proxy(), \
                    ca_certs=config.get_ca_certs(), \
                    timeout=config.get_timeout(), \
                    max_retry=config.get_retries(), \
                    etag_match=config.get_etag_match())
    client.login(auth=config.get_auth())
    return client
