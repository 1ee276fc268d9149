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
"""Request and response holders shared by the transport and the resource
layer. A response keeps its body as the bytes received from the wire; text
and JSON views are derived from them on access."""

#---------Imports---------

import json

#---------End of imports---------

class RisObject(dict):
    """A decoded JSON object whose members can also be read as attributes,
    ``links.Role`` as well as ``links['Role']``."""

    def __init__(self, d):
        super(RisObject, self).__init__()
        for key, value in d.items():
            self[key] = self.parse(value)

    def __getattr__(self, name):
        try:
            return self[name]
        except KeyError:
            raise AttributeError(name)

    @classmethod
    def parse(cls, value):
        """Wrap every JSON object found in value, recursing into arrays

        :param value: decoded JSON value.
        :type value: any.
        :returns: value with dicts replaced by RisObject instances

        """
        if isinstance(value, dict):
            return cls(value)
        if isinstance(value, list):
            return [cls.parse(item) for item in value]
        return value

class RestRequest(object):
    """The method, path and body of a request, kept for logging"""
    def __init__(self, path, method='GET', data=None, url=None):
        self.path = path
        self.method = method
        self.body = data
        self.url = url

    def __str__(self):
        return "{} {}\n\n{}".format(self.method, self.path, self.body or '')

class RestResponse(object):
    """A response received from the service"""
    def __init__(self, rest_request, http_response):
        """Initialize RestResponse

        :param rest_request: the request this response answers.
        :type rest_request: RestRequest.
        :param http_response: response returned by urllib3, None for
                              responses built from static data.
        :type http_response: urllib3.HTTPResponse.

        """
        self._rest_request = rest_request
        self._http_response = http_response
        self._status = None
        self._headers = dict()
        self._session_key = None
        self._session_location = None
        self.ori = http_response.data if http_response is not None else b''

    @property
    def raw(self):
        """Response body bytes exactly as they were received"""
        return self.ori if self.ori else b''

    @property
    def read(self):
        """Response body as text"""
        return self.raw.decode('utf-8', 'ignore')

    @property
    def dict(self):
        """Response body decoded as JSON"""
        return json.loads(self.read)

    @property
    def obj(self):
        """Response body decoded as JSON with attribute access"""
        return RisObject.parse(self.dict)

    @property
    def status(self):
        """HTTP status code of the response"""
        if self._http_response is not None:
            return self._http_response.status
        return self._status

    def getheaders(self):
        """Return the response headers as a dict"""
        if self._http_response is not None:
            return dict(self._http_response.headers)
        return self._headers

    def getheader(self, name):
        """Return a single response header, ignoring the case of its name

        :param name: header name.
        :type name: str.
        :returns: header value or None

        """
        if self._http_response is not None:
            return self._http_response.headers.get(name)

        for key, value in self._headers.items():
            if key.lower() == name.lower():
                return value
        return None

    @property
    def session_key(self):
        """X-Auth-Token returned by a session login"""
        if not self._session_key:
            self._session_key = self.getheader('X-Auth-Token')
        return self._session_key

    @property
    def session_location(self):
        """Location of the session created by a session login"""
        if not self._session_location:
            self._session_location = self.getheader('Location')
        return self._session_location

    @property
    def request(self):
        return self._rest_request

    @property
    def path(self):
        return self._rest_request.path if self._rest_request else None

    def __str__(self):
        headerstr = ''.join('%s %s\n' % (key, value) for key, value in \
                                                    self.getheaders().items())
        return "%s\n%s\n\n%s" % (self.status, headerstr, self.read)

class StaticRestResponse(RestResponse):
    """A response built from static data instead of an HTTP exchange.

    Keyword arguments: ``Status``, ``Headers`` (dict or list of pairs),
    ``Content`` (bytes kept verbatim, text, or a value dumped as JSON),
    ``session_key``, ``session_location`` and ``restreq``.
    """
    def __init__(self, **kwargs):
        super(StaticRestResponse, self).__init__(kwargs.get('restreq'), None)

        self._status = kwargs.get('Status')
        self._headers = dict(kwargs.get('Headers') or {})
        self._session_key = kwargs.get('session_key')
        self._session_location = kwargs.get('session_location')

        content = kwargs.get('Content', b'')
        if isinstance(content, bytes):
            self.ori = content
        elif isinstance(content, str):
            self.ori = content.encode('utf-8')
        else:
            self.ori = json.dumps(content).encode('utf-8')
