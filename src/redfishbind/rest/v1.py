###
# Copyright 2016 Hewlett Packard Enterprise, Inc. All rights reserved.
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
"""HTTP transport to a Redfish service built on urllib3.

The client fetches the service root when it is created, authenticates with
either HTTP basic credentials or a Redfish session and retries requests that
fail at the connection level.
"""

#---------Imports---------

import json
import time
import base64
import logging

from functools import partial
from urllib.parse import urlparse, urlencode

import urllib3

from urllib3 import ProxyManager

# PySocks is only present with the 'socks' extra
try:
    from urllib3.contrib.socks import SOCKSProxyManager
except ImportError:
    SOCKSProxyManager = None

from redfishbind.rest.containers import RestRequest, RestResponse, RisObject

#---------End of imports---------

#---------Debug logger---------

LOGGER = logging.getLogger(__name__)

#---------End of debug logger---------

MASKED_PROPERTIES = ('password', 'oldpassword', 'newpassword', 'authorization', \
                     'x-auth-token')
REDIRECT_CODES = (301, 302, 303, 307, 308)
MAX_REDIRECTS = 10

def mask_passwords(body):
    """Return a loggable copy of a request body or header dict with
    passwords and credentials replaced by asterisks

    :param body: request headers, JSON text or dict
    :type body: dict or str
    :returns: returns the masked body

    """
    if not body:
        return body

    if isinstance(body, (str, bytes)):
        try:
            debugjson = json.loads(body)
        except ValueError:
            return 'binary body' if isinstance(body, bytes) else body
        if not isinstance(debugjson, dict):
            return body
        return json.dumps(mask_passwords(debugjson))

    if isinstance(body, dict):
        return dict((key, '******' if str(key).lower() in MASKED_PROPERTIES \
                                        else val) for key, val in body.items())

    return body

class RestError(Exception):
    """Base class for errors raised by the REST transport."""
    pass

class RetriesExhaustedError(RestError):
    """Raised when every attempt of a request failed to connect."""
    pass

class TooManyRedirectsError(RestError):
    """Raised when a request is redirected more than MAX_REDIRECTS times."""
    pass

class InvalidCredentialsError(RestError):
    """Raised when the service rejects the login credentials."""
    pass

class ServerDownOrUnreachableError(RestError):
    """Raised when the service root cannot be read."""
    pass

class JsonDecodingError(RestError):
    """Raised when the service root is not valid JSON."""
    pass

class AuthMethod(object):
    """Supported login methods"""
    BASIC = 'basic'
    SESSION = 'session'

class RestClientBase(object):
    """Connection, authentication and request handling for one service"""
    MAX_RETRY = 1

    def __init__(self, base_url, username=None, password=None, \
                 default_prefix='/redfish/v1/', sessionkey=None, \
                 cache=False, proxy=None, ca_certs=None, timeout=None, \
                 max_retry=None, etag_match=False):
        """Initialization of the base class RestClientBase

        :param base_url: scheme and host of the service, e.g. https://10.0.0.100
        :type base_url: str
        :param username: account used to log in
        :type username: str
        :param password: password of the account
        :type password: str
        :param default_prefix: path of the service root
        :type default_prefix: str
        :param sessionkey: token of an existing session to reuse
        :type sessionkey: str
        :param cache: skip the initial service root download
        :type cache: bool
        :param proxy: http or socks proxy URL
        :type proxy: str
        :param ca_certs: CA bundle used to verify the server certificate
        :type ca_certs: str
        :param timeout: per request timeout in seconds
        :type timeout: float
        :param max_retry: attempts made before giving up on a request
        :type max_retry: int
        :param etag_match: send If-Match on resource updates
        :type etag_match: bool

        """
        self.base_url = base_url.rstrip('/')
        self.default_prefix = default_prefix
        self.login_url = default_prefix.rstrip('/') + '/SessionService/Sessions'
        self.max_retry = max_retry if max_retry else self.MAX_RETRY
        self.etag_match = etag_match
        self.root = None
        self.root_resp = None

        self.__username = username
        self.__password = password
        self.__session_key = sessionkey
        self.__session_location = None
        self.__authorization_key = None
        self.__proxy = proxy
        self._ca_certs = ca_certs
        self._timeout = timeout
        self._conn = None
        self._conn_count = 0

        self.head = partial(self._rest_request, method='HEAD')
        self.put = partial(self._rest_request, method='PUT')
        self.delete = partial(self._rest_request, method='DELETE')
        self.post = partial(self._rest_request, method='POST')
        self.patch = partial(self._rest_request, method='PATCH')

        self.__init_connection()
        if not cache:
            self.get_root_object()

    def __init_connection(self):
        """Create the urllib3 pool used for every request"""
        if self._ca_certs:
            certargs = dict(cert_reqs='CERT_REQUIRED', ca_certs=self._ca_certs)
        else:
            urllib3.disable_warnings()
            certargs = dict(cert_reqs='CERT_NONE')

        proxy = self.__proxy
        if proxy and proxy.startswith('socks'):
            if SOCKSProxyManager is None:
                raise RestError("SOCKS proxy %s requires PySocks; install the "\
                                "'socks' extra." % proxy)
            LOGGER.info("Using SOCKS proxy %s", proxy)
            http = SOCKSProxyManager(proxy, **certargs)
        elif proxy:
            LOGGER.info("Using HTTP proxy %s", proxy)
            http = ProxyManager(proxy, **certargs)
        else:
            http = urllib3.PoolManager(**certargs)

        self._conn = http.request

    def set_username(self, username):
        self.__username = username

    def set_password(self, password):
        self.__password = password

    def get_proxy(self):
        """Return the proxy URL, None when connecting directly"""
        return self.__proxy

    def get_session_key(self):
        """Return the token of the current session"""
        return self.__session_key

    def get_session_location(self):
        """Return the URI of the current session"""
        return self.__session_location

    def get_authorization_key(self):
        """Return the basic Authorization header value"""
        return self.__authorization_key

    def get_root_object(self):
        """Fetch the service root and locate the sessions collection"""
        resp = self.get(urlparse(self.base_url).path + self.default_prefix)

        if resp.status != 200:
            raise ServerDownOrUnreachableError("Service root %s returned %s" \
                                            % (self.default_prefix, resp.status))

        try:
            self.root = RisObject.parse(json.loads(resp.read))
        except ValueError as excp:
            LOGGER.error("%s for JSON content %s", excp, resp.read)
            raise JsonDecodingError('Service root %s is not valid JSON.' % \
                                                        self.default_prefix)
        self.root_resp = resp

        links = self.root.get('Links', {})
        if isinstance(links, dict):
            sessions = links.get('Sessions', {})
            if isinstance(sessions, dict):
                self.login_url = sessions.get('@odata.id', self.login_url)

    def get(self, path, args=None, headers=None):
        """Perform a GET request

        :param path: path of the resource.
        :type path: str.
        :param args: query parameters.
        :type args: dict.
        :param headers: additional headers.
        :type headers: dict.
        :returns: returns a RestResponse object

        """
        return self._rest_request(path, method='GET', args=args, \
                                                            headers=headers)

    def _get_req_headers(self, headers=None):
        """Merge the authentication and OData headers into headers"""
        headers = dict(headers) if isinstance(headers, dict) else dict()

        if self.__session_key:
            headers['X-Auth-Token'] = self.__session_key
        elif self.__authorization_key:
            headers['Authorization'] = self.__authorization_key

        headers['OData-Version'] = '4.0'
        return headers

    @staticmethod
    def _encode_body(body, args, method, headers):
        """Serialize the payload of a request, updating its Content-Type"""
        if isinstance(body, (dict, list)):
            headers['Content-Type'] = 'application/json'
            body = json.dumps(body)
        elif body is not None and not isinstance(body, (str, bytes)):
            headers['Content-Type'] = 'application/x-www-form-urlencoded'
            body = urlencode(body)

        if args and method in ('PUT', 'POST', 'PATCH'):
            headers['Content-Type'] = 'application/x-www-form-urlencoded'
            body = urlencode(args)
        return body

    def _send(self, method, reqpath, body, headers):
        """Send one request, following redirects by hand"""
        request_args = dict(headers=headers, body=body, redirect=False)
        if self._timeout:
            request_args['timeout'] = self._timeout

        for _ in range(MAX_REDIRECTS + 1):
            inittime = time.time()
            resp = self._conn(method, self.base_url + reqpath, **request_args)
            self._conn_count += 1
            LOGGER.info('Response Time to %s: %s seconds.', reqpath, \
                                                        time.time() - inittime)

            newloc = resp.headers.get('location')
            if resp.status not in REDIRECT_CODES or not newloc:
                return resp
            location = urlparse(newloc)
            reqpath = location.path
            if location.query:
                reqpath += '?' + location.query
            LOGGER.info('Redirected to %s', reqpath)

        raise TooManyRedirectsError('%s %s was redirected more than %s times'
                                    % (method, reqpath, MAX_REDIRECTS))

    def _rest_request(self, path, method='GET', args=None, body=None, \
                                                                headers=None):
        """Send a request, retrying connection failures up to max_retry
        attempts

        :param path: path of the resource
        :type path: str
        :param method: HTTP method
        :type method: str
        :param args: query parameters for GET, form fields otherwise
        :type args: dict
        :param body: payload, dicts and lists are sent as JSON
        :type body: dict
        :param headers: additional headers
        :type headers: dict
        :returns: returns a RestResponse object

        """
        headers = self._get_req_headers(headers)
        body = self._encode_body(body, args, method, headers)
        reqpath = path.replace('//', '/')
        if args and method == 'GET':
            reqpath += '?' + urlencode(args)

        restreq = RestRequest(path, method, data=body, url=self.base_url)
        if LOGGER.isEnabledFor(logging.DEBUG):
            LOGGER.debug('HTTP REQUEST: %s\n\tPATH: %s\n\tHEADERS: %s\n\t'\
                         'BODY: %s', method, path, mask_passwords(headers), \
                         mask_passwords(body))

        for attempt in range(1, self.max_retry + 1):
            LOGGER.info('Attempt %s of %s %s', attempt, method, path)
            try:
                resp = self._send(method, reqpath, body, headers)
            except (urllib3.exceptions.HTTPError, OSError) as excp:
                LOGGER.info('Retrying %s [%s]', path, excp)
                if attempt < self.max_retry:
                    time.sleep(1)
                    self.__init_connection()
                continue

            restresp = RestResponse(restreq, resp)
            if LOGGER.isEnabledFor(logging.DEBUG):
                LOGGER.debug('HTTP RESPONSE for %s:\nCode: %s\nHeaders: %s\n'\
                             'Body: %s', path, restresp.status, \
                             mask_passwords(restresp.getheaders()), \
                             restresp.read)
            return restresp

        raise RetriesExhaustedError('%s %s failed after %s attempt(s)' % \
                                            (method, path, self.max_retry))

    def login(self, username=None, password=None, auth=AuthMethod.BASIC):
        """Log in to the service. Call logout() when done so session
        logins do not leak sessions on the service.

        :param username: the user name.
        :type username: str.
        :param password: the password.
        :type password: str.
        :param auth: authentication method
        :type auth: AuthMethod.BASIC or AuthMethod.SESSION

        """
        self.__username = username if username else self.__username
        self.__password = password if password else self.__password

        if auth == AuthMethod.BASIC:
            self.__basic_login()
        elif auth == AuthMethod.SESSION:
            self.__session_login()
        else:
            raise ValueError('Unknown authentication method: %s' % auth)

    def __basic_login(self):
        credentials = '{}:{}'.format(self.__username, self.__password)
        self.__authorization_key = 'Basic {}'.format(base64.b64encode(\
                                credentials.encode('utf-8')).decode('utf-8'))

        resp = self._rest_request(self.login_url)
        if resp.status == 401:
            self.__authorization_key = None
            raise InvalidCredentialsError('Basic authentication rejected for '\
                                                    '%s' % self.__username)

    def __session_login(self):
        data = dict(UserName=self.__username, Password=self.__password)
        resp = self._rest_request(self.login_url, method='POST', body=data)
        LOGGER.info('Login returned code %s', resp.status)

        if not resp.session_key or resp.status not in (200, 201):
            raise InvalidCredentialsError('Session login rejected for %s, '\
                                    'code %s' % (self.__username, resp.status))

        self.__session_key = resp.session_key
        self.__session_location = resp.session_location
        self.set_username(None)
        self.set_password(None)

    def logout(self):
        """Delete the current session and forget every credential"""
        if self.__session_key and self.__session_location:
            resp = self.delete(self.__session_location.replace(\
                                                            self.base_url, ''))
            LOGGER.info("Session %s closed with code %s", \
                                    self.__session_location, resp.status)

        self.__session_key = None
        self.__session_location = None
        self.__authorization_key = None

class HttpClient(RestClientBase):
    """A client for a Redfish service"""
    pass

def get_client_instance(base_url=None, username=None, password=None, \
                        default_prefix='/redfish/v1/', sessionkey=None, \
                        cache=False, proxy=None, ca_certs=None, timeout=None, \
                        max_retry=None, etag_match=False):
    """Create and return a HttpClient instance.

    :param base_url: scheme and host of the service.
    :type base_url: str.
    :param username: account used to log in
    :type: str
    :param password: password of the account
    :type password: str
    :param default_prefix: path of the service root
    :type default_prefix: str
    :param sessionkey: token of an existing session
    :type sessionkey: str
    :returns: a HttpClient object.

    """
    if not base_url:
        raise ValueError('A base URL is required to create a client.')

    return HttpClient(base_url=base_url, username=username, \
                      password=password, default_prefix=default_prefix, \
                      sessionkey=sessionkey, cache=cache, proxy=proxy, \
                      ca_certs=ca_certs, timeout=timeout, max_retry=max_retry, \
                      etag_match=etag_match)

redfish_client = partial(get_client_instance, default_prefix='/redfish/v1/')
redfish_client.__doc__ = "Create and return a Redfish HttpClient rooted at "\
                         "/redfish/v1/"
