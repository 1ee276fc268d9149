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
"""Errors raised while fetching, decoding and updating resources"""

#---------Imports---------

import logging

import jsonpath_rw

#---------End of imports---------

#---------Debug logger---------

LOGGER = logging.getLogger(__name__)

#---------End of debug logger---------

MESSAGE_ID_EXPR = jsonpath_rw.parse('$..MessageId')

class ResourceError(Exception):
    """Base class for all resource level errors"""
    pass

class ResourceDecodeError(ResourceError):
    """Raised when a response body is not a JSON object"""
    pass

class SnapshotDecodeError(ResourceError):
    """Raised when the stored server snapshot of a resource cannot be
    decoded again"""
    pass

class ReadOnlyResourceError(ResourceError):
    """Raised when update is requested on a type that has no writable
    properties"""
    pass

class UnboundResourceError(ResourceError):
    """Raised when a resource with no client is asked to talk to the
    service"""
    pass

class ResponseError(ResourceError):
    """Raised when the service answers with a non 2xx status"""
    def __init__(self, path, status, messages=None, method='GET'):
        self.path = path
        self.status = status
        self.method = method
        self.messages = messages if messages else []
        errmsg = '%s %s returned %s' % (method, path, status)
        if self.messages:
            errmsg += ' (%s)' % ', '.join(self.messages)
        super(ResponseError, self).__init__(errmsg)

class ResourceUpdateError(ResourceError):
    """Raised when a PATCH of a resource fails"""
    def __init__(self, path, resource_type, reason, status=None, messages=None):
        self.path = path
        self.resource_type = resource_type
        self.status = status
        self.messages = messages if messages else []
        super(ResourceUpdateError, self).__init__('Unable to update %s at '\
                                        '%s: %s' % (resource_type, path, reason))

def get_error_messages(resp):
    """Return the Redfish MessageIds found in an error response

    :param resp: rest response.
    :type resp: RestResponse.
    :returns: returns a list of message id strings, empty when the body
              carries none or is not JSON

    """
    try:
        body = resp.dict
    except (ValueError, TypeError):
        return []

    return [match.value for match in MESSAGE_ID_EXPR.find(body)]

def check_response(resp, path, method='GET'):
    """Raise ResponseError unless the response carries a 2xx status

    :param resp: rest response.
    :type resp: RestResponse.
    :param path: path the request was sent to.
    :type path: str.
    :param method: HTTP method of the request.
    :type method: str.

    """
    if resp is None:
        raise ResponseError(path, None, method=method)

    if not 200 <= resp.status < 300:
        messages = get_error_messages(resp)
        LOGGER.debug('%s %s failed with %s %s', method, path, resp.status, \
                                                                    messages)
        raise ResponseError(path, resp.status, messages=messages, \
                                                                method=method)
