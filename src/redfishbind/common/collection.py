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
"""Resource collection helpers"""

#---------Imports---------

import logging

from collections import OrderedDict

import jsonpath_rw

from redfishbind.common.errors import (ResourceError, ResourceDecodeError, \
                                       check_response)

#---------End of imports---------

#---------Debug logger---------

LOGGER = logging.getLogger(__name__)

#---------End of debug logger---------

MEMBERS_EXPR = jsonpath_rw.parse("Members[*].'@odata.id'")
NEXTLINK = 'Members@odata.nextLink'

class CollectionError(ResourceError):
    """Accumulates the member failures of a collection listing.

    Raised by list_referenced when at least one member could not be fetched.
    ``failures`` maps each failing member URI to its error and ``members``
    holds the resources that were fetched, in collection order.
    """
    def __init__(self, path=None):
        super(CollectionError, self).__init__()
        self.path = path
        self.failures = OrderedDict()
        self.members = []

    def empty(self):
        """Returns True when no member failed"""
        return not self.failures

    def __str__(self):
        if self.empty():
            return 'No failures in collection %s' % self.path
        return 'Failed to fetch %s member(s) of %s: %s' % (len(self.failures), \
                                self.path, ', '.join(list(self.failures.keys())))

def get_collection(client, path):
    """Returns the member URIs of a collection in document order.
    Follows ``Members@odata.nextLink`` when the service pages the collection.

    :param client: transport client used for the GET requests.
    :type client: HttpClient.
    :param path: collection URI.
    :type path: str.
    :returns: list of member URIs.

    """
    members = list()
    visited = set()
    nextpath = path

    while nextpath and nextpath not in visited:
        visited.add(nextpath)
        resp = client.get(nextpath)
        check_response(resp, nextpath)

        try:
            body = resp.dict
        except ValueError as excp:
            raise ResourceDecodeError('Collection %s is not valid JSON: %s' \
                                                            % (nextpath, excp))
        if not isinstance(body, dict):
            raise ResourceDecodeError('Collection %s is not a JSON object' % \
                                                                    nextpath)

        members.extend([match.value for match in MEMBERS_EXPR.find(body)])
        nextpath = body.get(NEXTLINK)

    LOGGER.debug('Collection %s has %s member(s)', path, len(members))
    return members
