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
"""Base class shared by every Redfish resource.

A resource is decoded from the body of a GET response. Types that the
service lets clients modify declare the names of those properties in
``readwrite_fields`` and keep the response bytes they were decoded from.
``update()`` decodes those bytes again to obtain the last known server
state, diffs it against the live object restricted to ``readwrite_fields``
and PATCHes only the properties that changed.

The snapshot is never refreshed by ``update()``; call ``refresh()`` to
rebase an object on the current server state. Two objects fetched
independently for the same URI do not coordinate: without ``etag_match`` on
the client the last PATCH wins.
"""

#---------Imports---------

import copy
import json
import keyword
import logging

from collections import OrderedDict

from redfishbind.rest.v1 import RestError
from redfishbind.rest.containers import RisObject
from redfishbind.common.utils import diffdict
from redfishbind.common.errors import (ResourceError, ResourceDecodeError, \
                    SnapshotDecodeError, ReadOnlyResourceError, \
                    UnboundResourceError, ResourceUpdateError, \
                    check_response, get_error_messages)
from redfishbind.common.collection import CollectionError, get_collection

#---------End of imports---------

#---------Debug logger---------

LOGGER = logging.getLogger(__name__)

#---------End of debug logger---------

ODATA_KEYS = OrderedDict([('@odata.id', 'ODataID'), \
                          ('@odata.type', 'ODataType'), \
                          ('@odata.context', 'ODataContext'), \
                          ('@odata.etag', 'ODataEtag')])
COUNT_SUFFIX = '@odata.count'

class Entity(object):
    """Identity, client binding and the read/write protocol of a resource"""
    #: property names the service accepts in a PATCH, in commit order
    readwrite_fields = ()

    def __init__(self, client=None):
        self.ODataID = ''
        self.ODataType = ''
        self.ODataContext = ''
        self.ODataEtag = ''
        self.Id = ''
        self.Name = ''
        self.Description = ''
        self.annotations = dict()
        for field in self.readwrite_fields:
            setattr(self, field, None)

        self._client = client
        self._rawdata = None
        self._etag = None
        self._committed = dict()

    def __repr__(self):
        return '<%s %s>' % (self.__class__.__name__, self.ODataID)

    @property
    def client(self):
        """Return the client this resource talks through"""
        return self._client

    def set_client(self, client):
        """Bind the transport client used for later requests

        :param client: transport client.
        :type client: HttpClient.

        """
        self._client = client

    def _bound_client(self, action):
        """Return the bound client, raising UnboundResourceError if the
        resource was decoded without one"""
        if self._client is None:
            raise UnboundResourceError('Cannot %s %s %s: no client is bound; '\
                    'fetch it with get() or call set_client() first' % \
                    (action, self.__class__.__name__, self.ODataID))
        return self._client

    @property
    def rawdata(self):
        """Return the response bytes this resource was decoded from"""
        return self._rawdata

    @property
    def etag(self):
        """Return the entity tag of the fetched representation"""
        return self._etag if self._etag else (self.ODataEtag or None)

    @classmethod
    def _attrname(cls, key):
        """Map a JSON property name to the attribute holding its value"""
        if key in ODATA_KEYS:
            return ODATA_KEYS[key]
        if key.endswith(COUNT_SUFFIX):
            key = key[:-len(COUNT_SUFFIX)] + 'Count'
        if not key.isidentifier() or keyword.iskeyword(key) or \
                                key.startswith('_') or hasattr(cls, key):
            return None
        return key

    @classmethod
    def _jsonkey(cls, attrname):
        """Map an attribute name back to its JSON property name"""
        for key, value in ODATA_KEYS.items():
            if value == attrname:
                return key
        return attrname

    def _load(self, data):
        """Populate attributes from a decoded JSON document

        :param data: decoded resource document.
        :type data: dict.

        """
        for key, value in data.items():
            attrname = self._attrname(key)
            if attrname:
                setattr(self, attrname, RisObject.parse(value))
            else:
                self.annotations[key] = RisObject.parse(value)

    @classmethod
    def decode(cls, rawdata, client=None):
        """Create a resource from the bytes of a response body

        :param rawdata: JSON document describing the resource.
        :type rawdata: bytes or str.
        :param client: transport client to bind to the resource.
        :type client: HttpClient.
        :returns: returns a new instance of cls

        """
        if isinstance(rawdata, str):
            rawdata = rawdata.encode('utf-8')

        try:
            data = json.loads(rawdata)
        except (ValueError, TypeError) as excp:
            raise ResourceDecodeError('Unable to decode %s: %s' % \
                                                    (cls.__name__, excp))

        if not isinstance(data, dict):
            raise ResourceDecodeError('Unable to decode %s: expected a JSON '\
                                      'object, got %s' % (cls.__name__, \
                                                        type(data).__name__))

        entity = cls(client=client)
        entity._load(data)
        if cls.readwrite_fields:
            entity._rawdata = bytes(rawdata)
        return entity

    @classmethod
    def get(cls, client, uri):
        """Fetch a resource from the service

        :param client: transport client.
        :type client: HttpClient.
        :param uri: URI of the resource.
        :type uri: str.
        :returns: returns a new instance of cls bound to client

        """
        LOGGER.debug('Fetching %s from %s', cls.__name__, uri)
        resp = client.get(uri)
        check_response(resp, uri)

        entity = cls.decode(resp.raw, client=client)
        entity._etag = resp.getheader('ETag')
        return entity

    @classmethod
    def list_referenced(cls, client, link):
        """Fetch every member of a collection.

        Members that fail are recorded and the listing continues; if any
        failed a CollectionError carrying the fetched members is raised.

        :param client: transport client.
        :type client: HttpClient.
        :param link: URI of the collection, may be empty.
        :type link: str.
        :returns: list of cls instances in collection order

        """
        result = list()
        if not link:
            return result

        collection_error = CollectionError(link)
        for memberlink in get_collection(client, link):
            try:
                result.append(cls.get(client, memberlink))
            except (RestError, ResourceError) as excp:
                LOGGER.warning('Unable to fetch %s %s: %s', cls.__name__, \
                                                            memberlink, excp)
                collection_error.failures[memberlink] = excp

        if collection_error.empty():
            return result

        collection_error.members = result
        raise collection_error

    def refresh(self):
        """Reload the resource from the service, replacing every property
        and the stored snapshot."""
        fresh = self.get(self._bound_client('refresh'), self.ODataID)
        self.__dict__.clear()
        self.__dict__.update(fresh.__dict__)

    def _original(self):
        """Decode the stored snapshot into a new instance"""
        if self._rawdata is None:
            raise SnapshotDecodeError('%s %s has no server snapshot; fetch '\
                    'it before updating' % (self.__class__.__name__, \
                                                                self.ODataID))
        try:
            return self.decode(self._rawdata)
        except ResourceDecodeError as excp:
            raise SnapshotDecodeError('Stored snapshot of %s %s is '\
                    'corrupt: %s' % (self.__class__.__name__, self.ODataID, \
                                                                    excp))

    def _fields(self, entity):
        return OrderedDict((field, getattr(entity, field, None)) \
                                        for field in self.readwrite_fields)

    def pending_changes(self):
        """Returns the patch document update() would send

        :returns: ordered dict of JSON property name to new value

        """
        if not self.readwrite_fields:
            raise ReadOnlyResourceError('%s has no writable properties' % \
                                                    self.__class__.__name__)

        original = self._original()
        changes = diffdict(self.readwrite_fields, self._fields(original), \
                           self._fields(self), skipdict=self._committed)
        return OrderedDict((self._jsonkey(field), value) for field, value \
                                                            in changes.items())

    def update(self):
        """Commit changed writable properties to the service"""
        changes = self.pending_changes()
        if not changes:
            LOGGER.debug('No changes to commit for %s', self.ODataID)
            return

        typename = self.__class__.__name__
        client = self._bound_client('update')
        headers = None
        if getattr(client, 'etag_match', False) and self.etag:
            headers = {'If-Match': self.etag}

        try:
            resp = client.patch(self.ODataID, body=changes, headers=headers)
        except RestError as excp:
            raise ResourceUpdateError(self.ODataID, typename, excp) from excp

        if resp is None or not 200 <= resp.status < 300:
            status = resp.status if resp is not None else None
            messages = get_error_messages(resp) if resp is not None else []
            raise ResourceUpdateError(self.ODataID, typename, 'PATCH returned '\
                        '%s' % status, status=status, messages=messages)

        LOGGER.info('Updated %s %s: %s', typename, self.ODataID, \
                                                ', '.join(list(changes.keys())))
        for key, value in changes.items():
            self._committed[self._attrname(key)] = copy.deepcopy(value)

    def _get_linked(self, cls, prop):
        """Fetch the single resource linked from a navigation property"""
        link = getattr(self, prop, None)
        if not link or '@odata.id' not in link:
            return None
        return cls.get(self._bound_client('follow links of'), \
                                                        link['@odata.id'])

    def _list_linked(self, cls, prop):
        """Fetch the members of the collection linked from a navigation
        property, or of an array of links"""
        link = getattr(self, prop, None)
        if not link:
            return list()
        if isinstance(link, list):
            return self._fetch_links(cls, [item.get('@odata.id') for item in \
                                            link if isinstance(item, dict)])
        return cls.list_referenced(self._bound_client('follow links of'), \
                                                        link.get('@odata.id'))

    def _fetch_links(self, cls, links):
        client = self._bound_client('follow links of')
        result = list()
        collection_error = CollectionError(self.ODataID)
        for memberlink in links:
            if not memberlink:
                continue
            try:
                result.append(cls.get(client, memberlink))
            except (RestError, ResourceError) as excp:
                LOGGER.warning('Unable to fetch %s %s: %s', cls.__name__, \
                                                            memberlink, excp)
                collection_error.failures[memberlink] = excp

        if collection_error.empty():
            return result

        collection_error.members = result
        raise collection_error

    def _embedded(self, cls, prop):
        """Decode the members of an array property that are resources in
        their own right.

        The service never sends these objects on their own, so the snapshot
        of each one is its JSON re-serialized from the parent document, not
        bytes received from the wire. Values are unchanged, so diffs against
        it are exact.
        """
        return [cls.decode(json.dumps(item), client=self._client) for item \
                    in (getattr(self, prop, None) or []) \
                                                    if isinstance(item, dict)]
