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
"""Utility functions for internal and external use."""

#---------Imports---------

import copy
import logging

from collections import OrderedDict

import jsonpatch
import jsonpointer

#---------End of imports---------

#---------Debug logger---------

LOGGER = logging.getLogger(__name__)

#---------End of debug logger---------

def changedfields(oridict, newdict):
    """Return the top level keys whose values differ between two dicts

    Nested objects and arrays are compared structurally; a difference
    anywhere inside one marks its whole top level key as changed.

    :param oridict: dictionary with the original state.
    :type oridict: dict.
    :param newdict: dictionary with the current state.
    :type newdict: dict.
    :returns: set of changed top level keys.

    """
    changed = set()
    for patch in jsonpatch.make_patch(oridict, newdict):
        for pathkey in ('path', 'from'):
            if pathkey not in patch:
                continue
            parts = jsonpointer.JsonPointer(patch[pathkey]).parts
            if parts:
                changed.add(parts[0])
    return changed

def diffdict(fields, oridict, newdict, skipdict=None):
    """Diff two property dicts restricted to a list of fields

    :param fields: ordered property names allowed in the result.
    :type fields: list.
    :param oridict: dictionary with the original state.
    :type oridict: dict.
    :param newdict: dictionary with the current state.
    :type newdict: dict.
    :param skipdict: property values that were already committed; a field
                     whose current value equals its entry is left out.
    :type skipdict: dict.
    :returns: ordered dict with only the properties that have changed.

    """
    skipdict = skipdict if skipdict else {}
    changed = changedfields(oridict, newdict)
    result = OrderedDict()

    for field in fields:
        if field not in changed:
            continue
        if field in skipdict and not changedfields(\
                    {field: skipdict[field]}, {field: newdict.get(field)}):
            LOGGER.debug('Skipping %s, value was already committed.', field)
            continue
        result[field] = copy.deepcopy(newdict.get(field))

    return result
