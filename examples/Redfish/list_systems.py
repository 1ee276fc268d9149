# Copyright 2020 Hewlett Packard Enterprise Development LP
#
# Licensed under the Apache License, Version 2.0 (the "License"); you may
# not use this file except in compliance with the License. You may obtain
# a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS, WITHOUT
# WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the
# License for the specific language governing permissions and limitations
# under the License.

# -*- coding: utf-8 -*-
"""
An example of listing the computer systems of a service and their firmware
inventory, reporting members that could not be read.
"""

import sys
from redfishbind import CollectionError, client_from_config
from redfishbind.rest.v1 import ServerDownOrUnreachableError
from redfishbind.schemas import ServiceRoot

def list_systems(_redfishobj):

    root = ServiceRoot.get_root(_redfishobj)
    try:
        systems = root.systems()
    except CollectionError as excp:
        for uri, error in excp.failures.items():
            sys.stderr.write("Unable to read %s: %s\n" % (uri, error))
        systems = excp.members

    for system in systems:
        sys.stdout.write("\n\tId: " + str(system.Id) + "\n")
        sys.stdout.write("\tHostName: " + str(system.HostName) + "\n")
        sys.stdout.write("\tAssetTag: " + str(system.AssetTag) + "\n")
        status = getattr(system, "Status", None) or {}
        sys.stdout.write("\tHealth: " + str(status.get("Health")) + "\n")

    update_service = root.update_service()
    if update_service is None:
        return
    for item in update_service.firmware_inventory():
        sys.stdout.write("\n\tFirmware: %s %s\n" % (item.Name, \
                                                getattr(item, "Version", "")))

if __name__ == "__main__":

    # The [redfish] section holds url, username, password and optionally
    # auth, proxy, ca_certs, timeout, retries and etag_match
    CONFIG_FILE = sys.argv[1] if len(sys.argv) > 1 else "redfish.conf"

    try:
        REDFISHOBJ = client_from_config(CONFIG_FILE)
    except ServerDownOrUnreachableError as excp:
        sys.stderr.write("ERROR: server not reachable or does not support RedFish.\n")
        sys.exit()

    list_systems(REDFISHOBJ)
    REDFISHOBJ.logout()
