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
An example of renaming a manager account. Only the changed UserName is sent
to the service.
"""

import sys
import redfishbind
from redfishbind.common import ResourceUpdateError
from redfishbind.rest.v1 import ServerDownOrUnreachableError
from redfishbind.schemas import ServiceRoot

def rename_account(_redfishobj, old_name, new_name):

    service = ServiceRoot.get_root(_redfishobj).account_service()
    for account in service.accounts():
        if account.UserName != old_name:
            continue

        account.UserName = new_name
        sys.stdout.write("Sending %s\n" % dict(account.pending_changes()))
        try:
            account.update()
        except ResourceUpdateError as excp:
            sys.stderr.write("Update of %s failed: %s\n" % (account.ODataID, \
                                                                        excp))
            if excp.messages:
                sys.stderr.write("\t%s\n" % ", ".join(excp.messages))
        else:
            print("Success")
        return

    sys.stderr.write("No account named '%s'.\n" % old_name)

if __name__ == "__main__":

    SYSTEM_URL = "https://"+str(sys.argv[1])
    LOGIN_ACCOUNT = "XXXXXX"
    LOGIN_PASSWORD = "XXXXXX"

    try:
        # Create a Redfish client object
        REDFISHOBJ = redfishbind.redfish_client(base_url=SYSTEM_URL, \
                            username=LOGIN_ACCOUNT, password=LOGIN_PASSWORD)
        # Login with the Redfish client
        REDFISHOBJ.login(auth=redfishbind.AuthMethod.SESSION)
    except ServerDownOrUnreachableError as excp:
        sys.stderr.write("ERROR: server not reachable or does not support RedFish.\n")
        sys.exit()

    rename_account(REDFISHOBJ, sys.argv[2], sys.argv[3])
    REDFISHOBJ.logout()
