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
"""Accounts, roles, keys and sessions"""

from redfishbind.common.entity import Entity
from redfishbind.schemas.security import Certificate

class Key(Entity):
    """A key, such as an SSH public key, used to authenticate an account"""
    readwrite_fields = (
        'UserDescription',
    )

class KeyService(Entity):
    """Actions and settings for key management"""
    pass

class ManagerAccount(Entity):
    """A user account for the manager.

    ``Password`` is write only: services report it as null, so assigning it
    always produces a change.
    """
    readwrite_fields = (
        'AccountExpiration',
        'AccountTypes',
        'Enabled',
        'Locked',
        'OEMAccountTypes',
        'Password',
        'PasswordChangeRequired',
        'PasswordExpiration',
        'RoleId',
        'StrictAccountTypes',
        'UserName',
    )

    def certificates(self):
        """Returns the certificates of the account"""
        return self._list_linked(Certificate, 'Certificates')

    def keys(self):
        """Returns the keys that can authenticate the account"""
        return self._list_linked(Key, 'Keys')

class Role(Entity):
    """A set of privileges assigned to accounts"""
    readwrite_fields = (
        'AssignedPrivileges',
        'OemPrivileges',
    )

class PrivilegeRegistry(Entity):
    """Operation to privilege mappings of the service"""
    pass

class ExternalAccountProvider(Entity):
    """A remote service that provides accounts, such as LDAP"""
    readwrite_fields = (
        'Priority',
        'ServiceAddresses',
        'ServiceEnabled',
    )

class AccountService(Entity):
    """Settings of the account service"""
    readwrite_fields = (
        'AccountLockoutCounterResetAfter',
        'AccountLockoutCounterResetEnabled',
        'AccountLockoutDuration',
        'AccountLockoutThreshold',
        'AuthFailureLoggingThreshold',
        'LocalAccountAuth',
        'MaxPasswordLength',
        'MinPasswordLength',
        'PasswordExpirationDays',
        'ServiceEnabled',
    )

    def accounts(self):
        """Returns the manager accounts"""
        return self._list_linked(ManagerAccount, 'Accounts')

    def roles(self):
        """Returns the roles"""
        return self._list_linked(Role, 'Roles')

    def external_account_providers(self):
        """Returns the external account providers"""
        return self._list_linked(ExternalAccountProvider, \
                                                    'ExternalAccountProviders')

    def privilege_map(self):
        """Returns the privilege registry"""
        return self._get_linked(PrivilegeRegistry, 'PrivilegeMap')

class Session(Entity):
    """An open session on the service"""
    pass

class SessionService(Entity):
    """Settings of the session service"""
    readwrite_fields = (
        'ServiceEnabled',
        'SessionTimeout',
    )

    def sessions(self):
        """Returns the open sessions"""
        return self._list_linked(Session, 'Sessions')
