"""
The Property Manager (PAPI) calls used to upload and activate a property, and the EdgeWorkers calls
used to upload and activate its code bundle.

https://techdocs.akamai.com/property-mgr/reference/api
https://techdocs.akamai.com/edgeworkers/reference/api
"""
import configparser
import json
import os
import re
import sys
from urllib.parse import urljoin

import requests
from akamai.edgegrid import EdgeGridAuth

from akj import __version__
from akj.errors import StructuredError

JSON_SCHEMA_INVALID = 'https://problems.luna.akamaiapis.net/papi/v0/json-schema-invalid'

_EMAIL = re.compile(r'^[^@\s]+@[^@\s]+\.[^@\s]+$')
_VERSION_LINK = re.compile(r'.*/versions/(.*)\?.*')
_ACTIVATION_LINK = re.compile(r'/papi/v1/properties/\w+/activations/(\w+)')


class ConnectOrLoginError(Exception):
    """
    The API could not be reached, or refused our credentials.
    """

    def __init__(self, message, status, data):
        super().__init__(message)
        self.message = message
        self.status = status
        self.data = data

    def __str__(self):
        return f"Unable to login: {self.message}, {self.status}, {json.dumps(self.data, indent=2)}"


class PropertyCoordinates:
    """
    Identifies the property we upload to. Loaded from the project's property.json.
    """

    def __init__(self, property_id, contract_id, group_id, edge_worker_id=None, author_email=None,
                 account_switch_key=None, auto_sem_ver=False):
        self.property_id = property_id
        self.contract_id = contract_id
        self.group_id = group_id
        self.edge_worker_id = edge_worker_id
        self.author_email = author_email
        self.account_switch_key = account_switch_key
        # Bump the major version in bundle.json on every EdgeWorker upload.
        self.auto_sem_ver = auto_sem_ver

    @classmethod
    def from_dict(cls, data):
        """
        Arguments:
            data (dict): The parsed property.json.
        Returns:
            PropertyCoordinates
        Raises:
            ValueError: With one line per invalid field.
        """
        if not isinstance(data, dict):
            raise ValueError('expected a JSON object')

        problems = []
        for key in ('propertyId', 'contractId', 'groupId'):
            value = data.get(key)
            if not isinstance(value, str) or not value.strip():
                problems.append(f"{key} must be a non-empty string")

        edge_worker_id = data.get('edgeWorkerId')
        if edge_worker_id is not None:
            if isinstance(edge_worker_id, bool) or not isinstance(edge_worker_id, int) or edge_worker_id <= 0:
                problems.append('edgeWorkerId must be a positive integer')

        author_email = data.get('authorEmail')
        if not isinstance(author_email, str) or not _EMAIL.match(author_email):
            problems.append('authorEmail must be an email address')

        auto_sem_ver = data.get('autoSemVer', False)
        if not isinstance(auto_sem_ver, bool):
            problems.append('autoSemVer must be true or false')

        if problems:
            raise ValueError('\n'.join(problems))

        return cls(
            property_id=data['propertyId'],
            contract_id=data['contractId'],
            group_id=data['groupId'],
            edge_worker_id=edge_worker_id,
            author_email=author_email,
            account_switch_key=data.get('accountSwitchKey'),
            auto_sem_ver=auto_sem_ver,
        )


class ValidationErrors:
    """
    The errors and warnings PAPI reported for a saved rule tree.
    """

    def __init__(self, errors=None, warnings=None):
        self.errors = errors or []
        self.warnings = warnings or []

    @classmethod
    def from_validation_results(cls, payload):
        return cls(payload.get('errors'), payload.get('warnings'))

    @classmethod
    def from_json_schema_invalid(cls, payload):
        """
        Converts a json-schema-invalid problem into the same shape as rule validation errors.
        """
        errors = []
        for error in payload.get('errors', []):
            errors.append({
                'type': payload.get('type'),
                'errorLocation': error.get('location'),
                'detail': error.get('detail'),
            })
        return cls(errors)


def setup_authentication(edgerc_path, section):
    """
    Sets up the EdgeGrid authentication using the .edgerc file.
    """
    if not os.path.exists(edgerc_path):
        print(f"[ERROR] .edgerc file not found at {edgerc_path}")
        print("Please ensure you have created the .edgerc file with your Akamai API credentials.")
        sys.exit(1)

    config = configparser.ConfigParser()
    config.read(edgerc_path)
    if section not in config:
        print(f"[ERROR] Section '{section}' not found in {edgerc_path}")
        sys.exit(1)

    try:
        base_url = f"https://{config[section]['host']}"
        s = requests.Session()
        s.auth = EdgeGridAuth.from_edgerc(edgerc_path, section)
        return s, base_url
    except Exception as e:
        print(f"[ERROR] Error setting up authentication: {e}")
        sys.exit(1)


class PropertyManagerAPI:
    def __init__(self, session, base_url, account_switch_key=None, debug=False):
        self.session = session
        self.base_url = base_url
        self.account_switch_key = account_switch_key
        self.debug = debug

    def _params(self, coords, validate=True):
        params = {
            'contractId': coords.contract_id,
            'groupId': coords.group_id,
        }
        if validate:
            params.update({'validateMode': 'full', 'validateRules': 'true', 'dryRun': 'false'})

        if self.account_switch_key:
            params['accountSwitchKey'] = self.account_switch_key
        elif coords.account_switch_key:
            params['accountSwitchKey'] = coords.account_switch_key
        return params

    def _send(self, method, endpoint, failure_description, params=None, headers=None, **kwargs):
        """
        Sends the request and normalizes the response to (status, body).
        Arguments:
            failure_description (str): Message for the StructuredError raised on an RFC 7807 problem response.
        Raises:
            ConnectOrLoginError: When the server can't be reached, or answers 403.
            StructuredError: When the response is an application/problem+json error.
        """
        url = urljoin(self.base_url, endpoint)
        request_headers = {'PAPI-Use-Prefixes': 'false'}
        request_headers.update(headers or {})

        if self.debug:
            print(f"[INFO] {method} {url} {params}")

        try:
            response = self.session.request(method, url, params=params, headers=request_headers, **kwargs)
        except requests.exceptions.RequestException as e:
            raise ConnectOrLoginError(str(e), -1, {}) from e

        if self.debug:
            print(f"[INFO] Status: {response.status_code}")

        body = {}
        if response.content:
            try:
                body = response.json()
            except ValueError:
                body = {}

        if response.status_code >= 400:
            content_type = response.headers.get('Content-Type', '')
            if 'application/problem+json' in content_type:
                raise StructuredError(failure_description or 'failure', body)
            if response.status_code == 403:
                raise ConnectOrLoginError(f"Request failed with status code {response.status_code}",
                                          response.status_code, body)

        return response.status_code, body

    def latest_property_version(self, coords):
        """
        https://techdocs.akamai.com/property-mgr/reference/get-latest-property-version
        Returns:
            dict: The version item, with propertyVersion, stagingStatus and productionStatus.
        """
        _, body = self._send(
            'GET',
            f"/papi/v1/properties/{coords.property_id}/versions/latest",
            f"Failed to find latest version for property {coords.property_id}",
            params=self._params(coords, validate=False),
            headers={'Content-Type': 'application/json', 'Accept': '*/*'},
        )
        return body['versions']['items'][0]

    def create_property_version(self, coords, base_version):
        """
        Creates a new version of the property from base_version. The rules are copied, not replaced.
        Returns:
            int: The new version number.
        """
        _, body = self._send(
            'POST',
            f"/papi/v1/properties/{coords.property_id}/versions",
            f"Failed to create property version for {coords.property_id}",
            params=self._params(coords),
            headers={'Content-Type': 'application/json', 'Accept': '*/*'},
            json={'createFromVersion': base_version},
        )
        return int(_VERSION_LINK.match(body['versionLink']).group(1))

    def save_rules_into_property_version(self, coords, rule_format, version, rules):
        """
        Uploads the rules (a JSON string) into the given version.
        Returns:
            ValidationErrors: PAPI accepts rules that fail validation, so check the result.
        """
        media_type = f"application/vnd.akamai.papirules.{rule_format}+json"
        try:
            status, body = self._send(
                'PUT',
                f"/papi/v1/properties/{coords.property_id}/versions/{version}/rules",
                f"Failed to save PAPI JSON for {coords.property_id}",
                params=self._params(coords),
                headers={'Content-Type': media_type, 'Accept': media_type},
                data=rules,
            )
        except StructuredError as e:
            if isinstance(e.data, dict) and e.data.get('type') == JSON_SCHEMA_INVALID:
                return ValidationErrors.from_json_schema_invalid(e.data)
            raise

        if status == 200:
            return ValidationErrors.from_validation_results(body)
        raise RuntimeError(f"unhandled status {status}")

    def activate_property_version(self, coords, version, network):
        """
        Returns:
            dict: status, body and activationId of the activation request.
        """
        status, body = self._send(
            'POST',
            f"/papi/v1/properties/{coords.property_id}/activations",
            f"Failed to activate version {version} of property {coords.property_id}",
            params=self._params(coords),
            headers={'Content-Type': 'application/json', 'Accept': '*/*'},
            json={
                'propertyVersion': version,
                'network': network,
                'notifyEmails': [coords.author_email],
                'acknowledgeAllWarnings': True,
                'complianceRecord': {'noncomplianceReason': 'NO_PRODUCTION_TRAFFIC'},
                'note': f"Activated by akj {__version__}",
            },
        )

        if 'activationLink' not in body:
            raise RuntimeError('Missing `activationLink` from the property activation response.')

        match = _ACTIVATION_LINK.search(body['activationLink'])
        if not match:
            raise RuntimeError('Did not find `activationId` in `activationLink`.')

        return {'status': status, 'body': body, 'activationId': match.group(1)}

    def fetch_property_version(self, coords, version):
        """
        https://techdocs.akamai.com/property-mgr/reference/get-property-version-rules
        """
        status, body = self._send(
            'GET',
            f"/papi/v1/properties/{coords.property_id}/versions/{version}/rules",
            f"Failed to fetch version of property {coords.property_id}",
            params=self._params(coords),
            headers={'Content-Type': 'application/json', 'Accept': '*/*'},
        )
        return {'status': status, 'body': body}

    def _edge_worker_params(self, coords):
        params = {}
        if self.account_switch_key:
            params['accountSwitchKey'] = self.account_switch_key
        elif coords.account_switch_key:
            params['accountSwitchKey'] = coords.account_switch_key
        return params

    def validate_edge_worker_bundle(self, coords, bundle):
        """
        https://techdocs.akamai.com/edgeworkers/reference/post-validations
        Arguments:
            bundle (bytes): The gzipped tarball.
        Returns:
            dict: errors and warnings, each a list of {type, message}.
        """
        status, body = self._send(
            'POST',
            "/edgeworkers/v1/validations",
            "EdgeWorker bundle validation failed",
            params=self._edge_worker_params(coords),
            headers={'Content-Type': 'application/gzip', 'Accept': 'application/json'},
            data=bundle,
        )

        if status == 200:
            return {'errors': body.get('errors', []), 'warnings': body.get('warnings', [])}
        return {
            'errors': [{
                'type': 'UNHANDLED_STATUS',
                'message': f"EdgeWorker bundle validation failed. API call failed with unhandled status {status}",
            }],
            'warnings': [],
        }

    def create_edge_worker_version(self, coords, edge_worker_id, bundle):
        """
        Uploads the bundle as a new version of the EdgeWorker.
        Returns:
            dict: edgeWorkerId and version of the new version.
        """
        status, body = self._send(
            'POST',
            f"/edgeworkers/v1/ids/{edge_worker_id}/versions",
            f"Failed to upload bundle for EdgeWorker {edge_worker_id}",
            params=self._edge_worker_params(coords),
            headers={'Content-Type': 'application/gzip', 'Accept': 'application/json'},
            data=bundle,
        )

        if status == 201:
            return {'edgeWorkerId': body['edgeWorkerId'], 'version': body['version']}
        raise RuntimeError(f"unhandled status {status}")

    def activate_edge_worker_version(self, coords, edge_worker_id, version, network):
        """
        https://techdocs.akamai.com/edgeworkers/reference/post-activations-1
        Returns:
            dict: status, body and activationId of the activation request.
        """
        status, body = self._send(
            'POST',
            f"/edgeworkers/v1/ids/{edge_worker_id}/activations",
            f"Failed to activate version {version} for EdgeWorker {edge_worker_id}",
            params=self._edge_worker_params(coords),
            headers={'Content-Type': 'application/json', 'Accept': 'application/json'},
            json={
                'network': network,
                'version': version,
                'note': f"Activated by akj {__version__}",
            },
        )

        if 'activationId' not in body:
            raise RuntimeError('Missing `activationId` in the EdgeWorker activation response.')
        if status != 201:
            raise RuntimeError(f"Unhandled EdgeWorker activation status {status}")

        return {'status': status, 'body': body, 'activationId': body['activationId']}
