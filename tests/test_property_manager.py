"""
Tests for the upload and activation flow, with a mocked PropertyManagerAPI.
"""

import json
from unittest.mock import Mock, call, patch

import pytest

from akj.catalog import RULE_FORMAT
from akj.papi import ConnectOrLoginError, PropertyCoordinates, ValidationErrors
from akj.property_manager import select_or_create_property_version, upload_and_activate_property

PAPI_JSON = {'rules': {'name': 'default', 'behaviors': [{'name': 'caching', 'options': {}, '__loc': 'c.py:1'}]}}

WARNING = {'type': 'w', 'errorLocation': '/rules/behaviors/0', 'detail': 'A warning.'}
ERROR = {'type': 'e', 'errorLocation': '/rules/behaviors/0', 'detail': 'An error.'}


@pytest.fixture
def coords():
    return PropertyCoordinates('prp_1', 'ctr_1', 'grp_1', author_email='someone@example.com')


@pytest.fixture
def api():
    mock = Mock()
    mock.latest_property_version.return_value = {
        'propertyVersion': 3, 'stagingStatus': 'ACTIVE', 'productionStatus': 'INACTIVE'}
    mock.create_property_version.return_value = 4
    mock.save_rules_into_property_version.return_value = ValidationErrors()
    mock.activate_property_version.return_value = {'status': 201, 'body': {}, 'activationId': 'atv_1'}
    return mock


def called(api):
    return [name for name, _, _ in api.mock_calls]


class TestSelectOrCreatePropertyVersion:
    def test_reuses_inactive_version(self, api, coords):
        api.latest_property_version.return_value = {
            'propertyVersion': 3, 'stagingStatus': 'INACTIVE', 'productionStatus': 'INACTIVE'}

        assert select_or_create_property_version(api, coords) == 3
        api.create_property_version.assert_not_called()

    @pytest.mark.parametrize("staging,production", [('ACTIVE', 'INACTIVE'), ('INACTIVE', 'PENDING'),
                                                    ('DEACTIVATED', 'INACTIVE')])
    def test_creates_version_otherwise(self, api, coords, staging, production):
        api.latest_property_version.return_value = {
            'propertyVersion': 3, 'stagingStatus': staging, 'productionStatus': production}

        assert select_or_create_property_version(api, coords) == 4
        api.create_property_version.assert_called_once_with(coords, 3)


class TestUploadAndActivate:
    def test_happy_path(self, api, coords, capsys):
        result = upload_and_activate_property(api, coords, PAPI_JSON, False, 'STAGING')

        assert result == {'propertyId': 'prp_1', 'version': 4, 'activationId': 'atv_1'}
        assert called(api) == ['latest_property_version', 'create_property_version',
                               'save_rules_into_property_version', 'activate_property_version']
        api.save_rules_into_property_version.assert_called_once_with(coords, RULE_FORMAT, 4, json.dumps(PAPI_JSON))
        api.activate_property_version.assert_called_once_with(coords, 4, 'STAGING')
        assert '[INFO] Activating version 4 on STAGING...' in capsys.readouterr().out

    def test_errors_stop_before_activation(self, api, coords, capsys):
        api.save_rules_into_property_version.return_value = ValidationErrors([ERROR], [WARNING])

        with pytest.raises(SystemExit):
            upload_and_activate_property(api, coords, PAPI_JSON, True, 'STAGING')

        api.activate_property_version.assert_not_called()
        out = capsys.readouterr().out
        assert '[WARNING] c.py:1 - A warning.' in out
        assert '[ERROR] c.py:1 - An error.' in out
        assert out.rstrip().endswith('[ERROR] Errors prevent activation of the property. Fix them and rerun.')

    def test_warnings_stop_unless_ignored(self, api, coords, capsys):
        api.save_rules_into_property_version.return_value = ValidationErrors([], [WARNING])

        with pytest.raises(SystemExit):
            upload_and_activate_property(api, coords, PAPI_JSON, False, 'STAGING')

        api.activate_property_version.assert_not_called()
        assert 'Either ignore errors with `-w` or fix them and rerun.' in capsys.readouterr().out

    def test_ignored_warnings_activate(self, api, coords):
        api.save_rules_into_property_version.return_value = ValidationErrors([], [WARNING])

        result = upload_and_activate_property(api, coords, PAPI_JSON, True, 'PRODUCTION')

        assert result['activationId'] == 'atv_1'
        api.activate_property_version.assert_called_once_with(coords, 4, 'PRODUCTION')

    def test_save_only(self, api, coords, capsys):
        with pytest.raises(SystemExit):
            upload_and_activate_property(api, coords, PAPI_JSON, False, 'STAGING', stop_property_activation=True)

        api.save_rules_into_property_version.assert_called_once()
        api.activate_property_version.assert_not_called()
        assert '--save-only is set. Not activating property version 4.' in capsys.readouterr().out

    def test_login_failure(self, api, coords, capsys):
        api.latest_property_version.side_effect = ConnectOrLoginError('Forbidden', 403, {})

        with pytest.raises(SystemExit):
            upload_and_activate_property(api, coords, PAPI_JSON, False, 'STAGING')

        assert '[ERROR] Login failed. Check your credentials.' in capsys.readouterr().out

    def test_connection_failure(self, api, coords, capsys):
        api.latest_property_version.side_effect = ConnectOrLoginError('connect ECONNREFUSED', -1, {})

        with pytest.raises(SystemExit):
            upload_and_activate_property(api, coords, PAPI_JSON, False, 'STAGING')

        assert '[ERROR] connect ECONNREFUSED' in capsys.readouterr().out

    def test_other_errors_propagate(self, api, coords):
        api.save_rules_into_property_version.side_effect = RuntimeError('unhandled status 500')

        with pytest.raises(RuntimeError):
            upload_and_activate_property(api, coords, PAPI_JSON, False, 'STAGING')

    def test_report_written_before_termination(self, api, coords):
        result = ValidationErrors([ERROR], [])
        api.save_rules_into_property_version.return_value = result

        with patch('akj.property_manager.write_validation_report') as write_report:
            with pytest.raises(SystemExit):
                upload_and_activate_property(api, coords, PAPI_JSON, False, 'STAGING', report_path='out.xlsx')

        assert write_report.call_args == call('out.xlsx', result, PAPI_JSON)
