import json

from akj.catalog import RULE_FORMAT
from akj.errors import emit_validation_errors, terminate
from akj.papi import ConnectOrLoginError
from akj.report import write_validation_report


def select_or_create_property_version(api, property_meta):
    """
    Chooses the version to update. The latest version is reused unless it was ever activated on staging or production,
    in which case a new version is created from it.
    """
    latest = api.latest_property_version(property_meta)

    if latest['stagingStatus'] == 'INACTIVE' and latest['productionStatus'] == 'INACTIVE':
        return latest['propertyVersion']
    return api.create_property_version(property_meta, latest['propertyVersion'])


def upload_and_activate_property(api, property_meta, papi_json, ignore_warnings, network,
                                 stop_property_activation=False, report_path=None):
    """
    Uploads the rule tree into a property version and activates it.
    Arguments:
        api (PropertyManagerAPI): The API to call.
        property_meta (PropertyCoordinates): Identifies the property.
        papi_json (dict): The rule tree, as {'rules': ...}.
        ignore_warnings (bool): Activate even if PAPI reported warnings.
        network (str): STAGING or PRODUCTION.
        stop_property_activation (bool): Save the rules, but don't activate.
        report_path (str): Optional Excel file to write the validation problems to.
    Returns:
        dict: propertyId, version and activationId of the activation.
    """
    try:
        print("[INFO] Creating property version...")
        version = select_or_create_property_version(api, property_meta)

        print(f"[INFO] Saving rules into version {version}...")
        result = api.save_rules_into_property_version(property_meta, RULE_FORMAT, version, json.dumps(papi_json))

        print("[INFO] Validating property warnings/errors...")
        if report_path:
            write_validation_report(report_path, result, papi_json)

        if result.warnings:
            emit_validation_errors('WARNING', result.warnings, papi_json)

        if result.errors:
            emit_validation_errors('ERROR', result.errors, papi_json)
            terminate('Errors prevent activation of the property. Fix them and rerun.')

        # Errors are reported first when there are both.
        if not ignore_warnings and result.warnings:
            terminate('Warnings prevent activation of the property. Either ignore errors with `-w` or fix them '
                      'and rerun.')

        if stop_property_activation:
            terminate(f"--save-only is set. Not activating property version {version}.")

        print(f"[INFO] Activating version {version} on {network}...")
        activation = api.activate_property_version(property_meta, version, network)

        print("[INFO] Property activation started.")
        return {
            'propertyId': property_meta.property_id,
            'version': version,
            'activationId': activation['activationId'],
        }
    except ConnectOrLoginError as e:
        if e.status == 403:
            terminate('Login failed. Check your credentials.')
        terminate(e.message)
