"""
akj command line.

    akj activate [base] [-n PRODUCTION] [-w] [--save-only] [-r report.xlsx]

Loads `on_config` from <base>/src/config.py, builds the rule tree, uploads it to Property Manager and activates it.
When property.json names an edgeWorkerId, the EdgeWorker in <base>/src (main.js and bundle.json) is bundled,
uploaded and activated after the property.
"""
import argparse
import importlib.util
import json
import os
import sys

from akj import __version__
from akj.convert import run
from akj.edgeworkers import upload_and_activate_new_bundle
from akj.errors import StructuredError, print_structured_error, terminate
from akj.papi import PropertyCoordinates, PropertyManagerAPI, setup_authentication
from akj.property_manager import upload_and_activate_property


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="akj", description="Generates PAPI JSON from an on_config() function")
    parser.add_argument("--version", action="version", version=__version__)
    parser.add_argument("--edgerc", "-e", default=os.path.expanduser("~/.edgerc"),
                        help="Path to .edgerc file (default: ~/.edgerc)")
    parser.add_argument("--section", "-s", default="default", help="Section in .edgerc to use (default: default)")
    parser.add_argument("--ask", "--accountSwitchKey", "-a", dest="account_switch_key",
                        help="Optional Account Switch Key (accountSwitchKey) to include in API calls")
    parser.add_argument("--debug", "-D", action="store_true", help="Show debug output")

    subparsers = parser.add_subparsers(dest="command", required=True)
    activate = subparsers.add_parser(
        "activate", help="Generates PAPI JSON from an on_config() function and uploads it to Property Manager")
    activate.add_argument("base", nargs="?", default=None, help="Root of your property project (default: cwd)")
    activate.add_argument("--property", "-p", help="Path to the JSON file with the property information")
    activate.add_argument("--dry-run", "-d", action="store_true", help="Stop execution after producing PAPI JSON")
    activate.add_argument("--ignore-warnings", "-w", action="store_true",
                          help="Activate the property, even if there are warnings")
    activate.add_argument("--print-papi-json", "-j", action="store_true",
                          help="Print the PAPI JSON to the console")
    activate.add_argument("--save-only", action="store_true",
                          help="Save the rules into a property version, but don't activate it")
    activate.add_argument("--network", "-n", choices=["STAGING", "PRODUCTION"], default="STAGING",
                          help="Network to activate on (default: STAGING)")
    activate.add_argument("--report", "-r", help="Optional Excel file for the validation warnings/errors")

    args = parser.parse_args(argv)

    base = args.base or os.getcwd()
    args.path_to_config = os.path.join(base, "src", "config.py")
    args.path_to_edge_worker_root = os.path.join(base, "src")
    args.path_to_property_meta = args.property or os.path.join(base, "property.json")
    return args


def load_on_config(path_to_config):
    """
    Imports the project's config.py and returns its `on_config` function.
    """
    path_to_config = os.path.abspath(path_to_config)
    config_dir = os.path.dirname(path_to_config)
    # Lets the config import its sibling modules.
    sys.path.insert(0, config_dir)
    try:
        spec = importlib.util.spec_from_file_location("akj_property_config", path_to_config)
        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)
    except Exception as e:
        terminate(f"Unable to load {path_to_config}: \n\t{e}")
    finally:
        sys.path.remove(config_dir)

    on_config = getattr(module, "on_config", None)
    if not callable(on_config):
        terminate(f"{path_to_config} must define a function named `on_config`")
    return on_config


def build_papi_json(on_config):
    """
    Runs `on_config` and returns the rule tree wrapped the way PAPI expects it.
    """
    return {'rules': run(on_config).to_papi_json()}


def load_property_info(path_to_property_meta):
    try:
        with open(path_to_property_meta) as f:
            contents = f.read()
    except OSError as e:
        terminate(f"Failed to read '{path_to_property_meta}': {e}")

    try:
        return PropertyCoordinates.from_dict(json.loads(contents))
    except ValueError as e:
        terminate(f"Could not parse '{path_to_property_meta}': {e}")


def make_api(args):
    session, base_url = setup_authentication(args.edgerc, args.section)
    return PropertyManagerAPI(session, base_url, args.account_switch_key, args.debug)


def run_activation(args, api_factory=make_api):
    print(f"[INFO] Converting {args.path_to_config}...")
    papi_json = build_papi_json(load_on_config(args.path_to_config))

    if args.print_papi_json:
        print(json.dumps(papi_json, indent=2))

    if args.dry_run:
        print("[INFO] --dry-run is set. Not uploading PAPI JSON to Property Manager.")
        return None

    property_meta = load_property_info(args.path_to_property_meta)
    print(f"[INFO] Loaded property info for {property_meta.property_id}.")
    if args.account_switch_key:
        print(f"[INFO] Using Account Switch Key: {args.account_switch_key}")

    api = api_factory(args)
    activation = upload_and_activate_property(
        api,
        property_meta,
        papi_json,
        args.ignore_warnings,
        args.network,
        stop_property_activation=args.save_only,
        report_path=args.report,
    )
    print(f"[INFO] Activating version {activation['version']} of property {activation['propertyId']} "
          f"(activation {activation['activationId']}).")

    if property_meta.edge_worker_id is not None:
        edge_worker = upload_and_activate_new_bundle(api, property_meta, args.path_to_edge_worker_root, args.network)
        print(f"[INFO] Activating version {edge_worker['version']} of EdgeWorker {edge_worker['edgeWorkerId']}.")
    return activation


def main(argv=None):
    args = parse_args(argv)
    try:
        if args.command == "activate":
            run_activation(args)
    except StructuredError as e:
        print_structured_error(e)
        sys.exit(1)
    except KeyboardInterrupt:
        print("\n[WARN] Interrupted by user!")
        sys.exit(1)


if __name__ == "__main__":
    main()
