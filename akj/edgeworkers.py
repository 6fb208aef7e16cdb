"""
Packs the EdgeWorker that lives next to the config (main.js and bundle.json) into a code bundle,
uploads it as a new EdgeWorker version and activates it.

https://techdocs.akamai.com/edgeworkers/docs/code-bundle-format
"""
import io
import json
import os
import re
import tarfile

from akj.errors import terminate, terminate_on_bad_bundle
from akj.papi import ConnectOrLoginError

MAINJS_FILENAME = 'main.js'
MANIFEST_FILENAME = 'bundle.json'

_EDGEWORKER_VERSION = re.compile(r'^(?!.*?\.{2})[.a-zA-Z0-9_~-]{1,32}$')
_API_VERSION = re.compile(r'^[0-9.]*$')
_NUMERIC_VERSION = re.compile(r'(\d+)(?:\.(\d+))?(?:\.(\d+))?')

# Never shipped in the bundle.
_SKIPPED_DIRS = {'__pycache__'}


def validate_manifest(manifest):
    """
    Returns a list of problems with the bundle.json contents. Empty when it is valid.
    """
    if not isinstance(manifest, dict):
        return ['The manifest must be a JSON object']

    problems = []
    version = manifest.get('edgeworker-version')
    if not isinstance(version, str) or not _EDGEWORKER_VERSION.match(version):
        problems.append('The edgeworker-version provided is not valid. '
                        'See https://techdocs.akamai.com/edgeworkers/docs/code-bundle-format')

    bundle_version = manifest.get('bundle-version')
    if bundle_version is not None:
        if isinstance(bundle_version, bool) or not isinstance(bundle_version, (int, float)) or bundle_version <= 0:
            problems.append('bundle-version must be a positive number')

    api_version = manifest.get('api-version')
    if api_version is not None and (not isinstance(api_version, str) or not _API_VERSION.match(api_version)):
        problems.append('The api-version must be numeric')

    if manifest.get('misc') is not None and not isinstance(manifest['misc'], dict):
        problems.append('misc must be an object')

    if manifest.get('description') is not None and not isinstance(manifest['description'], str):
        problems.append('description must be a string')
    return problems


def next_major_version(version):
    """
    1.2.3 -> 2.0.0, v2 -> 3.0.0. Returns None when the version holds no number to increment.
    """
    match = _NUMERIC_VERSION.search(version)
    if not match:
        return None
    return f"{int(match.group(1)) + 1}.0.0"


def load_manifest(manifest_path):
    try:
        with open(manifest_path) as f:
            return json.load(f)
    except (OSError, ValueError) as e:
        terminate(f"Manifest file ({MANIFEST_FILENAME}) cannot be loaded or is not valid JSON: {e}")


def edge_worker_version(manifest_path, auto_sem_ver=False):
    """
    Reads the edgeworker-version from bundle.json.
    With auto_sem_ver the major version is incremented and bundle.json is rewritten before the bundle is built.
    """
    manifest = load_manifest(manifest_path)
    problems = validate_manifest(manifest)
    if problems:
        terminate(f"{', '.join(problems)}.")

    version = manifest['edgeworker-version']
    if auto_sem_ver:
        new_version = next_major_version(version)
        if new_version is None:
            terminate(f"The provided version '{version}' is not a valid Semantic Version string and cannot be "
                      f"auto incremented.")
        manifest['edgeworker-version'] = new_version
        with open(manifest_path, 'w') as f:
            json.dump(manifest, f, indent=4)
        version = new_version
    return version


def _portable(tarinfo):
    tarinfo.uid = tarinfo.gid = 0
    tarinfo.uname = tarinfo.gname = ''
    return tarinfo


def bundle_files(code_path):
    """
    Every file under code_path, relative to it, in a stable order.
    """
    found = []
    for root, dirs, files in os.walk(code_path):
        dirs[:] = sorted(d for d in dirs if d not in _SKIPPED_DIRS)
        for name in sorted(files):
            found.append(os.path.relpath(os.path.join(root, name), code_path))
    return found


def build_bundle(code_path, auto_sem_ver=False):
    """
    Builds the gzipped tarball of an EdgeWorker in memory.
    The files sit at the root of the archive, which is where the EdgeWorkers API looks for main.js and bundle.json.
    Arguments:
        code_path (str): Directory holding main.js and bundle.json.
        auto_sem_ver (bool): Increment the major version in bundle.json first.
    Returns:
        tuple: (edgeworker-version, bytes of the .tgz)
    """
    code_path = os.path.abspath(code_path)
    mainjs_path = os.path.join(code_path, MAINJS_FILENAME)
    manifest_path = os.path.join(code_path, MANIFEST_FILENAME)

    if not os.path.isfile(mainjs_path) or not os.path.isfile(manifest_path):
        terminate(f"EdgeWorkers main.js ({mainjs_path}) and/or manifest ({manifest_path}) provided is not found.")

    version = edge_worker_version(manifest_path, auto_sem_ver)

    buf = io.BytesIO()
    with tarfile.open(fileobj=buf, mode='w:gz') as tar:
        for name in bundle_files(code_path):
            tar.add(os.path.join(code_path, name), arcname=name, recursive=False, filter=_portable)
    return version, buf.getvalue()


def upload_and_activate_new_bundle(api, property_meta, path_to_edge_worker, network):
    """
    Arguments:
        api (PropertyManagerAPI): The API to call.
        property_meta (PropertyCoordinates): Carries the EdgeWorker id.
        path_to_edge_worker (str): Directory holding main.js and bundle.json.
        network (str): STAGING or PRODUCTION.
    Returns:
        dict: edgeWorkerId and version that is being activated.
    """
    print(f"[INFO] Building EdgeWorker bundle from {path_to_edge_worker}...")
    version, bundle = build_bundle(path_to_edge_worker, property_meta.auto_sem_ver)

    try:
        print(f"[INFO] Validating EdgeWorker bundle {version}...")
        terminate_on_bad_bundle(api.validate_edge_worker_bundle(property_meta, bundle))

        print("[INFO] Creating EdgeWorker version...")
        created = api.create_edge_worker_version(property_meta, property_meta.edge_worker_id, bundle)

        print(f"[INFO] Activating EdgeWorker version {created['version']} on {network}...")
        api.activate_edge_worker_version(property_meta, created['edgeWorkerId'], created['version'], network)
    except ConnectOrLoginError as e:
        if e.status == 403:
            terminate('Login failed. Check your credentials.')
        terminate(e.message)

    print("[INFO] EdgeWorker activation started.")
    return created
