import json
import os
import sys

from jsonpointer import JsonPointer, JsonPointerException, resolve_pointer

ATTRIBUTE_REQUIRED = 'https://problems.luna.akamaiapis.net/papi/v0/validation/attribute_required'


class StructuredError(Exception):
    """
    An error carrying an RFC 7807 problem body returned by the Akamai APIs.
    """

    def __init__(self, message, data):
        super().__init__(message)
        self.message = message
        self.data = data

    def __str__(self):
        return f"{self.message}: {json.dumps(self.data)}"


def terminate(message):
    """
    Prints the message and stops the program.
    """
    print(f"[ERROR] {message}")
    sys.exit(1)


def print_structured_error(error):
    print(f"[ERROR] {error.message}")
    print(json.dumps(error.data, indent=4))


def resolve_line_of_code(papi_json, pointer):
    """
    Given a JSON pointer into the PAPI JSON, find the line of code that generated it.
    Walks up the pointer until an object with a `__loc` is found.
    Arguments:
        papi_json (dict): The PAPI JSON that was uploaded.
        pointer (str): Pointer from a PAPI problem. PAPI sometimes prefixes them with '#'.
    Returns:
        str: The line of code, or None when nothing along the pointer carries one.
    """
    if pointer.startswith('#'):
        pointer = pointer[1:]

    try:
        parts = JsonPointer(pointer).parts
    except JsonPointerException:
        return None

    for i in range(len(parts), -1, -1):
        try:
            target = resolve_pointer(papi_json, JsonPointer.from_parts(parts[:i]).path)
        except JsonPointerException:
            continue

        loc = target.get('__loc') if isinstance(target, dict) else None
        if isinstance(loc, str):
            return loc
    return None


def improve_error_message(error):
    """
    Returns (message, hint) for a PAPI problem. The hint is None when we have nothing to add.
    """
    message = error.get('detail')
    if error.get('type') == ATTRIBUTE_REQUIRED and error.get('errorLocation'):
        return message, f"(Add option {os.path.basename(error['errorLocation'])})"
    return message, None


def format_validation_error(severity, location, message, hint):
    line = f"[{severity}]"
    if location:
        line += f" {location} -"
    line += f" {message}"
    if hint:
        line += f" {hint}"
    return line


def describe_validation_errors(severity, errors, papi_json):
    """
    Maps each PAPI problem back to the line of code that produced the offending rule.
    Returns a list of dicts, one per problem.
    """
    described = []
    for error in errors:
        message, hint = improve_error_message(error)
        pointer = error.get('errorLocation')
        location = None
        if pointer:
            location = resolve_line_of_code(papi_json, pointer) or pointer
        described.append({
            'Severity': severity,
            'Location': pointer,
            'Line of Code': location,
            'Message': message,
            'Hint': hint,
            'Type': error.get('type'),
        })
    return described


def emit_validation_errors(severity, errors, papi_json):
    """
    Prints one line per PAPI problem. Problems without an errorLocation (like a missing behavior)
    are printed without a line of code.
    """
    for problem in describe_validation_errors(severity, errors, papi_json):
        print(format_validation_error(severity, problem['Line of Code'], problem['Message'], problem['Hint']))


def terminate_on_bad_bundle(validation_result):
    """
    Stops when the EdgeWorkers API rejected the bundle. Warnings alone don't stop the upload.
    """
    if validation_result.get('errors'):
        print("[ERROR] Errors detected during bundle validation.")
        print(json.dumps(validation_result, indent=4))
        terminate('EdgeWorker bundle validation failed.')
