import pandas as pd

from akj.errors import describe_validation_errors

COLUMNS = ['Severity', 'Location', 'Line of Code', 'Message', 'Hint', 'Type']


def validation_report(result, papi_json):
    """
    Returns a DataFrame with one row per PAPI problem, errors first.
    """
    rows = describe_validation_errors('ERROR', result.errors, papi_json)
    rows += describe_validation_errors('WARNING', result.warnings, papi_json)
    return pd.DataFrame(rows, columns=COLUMNS)


def write_validation_report(output_file, result, papi_json):
    """
    Writes the validation problems to an Excel file.
    A failed write is reported but never stops the upload.
    """
    print(f"[INFO] Writing validation report to {output_file}...")
    try:
        report_df = validation_report(result, papi_json)
        if report_df.empty:
            print("[INFO] No validation problems to write.")
        else:
            report_df.to_excel(output_file, index=False)
            print("[INFO] Done.")
    except Exception as e:
        print(f"[ERROR] Error writing output file: {e}")
