"""
Tests for mapping PAPI problems back to lines of code.
"""

import pytest

from akj.errors import (ATTRIBUTE_REQUIRED, StructuredError, emit_validation_errors, format_validation_error,
                        improve_error_message, print_structured_error, resolve_line_of_code, terminate)

PAPI_JSON = {
    'rules': {
        'name': 'default',
        'behaviors': [
            {'name': 'caching', 'options': {'ttl': '1d'}, '__loc': 'src/config.py:3'},
        ],
        'children': [
            {
                'name': 'src/config.py:5',
                'criteria': [{'name': 'path', 'options': {}, '__loc': 'src/config.py:5'}],
                'behaviors': [{'name': 'origin', 'options': {'a/b': {}}, '__loc': 'src/config.py:6'}],
            },
        ],
    },
}


class TestResolveLineOfCode:
    def test_exact_pointer(self):
        assert resolve_line_of_code(PAPI_JSON, '/rules/behaviors/0') == 'src/config.py:3'

    def test_walks_up_to_nearest_loc(self):
        assert resolve_line_of_code(PAPI_JSON, '/rules/children/0/behaviors/0/options/hostname') == 'src/config.py:6'

    def test_hash_prefix(self):
        assert resolve_line_of_code(PAPI_JSON, '#/rules/children/0/criteria/0') == 'src/config.py:5'

    def test_escaped_tokens(self):
        assert resolve_line_of_code(PAPI_JSON, '/rules/children/0/behaviors/0/options/a~1b') == 'src/config.py:6'

    def test_out_of_range_index(self):
        assert resolve_line_of_code(PAPI_JSON, '/rules/behaviors/7/options') is None

    def test_no_loc_found(self):
        assert resolve_line_of_code(PAPI_JSON, '/rules/name') is None
        assert resolve_line_of_code(PAPI_JSON, '') is None

    def test_escaped_key_carrying_loc(self):
        papi_json = {'rules': {'a/b': {'m~n': {'__loc': 'src/config.py:9'}}}}

        assert resolve_line_of_code(papi_json, '/rules/a~1b/m~0n/options') == 'src/config.py:9'

    def test_pointer_through_a_scalar(self):
        assert resolve_line_of_code(PAPI_JSON, '/rules/behaviors/0/name/extra') == 'src/config.py:3'

    def test_non_numeric_index(self):
        assert resolve_line_of_code(PAPI_JSON, '/rules/behaviors/first') is None

    def test_malformed_pointer(self):
        assert resolve_line_of_code(PAPI_JSON, 'rules/behaviors/0') is None


class TestImproveErrorMessage:
    def test_attribute_required_gets_hint(self):
        error = {'type': ATTRIBUTE_REQUIRED, 'errorLocation': '#/rules/behaviors/0/options/ttl',
                 'detail': 'The ttl option is required.'}

        assert improve_error_message(error) == ('The ttl option is required.', '(Add option ttl)')

    def test_attribute_required_without_location(self):
        error = {'type': ATTRIBUTE_REQUIRED, 'detail': 'Missing.'}

        assert improve_error_message(error) == ('Missing.', None)

    def test_other_types_pass_detail_through(self):
        assert improve_error_message({'type': 'x', 'detail': 'Nope.'}) == ('Nope.', None)


class TestOutput:
    def test_format_validation_error(self):
        assert format_validation_error('ERROR', 'src/config.py:3', 'Bad.', '(Add option ttl)') == \
            '[ERROR] src/config.py:3 - Bad. (Add option ttl)'
        assert format_validation_error('WARNING', None, 'Overall.', None) == '[WARNING] Overall.'

    def test_emit_validation_errors(self, capsys):
        emit_validation_errors('WARNING', [
            {'type': 'x', 'errorLocation': '/rules/behaviors/0/options', 'detail': 'Hmm.'},
            {'type': 'x', 'errorLocation': '/nowhere', 'detail': 'Unmapped.'},
            {'type': 'x', 'detail': 'Missing behavior.'},
        ], PAPI_JSON)

        lines = capsys.readouterr().out.splitlines()
        assert lines == [
            '[WARNING] src/config.py:3 - Hmm.',
            '[WARNING] /nowhere - Unmapped.',
            '[WARNING] Missing behavior.',
        ]

    def test_terminate(self, capsys):
        with pytest.raises(SystemExit) as e:
            terminate('Stop.')

        assert e.value.code == 1
        assert capsys.readouterr().out == '[ERROR] Stop.\n'

    def test_print_structured_error(self, capsys):
        error = StructuredError('Failed to save', {'title': 'Bad request'})

        print_structured_error(error)

        out = capsys.readouterr().out
        assert out.startswith('[ERROR] Failed to save\n')
        assert '"title": "Bad request"' in out
        assert str(error) == 'Failed to save: {"title": "Bad request"}'
