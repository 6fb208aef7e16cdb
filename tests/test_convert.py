"""
Tests for building the PAPI rule tree with RuleBuilder.
"""

import os

import pytest

from akj.convert import RuleBuilder, find_line_of_code, run

THIS_FILE = os.path.relpath(__file__, os.getcwd())


def build(on_config):
    return run(on_config).to_papi_json()


class TestRun:
    def test_root_rule(self):
        tree = build(lambda config: None)

        assert tree == {'name': 'default'}

    def test_root_comment_has_no_line_of_code(self):
        tree = build(lambda config: config.comment('hello'))

        assert tree == {'name': 'default', 'comments': 'hello'}

    def test_rule_without_line_of_code(self):
        assert RuleBuilder(None, '').to_papi_json() == {'name': None}

    def test_behaviors_land_on_root(self):
        def on_config(config):
            config.set_caching(ttl='7d').set_cp_code(value={'id': 1234})

        tree = build(on_config)

        assert [b['name'] for b in tree['behaviors']] == ['caching', 'cpCode']
        assert tree['behaviors'][0]['options'] == {'ttl': '7d', 'behavior': 'MAX_AGE', 'mustRevalidate': False}
        assert 'children' not in tree
        assert 'criteria' not in tree

    def test_criterion_creates_child_rule(self):
        def on_config(config):
            config.on_path(values=['/images/*']).set_caching(ttl='30d')

        tree = build(on_config)
        child = tree['children'][0]

        assert child['criteria'][0]['name'] == 'path'
        assert child['criteria'][0]['options']['values'] == ['/images/*']
        assert child['behaviors'][0]['name'] == 'caching'
        assert 'behaviors' not in tree

    def test_chained_criteria_nest(self):
        def on_config(config):
            config.on_hostname(values=['a.example.com']).on_path(values=['/b']).set_caching(ttl='1d')

        tree = build(on_config)
        grandchild = tree['children'][0]['children'][0]

        assert grandchild['criteria'][0]['name'] == 'path'
        assert grandchild['behaviors'][0]['name'] == 'caching'


class TestLineOfCode:
    def test_points_at_caller(self):
        assert find_line_of_code().startswith(f"{THIS_FILE}:")

    def test_loc_recorded_on_behaviors_and_rules(self):
        def on_config(config):
            config.on_path(values=['/x']).set_caching(ttl='1d')

        tree = build(on_config)
        child = tree['children'][0]

        assert child['name'].startswith(f"{THIS_FILE}:")
        assert child['comments'] == child['name']
        assert child['criteria'][0]['__loc'] == child['name']
        assert child['behaviors'][0]['__loc'] == child['name']

    def test_user_comment_gets_line_of_code(self):
        def on_config(config):
            config.on_path(values=['/x']).name('Images').comment('Cache images')

        child = build(on_config)['children'][0]

        assert child['name'] == 'Images'
        assert child['comments'].startswith('Cache images\n')
        assert child['comments'].split('\n')[1].startswith(f"{THIS_FILE}:")


class TestStructure:
    def test_is_secure_only_on_default(self):
        def on_config(config):
            config.is_secure(True)
            config.on_path(values=['/x']).is_secure(True)

        tree = build(on_config)

        assert tree['options'] == {'is_secure': True}
        assert 'options' not in tree['children'][0]

    def test_group(self):
        def on_config(config):
            config.group('Offload', 'Static content').set_caching(ttl='1d')
            config.group('Empty')

        tree = build(on_config)

        assert tree['children'][0]['name'] == 'Offload'
        assert tree['children'][0]['comments'].startswith('Static content\n')
        assert tree['children'][0]['behaviors'][0]['name'] == 'caching'
        assert tree['children'][1]['comments'].startswith('\n')

    @pytest.mark.parametrize("method,mode", [('any', 'any'), ('all', 'all')])
    def test_any_and_all(self, method, mode):
        def on_config(config):
            getattr(config, method)(
                lambda c: c.on_hostname(values=['a.example.com']).on_path(values=['/admin/*'])
            ).set_deny_access(reason='admin')

        child = build(on_config)['children'][0]

        assert child['criteriaMustSatisfy'] == mode
        assert [c['name'] for c in child['criteria']] == ['hostname', 'path']
        assert child['behaviors'][0]['options'] == {'reason': 'admin', 'enabled': True}
        assert 'children' not in child


class TestVariables:
    def test_user_variables_in_allowed_options(self):
        def on_config(config):
            config.set_modify_outgoing_response_header(
                customHeaderName='X-A',
                headerValue='{{user.PMUSER_A}}-{{builtin.AK_HOST}}-{{user.PMUSER_B}}',
            )

        tree = build(on_config)

        assert [v['name'] for v in tree['variables']] == ['PMUSER_A', 'PMUSER_B']
        variable = tree['variables'][0]
        assert variable['hidden'] is False
        assert variable['sensitive'] is False
        assert variable['description'] == f"Variable defined on {variable['__loc']}"

    def test_options_that_do_not_allow_vars_are_ignored(self):
        def on_config(config):
            config.set_caching(ttl='{{user.PMUSER_TTL}}')

        assert 'variables' not in build(on_config)

    def test_variable_options_on_nested_rules_go_to_root(self):
        def on_config(config):
            config.on_metadata_stage(value='forward-start').set_set_variable(
                variableName='PMUSER_STAGE', variableValue='x')

        tree = build(on_config)

        assert [v['name'] for v in tree['variables']] == ['PMUSER_STAGE']
        assert 'variables' not in tree['children'][0]

    def test_first_reference_wins(self):
        def on_config(config):
            config.set_set_variable(variableName='PMUSER_X', variableValue='1')
            config.set_set_variable(variableName='PMUSER_X', variableValue='2')

        tree = build(on_config)

        assert len(tree['variables']) == 1
        assert tree['variables'][0]['__loc'] == tree['behaviors'][0]['__loc']

    def test_variable_list(self):
        def on_config(config):
            config.on_variable_error(variableNames=['PMUSER_A', 'PMUSER_B'])

        assert [v['name'] for v in build(on_config)['variables']] == ['PMUSER_A', 'PMUSER_B']

    def test_variable_list_must_be_a_list(self):
        def on_config(config):
            config.on_variable_error(variableNames='PMUSER_A')

        with pytest.raises(TypeError, match='variableNames'):
            build(on_config)

    def test_variables_in_any_criteria(self):
        def on_config(config):
            config.any(lambda c: c.on_match_variable(variableName='PMUSER_M', values=['1']))

        assert [v['name'] for v in build(on_config)['variables']] == ['PMUSER_M']


class TestRuleBuilderDirect:
    def test_add_from_property_returns(self):
        root = RuleBuilder(None, '')
        child = root.add_from_property('CRITERIA', 'path', {}, {'values': ['/']})
        same = root.add_from_property('BEHAVIOR', 'caching', {}, {'ttl': '1d'})

        assert child.parent is root
        assert root.children == [child]
        assert same is root
        assert child.find_root() is root

    def test_extractors(self):
        params = {'a': '{{user.X}}', 'b': 'PMUSER_Y', 'c': ['Z'], 'd': 3}

        assert RuleBuilder.extract_user_variables_in_options(['a', 'd', 'missing'], params) == ['X']
        assert RuleBuilder.extract_variable_name_options(['b', 'd'], params) == ['PMUSER_Y']
        assert RuleBuilder.extract_variable_list_options(['c', 'missing'], params) == ['Z']
