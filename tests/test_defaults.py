"""
Tests for the default-filling of builder options.
"""

import pytest

from akj.defaults import Default, all_of, any_of, apply_defaults, eq, negate, neq, one_of, order_defaults


class TestGuards:
    """Guards over sibling options."""

    def test_eq_requires_option_to_be_set(self):
        """An unset (or None) option never equals anything."""
        assert not eq('enabled', True)({})
        assert not eq('enabled', True)({'enabled': None})
        assert eq('enabled', True)({'enabled': True})

    def test_eq_does_not_mix_booleans_and_numbers(self):
        """True == 1 in Python, but not for option guards."""
        assert not eq('enabled', True)({'enabled': 1})
        assert not eq('statusCode', 1)({'statusCode': True})
        assert eq('statusCode', 200)({'statusCode': 200.0})
        assert not eq('statusCode', 200)({'statusCode': '200'})

    def test_neq_is_true_for_unset_option(self):
        """neq is the plain inverse of eq."""
        assert neq('branded403StatusCode', 302)({})
        assert neq('branded403StatusCode', 302)({'branded403StatusCode': 403})
        assert not neq('branded403StatusCode', 302)({'branded403StatusCode': 302})

    def test_one_of(self):
        guard = one_of('behavior', ['MAX_AGE', 'EXPIRES'])
        assert guard({'behavior': 'EXPIRES'})
        assert not guard({'behavior': 'NO_STORE'})
        assert not guard({})

    def test_composition(self):
        """all_of, any_of and negate compose and merge their dependencies."""
        both = all_of(eq('a', 1), eq('b', 2))
        either = any_of(eq('a', 1), eq('b', 2))

        assert both({'a': 1, 'b': 2})
        assert not both({'a': 1})
        assert either({'b': 2})
        assert not either({})
        assert negate(eq('a', 1))({})
        assert both.depends_on == ('a', 'b')
        assert negate(both).depends_on == ('a', 'b')


class TestApplyDefaults:
    """apply_defaults mutates and returns the params."""

    def test_unconditional_default_fills_missing_option(self):
        params = {}
        result = apply_defaults(params, [Default('matchOperator', 'IS_ONE_OF')])

        assert result is params
        assert params == {'matchOperator': 'IS_ONE_OF'}

    def test_explicit_values_are_kept(self):
        """Falsy values are still values; only None counts as missing."""
        params = {'enabled': False, 'ttl': '', 'count': 0}
        apply_defaults(params, [Default('enabled', True), Default('ttl', '1d'), Default('count', 3)])

        assert params == {'enabled': False, 'ttl': '', 'count': 0}

    def test_none_counts_as_missing(self):
        params = {'enabled': None}
        apply_defaults(params, [Default('enabled', True)])

        assert params['enabled'] is True

    def test_guard_sees_earlier_defaults(self):
        """A default assigned earlier in the same call makes a later guard hold."""
        params = {}
        apply_defaults(params, [
            Default('enabled', True),
            Default('timeout', '2h', when=eq('enabled', True)),
        ])

        assert params == {'enabled': True, 'timeout': '2h'}

    def test_guard_not_holding_leaves_option_missing(self):
        params = {'enabled': False}
        apply_defaults(params, [
            Default('enabled', True),
            Default('timeout', '2h', when=eq('enabled', True)),
        ])

        assert 'timeout' not in params

    def test_list_defaults_are_not_shared(self):
        defaults = [Default('values', ['text/html*'])]
        first = apply_defaults({}, defaults)
        first['values'].append('image/*')

        assert apply_defaults({}, defaults)['values'] == ['text/html*']

    def test_malformed_input_passes_through(self):
        """Values of the wrong type are not validated."""
        params = {'enabled': 'yes', 'unknown': object()}
        apply_defaults(params, [Default('timeout', '2h', when=eq('enabled', True))])

        assert params['enabled'] == 'yes'
        assert 'timeout' not in params


class TestOrderDefaults:
    """Guards are evaluated after the defaults of the options they read."""

    def test_already_ordered_is_unchanged(self):
        defaults = [Default('enabled', True), Default('timeout', '2h', when=eq('enabled', True))]

        assert order_defaults('dnsAsyncRefresh', defaults) == defaults

    def test_dependency_listed_later_is_moved_ahead(self):
        timeout = Default('timeout', '2h', when=eq('enabled', True))
        enabled = Default('enabled', True)

        ordered = order_defaults('dnsAsyncRefresh', [timeout, enabled])

        assert ordered == [enabled, timeout]
        assert apply_defaults({}, ordered) == {'enabled': True, 'timeout': '2h'}

    def test_input_list_is_not_modified(self):
        defaults = [Default('timeout', '2h', when=eq('enabled', True)), Default('enabled', True)]
        snapshot = list(defaults)

        order_defaults('dnsAsyncRefresh', defaults)

        assert defaults == snapshot

    def test_cycle_raises(self):
        cyclic = [
            Default('a', 1, when=eq('b', 2)),
            Default('b', 2, when=eq('a', 1)),
        ]

        with pytest.raises(ValueError, match='cyclic'):
            order_defaults('cyclic', cyclic)
