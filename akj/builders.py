"""
The builder surface used from a property's `on_config(config)`.

Every criterion in the catalog becomes an `on_<name>` method and every behavior a `set_<name>` method.
A method fills in the catalog defaults on the options it was given and hands them to the delegate, which
assembles the rule tree. Nothing is validated here; Property Manager does that when the rules are saved.

    config.on_path(values=['/images/*']).set_caching(ttl='30d')
"""
from akj.catalog import BEHAVIOR_KIND, BEHAVIORS, CRITERIA, CRITERIA_KIND, method_name


def _merge_options(params, options):
    if params is None:
        params = {}
    params.update(options)
    return params


def _describe(entry, verb):
    lines = [f"{verb} the `{entry.name}` {'criterion' if entry.kind == CRITERIA_KIND else 'behavior'}."]
    unconditional = [d for d in entry.defaults if d.when is None]
    if unconditional:
        lines.append('')
        lines.append('Defaults: ' + ', '.join(f"{d.option}={d.value!r}" for d in unconditional))
    return '\n'.join(lines)


def _criterion_method(entry):
    def method(self, params=None, **options):
        params = entry.fill_defaults(_merge_options(params, options))
        rule = self._delegate.add_from_property(CRITERIA_KIND, entry.name, entry.pm_var_handling, params)
        return self._after_criterion(rule)

    method.__name__ = method_name(CRITERIA_KIND, entry.name)
    method.__doc__ = _describe(entry, 'Match on')
    return method


def _behavior_method(entry):
    def method(self, params=None, **options):
        params = entry.fill_defaults(_merge_options(params, options))
        rule = self._delegate.add_from_property(BEHAVIOR_KIND, entry.name, entry.pm_var_handling, params)
        return Property(rule)

    method.__name__ = method_name(BEHAVIOR_KIND, entry.name)
    method.__doc__ = _describe(entry, 'Apply')
    return method


class _Criteria:
    """
    Holds the `on_*` methods. Subclasses decide what a criterion call returns.
    """

    def __init__(self, delegate):
        self._delegate = delegate

    @property
    def delegate(self):
        return self._delegate

    def _after_criterion(self, rule):
        raise NotImplementedError


for _entry in CRITERIA.values():
    setattr(_Criteria, method_name(CRITERIA_KIND, _entry.name), _criterion_method(_entry))


class CriteriaBuilder(_Criteria):
    """
    Passed to the callbacks of Property.any() and Property.all(). Only criteria can be added, and they
    all land in the same rule, so every `on_*` call returns the builder itself.
    """

    def _after_criterion(self, rule):
        return self


class Property(_Criteria):
    """
    A rule in the property's rule tree.
    `on_*` methods open a child rule matching the criterion and return it; `set_*` methods add a behavior
    to this rule.
    """

    def _after_criterion(self, rule):
        return Property(rule)

    def name(self, name):
        self._delegate.name(name)
        return self

    def comment(self, text):
        self._delegate.comment(text)
        return self

    def is_secure(self, secure_rule):
        """
        Only honored on the default (top) rule.
        """
        self._delegate.is_secure(secure_rule)
        return self

    def group(self, name, comment=None):
        """
        Add a child rule without criteria, used to organize behaviors.
        Arguments:
            name (str): Rule name shown in Property Manager.
            comment (str): Optional rule comment.
        Returns:
            Property: The new child rule.
        """
        return Property(self._delegate.group(name, comment))

    def any(self, callback):
        """
        Add a child rule matching when any of the criteria added by `callback` match.
        `callback` receives a CriteriaBuilder.
        """
        return Property(self._delegate.do_any(callback))

    def all(self, callback):
        """
        Add a child rule matching when all of the criteria added by `callback` match.
        """
        return Property(self._delegate.do_all(callback))


for _entry in BEHAVIORS.values():
    setattr(Property, method_name(BEHAVIOR_KIND, _entry.name), _behavior_method(_entry))

del _entry
