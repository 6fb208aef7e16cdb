"""
RuleBuilder is the delegate behind Property and CriteriaBuilder. It turns builder calls into a PAPI rule tree.
"""
import os
import re
import traceback

from akj.builders import CriteriaBuilder, Property

_BUILDER_FILES = {
    os.path.join(os.path.dirname(os.path.abspath(__file__)), 'builders.py'),
    os.path.abspath(__file__),
}

_USER_VARIABLE = re.compile(r'{{user\.(.*?)}}')


def find_line_of_code():
    """
    Returns "relative/path.py:LINE" for the innermost stack frame outside the builder modules,
    i.e. the line in the customer's config that caused the current rule, criterion or behavior.
    """
    for frame in reversed(traceback.extract_stack()):
        if os.path.abspath(frame.filename) in _BUILDER_FILES:
            continue
        return f"{os.path.relpath(frame.filename, os.getcwd())}:{frame.lineno}"
    return ''


class MatchRuleBuilder:
    """
    The delegate given to the callbacks of any() and all(). Only collects criteria.
    """

    def __init__(self):
        self.match_accumulator = []

    def add_from_property(self, kind, name, pm_var_handling, params):
        self.match_accumulator.append(({'name': name, 'options': params, '__loc': find_line_of_code()},
                                       pm_var_handling))
        return self


class RuleBuilder:
    def __init__(self, parent=None, loc=None):
        self.parent = parent
        self.line_of_code = loc or None
        self.papi_attributes = {}
        self.matchers = []
        self.commands = []
        self.children = []
        # Only used on the root rule.
        self.variables = {}

    def name(self, name):
        self.papi_attributes['name'] = name
        return self

    def comment(self, text):
        self.papi_attributes['comments'] = text
        return self

    def is_secure(self, secure_rule):
        if self.papi_attributes.get('name') == 'default':
            self.papi_attributes['options'] = {'is_secure': secure_rule}
        return self

    def group(self, group_name, comment=None):
        child = RuleBuilder(self, find_line_of_code())
        child.name(group_name)
        child.comment(comment or '')
        self.children.append(child)
        return child

    def _do(self, callback, must_satisfy):
        collector = MatchRuleBuilder()
        callback(CriteriaBuilder(collector))

        child = RuleBuilder(self, find_line_of_code())
        child.papi_attributes['criteriaMustSatisfy'] = must_satisfy
        self.children.append(child)

        for option, pm_var_handling in collector.match_accumulator:
            child.matchers.append(option)
            child.register_variables_in_options(pm_var_handling, option['options'])
        return child

    def do_any(self, callback):
        return self._do(callback, 'any')

    def do_all(self, callback):
        return self._do(callback, 'all')

    def add_from_property(self, kind, name, pm_var_handling, params):
        self.find_root().register_variables_in_options(pm_var_handling, params)

        if kind == 'CRITERIA':
            child = RuleBuilder(self, find_line_of_code())
            child.matchers.append({'name': name, 'options': params, '__loc': find_line_of_code()})
            self.children.append(child)
            return child

        self.commands.append({'name': name, 'options': params, '__loc': find_line_of_code()})
        return self

    def register_variables_in_options(self, pm_var_handling, params):
        """
        Declares, on the root rule, every `user.` PM variable referenced by the options.
        The first reference wins, so the declaration keeps pointing at the line that introduced the variable.
        """
        referenced = []
        if pm_var_handling.get('allows_vars'):
            referenced.extend(self.extract_user_variables_in_options(pm_var_handling['allows_vars'], params))
        if pm_var_handling.get('variable'):
            referenced.extend(self.extract_variable_name_options(pm_var_handling['variable'], params))
        if pm_var_handling.get('variable_list'):
            referenced.extend(self.extract_variable_list_options(pm_var_handling['variable_list'], params))

        if not referenced:
            return

        root = self.find_root()
        for variable in referenced:
            if variable in root.variables:
                continue
            loc = find_line_of_code()
            root.variables[variable] = {
                'name': variable,
                'description': f"Variable defined on {loc}",
                'hidden': False,
                'sensitive': False,
                '__loc': loc,
            }

    @staticmethod
    def extract_user_variables_in_options(allows_vars, params):
        """
        Variables referenced as {{user.NAME}}. builtin. and parent. references are ignored.
        """
        found = []
        for option in allows_vars:
            value = params.get(option)
            if not isinstance(value, str):
                continue
            found.extend(_USER_VARIABLE.findall(value))
        return found

    @staticmethod
    def extract_variable_name_options(variables, params):
        return [params[option] for option in variables if isinstance(params.get(option), str)]

    @staticmethod
    def extract_variable_list_options(variable_list, params):
        found = []
        for option in variable_list:
            value = params.get(option)
            if value is None:
                continue
            if not isinstance(value, list):
                raise TypeError(f"Expected the option {option} to be a list of strings, but it was "
                                f"{type(value).__name__}.")
            found.extend(value)
        return found

    def to_papi_json(self):
        """
        Returns a dict ready for json.dumps().
        """
        ret = dict(self.papi_attributes)

        # PAPI requires a name on every rule.
        if ret.get('name') is None:
            ret['name'] = self.line_of_code

        if ret.get('comments') is None:
            if self.line_of_code is not None:
                ret['comments'] = self.line_of_code
        elif self.line_of_code is not None:
            ret['comments'] += f"\n{self.line_of_code}"

        if self.matchers:
            ret['criteria'] = self.matchers
        if self.variables:
            ret['variables'] = list(self.variables.values())
        if self.commands:
            ret['behaviors'] = self.commands
        if self.children:
            ret['children'] = [child.to_papi_json() for child in self.children]
        return ret

    def find_root(self):
        walker = self
        while walker.parent is not None:
            walker = walker.parent
        return walker


def run(on_config):
    """
    Builds the rule tree of a property.
    Arguments:
        on_config (callable): Called with the Property wrapping the default rule.
    Returns:
        RuleBuilder: The default (root) rule.
    """
    root = RuleBuilder(None, '')
    root.papi_attributes['name'] = 'default'
    on_config(Property(root))
    return root
