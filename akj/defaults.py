import copy


class _Guard:
    """
    A condition on sibling options that must hold before a default is assigned.
    Guards are callable with the params dict and list the options they read in `depends_on`.
    """
    depends_on = ()

    def __call__(self, params):
        raise NotImplementedError


def _is_set(params, attr):
    return params.get(attr) is not None


def _strict_equals(left, right):
    # Booleans never compare equal to numbers, even though Python says True == 1.
    if isinstance(left, bool) or isinstance(right, bool):
        return isinstance(left, bool) and isinstance(right, bool) and left is right
    if isinstance(left, (int, float)) and isinstance(right, (int, float)):
        return left == right
    return type(left) is type(right) and left == right


class eq(_Guard):
    def __init__(self, attr, value):
        self.attr = attr
        self.value = value
        self.depends_on = (attr,)

    def __call__(self, params):
        return _is_set(params, self.attr) and _strict_equals(params[self.attr], self.value)

    def __repr__(self):
        return f"eq({self.attr!r}, {self.value!r})"


class neq(eq):
    def __call__(self, params):
        return not super().__call__(params)

    def __repr__(self):
        return f"neq({self.attr!r}, {self.value!r})"


class one_of(_Guard):
    def __init__(self, attr, values):
        self.attr = attr
        self.values = tuple(values)
        self.depends_on = (attr,)

    def __call__(self, params):
        if not _is_set(params, self.attr):
            return False
        return any(_strict_equals(params[self.attr], v) for v in self.values)

    def __repr__(self):
        return f"one_of({self.attr!r}, {list(self.values)!r})"


class all_of(_Guard):
    def __init__(self, *guards):
        self.guards = guards
        self.depends_on = tuple(attr for g in guards for attr in g.depends_on)

    def __call__(self, params):
        return all(g(params) for g in self.guards)


class any_of(all_of):
    def __call__(self, params):
        return any(g(params) for g in self.guards)


class negate(_Guard):
    def __init__(self, guard):
        self.guard = guard
        self.depends_on = guard.depends_on

    def __call__(self, params):
        return not self.guard(params)


class Default:
    """
    Assign `value` to `option` when the option is missing (or None) and `when` holds.
    """

    def __init__(self, option, value, when=None):
        self.option = option
        self.value = value
        self.when = when

    @property
    def depends_on(self):
        if self.when is None:
            return ()
        return self.when.depends_on

    def applies_to(self, params):
        if _is_set(params, self.option):
            return False
        return self.when is None or self.when(params)

    def __repr__(self):
        if self.when is None:
            return f"Default({self.option!r}, {self.value!r})"
        return f"Default({self.option!r}, {self.value!r}, when={self.when!r})"


def apply_defaults(params, defaults):
    """
    Fills in the defaults, in order, on the params dict.
    Later guards see the defaults assigned by earlier entries.
    Arguments:
        params (dict): The options passed by the caller. Mutated in place.
        defaults (list): Default entries, already ordered by order_defaults().
    Returns:
        dict: The same params object.
    """
    for default in defaults:
        if default.applies_to(params):
            params[default.option] = copy.deepcopy(default.value)
    return params


def _fix_ordering(defaults):
    """
    Single corrective pass. Moves each default behind the last sibling default its guard reads.
    Returns the number of moves.
    """
    moves = 0
    for default in list(defaults):
        position = defaults.index(default)
        last_dependency = -1
        for attr in default.depends_on:
            for i, other in enumerate(defaults):
                if other.option == attr and i > last_dependency:
                    last_dependency = i

        if last_dependency > position:
            defaults.remove(default)
            # The dependency shifted left by one when we removed ourselves.
            defaults.insert(last_dependency, default)
            moves += 1
    return moves


def order_defaults(name, defaults):
    """
    Returns the defaults in an order where guards are evaluated after their dependencies got their defaults.
    A single fix-up pass is allowed; needing a second one means the dependencies are cyclic.
    """
    ordered = list(defaults)
    if _fix_ordering(ordered) > 0:
        if _fix_ordering(ordered) > 0:
            raise ValueError(f"Unable to fix the default ordering of {name} - fixed once, but that wasn't enough.")
    return ordered
