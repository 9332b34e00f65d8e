"""Custom Handlebars block helpers for rendering entries.

Helpers follow the pybars calling convention: ``helper(this, options, *params)``
for block calls and ``helper(this, *params)`` for inline calls, so the options
dict is detected rather than assumed.
"""

import math
from collections.abc import Mapping
from enum import Enum

from pybars import Scope, strlist

from .errors import HelperError


class ParamKind(Enum):
    """Runtime shape of a helper parameter."""

    NUMBER = "number"
    NULL = "null"
    OTHER = "other"


def classify_param(value) -> ParamKind:
    """Classify by type only; 0 is a number, not a falsy value."""
    if value is None:
        return ParamKind.NULL
    if isinstance(value, bool):
        return ParamKind.OTHER
    if isinstance(value, int):
        return ParamKind.NUMBER
    if isinstance(value, float) and math.isfinite(value):
        return ParamKind.NUMBER
    return ParamKind.OTHER


def _is_options(value) -> bool:
    return isinstance(value, dict) and callable(value.get("fn"))


def _split_args(args: tuple) -> tuple[dict | None, tuple]:
    """Separate the block options (if any) from the helper's parameters."""
    if args and _is_options(args[0]):
        return args[0], args[1:]
    return None, args


class _IndexedScope(Scope):
    """Block scope that exposes a fixed ``@index``."""

    def __init__(self, context, parent, root, index: int):
        super().__init__(context, parent, root)
        self._index = index

    def get(self, name, default=None):
        if name == "@index":
            return self._index
        return super().get(name, default)


def if_reply(this, *args):
    """
    Render the block only when the parameter is a number.

    The built-in ``if`` treats 0 as false, but a reply to entry 0 is still a
    reply. Null renders nothing; any other type is an error.
    """
    options, params = _split_args(args)
    if not params:
        raise HelperError('Param not found for helper "if_reply"')

    kind = classify_param(params[0])
    if kind is ParamKind.NUMBER:
        if options is None:
            raise HelperError('Template not found for helper "if_reply"')
        return options["fn"](this)
    if kind is ParamKind.NULL:
        return strlist()
    raise HelperError('Param of invalid type for helper "if_reply"')


def each_reverse(this, *args):
    """
    Iterate a list from last to first, keeping each item's original index.

    Entries are shown newest-first, but ``@index`` must still be the ID that
    reply markers refer to.
    """
    options, params = _split_args(args)
    if not params:
        raise HelperError('Param not found for helper "each_reverse"')
    if options is None:
        raise HelperError('Template not found for helper "each_reverse"')

    items = params[0]
    if not isinstance(items, (list, tuple)):
        raise HelperError('Param of invalid type for helper "each_reverse"')

    result = strlist()
    for index in range(len(items) - 1, -1, -1):
        scope = _IndexedScope(items[index], this, options.get("root"), index)
        result.grow(options["fn"](scope))
    return result


def _base_context(scope):
    while isinstance(scope, Scope):
        scope = scope.context
    return scope


def _enclosing_index(scope) -> int | None:
    """Find @index of the nearest each_reverse scope, through any wrapping scopes."""
    while isinstance(scope, Scope):
        inner = scope
        while isinstance(inner, Scope):
            if isinstance(inner, _IndexedScope):
                return inner._index
            inner = inner.context
        scope = scope.parent
    return None


def helper_missing(this, name, *args):
    """
    Fail on references that resolve to nothing.

    pybars routes both unknown helpers and unknown variables here. A key that
    exists with a null value is allowed through. Partials wrap the block scope
    in a plain Scope, so @index is looked up through the wrappers here.
    """
    if args:
        raise HelperError(f'Helper not found: "{name}"')
    if name == "@index":
        index = _enclosing_index(this)
        if index is not None:
            return index
    context = _base_context(this)
    if isinstance(context, Mapping) and name in context:
        return None
    raise HelperError(f'Variable not found: "{name}"')


HELPERS = {
    "if_reply": if_reply,
    "each_reverse": each_reverse,
    "helperMissing": helper_missing,
}
