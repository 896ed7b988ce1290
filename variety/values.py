"""
This module defines the run-time value of a sum-type: a tag, a payload, and
a reference to the table of behavior shared by every case of the type.

The value plays itself for the built-in members (tag, payload, definition,
and cases). Anything else is looked up in the shared table at the moment
of access, so behavior attached after construction still shows up.
"""
import copy
from typing import Any, Callable, Mapping, Sequence
from .space import ELSE, SharedSurface

HANDLERS = Mapping[str, Callable]

class NonExhaustiveCasesError(LookupError):
	""" Neither the value's own tag nor the else-case had a handler. """
	def __init__(self, tag:str):
		super().__init__('cases: missing case for "%s"' % tag)
		self.tag = tag

def dispatch(handlers:HANDLERS, tag:str, payload:Sequence):
	"""
	The one real decision in the whole library:
	Own tag first, with the payload spread out.
	Then the else-case, with no arguments at all, since it stands in for cases of any arity.
	Then give up.
	"""
	fn = handlers.get(tag)
	if fn is not None: return fn(*payload)
	fn = handlers.get(ELSE)
	if fn is not None: return fn()
	raise NonExhaustiveCasesError(tag)

def _bind(behavior, receiver):
	# Functions (and properties, and anything else with a __get__) bind to the value.
	if hasattr(type(behavior), "__get__"):
		return behavior.__get__(receiver, type(receiver))
	return behavior

###############################################################################

class Variant:
	""" One value of some sum-type. Immutable after construction. """
	__slots__ = ("tag", "payload", "definition", "_vtable")
	tag: str
	payload: tuple
	_vtable: SharedSurface

	def __init__(self, definition, tag:str, payload:Sequence):
		object.__setattr__(self, "definition", definition)
		object.__setattr__(self, "tag", tag)
		object.__setattr__(self, "payload", tuple(payload))
		object.__setattr__(self, "_vtable", definition.shared)

	def cases(self, handlers:HANDLERS=None, /, **alternatives:Callable):
		if handlers is None: handlers = alternatives
		elif alternatives: handlers = {**handlers, **alternatives}
		return dispatch(handlers, self.tag, self.payload)

	def __getattr__(self, key:str):
		# Only called when ordinary lookup fails, which includes a not-yet-set slot.
		if key == "_vtable": raise AttributeError(key)
		try: behavior = self._vtable[key]
		except KeyError:
			raise AttributeError("%s value has no member %r" % (self.tag, key)) from None
		return _bind(behavior, self)

	def __setattr__(self, key, value):
		raise AttributeError("%s value is immutable; attach shared behavior to its definition instead" % self.tag)

	def __delattr__(self, key):
		raise AttributeError("%s value is immutable" % self.tag)

	def __copy__(self): return self

	def __deepcopy__(self, memo):
		# The definition is shared by reference; only the payload gets copied.
		return Variant(self.definition, self.tag, copy.deepcopy(self.payload, memo))

def _default_repr(self:Variant) -> str:
	return "%s(%s)" % (self.tag, ', '.join(map(repr, self.payload)))

def _no_len(self:Variant):
	raise TypeError("%s value has no len()" % self.tag)

def _not_iterable(self:Variant):
	raise TypeError("%s value is not iterable" % self.tag)

def _default_bool(self:Variant) -> bool:
	# Same as plain Python: without __bool__, truth comes from __len__ if there is one.
	if "__len__" in self._vtable: return len(self) != 0
	return True

# Python looks up special methods on the class, never the instance.
# So these few get forwarded by hand, falling back to plain-object behavior.
PROTOCOL = {
	"__str__": object.__str__,
	"__repr__": _default_repr,
	"__eq__": object.__eq__,
	"__ne__": object.__ne__,
	"__lt__": object.__lt__,
	"__le__": object.__le__,
	"__gt__": object.__gt__,
	"__ge__": object.__ge__,
	"__hash__": object.__hash__,
	"__len__": _no_len,
	"__iter__": _not_iterable,
	"__bool__": _default_bool,
}

def _forward(name:str, default:Callable):
	def method(self:Variant, *args) -> Any:
		try: behavior = self._vtable[name]
		except KeyError: return default(self, *args)
		return _bind(behavior, self)(*args)
	method.__name__ = method.__qualname__ = name
	return method

for _name, _default in PROTOCOL.items():
	setattr(Variant, _name, _forward(_name, _default))
del _name, _default
