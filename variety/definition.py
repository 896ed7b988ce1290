"""
The factory for sum-types.

Call `define` with the names of the cases. What comes back is a fresh
`SumType` with one constructor per name and a fresh, empty table of
shared behavior. Nothing is registered anywhere else.
"""

from typing import Iterable, Iterator
from .space import TagSpace, SharedSurface
from .values import Variant, HANDLERS

class Constructor:
	""" Calling one of these makes a value of one specific case. """
	__slots__ = ("definition", "tag")

	def __init__(self, definition:"SumType", tag:str):
		self.definition = definition
		self.tag = tag

	def __call__(self, *args) -> Variant:
		return Variant(self.definition, self.tag, args)

	def __repr__(self): return "<Constructor %s of %r>" % (self.tag, self.definition)


class SumType:
	"""
	Constructors are available as attributes, e.g. `Maybe.Just(3)`,
	or by subscript for names that are not identifiers: `Maybe["Just"]`.

	The `shared` mapping is the extension surface. Assign functions
	into it and they become methods on every value of this type,
	including those which already exist.
	"""
	_tags: TagSpace
	shared: SharedSurface

	def __init__(self, names:Iterable[str]):
		object.__setattr__(self, "shared", SharedSurface())
		object.__setattr__(self, "_tags", TagSpace((name, Constructor(self, name)) for name in names))

	@property
	def variants(self) -> tuple[str, ...]:
		return tuple(self._tags)

	def __getattr__(self, key:str) -> Constructor:
		if key == "_tags": raise AttributeError(key)
		try: return self._tags.symbol(key)
		except KeyError: raise AttributeError("%r has no case called %r" % (self, key)) from None

	def __getitem__(self, key:str) -> Constructor:
		return self._tags.symbol(key)

	def __setattr__(self, key, value):
		raise AttributeError("Assign shared behavior into .shared[%r] instead." % key)

	def __contains__(self, tag:str) -> bool: return tag in self._tags
	def __iter__(self) -> Iterator[str]: return iter(self._tags)
	def __len__(self): return len(self._tags)

	def owns(self, value) -> bool:
		""" True when `value` came from one of this type's own constructors. """
		return isinstance(value, Variant) and value.definition is self

	def match(self, handlers:HANDLERS, report=None):
		""" Check a handler-map against this type once, then reuse it. See `variety.check`. """
		from .check import build_matcher
		return build_matcher(self, handlers, report)

	def __repr__(self):
		if len(self._tags): return "<SumType %s>" % " | ".join(self._tags)
		else: return "<SumType>"


def define(*names:str) -> SumType:
	"""
	Make a brand-new sum-type with one case per name.
	Duplicate names raise `AlreadyExists`. The else-marker `_` is reserved.
	"""
	return SumType(names)
