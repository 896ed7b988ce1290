"""
The two name-spaces every sum-type carries around:

1. the tags, which are fixed once the definition exists, and
2. the shared surface, which anyone may add to at any time.
"""

from threading import Lock
from typing import Any, Iterable, Iterator, MutableMapping

ELSE = "_"

class AlreadyExists(KeyError): pass
class ReservedName(KeyError): pass


class TagSpace:
	""" Lightly enhanced dictionary: It does not like duplicate keys. """
	_symbol: dict[str, Any]

	def __init__(self, pairs:Iterable[tuple[str, Any]]=()):
		self._symbol = {}
		for key, symbol in pairs:
			self.mount(key, symbol)

	def __contains__(self, key: str) -> bool:
		return key in self._symbol

	def __len__(self): return len(self._symbol)
	def __iter__(self) -> Iterator[str]: return iter(self._symbol)

	def symbol(self, key: str) -> Any:
		return self._symbol[key]

	def mount(self, key:str, symbol:Any) -> Any:
		if key == ELSE:
			raise ReservedName(key)
		if key in self._symbol:
			raise AlreadyExists(key)
		self._symbol[key] = symbol
		return symbol


class SharedSurface(MutableMapping):
	"""
	The place where behavior common to all the cases of a sum-type lives.
	Values hold a reference to this, not a copy, so additions show up
	on values that already exist. Writers take turns on the mutex.
	"""

	def __init__(self):
		self._mutex = Lock()
		self._table = {}

	def __getitem__(self, key):
		return self._table[key]

	def __setitem__(self, key, value):
		with self._mutex:
			self._table[key] = value

	def __delitem__(self, key):
		with self._mutex:
			del self._table[key]

	def __contains__(self, key):
		return key in self._table

	def __len__(self): return len(self._table)

	def __iter__(self):
		with self._mutex:
			return iter(list(self._table))

	def __repr__(self): return "<SharedSurface %s>" % ', '.join(map(str, self))
