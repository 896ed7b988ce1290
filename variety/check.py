"""
Checking a handler-map against its sum-type ahead of time.

`Variant.cases` finds out about a missing case only when a value of that case
turns up. Here, the whole map is compared against the definition once:
keys that name no case, cases with no handler and no else-clause to catch
them, and else-clauses that can never happen all get reported. The result
is a `Matcher`, which dispatches exactly like `cases` does.
"""
from types import MappingProxyType
from .space import ELSE
from .values import Variant, HANDLERS, dispatch
from .diagnostics import Report, TooManyIssues

class ForeignValue(TypeError): pass

class CaseCheckFailed(ValueError):
	def __init__(self, report:Report):
		super().__init__("%d issue(s) with this handler-map" % len(report.issues))
		self.report = report

class Matcher:
	""" A handler-map which has been checked against a specific sum-type. """
	def __init__(self, definition, handlers:HANDLERS):
		self.definition = definition
		self.handlers = MappingProxyType(dict(handlers))

	def __call__(self, value:Variant):
		if not self.definition.owns(value):
			raise ForeignValue("%r is not a value of %r" % (value, self.definition))
		return dispatch(self.handlers, value.tag, value.payload)

	def __repr__(self): return "<Matcher over %r>" % self.definition

def check_cases(definition, handlers:HANDLERS, report:Report) -> Matcher:
	otherwise = handlers.get(ELSE)
	for key, fn in handlers.items():
		if key != ELSE and key not in definition:
			report.not_a_case_of(key, definition, fn)
	missing = [tag for tag in definition if handlers.get(tag) is None]
	if not missing and otherwise is not None: report.redundant_else(definition, otherwise)
	if missing and otherwise is None: report.not_exhaustive(definition, missing, handlers)
	report.info("Checked %d handler(s) against %r." % (len(handlers), definition))
	return Matcher(definition, handlers)

def build_matcher(definition, handlers:HANDLERS, report:Report=None) -> Matcher:
	"""
	With a report supplied, issues go there and the matcher comes back regardless.
	Without one, any issue is printed to the console and raises `CaseCheckFailed`.
	"""
	if report is not None:
		return check_cases(definition, handlers, report)
	report = Report()
	try: matcher = check_cases(definition, handlers, report)
	except TooManyIssues: matcher = None
	if report.sick():
		report.complain_to_console()
		raise CaseCheckFailed(report)
	return matcher
