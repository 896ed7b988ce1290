import sys, random, inspect
from functools import lru_cache
from typing import Any, Callable, Optional, Sequence
from pathlib import Path
from boozetools.support.failureprone import SourceText, illustration

class TooManyIssues(Exception):
	pass

def _outburst():
	particle = ["Oh, ", "Well, ", "Aw, ", "", ""]

	minced_oaths = [
		'Ack', 'ARGH', 'Blargh', 'Confound it', 'Crud', 'Curses', "Crikey",
		'Dag Nabbit', 'Drat', 'Fiddlesticks', 'Good Grief', "Great Scott",
		'Jeepers', 'Heavens', 'Nuts', 'Rats',
	]

	resignations = [
		'I am undone.',
		'I cannot continue.',
		'Some case has slipped through the cracks.',
		'I need to ask for help.',
	]

	return "%s%s! %s"%tuple(map(random.choice, (particle, minced_oaths, resignations)))

class Report:
	""" Collects issues found while checking handler-maps, for later complaint. """
	_issues : list["Pic"]

	def __init__(self, *, verbose:int=0, max_issues=10):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._issues = []
		self._max_issues = max_issues

	@property
	def issues(self) -> tuple["Pic", ...]: return tuple(self._issues)

	def ok(self): return not self._issues
	def sick(self): return bool(self._issues)

	def issue(self, it:"Pic"):
		self._issues.append(it)
		if len(self._issues) == self._max_issues:
			raise TooManyIssues(self)

	def reset(self):
		self._issues.clear()

	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)

	def complain_to_console(self):
		""" Emit all the issues to the console. """
		_bemoan(self._issues)

	def assert_no_issues(self, message):
		""" Does what it says on the tin """
		if self._issues:
			self.complain_to_console()
			raise AssertionError(_outburst()+" "+message)

	# Methods the case-checker calls:

	def not_a_case_of(self, key:str, definition, handler:Callable):
		pattern = "This case is not a member of the variant-type %r."
		intro = pattern % definition
		self.issue(Pic(intro, [Annotation(handler, "'%s' is not one of the cases" % key, hint=key)]))

	def not_exhaustive(self, definition, missing:Sequence[str], handlers:dict):
		pattern = "This handler-map does not cover all the cases of %r and lacks an else-clause."
		intro = pattern % definition
		problem = [Annotation(fn, "", hint=key) for key, fn in handlers.items() if fn is not None]
		footer = ["Missing: " + ", ".join(missing)]
		self.issue(Pic(intro, problem, footer))

	def redundant_else(self, definition, otherwise:Callable):
		intro = "This handler-map has an extra else-clause."
		problem = [Annotation(otherwise, "cannot happen: every case of %r is covered" % definition, hint="_")]
		footer = ["That's probably an oversight."]
		self.issue(Pic(intro, problem, footer))


class Annotation:
	"""
	Points at the line of Python where some handler was written.
	Callables without Python source (built-ins, for instance) get a caption but no picture.
	"""
	path: Optional[Path]
	slice: slice
	caption: str
	def __init__(self, handler:Any, caption:str="", hint:str=""):
		self.caption = caption
		self.path, self.slice = _locate(handler, hint)
	def illustrate(self):
		if self.path is None:
			return '       | ' + self.caption
		source = _fetch(self.path)
		row, col = source.find_row_col(self.slice.start)
		single_line = source.line_of_text(row)
		width = self.slice.stop - self.slice.start
		return illustration(single_line, col, width, prefix='% 6d |' % row, caption=self.caption)

def _locate(handler:Any, hint:str) -> tuple[Optional[Path], slice]:
	try:
		code = inspect.unwrap(handler).__code__
		path = Path(inspect.getsourcefile(code))
		text = _read(path)
	except (AttributeError, TypeError, OSError, ValueError):
		return None, slice(0, 0)
	lines = text.splitlines(keepends=True)
	if not 0 < code.co_firstlineno <= len(lines):
		return None, slice(0, 0)
	line = lines[code.co_firstlineno - 1]
	offset = sum(map(len, lines[:code.co_firstlineno - 1]))
	col = line.find(hint) if hint else -1
	if col < 0:
		col = len(line) - len(line.lstrip())
		width = len(line.strip())
	else:
		width = len(hint)
	return path, slice(offset + col, offset + col + width)

class Pic:
	def __init__(self, intro:str, anns:list[Annotation], footer=()):
		self._intro, self._anns, self._footer = intro, anns, footer
	@property
	def description(self): return self._intro
	def also(self, handler, caption:str=""): self._anns.append(Annotation(handler, caption))
	def as_text(self):
		lines = [self._intro, ""]
		path = None
		for ann in self._anns:
			if ann.path != path:
				path = ann.path
				if path is not None: lines.append(str(path))
			lines.append(ann.illustrate())
		lines.extend(self._footer)
		return '\n'.join(lines)

@lru_cache(5)
def _read(path:Path) -> str:
	with open(path, "r", encoding="utf-8") as fh:
		return fh.read()

@lru_cache(5)
def _fetch(path:Path) -> SourceText:
	return SourceText(_read(path), filename=str(path))

def _bemoan(issues):
	""" Emit all the issues to the console. """
	if issues:
		print("*"*60, file=sys.stderr)
		print(_outburst(), file=sys.stderr)
	for i in issues:
		print("  -"*20, file=sys.stderr)
		print(i.as_text(), file=sys.stderr)
	sys.stderr.flush()
