#!/usr/bin/env python3
# encoding=utf8 ---------------------------------------------------------------
# Project           : NestedCSS
# -----------------------------------------------------------------------------
# Author            : FFunction
# License           : BSD License
# -----------------------------------------------------------------------------
# Creation date     : 03-Oct-2026
# Last modification : 17-Oct-2026
# -----------------------------------------------------------------------------

import logging, re
from .model import Kind, LEAVES, Options, Record, NestingConflict, CallerValueError, classify, propertyName, propertyValue

__doc__ = """
Turns a rule tree into a canonical nested dictionary. The tree is first
flattened into a list of records, each record's selector path is then
composed into final selectors, and the records are finally rebuilt into
nested dictionaries keyed by those selectors.
"""

log = logging.getLogger("nestedcss")

# Maximum number of times a function found in the rules is called in a row
MAX_RESOLVE_DEPTH = 64
SEPARATOR         = "\x01"
RE_STICKY         = re.compile(SEPARATOR + r"&\s*")
RE_PSEUDO         = re.compile(SEPARATOR + r":\s*")

SORT_WEIGHTS = {
	"*" : "10",
	"#" : "20",
	"." : "30",
	"[" : "40",
	"@" : "90",
}

def splitSelector( key ):
	"""Splits a comma-separated key into its selectors. The empty key is kept
	as-is as it denotes properties placed directly in the parent."""
	key = str(key)
	if not key:
		return [""]
	return [_.strip() for _ in key.split(",") if _.strip()]

def sortWeight( key ):
	if not key:
		return "00"
	return SORT_WEIGHTS.get(key[0], "15")

class RuleProcessor(object):
	"""Creates the canonical CSS object for a rule tree. This is the
	flatten/compose/rebuild pipeline, parameterized by the conversion
	`Options`."""

	def __init__( self, options=None ):
		self.options = Options.Ensure(options)

	def process( self, rules ):
		flat = self.flatten(rules)
		log.debug("Flattened rules into {0} records".format(len(flat)))
		for record in flat:
			record.selector = self.composeSelector(record.selector)
		result = self.unflatten(flat)
		if self.options.sort:
			result = self.sort(result)
		return result

	# =========================================================================
	# FLATTENING
	# =========================================================================

	def resolve( self, value ):
		"""Calls functions found in the rules with the options until they
		return something that is not a function."""
		kind  = classify(value)
		depth = 0
		while kind is Kind.FUNCTION:
			if depth >= MAX_RESOLVE_DEPTH:
				raise CallerValueError("Function did not resolve after {0} calls: {1}".format(depth, repr(value)))
			value = value(self.options)
			kind  = classify(value)
			depth += 1
		return value, kind

	def flatten( self, rules ):
		"""Returns the list of `Record` for the given rules, in declaration
		order."""
		result = []
		def walk( value, path ):
			value, kind = self.resolve(value)
			if kind is Kind.EMPTY:
				return
			elif kind is Kind.LIST:
				for _ in value:
					walk(_, path)
			elif kind is Kind.MAPPING:
				for key, child in value.items():
					for selector in splitSelector(key):
						walk(child, path + [selector])
			elif kind in LEAVES:
				if not path:
					raise CallerValueError("Value given without a property name: {0}".format(repr(value)))
				result.append(Record(path[:-1], path[-1], value))
			else:
				raise CallerValueError("Unsupported value at `{0}`: {1}".format(" > ".join(path), repr(value)))
		walk(rules, [])
		return result

	# =========================================================================
	# SELECTORS
	# =========================================================================

	def composeSelector( self, path ):
		"""Merges the selector fragments of a record into its final selectors,
		eg. `["foo", "&.bar", "baz", "@media blah"]` becomes
		`["@media blah", "foo.bar baz"]`.

		- `@media` queries are moved first and joined with `and`
		- any other at-rule drops the selectors that precede it
		- a fragment ending with `&` is inserted before the previous one
		- `&` and `:` fragments are attached to the previous one
		"""
		media = []
		at    = []
		rest  = []
		for s in path:
			if s.startswith("@media"):
				media.append(s[len("@media"):].strip())
			elif s.startswith("@"):
				rest = []
				at.append(s)
			elif s.endswith("&"):
				# NOTE: A leading `x&` has no parent to go before, and is ignored
				if rest:
					last = rest.pop()
					rest.append(s[:-1].strip())
					rest.append(last)
			else:
				rest.append(s)
		result = []
		if media:
			result.append("@media " + " and ".join(media))
		result += at
		result.append(self.mergeSelectors(rest))
		return [_ for _ in result if _]

	def mergeSelectors( self, selectors ):
		sel = SEPARATOR.join(selectors)
		sel = RE_STICKY.sub("", sel)
		sel = RE_PSEUDO.sub(":", sel)
		sel = sel.replace(SEPARATOR, " ")
		return sel.strip()

	# =========================================================================
	# REBUILDING
	# =========================================================================

	def unflatten( self, records ):
		"""Rebuilds the nested dictionary from records whose selectors have
		already been composed."""
		result  = {}
		customs = self.options.customs
		for record in records:
			cur = result
			for i, sel in enumerate(record.selector):
				child = cur.get(sel)
				if child is None:
					child = cur[sel] = {}
				elif not isinstance(child, dict):
					raise NestingConflict(record.selector[:i], sel)
				cur = child
			name  = propertyName(record.prop, customs)
			value = propertyValue(record.value, name, self.options.unit)
			if value is None:
				continue
			if isinstance(cur.get(name), dict):
				raise NestingConflict(record.selector, name)
			cur[name] = value
		return result

	# =========================================================================
	# SORTING
	# =========================================================================

	def sort( self, node ):
		"""Returns a copy of the node with its keys ordered by selector weight
		(`*`, `#id`, `.class`, `[attr]`, others, `@rules`), recursively."""
		result = {}
		for key in sorted(node.keys(), key=lambda _: sortWeight(_) + _):
			value = node[key]
			result[key] = self.sort(value) if isinstance(value, dict) else value
		return result

# EOF - vim: ts=4 sw=4 noet
