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

from collections.abc import Mapping
from enum import Enum
import re

__doc__ = """
Defines the model shared by the processor and the writer: the classification
of rule tree values, the options record, the flat records produced by the
flattening pass and the conversion of property names and values.
"""

VENDORS = ("webkit", "moz", "ms", "o")

# SEE: https://github.com/rofrischmann/unitless-css-property
UNITLESS_PROPERTIES = (
	"animationIterationCount",
	"borderImageOutset",
	"borderImageSlice",
	"borderImageWidth",
	"boxFlex",
	"boxFlexGroup",
	"boxOrdinalGroup",
	"columnCount",
	"fillOpacity",
	"flex",
	"flexGrow",
	"flexNegative",
	"flexOrder",
	"flexPositive",
	"flexShrink",
	"floodOpacity",
	"fontWeight",
	"gridColumn",
	"gridRow",
	"lineClamp",
	"lineHeight",
	"opacity",
	"order",
	"orphans",
	"stopOpacity",
	"strokeDasharray",
	"strokeDashoffset",
	"strokeMiterlimit",
	"strokeOpacity",
	"strokeWidth",
	"tabSize",
	"widows",
	"zIndex",
	"zoom",
)

EMPTY_STRING = "''"
RE_UPPER     = re.compile("[A-Z]")

class NestedCSSError(Exception):
	pass

class NestingConflict(NestedCSSError):
	"""Raised when the same selector path is used both to hold a property
	value and to contain nested rules."""

	def __init__( self, path, key=None ):
		self.path = list(path)
		self.key  = key
		where     = " > ".join(self.path + ([key] if key is not None else [])) or "<root>"
		NestedCSSError.__init__(self, "Nesting conflict at `{0}`".format(where))

class CallerValueError(NestedCSSError, ValueError):
	pass

# -----------------------------------------------------------------------------
#
# CLASSIFICATION
#
# -----------------------------------------------------------------------------

class Kind(Enum):
	EMPTY       = "empty"
	BOOLEAN     = "boolean"
	NUMBER      = "number"
	STRING      = "string"
	FUNCTION    = "function"
	MAPPING     = "mapping"
	SIMPLE_LIST = "simple-list"
	LIST        = "list"
	SYMBOL      = "symbol"

SCALARS = (Kind.BOOLEAN, Kind.NUMBER, Kind.STRING)
LEAVES  = SCALARS + (Kind.SIMPLE_LIST,)

def isScalar( value ):
	return isinstance(value, (bool, int, float, str))

def classify( value ):
	"""Returns the `Kind` of the given rule tree value. Functions change shape
	once called, so the result must not be cached on the value."""
	if value is None:
		return Kind.EMPTY
	elif isinstance(value, (list, tuple)):
		if not value:
			return Kind.EMPTY
		elif all(isScalar(_) for _ in value):
			return Kind.SIMPLE_LIST
		else:
			return Kind.LIST
	elif isinstance(value, Mapping):
		return Kind.MAPPING if len(value) > 0 else Kind.EMPTY
	elif isinstance(value, bool):
		return Kind.BOOLEAN
	elif isinstance(value, (int, float)):
		return Kind.NUMBER
	elif isinstance(value, str):
		return Kind.STRING
	elif callable(value):
		return Kind.FUNCTION
	else:
		return Kind.SYMBOL

# -----------------------------------------------------------------------------
#
# OPTIONS
#
# -----------------------------------------------------------------------------

class Options(Mapping):
	"""The read-only options of a conversion. The known keys are `unit`,
	`sort`, `indent` and `customs`, any other key is preserved so that
	functions embedded in the rules can read it, either as an attribute
	(`options.COLOR`) or as an item (`options["COLOR"]`).

	Keys named like the mapping methods (`keys`, `values`, `items`, `get`)
	or that are not identifiers must be read as items: `options["values"]`."""

	DEFAULTS = {
		"unit"    : "px",
		"sort"    : False,
		"indent"  : 4,
		"customs" : None,
	}

	@classmethod
	def Ensure( cls, options=None, **kwargs ):
		"""Returns an `Options` instance from `None`, a mapping or an
		existing `Options`, updated with the given keyword arguments."""
		if isinstance(options, Options) and not kwargs:
			return options
		values = {}
		if options is not None:
			if not isinstance(options, Mapping):
				raise CallerValueError("Options must be a mapping, got: {0}".format(repr(options)))
			values.update(options)
		values.update(kwargs)
		return cls(values)

	def __init__( self, values=None ):
		v = dict(self.DEFAULTS)
		v.update(values or {})
		try:
			indent = int(v["indent"] or 0)
		except (TypeError, ValueError):
			indent = 0
		v["indent"]  = max(0, indent)
		v["unit"]    = "" if v["unit"] is None else str(v["unit"])
		v["sort"]    = bool(v["sort"])
		customs      = v["customs"]
		if isinstance(customs, str):
			customs  = (customs,)
		v["customs"] = frozenset(customs) if customs else None
		object.__setattr__(self, "_values", v)

	def __getattr__( self, name ):
		if name == "_values" or name.startswith("__"):
			raise AttributeError(name)
		try:
			return self._values[name]
		except KeyError:
			raise AttributeError(name)

	def __setattr__( self, name, value ):
		raise AttributeError("Options are read-only: cannot set `{0}`".format(name))

	def __delattr__( self, name ):
		raise AttributeError("Options are read-only: cannot delete `{0}`".format(name))

	def __getitem__( self, name ):
		return self._values[name]

	def __iter__( self ):
		return iter(self._values)

	def __len__( self ):
		return len(self._values)

	def __repr__( self ):
		return "<Options {0}>".format(self._values)

# -----------------------------------------------------------------------------
#
# RECORD
#
# -----------------------------------------------------------------------------

class Record(object):
	"""A flattened declaration: the selector fragments leading to it, the
	property name and the raw value."""

	def __init__( self, selector, prop, value ):
		self.selector = selector
		self.prop     = prop
		self.value    = value

	def __eq__( self, other ):
		return isinstance(other, Record) and (self.selector, self.prop, self.value) == (other.selector, other.prop, other.value)

	def __repr__( self ):
		return "<Record {0} {1}={2}>".format(self.selector, self.prop, repr(self.value))

# -----------------------------------------------------------------------------
#
# PROPERTIES
#
# -----------------------------------------------------------------------------

class Properties(object):

	UNITLESS = None

	@classmethod
	def IsUnitless( cls, name ):
		"""Tells if the CSS property of the given name takes bare numbers,
		including its vendor-prefixed variants."""
		if cls.UNITLESS is None:
			names = set()
			for key in UNITLESS_PROPERTIES:
				n = cssName(key)
				names.add(n)
				for v in VENDORS:
					names.add("-{0}-{1}".format(v, n))
			cls.UNITLESS = frozenset(names)
		return name in cls.UNITLESS

def cssName( key ):
	"""Converts `camelCase` and `snake_case` names to `kebab-case`."""
	return RE_UPPER.sub(lambda m: "-" + m.group(), str(key)).replace("_", "-").lower()

def isUnitless( name ):
	return Properties.IsUnitless(name)

def propertyName( key, customs=None ):
	"""Returns the CSS name for the given property key. Names starting with a
	dash are taken verbatim, the others are converted and prefixed with `--`
	when they are listed in `customs`."""
	key = str(key)
	if key.startswith("-"):
		return key
	name = cssName(key)
	if customs and name in customs:
		name = "--" + name
	return name

def formatNumber( value ):
	if isinstance(value, float) and value.is_integer():
		return str(int(value))
	return str(value)

def formatValue( value ):
	"""Returns the CSS text of an already converted value, spelling booleans
	and numbers the way `propertyValue` does."""
	if isinstance(value, bool):
		return "true" if value else "false"
	elif isinstance(value, (int, float)):
		return formatNumber(value)
	return str(value)

def propertyValue( value, name, unit="px" ):
	"""Converts a raw leaf value to its CSS text, returning `None` for empty
	values."""
	kind = classify(value)
	if kind is Kind.EMPTY:
		return None
	elif kind is Kind.SIMPLE_LIST:
		value = " ".join(propertyValue(_, name, unit) for _ in value).strip()
		return EMPTY_STRING if value == "" else value
	elif kind is Kind.STRING:
		return EMPTY_STRING if value == "" else value
	elif kind is Kind.BOOLEAN:
		return "true" if value else "false"
	elif kind is Kind.NUMBER:
		if value != 0 and not isUnitless(name):
			return formatNumber(value) + unit
		return formatNumber(value)
	else:
		raise CallerValueError("Unsupported value for property `{0}`: {1}".format(name, repr(value)))

# EOF - vim: ts=4 sw=4 noet
