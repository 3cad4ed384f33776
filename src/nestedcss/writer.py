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
import sys, types, io
from .model import formatValue

# -----------------------------------------------------------------------------
#
# CSS WRITER
#
# -----------------------------------------------------------------------------

class CSSWriter( object ):
	"""Writes a canonical CSS object as indented CSS text, one declaration or
	brace per line."""

	@classmethod
	def Format( cls, node, indent=4 ):
		s = io.StringIO()
		cls(output=s, indent=indent).write(node)
		v = s.getvalue()
		s.close()
		return v

	def __init__( self, output=sys.stdout, indent=4 ):
		self.output = output
		self.indent = max(0, int(indent or 0))
		self._first = True

	def write( self, node ):
		self._first = True
		for _ in self.on(node, 0):
			self._write(_)
		self.output.flush()
		return self

	def _write( self, value ):
		# NOTE: Text streams get `str`, anything else is assumed to be binary
		if isinstance(self.output, io.TextIOBase):
			self._writeUnicode(value)
		else:
			self._writeBinary(value)

	def _writeUnicode( self, value ):
		if isinstance(value, (types.GeneratorType, list, tuple)):
			for _ in value: self._writeUnicode(_)
		elif isinstance(value, str):
			self.output.write(value)
		elif isinstance(value, bytes):
			self.output.write(value.decode("utf-8"))
		elif value:
			raise ValueError("Does not know how to write value: `{0}`".format(repr(value)))

	def _writeBinary( self, value ):
		if isinstance(value, (types.GeneratorType, list, tuple)):
			for _ in value: self._writeBinary(_)
		elif isinstance(value, str):
			self.output.write(value.encode("utf-8"))
		elif isinstance(value, bytes):
			self.output.write(value)
		elif value:
			raise ValueError("Does not know how to write value: `{0}`".format(repr(value)))

	def on( self, node, level ):
		for key, value in node.items():
			if isinstance(value, Mapping):
				yield self.onBlock(key, value, level)
			else:
				yield self.onProperty(key, value, level)

	def onBlock( self, key, value, level ):
		yield self.line(level, key, " {")
		yield self.on(value, level + 1)
		yield self.line(level, "}")

	def onProperty( self, key, value, level ):
		yield self.line(level, key, ": ", formatValue(value), ";")

	def line( self, level, *parts ):
		# Lines are separated, not terminated, by newlines
		if self._first:
			self._first = False
		else:
			yield "\n"
		yield " " * (level * self.indent)
		for _ in parts:
			yield _

# EOF - vim: ts=4 sw=4 noet
